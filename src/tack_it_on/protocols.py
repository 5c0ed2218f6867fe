"""Protocols for dependency injection in tack-it-on."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EditorProtocol(Protocol):
    """Protocol for sources of note content typed by the user."""

    def edit(self) -> str:
        """Let the user write some text and return it."""
        ...
