"""Errors raised by tack-it-on operations.

All of them derive from TackError, so the CLI can report any of them the
same way. Plain I/O failures are not wrapped and surface as OSError.
"""

from pathlib import Path


class TackError(Exception):
    """Base class for expected, user-facing failures."""


class NoProjectFoundError(TackError):
    def __init__(self, start_dir: Path) -> None:
        self.start_dir = start_dir
        super().__init__(
            f"No `.tacked` directory found in {str(start_dir)!r} or any parent. "
            "Run `tack init` first."
        )


class AlreadyInitializedError(TackError):
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f"{str(directory)!r} already has notes tacked on.")


class NestedProjectError(TackError):
    """A parent directory is already a project and nesting was not confirmed."""

    def __init__(self, directory: Path, parent_marker: Path) -> None:
        self.directory = directory
        self.parent_marker = parent_marker
        super().__init__(
            f"Found tacked notes in parent directory {str(parent_marker.parent)!r}."
        )


class PathOutsideProjectError(TackError):
    def __init__(self, path: Path, project_dir: Path) -> None:
        self.path = path
        self.project_dir = project_dir
        super().__init__(f"{path} is outside of the tack-it-on project at {project_dir}.")


class EmptyContentError(TackError):
    def __init__(self) -> None:
        super().__init__("Note has no content. Aborting.")


class ItemNotFoundError(TackError):
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        if prefix:
            super().__init__(f"No items matching id {prefix!r}.")
        else:
            super().__init__("No item id given.")


class AmbiguousIdError(TackError):
    def __init__(self, prefix: str, candidates: list[str]) -> None:
        self.prefix = prefix
        self.candidates = candidates
        super().__init__(
            f"Id {prefix!r} is not unique, use a longer prefix. "
            f"Candidates: {', '.join(candidates)}"
        )


class StoreCorruptError(TackError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot read {path}: {detail}")
