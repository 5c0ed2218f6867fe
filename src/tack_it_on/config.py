"""Configuration constants for tack-it-on."""

import os
import shlex

# Name of the directory marking a project root.
MARKER_NAME: str = ".tacked"

# Document holding all tacked items, inside the marker directory.
STORE_FILENAME: str = "notes.json"

# Priority given to to-do items created without an explicit one.
DEFAULT_PRIORITY: int = 3

# Width of the one-line views, not counting the trailing ellipsis.
ONELINE_WIDTH: int = 76
ELLIPSIS: str = "..."

# Number of id characters shown to the user.
SHORT_ID_LENGTH: int = 8

# Editor used when $EDITOR is not set.
DEFAULT_EDITOR: str = "vi"


def resolve_editor() -> list[str]:
    """Return the editor command line, split into arguments.

    Uses $EDITOR (which may carry flags, e.g. "code --wait"), falling back to
    DEFAULT_EDITOR when it is unset or blank.
    """
    editor = os.environ.get("EDITOR", "").strip()
    return shlex.split(editor) if editor else [DEFAULT_EDITOR]


def resolve_user() -> str | None:
    """Return the login name recorded on new items, if known."""
    return os.environ.get("USER") or None
