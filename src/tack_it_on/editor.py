"""Collect note content from the user's external editor."""

import shlex
import subprocess
import tempfile
from pathlib import Path

from loguru import logger

from tack_it_on.config import resolve_editor


class ExternalEditor:
    """Open $EDITOR on a scratch file and return what the user saved.

    Trailing whitespace (including the newline most editors add) is
    stripped from the result; everything else is kept verbatim.
    """

    def __init__(self, command: list[str] | None = None) -> None:
        self.command = command if command is not None else resolve_editor()

    def edit(self) -> str:
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".md", prefix="tack-", delete=False, encoding="utf-8"
        ) as f:
            scratch = Path(f.name)
        try:
            cmd = [*self.command, str(scratch)]
            logger.debug("Running: {}", " ".join(map(shlex.quote, cmd)))
            subprocess.run(cmd, check=True)
            return scratch.read_text(encoding="utf-8").rstrip()
        finally:
            scratch.unlink(missing_ok=True)
