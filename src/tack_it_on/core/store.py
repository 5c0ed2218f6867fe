"""Read and write the notes.json document in a `.tacked` directory."""

import json
import os
import shutil
import tempfile
from pathlib import Path

from loguru import logger

from tack_it_on.config import SHORT_ID_LENGTH, STORE_FILENAME
from tack_it_on.core.codec import DocumentFormatError, dump_document, parse_document_data
from tack_it_on.errors import AmbiguousIdError, ItemNotFoundError, StoreCorruptError
from tack_it_on.models.tacked import Tacked, identifier


def store_path(marker_dir: Path) -> Path:
    return marker_dir / STORE_FILENAME


def load_tacked(marker_dir: Path) -> tuple[Path, list[Tacked]]:
    """Load all items from `notes.json` in the marker directory.

    Returns:
        The document path and the items in insertion order. A missing
        document is an empty store.

    Raises:
        StoreCorruptError: The document exists but cannot be parsed.
    """
    path = store_path(marker_dir)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No store at {}, starting empty", path)
        return path, []

    try:
        items = parse_document_data(json.loads(text))
    except (json.JSONDecodeError, DocumentFormatError) as e:
        raise StoreCorruptError(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise StoreCorruptError(path, "not valid UTF-8") from e

    logger.debug("Loaded {} item(s) from {}", len(items), path)
    return path, items


def _current_umask() -> int:
    # os.umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _copy_document_mode(path: Path, tmp_name: str) -> None:
    """Give the temp file the permissions notes.json has (or would get).

    mkstemp creates files as 0600; without this the first save would make
    the store owner-only.
    """
    try:
        shutil.copymode(path, tmp_name)
    except FileNotFoundError:
        os.chmod(tmp_name, 0o666 & ~_current_umask())


def save_tacked(marker_dir: Path, items: list[Tacked]) -> Path:
    """Replace `notes.json` with the given items.

    The document is written to a temporary file next to it and renamed into
    place, so readers see either the old or the new contents. An existing
    document keeps its permissions; a new one gets the usual umask-derived
    mode.
    """
    path = store_path(marker_dir)
    contents = dump_document(items)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{STORE_FILENAME}.", suffix=".tmp", dir=marker_dir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(contents)
        _copy_document_mode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug("Saved {} item(s) to {}", len(items), path)
    return path


def resolve_by_prefix(items: list[Tacked], prefix: str) -> int:
    """Find the single item whose id starts with prefix.

    Returns:
        Index of the matching item.

    Raises:
        ItemNotFoundError: No item matches, or the prefix is empty.
        AmbiguousIdError: More than one item matches. The error carries the
            short ids of every candidate.
    """
    prefix = prefix.strip().lower()
    if not prefix:
        raise ItemNotFoundError(prefix)

    matches = [i for i, item in enumerate(items) if identifier(item).startswith(prefix)]
    if not matches:
        raise ItemNotFoundError(prefix)
    if len(matches) > 1:
        candidates = [identifier(items[i])[:SHORT_ID_LENGTH] for i in matches]
        raise AmbiguousIdError(prefix, candidates)
    return matches[0]
