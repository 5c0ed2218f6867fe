"""Project operations: init, create, list and remove tacked items.

Each operation discovers the project once, loads the whole store, changes
it in memory and saves it back. Nothing here prints or prompts.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path, PurePosixPath

from loguru import logger

from tack_it_on.config import DEFAULT_PRIORITY
from tack_it_on.core.locator import create_marker, locate_project_root
from tack_it_on.core.relativizer import relativize
from tack_it_on.core.render import render_full, render_oneline, render_todo
from tack_it_on.core.store import load_tacked, resolve_by_prefix, save_tacked
from tack_it_on.errors import (
    AlreadyInitializedError,
    EmptyContentError,
    NestedProjectError,
    NoProjectFoundError,
)
from tack_it_on.models.tacked import Note, Tacked, ToDo, short_id
from tack_it_on.protocols import EditorProtocol


class View(str, Enum):
    """How `list_items` renders items."""

    FULL = "full"
    ONELINE = "oneline"
    TODO = "todo"


@dataclass(frozen=True)
class Project:
    """A discovered project: its `.tacked` directory and the root holding it."""

    marker: Path

    @property
    def root(self) -> Path:
        return self.marker.parent


def discover_project(cwd: Path) -> Project:
    """Find the project containing cwd, raising NoProjectFoundError if none."""
    marker = locate_project_root(cwd)
    if marker is None:
        raise NoProjectFoundError(cwd)
    return Project(marker=marker)


def init_project(directory: Path, *, allow_nested: bool = False) -> Path:
    """Make directory a project root.

    Args:
        directory: Directory to create the marker in.
        allow_nested: Create the marker even if a parent directory is
            already a project.

    Returns:
        Path of the new marker directory.

    Raises:
        AlreadyInitializedError: directory already has a marker.
        NestedProjectError: A parent is a project and allow_nested is False.
    """
    canonical = directory.resolve()
    existing = locate_project_root(canonical)
    if existing is not None:
        if existing.parent == canonical:
            raise AlreadyInitializedError(canonical)
        if not allow_nested:
            raise NestedProjectError(canonical, existing)
        logger.debug("Nesting new project inside {}", existing.parent)
    return create_marker(canonical)


def create_item(
    cwd: Path,
    content: str | None,
    *,
    on: str | None = None,
    todo: bool = False,
    priority: int | None = None,
    user: str | None = None,
    editor: EditorProtocol | None = None,
    now: datetime | None = None,
) -> Tacked:
    """Create a note or to-do item and append it to the project store.

    Args:
        cwd: Directory the command runs in; used to find the project and to
            resolve a relative `on`.
        content: Item text. None asks the editor for it.
        on: File or directory to tack the item onto.
        todo: Create a to-do item instead of a note.
        priority: To-do priority; giving one implies `todo`.
        user: Login name recorded on the item.
        editor: Content source used when content is None.
        now: Creation time, defaults to the local time now.

    Raises:
        EmptyContentError: Content is empty or only whitespace. The store is
            not touched.
    """
    project = discover_project(cwd)

    if content is None:
        if editor is None:
            msg = "No content given and no editor to ask for it"
            raise ValueError(msg)
        content = editor.edit()
    if not content.strip():
        raise EmptyContentError()

    short_on = relativize(on, project.root, cwd=cwd)
    created = (now or datetime.now().astimezone()).replace(microsecond=0)

    item: Tacked
    if todo or priority is not None:
        item = ToDo(
            content=content,
            created=created,
            priority=DEFAULT_PRIORITY if priority is None else priority,
            on=short_on,
            user=user,
        )
    else:
        item = Note(content=content, created=created, on=short_on, user=user)

    _, items = load_tacked(project.marker)
    items.append(item)
    save_tacked(project.marker, items)
    logger.debug("Tacked {} onto {}", short_id(item), short_on or project.root)
    return item


def normalize_on_filter(target: str) -> str:
    """Normalize a project-relative filter path the way stored paths look.

    Every trailing slash goes ("src//" matches "src"), as do "./" segments
    and doubled separators.
    """
    return PurePosixPath(target).as_posix()


def resolve_on_filter(target: str, project: Project, cwd: Path) -> str:
    """Turn a `show --on` target into the form stored on items.

    A target that exists relative to cwd is made project relative exactly
    like `note --on` does, so both commands accept the same paths. Anything
    else is taken as already project relative.
    """
    if (cwd / target).exists():
        relative = relativize(target, project.root, cwd=cwd)
        if relative is not None:
            return relative
    return normalize_on_filter(target)


def filter_items(items: list[Tacked], on: str | None) -> list[Tacked]:
    """Keep items tacked onto exactly `on` (all items when on is None)."""
    if on is None:
        return list(items)
    target = normalize_on_filter(on)
    return [item for item in items if item.on == target]


def todo_items(items: list[Tacked]) -> list[ToDo]:
    """Return the to-do items, highest priority first, stable within a priority."""
    todos = [item for item in items if isinstance(item, ToDo)]
    return sorted(todos, key=lambda t: t.priority, reverse=True)


def list_items(cwd: Path, *, on: str | None = None, view: View = View.FULL) -> list[str]:
    """Load the project store and render the selected items.

    Args:
        cwd: Directory the command runs in.
        on: Only show items tacked onto this path. An existing path is
            taken relative to cwd; otherwise it is project relative.
        view: Rendering: full, one line per item, or to-do list.

    Returns:
        One rendered string per item.

    Raises:
        PathOutsideProjectError: `on` exists but lies outside the project.
    """
    project = discover_project(cwd)
    _, items = load_tacked(project.marker)
    if on is not None:
        on = resolve_on_filter(on, project, cwd)
    selected = filter_items(items, on)

    if view is View.TODO:
        return [render_todo(item) for item in todo_items(selected)]
    if view is View.ONELINE:
        return [render_oneline(item) for item in selected]
    return [render_full(item) for item in selected]


def remove_item(cwd: Path, prefix: str) -> Tacked:
    """Remove the item whose id starts with prefix and return it.

    Raises:
        ItemNotFoundError: No item matches.
        AmbiguousIdError: Several items match; nothing is removed.
    """
    project = discover_project(cwd)
    _, items = load_tacked(project.marker)
    index = resolve_by_prefix(items, prefix)
    removed = items.pop(index)
    save_tacked(project.marker, items)
    logger.debug("Removed {}", short_id(removed))
    return removed
