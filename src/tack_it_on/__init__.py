"""Project centric notes and to-do items."""

from tack_it_on.core.locator import locate_project_root
from tack_it_on.core.relativizer import relativize
from tack_it_on.core.store import load_tacked, resolve_by_prefix, save_tacked
from tack_it_on.models.tacked import Note, Tacked, ToDo, identifier
from tack_it_on.operations import create_item, init_project, list_items, remove_item

__all__ = [
    "Note",
    "Tacked",
    "ToDo",
    "create_item",
    "identifier",
    "init_project",
    "list_items",
    "load_tacked",
    "locate_project_root",
    "relativize",
    "remove_item",
    "resolve_by_prefix",
    "save_tacked",
]
