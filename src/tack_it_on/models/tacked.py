"""Domain models for tacked items.

A tacked item is either a Note or a ToDo. The two are unrelated frozen
dataclasses joined by the ``Tacked`` alias; shared behaviour lives in the
module-level functions below, which dispatch on the concrete type.
"""

import hashlib
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeAlias

from tack_it_on.config import SHORT_ID_LENGTH


@dataclass(frozen=True)
class Note:
    """Free-text note, optionally tacked onto a file in the project."""

    content: str
    created: datetime
    on: str | None = None
    user: str | None = None


@dataclass(frozen=True)
class ToDo:
    """A to-do item. Higher priority sorts first."""

    content: str
    created: datetime
    priority: int
    complete: bool = False
    on: str | None = None
    user: str | None = None


Tacked: TypeAlias = Note | ToDo

# Tag written in front of each record in the store document.
NOTE_TAG = "Note"
TODO_TAG = "ToDo"


def kind_of(item: Tacked) -> str:
    """Return the record tag for an item."""
    if isinstance(item, Note):
        return NOTE_TAG
    if isinstance(item, ToDo):
        return TODO_TAG
    msg = f"Not a tacked item: {item!r}"
    raise TypeError(msg)


def as_record(item: Tacked) -> dict[str, Any]:
    """Return the persisted fields of an item as a JSON-ready dict."""
    record: dict[str, Any] = {
        "content": item.content,
        "on": item.on,
        "datetime": item.created.isoformat(),
        "user": item.user,
    }
    if isinstance(item, ToDo):
        record["priority"] = item.priority
        record["complete"] = item.complete
    return record


def identifier(item: Tacked) -> str:
    """Content-derived id: sha256 of the tagged record, as 64 hex digits.

    Depends only on persisted fields, so it survives save/load and never
    depends on the item's position in the store. Items with identical fields
    share an id.
    """
    canonical = json.dumps(
        {kind_of(item): as_record(item)},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def short_id(item: Tacked) -> str:
    return identifier(item)[:SHORT_ID_LENGTH]
