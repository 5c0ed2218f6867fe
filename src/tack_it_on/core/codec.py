"""Convert between the notes.json document and domain models.

The document is a JSON list of externally tagged records::

    [{"Note": {"content": ..., "on": ..., "datetime": ..., "user": ...}},
     {"ToDo": {... , "priority": 3, "complete": false}}]

Parsing is strict: unknown tags or fields are errors.
"""

import json
from datetime import datetime
from typing import Any

from tack_it_on.models.tacked import NOTE_TAG, TODO_TAG, Note, Tacked, ToDo, as_record, kind_of

_COMMON_FIELDS = {"content", "datetime"}
_OPTIONAL_FIELDS = {"on", "user"}
_TODO_FIELDS = {"priority", "complete"}


class DocumentFormatError(ValueError):
    """The document does not have the expected shape."""


def _expect(value: Any, kind: type | tuple[type, ...], field: str, index: int) -> Any:
    # bool is an int subclass, so `true` would pass as a priority
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        msg = f"item {index}: field {field!r} has wrong type {type(value).__name__}"
        raise DocumentFormatError(msg)
    return value


def _parse_datetime(value: Any, index: int) -> datetime:
    raw = _expect(value, str, "datetime", index)
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        msg = f"item {index}: bad datetime {raw!r}"
        raise DocumentFormatError(msg) from e


def _parse_record(raw: Any, index: int) -> Tacked:
    if not isinstance(raw, dict) or len(raw) != 1:
        msg = f"item {index}: expected a single-key object, got {raw!r:.60}"
        raise DocumentFormatError(msg)
    ((tag, fields),) = raw.items()
    if tag not in (NOTE_TAG, TODO_TAG):
        msg = f"item {index}: unknown item kind {tag!r}"
        raise DocumentFormatError(msg)
    if not isinstance(fields, dict):
        msg = f"item {index}: {tag} fields must be an object"
        raise DocumentFormatError(msg)

    required = _COMMON_FIELDS | (_TODO_FIELDS if tag == TODO_TAG else set())
    missing = required - fields.keys()
    if missing:
        msg = f"item {index}: missing fields {sorted(missing)!r}"
        raise DocumentFormatError(msg)
    unknown = fields.keys() - required - _OPTIONAL_FIELDS
    if unknown:
        msg = f"item {index}: unknown fields {sorted(unknown)!r}"
        raise DocumentFormatError(msg)

    content = _expect(fields["content"], str, "content", index)
    created = _parse_datetime(fields["datetime"], index)
    on = _expect(fields.get("on"), (str, type(None)), "on", index)
    user = _expect(fields.get("user"), (str, type(None)), "user", index)

    if tag == NOTE_TAG:
        return Note(content=content, created=created, on=on, user=user)
    return ToDo(
        content=content,
        created=created,
        priority=_expect(fields["priority"], int, "priority", index),
        complete=_expect(fields["complete"], bool, "complete", index),
        on=on,
        user=user,
    )


def parse_document_data(data: Any) -> list[Tacked]:
    """Parse a decoded notes.json document into tacked items.

    Args:
        data: The decoded JSON value (must be a list of tagged records).

    Returns:
        Items in document order.

    Raises:
        DocumentFormatError: The data does not describe a list of items.
    """
    if not isinstance(data, list):
        msg = f"expected a list of items, got {type(data).__name__}"
        raise DocumentFormatError(msg)
    return [_parse_record(raw, i) for i, raw in enumerate(data)]


def dump_document(items: list[Tacked]) -> str:
    """Serialize items to the notes.json text."""
    data = [{kind_of(item): as_record(item)} for item in items]
    return json.dumps(data, sort_keys=True, indent=4) + "\n"
