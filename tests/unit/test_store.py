"""Tests for loading, saving and addressing items in the store."""

import json
import os
import stat
from pathlib import Path

import pytest

from tack_it_on.core.store import load_tacked, resolve_by_prefix, save_tacked, store_path
from tack_it_on.errors import AmbiguousIdError, ItemNotFoundError, StoreCorruptError
from tack_it_on.models.tacked import Note, Tacked, ToDo, identifier
from tests.unit.fakes import CREATED


def test_load_missing_document_returns_empty_store(marker: Path) -> None:
    path, items = load_tacked(marker)

    assert path == marker / "notes.json"
    assert items == []
    assert not path.exists()


def test_save_then_load_round_trips_items(marker: Path, sample_items: list[Tacked]) -> None:
    save_tacked(marker, sample_items)

    _path, loaded = load_tacked(marker)

    assert loaded == sample_items
    assert [identifier(i) for i in loaded] == [identifier(i) for i in sample_items]


def test_save_replaces_previous_contents(marker: Path, sample_items: list[Tacked]) -> None:
    save_tacked(marker, sample_items)
    save_tacked(marker, sample_items[:1])

    _path, loaded = load_tacked(marker)

    assert loaded == sample_items[:1]


def test_save_leaves_no_temporary_files(marker: Path, sample_items: list[Tacked]) -> None:
    save_tacked(marker, sample_items)

    assert [p.name for p in marker.iterdir()] == ["notes.json"]


def test_save_writes_readable_json(marker: Path) -> None:
    save_tacked(marker, [Note(content="Buy milk", created=CREATED)])

    data = json.loads(store_path(marker).read_text())
    assert data[0]["Note"]["content"] == "Buy milk"


def test_save_new_document_follows_umask(marker: Path, sample_items: list[Tacked]) -> None:
    old_mask = os.umask(0o022)
    try:
        save_tacked(marker, sample_items)
    finally:
        os.umask(old_mask)

    assert stat.S_IMODE(store_path(marker).stat().st_mode) == 0o644


def test_save_keeps_existing_document_mode(marker: Path, sample_items: list[Tacked]) -> None:
    save_tacked(marker, sample_items)
    store_path(marker).chmod(0o640)

    save_tacked(marker, sample_items[:1])

    assert stat.S_IMODE(store_path(marker).stat().st_mode) == 0o640


@pytest.mark.parametrize("contents", ["", "not json", "{}", '[{"Memo": {}}]'])
def test_load_rejects_corrupt_document(marker: Path, contents: str) -> None:
    store_path(marker).write_text(contents)

    with pytest.raises(StoreCorruptError, match="notes.json"):
        load_tacked(marker)


def test_load_rejects_non_utf8_document(marker: Path) -> None:
    store_path(marker).write_bytes(b"\xff\xfe[]")

    with pytest.raises(StoreCorruptError, match="UTF-8"):
        load_tacked(marker)


# --- Prefix resolution ---


@pytest.fixture
def fixed_ids(monkeypatch: pytest.MonkeyPatch) -> list[Tacked]:
    """Two items whose ids share the prefix "abcdef", plus an unrelated one."""
    items: list[Tacked] = [
        Note(content="first", created=CREATED),
        Note(content="second", created=CREATED),
        ToDo(content="third", created=CREATED, priority=1),
    ]
    ids = {
        "first": "abcdef12" + "0" * 56,
        "second": "abcdef99" + "0" * 56,
        "third": "12345678" + "0" * 56,
    }
    monkeypatch.setattr("tack_it_on.core.store.identifier", lambda item: ids[item.content])
    return items


def test_resolve_ambiguous_prefix_lists_short_ids(fixed_ids: list[Tacked]) -> None:
    with pytest.raises(AmbiguousIdError) as excinfo:
        resolve_by_prefix(fixed_ids, "abcdef")

    assert excinfo.value.candidates == ["abcdef12", "abcdef99"]
    assert "abcdef12" in str(excinfo.value)


def test_resolve_full_id_returns_index(fixed_ids: list[Tacked]) -> None:
    assert resolve_by_prefix(fixed_ids, "abcdef12" + "0" * 56) == 0
    assert resolve_by_prefix(fixed_ids, "abcdef9") == 1
    assert resolve_by_prefix(fixed_ids, "1") == 2


def test_resolve_ignores_case_and_surrounding_space(fixed_ids: list[Tacked]) -> None:
    assert resolve_by_prefix(fixed_ids, "  ABCDEF12 ") == 0


def test_resolve_unknown_prefix_raises_not_found(fixed_ids: list[Tacked]) -> None:
    with pytest.raises(ItemNotFoundError, match="ffff"):
        resolve_by_prefix(fixed_ids, "ffff")


def test_resolve_empty_prefix_raises_not_found(fixed_ids: list[Tacked]) -> None:
    with pytest.raises(ItemNotFoundError, match="No item id given"):
        resolve_by_prefix(fixed_ids, "  ")


def test_resolve_with_real_ids(sample_items: list[Tacked]) -> None:
    target = sample_items[1]

    assert resolve_by_prefix(sample_items, identifier(target)) == 1
