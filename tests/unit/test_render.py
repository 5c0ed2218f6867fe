"""Tests for rendering tacked items."""

from tack_it_on.core.render import render_full, render_oneline, render_todo
from tack_it_on.models.tacked import Note, ToDo, short_id
from tests.unit.fakes import CREATED


def test_render_full_note_with_user_and_on() -> None:
    note = Note(content="Check this\nand that\n", created=CREATED, on="src/a.py", user="alice")

    assert render_full(note) == (
        f"({short_id(note)}) alice 2026-10-19 09:30:00\nOn: src/a.py\nCheck this\nand that"
    )


def test_render_full_todo_shows_priority_and_completion() -> None:
    todo = ToDo(content="Ship it", created=CREATED, priority=2, complete=True)

    header = render_full(todo).splitlines()[0]

    assert header == f"({short_id(todo)}) TO DO p2 [done] 2026-10-19 09:30:00"


def test_render_oneline_short_content_has_no_ellipsis() -> None:
    note = Note(content="Buy milk", created=CREATED)

    assert render_oneline(note) == f"({short_id(note)}) Buy milk"


def test_render_oneline_keeps_only_first_line() -> None:
    note = Note(content="Title\nbody text", created=CREATED)

    assert render_oneline(note) == f"({short_id(note)}) Title..."


def test_render_oneline_truncates_long_lines() -> None:
    note = Note(content="x" * 200, created=CREATED)

    line = render_oneline(note)

    assert len(line) == 76 + 3
    assert line.endswith("x...")


def test_render_todo_marks_status_and_priority() -> None:
    open_item = ToDo(content="Open", created=CREATED, priority=4)
    done_item = ToDo(content="Done", created=CREATED, priority=1, complete=True)

    assert render_todo(open_item) == f"[ ] p4 ({short_id(open_item)}) Open"
    assert render_todo(done_item) == f"[V] p1 ({short_id(done_item)}) Done"
