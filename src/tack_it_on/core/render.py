"""Render tacked items as text."""

import io

from tack_it_on.config import ELLIPSIS, ONELINE_WIDTH
from tack_it_on.models.tacked import Tacked, ToDo, short_id


def _first_line(content: str, prefix: str) -> str:
    """Return prefix + first content line, cut to ONELINE_WIDTH.

    The ellipsis is appended whenever something was left out, either the
    tail of the line or further lines.
    """
    lines = content.strip("\n").split("\n")
    text = prefix + lines[0]
    if len(text) > ONELINE_WIDTH:
        return text[:ONELINE_WIDTH] + ELLIPSIS
    if len(lines) > 1:
        return text + ELLIPSIS
    return text


def render_full(item: Tacked) -> str:
    """Render an item with header, on-path and the whole content.

    Example::

        (3fa1c2d9) TO DO p3 alice 2026-10-19 09:30:00
        On: src/app.py
        Check the retry logic
    """
    header = [f"({short_id(item)})"]
    if isinstance(item, ToDo):
        header.append(f"TO DO p{item.priority}")
        if item.complete:
            header.append("[done]")
    if item.user:
        header.append(item.user)
    header.append(f"{item.created:%Y-%m-%d %H:%M:%S}")

    out = io.StringIO()
    out.write(" ".join(header) + "\n")
    if item.on is not None:
        out.write(f"On: {item.on}\n")
    out.write(item.content.rstrip("\n"))
    return out.getvalue()


def render_oneline(item: Tacked) -> str:
    return _first_line(item.content, f"({short_id(item)}) ")


def render_todo(item: ToDo) -> str:
    status = "V" if item.complete else " "
    return _first_line(item.content, f"[{status}] p{item.priority} ({short_id(item)}) ")
