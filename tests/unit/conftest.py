"""Shared test fixtures."""

from pathlib import Path

import pytest

from tack_it_on.models.tacked import Note, ToDo
from tests.unit.fakes import CREATED


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return the root of a project with an empty `.tacked` directory."""
    root = tmp_path / "project"
    (root / ".tacked").mkdir(parents=True)
    return root.resolve()


@pytest.fixture
def marker(project: Path) -> Path:
    return project / ".tacked"


@pytest.fixture
def sample_items() -> list[Note | ToDo]:
    """A note, a to-do on a file and a completed to-do, in that order."""
    return [
        Note(content="Buy milk", created=CREATED, user="alice"),
        ToDo(
            content="Fix retry loop\nIt spins forever on 503",
            created=CREATED,
            priority=5,
            on="src/client.py",
        ),
        ToDo(content="Write changelog", created=CREATED, priority=1, complete=True),
    ]
