"""CLI for tack-it-on (init, note, todo, show, rm)."""

import subprocess
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from tack_it_on.config import resolve_user
from tack_it_on.editor import ExternalEditor
from tack_it_on.errors import NestedProjectError, TackError
from tack_it_on.logging_config import configure_logging
from tack_it_on.models.tacked import ToDo, short_id
from tack_it_on.operations import View, create_item, init_project, list_items, remove_item

app = typer.Typer(help="A project centric note-taking application.")

OnOption = Annotated[
    str | None,
    typer.Option("--on", "-o", help="File or directory to tack the item onto."),
]
PriorityOption = Annotated[
    int | None,
    typer.Option("--priority", "-p", help="To-do priority (default 3). Implies --todo."),
]


@contextmanager
def _report_errors() -> Iterator[None]:
    """Log expected failures and exit non-zero instead of printing a traceback."""
    try:
        yield
    except (TackError, OSError, subprocess.CalledProcessError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


@app.command()
def init(
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Start a nested project without asking."
    ),
) -> None:
    """Initialise a tacked notes directory here."""
    cwd = Path.cwd()
    typer.echo(f"Tacking notes onto {cwd}...")
    with _report_errors():
        try:
            marker = init_project(cwd, allow_nested=yes)
        except NestedProjectError as e:
            if not typer.confirm(f"{e} Start a new project in {str(cwd)!r} anyway?"):
                typer.echo("Did not initialise tacked notes.")
                return
            marker = init_project(cwd, allow_nested=True)
    typer.echo(f"Created `{marker.name}` in {marker.parent}.")


@app.command()
def note(
    message: Annotated[
        str | None,
        typer.Option("--message", "-m", help="Note content. Opens $EDITOR when omitted."),
    ] = None,
    on: OnOption = None,
    todo: bool = typer.Option(False, "--todo", "-t", help="Make this a to-do item."),
    priority: PriorityOption = None,
) -> None:
    """Create a new note."""
    with _report_errors():
        item = create_item(
            Path.cwd(),
            message,
            on=on,
            todo=todo,
            priority=priority,
            user=resolve_user(),
            editor=ExternalEditor(),
        )
    kind = "to do item" if isinstance(item, ToDo) else "note"
    typer.echo(f"Tacked {kind} ({short_id(item)}).")


@app.command(name="todo")
def todo_cmd(
    item_text: str = typer.Argument(..., metavar="ITEM", help="To-do item text"),
    on: OnOption = None,
    priority: PriorityOption = None,
) -> None:
    """Create a new to-do item."""
    with _report_errors():
        item = create_item(
            Path.cwd(),
            item_text,
            on=on,
            todo=True,
            priority=priority,
            user=resolve_user(),
        )
    typer.echo(f"Tacked to do item ({short_id(item)}).")


@app.command()
def show(
    on: Annotated[
        str | None,
        typer.Option("--on", "-o", help="Only show items tacked onto this path."),
    ] = None,
    oneline: bool = typer.Option(False, "--oneline", "-l", help="One line per item."),
    todo: bool = typer.Option(
        False, "--todo", "-t", help="Only to-do items, highest priority first."
    ),
) -> None:
    """Show tacked notes."""
    view = View.TODO if todo else View.ONELINE if oneline else View.FULL
    with _report_errors():
        rendered = list_items(Path.cwd(), on=on, view=view)

    if not rendered:
        typer.echo("Nothing tacked on.")
        return
    separator = "\n\n" if view is View.FULL else "\n"
    typer.echo(separator.join(rendered))


@app.command()
def rm(
    item_id: str = typer.Argument(..., metavar="ID", help="Id (or unique id prefix) to remove"),
) -> None:
    """Remove a note or to-do item."""
    with _report_errors():
        removed = remove_item(Path.cwd(), item_id)
    typer.echo(f"Removed ({short_id(removed)}).")
