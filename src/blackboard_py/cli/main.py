"""Command line interface for blackboard-py.

Provides one-shot ``draw`` and ``list`` commands over shape record files and
an interactive ``shell`` with the classic numbered menu.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blackboard_py.config import BoardConfig
from blackboard_py.core.board import NO_SHAPES, Board
from blackboard_py.core.logging import bind_session, clear_session, configure_logging
from blackboard_py.exceptions import InvalidShapeRecordError, ShapeFileError, UnknownShapeKindError
from blackboard_py.services.loader import load_file, parse_record

if TYPE_CHECKING:
    from collections.abc import Iterable

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
logger = structlog.get_logger(__name__)

MENU = (
    "1. Draw blackboard",
    "2. List added shapes",
    "3. Load shapes from file",
    "4. Add shape",
    "5. Undo last shape",
    "6. Exit",
    "7. Redo last undone shape",
)


def _new_board(config: BoardConfig) -> Board:
    return Board(config.width, config.height)


def _load_into(board: Board, paths: Iterable[str]) -> bool:
    """Load every file into ``board``, reporting failures.

    Returns:
        True if every file was read.
    """
    ok = True
    for path in paths:
        try:
            load_file(board, path)
        except ShapeFileError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
            ok = False
    return ok


def _print_board(board: Board) -> None:
    # Plain echo keeps rich from wrapping or cropping the fixed-width rows
    click.echo(board.render())


def _print_shapes(board: Board) -> None:
    if not len(board):
        console.print(NO_SHAPES)
        return

    table = Table(title=f"Shapes ({len(board)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Position", style="green")
    table.add_column("Size", style="yellow")

    for index, shape in enumerate(board, 1):
        table.add_row(
            str(index),
            str(shape.id),
            shape.label,
            f"({shape.x}, {shape.y})",
            " ".join(str(p) for p in shape.params),
        )

    console.print(table)


@click.group(name="blackboard", help="Draw triangles, circles, rectangles and lines on a text board.")
@click.option("--width", type=int, default=None, help="Board width in characters")
@click.option("--height", type=int, default=None, help="Board height in characters")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
@click.pass_context
def cli(
    ctx: click.Context,
    width: int | None,
    height: int | None,
    debug: bool,
    json_logs: bool,
) -> None:
    """Draw triangles, circles, rectangles and lines on a text board."""
    # Flags and options only override the environment when given
    overrides = {
        "width": width,
        "height": height,
        "debug": debug or None,
        "json_logs": json_logs or None,
    }
    try:
        config = BoardConfig(**{key: value for key, value in overrides.items() if value is not None})
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    configure_logging(debug=config.debug, json_logs=config.json_logs)
    ctx.obj = config


@cli.command(name="draw", help="Load shape record files and print the board.")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.pass_obj
def draw(config: BoardConfig, files: tuple[str, ...]) -> None:
    """Load shape record files and print the board."""
    board = _new_board(config)
    ok = _load_into(board, files)
    _print_board(board)
    if not ok:
        raise SystemExit(1)


@cli.command(name="list", help="Load shape record files and list the shapes.")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.pass_obj
def list_shapes(config: BoardConfig, files: tuple[str, ...]) -> None:
    """Load shape record files and list the shapes."""
    board = _new_board(config)
    ok = _load_into(board, files)
    _print_shapes(board)
    if not ok:
        raise SystemExit(1)


@cli.command(name="shell", help="Start the interactive drawing menu.")
@click.option("--file", "-f", "shapes_file", default=None, help="Record file used by 'Load shapes from file'")
@click.pass_obj
def shell(config: BoardConfig, shapes_file: str | None) -> None:
    """Start the interactive drawing menu."""
    board = _new_board(config)
    shapes_file = shapes_file or config.shapes_file
    bind_session(board=f"{config.width}x{config.height}")

    while True:
        for entry in MENU:
            console.print(entry)
        choice = click.prompt("Choice", default="", show_default=False).strip()

        if choice == "1":
            _print_board(board)
        elif choice == "2":
            for label in board.list():
                console.print(label)
        elif choice == "3":
            _load_into(board, [shapes_file])
        elif choice == "4":
            _add_from_prompt(board)
        elif choice == "5":
            if board.can_undo():
                board.undo()
            else:
                console.print("Nothing to undo")
        elif choice == "6":
            console.print("Exited")
            clear_session()
            return
        elif choice == "7":
            if board.can_redo():
                board.redo()
            else:
                console.print("Nothing to redo")
        else:
            console.print("Invalid input")


def _add_from_prompt(board: Board) -> None:
    line = click.prompt("Shape", default="", show_default=False)
    try:
        request = parse_record(line)
    except UnknownShapeKindError:
        console.print("Invalid shape type.")
    except InvalidShapeRecordError as exc:
        console.print(f"Invalid shape record: {exc.reason}", markup=False)
    else:
        shape = board.create(request)
        logger.info("Shape created", shape_id=shape.id, kind=shape.label)
