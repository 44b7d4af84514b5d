"""Parsing and loading of line-oriented shape records.

A record looks like ``add Rectangle 3 6 5 8``: a command token, the shape
kind, the anchor column and row, then the size parameters. Rectangles take
two size parameters (height, then width); every other kind takes one. The
command token carries no meaning and may be left out.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from blackboard_py.core.models import PARAM_COUNTS, ShapeRequest
from blackboard_py.core.types import ShapeKind
from blackboard_py.exceptions import InvalidShapeRecordError, ShapeFileError, UnknownShapeKindError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from blackboard_py.core.board import Board
    from blackboard_py.core.models import Shape

logger = structlog.get_logger(__name__)

_KINDS = {kind.value: kind for kind in ShapeKind}


def _strip_command(tokens: list[str]) -> list[str]:
    # Keep the first token when it is a kind and the second is not
    if len(tokens) > 1 and tokens[0] in _KINDS and tokens[1] not in _KINDS:
        return tokens
    return tokens[1:]


def parse_record(line: str) -> ShapeRequest:
    """Parse one shape record.

    Args:
        line: A single line of text. Surrounding whitespace is ignored, as
            are tokens after the last size parameter.

    Returns:
        The construction request described by the line.

    Raises:
        InvalidShapeRecordError: If the line is blank, names an unknown
            kind, has too few tokens, or has a non-integer coordinate or
            size.
    """
    text = line.rstrip("\r\n")
    tokens = text.split()
    if not tokens:
        raise InvalidShapeRecordError(text, "empty line")

    tokens = _strip_command(tokens)
    if not tokens:
        raise InvalidShapeRecordError(text, "missing shape kind")

    kind = _KINDS.get(tokens[0])
    if kind is None:
        raise UnknownShapeKindError(text, tokens[0])

    needed = 2 + PARAM_COUNTS[kind]
    fields = tokens[1 : 1 + needed]
    if len(fields) < needed:
        raise InvalidShapeRecordError(text, f"{kind} needs {needed} integers, got {len(fields)}")

    try:
        x, y, *params = (int(value) for value in fields)
    except ValueError:
        raise InvalidShapeRecordError(text, "coordinates and sizes must be integers") from None

    return ShapeRequest(kind=kind, x=x, y=y, params=tuple(params))


def iter_requests(lines: Iterable[str]) -> Iterator[ShapeRequest]:
    """Parse a stream of records, skipping any line that does not parse.

    A bad line never stops the lines after it from being read.

    Args:
        lines: Lines of text, with or without trailing newlines.

    Yields:
        One request per valid line, in order.
    """
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            yield parse_record(line)
        except InvalidShapeRecordError as exc:
            logger.debug("Skipping shape record", lineno=lineno, line=exc.line, reason=exc.reason)


def load_lines(board: Board, lines: Iterable[str]) -> list[Shape]:
    """Add a shape to ``board`` for every valid record in ``lines``.

    Args:
        board: The board to add shapes to.
        lines: Lines of text in record format.

    Returns:
        The shapes that were added, in order.
    """
    return [board.create(request) for request in iter_requests(lines)]


def load_file(board: Board, path: str | Path) -> list[Shape]:
    """Add a shape to ``board`` for every valid record in a file.

    The whole file is read before any shape is added, so a read failure
    leaves the board unchanged.

    Args:
        board: The board to add shapes to.
        path: Path to a text file of shape records.

    Returns:
        The shapes that were added, in order.

    Raises:
        ShapeFileError: If the file does not exist or cannot be read.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ShapeFileError(file_path, "not found")

    try:
        with file_path.open(encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ShapeFileError(file_path, f"could not be read: {exc}") from exc

    shapes = load_lines(board, lines)
    logger.info("Loaded shape file", path=str(file_path), lines=len(lines), shapes=len(shapes))
    return shapes
