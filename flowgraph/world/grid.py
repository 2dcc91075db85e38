"""Ant world grid model and text parser.

A world file looks like::

    3, 5, 2
    F.W.M
    .XXX.
    F.W.M

The header holds the row count, the column count and the maximum walking
distance from a workplace. Each following line is one row of cell symbols.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Tuple, Union

from flowgraph.config import DEFAULT_CONFIG, WorldConfig
from flowgraph.lib.errors import FlowGraphError
from flowgraph.logging import get_logger

logger = get_logger(__name__)


class WorldFormatError(FlowGraphError, ValueError):
    """Raised for malformed world text."""


class CellKind(Enum):
    GRASS = "grass"
    ROCKS = "rocks"
    FRUIT = "fruit"
    MEAT = "meat"
    WORKPLACE = "workplace"


class Point(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class World:
    """Parsed ant world.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        max_distance: Walking distance limit from a workplace.
        cells: Cell kinds, indexed ``cells[row][col]``.
    """

    rows: int
    cols: int
    max_distance: int
    cells: Tuple[Tuple[CellKind, ...], ...]

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.row < self.rows and 0 <= point.col < self.cols

    def kind_at(self, point: Point) -> CellKind:
        return self.cells[point.row][point.col]

    def neighbors(self, point: Point) -> Iterator[Point]:
        """Yield in-bounds orthogonal neighbours: up, left, right, down."""
        row, col = point
        for candidate in (
            Point(row - 1, col),
            Point(row, col - 1),
            Point(row, col + 1),
            Point(row + 1, col),
        ):
            if self.in_bounds(candidate):
                yield candidate

    def points_of(self, kind: CellKind) -> List[Point]:
        """Return every cell of ``kind`` in row-major order."""
        return [
            Point(r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell is kind
        ]


def _parse_header(line: str) -> Tuple[int, int, int]:
    parts = [p.strip() for p in line.split(",")]
    if len(parts) != 3:
        raise WorldFormatError(
            f"Header must be 'rows, cols, max_distance', got {line.strip()!r}."
        )
    try:
        rows, cols, max_distance = (int(p) for p in parts)
    except ValueError:
        raise WorldFormatError(
            f"Header values must be integers, got {line.strip()!r}."
        ) from None
    if rows < 0 or cols < 0 or max_distance < 0:
        raise WorldFormatError(
            f"Header values must be non-negative, got {line.strip()!r}."
        )
    return rows, cols, max_distance


def parse_world(lines: Iterable[str], config: WorldConfig = DEFAULT_CONFIG) -> World:
    """
    Build a `World` from the lines of a world file.

    Lines after the last grid row are ignored. Trailing newlines are
    stripped from every row before its width is checked.

    Args:
        lines: Header line followed by grid rows.
        config: Cell symbols, and an optional max distance override.

    Returns:
        World: The parsed world.

    Raises:
        WorldFormatError: On a bad header, a missing or wrong-width row, or
            an unknown symbol.
    """
    it = iter(lines)
    header = next(it, None)
    if header is None or not header.strip():
        raise WorldFormatError("World text is empty; expected a header line.")
    rows, cols, max_distance = _parse_header(header)
    if config.max_distance is not None:
        max_distance = config.max_distance

    kinds = {symbol: CellKind(name) for symbol, name in config.symbols().items()}
    cells = []
    for row_idx in range(rows):
        line = next(it, None)
        if line is None:
            raise WorldFormatError(f"Expected {rows} rows, found {row_idx}.")
        line = line.rstrip("\r\n")
        if len(line) != cols:
            raise WorldFormatError(
                f"Row {row_idx} has {len(line)} cells, expected {cols}."
            )
        row = []
        for col_idx, symbol in enumerate(line):
            kind = kinds.get(symbol)
            if kind is None:
                raise WorldFormatError(
                    f"Unknown symbol {symbol!r} at row {row_idx}, column {col_idx}."
                )
            row.append(kind)
        cells.append(tuple(row))

    return World(rows=rows, cols=cols, max_distance=max_distance, cells=tuple(cells))


def load_world(path: Union[str, Path], config: WorldConfig = DEFAULT_CONFIG) -> World:
    """Read and parse a world file.

    Raises:
        WorldFormatError: If the content is malformed.
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as fh:
        world = parse_world(fh, config)
    logger.debug(
        "Loaded world %s: %dx%d, max distance %d",
        path,
        world.rows,
        world.cols,
        world.max_distance,
    )
    return world
