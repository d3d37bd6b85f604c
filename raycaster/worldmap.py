"""Grid maps: zero cells are open floor, positive cells are walls."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


@dataclass(frozen=True)
class WorldMap:
    """A rectangular grid of integer cells, stored row by row."""

    cells: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("a map needs at least one row and one column")
        width = len(self.cells[0])
        if any(len(row) != width for row in self.cells):
            raise ValueError("all map rows must have the same length")

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> WorldMap:
        """Build a map from a sequence of rows of cell values."""
        return cls(tuple(tuple(int(value) for value in row) for row in rows))

    @classmethod
    def from_text(cls, text: str) -> WorldMap:
        """Parse 'width height' followed by width*height cell values."""
        try:
            numbers = [int(token) for token in text.split()]
        except ValueError as exc:
            raise ValueError(f"map text holds a non-integer value: {exc}") from None
        if len(numbers) < 2:
            raise ValueError("map text must start with its width and height")
        width, height = numbers[0], numbers[1]
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid map size {width}x{height}")
        values = numbers[2:]
        if len(values) < width * height:
            raise ValueError(
                f"map text holds {len(values)} cells, expected {width * height}"
            )
        rows = (values[y * width:(y + 1) * width] for y in range(height))
        return cls.from_rows(rows)

    @classmethod
    def from_file(cls, path: str | Path) -> WorldMap:
        """Read a map in the text format from a file."""
        return cls.from_text(Path(path).read_text())

    def cell(self, x: int, y: int) -> int:
        """Return the value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) lies outside the map")
        return self.cells[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        return self.cell(x, y) > 0