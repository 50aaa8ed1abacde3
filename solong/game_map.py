"""Map loading and tile queries for the collect-and-escape game."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"


class MapLoadError(Exception):
    """Raised when a map file cannot be read or holds nothing to play."""


@dataclass
class GameMap:
    """A grid of single-character tiles, indexed as (x, y)."""

    rows: list[list[str]]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile at column x of row y; IndexError when off the map."""
        if x < 0 or y < 0:
            raise IndexError(f"position ({x}, {y}) is off the map")
        try:
            return self.rows[y][x]
        except IndexError:
            raise IndexError(f"position ({x}, {y}) is off the map") from None

    def set_tile(self, x: int, y: int, tile: str) -> None:
        """Replace the tile at column x of row y."""
        if len(tile) != 1:
            raise ValueError(f"a tile is one character, got {tile!r}")
        self.tile_at(x, y)
        self.rows[y][x] = tile

    def has_collectibles(self) -> bool:
        """True while any collectible is left on the map."""
        return any(COLLECTIBLE in row for row in self.rows)

    def find_player(self) -> tuple[int, int] | None:
        """Position of the first player tile in reading order, or None."""
        return next(
            (
                (x, y)
                for y, row in enumerate(self.rows)
                for x, tile in enumerate(row)
                if tile == PLAYER
            ),
            None,
        )

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read a map file, one row per line; raise MapLoadError on failure."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MapLoadError(f"cannot read map {path}") from exc
    lines = _split_lines(text)
    if not lines:
        raise MapLoadError(f"map {path} is empty")
    return GameMap([list(line) for line in lines])