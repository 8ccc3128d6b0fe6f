"""Level files, tile sprites and image loading."""

from __future__ import annotations

import itertools
import logging
import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

SPRITE_COUNT = 10
SPRITE_SIZE = 30
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 900
DEFAULT_LEVEL_PATH = Path("level/niveau0.lvl")

# The level name is read from a line buffer of 100 bytes, terminator included.
_NAME_LINE_LIMIT = 99

_log = logging.getLogger(__name__)


class LevelError(ValueError):
    """Raised when a level file or a map is malformed."""


@dataclass
class Map:
    """A grid of tile numbers, indexed as ``tiles[row][column]``."""

    width: int
    height: int
    tiles: list[list[int]]
    name: str = ""
    xscroll: int = 0
    yscroll: int = 0

    def __post_init__(self) -> None:
        self._check()

    def _check(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise LevelError(
                f"invalid dimensions: width = {self.width}, height = {self.height}"
            )
        if len(self.tiles) != self.height or any(
            len(row) != self.width for row in self.tiles
        ):
            raise LevelError("tile grid does not match the map dimensions")

    def tile_at(self, x: int, y: int) -> int:
        """Return the tile number at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) lies outside the map")
        return self.tiles[y][x]

    def render_text(self) -> str:
        """Return the grid as text, one row per line."""
        return "".join(
            "".join(f"{tile} " for tile in row) + "\n" for row in self.tiles
        )

    def print(self) -> None:
        """Write the grid to standard output under a heading.

        Raises LevelError if the map is no longer valid.
        """
        self._check()
        out = sys.stdout
        out.write("Map display:\n")
        for row in self.tiles:
            out.write("".join(f"{tile} " for tile in row))
            out.write("\n")
        out.flush()


@dataclass
class Sprite:
    """A tile image and whether a character may pass through it."""

    image: pygame.Surface | None
    passable: bool


def load_image(path: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image file, converting it when a display is open."""
    surface = pygame.image.load(os.fspath(path))
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def _take_ints(tokens: Iterator[str], count: int, what: str) -> list[int]:
    values = []
    for token in itertools.islice(tokens, count):
        try:
            values.append(int(token))
        except ValueError:
            raise LevelError(f"could not read the {what}") from None
    if len(values) != count:
        raise LevelError(f"could not read the {what}")
    return values


def read_level(path: str | os.PathLike[str] = DEFAULT_LEVEL_PATH) -> Map:
    """Read a level file: a name line, ``width height``, then the tile numbers."""
    with open(path, encoding="utf-8") as handle:
        name_line = handle.readline(_NAME_LINE_LIMIT)
        if not name_line:
            raise LevelError("could not read the level name")
        tokens = iter(handle.read().split())

    width, height = _take_ints(tokens, 2, "map dimensions")
    if width <= 0 or height <= 0:
        raise LevelError(f"invalid dimensions: width = {width}, height = {height}")
    _log.info("width: %d, height: %d", width, height)

    cells = _take_ints(tokens, width * height, "map data")
    tiles = [cells[start:start + width] for start in range(0, len(cells), width)]
    _log.info("map loaded")
    return Map(width=width, height=height, tiles=tiles, name=name_line.rstrip("\r\n"))