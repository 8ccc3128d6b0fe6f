"""The game loop: the level, its tiles and the player on screen."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

import pygame

from platformer.character import (
    MARIO_HEIGHT,
    MARIO_WIDTH,
    Character,
    load_mario_images,
    new_mario,
)
from platformer.events import handle_event, jump, move, update_pose
from platformer.files import (
    DEFAULT_LEVEL_PATH,
    SPRITE_COUNT,
    SPRITE_SIZE,
    Map,
    Sprite,
    load_image,
    read_level,
)

# Image file and passability of each tile number, in tile order.
SPRITE_FILES = (
    ("img/sky.png", True),
    ("img/sol.png", False),
    ("img/block.png", False),
    ("img/boite.png", False),
    ("img/tuyau1.png", False),
    ("img/tuyau2.png", False),
    ("img/tuyau3.png", False),
    ("img/tuyau4.png", False),
)

MARIO_START = (30, 810)
BACKGROUND = (255, 255, 255)
_FRAME_RATE = 120

_log = logging.getLogger(__name__)


def init_sprites() -> list[Sprite]:
    """Load the tile sprites; the list index is the tile number."""
    return [Sprite(image=load_image(path), passable=passable) for path, passable in SPRITE_FILES]


def _sprite_for(sprites: Sequence[Sprite], tile: int) -> Sprite | None:
    if 0 <= tile < min(SPRITE_COUNT, len(sprites)):
        return sprites[tile]
    return None


def draw_map(level: Map, sprites: Sequence[Sprite], surface: pygame.Surface) -> None:
    """Draw every known tile of ``level`` onto ``surface``."""
    tile_size = (SPRITE_SIZE, SPRITE_SIZE)
    for row, tiles in enumerate(level.tiles):
        for column, tile in enumerate(tiles):
            sprite = _sprite_for(sprites, tile)
            if sprite is None or sprite.image is None:
                continue
            image = sprite.image
            if image.get_size() != tile_size:
                image = pygame.transform.scale(image, tile_size)
            surface.blit(image, (column * SPRITE_SIZE, row * SPRITE_SIZE))


def tile_under(level: Map, mario: Character) -> int:
    """Return the tile number at the top-left corner of ``mario``."""
    return level.tile_at(mario.position.x // SPRITE_SIZE, mario.position.y // SPRITE_SIZE)


def _report_tile(sprites: Sequence[Sprite], tile: int) -> None:
    sprite = _sprite_for(sprites, tile)
    if sprite is not None and sprite.passable:
        _log.info("%d: the block is passable", tile)
    else:
        _log.info("%d: the block is not passable", tile)


def play(screen: pygame.Surface, level_path: str | os.PathLike[str] = DEFAULT_LEVEL_PATH) -> bool:
    """Run the level until the player quits; return whether to keep going."""
    level = read_level(level_path)
    sprites = init_sprites()

    screen.fill(BACKGROUND)
    pygame.display.flip()

    start = pygame.Rect(*MARIO_START, int(MARIO_WIDTH), MARIO_HEIGHT)
    mario = new_mario(start, load_mario_images())

    clock = pygame.time.Clock()
    running = True
    while running:
        screen.fill(BACKGROUND)
        draw_map(level, sprites, screen)
        for event in pygame.event.get():
            if not handle_event(mario, event):
                running = False
                break
        update_pose(mario)
        move(mario)
        jump(mario)
        _report_tile(sprites, tile_under(level, mario))
        screen.blit(pygame.transform.scale(mario.image, mario.position.size), mario.position)
        pygame.display.flip()
        clock.tick(_FRAME_RATE)
    return running