"""Menu window: start the game or show the credits."""

from __future__ import annotations

import argparse
import logging
import os
import sys

import pygame

from platformer.files import DEFAULT_LEVEL_PATH, WINDOW_HEIGHT, WINDOW_WIDTH, load_image
from platformer.game import play

MENU_IMAGE = "./img/menu.jpg"
CREDITS_IMAGE = "./img/credit.png"
WINDOW_TITLE = "Menu"

_log = logging.getLogger(__name__)


def _show(screen: pygame.Surface, image: pygame.Surface) -> None:
    screen.blit(pygame.transform.scale(image, screen.get_size()), (0, 0))
    pygame.display.flip()


def init_window(
    width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
) -> tuple[pygame.Surface, pygame.Surface]:
    """Open the menu window and draw the menu image; return both surfaces."""
    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(WINDOW_TITLE)
    menu = load_image(MENU_IMAGE)
    _show(screen, menu)
    return screen, menu


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="platformer", description="A small platform game.")
    parser.add_argument(
        "--level",
        default=os.fspath(DEFAULT_LEVEL_PATH),
        help="level file to play (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Show the menu: 1 plays, 2 shows the credits, Escape quits."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    try:
        screen, _menu = init_window(WINDOW_WIDTH, WINDOW_HEIGHT)
    except pygame.error as exc:
        _log.error("could not open the menu window: %s", exc)
        pygame.quit()
        return 0

    try:
        done = False
        while not done:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                done = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_1, pygame.K_KP1):
                    _log.info("1 pressed")
                    play(screen, args.level)
                    done = True
                elif event.key in (pygame.K_2, pygame.K_KP2):
                    _log.info("2 pressed")
                    screen.fill((0, 0, 0))
                    _show(screen, load_image(CREDITS_IMAGE))
                elif event.key == pygame.K_ESCAPE:
                    done = True
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())