import logging
import os
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from platformer.character import MARIO_IMAGE_FILES
from platformer.game import SPRITE_FILES
from platformer.main import init_window, main

MENU = (30, 160, 90)
TILE = (10, 120, 230)


def _solid(color, size=(30, 30)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def assets(tmp_path, monkeypatch):
    img = tmp_path / "img"
    img.mkdir()
    # Image files are recognised by their contents, so PNG data under .jpg loads.
    pygame.image.save(_solid(MENU, (40, 40)), str(img / "menu.png"))
    (img / "menu.png").rename(img / "menu.jpg")
    pygame.image.save(_solid(MENU, (40, 40)), str(img / "credit.png"))
    for path, _passable in SPRITE_FILES:
        pygame.image.save(_solid(TILE), str(tmp_path / path))
    for path in MARIO_IMAGE_FILES.values():
        pygame.image.save(_solid(TILE, (22, 30)), str(tmp_path / path))
    level_dir = tmp_path / "level"
    level_dir.mkdir()
    rows = ["0 " * 30 for _ in range(30)]
    (level_dir / "niveau0.lvl").write_text(
        "Level\n30 30\n" + "\n".join(rows) + "\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    pygame.quit()


def test_init_window_shows_menu(assets):
    screen, menu = init_window(120, 80)
    assert screen.get_size() == (120, 80)
    assert menu.get_size() == (40, 40)
    assert screen.get_at((60, 40))[:3] == MENU
    assert pygame.display.get_caption()[0] == "Menu"


def test_main_escape_quits(assets):
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    with mock.patch("pygame.event.wait", side_effect=events):
        assert main([]) == 0
    assert pygame.display.get_init() is False


def test_main_window_close_quits(assets):
    with mock.patch("pygame.event.wait", side_effect=[pygame.event.Event(pygame.QUIT)]):
        assert main([]) == 0
    assert pygame.display.get_init() is False


def test_main_key_one_plays_level(assets, caplog):
    caplog.set_level(logging.INFO)
    start = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1)]
    with mock.patch("pygame.event.wait", side_effect=start), mock.patch(
        "pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]
    ):
        assert main(["--level", str(assets / "level" / "niveau0.lvl")]) == 0
    assert "1 pressed" in caplog.messages
    assert "0: the block is passable" in caplog.messages


def test_main_key_two_shows_credits(assets, caplog):
    caplog.set_level(logging.INFO)
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_2),
        pygame.event.Event(pygame.QUIT),
    ]
    with mock.patch("pygame.event.wait", side_effect=events), mock.patch(
        "pygame.display.flip", wraps=pygame.display.flip
    ) as flip:
        assert main([]) == 0
    assert "2 pressed" in caplog.messages
    assert flip.call_count == 2


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])