import pygame
import pytest

from platformer.character import (
    MARIO_IMAGE_FILES,
    Direction,
    Pose,
    load_mario_images,
    new_mario,
)


def _images():
    return {pose: pygame.Surface((pose + 1, 2)) for pose in Pose}


def test_new_mario_initial_state():
    mario = new_mario(pygame.Rect(30, 810, 22, 30), _images())
    assert mario.position == pygame.Rect(30, 810, 22, 30)
    assert mario.direction == Direction.NONE
    assert mario.last_direction == Direction.NONE
    assert mario.pose == Pose.RIGHT
    assert (mario.jumping, mario.jump_time, mario.airborne) == (False, 0, False)
    assert (mario.outcome, mario.hidden, mario.frame) == (0, False, 0)


def test_new_mario_copies_position():
    rect = pygame.Rect(30, 810, 22, 30)
    mario = new_mario(rect, _images())
    rect.x = 500
    assert mario.position.x == 30


def test_image_follows_pose():
    images = _images()
    mario = new_mario((0, 0, 22, 30), images)
    mario.pose = Pose.LEFT_JUMP
    assert mario.image is images[Pose.LEFT_JUMP]


def test_pose_numbers_match_sprite_order():
    assert [int(p) for p in Pose] == [0, 1, 2, 3, 4, 5]
    assert MARIO_IMAGE_FILES[Pose.LEFT_JUMP].endswith("Mario6.png")


def test_load_mario_images(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "img").mkdir()
    for pose, path in MARIO_IMAGE_FILES.items():
        pygame.image.save(pygame.Surface((pose + 3, 5)), str(tmp_path / path))
    images = load_mario_images()
    assert set(images) == set(Pose)
    assert all(images[pose].get_size() == (pose + 3, 5) for pose in Pose)


def test_load_mario_images_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises((FileNotFoundError, pygame.error)):
        load_mario_images()