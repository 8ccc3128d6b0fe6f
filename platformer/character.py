"""The player character and its sprite poses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

import pygame

from platformer.files import load_image


class Pose(IntEnum):
    """Sprite shown for the character."""

    RIGHT = 0
    RIGHT_RUN = 1
    RIGHT_JUMP = 2
    LEFT = 3
    LEFT_RUN = 4
    LEFT_JUMP = 5


class Direction(IntEnum):
    """Direction the character faces or walks in."""

    NONE = 0
    RIGHT = 1
    LEFT = 2


MARIO_WIDTH = 22.5
MARIO_HEIGHT = 30
MARIO_IMAGE_COUNT = len(Pose)

MARIO_IMAGE_FILES = {
    Pose.RIGHT: "./img/Mario1.png",
    Pose.RIGHT_RUN: "./img/Mario2.png",
    Pose.RIGHT_JUMP: "./img/Mario3.png",
    Pose.LEFT: "./img/Mario4.png",
    Pose.LEFT_RUN: "./img/Mario5.png",
    Pose.LEFT_JUMP: "./img/Mario6.png",
}


@dataclass
class Character:
    """State of a character on the map.

    ``jumping`` is true while the character rises; ``jump_time`` counts how far
    the current jump has gone. ``outcome`` is 1 on a win, -1 on a loss, 0 otherwise.
    """

    position: pygame.Rect
    images: dict[Pose, pygame.Surface] = field(default_factory=dict)
    pose: Pose = Pose.RIGHT
    jumping: bool = False
    jump_time: int = 0
    airborne: bool = False
    direction: Direction = Direction.NONE
    last_direction: Direction = Direction.NONE
    frame: int = 0
    outcome: int = 0
    hidden: bool = False
    level: int = 0
    lost_level: int = 0

    @property
    def image(self) -> pygame.Surface:
        """The image for the current pose."""
        return self.images[self.pose]


def load_mario_images() -> dict[Pose, pygame.Surface]:
    """Load the image for every pose."""
    return {pose: load_image(path) for pose, path in MARIO_IMAGE_FILES.items()}


def new_mario(position, images) -> Character:
    """Create the player at ``position`` with the given pose images."""
    return Character(position=pygame.Rect(position), images=dict(images))