"""Input handling and per-frame movement of the player."""

from __future__ import annotations

import pygame

from platformer.character import Character, Direction, Pose

STEP = 2
JUMP_HEIGHT = 70


def handle_event(mario: Character, event: pygame.event.Event) -> bool:
    """Apply an input event to ``mario``; return False when the game should stop."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_RIGHT:
            mario.direction = mario.last_direction = Direction.RIGHT
        elif event.key == pygame.K_LEFT:
            mario.direction = mario.last_direction = Direction.LEFT
        elif event.key == pygame.K_UP:
            mario.jumping = True
        elif event.key == pygame.K_ESCAPE:
            return False
    elif event.type == pygame.KEYUP and event.key in (pygame.K_RIGHT, pygame.K_LEFT):
        mario.direction = Direction.NONE
        mario.pose = resting_pose(mario)
    return True


def move(mario: Character) -> None:
    """Step ``mario`` sideways in the direction he walks."""
    if mario.direction == Direction.RIGHT:
        mario.position.x += STEP
    elif mario.direction == Direction.LEFT:
        mario.position.x -= STEP


def resting_pose(mario: Character) -> Pose:
    """The standing pose facing the last direction walked (right if none)."""
    if mario.last_direction == Direction.LEFT:
        return Pose.LEFT
    return Pose.RIGHT


def jump(mario: Character) -> None:
    """Advance the jump by one frame: rise, then fall back to the start."""
    if mario.jumping:
        mario.position.y -= STEP
        mario.jump_time += STEP
    if mario.jump_time >= JUMP_HEIGHT:
        mario.jumping = False
    if mario.jump_time > 0 and not mario.jumping:
        mario.position.y += STEP
        mario.jump_time -= STEP
    if not mario.jumping and mario.jump_time == 0:
        mario.pose = resting_pose(mario)


def update_pose(mario: Character) -> None:
    """Choose the running or jumping pose for the current movement."""
    in_air = mario.jump_time > 0
    if mario.direction == Direction.RIGHT:
        mario.pose = Pose.RIGHT_JUMP if in_air else Pose.RIGHT_RUN
    elif mario.direction == Direction.LEFT:
        mario.pose = Pose.LEFT_JUMP if in_air else Pose.LEFT_RUN
    elif in_air:
        if mario.last_direction == Direction.RIGHT:
            mario.pose = Pose.RIGHT_JUMP
        elif mario.last_direction == Direction.LEFT:
            mario.pose = Pose.LEFT_JUMP