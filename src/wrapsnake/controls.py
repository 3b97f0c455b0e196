from __future__ import annotations

from typing import NamedTuple

import pygame

from .state import Direction

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_i: Direction.UP,
    pygame.K_a: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_k: Direction.DOWN,
    pygame.K_z: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_j: Direction.LEFT,
    pygame.K_LEFTBRACKET: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_l: Direction.RIGHT,
    pygame.K_RIGHTBRACKET: Direction.RIGHT,
}
RESTART_KEYS = (pygame.K_SPACE,)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class FrameInput(NamedTuple):
    direction: Direction | None = None
    any_key: bool = False
    restart: bool = False
    quit: bool = False


def read_input(events) -> FrameInput:
    """Fold one frame's pygame events into what the game core understands.

    When several direction keys arrive in the same frame the last one wins.
    """
    frame = FrameInput()
    for event in events:
        if event.type == pygame.QUIT:
            frame = frame._replace(quit=True)
        elif event.type == pygame.KEYDOWN:
            frame = frame._replace(any_key=True)
            if event.key in QUIT_KEYS:
                frame = frame._replace(quit=True)
            elif event.key in RESTART_KEYS:
                frame = frame._replace(restart=True)
            new_dir = KEY_MAP.get(event.key)
            if new_dir:
                frame = frame._replace(direction=new_dir)
    return frame
