from __future__ import annotations

import logging

import pygame

from .config import Settings
from .controls import read_input
from .logic import SnakeGame
from .render import draw_frame
from .state import GameStatus

logger = logging.getLogger(__name__)


def run(settings: Settings) -> int:
    game = SnakeGame(settings)

    pygame.init()
    try:
        screen = pygame.display.set_mode(settings.window_size)
        pygame.display.set_caption("Snake")
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()
        logger.info("window %dx%d, grid %s", *settings.window_size, game.grid)

        while True:
            frame = read_input(pygame.event.get())
            if frame.quit:
                break

            if frame.restart and game.status is GameStatus.GAME_OVER:
                game.request_restart()
            else:
                game.tick(pygame.time.get_ticks(), frame.direction, frame.any_key)

            if game.consume_redraw():
                draw_frame(screen, game, font)
            clock.tick(settings.fps)
    finally:
        pygame.quit()

    print(f"Score: {game.score}, highest: {game.high_score}")
    return 0
