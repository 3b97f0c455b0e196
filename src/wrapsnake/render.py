from __future__ import annotations

import pygame

from . import config
from .logic import SnakeGame
from .state import Cell, GameStatus

STATUS_HINTS = {
    GameStatus.PAUSED: "press any key to start",
    GameStatus.RUNNING: "",
    GameStatus.GAME_OVER: "GAME OVER - press space to restart",
}


def _draw_cell(view: pygame.Surface, cell: Cell, size: int, color) -> None:
    x, y = cell
    pygame.draw.rect(view, color, pygame.Rect(x * size, y * size, size, size))


def draw_frame(screen: pygame.Surface, game: SnakeGame, font: pygame.font.Font) -> None:
    """Draw at grid resolution, then scale the view up to the window."""
    size = game.settings.grid_pixel
    view = pygame.Surface(game.settings.view_size)
    view.fill(config.BACKGROUND)

    if game.food_cell is not None:
        _draw_cell(view, game.food_cell, size, config.FOOD_COLOR)
    for cell in game.snake_cells():
        _draw_cell(view, cell, size, config.SNAKE_COLOR)

    pygame.transform.scale(view, screen.get_size(), screen)

    lines = [f"SCORE: {game.score}, HIGHEST: {game.high_score}", STATUS_HINTS[game.status]]
    y = 4
    for line in lines:
        if line:
            screen.blit(font.render(line, True, config.TEXT_COLOR), (4, y))
        y += font.get_linesize()

    pygame.display.flip()
