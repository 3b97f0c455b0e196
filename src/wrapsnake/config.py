from __future__ import annotations

from dataclasses import dataclass

GRID_WIDTH, GRID_HEIGHT = 32, 24
GRID_PIXEL = 10
SCALE = 2
FPS = 60

# All times in milliseconds.
INITIAL_MOVE_MS = 150
MIN_MOVE_MS = 10
FOOD_SPEEDUP_MS = 1
STAGNATION_SPEEDUP_MS = 5
ESCALATION_MS = 30 * 1000

BACKGROUND = (64, 64, 64)
SNAKE_COLOR = (255, 255, 255)
FOOD_COLOR = (240, 0, 0)
TEXT_COLOR = (255, 255, 0)


@dataclass(frozen=True)
class Settings:
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    grid_pixel: int = GRID_PIXEL
    scale: int = SCALE
    fps: int = FPS
    initial_move_ms: int = INITIAL_MOVE_MS
    min_move_ms: int = MIN_MOVE_MS
    food_speedup_ms: int = FOOD_SPEEDUP_MS
    stagnation_speedup_ms: int = STAGNATION_SPEEDUP_MS
    escalation_ms: int = ESCALATION_MS
    seed: int | None = None

    @property
    def view_size(self) -> tuple[int, int]:
        return (self.grid_pixel * self.grid_width, self.grid_pixel * self.grid_height)

    @property
    def window_size(self) -> tuple[int, int]:
        w, h = self.view_size
        return (w * self.scale, h * self.scale)

    def validate(self) -> Settings:
        """Raise ValueError on values the game cannot run with; return self otherwise."""
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.grid_width}x{self.grid_height}")
        if self.grid_width * self.grid_height < 2:
            raise ValueError("grid needs room for both the snake and the food")
        if self.grid_pixel < 1 or self.scale < 1 or self.fps < 1:
            raise ValueError("grid_pixel, scale and fps must be positive")
        if not 0 < self.min_move_ms <= self.initial_move_ms:
            raise ValueError(
                f"min_move_ms must be in (0, {self.initial_move_ms}], got {self.min_move_ms}"
            )
        if self.food_speedup_ms < 0 or self.stagnation_speedup_ms < 0:
            raise ValueError("speed-up decrements must not be negative")
        if self.escalation_ms <= self.initial_move_ms:
            raise ValueError("escalation_ms must be longer than the initial move period")
        return self
