from .config import Settings
from .food import GridFullError
from .logic import SnakeGame
from .state import Cell, Direction, GameStatus

__all__ = ["Settings", "GridFullError", "SnakeGame", "Cell", "Direction", "GameStatus"]
