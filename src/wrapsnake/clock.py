from __future__ import annotations


class GameClock:
    """Move and escalation timers, driven by timestamps the caller supplies.

    Independent of the frame rate: nothing here reads the wall clock.
    """

    def __init__(self, initial_period_ms: int, min_period_ms: int):
        self.initial_period_ms = initial_period_ms
        self.min_period_ms = min_period_ms
        self.period_ms = initial_period_ms
        self.last_move_ms: int | None = None
        self.last_check_ms: int | None = None

    def reset(self) -> None:
        self.period_ms = self.initial_period_ms
        self.last_move_ms = None
        self.last_check_ms = None

    def start(self, now_ms: int) -> None:
        self.last_move_ms = now_ms
        self.last_check_ms = now_ms

    def move_due(self, now_ms: int) -> bool:
        return self.last_move_ms is not None and now_ms - self.last_move_ms > self.period_ms

    def mark_moved(self, now_ms: int) -> None:
        self.last_move_ms = now_ms

    def escalation_due(self, now_ms: int, interval_ms: int) -> bool:
        return self.last_check_ms is not None and now_ms - self.last_check_ms > interval_ms

    def mark_checked(self, now_ms: int) -> None:
        self.last_check_ms = now_ms

    def speed_up(self, decrement_ms: int) -> int:
        self.period_ms = max(self.min_period_ms, self.period_ms - decrement_ms)
        return self.period_ms
