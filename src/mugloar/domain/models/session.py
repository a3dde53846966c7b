from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Session:
    game_id: str
    lives: int = 0
    gold: int = 0
    level: int = 0
    score: int = 0
    high_score: int = 0
    turn: int = 0

    @property
    def is_over(self) -> bool:
        return self.lives <= 0

    def snapshot(self) -> "Session":
        return replace(self)
