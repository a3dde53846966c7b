from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class Quest:
    ad_id: str
    message: str = ""
    reward: int = 0
    expires_in: int = 0
    probability: str = ""
    risk: int | None = None

    def with_risk(self, risk: int) -> "Quest":
        return replace(self, risk=int(risk))


class AttemptStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class QuestAttempt:
    status: AttemptStatus
    lives: int = 0
    gold: int = 0
    score: int = 0
    high_score: int = 0
    turn: int = 0
    message: str = ""

    @classmethod
    def not_found(cls, message: str = "") -> "QuestAttempt":
        return cls(status=AttemptStatus.NOT_FOUND, message=message)
