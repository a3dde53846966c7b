from __future__ import annotations

from typing import Iterable, List

from mugloar.domain.models.quest import Quest
from mugloar.domain.services.risk_classifier import classify


def rank(quests: Iterable[Quest], threshold: int) -> List[Quest]:
    """Safest quests first, richest first within a risk band, nothing above ``threshold``."""
    classified = [quest.with_risk(classify(quest.probability)) for quest in quests]
    ordered = sorted(classified, key=lambda quest: (quest.risk, -int(quest.reward)))
    return [quest for quest in ordered if quest.risk <= int(threshold)]


class RiskThreshold:
    INITIAL = 3
    CAP = 10

    def __init__(self, value: int = INITIAL) -> None:
        self._value = min(int(value), self.CAP)

    @property
    def value(self) -> int:
        return self._value

    def raise_one(self) -> bool:
        if self._value >= self.CAP:
            return False
        self._value += 1
        return True
