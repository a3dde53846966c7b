from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Dict


HEALING_ITEM_ID = "hpot"


@dataclass(frozen=True)
class ShopItem:
    id: str
    name: str
    cost: int

    @property
    def is_healing(self) -> bool:
        return self.id == HEALING_ITEM_ID


@dataclass(frozen=True)
class PurchaseResult:
    success: bool
    lives: int = 0
    gold: int = 0
    level: int = 0
    turn: int = 0
    rejected: bool = False


@dataclass
class PurchaseLedger(Mapping[str, int]):
    """Per-session count of confirmed purchases, keyed by shop item id."""

    counts: Dict[str, int] = field(default_factory=dict)

    def __getitem__(self, item_id: str) -> int:
        return self.counts[item_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def count(self, item_id: str) -> int:
        return int(self.counts.get(item_id, 0))

    def record(self, item_id: str) -> int:
        self.counts[item_id] = self.count(item_id) + 1
        return self.counts[item_id]
