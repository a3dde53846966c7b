from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping

from mugloar.domain.models.session import Session
from mugloar.domain.models.shop import ShopItem


LIVES_SAFETY_FLOOR = 5


@dataclass(frozen=True)
class ShopSelection:
    item: ShopItem
    reason: str
    final: bool = False


def affordable_items(items: Iterable[ShopItem], gold: int, ledger: Mapping[str, int]) -> List[ShopItem]:
    """Items within ``gold``, least-bought first, then cheapest."""
    within_budget = [item for item in items if int(item.cost) <= int(gold)]
    return sorted(within_budget, key=lambda item: (int(ledger.get(item.id, 0)), int(item.cost)))


def select_purchase(
    items: Iterable[ShopItem],
    session: Session,
    ledger: Mapping[str, int],
    healing_urgent: bool,
    index: int = 0,
) -> ShopSelection | None:
    candidates = affordable_items(items, session.gold, ledger)
    healing = next((item for item in candidates if item.is_healing), None)

    if healing is not None and (healing_urgent or session.lives < LIVES_SAFETY_FLOOR):
        return ShopSelection(item=healing, reason="healing")

    if 0 <= index < len(candidates):
        return ShopSelection(item=candidates[index], reason="rotation")

    if healing is not None:
        return ShopSelection(item=healing, reason="healing", final=True)
    return None
