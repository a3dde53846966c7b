from __future__ import annotations

import logging
import time
from typing import List

from mugloar.application.services.event_bus import EventBus
from mugloar.application.services.quest_ranker import RiskThreshold, rank
from mugloar.application.services.quest_resolver import QuestResolver
from mugloar.application.services.shop_advisor import LIVES_SAFETY_FLOOR, select_purchase
from mugloar.domain.events import ItemPurchased, RiskThresholdRaised, RoundStarted, SessionStarted
from mugloar.domain.gateways import GameGateway, GameServiceUnavailable
from mugloar.domain.models.quest import Quest
from mugloar.domain.models.session import Session
from mugloar.domain.models.shop import PurchaseLedger, PurchaseResult, ShopItem


class SessionController:
    """Plays one game from start until the character has no lives left."""

    def __init__(self, gateway: GameGateway, event_bus: EventBus | None = None) -> None:
        self.gateway = gateway
        self.event_bus = event_bus or EventBus()
        self.resolver = QuestResolver(gateway, event_bus=self.event_bus)
        self.threshold = RiskThreshold()
        self.ledger = PurchaseLedger()
        self._logger = logging.getLogger(__name__)

    def play_to_completion(self, *, max_rounds: int | None = None) -> Session:
        self.threshold = RiskThreshold()
        self.ledger = PurchaseLedger()

        session = self.gateway.start_session()
        self.event_bus.publish(SessionStarted(game_id=session.game_id, lives=session.lives, gold=session.gold))

        round_number = 0
        while not session.is_over:
            if max_rounds is not None and round_number >= max_rounds:
                self._logger.info("Round cap %s reached with %s lives left", max_rounds, session.lives)
                break
            self.play_round(session, round_number)
            round_number += 1

        return session

    def play_round(self, session: Session, round_number: int) -> bool:
        """Play one turn; returns False when the service was paused and nothing was played."""
        self.event_bus.publish(
            RoundStarted(game_id=session.game_id, round_number=round_number, risk_threshold=self.threshold.value)
        )

        quests: List[Quest] | None
        try:
            quests = rank(self.gateway.fetch_quests(session.game_id), self.threshold.value)
        except GameServiceUnavailable as exc:
            if exc.retry_after > 0:
                self._logger.info("Game service paused, waiting %.1fs: %s", exc.retry_after, exc)
                time.sleep(exc.retry_after)
                return False
            self._logger.warning("Quest fetch failed: %s", exc)
            quests = None

        if quests is not None and not quests:
            if self.threshold.raise_one():
                self.event_bus.publish(RiskThresholdRaised(game_id=session.game_id, threshold=self.threshold.value))

        self.resolver.resolve_all(quests or [], session)
        self.shop(session)
        session.turn += 1
        return True

    def shop(self, session: Session) -> int:
        """Buy until the advisor has nothing left to offer; returns purchases made.

        A failed purchase moves the rotation on. Healing that fails while
        lives are below the safety floor ends the round, since the advisor
        would keep offering it.
        """
        healing_urgent = True
        index = 0
        bought = 0
        while True:
            items = self._list_shop_items(session)
            if items is None:
                break

            selection = select_purchase(items, session, self.ledger, healing_urgent, index)
            if selection is None:
                break

            result = self._purchase(session, selection.item)
            succeeded = result is not None and result.success
            if succeeded:
                bought += 1
            if selection.reason == "healing":
                healing_urgent = False
                if not succeeded and session.lives < LIVES_SAFETY_FLOOR:
                    break
            if selection.final:
                break
            index += 1
        return bought

    def _list_shop_items(self, session: Session) -> List[ShopItem] | None:
        try:
            return self.gateway.list_shop_items(session.game_id)
        except GameServiceUnavailable as exc:
            self._logger.warning("Shop listing failed: %s", exc)
            return None

    def _purchase(self, session: Session, item: ShopItem) -> PurchaseResult | None:
        try:
            result = self.gateway.purchase(session.game_id, item.id)
        except GameServiceUnavailable as exc:
            self._logger.warning("Purchase of %s failed: %s", item.id, exc)
            return None
        if result.rejected:
            self._logger.info("Purchase of %s rejected by the shop", item.id)
            return result

        session.lives = result.lives
        session.gold = result.gold
        session.level = max(session.level, result.level)
        session.turn = result.turn
        if result.success:
            self.ledger.record(item.id)

        self.event_bus.publish(
            ItemPurchased(
                game_id=session.game_id,
                item_id=item.id,
                item_name=item.name,
                success=result.success,
                gold=session.gold,
                lives=session.lives,
            )
        )
        return result
