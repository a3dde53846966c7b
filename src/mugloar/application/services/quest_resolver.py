from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from mugloar.application.services.event_bus import EventBus
from mugloar.domain.events import QuestAttempted
from mugloar.domain.gateways import GameGateway, GameServiceUnavailable
from mugloar.domain.models.quest import AttemptStatus, Quest, QuestAttempt
from mugloar.domain.models.session import Session


@dataclass
class ResolutionOutcome:
    stopped: bool = False
    attempted: int = 0
    succeeded: int = 0
    skipped: int = 0


class QuestResolver:
    def __init__(self, gateway: GameGateway, event_bus: EventBus | None = None) -> None:
        self.gateway = gateway
        self.event_bus = event_bus
        self._logger = logging.getLogger(__name__)

    def resolve_all(self, ordered_quests: Iterable[Quest], session: Session) -> ResolutionOutcome:
        """Attempt quests in order until one explicitly fails.

        Expired quests and transport failures are skipped so the rest of the
        batch still gets a chance this turn.
        """
        outcome = ResolutionOutcome()
        for quest in ordered_quests:
            try:
                attempt = self.gateway.attempt_quest(session.game_id, quest.ad_id)
            except GameServiceUnavailable as exc:
                outcome.skipped += 1
                self._logger.warning("Quest attempt skipped: %s (%s)", quest.ad_id, exc)
                continue

            if attempt.status == AttemptStatus.NOT_FOUND:
                outcome.skipped += 1
                self._logger.info("Quest %s no longer available", quest.ad_id)
                continue

            outcome.attempted += 1
            _apply_attempt(session, attempt)
            self._publish(session, quest, attempt)

            if attempt.status == AttemptStatus.FAILURE:
                outcome.stopped = True
                break
            outcome.succeeded += 1

        return outcome

    def _publish(self, session: Session, quest: Quest, attempt: QuestAttempt) -> None:
        if self.event_bus is None:
            return
        self.event_bus.publish(
            QuestAttempted(
                game_id=session.game_id,
                ad_id=quest.ad_id,
                status=attempt.status.value,
                reward=quest.reward,
                lives=session.lives,
                gold=session.gold,
                score=session.score,
            )
        )


def _apply_attempt(session: Session, attempt: QuestAttempt) -> None:
    session.lives = attempt.lives
    session.gold = attempt.gold
    session.score = attempt.score
    session.high_score = max(session.high_score, attempt.high_score)
    session.turn = attempt.turn
