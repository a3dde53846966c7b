from typing import Callable

from mugloar.application.services.event_bus import EventBus
from mugloar.domain.events import ItemPurchased, QuestAttempted, RiskThresholdRaised, RoundStarted, SessionStarted
from mugloar.domain.models.session import Session


class ConsoleReporter:
    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def register(self, event_bus: EventBus) -> None:
        event_bus.subscribe(SessionStarted, self.on_session_started)
        event_bus.subscribe(RoundStarted, self.on_round_started)
        event_bus.subscribe(RiskThresholdRaised, self.on_threshold_raised)
        event_bus.subscribe(QuestAttempted, self.on_quest_attempted)
        event_bus.subscribe(ItemPurchased, self.on_item_purchased)

    def on_session_started(self, event: SessionStarted) -> None:
        self._write(f"\nStart game... {event.game_id}")

    def on_round_started(self, event: RoundStarted) -> None:
        self._write(f"Fetch new messages... [{event.round_number}]")

    def on_threshold_raised(self, event: RiskThresholdRaised) -> None:
        self._write(f"Increase risk level to {event.threshold}")

    def on_quest_attempted(self, event: QuestAttempted) -> None:
        self._write(
            f" Quest {event.ad_id} ({event.reward} gold) - {event.status}:"
            f" lives {event.lives}, gold {event.gold}, score {event.score}"
        )

    def on_item_purchased(self, event: ItemPurchased) -> None:
        if event.success:
            self._write(f" Purchase - {event.item_name}")


def format_game_over(session: Session) -> str:
    return (
        "\n##### Game over !!! #####\n\n"
        f"Game ID: {session.game_id}\n"
        f"  Score: {session.score}\n"
        f"  Turns: {session.turn}\n"
    )
