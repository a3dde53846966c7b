import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from mugloar.application.services.event_bus import EventBus
from mugloar.domain.events import ItemPurchased, QuestAttempted, RiskThresholdRaised, RoundStarted, SessionStarted
from mugloar.domain.models.session import Session
from mugloar.presentation.console_reporter import ConsoleReporter, format_game_over


class ConsoleReporterTests(unittest.TestCase):
    def test_prints_progress_lines_for_session_events(self) -> None:
        lines: list[str] = []
        bus = EventBus()
        ConsoleReporter(write=lines.append).register(bus)

        bus.publish(SessionStarted(game_id="g1", lives=3, gold=0))
        bus.publish(RoundStarted(game_id="g1", round_number=2, risk_threshold=3))
        bus.publish(RiskThresholdRaised(game_id="g1", threshold=4))
        bus.publish(
            QuestAttempted(game_id="g1", ad_id="ad7", status="success", reward=40, lives=3, gold=40, score=40)
        )
        bus.publish(ItemPurchased(game_id="g1", item_id="hpot", item_name="Healing potion", success=True, gold=0, lives=4))
        bus.publish(ItemPurchased(game_id="g1", item_id="cs", item_name="Claw Sharpening", success=False, gold=0, lives=4))

        self.assertEqual(
            [
                "\nStart game... g1",
                "Fetch new messages... [2]",
                "Increase risk level to 4",
                " Quest ad7 (40 gold) - success: lives 3, gold 40, score 40",
                " Purchase - Healing potion",
            ],
            lines,
        )

    def test_game_over_block_lists_id_score_and_turns(self) -> None:
        text = format_game_over(Session(game_id="g1", lives=0, score=1234, turn=87))

        self.assertIn("##### Game over !!! #####", text)
        self.assertIn("Game ID: g1", text)
        self.assertIn("Score: 1234", text)
        self.assertIn("Turns: 87", text)


if __name__ == "__main__":
    unittest.main()
