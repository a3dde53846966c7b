import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from mugloar.domain.services.risk_classifier import PROBABILITY_LABELS, UNKNOWN_RISK, classify


class RiskClassifierTests(unittest.TestCase):
    def test_known_labels_follow_fixed_ascending_order(self) -> None:
        expected = [
            ("Piece of cake", 0),
            ("Walk in the park", 1),
            ("Sure thing", 2),
            ("Quite likely", 3),
            ("Hmmm....", 4),
            ("Gamble", 5),
            ("Playing with fire", 6),
            ("Rather detrimental", 7),
            ("Suicide mission", 8),
        ]
        self.assertEqual(expected, [(label, classify(label)) for label in PROBABILITY_LABELS])

    def test_unknown_labels_are_maximally_risky(self) -> None:
        for label in ("Impossible", "", "piece of cake", "Risky", None):
            self.assertEqual(UNKNOWN_RISK, classify(label))
        self.assertEqual(9, UNKNOWN_RISK)

    def test_classification_is_stable_across_calls(self) -> None:
        first = [classify(label) for label in PROBABILITY_LABELS]
        second = [classify(label) for label in PROBABILITY_LABELS]
        self.assertEqual(first, second)
        self.assertEqual(sorted(first), first)


if __name__ == "__main__":
    unittest.main()
