from __future__ import annotations


# Ascending risk; position in the tuple is the ordinal.
PROBABILITY_LABELS: tuple[str, ...] = (
    "Piece of cake",
    "Walk in the park",
    "Sure thing",
    "Quite likely",
    "Hmmm....",
    "Gamble",
    "Playing with fire",
    "Rather detrimental",
    "Suicide mission",
)

UNKNOWN_RISK = 9

_RISK_BY_LABEL: dict[str, int] = {label: index for index, label in enumerate(PROBABILITY_LABELS)}


def classify(label: str | None) -> int:
    """Map a probability label to a risk ordinal; unknown labels are the riskiest."""
    if label is None:
        return UNKNOWN_RISK
    return _RISK_BY_LABEL.get(str(label), UNKNOWN_RISK)
