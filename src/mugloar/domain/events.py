from dataclasses import dataclass


@dataclass
class SessionStarted:
    game_id: str
    lives: int
    gold: int


@dataclass
class RoundStarted:
    game_id: str
    round_number: int
    risk_threshold: int


@dataclass
class RiskThresholdRaised:
    game_id: str
    threshold: int


@dataclass
class QuestAttempted:
    game_id: str
    ad_id: str
    status: str
    reward: int
    lives: int
    gold: int
    score: int


@dataclass
class ItemPurchased:
    game_id: str
    item_id: str
    item_name: str
    success: bool
    gold: int
    lives: int

