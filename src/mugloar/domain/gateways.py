from abc import ABC, abstractmethod
from typing import List

from mugloar.domain.models.quest import Quest, QuestAttempt
from mugloar.domain.models.session import Session
from mugloar.domain.models.shop import PurchaseResult, ShopItem


class GameServiceUnavailable(RuntimeError):
    """A call to the game service could not be completed.

    ``retry_after`` is set when the service is known to be unreachable for a
    while, so the caller should wait rather than try again at once.
    """

    def __init__(self, message: str, retry_after: float = 0.0) -> None:
        super().__init__(message)
        self.retry_after = max(0.0, float(retry_after))


class GameGateway(ABC):
    @abstractmethod
    def start_session(self) -> Session:
        raise NotImplementedError

    @abstractmethod
    def fetch_quests(self, game_id: str) -> List[Quest]:
        raise NotImplementedError

    @abstractmethod
    def attempt_quest(self, game_id: str, ad_id: str) -> QuestAttempt:
        raise NotImplementedError

    @abstractmethod
    def list_shop_items(self, game_id: str) -> List[ShopItem]:
        raise NotImplementedError

    @abstractmethod
    def purchase(self, game_id: str, item_id: str) -> PurchaseResult:
        raise NotImplementedError

    def close(self) -> None:
        return None
