from __future__ import annotations

import time
from typing import Any, Callable, List, TypeVar

import httpx

from mugloar.domain.gateways import GameGateway, GameServiceUnavailable
from mugloar.domain.models.quest import AttemptStatus, Quest, QuestAttempt
from mugloar.domain.models.session import Session
from mugloar.domain.models.shop import PurchaseResult, ShopItem
from mugloar.infrastructure.mugloar_client import MugloarClient
from mugloar.infrastructure.resilient_http import CircuitOpenError


T = TypeVar("T")


def _int(payload: dict, key: str, default: int = 0) -> int:
    value = payload.get(key, default)
    if value is None:
        return default
    return int(value)


def _require_dict(payload: Any, what: str) -> dict:
    if not isinstance(payload, dict):
        raise ValueError(f"{what}: expected JSON object, got {type(payload).__name__}")
    return payload


def _require_list(payload: Any, what: str) -> list:
    if not isinstance(payload, list):
        raise ValueError(f"{what}: expected JSON array, got {type(payload).__name__}")
    return payload


def session_from_payload(payload: Any) -> Session:
    row = _require_dict(payload, "game start")
    game_id = str(row.get("gameId") or "").strip()
    if not game_id:
        raise ValueError("game start: missing gameId")
    return Session(
        game_id=game_id,
        lives=_int(row, "lives"),
        gold=_int(row, "gold"),
        level=_int(row, "level"),
        score=_int(row, "score"),
        high_score=_int(row, "highScore"),
        turn=_int(row, "turn"),
    )


def quests_from_payload(payload: Any) -> List[Quest]:
    quests: List[Quest] = []
    for row in _require_list(payload, "messages"):
        if not isinstance(row, dict) or not row.get("adId"):
            continue
        quests.append(
            Quest(
                ad_id=str(row["adId"]),
                message=str(row.get("message", "")),
                reward=_int(row, "reward"),
                expires_in=_int(row, "expiresIn"),
                probability=str(row.get("probability", "")),
            )
        )
    return quests


def attempt_from_payload(payload: Any) -> QuestAttempt:
    row = _require_dict(payload, "solve")
    if "error" in row:
        return QuestAttempt.not_found(message=str(row.get("error", "")))
    return QuestAttempt(
        status=AttemptStatus.SUCCESS if bool(row.get("success")) else AttemptStatus.FAILURE,
        lives=_int(row, "lives"),
        gold=_int(row, "gold"),
        score=_int(row, "score"),
        high_score=_int(row, "highScore"),
        turn=_int(row, "turn"),
        message=str(row.get("message", "")),
    )


def shop_items_from_payload(payload: Any) -> List[ShopItem]:
    items: List[ShopItem] = []
    for row in _require_list(payload, "shop"):
        if not isinstance(row, dict) or not row.get("id"):
            continue
        items.append(ShopItem(id=str(row["id"]), name=str(row.get("name", row["id"])), cost=_int(row, "cost")))
    return items


def purchase_from_payload(payload: Any) -> PurchaseResult:
    row = _require_dict(payload, "purchase")
    if "error" in row:
        return PurchaseResult(success=False, rejected=True)
    return PurchaseResult(
        success=bool(row.get("shoppingSuccess")),
        lives=_int(row, "lives"),
        gold=_int(row, "gold"),
        level=_int(row, "level"),
        turn=_int(row, "turn"),
    )


class MugloarGateway(GameGateway):
    """``GameGateway`` backed by the HTTP API; all transport trouble surfaces as ``GameServiceUnavailable``."""

    def __init__(self, client: MugloarClient) -> None:
        self.client = client

    def _call(self, what: str, fetch: Callable[[], T]) -> T:
        try:
            return fetch()
        except CircuitOpenError as exc:
            retry_after = exc.opened_until_epoch - time.time()
            raise GameServiceUnavailable(f"{what} failed: {exc}", retry_after=retry_after) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise GameServiceUnavailable(f"{what} failed: {exc}") from exc

    def start_session(self) -> Session:
        return self._call("start", lambda: session_from_payload(self.client.start_game()))

    def fetch_quests(self, game_id: str) -> List[Quest]:
        return self._call("messages", lambda: quests_from_payload(self.client.list_messages(game_id)))

    def attempt_quest(self, game_id: str, ad_id: str) -> QuestAttempt:
        return self._call("solve", lambda: attempt_from_payload(self.client.solve_message(game_id, ad_id)))

    def list_shop_items(self, game_id: str) -> List[ShopItem]:
        return self._call("shop", lambda: shop_items_from_payload(self.client.list_shop(game_id)))

    def purchase(self, game_id: str, item_id: str) -> PurchaseResult:
        return self._call("buy", lambda: purchase_from_payload(self.client.buy_item(game_id, item_id)))

    def close(self) -> None:
        self.client.close()
