from urllib.parse import quote

import httpx

from mugloar.infrastructure.resilient_http import get_json_with_retry, post_json_with_retry


_DOMAIN_REJECTION_STATUSES = frozenset({400, 404, 410})


def _segment(value: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValueError("path segment is required")
    return quote(text, safe="")


class MugloarClient:
    """Thin JSON client for the Dragons of Mugloar v2 API."""

    BASE_URL = "https://www.dragonsofmugloar.com/api/v2"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
        retries: int = 2,
        backoff_seconds: float = 0.2,
        post_retries: int = 0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._retries = retries
        self._post_retries = post_retries
        self._backoff_seconds = backoff_seconds
        self.client = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def _get(self, path: str):
        return get_json_with_retry(
            self.client,
            path,
            headers={"Accept": "application/json"},
            retries=self._retries,
            backoff_seconds=self._backoff_seconds,
        )

    def _post(self, path: str, *, accept_statuses: frozenset[int] = frozenset()):
        return post_json_with_retry(
            self.client,
            path,
            headers={"Accept": "application/json"},
            retries=self._post_retries,
            backoff_seconds=self._backoff_seconds,
            accept_statuses=accept_statuses,
        )

    def start_game(self) -> dict:
        return self._post("/game/start")

    def list_messages(self, game_id: str) -> list:
        return self._get(f"/{_segment(game_id)}/messages")

    def solve_message(self, game_id: str, ad_id: str) -> dict:
        return self._post(
            f"/{_segment(game_id)}/solve/{_segment(ad_id)}",
            accept_statuses=_DOMAIN_REJECTION_STATUSES,
        )

    def list_shop(self, game_id: str) -> list:
        return self._get(f"/{_segment(game_id)}/shop")

    def buy_item(self, game_id: str, item_id: str) -> dict:
        return self._post(
            f"/{_segment(game_id)}/shop/buy/{_segment(item_id)}",
            accept_statuses=_DOMAIN_REJECTION_STATUSES,
        )

    def close(self) -> None:
        self.client.close()
