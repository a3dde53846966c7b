import logging
import os

from mugloar.application.services.event_bus import EventBus
from mugloar.application.services.session_controller import SessionController
from mugloar.domain.gateways import GameGateway
from mugloar.infrastructure.mugloar_client import MugloarClient
from mugloar.infrastructure.mugloar_gateway import MugloarGateway
from mugloar.presentation.console_reporter import ConsoleReporter


def _is_truthy(value: str | None, *, default: str = "0") -> bool:
    normalized = str(value if value is not None else default).strip().lower()
    return normalized in {"1", "true", "yes"}


def configure_logging() -> None:
    level_name = os.getenv("MUGLOAR_LOG_LEVEL", "WARNING").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def max_rounds_from_env() -> int | None:
    raw = os.getenv("MUGLOAR_MAX_ROUNDS", "").strip()
    if not raw:
        return None
    return max(0, int(raw))


def create_gateway() -> MugloarGateway:
    base_url = os.getenv("MUGLOAR_API_BASE_URL", MugloarClient.BASE_URL)
    timeout = float(os.getenv("MUGLOAR_HTTP_TIMEOUT_S", "10"))
    retries = int(os.getenv("MUGLOAR_HTTP_RETRIES", "2"))
    backoff_seconds = float(os.getenv("MUGLOAR_HTTP_BACKOFF_S", "0.2"))

    client = MugloarClient(
        base_url=base_url,
        timeout=timeout,
        retries=retries,
        backoff_seconds=backoff_seconds,
    )
    return MugloarGateway(client)


def create_session_controller(gateway: GameGateway | None = None) -> SessionController:
    event_bus = EventBus()
    if not _is_truthy(os.getenv("MUGLOAR_QUIET")):
        ConsoleReporter().register(event_bus)
    return SessionController(gateway or create_gateway(), event_bus=event_bus)
