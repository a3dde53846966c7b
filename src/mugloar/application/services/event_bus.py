from collections import defaultdict
import logging
from typing import Callable, DefaultDict, List, Type


Handler = Callable[[object], None]


class EventBus:
    """Synchronous publish/subscribe for session progress events.

    A failing subscriber is logged and isolated; it never interrupts play.
    """

    def __init__(self) -> None:
        self._subscribers: DefaultDict[Type[object], List[Handler]] = defaultdict(list)
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: Type[object], handler: Handler) -> None:
        self._subscribers[event_type].append(handler)

    def publish(self, event: object) -> None:
        event_type = type(event)
        for handler in self._subscribers[event_type]:
            try:
                handler(event)
            except Exception:
                handler_name = getattr(handler, "__qualname__", repr(handler))
                self._logger.exception("Progress handler %s failed for %s", handler_name, event_type.__name__)
