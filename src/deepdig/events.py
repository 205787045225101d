from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, List

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class EventBus:
    """Synchronous, in-process publish/subscribe channel.

    Handlers are called in registration order, inline with ``emit``. A handler
    must not re-enter the object that owns the bus, nor unsubscribe itself,
    while a notification is being dispatched.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Hashable, List[Handler]] = {}

    def subscribe(self, event: Hashable, handler: Handler) -> None:
        """Subscribe a handler to an event channel.

        Args:
            event: Event channel key.
            handler: Callable that accepts the event payload as keyword arguments.
        """
        handlers = self._handlers.setdefault(event, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug("Subscribed handler %s to event '%s'", handler, event)

    def unsubscribe(self, event: Hashable, handler: Handler) -> None:
        """Unsubscribe a handler from an event channel."""
        handlers = self._handlers.get(event)
        if not handlers:
            return
        if handler in handlers:
            handlers.remove(handler)
            logger.debug("Unsubscribed handler %s from event '%s'", handler, event)
        if not handlers:
            del self._handlers[event]

    def clear(self) -> None:
        """Remove all handlers for all events (useful in tests)."""
        self._handlers.clear()

    def handler_count(self, event: Hashable) -> int:
        return len(self._handlers.get(event, ()))

    def emit(self, event: Hashable, **kwargs: Any) -> List[Any]:
        """Emit an event with payload to all subscribed handlers.

        Args:
            event: Event channel key.
            **kwargs: Arbitrary payload.

        Returns:
            List of return values from handlers (if any).
        """
        handlers = self._handlers.get(event)
        if not handlers:
            return []
        logger.debug("Emitting '%s' to %d handlers. Payload=%s", event, len(handlers), kwargs)
        results: List[Any] = []
        for handler in list(handlers):
            try:
                results.append(handler(**kwargs))
            except Exception:
                logger.exception("Error in handler %s for event '%s'", handler, event)
                raise
        return results
