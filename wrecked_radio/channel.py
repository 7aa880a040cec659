from __future__ import annotations

import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional

from .errors import NoHandlerError

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Any]
RequestHandler = Callable[[Any], Any]
Unsubscribe = Callable[[], None]


class Channel:
    """Named scope carrying events (pub/sub) and requests (request/reply).

    Channels are normally obtained through ``WreckedRadio.channel(name)``::

        channel = radio.channel("users")
        channel.on("login", lambda user: print(f"Oh, hi {user['name']}"))
        channel.trigger("login", {"name": "Mark"})

        channel.reply("greet", lambda user: f"hi {user['name']}")
        channel.request("greet", {"name": "Mark"})  # -> "hi Mark"

    All dispatch is synchronous on the caller's thread. Handler exceptions are
    not caught: they surface from ``trigger``/``request`` and a failing event
    handler stops delivery to the handlers subscribed after it.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._lock = threading.RLock()
        self._events: Dict[str, Dict[str, EventHandler]] = {}
        self._requests: Dict[str, RequestHandler] = {}

    def __repr__(self) -> str:
        return f"<Channel {self.name!r}>"

    # events

    def on(self, event_name: str, handler: EventHandler) -> Unsubscribe:
        """Subscribe ``handler`` to ``event_name``; returns an unsubscribe callable."""
        token = str(uuid.uuid4())
        with self._lock:
            self._events.setdefault(event_name, {})[token] = handler
        logger.debug("wrecked_radio subscribe %s/%s token=%s", self.name, event_name, token)

        def unsubscribe() -> None:
            self._remove_subscription(event_name, token)

        return unsubscribe

    def trigger(self, event_name: str, payload: Any = None) -> None:
        handlers = self._copy_handlers(event_name)
        if not handlers:
            return
        logger.debug(
            "wrecked_radio trigger %s/%s handlers=%d", self.name, event_name, len(handlers)
        )
        for handler in handlers:
            handler(payload)

    def _remove_subscription(self, event_name: str, token: str) -> None:
        with self._lock:
            handlers = self._events.get(event_name)
            if handlers is None or handlers.pop(token, None) is None:
                return
            if not handlers:
                self._events.pop(event_name, None)
        logger.debug("wrecked_radio unsubscribe %s/%s token=%s", self.name, event_name, token)

    def _copy_handlers(self, event_name: str) -> list[EventHandler]:
        with self._lock:
            return list(self._events.get(event_name, {}).values())

    # requests

    def reply(self, request_name: str, handler: RequestHandler) -> "Channel":
        """Make ``handler`` the one responder for ``request_name`` (replacing any other)."""
        with self._lock:
            replaced = request_name in self._requests
            self._requests[request_name] = handler
        logger.debug(
            "wrecked_radio reply %s/%s replaced=%s", self.name, request_name, replaced
        )
        return self

    def stop_replying(self, request_name: str) -> "Channel":
        with self._lock:
            removed = self._requests.pop(request_name, None) is not None
        if removed:
            logger.debug("wrecked_radio stop_replying %s/%s", self.name, request_name)
        return self

    def has_reply(self, request_name: str) -> bool:
        return self._get_request_handler(request_name) is not None

    def request(self, request_name: str, payload: Any = None) -> Any:
        """Ask the registered responder for ``request_name`` and return its answer.

        Raises ``NoHandlerError`` when nothing replies to ``request_name``.
        """
        handler = self._get_request_handler(request_name)
        if handler is None:
            logger.debug("wrecked_radio request %s/%s: no handler", self.name, request_name)
            raise NoHandlerError(request_name)
        return handler(payload)

    def _get_request_handler(self, request_name: str) -> Optional[RequestHandler]:
        with self._lock:
            return self._requests.get(request_name)

    # diagnostics

    def get_stats(self) -> Dict[str, object]:
        with self._lock:
            events = sorted(self._events)
            subscriber_count = sum(len(handlers) for handlers in self._events.values())
            requests = sorted(self._requests)
        return {
            "event_count": len(events),
            "subscriber_count": subscriber_count,
            "request_handler_count": len(requests),
            "events": events,
            "requests": requests,
        }
