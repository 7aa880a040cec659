"""Deliver channel events to Qt code on the thread that owns the bridge."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from PyQt6 import QtCore, sip

from .channel import Channel, Unsubscribe

logger = logging.getLogger(__name__)


class _BridgeSubscription:
    __slots__ = ("handler", "active", "channel_unsubscribe")

    def __init__(self, handler: Callable[[Any], Any]):
        self.handler = handler
        self.active = True
        self.channel_unsubscribe: Optional[Unsubscribe] = None

    def cancel(self) -> None:
        self.active = False
        if self.channel_unsubscribe is not None:
            self.channel_unsubscribe()


def _cancel_all(subscriptions: Dict[int, _BridgeSubscription]) -> None:
    for subscription in list(subscriptions.values()):
        subscription.cancel()
    subscriptions.clear()


class QtChannelBridge(QtCore.QObject):
    """Re-emits channel events through a queued signal.

    Handlers registered through the bridge run later, from the Qt event loop of
    the bridge's thread, instead of inside ``Channel.trigger``. Deliveries still
    queued when a subscription is cancelled are dropped. Destroying the bridge
    (directly or through its Qt parent) cancels everything it subscribed.
    """

    event_dispatched = QtCore.pyqtSignal(object, object)

    def __init__(self, channel: Channel, parent: Optional[QtCore.QObject] = None):
        super().__init__(parent)
        self._channel = channel
        self._subscriptions: Dict[int, _BridgeSubscription] = {}
        self.event_dispatched.connect(
            self._invoke_handler,
            QtCore.Qt.ConnectionType.QueuedConnection,
        )
        # must not reference self: runs while the C++ object is being torn down
        subscriptions = self._subscriptions
        self.destroyed.connect(lambda _obj=None: _cancel_all(subscriptions))

    @property
    def channel(self) -> Channel:
        return self._channel

    def on(self, event_name: str, handler: Callable[[Any], Any]) -> Unsubscribe:
        subscription = _BridgeSubscription(handler)
        subscriptions = self._subscriptions
        key = id(subscription)

        def _forward(payload: Any) -> None:
            if sip.isdeleted(self):
                subscription.cancel()
                subscriptions.pop(key, None)
                return
            self.event_dispatched.emit(subscription, payload)

        def unsubscribe() -> None:
            subscription.cancel()
            subscriptions.pop(key, None)

        subscription.channel_unsubscribe = self._channel.on(event_name, _forward)
        subscriptions[key] = subscription
        return unsubscribe

    def subscription_count(self) -> int:
        return len(self._subscriptions)

    def stop(self) -> None:
        _cancel_all(self._subscriptions)

    @QtCore.pyqtSlot(object, object)
    def _invoke_handler(self, subscription: _BridgeSubscription, payload: Any) -> None:
        if not subscription.active:
            return
        try:
            subscription.handler(payload)
        except Exception:
            logger.exception("wrecked_radio qt bridge handler failed on %s", self._channel.name)
