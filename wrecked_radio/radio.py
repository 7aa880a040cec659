from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from .channel import Channel

logger = logging.getLogger(__name__)


class WreckedRadio:
    """Registry of channels: one Channel instance per name, created on first use."""

    def __init__(self):
        self._lock = threading.Lock()
        self._channels: Dict[str, Channel] = {}

    def channel(self, channel_name: str) -> Channel:
        with self._lock:
            channel = self._channels.get(channel_name)
            if channel is None:
                channel = Channel(channel_name)
                self._channels[channel_name] = channel
                logger.debug("wrecked_radio channel created: %r", channel_name)
        return channel

    def __contains__(self, channel_name: object) -> bool:
        with self._lock:
            return channel_name in self._channels

    def channel_names(self) -> list[str]:
        with self._lock:
            return sorted(self._channels)

    def get_stats(self) -> Dict[str, object]:
        with self._lock:
            channels = dict(self._channels)
        per_channel = {name: channel.get_stats() for name, channel in sorted(channels.items())}
        return {
            "channel_count": len(per_channel),
            "channels": list(per_channel),
            "subscriber_count": sum(s["subscriber_count"] for s in per_channel.values()),
            "request_handler_count": sum(
                s["request_handler_count"] for s in per_channel.values()
            ),
            "per_channel": per_channel,
        }


Bus = WreckedRadio

_GLOBAL_RADIO: Optional[WreckedRadio] = None
_GLOBAL_LOCK = threading.Lock()


def get_global_radio() -> WreckedRadio:
    global _GLOBAL_RADIO
    with _GLOBAL_LOCK:
        if _GLOBAL_RADIO is None:
            _GLOBAL_RADIO = WreckedRadio()
    return _GLOBAL_RADIO
