"""In-process message bus: named channels carrying events and requests."""

from .channel import Channel
from .errors import NoHandlerError, WreckedRadioError
from .radio import Bus, WreckedRadio, get_global_radio

__all__ = [
    "Bus",
    "Channel",
    "NoHandlerError",
    "WreckedRadio",
    "WreckedRadioError",
    "get_global_radio",
]
