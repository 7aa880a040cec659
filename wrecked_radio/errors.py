"""Errors raised by the radio itself (never by user handlers)."""

from __future__ import annotations


class WreckedRadioError(RuntimeError):
    """Base class for failures originated by wrecked_radio."""


class NoHandlerError(WreckedRadioError):
    """A request was made but nothing replies to it on that channel."""

    def __init__(self, request_name: str):
        self.request_name = request_name
        super().__init__(f'WreckedRadio: the request "{request_name}" has no registered handler')
