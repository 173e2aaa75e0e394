"""Errors raised while decoding a sensor line."""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for lines that cannot be turned into a record."""


class BufferTooShortError(DecodeError):
    def __init__(self, length: int, required: int) -> None:
        super().__init__(
            f"sensor line is {length} bytes long, at least {required} are required"
        )
        self.length = length
        self.required = required


class TimestampError(DecodeError):
    """The date/time columns failed strict parsing."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f'parsing time "{value}": {reason}')
        self.value = value
        self.reason = reason
