"""Exceptions raised by the window table."""

from __future__ import annotations

from typing import Any, Optional

from .geometry import Rectangle


class WindowlessError(Exception):
    pass


class OutsideRoot(WindowlessError):
    """The rectangle shares no area with the root window."""

    def __init__(self, rect: Rectangle, root_rect: Rectangle) -> None:
        super().__init__(f"{rect} does not overlap root window {root_rect}")
        self.rect = rect
        self.root_rect = root_rect


class InvalidHandle(WindowlessError, KeyError):
    """The key is stale, was issued by another table, or is not a key at all."""

    def __init__(self, key: Any, reason: Optional[str] = None) -> None:
        message = f"invalid window handle {key!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


__all__ = ["WindowlessError", "OutsideRoot", "InvalidHandle"]
