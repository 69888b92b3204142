"""Errors raised at the notification capability boundary."""

from __future__ import annotations


class DeliveryFailed(RuntimeError):
    """A notification variant could not deliver its message."""

    def __init__(self, medium: str, reason: str) -> None:
        super().__init__(f"{medium} delivery failed: {reason}")
        self.medium = medium
        self.reason = reason
