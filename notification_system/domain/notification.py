"""Notification capability shared by every delivery variant.

Mental model refresher:
- This is the port the dispatcher depends on.
- Variants satisfy it structurally; they do not inherit from it.
- Adding a medium means adding a class with a matching `send`, nothing else.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .user import User


@runtime_checkable
class Notification(Protocol):
    def send(self, user: User, message: str) -> None:
        """Deliver `message` to `user` through this variant's medium."""
        ...
