"""Email notification variant.

Mental model refresher:
- Domain modules decide what a channel says and who it is addressed to.
- Where the line ends up is the injected `emit` function's business
  (stdout by default).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import DeliveryFailed
from ..types import EmitFn
from .user import User


def format_email_confirmation(user: User, message: str) -> str:
    return f"Email sent to {user.email}: {message}"


@dataclass(frozen=True)
class EmailNotification:
    emit: EmitFn = print

    def send(self, user: User, message: str) -> None:
        """Emit the email confirmation line addressed to `user.email`."""
        line = format_email_confirmation(user, message)
        try:
            self.emit(line)
        except Exception as exc:
            raise DeliveryFailed("email", str(exc)) from exc
