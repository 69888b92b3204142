"""SMS notification variant.

Mental model refresher:
- Same shape as the email variant; only the address field and wording differ.
- The dispatcher never knows which of the two it was handed.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import DeliveryFailed
from ..types import EmitFn
from .user import User


def format_sms_confirmation(user: User, message: str) -> str:
    return f"SMS sent to {user.phone}: {message}"


@dataclass(frozen=True)
class SmsNotification:
    emit: EmitFn = print

    def send(self, user: User, message: str) -> None:
        line = format_sms_confirmation(user, message)
        try:
            self.emit(line)
        except Exception as exc:
            raise DeliveryFailed("sms", str(exc)) from exc
