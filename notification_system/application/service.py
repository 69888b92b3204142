"""Application dispatcher for notification delivery.

Mental model refresher:
- Application layer coordinates the use-case; it holds no channel rules.
- `notify` hands the call to whichever variant the caller chose.
- Swapping the variant changes the medium without touching this module.
"""

from __future__ import annotations

from ..domain.notification import Notification
from ..domain.user import User


class NotificationService:
    def notify(self, user: User, message: str, notification: Notification) -> None:
        """Deliver one message through `notification`.

        Errors raised by the variant (e.g. `DeliveryFailed`) reach the caller
        unchanged.
        """
        notification.send(user, message)
