"""Composition root for the sample notification run."""

from __future__ import annotations

from .application.service import NotificationService
from .domain.email import EmailNotification
from .domain.sms import SmsNotification
from .domain.user import User


def main() -> int:
    user = User(name="ArKar", email="arkar@gmail.com", phone="959123123")

    email = EmailNotification()
    sms = SmsNotification()

    service = NotificationService()
    service.notify(user, "Hello via email", email)
    service.notify(user, "Hello via sms", sms)
    return 0
