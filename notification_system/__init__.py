"""User notifications over pluggable delivery variants (email, SMS)."""

from .application.service import NotificationService
from .domain.email import EmailNotification, format_email_confirmation
from .domain.notification import Notification
from .domain.sms import SmsNotification, format_sms_confirmation
from .domain.user import User
from .errors import DeliveryFailed

__all__ = [
    "DeliveryFailed",
    "EmailNotification",
    "Notification",
    "NotificationService",
    "SmsNotification",
    "User",
    "format_email_confirmation",
    "format_sms_confirmation",
]
