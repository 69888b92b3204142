"""Domain layer: user record, notification capability and its variants."""

from .email import EmailNotification, format_email_confirmation
from .notification import Notification
from .sms import SmsNotification, format_sms_confirmation
from .user import User

__all__ = [
    "EmailNotification",
    "Notification",
    "SmsNotification",
    "User",
    "format_email_confirmation",
    "format_sms_confirmation",
]
