"""Application layer: dispatch across notification variants."""

from .service import NotificationService

__all__ = ["NotificationService"]
