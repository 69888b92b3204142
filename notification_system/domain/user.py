"""User record handed to every notification variant."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Recipient contact data. Values are taken as given, without validation."""

    name: str
    email: str
    phone: str
