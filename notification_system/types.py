"""Shared type aliases for the notification package."""

from __future__ import annotations

from typing import Callable

EmitFn = Callable[[str], None]
