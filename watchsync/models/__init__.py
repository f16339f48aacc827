# Enable postponed annotations to avoid runtime import issues and allow future-style typing
from __future__ import annotations

from .presence import Presence

__all__ = [
    "Presence",
]
