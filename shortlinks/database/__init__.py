"""Storage layer for short links."""

from .base import ShortLinkDBBase
from .memory import InMemoryShortLinkDB
from .postgres import ShortLinkPostgresDB
from .models import ShortLink

__all__ = ["ShortLinkDBBase", "InMemoryShortLinkDB", "ShortLinkPostgresDB", "ShortLink"]
