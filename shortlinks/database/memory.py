"""In-process short link store.

Used when no database URL is configured and by the test suite. Links live only
as long as the process does.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Optional, List, Dict, Sequence

from .base import ShortLinkDBBase
from .models import ShortLink
from ..errors import LinkNotFoundError


class InMemoryShortLinkDB(ShortLinkDBBase):
    """Dictionary-backed store keyed by short code."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        super().__init__("memory://")
        self.logger = logger or logging.getLogger(__name__)
        self._by_code: Dict[str, ShortLink] = {}
        self._code_by_id: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def insert_link(self, link: ShortLink) -> bool:
        async with self._lock:
            if link.short_code in self._by_code:
                self.logger.warning(f"Short code already exists: {link.short_code}")
                return False
            self._by_code[link.short_code] = replace(link)
            self._code_by_id[link.id] = link.short_code
        self.logger.debug(f"Stored short link: {link.short_code} -> {link.original_url}")
        return True

    async def get_link_by_code(self, short_code: str) -> Optional[ShortLink]:
        link = self._by_code.get(short_code)
        # Hand out copies so callers cannot mutate stored state
        return replace(link) if link else None

    async def get_links_by_codes(self, short_codes: Sequence[str]) -> List[ShortLink]:
        return [replace(self._by_code[c]) for c in short_codes if c in self._by_code]

    async def increment_clicks(self, link_id: str) -> int:
        async with self._lock:
            code = self._code_by_id.get(link_id)
            if code is None:
                raise LinkNotFoundError(f"No short link with id '{link_id}'")
            link = self._by_code[code]
            link.clicks += 1
            return link.clicks

    async def list_recent_links(self, limit: int = 100) -> List[ShortLink]:
        # Newest insertion first among equal timestamps
        newest_first = reversed(list(self._by_code.values()))
        links = sorted(newest_first, key=lambda link: link.created_at, reverse=True)
        return [replace(link) for link in links[:limit]]

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug("Memory store closed")
