"""Business logic service for short links."""

import logging
import uuid
from typing import Optional, Dict, List, Sequence
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .database.base import ShortLinkDBBase
from .database.cache import RedisCache
from .database.models import ShortLink
from .common.validators import is_valid_url, is_valid_short_code
from .errors import (
    ShortLinkError,
    EmptyInputError,
    InvalidURLError,
    InvalidCodeError,
    LinkNotFoundError,
    ClickAccountingError,
)


class ShortLinkService:
    """Service layer for URL shortening: submission and resolution."""

    def __init__(
        self,
        db: ShortLinkDBBase,
        cache: Optional[RedisCache] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 5,
    ):
        """Initialize short link service.

        Args:
            db: Store instance
            cache: Optional cache instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Extra attempts after a short code conflict
        """
        self.db = db
        self.cache = cache
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries

    async def submit(self, url: str) -> ShortLink:
        """Create a new short link for a URL.

        The link is stored before this returns, so the code resolves right away.

        Args:
            url: The original long URL

        Returns:
            The created link (clicks == 0)

        Raises:
            EmptyInputError: If url is blank
            InvalidURLError: If url is not an absolute http/https URL
            ShortLinkError: If no free short code was found
        """
        url = (url or "").strip()
        if not url:
            raise EmptyInputError()

        is_valid, error = is_valid_url(url)
        if not is_valid:
            raise InvalidURLError(details={"reason": error})

        link = await self._insert_with_fresh_code(url)

        if self.cache:
            await self.cache.set_link(link)

        self.logger.info(f"Created short link: {link.short_code} -> {link.original_url}")
        return link

    async def resolve(self, short_code: str) -> str:
        """Resolve a short code, count the visit and return the redirect target.

        A failure while counting the click is logged and does not stop the
        redirect.

        Args:
            short_code: Code taken from the request path

        Returns:
            The original URL to redirect to

        Raises:
            InvalidCodeError: If the code is empty or malformed (store not queried)
            LinkNotFoundError: If no link matches or the lookup failed
        """
        is_valid, error = is_valid_short_code(short_code)
        if not is_valid:
            raise InvalidCodeError(details={"reason": error})

        link = await self._lookup(short_code)

        try:
            clicks = await self.db.increment_clicks(link.id)
            self.logger.debug(f"Click counted for {short_code}: {clicks}")
        except Exception as e:
            failure = ClickAccountingError(details={"short_code": short_code, "error": str(e)})
            self.logger.error(f"{failure.message} for {short_code}: {e}")

        return link.original_url

    async def get_link(self, short_code: str) -> Optional[ShortLink]:
        """Get a link without counting a click.

        Args:
            short_code: The short code to lookup

        Returns:
            The link or None
        """
        is_valid, _ = is_valid_short_code(short_code)
        if not is_valid:
            return None
        return await self.db.get_link_by_code(short_code)

    async def get_links(self, short_codes: Sequence[str]) -> List[ShortLink]:
        """Get several links (current click counts), in the given order."""
        codes = [c for c in short_codes if is_valid_short_code(c)[0]]
        return await self.db.get_links_by_codes(codes)

    async def list_recent_links(self, limit: int = 100) -> List[ShortLink]:
        """List recently created links, newest first."""
        return await self.db.list_recent_links(limit)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.db.health_check()

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.db.close()
        if self.cache:
            await self.cache.close()

    async def _lookup(self, short_code: str) -> ShortLink:
        """Find the link for a code, cache first."""
        if self.cache:
            cached = await self.cache.get_link(short_code)
            if cached:
                self.logger.debug(f"Cache hit for {short_code}")
                return cached

        try:
            link = await self.db.get_link_by_code(short_code)
        except Exception as e:
            self.logger.error(f"Lookup failed for {short_code}: {e}")
            raise LinkNotFoundError() from e

        if link is None:
            self.logger.warning(f"Short code not found: {short_code}")
            raise LinkNotFoundError()

        if self.cache:
            await self.cache.set_link(link)

        return link

    async def _insert_with_fresh_code(self, url: str) -> ShortLink:
        """Store a new link, drawing a new code on each conflict."""
        for attempt in range(self.max_collision_retries + 1):
            link = ShortLink(
                id=uuid.uuid4().hex,
                original_url=url,
                short_code=self.generator.generate_random(),
                clicks=0,
                created_at=datetime.now(timezone.utc),
            )
            if await self.db.insert_link(link):
                if attempt:
                    self.logger.debug(f"Generated code after {attempt + 1} attempts: {link.short_code}")
                return link

        raise ShortLinkError("Unable to generate unique short code after multiple attempts")
