"""Abstract base class for short link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List, Sequence

from .models import ShortLink


class ShortLinkDBBase(ABC):
    """Abstract base class for short link storage operations."""

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Database connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def insert_link(self, link: ShortLink) -> bool:
        """Insert a new short link.

        Args:
            link: The link to store

        Returns:
            True if created, False if link.short_code already exists
        """
        pass

    @abstractmethod
    async def get_link_by_code(self, short_code: str) -> Optional[ShortLink]:
        """Point lookup by short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The matching link, or None

        Raises:
            Exception: Store errors propagate to the caller
        """
        pass

    @abstractmethod
    async def get_links_by_codes(self, short_codes: Sequence[str]) -> List[ShortLink]:
        """Bulk lookup by short code.

        Args:
            short_codes: Codes to lookup

        Returns:
            Matching links in the order of short_codes, unknown codes skipped
        """
        pass

    @abstractmethod
    async def increment_clicks(self, link_id: str) -> int:
        """Atomically add one to a link's click counter.

        Args:
            link_id: The id of the link

        Returns:
            The new click count

        Raises:
            LinkNotFoundError: If no link has this id
        """
        pass

    @abstractmethod
    async def list_recent_links(self, limit: int = 100) -> List[ShortLink]:
        """List recently created links, newest first.

        Args:
            limit: Maximum number of links to return

        Returns:
            List of links
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass
