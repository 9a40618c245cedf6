"""
Home page state: the short codes this visitor created.

The state travels in a cookie. Routes read it, apply a transition and write it
back; the page is rendered from the state plus freshly loaded links.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from shortlinks.database.models import ShortLink
from shortlinks.shortcode import ShortCodeGenerator
from shortlinks.common.url_builder import build_short_url

COOKIE_NAME = "recent_links"
DEFAULT_LIMIT = 20


@dataclass(frozen=True)
class RecentLinks:
    """Short codes created by one visitor, newest first."""

    codes: Tuple[str, ...] = ()
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_cookie(cls, value: str, limit: int = DEFAULT_LIMIT) -> "RecentLinks":
        """Parse the cookie value. Unknown or malformed entries are dropped."""
        codes = []
        for code in (value or "").split("."):
            if ShortCodeGenerator.is_valid_format(code) and code not in codes:
                codes.append(code)
        return cls(codes=tuple(codes[:limit]), limit=limit)

    def to_cookie(self) -> str:
        return ".".join(self.codes)


@dataclass(frozen=True)
class LinkRow:
    """One line of the recent links list."""

    short_code: str
    short_url: str
    original_url: str
    clicks: int


def remember(state: RecentLinks, short_code: str) -> RecentLinks:
    """Put a code at the front of the list."""
    codes = (short_code,) + tuple(c for c in state.codes if c != short_code)
    return RecentLinks(codes=codes[:state.limit], limit=state.limit)


def build_link_rows(state: RecentLinks, links: Sequence[ShortLink], base_url: str) -> List[LinkRow]:
    """Map state plus loaded links to display rows, in state order.

    Codes without a loaded link are skipped.
    """
    by_code = {link.short_code: link for link in links}
    rows = []
    for code in state.codes:
        link = by_code.get(code)
        if link is None:
            continue
        rows.append(LinkRow(
            short_code=code,
            short_url=build_short_url(code, base_url),
            original_url=link.original_url,
            clicks=link.clicks,
        ))
    return rows
