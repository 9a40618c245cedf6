"""Tests for the in-memory store."""

import asyncio
import uuid

import pytest

from shortlinks.database.models import ShortLink
from shortlinks.errors import LinkNotFoundError


def make_link(code, url="https://example.com/"):
    return ShortLink(id=uuid.uuid4().hex, original_url=url, short_code=code)


class TestInMemoryStore:
    """Store contract, checked against the memory implementation."""

    async def test_insert_and_lookup(self, test_db):
        link = make_link("abc1234")

        assert await test_db.insert_link(link)

        found = await test_db.get_link_by_code("abc1234")
        assert found == link

    async def test_duplicate_code_rejected(self, test_db):
        assert await test_db.insert_link(make_link("abc1234", "https://a.example/"))
        assert not await test_db.insert_link(make_link("abc1234", "https://b.example/"))

        found = await test_db.get_link_by_code("abc1234")
        assert found.original_url == "https://a.example/"

    async def test_lookup_missing(self, test_db):
        assert await test_db.get_link_by_code("missing") is None

    async def test_returned_links_are_copies(self, test_db):
        await test_db.insert_link(make_link("abc1234"))

        found = await test_db.get_link_by_code("abc1234")
        found.clicks = 99
        found.original_url = "https://evil.example/"

        again = await test_db.get_link_by_code("abc1234")
        assert again.clicks == 0
        assert again.original_url == "https://example.com/"

    async def test_increment_returns_new_count(self, test_db):
        link = make_link("abc1234")
        await test_db.insert_link(link)

        assert await test_db.increment_clicks(link.id) == 1
        assert await test_db.increment_clicks(link.id) == 2

    async def test_increment_unknown_id(self, test_db):
        with pytest.raises(LinkNotFoundError):
            await test_db.increment_clicks("no-such-id")

    async def test_concurrent_increments_are_not_lost(self, test_db):
        link = make_link("abc1234")
        await test_db.insert_link(link)

        results = await asyncio.gather(*[test_db.increment_clicks(link.id) for _ in range(100)])

        assert sorted(results) == list(range(1, 101))
        assert (await test_db.get_link_by_code("abc1234")).clicks == 100

    async def test_get_links_by_codes(self, test_db):
        for code in ("aaa1111", "bbb2222", "ccc3333"):
            await test_db.insert_link(make_link(code))

        found = await test_db.get_links_by_codes(["ccc3333", "zzz0000", "aaa1111"])

        assert [link.short_code for link in found] == ["ccc3333", "aaa1111"]

    async def test_list_recent_links_limit(self, test_db):
        for i in range(5):
            await test_db.insert_link(make_link(f"code{i:03d}"))

        recent = await test_db.list_recent_links(limit=3)

        assert [link.short_code for link in recent] == ["code004", "code003", "code002"]


class TestShortLinkModel:
    """Test the ShortLink dataclass."""

    def test_to_dict_from_dict(self):
        link = make_link("abc1234")

        data = link.to_dict()
        assert data["clicks"] == 0
        assert isinstance(data["created_at"], str)

        assert ShortLink.from_dict(data) == link

    def test_from_dict_naive_timestamp_is_utc(self):
        link = ShortLink.from_dict({
            "id": 1,
            "original_url": "https://example.com/",
            "short_code": "abc1234",
            "clicks": None,
            "created_at": "2024-01-01T12:00:00",
        })

        assert link.id == "1"
        assert link.clicks == 0
        assert link.created_at.utcoffset().total_seconds() == 0
