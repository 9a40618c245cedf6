"""Tests for API endpoints."""

from shortlinks.shortcode import ShortCodeGenerator


class TestAPIEndpoints:
    """Test API endpoints."""

    async def test_shorten_url(self, client, sample_urls):
        """Test POST /api/shorten."""
        response = await client.post("/api/shorten", json={"url": sample_urls[0]})

        assert response.status_code == 200
        data = response.json()
        assert data["original_url"] == sample_urls[0]
        assert data["clicks"] == 0
        assert len(data["short_code"]) == 7
        assert ShortCodeGenerator.is_valid_format(data["short_code"])
        assert data["short_url"] == f"http://testserver/{data['short_code']}"
        assert data["id"]

    async def test_short_url_uses_forwarded_origin(self, client, sample_urls):
        response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0]},
            headers={"X-Forwarded-Proto": "https", "X-Forwarded-Host": "sho.rt"},
        )

        data = response.json()
        assert data["short_url"] == f"https://sho.rt/{data['short_code']}"

    async def test_shorten_invalid_url(self, client, test_db):
        """Test POST /api/shorten with invalid URL."""
        for url in ("not-a-url", "ftp://x", "javascript:alert(1)"):
            response = await client.post("/api/shorten", json={"url": url})

            assert response.status_code == 400
            assert "valid HTTP or HTTPS URL" in response.json()["detail"]

        assert await test_db.list_recent_links() == []

    async def test_shorten_blank_url(self, client):
        response = await client.post("/api/shorten", json={"url": "  "})

        assert response.status_code == 400
        assert response.json()["detail"] == "Please enter a URL to shorten"

    async def test_shorten_missing_body(self, client):
        response = await client.post("/api/shorten", json={})

        assert response.status_code == 422

    async def test_get_link_info(self, client, sample_urls):
        """Test GET /api/links/{short_code}."""
        create_response = await client.post("/api/shorten", json={"url": sample_urls[0]})
        short_code = create_response.json()["short_code"]

        response = await client.get(f"/api/links/{short_code}")

        assert response.status_code == 200
        data = response.json()
        assert data["short_code"] == short_code
        assert data["original_url"] == sample_urls[0]
        assert data["clicks"] == 0

    async def test_link_info_reflects_clicks(self, client, sample_urls):
        create_response = await client.post("/api/shorten", json={"url": sample_urls[0]})
        short_code = create_response.json()["short_code"]

        await client.get(f"/{short_code}")
        await client.get(f"/{short_code}")

        response = await client.get(f"/api/links/{short_code}")
        assert response.json()["clicks"] == 2

    async def test_get_link_info_not_found(self, client):
        """Test GET /api/links/{short_code} for nonexistent code."""
        response = await client.get("/api/links/nonexistent")

        assert response.status_code == 404

    async def test_list_links(self, client, sample_urls):
        for url in sample_urls:
            await client.post("/api/shorten", json={"url": url})

        response = await client.get("/api/links", params={"limit": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [link["original_url"] for link in data["links"]] == [sample_urls[2], sample_urls[1]]

    async def test_list_links_limit_bounds(self, client):
        assert (await client.get("/api/links", params={"limit": 0})).status_code == 422
        assert (await client.get("/api/links", params={"limit": 201})).status_code == 422

    async def test_health_check(self, client):
        """Test GET /api/health."""
        response = await client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "healthy"
        assert data["cache"] == "healthy"

    async def test_shorten_long_url_is_bad_request(self, client, test_db):
        response = await client.post("/api/shorten", json={"url": "https://example.com/" + "a" * 5000})

        assert response.status_code == 400
        assert "too long" in response.json()["detail"]
        assert await test_db.list_recent_links() == []


class TestAPIStoreUnavailable:
    """API answers with 503 when the store cannot be reached."""

    async def test_link_info_unavailable(self, down_client):
        response = await down_client.get("/api/links/abc1234")

        assert response.status_code == 503
        assert response.json()["detail"] == "Service temporarily unavailable"

    async def test_list_links_unavailable(self, down_client):
        response = await down_client.get("/api/links")

        assert response.status_code == 503

    async def test_shorten_unavailable(self, down_client):
        response = await down_client.post("/api/shorten", json={"url": "https://example.com/x"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal error"

    async def test_health_unhealthy(self, down_client):
        response = await down_client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "unhealthy"
