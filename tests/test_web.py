"""Tests for the admin page, interstitial page and static assets."""

import json

import pytest

from config import Config
from web_app import create_app


@pytest.mark.asyncio
class TestInterstitialPage:
    """Test GET /{code}."""

    async def test_known_code(self, client, seed_links):
        seed_links({"abc": "https://x.com"})

        response = await client.get("/abc")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "https://x.com" in response.text
        assert 'id="continueBtn" class="btn" disabled' in response.text
        assert '<div id="timer">15</div>' in response.text
        assert "/public/countdown.js" in response.text

    async def test_unknown_code(self, client):
        response = await client.get("/doesnotexist")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")
        assert "Link not found" in response.text

    async def test_unknown_code_with_empty_store(self, client, links_file):
        links_file.write_text("", encoding="utf-8")

        response = await client.get("/abc")

        assert response.status_code == 404

    async def test_target_embedded_as_json(self, client, seed_links):
        target = 'https://x.com/?q="</script><script>alert(1)</script>'
        seed_links({"evil": target})

        response = await client.get("/evil")

        assert response.status_code == 200
        assert "<script>alert(1)</script>" not in response.text
        start = response.text.index("target: ") + len("target: ")
        literal, _ = json.JSONDecoder().raw_decode(response.text[start:])
        assert literal == target

    async def test_lookup_does_not_mutate_store(self, client, seed_links, links_file):
        seed_links({"abc": "https://x.com"})
        before = links_file.read_bytes()

        await client.get("/abc")
        await client.get("/missing")

        assert links_file.read_bytes() == before

    async def test_created_link_resolves(self, client):
        created = await client.post("/api/create", json={"target": "https://example.org/path"})
        short = created.json()["short"]

        response = await client.get(f"/{short}")

        assert response.status_code == 200
        assert "https://example.org/path" in response.text

    async def test_wait_seconds_from_config(self, store, service, links_file, seed_links):
        from httpx import ASGITransport, AsyncClient

        seed_links({"abc": "https://x.com"})
        config = Config(links_file=str(links_file), wait_seconds=5)
        app = create_app(store_instance=store, service_instance=service, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
            response = await ac.get("/abc")

        assert '<div id="timer">5</div>' in response.text
        assert "wait: 5}" in response.text


@pytest.mark.asyncio
class TestAdminPage:
    """Test GET /admin."""

    async def test_form(self, client):
        response = await client.get("/admin")

        assert response.status_code == 200
        assert 'action="/api/create"' in response.text
        assert 'name="target"' in response.text
        assert 'name="code"' in response.text
        assert 'id="created"' not in response.text

    async def test_created_banner(self, client):
        response = await client.get(
            "/admin",
            params={"created": "http://testserver/abc", "short": "abc", "target": "https://x.com"},
        )

        assert response.status_code == 200
        assert 'id="created"' in response.text
        assert 'href="http://testserver/abc"' in response.text

    async def test_banner_is_escaped(self, client):
        response = await client.get("/admin", params={"created": '"><script>x()</script>'})

        assert "<script>x()</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    @pytest.mark.parametrize("created", ["javascript:alert(1)", " JavaScript:alert(1)", "data:text/html,x"])
    async def test_non_http_created_is_not_linked(self, client, created):
        response = await client.get("/admin", params={"created": created})

        assert response.status_code == 200
        assert 'id="created"' in response.text
        assert "<a href=" not in response.text

    async def test_https_created_is_linked(self, client):
        response = await client.get("/admin", params={"created": "HTTPS://short.link/abc"})

        assert 'href="HTTPS://short.link/abc"' in response.text

    async def test_admin_does_not_touch_store(self, client, links_file):
        await client.get("/admin", params={"created": "x"})
        assert not links_file.exists()


@pytest.mark.asyncio
class TestStaticAssets:
    """Test /public/*."""

    async def test_stylesheet(self, client):
        response = await client.get("/public/style.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    async def test_countdown_script(self, client):
        response = await client.get("/public/countdown.js")

        assert response.status_code == 200
        assert "continueBtn" in response.text

    async def test_missing_asset(self, client):
        response = await client.get("/public/nope.css")

        assert response.status_code == 404
