"""Tests for JSON API endpoints."""

from typing import Any

import pytest

from patterndocs.config import Config
from patterndocs.server import create_app


class TestGetCatalog:
    """Tests for GET /api/catalog."""

    @pytest.mark.asyncio
    async def test__catalog__returns_categories(self, aiohttp_client: Any, test_config: Config) -> None:
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/catalog")

        assert response.status == 200
        data = await response.json()
        assert [c["name"] for c in data["categories"]] == [
            "Creational Patterns",
            "Structural Patterns",
            "Behavioral Patterns",
        ]
        assert [len(c["patterns"]) for c in data["categories"]] == [5, 7, 10]
        assert data["categories"][0]["patterns"][0] == {
            "name": "Factory Method",
            "url": "/factory-method",
        }


class TestGetTopic:
    """Tests for GET /api/topics/{topic}."""

    @pytest.mark.asyncio
    async def test__existing_topic__returns_rendered_content(
        self, aiohttp_client: Any, test_config: Config
    ) -> None:
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/topics/factory-method")

        assert response.status == 200
        data = await response.json()
        assert data["meta"] == {
            "topic": "factory-method",
            "document_path": "assets/factory-method.md",
            "direction": None,
            "title": "Factory Method",
        }
        assert "<p>Define an interface for creating an object.</p>" in data["content"]

    @pytest.mark.asyncio
    async def test__dir_query__returns_direction(self, aiohttp_client: Any, test_config: Config) -> None:
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/topics/observer?dir=rtl")

        assert response.status == 200
        data = await response.json()
        assert data["meta"]["topic"] == "observer"
        assert data["meta"]["direction"] == "rtl"
        assert data["meta"]["document_path"] == "assets/observer.md"

    @pytest.mark.asyncio
    async def test__empty_dir__is_kept_verbatim(self, aiohttp_client: Any, test_config: Config) -> None:
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/topics/observer?dir=")

        data = await response.json()
        assert data["meta"]["direction"] == ""

    @pytest.mark.asyncio
    async def test__missing_topic__returns_404(self, aiohttp_client: Any, test_config: Config) -> None:
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/topics/nonexistent")

        assert response.status == 404
        data = await response.json()
        assert data["error"] == "Document not found"
        assert data["path"] == "assets/nonexistent.md"


class TestGetConfig:
    """Tests for GET /api/config."""

    @pytest.mark.asyncio
    async def test__live_reload_disabled__reports_false(
        self, aiohttp_client: Any, test_config: Config
    ) -> None:
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/config")

        assert response.status == 200
        assert await response.json() == {"liveReloadEnabled": False}
