"""Tests for live reload."""

import asyncio
from pathlib import Path
from typing import Any

import pytest

from patterndocs.app_keys import live_reload_manager_key
from patterndocs.config import Config
from patterndocs.live import LiveReloadManager
from patterndocs.server import create_app


class TestLiveReloadManager:
    """Tests for path mapping in LiveReloadManager."""

    def test__document__maps_to_topic_path(self, root_dir: Path) -> None:
        manager = LiveReloadManager(root_dir)

        assert manager.to_topic_path(root_dir / "assets" / "observer.md") == "/observer"

    def test__markdown_under_assets__matches(self, root_dir: Path) -> None:
        manager = LiveReloadManager(root_dir)

        assert manager.matches_patterns(root_dir / "assets" / "observer.md")

    def test__other_files__do_not_match(self, root_dir: Path) -> None:
        manager = LiveReloadManager(root_dir)

        assert not manager.matches_patterns(root_dir / "assets" / "logo.png")
        assert not manager.matches_patterns(root_dir / "README.md")

    def test__custom_patterns__are_used(self, root_dir: Path) -> None:
        manager = LiveReloadManager(root_dir, watch_patterns=["*.txt"])

        assert manager.matches_patterns(root_dir / "assets" / "notes.txt")
        assert not manager.matches_patterns(root_dir / "assets" / "observer.md")

    @pytest.mark.asyncio
    async def test__missing_assets_dir__start_is_noop(self, tmp_path: Path) -> None:
        manager = LiveReloadManager(tmp_path)

        await manager.start()
        await manager.stop()


class TestLiveReloadWebSocket:
    """Tests for GET /ws/live-reload."""

    @pytest.mark.asyncio
    async def test__broadcast__reaches_connected_client(
        self, aiohttp_client: Any, test_config: Config
    ) -> None:
        app = create_app(test_config.with_overrides(live_reload_enabled=True))
        client = await aiohttp_client(app)
        manager = app[live_reload_manager_key]

        ws = await client.ws_connect("/ws/live-reload")
        for _ in range(100):
            if manager.connection_count:
                break
            await asyncio.sleep(0.01)

        await manager.broadcast_reload("/observer")
        message = await ws.receive_json(timeout=5)

        assert message == {"type": "reload", "path": "/observer"}
        await ws.close()
