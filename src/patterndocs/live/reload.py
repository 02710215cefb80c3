"""WebSocket-based live reload for development mode.

Monitors topic documents under assets/ for changes and notifies connected
clients via WebSocket so open topic pages reload.
"""

import asyncio
import json
import logging
import weakref
from pathlib import Path

from aiohttp import WSMsgType, web
from watchfiles import Change, awatch

from patterndocs.core.viewer import ASSETS_PREFIX, DOCUMENT_SUFFIX

logger = logging.getLogger(__name__)


class LiveReloadManager:
    """Manages WebSocket connections and file watching for live reload.

    Coordinates between file system watcher and connected WebSocket clients
    to provide automatic page refresh on document changes.
    """

    def __init__(
        self,
        root_dir: Path,
        watch_patterns: list[str] | None = None,
    ) -> None:
        """Initialize the live reload manager.

        Args:
            root_dir: Documentation root containing the assets/ directory
            watch_patterns: Glob patterns matched against paths under assets/ (default: ["*.md"])
        """
        self._root_dir = root_dir
        self._assets_dir = root_dir / ASSETS_PREFIX.rstrip("/")
        self._watch_patterns = watch_patterns or ["*.md"]
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()
        self._watch_task: asyncio.Task[None] | None = None

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        if not self._assets_dir.is_dir():
            logger.warning(f"Live reload disabled: {self._assets_dir} is not a directory")
            return
        logger.info(f"Watching {self._assets_dir} for changes")
        self._watch_task = asyncio.create_task(self._watch_files())

    async def stop(self) -> None:
        """Stop the file watcher and close all connections."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            try:
                await self._watch_task
            except asyncio.CancelledError:
                pass
            self._watch_task = None

        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle WebSocket connection for live reload."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    break
        finally:
            self._connections.discard(ws)

        return ws

    async def _watch_files(self) -> None:
        """Watch for file changes and broadcast reload events."""
        async for changes in awatch(self._assets_dir):
            for change_type, path_str in changes:
                if change_type == Change.deleted:
                    continue

                path = Path(path_str)
                if not self.matches_patterns(path):
                    continue

                topic_path = self.to_topic_path(path)
                logger.debug(f"Document changed: {path} -> {topic_path}")
                await self.broadcast_reload(topic_path)

    def matches_patterns(self, path: Path) -> bool:
        """Check if a path under assets/ matches any watch pattern."""
        try:
            relative = self._relative(path)
        except ValueError:
            return False

        return any(relative.match(pattern) for pattern in self._watch_patterns)

    def to_topic_path(self, file_path: Path) -> str:
        """Convert a document file path to the URL path of its topic page.

        Args:
            file_path: Absolute file path, e.g. <root>/assets/observer.md

        Returns:
            Topic URL path, e.g. "/observer"
        """
        relative = self._relative(file_path).as_posix()
        if relative.endswith(DOCUMENT_SUFFIX):
            relative = relative[: -len(DOCUMENT_SUFFIX)]
        return f"/{relative}"

    def _relative(self, path: Path) -> Path:
        return path.resolve().relative_to(self._assets_dir.resolve())

    async def broadcast_reload(self, path: str) -> None:
        """Broadcast reload event to all connected clients.

        Args:
            path: Topic URL path that changed
        """
        if not self._connections:
            return

        message = json.dumps({"type": "reload", "path": path})

        for ws in list(self._connections):
            if ws.closed:
                continue
            try:
                await ws.send_str(message)
            except ConnectionResetError:
                # Client disconnected mid-send, will be cleaned up by WeakSet
                logger.debug("Live reload client disconnected during send")


def create_live_reload_routes(manager: LiveReloadManager) -> list[web.RouteDef]:
    """Create routes for live reload WebSocket."""
    return [web.get("/ws/live-reload", manager.handle_websocket)]
