"""Application keys for type-safe app configuration access."""

from aiohttp import web

from patterndocs.core.renderer import MarkdownRenderer
from patterndocs.live.reload import LiveReloadManager

renderer_key = web.AppKey("renderer", MarkdownRenderer)
live_reload_enabled_key = web.AppKey("live_reload_enabled", bool)
live_reload_manager_key = web.AppKey("live_reload_manager", LiveReloadManager)
