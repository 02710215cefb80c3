"""aiohttp server for patterndocs.

Application factory and route registration. "/" shows the topic catalog,
"/{topic}" shows one rendered topic document.
"""

import logging

from aiohttp import web

from patterndocs.api.catalog import create_catalog_routes
from patterndocs.api.config import create_config_routes
from patterndocs.api.topics import create_topics_routes, open_topic
from patterndocs.app_keys import live_reload_enabled_key, live_reload_manager_key, renderer_key
from patterndocs.config import Config
from patterndocs.core.catalog import DESIGN_PATTERNS, find_pattern
from patterndocs.core.renderer import MarkdownRenderer
from patterndocs.core.viewer import ASSETS_PREFIX, NavigationSelection
from patterndocs.live.reload import LiveReloadManager, create_live_reload_routes
from patterndocs.pages import render_catalog_page, render_not_found_page, render_topic_page

logger = logging.getLogger(__name__)


async def catalog_page(request: web.Request) -> web.Response:
    """Serve the topic catalog."""
    html = render_catalog_page(DESIGN_PATTERNS, live_reload=request.app[live_reload_enabled_key])
    return web.Response(text=html, content_type="text/html")


async def topic_page(request: web.Request) -> web.Response:
    """Serve a rendered topic document.

    The topic is not checked against the catalog; unknown topics end up as
    a missing document and a 404 page.
    """
    topic = request.match_info["topic"]

    try:
        viewer = open_topic(request, topic)
    except FileNotFoundError:
        document_path = NavigationSelection(topic=topic).document_path
        logger.info(f"Document not found: {document_path}")
        return web.Response(
            text=render_not_found_page(document_path),
            status=404,
            content_type="text/html",
        )

    selection = viewer.selection
    result = viewer.result
    assert selection is not None and result is not None

    pattern = find_pattern(topic)
    html = render_topic_page(
        selection,
        result,
        title=pattern.name if pattern else None,
        live_reload=request.app[live_reload_enabled_key],
    )
    return web.Response(text=html, content_type="text/html")


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    root_dir = config.docs.root_dir
    app[renderer_key] = MarkdownRenderer(root_dir)
    app[live_reload_enabled_key] = config.live_reload.enabled

    # API routes (must be registered first to take precedence over topic pages)
    app.router.add_routes(create_catalog_routes())
    app.router.add_routes(create_topics_routes())
    app.router.add_routes(create_config_routes())

    if config.live_reload.enabled:
        manager = LiveReloadManager(root_dir, watch_patterns=config.live_reload.watch_patterns)
        app[live_reload_manager_key] = manager
        app.router.add_routes(create_live_reload_routes(manager))
        app.on_startup.append(_start_live_reload)
        app.on_cleanup.append(_stop_live_reload)

    assets_dir = root_dir / ASSETS_PREFIX.rstrip("/")
    if assets_dir.is_dir():
        app.router.add_static("/assets", assets_dir)
    else:
        logger.warning(f"Assets directory not found: {assets_dir}")

    app.router.add_get("/", catalog_page)
    # Topic pages must be last to catch all remaining single-segment paths
    app.router.add_get("/{topic}", topic_page)

    return app


async def _start_live_reload(app: web.Application) -> None:
    """Start live reload on application startup."""
    await app[live_reload_manager_key].start()


async def _stop_live_reload(app: web.Application) -> None:
    """Stop live reload on application cleanup."""
    await app[live_reload_manager_key].stop()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
