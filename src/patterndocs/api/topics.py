"""Topics API endpoint.

Renders a topic document and returns JSON with the navigation selection
and HTML content.
"""

import logging

from aiohttp import web
from yarl import URL

from patterndocs.app_keys import renderer_key
from patterndocs.core.catalog import find_pattern
from patterndocs.core.dispatcher import NavigationSession
from patterndocs.core.viewer import NavigationSelection, TopicViewer

logger = logging.getLogger(__name__)


def create_topics_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/topics/{topic}", get_topic),
    ]


def open_topic(request: web.Request, topic: str) -> TopicViewer:
    """Activate a topic viewer for topic, keeping the request's query string.

    Raises:
        FileNotFoundError: If the topic document doesn't exist
    """
    session = NavigationSession(request.app[renderer_key])
    session.navigate(URL.build(path=f"/{topic}", query=request.rel_url.query))
    viewer = session.viewer
    if viewer is None:
        raise web.HTTPNotFound()
    return viewer


async def get_topic(request: web.Request) -> web.Response:
    topic = request.match_info["topic"]
    selection = NavigationSelection(topic=topic, direction=request.query.get("dir"))

    try:
        viewer = open_topic(request, topic)
    except FileNotFoundError:
        logger.info(f"Document not found: {selection.document_path}")
        return web.json_response(
            {"error": "Document not found", "path": selection.document_path},
            status=404,
        )

    result = viewer.result
    assert result is not None
    pattern = find_pattern(topic)

    return web.json_response(
        {
            "meta": {
                "topic": topic,
                "document_path": viewer.document_path,
                "direction": viewer.direction,
                "title": pattern.name if pattern else result.title,
            },
            "content": result.html,
        }
    )
