"""Navigation dispatcher.

Maps URLs to one of two views: the topic catalog at "/" and the topic
viewer at "/{topic}". A NavigationSession keeps the parameter channels for
one browsing session and activates or tears down the viewer as the user
navigates.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from yarl import URL

from patterndocs.core.catalog import DESIGN_PATTERNS, Category
from patterndocs.core.channels import ReplayChannel
from patterndocs.core.viewer import TOPIC_PARAM, DocumentRenderer, Params, TopicViewer

logger = logging.getLogger(__name__)


class View(Enum):
    CATALOG = "catalog"
    TOPIC = "topic"


@dataclass(frozen=True)
class RouteMatch:
    """Result of matching a URL against the route table."""

    view: View
    path_params: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)


def match_route(url: str | URL) -> RouteMatch | None:
    """Match a URL against the route table.

    Only single-segment paths are topics. The segment and query values are
    kept verbatim (percent-decoded, otherwise untouched).

    Args:
        url: URL or URL string, e.g. "/observer?dir=rtl"

    Returns:
        RouteMatch, or None when no route matches
    """
    if isinstance(url, str):
        url = URL(url)

    parts = url.parts
    if parts and parts[0] == "/":
        parts = parts[1:]
    segments = [part for part in parts if part]

    # Repeated keys resolve to their first value
    query_params = {key: url.query[key] for key in url.query.keys()}

    if not segments:
        return RouteMatch(view=View.CATALOG, query_params=query_params)
    if len(segments) == 1:
        return RouteMatch(
            view=View.TOPIC,
            path_params={TOPIC_PARAM: segments[0]},
            query_params=query_params,
        )
    return None


class NavigationSession:
    """Owns the parameter channels and the active view for one session.

    Parameters are only published when they differ from the previous
    navigation, so re-navigating to the same URL does not re-render. A newly
    activated viewer receives the current parameters by replay.
    """

    def __init__(
        self,
        renderer: DocumentRenderer,
        categories: tuple[Category, ...] = DESIGN_PATTERNS,
    ) -> None:
        self._renderer = renderer
        self._categories = categories
        self._path_params: ReplayChannel[Params] = ReplayChannel()
        self._query_params: ReplayChannel[Params] = ReplayChannel()
        self._viewer: TopicViewer | None = None
        self._current: RouteMatch | None = None

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    @property
    def viewer(self) -> TopicViewer | None:
        """Active topic viewer, None while the catalog (or nothing) is shown."""
        return self._viewer

    @property
    def current(self) -> RouteMatch | None:
        return self._current

    def navigate(self, url: str | URL) -> RouteMatch | None:
        """Navigate to url, activating the matching view.

        Args:
            url: Target URL, e.g. "/", "/observer?dir=rtl"

        Returns:
            RouteMatch for the activated view, or None if no route matches

        Raises:
            FileNotFoundError: Propagated from the renderer when the topic
                document doesn't exist
        """
        match = match_route(url)
        self._current = match
        logger.debug(f"Navigating to {url} -> {match.view.value if match else None}")

        if match is None or match.view is View.CATALOG:
            self._teardown_viewer()
            return match

        self._publish_if_changed(self._path_params, match.path_params)
        self._publish_if_changed(self._query_params, match.query_params)

        if self._viewer is None:
            self._viewer = TopicViewer(self._renderer)
            self._viewer.activate(self._path_params, self._query_params)

        return match

    def close(self) -> None:
        self._teardown_viewer()

    def _teardown_viewer(self) -> None:
        if self._viewer is not None:
            self._viewer.close()
            self._viewer = None

    @staticmethod
    def _publish_if_changed(channel: ReplayChannel[Params], params: dict[str, str]) -> None:
        if channel.has_value and channel.value == params:
            return
        channel.publish(params)
