"""Topic viewer.

Turns the current navigation selection into a document render request.
The viewer listens on two independent parameter channels (path and query)
and combines the latest value of each. It does not validate the topic and
does not handle render failures: whatever the renderer raises reaches the
caller unchanged.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from patterndocs.core.channels import ReplayChannel, Subscription
from patterndocs.core.renderer import RenderResult

logger = logging.getLogger(__name__)

ASSETS_PREFIX = "assets/"
DOCUMENT_SUFFIX = ".md"

TOPIC_PARAM = "topic"
DIRECTION_PARAM = "dir"

Params = Mapping[str, str]


class DocumentRenderer(Protocol):
    """Anything that can render a document path."""

    def render(self, document_path: str) -> RenderResult: ...


class ViewerState(Enum):
    AWAITING_PARAMETERS = "awaiting_parameters"
    DISPLAYING_DOCUMENT = "displaying_document"


@dataclass(frozen=True)
class NavigationSelection:
    """Topic identifier and reading direction taken verbatim from the URL."""

    topic: str
    direction: str | None = None

    @property
    def document_path(self) -> str:
        """Document to render, relative to the documentation root."""
        return ASSETS_PREFIX + self.topic + DOCUMENT_SUFFIX


class TopicViewer:
    """Renders the document selected by the latest navigation parameters.

    Starts in AWAITING_PARAMETERS and moves to DISPLAYING_DOCUMENT once both
    channels have delivered a value. From then on every delivered value
    replaces the selection and triggers a fresh render.
    """

    def __init__(self, renderer: DocumentRenderer) -> None:
        self._renderer = renderer
        self._state = ViewerState.AWAITING_PARAMETERS
        self._subscriptions: list[Subscription] = []
        self._activating = False

        self._topic: str | None = None
        self._direction: str | None = None
        self._has_query = False

        self._selection: NavigationSelection | None = None
        self._result: RenderResult | None = None
        self._render_count = 0

    @property
    def state(self) -> ViewerState:
        return self._state

    @property
    def selection(self) -> NavigationSelection | None:
        """Current selection, None until both channels have delivered."""
        return self._selection

    @property
    def document_path(self) -> str | None:
        if self._selection is None:
            return None
        return self._selection.document_path

    @property
    def direction(self) -> str | None:
        """Value of the dir query parameter; None when it was not given."""
        if self._selection is None:
            return None
        return self._selection.direction

    @property
    def result(self) -> RenderResult | None:
        """Outcome of the latest successful render for the current selection."""
        return self._result

    @property
    def render_count(self) -> int:
        return self._render_count

    @property
    def active(self) -> bool:
        return bool(self._subscriptions)

    def activate(
        self,
        path_params: ReplayChannel[Params],
        query_params: ReplayChannel[Params],
    ) -> None:
        """Subscribe to parameter channels.

        Channels replay their latest value, so activating against channels
        that already carry parameters renders immediately.

        Raises:
            RuntimeError: If the viewer is already active
        """
        if self._subscriptions:
            raise RuntimeError("Viewer is already active")

        # Replayed values are only recorded; rendering waits until both
        # subscriptions exist
        self._activating = True
        try:
            self._subscriptions.append(path_params.subscribe(self._on_path_params))
            self._subscriptions.append(query_params.subscribe(self._on_query_params))
        finally:
            self._activating = False
        self._refresh()

    def close(self) -> None:
        """Unsubscribe from parameter channels."""
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions.clear()

    def _on_path_params(self, params: Params) -> None:
        self._topic = params[TOPIC_PARAM]
        self._refresh()

    def _on_query_params(self, params: Params) -> None:
        self._direction = params.get(DIRECTION_PARAM)
        self._has_query = True
        self._refresh()

    def _refresh(self) -> None:
        if self._activating or self._topic is None or not self._has_query:
            return

        self._selection = NavigationSelection(topic=self._topic, direction=self._direction)
        self._state = ViewerState.DISPLAYING_DOCUMENT
        self._result = None
        self._render_count += 1

        logger.debug(
            f"Rendering {self._selection.document_path} (dir={self._selection.direction!r})"
        )
        self._result = self._renderer.render(self._selection.document_path)
