"""Replayable single-value channels for navigation parameters.

Path parameters and query parameters are delivered on two independent
channels. Each channel remembers its latest value and replays it to new
subscribers, so a view activated after a navigation still sees the current
parameters.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Subscription:
    """Handle returned by ReplayChannel.subscribe()."""

    __slots__ = ("_unsubscribe",)

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe: Callable[[], None] | None = unsubscribe

    @property
    def active(self) -> bool:
        """Whether the subscription still receives values."""
        return self._unsubscribe is not None

    def unsubscribe(self) -> None:
        """Stop receiving values. Safe to call more than once."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None


class ReplayChannel(Generic[T]):
    """Channel holding the latest published value.

    Delivery is synchronous: publish() returns once every subscriber has
    handled the value. Exceptions raised by a subscriber propagate to the
    publisher.
    """

    def __init__(self) -> None:
        self._value: object = _UNSET
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def has_value(self) -> bool:
        """Whether a value was published at least once."""
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        """Latest published value.

        Raises:
            LookupError: If nothing has been published yet
        """
        if self._value is _UNSET:
            raise LookupError("No value published on channel")
        return self._value  # type: ignore[return-value]

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, value: T) -> None:
        """Store value and notify all current subscribers."""
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        """Register callback and replay the latest value, if any.

        Args:
            callback: Called with each published value

        Returns:
            Subscription handle used to stop delivery
        """
        self._subscribers.append(callback)

        def _remove() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        subscription = Subscription(_remove)
        if self._value is not _UNSET:
            callback(self._value)  # type: ignore[arg-type]
        return subscription
