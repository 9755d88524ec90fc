"""Listener registry for skin change notifications."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from termskin.errors import ListenerError
from termskin.logger import get_logger

if TYPE_CHECKING:
    from termskin.skin import Skin

logger = get_logger(__name__)


@runtime_checkable
class SkinListener(Protocol):
    """Anything that needs to react when the active skin changes."""

    def skin_changed(self, skin: Skin) -> None:
        """Handle a skin change.

        Args:
            skin: The skin, already holding the new style tree.
        """
        ...


class ListenerRegistry:
    """Ordered collection of skin listeners.

    Registering a listener twice means it is notified twice. Removal matches
    by identity and ignores listeners that are not registered.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._listeners: list[SkinListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[SkinListener]:
        return iter(list(self._listeners))

    def add(self, listener: SkinListener) -> None:
        """Register a listener.

        Args:
            listener: Listener to append.
        """
        self._listeners.append(listener)
        logger.debug(f"Registered skin listener {type(listener).__name__}")

    def remove(self, listener: SkinListener) -> None:
        """Unregister the first registration of a listener.

        Args:
            listener: Listener to remove.
        """
        for index, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[index]
                logger.debug(f"Removed skin listener {type(listener).__name__}")
                return

    def snapshot(self) -> tuple[SkinListener, ...]:
        """Get the registered listeners in registration order."""
        return tuple(self._listeners)

    def notify_all(self, skin: Skin, listeners: tuple[SkinListener, ...] | None = None) -> None:
        """Notify listeners that the skin changed.

        Every listener is called, in registration order, even if an earlier
        one fails. Failures are logged with their traceback and reported
        together once dispatch is complete.

        Args:
            skin: The skin to pass to each listener.
            listeners: Listeners to notify (defaults to the current registrations).

        Raises:
            ListenerError: If one or more listeners raised.
        """
        targets = self.snapshot() if listeners is None else listeners
        failures: list[tuple[object, Exception]] = []
        for listener in targets:
            try:
                listener.skin_changed(skin)
            except Exception as exc:
                logger.exception(f"Skin listener {type(listener).__name__} failed")
                failures.append((listener, exc))

        if failures:
            raise ListenerError(failures) from failures[0][1]
