"""Reference-counted media query listeners.

MediaQueryManager owns a registry of listeners keyed by condition string.
Every match_media() call for the same condition shares one entry: the
condition is parsed once, evaluated once per context update, and the entry
is removed when the last handle is destroyed.

The platform layer pushes fresh MediaContext snapshots with
update_context(); handles registered with on("change", callback) are
notified when their condition's result flips.

Example:
    manager = MediaQueryManager(context)
    listener = manager.match_media("(orientation: landscape)")
    listener.on("change", lambda matches: print("landscape:", matches))
    manager.update_context(rotated_context)
    listener.destroy()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from mediaquery.config.models import EvaluationConfig
from mediaquery.evaluator import evaluate
from mediaquery.exceptions import ManagerDestroyedError
from mediaquery.expressions.parser import parse_condition
from mediaquery.types.conditions import Condition
from mediaquery.types.context import MediaContext

logger = logging.getLogger(__name__)

MatchCallback = Callable[[bool], None]

CHANGE_EVENT = "change"

# (condition, callbacks to run, new match state)
_Notification = tuple[str, list[MatchCallback], bool]


class _SharedListener:
    """Registry entry shared by every handle on one condition string."""

    def __init__(self, condition: str, parsed: Condition | None) -> None:
        self.condition = condition
        self.parsed = parsed
        self.matches = False
        self.ref_count = 1
        self.callbacks: list[MatchCallback] = []

    def evaluate(self, context: MediaContext, config: EvaluationConfig) -> bool:
        if self.parsed is None:
            return False
        return evaluate(self.parsed, context, config)


class MediaQueryListener:
    """Handle on a shared listener, returned by MediaQueryManager.match_media().

    Each handle tracks the callbacks it registered so that off() and
    destroy() only remove its own callbacks.
    """

    def __init__(self, manager: MediaQueryManager, shared: _SharedListener) -> None:
        self._manager = manager
        self._shared = shared
        self._callbacks: list[MatchCallback] = []
        self._destroyed = False

    @property
    def media(self) -> str:
        """The condition string this listener matches."""
        return self._shared.condition

    @property
    def matches(self) -> bool:
        """Current match state of the condition."""
        return self._shared.matches

    def on(self, event: str, callback: MatchCallback) -> None:
        """Register a callback for match state changes.

        Args:
            event: Event name. Only "change" is supported.
            callback: Called with the new match state.
        """
        if self._destroyed:
            logger.debug(
                "Ignoring callback on destroyed media query listener: %s",
                self.media,
                extra={"condition": self.media},
            )
            return
        if event != CHANGE_EVENT:
            logger.debug("Ignoring unsupported media query event: %s", event)
            return
        self._callbacks.append(callback)
        self._manager._add_callback(self._shared, callback)

    def off(self, event: str, callback: MatchCallback | None = None) -> None:
        """Unregister a callback, or all of this handle's callbacks if None."""
        if event != CHANGE_EVENT:
            logger.debug("Ignoring unsupported media query event: %s", event)
            return
        if callback is None:
            removed = self._callbacks
            self._callbacks = []
        elif callback in self._callbacks:
            self._callbacks.remove(callback)
            removed = [callback]
        else:
            return
        for cb in removed:
            self._manager._remove_callback(self._shared, cb)

    def destroy(self) -> None:
        """Release this handle. Safe to call more than once."""
        if self._destroyed:
            return
        self._destroyed = True
        self.off(CHANGE_EVENT)
        self._manager._release(self._shared)


class MediaQueryManager:
    """Registry of media query listeners for one window or screen.

    Thread-safe: registry updates happen under a lock; callbacks run on the
    calling thread after the lock is released.
    """

    def __init__(
        self,
        context: MediaContext | None = None,
        config: EvaluationConfig | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            context: Initial snapshot. Without one, every listener starts
                unmatched until update_context() is called.
            config: Comparison tolerances used for every evaluation.
        """
        self._context = context
        self._config = config if config is not None else EvaluationConfig()
        self._listeners: dict[str, _SharedListener] = {}
        self._lock = threading.Lock()
        self._destroyed = False

    @property
    def context(self) -> MediaContext | None:
        """The last snapshot passed to the manager."""
        return self._context

    @property
    def listener_count(self) -> int:
        """Number of distinct conditions currently registered."""
        with self._lock:
            return len(self._listeners)

    def match_media(self, condition: str) -> MediaQueryListener:
        """Create a listener for a condition.

        Reuses the registry entry of an identical condition string.

        Raises:
            ManagerDestroyedError: If destroy() was already called.
        """
        with self._lock:
            if self._destroyed:
                raise ManagerDestroyedError(condition)

            shared = self._listeners.get(condition)
            if shared is not None:
                shared.ref_count += 1
                return MediaQueryListener(self, shared)

            shared = _SharedListener(condition, parse_condition(condition))
            if self._context is not None:
                shared.matches = shared.evaluate(self._context, self._config)
            self._listeners[condition] = shared
            logger.debug(
                "Registered media query listener: %s (matches=%s)",
                condition,
                shared.matches,
                extra={"condition": condition, "matches": shared.matches},
            )
            return MediaQueryListener(self, shared)

    def update_context(self, context: MediaContext) -> None:
        """Store a new snapshot and notify listeners whose result changed.

        Every affected callback runs even if an earlier one raises; the
        first exception is re-raised once all of them have been called.
        """
        notifications: list[_Notification] = []
        with self._lock:
            self._context = context
            for shared in self._listeners.values():
                matches = shared.evaluate(context, self._config)
                if matches != shared.matches:
                    shared.matches = matches
                    notifications.append(
                        (shared.condition, list(shared.callbacks), matches)
                    )
        self._notify(notifications)

    def update_condition(self, condition: str, matches: bool) -> None:
        """Set the result of one condition computed elsewhere.

        Unknown conditions are ignored.
        """
        notifications: list[_Notification] = []
        with self._lock:
            shared = self._listeners.get(condition)
            if shared is None or shared.matches == matches:
                return
            shared.matches = matches
            notifications.append((shared.condition, list(shared.callbacks), matches))
        self._notify(notifications)

    def destroy(self) -> None:
        """Drop every listener and its callbacks."""
        with self._lock:
            for shared in self._listeners.values():
                shared.callbacks.clear()
            self._listeners.clear()
            self._destroyed = True

    def _notify(self, notifications: list[_Notification]) -> None:
        # Every callback runs; the first failure is re-raised afterwards
        first_error: Exception | None = None
        for condition, callbacks, matches in notifications:
            for callback in callbacks:
                try:
                    callback(matches)
                except Exception as e:
                    logger.exception(
                        "Media query change callback failed for %s: %s",
                        condition,
                        e,
                        extra={"condition": condition, "matches": matches},
                    )
                    if first_error is None:
                        first_error = e
        if first_error is not None:
            raise first_error

    def _add_callback(self, shared: _SharedListener, callback: MatchCallback) -> None:
        with self._lock:
            shared.callbacks.append(callback)

    def _remove_callback(
        self, shared: _SharedListener, callback: MatchCallback
    ) -> None:
        with self._lock:
            if callback in shared.callbacks:
                shared.callbacks.remove(callback)

    def _release(self, shared: _SharedListener) -> None:
        with self._lock:
            shared.ref_count -= 1
            if shared.ref_count > 0:
                return
            shared.callbacks.clear()
            if self._listeners.get(shared.condition) is shared:
                del self._listeners[shared.condition]
                logger.debug(
                    "Removed media query listener: %s",
                    shared.condition,
                    extra={"condition": shared.condition},
                )
