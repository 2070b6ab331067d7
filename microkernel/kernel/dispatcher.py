"""
Event dispatcher - ordered, short-circuitable listener chains.

Listeners run synchronously, one at a time, in the order they were first
subscribed. A listener halts the rest of the chain for the current
notification by returning ``ListenerResult.STOP`` (or a mapping whose
``"stop"`` entry is ``True``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Separator between event and listener names in a listener key
KEY_SEPARATOR = " "

Callback = Callable[[Any, Mapping[str, Any]], Any]


class ListenerResult(Enum):
    """Explicit signal a listener can return to the dispatcher."""

    CONTINUE = "continue"
    STOP = "stop"


def listener_key(event: str, listener: str) -> str:
    return f"{event}{KEY_SEPARATOR}{listener}"


def is_stop(result: Any) -> bool:
    """Whether a listener's return value requests a short-circuit."""
    if result is ListenerResult.STOP:
        return True
    return isinstance(result, Mapping) and result.get("stop") is True


@dataclass
class Subscription:
    """A callback bound to an event under a listener name."""

    event: str
    listener: str
    callback: Callback

    @property
    def key(self) -> str:
        return listener_key(self.event, self.listener)


class EventDispatcher:
    """
    Event dispatcher owned by a single kernel.

    Event -> listener keys and key -> subscription are kept apart, so
    replacing a callback never changes its place in the chain.
    """

    def __init__(self, owner: Any) -> None:
        self._owner = owner
        # event -> listener keys, in first-subscription order
        self._events: dict[str, list[str]] = {}
        # listener key -> subscription
        self._subscriptions: dict[str, Subscription] = {}

    def subscribe(self, event: str, listener: str, callback: Callback) -> None:
        """
        Subscribe a callback to an event under a listener name.

        Subscribing the same (event, listener) pair again replaces the
        callback but keeps its original position.
        """
        if not callable(callback):
            raise TypeError(f'Callback for listener "{listener}" is not callable.')

        subscription = Subscription(event, listener, callback)
        key = subscription.key
        keys = self._events.setdefault(event, [])
        if key in keys:
            logger.debug("Replaced listener %s on %s", listener, event)
        else:
            keys.append(key)
            logger.debug("Subscribed listener %s to %s", listener, event)
        self._subscriptions[key] = subscription

    def notify(self, event: str, arguments: Mapping[str, Any] | None = None) -> None:
        """Invoke the event's listeners in order until one asks to stop."""
        keys = self._events.get(event)
        if not keys:
            return
        if arguments is None:
            arguments = {}

        # Snapshot so listeners may subscribe while the chain runs
        for key in list(keys):
            subscription = self._subscriptions[key]
            result = subscription.callback(self._owner, arguments)
            if is_stop(result):
                logger.debug(
                    "Listener %s stopped propagation of %s",
                    subscription.listener,
                    event,
                )
                break

    def has_listeners(self, event: str) -> bool:
        return bool(self._events.get(event))

    def listeners(self, event: str) -> list[str]:
        """Listener names for an event, in invocation order."""
        return [
            self._subscriptions[key].listener for key in self._events.get(event, [])
        ]

    def events(self) -> list[str]:
        return list(self._events)
