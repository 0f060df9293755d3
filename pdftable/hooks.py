"""Lifecycle hook pipeline.

Listeners are registered per ``TableEvent`` and called synchronously, in
registration order, with ``(table, *payload)``. Dispatch does not catch
anything: an exception raised by a listener stops the remaining listeners and
propagates to whoever triggered the event.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from pdftable.enums import TableEvent

Listener = Callable[..., None]


@dataclass(slots=True)
class Subscription:
    listener: Listener
    owner: Any = None


class HookPipeline:
    """Registry of listeners for the fixed set of table events."""

    def __init__(self):
        self._subscriptions: dict[TableEvent, list[Subscription]] = {
            event: [] for event in TableEvent
        }
        self._owner: Any = None

    def subscribe(self, event: TableEvent | str, listener: Listener) -> None:
        event = TableEvent(event)
        self._subscriptions[event].append(Subscription(listener, self._owner))

    def listeners(self, event: TableEvent | str) -> list[Listener]:
        return [sub.listener for sub in self._subscriptions[TableEvent(event)]]

    def emit(self, event: TableEvent, table, *payload) -> None:
        # copy so a listener subscribing during dispatch runs from the next emit on
        for subscription in list(self._subscriptions[event]):
            subscription.listener(table, *payload)

    @contextmanager
    def owned_by(self, owner: Any) -> Iterator[None]:
        """Tag every subscription made inside the block with owner"""
        previous, self._owner = self._owner, owner
        try:
            yield
        finally:
            self._owner = previous

    def remove_owner(self, owner: Any) -> int:
        """Drop the subscriptions registered by owner, returns how many"""
        removed = 0
        for event, subscriptions in self._subscriptions.items():
            kept = [sub for sub in subscriptions if sub.owner is not owner]
            removed += len(subscriptions) - len(kept)
            self._subscriptions[event] = kept
        return removed
