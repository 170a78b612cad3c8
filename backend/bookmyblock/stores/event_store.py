"""
Process-lifetime event store.

An explicit object owned by the application (see `app.state.event_store`)
and handed to services through a dependency. Insertion order is preserved.
There is no locking: concurrent updates to one event are last-writer-wins.
"""

import itertools
from typing import Optional

from bookmyblock.models.event import Event


class EventStore:
    def __init__(self, default_capacity: int = 100) -> None:
        self.default_capacity = default_capacity
        self._events: list[Event] = []
        self._ids = itertools.count(1)

    def next_id(self) -> str:
        return f"event_{next(self._ids)}"

    def add(self, event: Event) -> Event:
        self._events.append(event)
        return event

    def all(self) -> list[Event]:
        return list(self._events)

    def get(self, event_id: str) -> Optional[Event]:
        return next((e for e in self._events if e.id == event_id), None)

    def for_theater(self, theater_id: str) -> list[Event]:
        return [e for e in self._events if e.theater_id == theater_id]

    def replace(self, event: Event) -> bool:
        for index, existing in enumerate(self._events):
            if existing.id == event.id:
                self._events[index] = event
                return True
        return False

    def remove(self, event_id: str) -> bool:
        for index, existing in enumerate(self._events):
            if existing.id == event_id:
                del self._events[index]
                return True
        return False

    def __len__(self) -> int:
        return len(self._events)
