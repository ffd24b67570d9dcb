"""
Scripted Input Source - Plays back queued events.

Used for headless runs and tests: events are queued up front (or between
frames) and released on the next update.
"""
from typing import Iterable, List

from dodgefall.input.input_event import InputEvent
from dodgefall.input.sources.base import InputSource


class ScriptedInputSource(InputSource):
    """Input source fed programmatically instead of by a device."""

    def __init__(self, events: Iterable[InputEvent] = ()):
        self._pending: List[InputEvent] = list(events)
        self._ready: List[InputEvent] = []

    def queue(self, *events: InputEvent) -> None:
        """Queue events to be released on the next update."""
        self._pending.extend(events)

    def update(self, dt: float) -> None:
        self._ready.extend(self._pending)
        self._pending.clear()

    def poll_events(self) -> List[InputEvent]:
        events = self._ready.copy()
        self._ready.clear()
        return events
