"""In-memory log of plan mutation intents.

Subscribes to plan.* events on an EventBus and keeps a bounded ring buffer of
recent intents that a plan owner can poll instead of handling each callback:

  * Each intent is stored with an auto-increment integer id (cursor) so the
    owner can request only newer intents (since=<last_id_seen>).
  * Intents are kept in the order the user interactions happened; nothing is
    merged or debounced here.
  * A max_events cap prevents unbounded memory growth.
"""
from __future__ import annotations
from typing import List, Dict, Any, Iterable, Optional
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, INTENT_PREFIX, EventBus
from nutriplan.utilities.config import INTENT_LOG_MAX


class IntentLog:
    def __init__(self, max_events: int = INTENT_LOG_MAX):
        self.max_events = max_events
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._subscriptions: List[tuple] = []

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        evt = {
            'id': self._next_id,
            'type': event_name,
            'intent': event_name[len(INTENT_PREFIX):] if event_name.startswith(INTENT_PREFIX) else event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            evt.update(payload)
        elif payload is not None:
            evt['payload'] = payload
        self._events.append(evt)
        self._next_id += 1
        # Trim buffer
        if len(self._events) > self.max_events:
            del self._events[: len(self._events) - self.max_events]

    def attach(self, event_names: Iterable[str], bus: Optional[EventBus] = None):
        """Idempotent subscribe to ``event_names`` on ``bus`` (global bus by default)."""
        bus = bus or GLOBAL_EVENT_BUS
        for name in event_names:
            if (bus, name) in self._subscriptions:
                continue
            bus.subscribe(name, self.record)
            self._subscriptions.append((bus, name))
        return self

    def detach(self):
        for bus, name in self._subscriptions:
            bus.unsubscribe(name, self.record)
        self._subscriptions = []

    def get_events(self, since: int | None = None) -> Dict[str, Any]:
        """Return intents newer than 'since' (exclusive).

        If since is None, returns the last N (up to max_events) intents.
        Response includes next_cursor (largest id) so the owner can poll with since=next_cursor.
        """
        if since is None:
            data = list(self._events)
        else:
            data = [e for e in self._events if e['id'] > since]
        next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['IntentLog']
