"""Web-facing observers for sheet and recipe events.

Subscribes to the GLOBAL_EVENT_BUS and keeps a small in-memory ring buffer of
recent activity that the web layer can poll (``GET /api/events?since=<id>``).

  * Each event gets an auto-increment id so clients only fetch newer ones.
  * A Lock guards the buffer; per-process state is fine for a single-device app.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    ALL_EVENTS, GLOBAL_EVENT_BUS
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            state = payload.get('state')
            if state is not None and hasattr(state, 'ingredients'):
                evt['ingredients'] = len(state.ingredients)
            if payload.get('reason'):
                evt['reason'] = payload['reason']
            recipe = payload.get('recipe')
            if recipe is not None and hasattr(recipe, 'name'):
                evt['recipe_id'] = recipe.id
                evt['name'] = recipe.name
            if payload.get('recipe_id'):
                evt['recipe_id'] = payload['recipe_id']
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Register subscribers once (idempotent)."""
    global _started
    if _started:
        return
    for name in ALL_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int = 0) -> List[Dict[str, Any]]:
    with _lock:
        return [dict(e) for e in _events if e['id'] > since]


def reset():
    """Clear the buffer (used by tests)."""
    global _next_id
    with _lock:
        _events.clear()
        _next_id = 1


__all__ = ['start', 'get_events', 'reset', 'MAX_EVENTS']
