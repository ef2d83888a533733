"""Small publish/subscribe hub for sheet and recipe changes.

Event names:
  state.changed  -> payload {"state": CalculatorState, "reason": str}
  state.cleared  -> payload {"state": CalculatorState}
  recipe.saved   -> payload {"recipe": SavedRecipe}
  recipe.deleted -> payload {"recipe_id": str}

Handlers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from threading import RLock
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

Handler = Callable[[str, Any], None]

STATE_CHANGED = "state.changed"
STATE_CLEARED = "state.cleared"
RECIPE_SAVED = "recipe.saved"
RECIPE_DELETED = "recipe.deleted"

ALL_EVENTS = (STATE_CHANGED, STATE_CLEARED, RECIPE_SAVED, RECIPE_DELETED)


class EventBus:
	def __init__(self):
		self._handlers: Dict[str, List[Handler]] = defaultdict(list)
		self._lock = RLock()

	def subscribe(self, event_name: str, handler: Handler) -> Callable[[], None]:
		"""Register handler once per event; returns a callable that removes it again."""
		with self._lock:
			registered = self._handlers[event_name]
			if handler not in registered:
				registered.append(handler)
		return lambda: self.unsubscribe(event_name, handler)

	def unsubscribe(self, event_name: str, handler: Handler) -> bool:
		with self._lock:
			registered = self._handlers.get(event_name)
			if not registered or handler not in registered:
				return False
			registered.remove(handler)
			return True

	def handler_count(self, event_name: str) -> int:
		with self._lock:
			return len(self._handlers.get(event_name, ()))

	def publish(self, event_name: str, payload: Any = None) -> int:
		"""Deliver to every handler of event_name; returns how many ran without raising."""
		with self._lock:
			targets = tuple(self._handlers.get(event_name, ()))
		delivered = 0
		for handler in targets:
			try:
				handler(event_name, payload)
			except Exception:
				logger.exception("Handler %r failed for %s", handler, event_name)
			else:
				delivered += 1
		return delivered


GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> int:
	return GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'ALL_EVENTS',
	'STATE_CHANGED', 'STATE_CLEARED', 'RECIPE_SAVED', 'RECIPE_DELETED',
]
