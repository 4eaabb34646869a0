"""Simple Event Bus / Observer implementation for menu events.

Event names:
  menu.categories_loaded -> payload {"categories": tuple[Category, ...], "location": str}
  menu.recipes_loaded    -> payload {"recipes": tuple[Recipe, ...], "location": str}
  menu.randomized        -> payload {"recipe": Recipe, "category": str, "meal_type": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MENU_CATEGORIES_LOADED = "menu.categories_loaded"
MENU_RECIPES_LOADED = "menu.recipes_loaded"
MENU_RANDOMIZED = "menu.randomized"

Subscriber = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Subscriber):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Subscriber):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscribers(self, event_name: str) -> List[Subscriber]:
		return list(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any = None):
		for cb in self.subscribers(event_name):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'Subscriber',
	'MENU_CATEGORIES_LOADED', 'MENU_RECIPES_LOADED', 'MENU_RANDOMIZED'
]
