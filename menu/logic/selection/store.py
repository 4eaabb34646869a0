"""Process-wide holder of the current SelectionState.

Sync FastAPI endpoints run in a thread pool, so every transition is applied
under a lock and swaps in a whole new immutable state.
"""
from __future__ import annotations
import random
from datetime import datetime
from threading import Lock
from typing import Any, Callable, Optional

from menu.domain.Recipe import Recipe
from menu.domain.Selection_State import (
    SelectionState, categories_loaded, recipes_loaded, category_changed
)
from menu.events.Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS, MENU_CATEGORIES_LOADED, MENU_RECIPES_LOADED
)
from menu.events.event_helpers import publish_randomized
from menu.logic.selection.randomizer import randomize
from menu.logic.timing.meal_time import Clock, current_hour, meal_type_for_hour


class SelectionStore:
    def __init__(self, state: Optional[SelectionState] = None):
        self._lock = Lock()
        self._state = state or SelectionState()

    @property
    def state(self) -> SelectionState:
        with self._lock:
            return self._state

    def dispatch(self, reducer: Callable[..., SelectionState], *args: Any) -> SelectionState:
        with self._lock:
            self._state = reducer(self._state, *args)
            return self._state

    def reset(self, state: Optional[SelectionState] = None) -> None:
        with self._lock:
            self._state = state or SelectionState()

    # --- event bus wiring ---
    def _on_categories_loaded(self, event_name: str, payload):
        self.dispatch(categories_loaded, payload.get('categories', ()))

    def _on_recipes_loaded(self, event_name: str, payload):
        self.dispatch(recipes_loaded, payload.get('recipes', ()))

    def bind(self, bus: EventBus = GLOBAL_EVENT_BUS) -> None:
        """Idempotent: subscribe this store to the load-complete events."""
        bus.subscribe(MENU_CATEGORIES_LOADED, self._on_categories_loaded)
        bus.subscribe(MENU_RECIPES_LOADED, self._on_recipes_loaded)

    def unbind(self, bus: EventBus = GLOBAL_EVENT_BUS) -> None:
        bus.unsubscribe(MENU_CATEGORIES_LOADED, self._on_categories_loaded)
        bus.unsubscribe(MENU_RECIPES_LOADED, self._on_recipes_loaded)

    # --- user actions ---
    def select_category(self, category: Optional[str]) -> SelectionState:
        return self.dispatch(category_changed, category)

    def randomize(self, hour: Optional[int] = None, rng: Optional[random.Random] = None,
                  clock: Clock = datetime.now) -> Recipe:
        """Draw a menu for the chosen category; raises MenuSelectionError on failure."""
        if hour is None:
            hour = current_hour(clock)
        with self._lock:
            new_state, recipe = randomize(self._state, hour, rng)
            category = self._state.chosen_category
            self._state = new_state
        publish_randomized(recipe, category, meal_type_for_hour(hour))
        return recipe


# Shared instance used by the web layer
STORE = SelectionStore()

__all__ = ['SelectionStore', 'STORE']
