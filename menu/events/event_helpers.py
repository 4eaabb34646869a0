"""Event helper utilities.

Publishing helpers for menu events plus the diagnostic subscriber that logs
successful draws.

Quick import:
    from menu.events.event_helpers import (
        publish_categories_loaded, publish_recipes_loaded, publish_randomized,
        log_randomized,
    )
"""
from __future__ import annotations
import logging
from typing import Iterable, Any

from .Event_Bus import (
    publish,
    MENU_CATEGORIES_LOADED, MENU_RECIPES_LOADED, MENU_RANDOMIZED,
    GLOBAL_EVENT_BUS, EventBus
)

logger = logging.getLogger(__name__)

__all__ = [
    'publish_categories_loaded', 'publish_recipes_loaded', 'publish_randomized',
    'log_randomized', 'register_diagnostics',
    'MENU_CATEGORIES_LOADED', 'MENU_RECIPES_LOADED', 'MENU_RANDOMIZED',
]


def publish_categories_loaded(categories: Iterable[Any], location: str = ""):
    """Publish a menu.categories_loaded event."""
    publish(MENU_CATEGORIES_LOADED, {
        'categories': tuple(categories),
        'location': location
    })


def publish_recipes_loaded(recipes: Iterable[Any], location: str = ""):
    """Publish a menu.recipes_loaded event."""
    publish(MENU_RECIPES_LOADED, {
        'recipes': tuple(recipes),
        'location': location
    })


def publish_randomized(recipe: Any, category: str, meal_type: str):
    publish(MENU_RANDOMIZED, {
        'recipe': recipe,
        'category': category,
        'meal_type': meal_type
    })


def log_randomized(event_name: str, payload):
    """Diagnostic line for every successful draw."""
    recipe = payload.get('recipe') if isinstance(payload, dict) else None
    logger.info("Randomized menu: %s", getattr(recipe, 'name', None))


def register_diagnostics(bus: EventBus = GLOBAL_EVENT_BUS):
    bus.subscribe(MENU_RANDOMIZED, log_randomized)
