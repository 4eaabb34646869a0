"""Random menu selection.

Recipes are filtered by exact category match and the meal time bucket of the
given hour. When nothing matches the bucket, any recipe of the category is
eligible. The pick is uniform: index = int(random() * count).
"""
from __future__ import annotations
import random
from typing import Sequence

from menu.domain.Recipe import Recipe
from menu.domain.Selection_State import SelectionState, randomized
from menu.logic.timing.meal_time import meal_type_for_hour
from menu.utilities.constants import MSG_SELECT_CATEGORY, MSG_NO_MATCHING_MENU


class MenuSelectionError(Exception):
    """Base class for a draw that produced no result."""
    message = ""

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class CategoryNotSelectedError(MenuSelectionError):
    message = MSG_SELECT_CATEGORY


class NoMatchingMenuError(MenuSelectionError):
    message = MSG_NO_MATCHING_MENU


def candidates_for(category: str, recipes: Sequence[Recipe], meal_type: str) -> list[Recipe]:
    """Recipes of `category` for `meal_type`, or every recipe of `category` if none."""
    filtered = [r for r in recipes if r.matches(category, meal_type)]
    if not filtered:
        filtered = [r for r in recipes if r.matches(category)]
    return filtered


def pick_menu(chosen_category: str | None, recipes: Sequence[Recipe], hour: int,
              rng: random.Random | None = None) -> Recipe:
    if not chosen_category:
        raise CategoryNotSelectedError()
    filtered = candidates_for(chosen_category, recipes, meal_type_for_hour(hour))
    if not filtered:
        raise NoMatchingMenuError()
    rng = rng or random
    return filtered[int(rng.random() * len(filtered))]


def randomize(state: SelectionState, hour: int, rng: random.Random | None = None) -> tuple[SelectionState, Recipe]:
    """Draw a recipe for the state's chosen category and return (new_state, recipe).

    Raises MenuSelectionError subclasses; the given state is never modified.
    """
    recipe = pick_menu(state.chosen_category, state.recipes, hour, rng)
    return randomized(state, recipe.name), recipe


__all__ = [
    'MenuSelectionError', 'CategoryNotSelectedError', 'NoMatchingMenuError',
    'candidates_for', 'pick_menu', 'randomize'
]
