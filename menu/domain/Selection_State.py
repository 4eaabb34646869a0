"""Selection state of the page and the pure transitions applied to it.

The state is an immutable value; every event produces a new one:

  categories loaded  -> categories set, first category chosen (Uninitialized -> Ready)
  recipes loaded     -> recipes set
  category changed   -> chosen category replaced, result unchanged
  randomized         -> last result replaced

The two load events arrive independently and in any order, so readers must
treat both lists as possibly empty.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from menu.domain.Category import Category
from menu.domain.Recipe import Recipe


@dataclass(frozen=True)
class SelectionState:
    categories: tuple[Category, ...] = field(default_factory=tuple)
    recipes: tuple[Recipe, ...] = field(default_factory=tuple)
    chosen_category: str = ""
    last_result: str = ""
    categories_loaded: bool = False
    recipes_loaded: bool = False

    @property
    def ready(self) -> bool:
        return self.categories_loaded

    @property
    def category_names(self) -> list[Optional[str]]:
        return [c.name for c in self.categories]

    def to_dict(self):
        return {
            "ready": self.ready,
            "categories_loaded": self.categories_loaded,
            "recipes_loaded": self.recipes_loaded,
            "chosen_category": self.chosen_category,
            "last_result": self.last_result,
            "categories": self.category_names,
            "recipe_count": len(self.recipes),
        }


def categories_loaded(state: SelectionState, categories: Iterable[Category]) -> SelectionState:
    cats = tuple(categories)
    chosen = state.chosen_category
    if cats:
        chosen = cats[0].name or ""
    return replace(state, categories=cats, chosen_category=chosen, categories_loaded=True)


def recipes_loaded(state: SelectionState, recipes: Iterable[Recipe]) -> SelectionState:
    return replace(state, recipes=tuple(recipes), recipes_loaded=True)


def category_changed(state: SelectionState, category: Optional[str]) -> SelectionState:
    # Any value is accepted, even one that is not in the category list
    return replace(state, chosen_category=category or "")


def randomized(state: SelectionState, result: Optional[str]) -> SelectionState:
    return replace(state, last_result=result or "")


__all__ = ['SelectionState', 'categories_loaded', 'recipes_loaded', 'category_changed', 'randomized']
