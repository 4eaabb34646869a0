from typing import Optional

from fastapi import APIRouter, Query

from menu.logic.selection.store import STORE

router = APIRouter(prefix="/api")


@router.get("/categories")
def list_categories():
    """Loaded category names in row order (empty until the category table has loaded)."""
    state = STORE.state
    return {"loaded": state.categories_loaded, "categories": state.category_names}


@router.get("/recipes")
def list_recipes(category: Optional[str] = Query(default=None),
                 meal_type: Optional[str] = Query(default=None)):
    """Loaded recipes, optionally narrowed to one category and/or meal type."""
    state = STORE.state
    recipes = [r for r in state.recipes
               if (category is None or r.category == category)
               and (meal_type is None or r.meal_type == meal_type)]
    return {
        "loaded": state.recipes_loaded,
        "count": len(recipes),
        "total": len(state.recipes),
        "recipes": [r.to_dict() for r in recipes],
    }
