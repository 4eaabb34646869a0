"""Asynchronous loading of the category and menu list resources.

Both loads are started together and never joined: each one publishes its own
"loaded" event when it finishes, in whatever order that happens. A failed
load is logged and publishes nothing, so the corresponding list simply stays
empty. There is no retry and no timeout.
"""
from __future__ import annotations
import asyncio
import csv
import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from menu.domain.Category import Category
from menu.domain.Recipe import Recipe
from menu.events.event_helpers import publish_categories_loaded, publish_recipes_loaded
from menu.infra.Category_Repository import parse_categories
from menu.infra.Recipe_Repository import parse_recipes

logger = logging.getLogger(__name__)

Location = Union[str, Path]

# InvalidURL is not an HTTPError subclass
LOAD_ERRORS = (OSError, UnicodeDecodeError, csv.Error, httpx.HTTPError, httpx.InvalidURL)


def is_url(location: Location) -> bool:
    return str(location).lower().startswith(("http://", "https://"))


def _read_file(path: Location) -> str:
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        return f.read()


async def fetch_text(location: Location, client: Optional[httpx.AsyncClient] = None) -> str:
    """Return the resource at `location` as text (http(s) URL or local path)."""
    if not is_url(location):
        return await asyncio.to_thread(_read_file, location)
    if client is not None:
        response = await client.get(str(location))
        response.raise_for_status()
        return response.content.decode('utf-8-sig')
    async with httpx.AsyncClient() as own_client:
        response = await own_client.get(str(location))
        response.raise_for_status()
        return response.content.decode('utf-8-sig')


async def load_categories(location: Location, client: Optional[httpx.AsyncClient] = None) -> list[Category]:
    try:
        categories = parse_categories(await fetch_text(location, client))
    except LOAD_ERRORS as e:
        logger.warning("Could not load categories from %s: %s", location, e)
        return []
    logger.info("Loaded %d categories from %s", len(categories), location)
    publish_categories_loaded(categories, str(location))
    return categories


async def load_recipes(location: Location, client: Optional[httpx.AsyncClient] = None) -> list[Recipe]:
    try:
        recipes = parse_recipes(await fetch_text(location, client))
    except LOAD_ERRORS as e:
        logger.warning("Could not load recipes from %s: %s", location, e)
        return []
    logger.info("Loaded %d recipes from %s", len(recipes), location)
    publish_recipes_loaded(recipes, str(location))
    return recipes


def start_loading(categories_location: Location, recipes_location: Location) -> tuple[asyncio.Task, asyncio.Task]:
    """Schedule both loads on the running loop and return the tasks without awaiting them."""
    return (
        asyncio.create_task(load_categories(categories_location), name="load-categories"),
        asyncio.create_task(load_recipes(recipes_location), name="load-recipes"),
    )


__all__ = ['fetch_text', 'load_categories', 'load_recipes', 'start_loading', 'is_url']
