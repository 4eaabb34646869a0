from fastapi import (
    FastAPI,
    Request,
    Query,
    Form,
    HTTPException,
    Body
)
from fastapi.responses import HTMLResponse, RedirectResponse, FileResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from typing import Optional
import logging

from menu.api.routes import recipes
from menu.events.event_helpers import register_diagnostics
from menu.infra.paths import CATEGORIES_FILE, MENU_LIST_FILE
from menu.infra.Resource_Loader import start_loading
from menu.logic.selection.randomizer import CategoryNotSelectedError, NoMatchingMenuError
from menu.logic.selection.store import STORE
from menu.logic.timing.meal_time import current_hour, meal_type_for_hour, theme_for_meal_type
from menu.utilities import config
from menu.utilities.constants import NOTICE_MESSAGES, NOTICE_NO_CATEGORY, NOTICE_NO_MATCH
from menu.utilities.validators import CategoryChoice, RandomizeRequest, RandomizeResult

# Logging
logger = logging.getLogger("menu_app")

# Initialize FastAPI app
app = FastAPI(title="Menu Lottery")

# Include routers
app.include_router(recipes.router)

# Static files
app.mount("/static", StaticFiles(directory=str(config.STATIC_DIR)), name="static")

# Templates
templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))


@app.on_event("startup")
async def _startup_load_resources():
    """Wire the store to the event bus and start both resource loads (not awaited)."""
    STORE.bind()
    register_diagnostics()
    app.state.load_tasks = start_loading(config.CATEGORIES_LOCATION, config.MENU_LIST_LOCATION)
    logger.info("Loading categories from %s and menu list from %s",
                config.CATEGORIES_LOCATION, config.MENU_LIST_LOCATION)


def _theme_context(hour: int) -> dict:
    """Bucket and theme for `hour`; shared by the page and /api/theme."""
    meal_type = meal_type_for_hour(hour)
    return {"meal_type": meal_type, "theme": theme_for_meal_type(meal_type)}


# -------------------- UI PAGE --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request, notice: Optional[str] = Query(default=None)):
    state = STORE.state
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "categories": state.category_names,
            "notice_message": NOTICE_MESSAGES.get(notice),
            **_theme_context(current_hour()),
        }
    )


@app.post("/select_category")
def select_category(category: str = Form(default="")):
    STORE.select_category(category)
    return RedirectResponse(url="/", status_code=303)


@app.post("/randomize")
def randomize_menu(category: Optional[str] = Form(default=None)):
    if category is not None:
        STORE.select_category(category)
    try:
        STORE.randomize(hour=current_hour())
    except CategoryNotSelectedError:
        return RedirectResponse(url=f"/?notice={NOTICE_NO_CATEGORY}", status_code=303)
    except NoMatchingMenuError:
        return RedirectResponse(url=f"/?notice={NOTICE_NO_MATCH}", status_code=303)
    return RedirectResponse(url="/", status_code=303)


# -------------------- RESOURCES --------------------
@app.get("/cat.csv")
def categories_csv():
    return FileResponse(CATEGORIES_FILE, media_type="text/csv")


@app.get("/menu_list.csv")
def menu_list_csv():
    return FileResponse(MENU_LIST_FILE, media_type="text/csv")


# -------------------- JSON API --------------------
@app.get("/api/state")
def get_state():
    data = STORE.state.to_dict()
    data["meal_type"] = meal_type_for_hour(current_hour())
    return data


@app.get("/api/theme")
def get_theme():
    context = _theme_context(current_hour())
    return {"meal_type": context["meal_type"], **context["theme"]._asdict()}


@app.put("/api/category")
def put_category(payload: CategoryChoice):
    return STORE.select_category(payload.category).to_dict()


@app.post("/api/randomize", response_model=RandomizeResult)
def api_randomize(payload: Optional[RandomizeRequest] = Body(default=None)):
    if payload is not None and payload.category is not None:
        STORE.select_category(payload.category)
    hour = current_hour()
    try:
        recipe = STORE.randomize(hour=hour)
    except CategoryNotSelectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoMatchingMenuError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return RandomizeResult(
        result=recipe.name,
        id=recipe.id,
        category=recipe.category,
        meal_type=recipe.meal_type,
        bucket=meal_type_for_hour(hour),
    )
