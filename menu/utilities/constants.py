from typing import Final

# Meal time buckets (morning / midday / evening)
MORNING: Final[str] = "M"
LUNCH: Final[str] = "L"
DINNER: Final[str] = "D"
MEAL_TYPES: Final[tuple[str, ...]] = (MORNING, LUNCH, DINNER)

# Bucket boundaries, [start, end) in local hours; everything else is DINNER
MORNING_START_HOUR: Final[int] = 5
LUNCH_START_HOUR: Final[int] = 11
DINNER_START_HOUR: Final[int] = 16

# Theme classes per bucket: (background, text, card)
THEME_CLASSES: Final[dict[str, tuple[str, str, str]]] = {
    MORNING: ("bg-orange-200", "text-white", "bg-white text-gray-900"),
    LUNCH: ("bg-sky-200", "text-white", "bg-white text-gray-900"),
    DINNER: ("bg-slate-900", "text-white", "bg-slate-800"),
}
DEFAULT_THEME_CLASSES: Final[tuple[str, str, str]] = ("bg-white", "text-gray-900", "bg-white text-gray-900")

# CSV headers
CATEGORY_FIELDS: Final[tuple[str, ...]] = ("name",)
RECIPE_FIELDS: Final[tuple[str, ...]] = ("id", "name", "category", "meal_type")

# User-facing messages
MSG_SELECT_CATEGORY: Final[str] = "Please select a category."
MSG_NO_MATCHING_MENU: Final[str] = "No matching menu for this category."

NOTICE_NO_CATEGORY: Final[str] = "no_category"
NOTICE_NO_MATCH: Final[str] = "no_match"
NOTICE_MESSAGES: Final[dict[str, str]] = {
    NOTICE_NO_CATEGORY: MSG_SELECT_CATEGORY,
    NOTICE_NO_MATCH: MSG_NO_MATCHING_MENU,
}
