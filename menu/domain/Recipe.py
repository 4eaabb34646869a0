"""Recipe domain entity: id, display name, category and meal time bucket."""
from typing import Optional


class Recipe:
    """A menu entry from menu_list.csv.

    All fields are plain text. `category` refers to `Category.name` but is
    never checked against the category table, and `meal_type` is expected to
    be one of "M", "L", "D" without being enforced: a malformed value just
    never matches a time bucket.
    """

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None,
                 category: Optional[str] = None, meal_type: Optional[str] = None):
        self.id = id
        self.name = name
        self.category = category
        self.meal_type = meal_type

    def __str__(self) -> str:
        return f"{self.name} - Category: {self.category} - Meal type: {self.meal_type}"

    def __repr__(self) -> str:
        return (f"Recipe(id={self.id!r}, name={self.name!r}, "
                f"category={self.category!r}, meal_type={self.meal_type!r})")

    def __eq__(self, other) -> bool:
        return isinstance(other, Recipe) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.category, self.meal_type))

    def matches(self, category: str, meal_type: Optional[str] = None) -> bool:
        """True if the category matches exactly and, when given, the meal type too."""
        if self.category != category:
            return False
        return meal_type is None or self.meal_type == meal_type

    @staticmethod
    def from_row(row):
        return Recipe(
            id=row.get("id"),
            name=row.get("name"),
            category=row.get("category"),
            meal_type=row.get("meal_type"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "meal_type": self.meal_type,
        }
