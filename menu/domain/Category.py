"""Category domain entity: a user-selectable grouping label for recipes."""
from typing import Optional


class Category:
    def __init__(self, name: Optional[str] = None):
        self.name = name

    def __str__(self) -> str:
        return f"{self.name}"

    def __repr__(self) -> str:
        return f"Category(name={self.name!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Category) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @staticmethod
    def from_row(row):
        """Build a Category from a parsed CSV row; a missing field becomes None."""
        return Category(name=row.get("name"))

    def to_dict(self):
        return {"name": self.name}
