import unittest
import tempfile
from pathlib import Path

from menu.domain.Category import Category
from menu.domain.Recipe import Recipe
from menu.infra.csv_table import parse_table
from menu.infra.Category_Repository import parse_categories, reading_from_categories
from menu.infra.Recipe_Repository import parse_recipes, reading_from_recipes
from menu.infra.paths import CATEGORIES_FILE, MENU_LIST_FILE


class TestParseTable(unittest.TestCase):
    def test_header_row_names_fields(self):
        rows = parse_table("id,name\n1,Miso\n2,Udon\n")
        self.assertEqual(rows, [{"id": "1", "name": "Miso"}, {"id": "2", "name": "Udon"}])

    def test_short_rows_get_none(self):
        rows = parse_table("id,name,category,meal_type\n1,Miso\n")
        self.assertEqual(rows[0]["category"], None)
        self.assertEqual(rows[0]["meal_type"], None)

    def test_blank_lines_skipped(self):
        self.assertEqual(len(parse_table("name\nSoup\n\n\nFish\n")), 2)

    def test_quoted_values(self):
        rows = parse_table('id,name\n1,"Salmon, grilled"\n')
        self.assertEqual(rows[0]["name"], "Salmon, grilled")

    def test_empty_text(self):
        self.assertEqual(parse_table(""), [])


class TestRecords(unittest.TestCase):
    def test_parse_recipes(self):
        recipes = parse_recipes("id,name,category,meal_type\n1,Miso,Soup,M\n2,Consomme,Soup,D\n")
        self.assertEqual(recipes, [Recipe("1", "Miso", "Soup", "M"), Recipe("2", "Consomme", "Soup", "D")])

    def test_malformed_rows_pass_through(self):
        recipes = parse_recipes("id,name,category,meal_type\n1,Odd,Soup,Z,extra\n2,Short\n")
        self.assertEqual(recipes[0].meal_type, "Z")
        self.assertEqual(recipes[1], Recipe("2", "Short", None, None))

    def test_unknown_category_reference_is_allowed(self):
        recipes = parse_recipes("id,name,category,meal_type\n1,Pie,Dessert,D\n")
        self.assertEqual(recipes[0].category, "Dessert")

    def test_parse_categories_keeps_duplicates(self):
        self.assertEqual(parse_categories("name\nSoup\nSoup\n"), [Category("Soup"), Category("Soup")])

    def test_missing_header_field(self):
        self.assertEqual(parse_categories("title\nSoup\n"), [Category(None)])


class TestReadingFromFiles(unittest.TestCase):
    def test_bundled_files(self):
        categories = reading_from_categories(CATEGORIES_FILE)
        recipes = reading_from_recipes(MENU_LIST_FILE)
        self.assertGreater(len(categories), 0)
        self.assertGreater(len(recipes), 0)
        names = {c.name for c in categories}
        for recipe in recipes:
            self.assertIn(recipe.meal_type, {"M", "L", "D"})
            self.assertIn(recipe.category, names)

    def test_missing_file_returns_empty(self):
        with self.assertLogs("menu.infra.Recipe_Repository", level="WARNING"):
            self.assertEqual(reading_from_recipes("/nonexistent/menu_list.csv"), [])
        with self.assertLogs("menu.infra.Category_Repository", level="WARNING"):
            self.assertEqual(reading_from_categories("/nonexistent/cat.csv"), [])

    def test_bom_is_stripped(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cat.csv"
            path.write_bytes("\ufeffname\nSoup\n".encode("utf-8"))
            self.assertEqual(reading_from_categories(path), [Category("Soup")])

    def test_invalid_encoding_returns_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "menu_list.csv"
            path.write_bytes(b"id,name\n1,\xff\xfe\xfa\n")
            with self.assertLogs("menu.infra.Recipe_Repository", level="WARNING"):
                self.assertEqual(reading_from_recipes(path), [])


if __name__ == '__main__':
    unittest.main()
