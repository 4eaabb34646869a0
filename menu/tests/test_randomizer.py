import random
import unittest
from collections import Counter

from menu.domain.Recipe import Recipe
from menu.domain.Selection_State import SelectionState
from menu.logic.selection.randomizer import (
    CategoryNotSelectedError, NoMatchingMenuError, MenuSelectionError,
    candidates_for, pick_menu, randomize
)

MISO = Recipe("1", "Miso", "Soup", "M")
CONSOMME = Recipe("2", "Consomme", "Soup", "D")
SOUPS = [MISO, CONSOMME]


class FixedRandom:
    """Stands in for random.Random with a constant random() value."""
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class TestPickMenu(unittest.TestCase):
    def test_single_match_is_deterministic(self):
        for seed in range(20):
            self.assertIs(pick_menu("Soup", SOUPS, hour=7, rng=random.Random(seed)), MISO)

    def test_fallback_to_category_only(self):
        # 13h is lunch; no Soup recipe is "L"
        picks = {pick_menu("Soup", SOUPS, hour=13, rng=random.Random(seed)).name for seed in range(50)}
        self.assertEqual(picks, {"Miso", "Consomme"})

    def test_fallback_result_still_matches_category(self):
        recipes = SOUPS + [Recipe("3", "Udon", "Noodles", "L")]
        for seed in range(50):
            pick = pick_menu("Soup", recipes, hour=13, rng=random.Random(seed))
            self.assertEqual(pick.category, "Soup")

    def test_pick_is_member_of_filtered_set(self):
        recipes = [Recipe(str(i), f"Dish {i}", "Meat", "D") for i in range(7)] + [Recipe("x", "Salad", "Veg", "D")]
        rng = random.Random(42)
        for _ in range(200):
            pick = pick_menu("Meat", recipes, hour=20, rng=rng)
            self.assertIn(pick, recipes[:7])

    def test_index_uses_floor_of_random_times_count(self):
        recipes = [Recipe(str(i), f"Dish {i}", "Meat", "L") for i in range(4)]
        self.assertEqual(pick_menu("Meat", recipes, 12, FixedRandom(0.0)).name, "Dish 0")
        self.assertEqual(pick_menu("Meat", recipes, 12, FixedRandom(0.49)).name, "Dish 1")
        self.assertEqual(pick_menu("Meat", recipes, 12, FixedRandom(0.999999)).name, "Dish 3")

    def test_roughly_uniform(self):
        recipes = [Recipe(str(i), f"Dish {i}", "Fish", "M") for i in range(3)]
        rng = random.Random(2024)
        counts = Counter(pick_menu("Fish", recipes, 8, rng).name for _ in range(3000))
        self.assertEqual(set(counts), {"Dish 0", "Dish 1", "Dish 2"})
        for name, count in counts.items():
            self.assertTrue(800 < count < 1200, f"{name} picked {count} times")

    def test_empty_category_always_fails(self):
        for category in ("", None):
            with self.subTest(category=category):
                with self.assertRaises(CategoryNotSelectedError):
                    pick_menu(category, SOUPS, hour=7)
                with self.assertRaises(CategoryNotSelectedError):
                    pick_menu(category, [], hour=7)

    def test_no_recipes_is_no_match(self):
        with self.assertRaises(NoMatchingMenuError):
            pick_menu("Soup", [], hour=7)

    def test_unknown_category_is_no_match(self):
        with self.assertRaises(NoMatchingMenuError) as ctx:
            pick_menu("Dessert", SOUPS, hour=7)
        self.assertIsInstance(ctx.exception, MenuSelectionError)
        self.assertEqual(str(ctx.exception), "No matching menu for this category.")

    def test_category_match_is_exact(self):
        with self.assertRaises(NoMatchingMenuError):
            pick_menu("soup", SOUPS, hour=7)
        with self.assertRaises(NoMatchingMenuError):
            pick_menu("Soup ", SOUPS, hour=7)

    def test_malformed_meal_type_only_reachable_through_fallback(self):
        recipes = [Recipe("1", "Odd", "Soup", "breakfast"), Recipe("2", "Broken", "Soup", None)]
        self.assertEqual(candidates_for("Soup", recipes, "M"), recipes)
        self.assertIn(pick_menu("Soup", recipes, 7).name, {"Odd", "Broken"})


class TestRandomizeState(unittest.TestCase):
    def test_success_sets_last_result(self):
        state = SelectionState(recipes=tuple(SOUPS), chosen_category="Soup", last_result="Old")
        new_state, recipe = randomize(state, hour=7, rng=random.Random(0))
        self.assertEqual(recipe, MISO)
        self.assertEqual(new_state.last_result, "Miso")
        self.assertEqual(new_state.chosen_category, "Soup")
        self.assertEqual(state.last_result, "Old")

    def test_failure_leaves_state_unchanged(self):
        state = SelectionState(recipes=(), chosen_category="Soup", last_result="Old")
        with self.assertRaises(NoMatchingMenuError):
            randomize(state, hour=7)
        self.assertEqual(state.last_result, "Old")

    def test_no_category_fails_even_with_recipes(self):
        state = SelectionState(recipes=tuple(SOUPS), chosen_category="")
        with self.assertRaises(CategoryNotSelectedError):
            randomize(state, hour=13)


if __name__ == '__main__':
    unittest.main()
