# unit_tests/test_tool_nutrition_calculator.py
"""
Unit Tests for the Deterministic Nutrition Calculator
=====================================================
Run with: python -m pytest unit_tests/test_tool_nutrition_calculator.py -v
"""

import pytest

from tools.nutrition_models import NUTRIENT_KEYS, IngredientProfile, NutrientProfile
from tools.ingredient_database import INGREDIENT_PROFILES
from tools.nutrition_calculator import (
    parse_quantity,
    normalize_unit,
    parse_servings,
    resolve_ingredient_key,
    grams_for_ingredient,
    calculate_deterministic,
)

FLOUR = INGREDIENT_PROFILES["flour"]
SUGAR = INGREDIENT_PROFILES["sugar"]
EGG = INGREDIENT_PROFILES["egg"]
BUTTER = INGREDIENT_PROFILES["butter"]


def expected_per_serving(parts, servings):
    """Hand-compute per-serving totals from (profile, grams) pairs."""
    totals = {}
    for key in NUTRIENT_KEYS:
        total = 0.0
        for profile, grams in parts:
            total += getattr(profile.per_100g, key) * grams / 100
        totals[key] = total / servings
    return totals


# =============================================================================
# parse_quantity
# =============================================================================
@pytest.mark.parametrize("text, expected", [
    ("3", 3.0),
    ("0.5", 0.5),
    ("1/2", 0.5),
    ("2 1/2", 2.5),
    (" 3/4 ", 0.75),
    ("½", 0.5),
    ("1½", 1.5),
    ("1 ¼", 1.25),
])
def test_parse_quantity_numbers_and_fractions(text, expected):
    assert parse_quantity(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["abc", "", None, "1/0", "-2", "a pinch", "1-2"])
def test_parse_quantity_defaults_to_one(text):
    assert parse_quantity(text) == 1


# =============================================================================
# normalize_unit
# =============================================================================
def test_normalize_unit_aliases():
    assert normalize_unit("Tbsp") == "tablespoon"
    assert normalize_unit(" tablespoons ") == "tablespoon"
    assert normalize_unit("tsp.") == "teaspoon"
    assert normalize_unit("CUPS") == "cup"
    assert normalize_unit("lbs") == "pound"
    assert normalize_unit("cloves") == "piece"


def test_normalize_unit_passes_unknown_through():
    assert normalize_unit(" Handful ") == "handful"
    assert normalize_unit("cup") == "cup"
    assert normalize_unit("") == ""
    assert normalize_unit(None) == ""


# =============================================================================
# resolve_ingredient_key
# =============================================================================
def test_resolve_exact_and_alias():
    assert resolve_ingredient_key("Flour") == "flour"
    assert resolve_ingredient_key("  all-purpose flour ") == "flour"
    assert resolve_ingredient_key("Light Brown Sugar") == "brown sugar"
    assert resolve_ingredient_key("eggs") == "egg"


def test_resolve_substring_fallback():
    assert resolve_ingredient_key("sifted cake flour") == "flour"
    assert resolve_ingredient_key("creamy peanut butter") == "peanut butter"
    assert resolve_ingredient_key("butter, softened") == "butter"
    # Lenient matching: compound names take the first contained key
    assert resolve_ingredient_key("garlic powder") == "garlic"


def test_resolve_substring_uses_table_order():
    profiles = {
        "sugar": SUGAR,
        "brown sugar": INGREDIENT_PROFILES["brown sugar"],
    }
    assert resolve_ingredient_key("dark brown sugar", profiles, aliases={}) == "sugar"


def test_resolve_compound_names_ahead_of_their_prefixes():
    assert resolve_ingredient_key("low-fat buttermilk") == "buttermilk"
    assert resolve_ingredient_key("2 small eggplants") == "eggplant"
    assert resolve_ingredient_key("unsalted butter") == "butter"
    assert resolve_ingredient_key("beaten egg") == "egg"


def test_resolve_unknown_returns_none():
    assert resolve_ingredient_key("unicorn tears") is None
    assert resolve_ingredient_key("") is None
    assert resolve_ingredient_key(None) is None


# =============================================================================
# grams_for_ingredient
# =============================================================================
def test_grams_ingredient_specific_unit():
    assert grams_for_ingredient(FLOUR, 1, "cup") == 120
    assert grams_for_ingredient(FLOUR, parse_quantity("1/2"), "cups") == 60
    assert grams_for_ingredient(BUTTER, 1, "sticks") == 113


def test_grams_piece_units():
    assert grams_for_ingredient(EGG, 2, "piece") == 100
    assert grams_for_ingredient(EGG, 2, "large") == 100
    assert grams_for_ingredient(INGREDIENT_PROFILES["garlic"], 3, "cloves") == 9


def test_grams_generic_units():
    # Egg has no tablespoon override
    assert grams_for_ingredient(EGG, 1, "tbsp") == 15
    assert grams_for_ingredient(FLOUR, 100, "g") == 100
    assert grams_for_ingredient(FLOUR, 1, "kg") == 1000
    assert grams_for_ingredient(FLOUR, 2, "oz") == pytest.approx(56.7)


def test_grams_empty_unit_means_grams():
    assert grams_for_ingredient(EGG, 2, "") == 2
    assert grams_for_ingredient(FLOUR, 250, None) == 250


def test_grams_unknown_unit_returns_none():
    assert grams_for_ingredient(FLOUR, 1, "handful") is None
    # No piece weight for flour and "piece" has no generic weight
    assert grams_for_ingredient(FLOUR, 1, "piece") is None


def test_grams_accepts_free_text_quantity():
    assert grams_for_ingredient(FLOUR, "1", "cup") == 120
    assert grams_for_ingredient(EGG, "2", "") == 2
    assert grams_for_ingredient(EGG, "2", "piece") == 100
    assert grams_for_ingredient(FLOUR, "1/2", "cup") == 60
    assert grams_for_ingredient(FLOUR, "", "cup") == 120


# =============================================================================
# calculate_deterministic
# =============================================================================
def test_deterministic_200g_flour():
    result = calculate_deterministic([{"name": "flour", "quantity": "200", "unit": "g"}], 1)

    assert result is not None
    for key in NUTRIENT_KEYS:
        assert getattr(result, key) == pytest.approx(2 * getattr(FLOUR.per_100g, key))


def test_deterministic_divides_by_servings():
    result = calculate_deterministic([{"name": "flour", "quantity": "200", "unit": "g"}], 4)

    assert result.calories == pytest.approx(2 * FLOUR.per_100g.calories / 4)
    assert result.protein_g == pytest.approx(2 * FLOUR.per_100g.protein_g / 4)


@pytest.mark.parametrize("servings", [0, -3])
def test_deterministic_non_positive_servings_count_as_one(servings):
    ingredients = [{"name": "sugar", "quantity": "1", "unit": "cup"}]
    assert calculate_deterministic(ingredients, servings) == calculate_deterministic(ingredients, 1)


def test_deterministic_flour_and_sugar_recipe():
    ingredients = [
        {"name": "flour", "quantity": "1", "unit": "cup"},
        {"name": "sugar", "quantity": "1/2", "unit": "cup"},
    ]
    flour_grams = grams_for_ingredient(FLOUR, 1, "cup")
    sugar_grams = grams_for_ingredient(SUGAR, 0.5, "cup")
    assert (flour_grams, sugar_grams) == (120, 100)

    result = calculate_deterministic(ingredients, 4)
    expected = expected_per_serving([(FLOUR, flour_grams), (SUGAR, sugar_grams)], 4)

    for key in NUTRIENT_KEYS:
        assert getattr(result, key) == pytest.approx(expected[key])
    assert result.calories == pytest.approx((364 * 1.2 + 387 * 1.0) / 4)


def test_deterministic_unknown_ingredient_aborts():
    ingredients = [
        {"name": "flour", "quantity": "2", "unit": "cups"},
        {"name": "sugar", "quantity": "1", "unit": "cup"},
        {"name": "butter", "quantity": "1", "unit": "stick"},
        {"name": "dragonfruit essence", "quantity": "1", "unit": "tsp"},
    ]
    assert calculate_deterministic(ingredients, 4) is None
    assert calculate_deterministic(ingredients[:3], 4) is not None


def test_deterministic_unknown_unit_aborts():
    ingredients = [
        {"name": "flour", "quantity": "2", "unit": "cups"},
        {"name": "sugar", "quantity": "1", "unit": "handful"},
    ]
    assert calculate_deterministic(ingredients, 2) is None


def test_deterministic_sparse_profiles():
    profiles = {
        "stock": IngredientProfile(name="stock", per_100g=NutrientProfile(calories=10)),
        "lentils": IngredientProfile(
            name="lentils", per_100g=NutrientProfile(calories=116, protein_g=9)
        ),
    }
    ingredients = [
        {"name": "stock", "quantity": "200", "unit": "g"},
        {"name": "lentils", "quantity": "100", "unit": "g"},
    ]
    result = calculate_deterministic(ingredients, 2, profiles)

    assert result.calories == pytest.approx((20 + 116) / 2)
    assert result.protein_g == pytest.approx(4.5)
    assert result.fat_g is None


def test_deterministic_empty_list_has_no_data():
    result = calculate_deterministic([], 4)
    assert result is not None
    assert not result.has_data()


# =============================================================================
# parse_servings
# =============================================================================
@pytest.mark.parametrize("text, expected", [
    ("Serves 4-6", 4),
    ("4", 4),
    ("12 cookies", 12),
    ("a few", 1),
    ("", 1),
    (None, 1),
])
def test_parse_servings(text, expected):
    assert parse_servings(text) == expected
