
# tools/ingredient_database.py
"""
Recipe Nutrition — Ingredient Knowledge Base
============================================
Per-100g nutrient reference data (approximate USDA values), name aliases,
unit spellings and default gram weights per unit.

Everything here is read-only and built once at import. Insertion order of
INGREDIENT_DATABASE matters: substring resolution returns the first key
found in the ingredient name, so more specific names are listed before
the generic ones they contain.
"""

from types import MappingProxyType
from typing import Dict, Mapping

from tools.nutrition_models import IngredientProfile, NutrientProfile

# =============================================================================
# INGREDIENT DATABASE (per 100g)
# =============================================================================
# "grams": gram weight of one unit of this ingredient, overriding the
# generic table. "piece": gram weight of one whole item.
INGREDIENT_DATABASE = {
    # Flours, grains & starches
    "whole wheat flour": {
        "nutrients": {"calories": 340, "protein_g": 13.2, "carbs_g": 72.0, "fat_g": 2.5, "fiber_g": 10.7, "sugar_g": 0.4, "sodium_mg": 2, "cholesterol_mg": 0, "saturated_fat_g": 0.4},
        "grams": {"cup": 120, "tablespoon": 7.5},
    },
    "flour": {
        "nutrients": {"calories": 364, "protein_g": 10.3, "carbs_g": 76.3, "fat_g": 1.0, "fiber_g": 2.7, "sugar_g": 0.3, "sodium_mg": 2, "cholesterol_mg": 0, "saturated_fat_g": 0.2},
        "grams": {"cup": 120, "tablespoon": 7.8, "teaspoon": 2.6},
    },
    "cornstarch": {
        "nutrients": {"calories": 381, "protein_g": 0.3, "carbs_g": 91.3, "fat_g": 0.1, "fiber_g": 0.9, "sugar_g": 0, "sodium_mg": 9, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 128, "tablespoon": 8, "teaspoon": 2.7},
    },
    "oats": {
        "nutrients": {"calories": 379, "protein_g": 13.2, "carbs_g": 67.7, "fat_g": 6.5, "fiber_g": 10.1, "sugar_g": 1.0, "sodium_mg": 6, "cholesterol_mg": 0, "saturated_fat_g": 1.1},
        "grams": {"cup": 81},
    },
    "rice": {
        "nutrients": {"calories": 365, "protein_g": 7.1, "carbs_g": 80.0, "fat_g": 0.7, "fiber_g": 1.3, "sugar_g": 0.1, "sodium_mg": 5, "cholesterol_mg": 0, "saturated_fat_g": 0.2},
        "grams": {"cup": 185},
    },
    "pasta": {
        "nutrients": {"calories": 371, "protein_g": 13.0, "carbs_g": 74.7, "fat_g": 1.5, "fiber_g": 3.2, "sugar_g": 2.7, "sodium_mg": 6, "cholesterol_mg": 0, "saturated_fat_g": 0.3},
        "grams": {"cup": 100},
    },
    "bread": {
        "nutrients": {"calories": 265, "protein_g": 9.0, "carbs_g": 49.0, "fat_g": 3.2, "fiber_g": 2.7, "sugar_g": 5.0, "sodium_mg": 491, "cholesterol_mg": 0, "saturated_fat_g": 0.7},
        "piece": 28,
    },

    # Sugars & sweeteners
    "brown sugar": {
        "nutrients": {"calories": 380, "protein_g": 0.1, "carbs_g": 98.1, "fat_g": 0, "fiber_g": 0, "sugar_g": 97.0, "sodium_mg": 28, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 220, "tablespoon": 13.8, "teaspoon": 4.6},
    },
    "powdered sugar": {
        "nutrients": {"calories": 389, "protein_g": 0, "carbs_g": 99.8, "fat_g": 0, "fiber_g": 0, "sugar_g": 97.8, "sodium_mg": 2, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 120, "tablespoon": 7.5},
    },
    "sugar": {
        "nutrients": {"calories": 387, "protein_g": 0, "carbs_g": 100.0, "fat_g": 0, "fiber_g": 0, "sugar_g": 100.0, "sodium_mg": 1, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 200, "tablespoon": 12.5, "teaspoon": 4.2},
    },
    "honey": {
        "nutrients": {"calories": 304, "protein_g": 0.3, "carbs_g": 82.4, "fat_g": 0, "fiber_g": 0.2, "sugar_g": 82.1, "sodium_mg": 4, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 339, "tablespoon": 21, "teaspoon": 7},
    },
    "maple syrup": {
        "nutrients": {"calories": 260, "protein_g": 0, "carbs_g": 67.0, "fat_g": 0.1, "fiber_g": 0, "sugar_g": 60.5, "sodium_mg": 12, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 315, "tablespoon": 20},
    },

    # Butters, dairy & eggs
    "peanut butter": {
        "nutrients": {"calories": 588, "protein_g": 25.0, "carbs_g": 20.0, "fat_g": 50.0, "fiber_g": 6.0, "sugar_g": 9.2, "sodium_mg": 459, "cholesterol_mg": 0, "saturated_fat_g": 10.3},
        "grams": {"cup": 258, "tablespoon": 16},
    },
    "buttermilk": {
        "nutrients": {"calories": 40, "protein_g": 3.3, "carbs_g": 4.8, "fat_g": 0.9, "fiber_g": 0, "sugar_g": 4.8, "sodium_mg": 105, "cholesterol_mg": 5, "saturated_fat_g": 0.5},
        "grams": {"cup": 245, "tablespoon": 15.3},
    },
    "butter": {
        "nutrients": {"calories": 717, "protein_g": 0.9, "carbs_g": 0.1, "fat_g": 81.1, "fiber_g": 0, "sugar_g": 0.1, "sodium_mg": 643, "cholesterol_mg": 215, "saturated_fat_g": 51.4},
        "grams": {"cup": 227, "tablespoon": 14.2, "teaspoon": 4.7, "stick": 113},
    },
    "eggplant": {
        "nutrients": {"calories": 25, "protein_g": 1.0, "carbs_g": 5.9, "fat_g": 0.2, "fiber_g": 3.0, "sugar_g": 3.5, "sodium_mg": 2, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 82},
        "piece": 458,
    },
    "egg": {
        "nutrients": {"calories": 143, "protein_g": 12.6, "carbs_g": 0.7, "fat_g": 9.5, "fiber_g": 0, "sugar_g": 0.4, "sodium_mg": 142, "cholesterol_mg": 372, "saturated_fat_g": 3.1},
        "grams": {"cup": 243},
        "piece": 50,
    },
    "heavy cream": {
        "nutrients": {"calories": 340, "protein_g": 2.8, "carbs_g": 2.7, "fat_g": 36.0, "fiber_g": 0, "sugar_g": 2.9, "sodium_mg": 27, "cholesterol_mg": 113, "saturated_fat_g": 23.0},
        "grams": {"cup": 238, "tablespoon": 15},
    },
    "sour cream": {
        "nutrients": {"calories": 198, "protein_g": 2.4, "carbs_g": 4.6, "fat_g": 19.4, "fiber_g": 0, "sugar_g": 3.4, "sodium_mg": 31, "cholesterol_mg": 59, "saturated_fat_g": 10.0},
        "grams": {"cup": 230, "tablespoon": 14.4},
    },
    "cream cheese": {
        "nutrients": {"calories": 342, "protein_g": 5.9, "carbs_g": 4.1, "fat_g": 34.2, "fiber_g": 0, "sugar_g": 3.2, "sodium_mg": 321, "cholesterol_mg": 110, "saturated_fat_g": 19.3},
        "grams": {"cup": 232, "tablespoon": 14.5},
    },
    "cheddar": {
        "nutrients": {"calories": 403, "protein_g": 22.9, "carbs_g": 3.1, "fat_g": 33.3, "fiber_g": 0, "sugar_g": 0.5, "sodium_mg": 653, "cholesterol_mg": 99, "saturated_fat_g": 18.9},
        "grams": {"cup": 113},
    },
    "parmesan": {
        "nutrients": {"calories": 431, "protein_g": 38.5, "carbs_g": 4.1, "fat_g": 28.6, "fiber_g": 0, "sugar_g": 0.9, "sodium_mg": 1529, "cholesterol_mg": 88, "saturated_fat_g": 17.3},
        "grams": {"cup": 100, "tablespoon": 5},
    },
    "yogurt": {
        "nutrients": {"calories": 61, "protein_g": 3.5, "carbs_g": 4.7, "fat_g": 3.3, "fiber_g": 0, "sugar_g": 4.7, "sodium_mg": 46, "cholesterol_mg": 13, "saturated_fat_g": 2.1},
        "grams": {"cup": 245},
    },
    "milk": {
        "nutrients": {"calories": 61, "protein_g": 3.2, "carbs_g": 4.8, "fat_g": 3.3, "fiber_g": 0, "sugar_g": 5.1, "sodium_mg": 43, "cholesterol_mg": 10, "saturated_fat_g": 1.9},
        "grams": {"cup": 244},
    },

    # Fats & oils
    "olive oil": {
        "nutrients": {"calories": 884, "protein_g": 0, "carbs_g": 0, "fat_g": 100.0, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 2, "cholesterol_mg": 0, "saturated_fat_g": 13.8},
        "grams": {"cup": 216, "tablespoon": 13.5, "teaspoon": 4.5},
    },
    "vegetable oil": {
        "nutrients": {"calories": 884, "protein_g": 0, "carbs_g": 0, "fat_g": 100.0, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 0, "cholesterol_mg": 0, "saturated_fat_g": 7.4},
        "grams": {"cup": 218, "tablespoon": 13.6, "teaspoon": 4.5},
    },

    # Meat, fish & protein
    "chicken broth": {
        "nutrients": {"calories": 15, "protein_g": 1.6, "carbs_g": 1.4, "fat_g": 0.5, "fiber_g": 0, "sugar_g": 0.7, "sodium_mg": 343, "cholesterol_mg": 3, "saturated_fat_g": 0.1},
        "grams": {"cup": 240},
    },
    "chicken breast": {
        "nutrients": {"calories": 120, "protein_g": 22.5, "carbs_g": 0, "fat_g": 2.6, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 45, "cholesterol_mg": 73, "saturated_fat_g": 0.6},
        "piece": 174,
    },
    "ground beef": {
        "nutrients": {"calories": 254, "protein_g": 17.2, "carbs_g": 0, "fat_g": 20.0, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 66, "cholesterol_mg": 71, "saturated_fat_g": 7.6},
    },
    "bacon": {
        "nutrients": {"calories": 417, "protein_g": 13.0, "carbs_g": 1.4, "fat_g": 39.7, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 662, "cholesterol_mg": 66, "saturated_fat_g": 13.3},
        "piece": 23,
    },
    "salmon": {
        "nutrients": {"calories": 208, "protein_g": 20.4, "carbs_g": 0, "fat_g": 13.4, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 59, "cholesterol_mg": 55, "saturated_fat_g": 3.1},
        "piece": 170,
    },
    "tofu": {
        "nutrients": {"calories": 76, "protein_g": 8.1, "carbs_g": 1.9, "fat_g": 4.8, "fiber_g": 0.3, "sugar_g": 0.6, "sodium_mg": 7, "cholesterol_mg": 0, "saturated_fat_g": 0.7},
        "grams": {"cup": 248},
    },
    "black beans": {
        "nutrients": {"calories": 132, "protein_g": 8.9, "carbs_g": 23.7, "fat_g": 0.5, "fiber_g": 8.7, "sugar_g": 0.3, "sodium_mg": 1, "cholesterol_mg": 0, "saturated_fat_g": 0.1},
        "grams": {"cup": 172},
    },

    # Produce
    "onion": {
        "nutrients": {"calories": 40, "protein_g": 1.1, "carbs_g": 9.3, "fat_g": 0.1, "fiber_g": 1.7, "sugar_g": 4.2, "sodium_mg": 4, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 160},
        "piece": 110,
    },
    "garlic": {
        "nutrients": {"calories": 149, "protein_g": 6.4, "carbs_g": 33.1, "fat_g": 0.5, "fiber_g": 2.1, "sugar_g": 1.0, "sodium_mg": 17, "cholesterol_mg": 0, "saturated_fat_g": 0.1},
        "grams": {"tablespoon": 8.5, "teaspoon": 2.8},
        "piece": 3,
    },
    "tomato": {
        "nutrients": {"calories": 18, "protein_g": 0.9, "carbs_g": 3.9, "fat_g": 0.2, "fiber_g": 1.2, "sugar_g": 2.6, "sodium_mg": 5, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 180},
        "piece": 123,
    },
    "potato": {
        "nutrients": {"calories": 77, "protein_g": 2.0, "carbs_g": 17.5, "fat_g": 0.1, "fiber_g": 2.2, "sugar_g": 0.8, "sodium_mg": 6, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 150},
        "piece": 213,
    },
    "carrot": {
        "nutrients": {"calories": 41, "protein_g": 0.9, "carbs_g": 9.6, "fat_g": 0.2, "fiber_g": 2.8, "sugar_g": 4.7, "sodium_mg": 69, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 128},
        "piece": 61,
    },
    "celery": {
        "nutrients": {"calories": 16, "protein_g": 0.7, "carbs_g": 3.0, "fat_g": 0.2, "fiber_g": 1.6, "sugar_g": 1.3, "sodium_mg": 80, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 101},
        "piece": 40,
    },
    "bell pepper": {
        "nutrients": {"calories": 31, "protein_g": 1.0, "carbs_g": 6.0, "fat_g": 0.3, "fiber_g": 2.1, "sugar_g": 4.2, "sodium_mg": 4, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 149},
        "piece": 119,
    },
    "spinach": {
        "nutrients": {"calories": 23, "protein_g": 2.9, "carbs_g": 3.6, "fat_g": 0.4, "fiber_g": 2.2, "sugar_g": 0.4, "sodium_mg": 79, "cholesterol_mg": 0, "saturated_fat_g": 0.1},
        "grams": {"cup": 30},
    },
    "broccoli": {
        "nutrients": {"calories": 34, "protein_g": 2.8, "carbs_g": 6.6, "fat_g": 0.4, "fiber_g": 2.6, "sugar_g": 1.7, "sodium_mg": 33, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 91},
    },
    "banana": {
        "nutrients": {"calories": 89, "protein_g": 1.1, "carbs_g": 22.8, "fat_g": 0.3, "fiber_g": 2.6, "sugar_g": 12.2, "sodium_mg": 1, "cholesterol_mg": 0, "saturated_fat_g": 0.1},
        "grams": {"cup": 150},
        "piece": 118,
    },
    "apple": {
        "nutrients": {"calories": 52, "protein_g": 0.3, "carbs_g": 13.8, "fat_g": 0.2, "fiber_g": 2.4, "sugar_g": 10.4, "sodium_mg": 1, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 125},
        "piece": 182,
    },
    "lemon juice": {
        "nutrients": {"calories": 22, "protein_g": 0.4, "carbs_g": 6.9, "fat_g": 0.2, "fiber_g": 0.3, "sugar_g": 2.5, "sodium_mg": 1, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 244, "tablespoon": 15.2, "teaspoon": 5.1},
    },
    "lemon": {
        "nutrients": {"calories": 29, "protein_g": 1.1, "carbs_g": 9.3, "fat_g": 0.3, "fiber_g": 2.8, "sugar_g": 2.5, "sodium_mg": 2, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "piece": 58,
    },

    # Nuts & baking
    "almonds": {
        "nutrients": {"calories": 579, "protein_g": 21.2, "carbs_g": 21.6, "fat_g": 49.9, "fiber_g": 12.5, "sugar_g": 4.4, "sodium_mg": 1, "cholesterol_mg": 0, "saturated_fat_g": 3.8},
        "grams": {"cup": 143},
    },
    "walnuts": {
        "nutrients": {"calories": 654, "protein_g": 15.2, "carbs_g": 13.7, "fat_g": 65.2, "fiber_g": 6.7, "sugar_g": 2.6, "sodium_mg": 2, "cholesterol_mg": 0, "saturated_fat_g": 6.1},
        "grams": {"cup": 117},
    },
    "chocolate chips": {
        "nutrients": {"calories": 479, "protein_g": 4.2, "carbs_g": 63.1, "fat_g": 30.0, "fiber_g": 5.9, "sugar_g": 54.5, "sodium_mg": 11, "cholesterol_mg": 0, "saturated_fat_g": 17.8},
        "grams": {"cup": 168},
    },
    "cocoa powder": {
        "nutrients": {"calories": 228, "protein_g": 19.6, "carbs_g": 57.9, "fat_g": 13.7, "fiber_g": 37.0, "sugar_g": 1.8, "sodium_mg": 21, "cholesterol_mg": 0, "saturated_fat_g": 8.1},
        "grams": {"cup": 86, "tablespoon": 5.4},
    },
    "baking powder": {
        "nutrients": {"calories": 53, "protein_g": 0, "carbs_g": 27.7, "fat_g": 0, "fiber_g": 0.2, "sugar_g": 0, "sodium_mg": 10600, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"teaspoon": 4.6, "tablespoon": 13.8},
    },
    "baking soda": {
        "nutrients": {"calories": 0, "protein_g": 0, "carbs_g": 0, "fat_g": 0, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 27360, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"teaspoon": 4.6, "tablespoon": 13.8},
    },
    "vanilla extract": {
        "nutrients": {"calories": 288, "protein_g": 0.1, "carbs_g": 12.7, "fat_g": 0.1, "fiber_g": 0, "sugar_g": 12.7, "sodium_mg": 9, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"teaspoon": 4.2, "tablespoon": 13},
    },

    # Seasonings & liquids
    "soy sauce": {
        "nutrients": {"calories": 53, "protein_g": 8.1, "carbs_g": 4.9, "fat_g": 0.6, "fiber_g": 0.8, "sugar_g": 0.4, "sodium_mg": 5493, "cholesterol_mg": 0, "saturated_fat_g": 0.1},
        "grams": {"tablespoon": 16, "teaspoon": 5.3},
    },
    "black pepper": {
        "nutrients": {"calories": 251, "protein_g": 10.4, "carbs_g": 64.0, "fat_g": 3.3, "fiber_g": 25.3, "sugar_g": 0.6, "sodium_mg": 20, "cholesterol_mg": 0, "saturated_fat_g": 1.4},
        "grams": {"teaspoon": 2.3, "tablespoon": 6.9},
    },
    "cinnamon": {
        "nutrients": {"calories": 247, "protein_g": 4.0, "carbs_g": 80.6, "fat_g": 1.2, "fiber_g": 53.1, "sugar_g": 2.2, "sodium_mg": 10, "cholesterol_mg": 0, "saturated_fat_g": 0.3},
        "grams": {"teaspoon": 2.6, "tablespoon": 7.8},
    },
    "salt": {
        "nutrients": {"calories": 0, "protein_g": 0, "carbs_g": 0, "fat_g": 0, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 38758, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 292, "tablespoon": 18, "teaspoon": 6},
    },
    "water": {
        "nutrients": {"calories": 0, "protein_g": 0, "carbs_g": 0, "fat_g": 0, "fiber_g": 0, "sugar_g": 0, "sodium_mg": 4, "cholesterol_mg": 0, "saturated_fat_g": 0},
        "grams": {"cup": 237},
    },
}


# =============================================================================
# NAME ALIASES (free-text variant -> canonical key)
# =============================================================================
INGREDIENT_ALIASES = {
    # Flour
    "all-purpose flour": "flour",
    "all purpose flour": "flour",
    "plain flour": "flour",
    "ap flour": "flour",
    "wheat flour": "whole wheat flour",
    "corn starch": "cornstarch",
    "rolled oats": "oats",
    "old-fashioned oats": "oats",
    "quick oats": "oats",
    "white rice": "rice",
    "long grain rice": "rice",
    "spaghetti": "pasta",
    "penne": "pasta",
    "macaroni": "pasta",
    # Sugar
    "granulated sugar": "sugar",
    "white sugar": "sugar",
    "caster sugar": "sugar",
    "light brown sugar": "brown sugar",
    "dark brown sugar": "brown sugar",
    "confectioners sugar": "powdered sugar",
    "confectioners' sugar": "powdered sugar",
    "icing sugar": "powdered sugar",
    # Dairy
    "unsalted butter": "butter",
    "salted butter": "butter",
    "eggs": "egg",
    "large egg": "egg",
    "large eggs": "egg",
    "whole milk": "milk",
    "heavy whipping cream": "heavy cream",
    "whipping cream": "heavy cream",
    "cheddar cheese": "cheddar",
    "shredded cheddar cheese": "cheddar",
    "parmesan cheese": "parmesan",
    "grated parmesan cheese": "parmesan",
    "plain yogurt": "yogurt",
    # Oils
    "extra virgin olive oil": "olive oil",
    "evoo": "olive oil",
    "canola oil": "vegetable oil",
    # Protein
    "chicken stock": "chicken broth",
    "chicken breasts": "chicken breast",
    "boneless skinless chicken breast": "chicken breast",
    "boneless skinless chicken breasts": "chicken breast",
    "minced beef": "ground beef",
    # Produce
    "onions": "onion",
    "yellow onion": "onion",
    "garlic clove": "garlic",
    "garlic cloves": "garlic",
    "tomatoes": "tomato",
    "potatoes": "potato",
    "carrots": "carrot",
    "red bell pepper": "bell pepper",
    "green bell pepper": "bell pepper",
    "bananas": "banana",
    "apples": "apple",
    # Baking & seasoning
    "semisweet chocolate chips": "chocolate chips",
    "unsweetened cocoa powder": "cocoa powder",
    "pure vanilla extract": "vanilla extract",
    "vanilla": "vanilla extract",
    "ground cinnamon": "cinnamon",
    "ground black pepper": "black pepper",
    "kosher salt": "salt",
    "sea salt": "salt",
    "table salt": "salt",
    "bicarbonate of soda": "baking soda",
}


# =============================================================================
# UNITS
# =============================================================================
PIECE_UNIT = "piece"

UNIT_ALIASES = {
    # Volume
    "tsp": "teaspoon", "tsps": "teaspoon", "teaspoons": "teaspoon",
    "tbsp": "tablespoon", "tbsps": "tablespoon", "tbs": "tablespoon",
    "tbl": "tablespoon", "tablespoons": "tablespoon",
    "c": "cup", "cups": "cup",
    "fl oz": "fluid ounce", "fl. oz": "fluid ounce", "fluid ounces": "fluid ounce",
    "pints": "pint", "pt": "pint",
    "quarts": "quart", "qt": "quart",
    "ml": "milliliter", "milliliters": "milliliter", "millilitre": "milliliter", "millilitres": "milliliter",
    "l": "liter", "liters": "liter", "litre": "liter", "litres": "liter",
    # Mass
    "g": "gram", "gr": "gram", "grams": "gram", "gramme": "gram", "grammes": "gram",
    "kg": "kilogram", "kilograms": "kilogram",
    "oz": "ounce", "ounces": "ounce",
    "lb": "pound", "lbs": "pound", "pounds": "pound",
    # Count
    "pieces": PIECE_UNIT, "pc": PIECE_UNIT, "pcs": PIECE_UNIT,
    "each": PIECE_UNIT, "ea": PIECE_UNIT, "whole": PIECE_UNIT,
    "unit": PIECE_UNIT, "units": PIECE_UNIT,
    "large": PIECE_UNIT, "medium": PIECE_UNIT, "small": PIECE_UNIT,
    "clove": PIECE_UNIT, "cloves": PIECE_UNIT,
    "slice": PIECE_UNIT, "slices": PIECE_UNIT,
    "stalk": PIECE_UNIT, "stalks": PIECE_UNIT,
    "fillet": PIECE_UNIT, "fillets": PIECE_UNIT,
    # Misc
    "sticks": "stick",
    "pinches": "pinch",
    "dashes": "dash",
}

# Default grams per canonical unit when the ingredient has no override.
# Volumes assume a water-like density.
GENERIC_UNIT_GRAMS = {
    "teaspoon": 5.0,
    "tablespoon": 15.0,
    "cup": 240.0,
    "fluid ounce": 30.0,
    "pint": 473.0,
    "quart": 946.0,
    "milliliter": 1.0,
    "liter": 1000.0,
    "gram": 1.0,
    "kilogram": 1000.0,
    "ounce": 28.35,
    "pound": 453.59,
    "pinch": 0.36,
    "dash": 0.6,
}


# =============================================================================
# LOADER
# =============================================================================
def load_ingredient_profiles() -> Mapping[str, IngredientProfile]:
    """Build the immutable profile table from INGREDIENT_DATABASE."""
    profiles: Dict[str, IngredientProfile] = {}
    for name, entry in INGREDIENT_DATABASE.items():
        profiles[name] = IngredientProfile(
            name=name,
            per_100g=NutrientProfile(**entry["nutrients"]),
            grams_per_unit=entry.get("grams", {}),
            grams_per_piece=entry.get("piece"),
        )
    return MappingProxyType(profiles)


INGREDIENT_PROFILES = load_ingredient_profiles()


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "INGREDIENT_DATABASE",
    "INGREDIENT_ALIASES",
    "INGREDIENT_PROFILES",
    "UNIT_ALIASES",
    "GENERIC_UNIT_GRAMS",
    "PIECE_UNIT",
    "load_ingredient_profiles",
]
