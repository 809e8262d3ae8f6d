
# tools/nutrition_calculator.py
"""
Recipe Nutrition — Deterministic Calculator
===========================================
Turns free-text ingredient lines into a per-serving nutrient profile using
the local knowledge base only.

Pipeline per ingredient:
    name     -> resolve_ingredient_key  -> IngredientProfile
    quantity -> parse_quantity          -> float
    unit     -> normalize_unit          -> grams_for_ingredient -> grams
    grams / 100 * per_100g / servings   -> contribution

Any ingredient that cannot be resolved makes the whole calculation return
None. Callers then fall back to the AI estimator instead of showing a
partial total.
"""

import re
from typing import Dict, Any, List, Mapping, Optional, Union

from tools.ingredient_database import (
    INGREDIENT_ALIASES,
    INGREDIENT_PROFILES,
    UNIT_ALIASES,
    GENERIC_UNIT_GRAMS,
    PIECE_UNIT,
)
from tools.nutrition_models import (
    IngredientProfile,
    IngredientRequest,
    NutrientProfile,
    add_profiles,
    scale_profile,
    coerce_ingredients,
)

# =============================================================================
# QUANTITY PATTERNS
# =============================================================================
UNICODE_FRACTIONS = {
    "½": 0.5, "⅓": 1 / 3, "⅔": 2 / 3, "¼": 0.25, "¾": 0.75,
    "⅕": 0.2, "⅖": 0.4, "⅗": 0.6, "⅘": 0.8, "⅙": 1 / 6, "⅚": 5 / 6,
    "⅛": 0.125, "⅜": 0.375, "⅝": 0.625, "⅞": 0.875,
}

NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$|^\.\d+$")
FRACTION_RE = re.compile(r"^(\d+)\s*/\s*(\d+)$")
MIXED_RE = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)$")
UNICODE_MIXED_RE = re.compile(r"^(\d*)\s*([" + "".join(UNICODE_FRACTIONS) + r"])$")
SERVINGS_RE = re.compile(r"(\d+)")

DEFAULT_QUANTITY = 1.0


# =============================================================================
# HELPER: Quantity & Unit Normalization
# =============================================================================
def parse_quantity(text: Optional[str]) -> float:
    """
    Parse a free-text quantity.

    Examples: "3" -> 3.0, "1/2" -> 0.5, "2 1/2" -> 2.5, "1½" -> 1.5.
    Anything unparseable -> 1.0. Never raises.
    """
    if text is None:
        return DEFAULT_QUANTITY

    value = str(text).strip()
    if not value:
        return DEFAULT_QUANTITY

    if NUMBER_RE.match(value):
        return float(value)

    fraction = FRACTION_RE.match(value)
    if fraction:
        numerator, denominator = int(fraction.group(1)), int(fraction.group(2))
        if denominator == 0:
            return DEFAULT_QUANTITY
        return numerator / denominator

    mixed = MIXED_RE.match(value)
    if mixed:
        whole = int(mixed.group(1))
        numerator, denominator = int(mixed.group(2)), int(mixed.group(3))
        if denominator == 0:
            return DEFAULT_QUANTITY
        return whole + numerator / denominator

    vulgar = UNICODE_MIXED_RE.match(value)
    if vulgar:
        whole = int(vulgar.group(1)) if vulgar.group(1) else 0
        return whole + UNICODE_FRACTIONS[vulgar.group(2)]

    return DEFAULT_QUANTITY


def normalize_unit(text: Optional[str]) -> str:
    """Map a unit spelling to its canonical name; unknown units pass through lowercased."""
    if not text:
        return ""
    unit = text.strip().lower().rstrip(".")
    return UNIT_ALIASES.get(unit, unit)


def parse_servings(text: Optional[str]) -> int:
    """First integer in a serving description ("Serves 4-6" -> 4), else 1."""
    if not text:
        return 1
    match = SERVINGS_RE.search(str(text))
    return int(match.group(1)) if match else 1


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip().lower()


# =============================================================================
# HELPER: Ingredient Resolution
# =============================================================================
def resolve_ingredient_key(
    name: Optional[str],
    profiles: Mapping[str, IngredientProfile] = INGREDIENT_PROFILES,
    aliases: Mapping[str, str] = INGREDIENT_ALIASES,
) -> Optional[str]:
    """
    Resolve a free-text ingredient name to a knowledge-base key.

    Order: alias table, exact profile key, then the first profile key
    (table order) contained in the name. None when nothing matches.
    """
    text = normalize_name(name)
    if not text:
        return None

    alias = aliases.get(text)
    if alias is not None and alias in profiles:
        return alias

    if text in profiles:
        return text

    for key in profiles:
        if key in text:
            return key

    return None


# =============================================================================
# HELPER: Gram Conversion
# =============================================================================
def grams_for_ingredient(
    profile: IngredientProfile,
    quantity: Union[str, float, None],
    unit: Optional[str],
) -> Optional[float]:
    """
    Convert quantity + unit into grams of this ingredient.

    Free-text quantities ("1/2", "2 1/2") go through parse_quantity first.

    Precedence: ingredient-specific unit weight, piece weight, generic unit
    weight, bare number as grams. None when the unit is unknown.
    """
    if not isinstance(quantity, (int, float)):
        quantity = parse_quantity(quantity)
    canonical = normalize_unit(unit)

    if canonical in profile.grams_per_unit:
        return quantity * profile.grams_per_unit[canonical]

    if canonical == PIECE_UNIT and profile.grams_per_piece is not None:
        return quantity * profile.grams_per_piece

    if canonical in GENERIC_UNIT_GRAMS:
        return quantity * GENERIC_UNIT_GRAMS[canonical]

    # No unit: "2 eggs" with an empty unit field lands here as 2 grams
    if not canonical:
        return quantity

    return None


# =============================================================================
# MAIN: Deterministic Calculation
# =============================================================================
def calculate_deterministic(
    ingredients: List[Union[IngredientRequest, Dict[str, Any]]],
    servings: float,
    profiles: Mapping[str, IngredientProfile] = INGREDIENT_PROFILES,
) -> Optional[NutrientProfile]:
    """
    Per-serving nutrition from the knowledge base, all or nothing.

    Args:
        ingredients: IngredientRequest objects or {"name", "quantity", "unit"} dicts
        servings: Serving count; zero or negative counts as 1
        profiles: Knowledge base to resolve against

    Returns:
        Summed per-serving NutrientProfile, or None as soon as one
        ingredient name or unit cannot be resolved.
    """
    divisor = max(servings, 1)
    total = NutrientProfile()

    for ingredient in coerce_ingredients(ingredients):
        key = resolve_ingredient_key(ingredient.name, profiles)
        if key is None:
            return None

        profile = profiles[key]
        grams = grams_for_ingredient(profile, ingredient.quantity, ingredient.unit)
        if grams is None:
            return None

        contribution = scale_profile(profile.per_100g, (grams / 100) / divisor)
        total = add_profiles(total, contribution)

    return total


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "parse_quantity",
    "normalize_unit",
    "parse_servings",
    "normalize_name",
    "resolve_ingredient_key",
    "grams_for_ingredient",
    "calculate_deterministic",
]
