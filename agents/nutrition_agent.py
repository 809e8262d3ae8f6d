"""
Recipe Nutrition — Nutrition Agent
==================================
Per-serving nutrition for extracted or saved recipes.

Knowledge base first, Gemini estimate second, results memoized. Nutrition is
an enrichment: nothing in here raises to the recipe flow.
"""

from typing import Dict, Any, Awaitable, Callable, List, Optional, Union

from tools.nutrition_models import IngredientRequest, NutrientProfile, coerce_ingredients
from tools.nutrition_calculator import calculate_deterministic, parse_servings
from tools.nutrition_estimator import estimate_nutrition_with_ai, GEMINI_AVAILABLE
from memory.nutrition_cache import NutritionCache, build_cache_key, create_cache

Estimator = Callable[[List[IngredientRequest], float], Awaitable[Optional[NutrientProfile]]]
IngredientInput = Union[IngredientRequest, Dict[str, Any]]

print(f"🥗 Nutrition Agent: Gemini={GEMINI_AVAILABLE}")

# =============================================================================
# CONFIGURATION
# =============================================================================
# Defaults applied to extracted ingredients missing a quantity or unit
RECIPE_DEFAULT_QUANTITY = "1"
RECIPE_DEFAULT_UNIT = "unit"


# =============================================================================
# RESOLVER
# =============================================================================
class NutritionResolver:
    """Read-through cache over the deterministic calculator and the AI estimator."""

    def __init__(
        self,
        cache: Optional[NutritionCache] = None,
        estimator: Optional[Estimator] = None,
    ):
        self.cache = cache if cache is not None else create_cache()
        self.estimator = estimator or estimate_nutrition_with_ai

    async def get_or_compute(
        self,
        ingredients: List[IngredientInput],
        servings: float,
    ) -> Optional[NutrientProfile]:
        """
        Cached per-serving nutrition for an ingredient list.

        Hit -> cached value. Miss -> knowledge base, then AI estimate.
        Successful results are cached, failures are not so the next call
        retries the estimator.
        """
        requests = coerce_ingredients(ingredients)
        servings = max(servings, 1)
        # 4 and 4.0 share a cache entry
        if float(servings).is_integer():
            servings = int(servings)
        key = build_cache_key(requests, servings)

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        result = calculate_deterministic(requests, servings)
        if result is None:
            print(f"🔎 Nutrition: {len(requests)} ingredient(s) not fully resolved, estimating with AI")
            result = await self._estimate(requests, servings)

        if result is None:
            return None

        self.cache.put(key, result)
        return result

    async def _estimate(
        self,
        requests: List[IngredientRequest],
        servings: float,
    ) -> Optional[NutrientProfile]:
        try:
            return await self.estimator(requests, servings)
        except Exception as e:
            print(f"⚠️ Nutrition estimate failed: {e}")
            return None


_DEFAULT_RESOLVER: Optional[NutritionResolver] = None


def get_default_resolver() -> NutritionResolver:
    """Process-wide resolver, created on first use."""
    global _DEFAULT_RESOLVER
    if _DEFAULT_RESOLVER is None:
        _DEFAULT_RESOLVER = NutritionResolver()
    return _DEFAULT_RESOLVER


def set_default_resolver(resolver: Optional[NutritionResolver]) -> None:
    """Swap the process-wide resolver (None resets to a fresh default)."""
    global _DEFAULT_RESOLVER
    _DEFAULT_RESOLVER = resolver


# =============================================================================
# MAIN TOOL FUNCTIONS
# =============================================================================
async def calculate_nutrition_from_ingredients(
    ingredients: List[IngredientInput],
    servings: float,
    resolver: Optional[NutritionResolver] = None,
) -> Optional[NutrientProfile]:
    """
    Calculate per-serving nutrition for a recipe's ingredients.

    Args:
        ingredients: {"name", "quantity", "unit"} dicts or IngredientRequest objects
        servings: Number of servings; values below 1 count as 1
        resolver: Resolver to use; defaults to the process-wide one

    Returns:
        Per-serving NutrientProfile, or None when no ingredients were given
        or nutrition could not be determined.

    Example:
        >>> await calculate_nutrition_from_ingredients(
        ...     [{"name": "flour", "quantity": "1", "unit": "cup"}], 4)
        NutrientProfile(calories=109.2, protein_g=3.09, ...)
    """
    if not ingredients:
        return None

    try:
        return await (resolver or get_default_resolver()).get_or_compute(ingredients, servings)
    except Exception as e:
        print(f"❌ Nutrition calculation failed: {e}")
        return None


async def enrich_recipe_nutrition(
    recipe: Dict[str, Any],
    resolver: Optional[NutritionResolver] = None,
) -> Dict[str, Any]:
    """
    Attach per-serving nutrition to an extracted recipe that has none.

    The recipe is returned unchanged when it already carries nutrition,
    has no ingredients, or nutrition cannot be determined.
    """
    if recipe.get("nutrition") or not recipe.get("ingredients"):
        return recipe

    try:
        servings = parse_servings(recipe.get("servings"))
        ingredients = [
            {
                "name": ing.get("name", ""),
                "quantity": ing.get("quantity") or RECIPE_DEFAULT_QUANTITY,
                "unit": ing.get("unit") or RECIPE_DEFAULT_UNIT,
            }
            for ing in recipe["ingredients"]
        ]
    except Exception as e:
        print(f"⚠️ Recipe ingredients unreadable, skipping nutrition: {e}")
        return recipe

    nutrition = await calculate_nutrition_from_ingredients(ingredients, servings, resolver)
    if nutrition is not None:
        recipe["nutrition"] = nutrition.to_dict()

    return recipe


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "NutritionResolver",
    "get_default_resolver",
    "set_default_resolver",
    "calculate_nutrition_from_ingredients",
    "enrich_recipe_nutrition",
    "parse_servings",
]
