
# tools/nutrition_estimator.py
"""
Recipe Nutrition — AI Estimator
===============================
Asks Gemini for per-serving nutrition when the knowledge base cannot
resolve a recipe. Best effort: every failure is logged and returned as None.
"""

import os
import json
from typing import Dict, Any, List, Optional, Union

from pydantic import ValidationError
from dotenv import load_dotenv
from google import genai
from google.genai import types as genai_types

from tools.nutrition_models import (
    IngredientRequest,
    NutrientProfile,
    coerce_ingredients,
)

# =============================================================================
# CONFIGURATION
# =============================================================================
load_dotenv()

GOOGLE_API_KEY = os.environ.get("GOOGLE_API_KEY")
NUTRITION_MODEL = os.environ.get("NUTRITION_MODEL", "gemini-2.0-flash")
NUTRITION_TEMPERATURE = float(os.environ.get("NUTRITION_TEMPERATURE", "0.2"))

GEMINI_AVAILABLE = False
CLIENT = None

if GOOGLE_API_KEY:
    CLIENT = genai.Client(api_key=GOOGLE_API_KEY)
    GEMINI_AVAILABLE = True
    print("✅ Nutrition Estimator: Gemini ready")
else:
    print("⚠️ Nutrition Estimator: No API key found")


# =============================================================================
# PROMPTS
# =============================================================================
SYSTEM_INSTRUCTION = """You are a nutrition calculator. Given a list of ingredients with quantities, calculate the total nutritional values for the entire recipe, then divide by the number of servings to get per-serving values.

For each ingredient, look up standard nutritional values per unit (e.g., per cup, per gram, per piece). Then multiply by the quantity and sum all ingredients. Finally, divide by the number of servings.

Return ONLY valid JSON with this exact structure (all values should be numbers, or null if unknown):
{
  "calories": 250,
  "protein_g": 15.5,
  "carbs_g": 30.0,
  "fat_g": 8.5,
  "fiber_g": 5.0,
  "sugar_g": 10.0,
  "sodium_mg": 500.0,
  "cholesterol_mg": 50.0,
  "saturated_fat_g": 3.0
}

All values should be PER SERVING (already divided by servings). Use standard nutritional databases for common ingredients."""


def render_ingredient_lines(ingredients: List[IngredientRequest]) -> str:
    """One '<quantity> <unit> <name>' line per ingredient."""
    return "\n".join(ing.as_line() for ing in ingredients)


def build_user_prompt(ingredients: List[IngredientRequest], servings: float) -> str:
    return (
        "Calculate nutrition per serving for this recipe:\n\n"
        f"Ingredients:\n{render_ingredient_lines(ingredients)}\n\n"
        f"Number of servings: {servings}\n\n"
        "Return the nutrition data as JSON."
    )


# =============================================================================
# MAIN: Estimate Nutrition
# =============================================================================
async def estimate_nutrition_with_ai(
    ingredients: List[Union[IngredientRequest, Dict[str, Any]]],
    servings: float,
    client: Optional[Any] = None,
) -> Optional[NutrientProfile]:
    """
    Estimate per-serving nutrition with Gemini.

    Args:
        ingredients: Ingredient lines the knowledge base could not resolve
        servings: Serving count the model should divide by
        client: genai.Client to use; defaults to the module client

    Returns:
        NutrientProfile with per-serving values, or None when the client is
        unavailable, the call fails, or the response carries no numbers.
    """
    client = client or CLIENT
    if client is None:
        print("⚠️ Nutrition Estimator: Gemini unavailable, skipping estimate")
        return None

    try:
        requests = coerce_ingredients(ingredients)
        response = await client.aio.models.generate_content(
            model=NUTRITION_MODEL,
            contents=build_user_prompt(requests, servings),
            config=genai_types.GenerateContentConfig(
                system_instruction=SYSTEM_INSTRUCTION,
                response_mime_type="application/json",
                temperature=NUTRITION_TEMPERATURE,
            ),
        )

        content = response.text
        if not content:
            print("⚠️ Nutrition Estimator: Empty response")
            return None

        raw_data = json.loads(content)
        profile = NutrientProfile.model_validate(raw_data)

        if not profile.has_data():
            print("⚠️ Nutrition Estimator: Response had no nutrient values")
            return None

        return profile

    except json.JSONDecodeError as e:
        print(f"⚠️ Nutrition Estimator: JSON parse failed: {e}")

    except ValidationError as e:
        print(f"⚠️ Nutrition Estimator: Validation failed: {e}")

    except Exception as e:
        print(f"❌ Nutrition Estimator: Gemini call failed: {e}")

    return None


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "estimate_nutrition_with_ai",
    "render_ingredient_lines",
    "build_user_prompt",
    "SYSTEM_INSTRUCTION",
    "GEMINI_AVAILABLE",
    "NUTRITION_MODEL",
]
