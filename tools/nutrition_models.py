
# tools/nutrition_models.py
"""
Recipe Nutrition — Data Models
==============================
Pydantic schemas shared by the calculator, the AI estimator, the cache and
the API layer.

NutrientProfile is sparse: every nutrient is Optional, None meaning unknown.
Arithmetic walks NUTRIENT_KEYS explicitly instead of whatever keys happen
to be present on a dict.
"""

from typing import Dict, Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# NUTRIENT KEYS
# =============================================================================
NUTRIENT_KEYS = (
    "calories",
    "protein_g",
    "carbs_g",
    "fat_g",
    "fiber_g",
    "sugar_g",
    "sodium_mg",
    "cholesterol_mg",
    "saturated_fat_g",
)


# =============================================================================
# VALIDATION SCHEMA
# =============================================================================
class NutrientProfile(BaseModel):
    """Nutrient amounts, either per 100g (reference data) or per serving."""
    model_config = ConfigDict(frozen=True)

    calories: Optional[float] = Field(None, ge=0)
    protein_g: Optional[float] = Field(None, ge=0)
    carbs_g: Optional[float] = Field(None, ge=0)
    fat_g: Optional[float] = Field(None, ge=0)
    fiber_g: Optional[float] = Field(None, ge=0)
    sugar_g: Optional[float] = Field(None, ge=0)
    sodium_mg: Optional[float] = Field(None, ge=0)
    cholesterol_mg: Optional[float] = Field(None, ge=0)
    saturated_fat_g: Optional[float] = Field(None, ge=0)

    def has_data(self) -> bool:
        """True when at least one nutrient is known."""
        return any(getattr(self, key) is not None for key in NUTRIENT_KEYS)

    def to_dict(self) -> Dict[str, float]:
        """Known nutrients only, for JSON responses and recipe records."""
        return self.model_dump(exclude_none=True)


class IngredientRequest(BaseModel):
    """One free-text ingredient line as extracted from a recipe."""
    name: str
    quantity: str = ""
    unit: str = ""

    @field_validator("quantity", "unit", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # Extraction output sometimes carries numbers or nulls here
        if value is None:
            return ""
        return str(value)

    def as_line(self) -> str:
        """Render as '<quantity> <unit> <name>'."""
        return f"{self.quantity} {self.unit} {self.name}"


class IngredientProfile(BaseModel):
    """Reference entry in the ingredient knowledge base."""
    model_config = ConfigDict(frozen=True)

    name: str
    per_100g: NutrientProfile
    grams_per_unit: Dict[str, float] = Field(default_factory=dict)
    grams_per_piece: Optional[float] = Field(None, gt=0)


# =============================================================================
# PROFILE ARITHMETIC
# =============================================================================
def add_profiles(first: NutrientProfile, second: NutrientProfile) -> NutrientProfile:
    """
    Sum two profiles key by key.

    Both known -> sum, one known -> that value, neither -> None.
    """
    totals: Dict[str, Optional[float]] = {}
    for key in NUTRIENT_KEYS:
        a = getattr(first, key)
        b = getattr(second, key)
        if a is None and b is None:
            totals[key] = None
        elif a is None:
            totals[key] = b
        elif b is None:
            totals[key] = a
        else:
            totals[key] = a + b
    return NutrientProfile(**totals)


def scale_profile(profile: NutrientProfile, factor: float) -> NutrientProfile:
    """Multiply every known nutrient by factor."""
    scaled: Dict[str, Optional[float]] = {}
    for key in NUTRIENT_KEYS:
        value = getattr(profile, key)
        scaled[key] = value * factor if value is not None else None
    return NutrientProfile(**scaled)


def coerce_ingredients(
    ingredients: List[Union[IngredientRequest, Dict[str, Any]]]
) -> List[IngredientRequest]:
    """Accept plain dicts from request handlers alongside IngredientRequest."""
    return [
        ing if isinstance(ing, IngredientRequest) else IngredientRequest.model_validate(ing)
        for ing in ingredients
    ]


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "NUTRIENT_KEYS",
    "NutrientProfile",
    "IngredientRequest",
    "IngredientProfile",
    "add_profiles",
    "scale_profile",
    "coerce_ingredients",
]
