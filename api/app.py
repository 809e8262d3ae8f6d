"""
Recipe Nutrition — FastAPI Backend
"""

import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, List, Union

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import uvicorn

from dotenv import load_dotenv
load_dotenv()

from tools.nutrition_models import IngredientRequest
from tools.nutrition_calculator import parse_servings
from tools.nutrition_estimator import GEMINI_AVAILABLE, NUTRITION_MODEL
from memory.nutrition_cache import CACHE_BACKEND
from agents.nutrition_agent import (
    calculate_nutrition_from_ingredients,
    enrich_recipe_nutrition,
    get_default_resolver,
)

API_VERSION = "1.0.0"


# =============================================================================
# PYDANTIC MODELS
# =============================================================================
class NutritionCalculateRequest(BaseModel):
    ingredients: List[IngredientRequest]
    servings: Optional[Union[int, str]] = None


class NutritionCalculateResponse(BaseModel):
    status: str
    servings: int
    nutrition: Optional[Dict[str, float]] = None
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())


class ExtractedIngredient(BaseModel):
    name: str
    quantity: Optional[Union[str, float]] = None
    unit: Optional[str] = None
    aisleCategory: Optional[str] = None


class ExtractedRecipe(BaseModel):
    """Recipe as returned by the extraction step."""
    title: str = ""
    servings: Optional[Union[str, int]] = None
    ingredients: List[ExtractedIngredient] = Field(default_factory=list)
    nutrition: Optional[Dict[str, Optional[float]]] = None


# =============================================================================
# APP SETUP
# =============================================================================
app = FastAPI(
    title="Recipe Nutrition API",
    version=API_VERSION,
    description="Per-serving nutrition for recipe ingredient lists"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================
def resolve_servings(value: Optional[Union[int, str]]) -> int:
    """Numbers are used as-is (minimum 1); text goes through parse_servings."""
    if isinstance(value, int):
        return max(value, 1)
    return max(parse_servings(value), 1)


# =============================================================================
# ENDPOINTS
# =============================================================================

# -----------------------------------------------------------------------------
# Health & Root
# -----------------------------------------------------------------------------
@app.get("/")
async def root():
    """Root endpoint for health checking."""
    return {
        "status": "online",
        "system": "Recipe Nutrition",
        "version": API_VERSION,
        "docs": "/docs",
    }


@app.get("/api/v1/health")
async def api_health():
    """Detailed health check endpoint."""
    return {
        "status": "online",
        "estimator": {
            "gemini": GEMINI_AVAILABLE,
            "model": NUTRITION_MODEL,
        },
        "cache": {
            "backend": CACHE_BACKEND,
            "entries": len(get_default_resolver().cache),
        },
        "timestamp": datetime.now().isoformat()
    }


# -----------------------------------------------------------------------------
# Nutrition
# -----------------------------------------------------------------------------
@app.post("/api/v1/nutrition/calculate", response_model=NutritionCalculateResponse)
async def calculate_nutrition(request: NutritionCalculateRequest):
    """Per-serving nutrition for an ingredient list."""
    servings = resolve_servings(request.servings)
    nutrition = await calculate_nutrition_from_ingredients(request.ingredients, servings)

    return NutritionCalculateResponse(
        status="success" if nutrition is not None else "unavailable",
        servings=servings,
        nutrition=nutrition.to_dict() if nutrition is not None else None,
    )


@app.post("/api/v1/recipes/nutrition")
async def add_recipe_nutrition(recipe: ExtractedRecipe):
    """Fill in nutrition for an extracted recipe that has none."""
    return await enrich_recipe_nutrition(recipe.model_dump())


# =============================================================================
# MAIN
# =============================================================================
if __name__ == "__main__":
    print("\n" + "=" * 50)
    print(f"🚀 RECIPE NUTRITION API v{API_VERSION}")
    print("=" * 50)
    print(f"   • Gemini estimator: {'✅' if GEMINI_AVAILABLE else '❌'}")
    print(f"   • Cache backend:    {CACHE_BACKEND}")
    print("=" * 50)
    print("🔗 API Docs: http://localhost:8000/docs")
    print("=" * 50 + "\n")

    uvicorn.run(app, host="0.0.0.0", port=8000)
