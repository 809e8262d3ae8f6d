import pytest
import sys
from pathlib import Path

# Add root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tools.nutrition_models import NutrientProfile
from memory.nutrition_cache import InMemoryNutritionCache


class FakeEstimator:
    """Stands in for the Gemini estimator and records every call."""
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def __call__(self, ingredients, servings):
        self.calls.append((list(ingredients), servings))
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def call_count(self):
        return len(self.calls)


@pytest.fixture
def estimated_profile():
    return NutrientProfile(calories=320, protein_g=12.5, carbs_g=40, fat_g=11)


@pytest.fixture
def fake_estimator(estimated_profile):
    return FakeEstimator(result=estimated_profile)


@pytest.fixture
def failing_estimator():
    return FakeEstimator(result=None)


@pytest.fixture
def memory_cache():
    return InMemoryNutritionCache()


@pytest.fixture
def make_estimator():
    return FakeEstimator
