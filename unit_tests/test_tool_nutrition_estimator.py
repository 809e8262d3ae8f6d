# unit_tests/test_tool_nutrition_estimator.py
"""
Unit Tests for the Gemini Nutrition Estimator
=============================================
No network: a fake client stands in for genai.Client.
"""

import asyncio
import json
from types import SimpleNamespace

import tools.nutrition_estimator as estimator_module
from tools.nutrition_estimator import (
    estimate_nutrition_with_ai,
    render_ingredient_lines,
    build_user_prompt,
    SYSTEM_INSTRUCTION,
)
from tools.nutrition_models import IngredientRequest

INGREDIENTS = [
    {"name": "flour", "quantity": "1", "unit": "cup"},
    {"name": "saffron threads", "quantity": "1", "unit": "pinch"},
]


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.requests = []

    async def generate_content(self, model, contents, config):
        self.requests.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_client(text=None, error=None):
    models = FakeModels(text=text, error=error)
    return SimpleNamespace(aio=SimpleNamespace(models=models)), models


def run(coro):
    return asyncio.run(coro)


def test_render_ingredient_lines():
    requests = [IngredientRequest(**ing) for ing in INGREDIENTS]
    assert render_ingredient_lines(requests) == "1 cup flour\n1 pinch saffron threads"


def test_user_prompt_lists_ingredients_and_servings():
    requests = [IngredientRequest(**ing) for ing in INGREDIENTS]
    prompt = build_user_prompt(requests, 4)
    assert "1 cup flour" in prompt
    assert "Number of servings: 4" in prompt


def test_estimate_success():
    payload = {"calories": 210, "protein_g": 4.5, "carbs_g": 44, "fat_g": 0.8, "sodium_mg": None}
    client, models = make_client(text=json.dumps(payload))

    result = run(estimate_nutrition_with_ai(INGREDIENTS, 4, client=client))

    assert result is not None
    assert result.calories == 210
    assert result.sodium_mg is None

    request = models.requests[0]
    assert "1 pinch saffron threads" in request["contents"]
    assert request["config"].system_instruction == SYSTEM_INSTRUCTION
    assert request["config"].response_mime_type == "application/json"


def test_estimate_all_null_is_failure():
    client, _ = make_client(text=json.dumps({"calories": None, "protein_g": None}))
    assert run(estimate_nutrition_with_ai(INGREDIENTS, 2, client=client)) is None


def test_estimate_empty_response_is_failure():
    client, _ = make_client(text="")
    assert run(estimate_nutrition_with_ai(INGREDIENTS, 2, client=client)) is None


def test_estimate_invalid_json_is_failure():
    client, _ = make_client(text="Sorry, I can't help with that.")
    assert run(estimate_nutrition_with_ai(INGREDIENTS, 2, client=client)) is None


def test_estimate_negative_values_fail_validation():
    client, _ = make_client(text=json.dumps({"calories": -50}))
    assert run(estimate_nutrition_with_ai(INGREDIENTS, 2, client=client)) is None


def test_estimate_swallows_client_errors():
    client, _ = make_client(error=ConnectionError("network down"))
    assert run(estimate_nutrition_with_ai(INGREDIENTS, 2, client=client)) is None


def test_estimate_without_client(monkeypatch):
    monkeypatch.setattr(estimator_module, "CLIENT", None)
    assert run(estimate_nutrition_with_ai(INGREDIENTS, 2)) is None
