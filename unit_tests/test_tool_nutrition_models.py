import pytest
from pydantic import ValidationError

from tools.nutrition_models import (
    IngredientRequest,
    NutrientProfile,
    add_profiles,
    scale_profile,
    coerce_ingredients,
)


def test_add_profiles_sparse_rule():
    first = NutrientProfile(calories=100, protein_g=5)
    second = NutrientProfile(calories=50, fat_g=2)

    total = add_profiles(first, second)

    assert total.calories == 150
    assert total.protein_g == 5
    assert total.fat_g == 2
    assert total.sodium_mg is None


def test_scale_profile_keeps_unknowns():
    scaled = scale_profile(NutrientProfile(calories=200, sugar_g=10), 0.25)
    assert scaled.calories == 50
    assert scaled.sugar_g == 2.5
    assert scaled.fiber_g is None


def test_profile_rejects_negative_values():
    with pytest.raises(ValidationError):
        NutrientProfile(calories=-1)


def test_profile_has_data_and_to_dict():
    assert not NutrientProfile().has_data()
    profile = NutrientProfile(calories=0)
    assert profile.has_data()
    assert profile.to_dict() == {"calories": 0}


def test_ingredient_request_coerces_quantity_and_unit():
    request = IngredientRequest(name="egg", quantity=2, unit=None)
    assert request.quantity == "2"
    assert request.unit == ""
    assert request.as_line() == "2  egg"


def test_coerce_ingredients_mixed_input():
    requests = coerce_ingredients([
        {"name": "flour", "quantity": "1", "unit": "cup"},
        IngredientRequest(name="sugar", quantity="1/2", unit="cup"),
    ])
    assert [r.name for r in requests] == ["flour", "sugar"]
    assert all(isinstance(r, IngredientRequest) for r in requests)
