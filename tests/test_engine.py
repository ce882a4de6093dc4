import random

from conftest import assert_valid_recipe

from vitaspoon_core import engine
from vitaspoon_core.domains.recipes.models import UserInput


class ExplodingChain:
    def generate(self, user_input):
        raise RuntimeError("cadena rota")


def test_generate_recipe_survives_a_broken_chain():
    recipe = engine.generate_recipe(
        UserInput.build(cuisine_type="Cena", available_ingredients=["pollo"]),
        chain=ExplodingChain(),
        rng=random.Random(1),
    )

    assert_valid_recipe(recipe)
    assert recipe.cuisine_type == "Cena"


def test_generate_recipe_without_keys_uses_local_selector():
    recipe = engine.generate_recipe(UserInput.build(cuisine_type="Desayuno"), rng=random.Random(3))

    assert_valid_recipe(recipe)
    assert recipe.source == "local"
    assert recipe.cuisine_type == "Desayuno"


def test_build_chain_without_region_detection():
    chain = engine.build_chain()

    assert chain.providers == []
    assert chain.region_detector is None


def test_build_chain_with_keys(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g-123")
    monkeypatch.setenv("REGION_DETECTION", "true")
    engine.get_settings.cache_clear()

    chain = engine.build_chain()

    assert [p.name for p in chain.providers] == ["gemini"]
    assert chain.region_detector is not None


def test_generate_local_only_is_reproducible():
    user_input = UserInput.build(cuisine_type="Almuerzo", available_ingredients=["arroz"])

    first = engine.generate_local_only(user_input, rng=random.Random(42))
    second = engine.generate_local_only(user_input, rng=random.Random(42))

    assert first.title == second.title
    assert first.source == "local"
