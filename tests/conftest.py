from typing import Sequence

import pytest

from vitaspoon_core.config import Settings, get_settings
from vitaspoon_core.domains.recipes.models import Ingredient, Recipe


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Sin API keys ni red: cada test arranca con configuración limpia."""
    for name in ("OPENAI_API_KEY", "GEMINI_API_KEY", "OPENROUTER_API_KEY", "DEEPSEEK_API_KEY"):
        monkeypatch.setenv(name, "")
    monkeypatch.setenv("REGION_DETECTION", "false")
    monkeypatch.setenv("RECIPES_CSV_PATH", str(tmp_path / "no-existe.csv"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_recipe(
    title: str,
    names: Sequence[str],
    cuisine_type: str = "Almuerzo",
    diet_type: str = "Estándar",
    prep_time: str = "15-30 minutos",
    difficulty_level: str = "Fácil",
) -> Recipe:
    return Recipe(
        title=title,
        ingredients=tuple(Ingredient(name, "1", "unidad") for name in names),
        instructions=("Preparar.", "Servir."),
        prep_time=prep_time,
        difficulty_level=difficulty_level,
        cuisine_type=cuisine_type,
        diet_type=diet_type,
        source="local",
    )


def make_settings(**overrides) -> Settings:
    values = dict(
        openai_api_key="",
        openai_model_text="gpt-4o-mini",
        gemini_api_key="",
        gemini_model="gemini-2.0-flash",
        openrouter_api_key="",
        openrouter_model="deepseek/deepseek-chat",
    )
    values.update(overrides)
    return Settings(**values)


def assert_valid_recipe(recipe: Recipe) -> None:
    assert recipe is not None
    assert recipe.title.strip()
    assert len(recipe.ingredients) >= 1
    assert len(recipe.instructions) >= 1
