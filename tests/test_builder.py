import json

import pytest

from vitaspoon_core.domains.recipes.builder import RecipeBuilder, extract_json
from vitaspoon_core.domains.recipes.models import UserInput
from vitaspoon_core.exceptions import ProviderResponseError

VALID = {
    "title": "Arroz Frito",
    "ingredients": [{"name": "arroz", "quantity": "2", "unit": "tazas"}, "huevo"],
    "instructions": ["Cocinar el arroz.", "Saltear."],
    "prepTime": "30 minutos",
    "difficultyLevel": "Fácil",
    "cuisineType": "Asiática",
    "dietType": "Estándar",
}


def test_extract_json_from_fenced_block():
    text = "Aquí tienes:\n```json\n{\"a\": 1}\n```\nBuen provecho"
    assert json.loads(extract_json(text)) == {"a": 1}


def test_extract_json_from_bare_object():
    assert json.loads(extract_json('Respuesta: {"a": {"b": 2}} fin')) == {"a": {"b": 2}}


def test_extract_json_without_object_raises():
    with pytest.raises(ValueError):
        extract_json("no hay nada")


def test_parse_document_builds_recipe():
    user_input = UserInput.build(cuisine_type="Cena")

    recipe = RecipeBuilder().parse_document(json.dumps(VALID), user_input, source="gemini")

    assert recipe.title == "Arroz Frito"
    assert [(i.name, i.quantity) for i in recipe.ingredients] == [("arroz", "2"), ("huevo", "")]
    # El tipo de comida pedido manda sobre el del modelo
    assert recipe.cuisine_type == "Cena"
    assert recipe.source == "gemini"
    assert recipe.id and recipe.created_at


@pytest.mark.parametrize(
    "text",
    ["no es json", "```json\n{roto\n```", json.dumps({**VALID, "instructions": []}), "[1, 2]"],
)
def test_parse_document_rejects_unusable_responses(text):
    with pytest.raises(ProviderResponseError) as exc:
        RecipeBuilder().parse_document(text, UserInput(), source="openai")
    assert exc.value.provider == "openai"


def test_build_prompt_includes_restrictions_and_electricity():
    user_input = UserInput.build(
        cuisine_type="Almuerzo",
        electricity_type="Sin electricidad",
        allergies=["maní"],
        available_ingredients=["arroz", "frijoles"],
    )

    prompt = RecipeBuilder().build_prompt(user_input)

    assert "TIPO DE COMIDA: Almuerzo" in prompt
    assert "ALERGIAS A EVITAR: maní" in prompt
    assert "INGREDIENTES DISPONIBLES: arroz, frijoles" in prompt
    assert "SIN ELECTRICIDAD" in prompt
    assert "PREFERENCIAS ADICIONALES" not in prompt
