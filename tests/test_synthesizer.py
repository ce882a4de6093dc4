from conftest import assert_valid_recipe

from vitaspoon_core.domains.recipes import synthesizer
from vitaspoon_core.domains.recipes.models import UserInput
from vitaspoon_core.domains.recipes.synthesizer import (
    GENERIC_INGREDIENTS,
    base_ingredients_for,
    build_fallback_recipe,
    placeholder_ingredients,
    synthesize_recipe,
)


def _names(recipe):
    return [i.name for i in recipe.ingredients]


def test_title_from_cuisine_and_diet_table():
    recipe = synthesize_recipe(UserInput.build(cuisine_type="Desayuno", diet_type="Vegana"))

    assert recipe.title == "Tostadas de Vegetales (Vegana)"
    assert recipe.diet_type == "Vegana"
    assert not any("huevo" in n for n in _names(recipe))


def test_title_uses_rice_and_protein():
    recipe = synthesize_recipe(UserInput.build(cuisine_type="Almuerzo", available_ingredients=["arroz", "pollo"]))

    assert recipe.title == "Arroz con Pollo"
    by_name = {i.name: i for i in recipe.ingredients}
    assert (by_name["arroz"].quantity, by_name["arroz"].unit) == ("2", "tazas")
    assert (by_name["pollo"].quantity, by_name["pollo"].unit) == ("500", "g")
    assert {"sal", "pimienta", "aceite"} <= set(by_name)


def test_no_electricity_suffix_and_grill_instructions():
    user_input = UserInput.build(cuisine_type="Cena", electricity_type="Sin electricidad")

    recipe = synthesize_recipe(user_input)

    assert recipe.title == "Cena Ligera (Sin Electricidad)"
    assert any("parrilla" in step.lower() for step in recipe.instructions)


def test_user_ingredients_are_deduplicated_against_base():
    recipe = synthesize_recipe(UserInput.build(cuisine_type="Almuerzo", available_ingredients=["tomate"]))

    tomato_items = [n for n in _names(recipe) if "tomate" in n]
    assert tomato_items == ["tomate"]


def test_allergies_are_removed_from_ingredients():
    user_input = UserInput.build(
        cuisine_type="Almuerzo",
        available_ingredients=["pollo", "maní"],
        allergies=["maní", "aceite"],
    )

    recipe = synthesize_recipe(user_input)

    assert "maní" not in _names(recipe)
    assert not any("aceite" in n for n in _names(recipe))
    assert "pollo" in _names(recipe)


def test_personalization_note_lists_user_ingredients():
    recipe = synthesize_recipe(UserInput.build(available_ingredients=["papa", "zanahoria"]))

    assert "papa, zanahoria" in recipe.instructions[-1]


def test_no_personalization_note_without_ingredients():
    recipe = synthesize_recipe(UserInput.build(cuisine_type="Postre"))

    assert not any("personalizada con tus ingredientes" in step for step in recipe.instructions)


def test_placeholder_when_every_ingredient_is_excluded():
    base = [i.name for i in base_ingredients_for("Merienda")]
    recipe = synthesize_recipe(UserInput.build(cuisine_type="Merienda", allergies=base))

    assert _names(recipe) == ["ingredientes variados"]


def test_diet_adaptations_of_base_ingredients():
    vegan_lunch = [i.name for i in base_ingredients_for("Cena", "Vegana")]
    low_carb = [i.name for i in base_ingredients_for("Cena", "Bajo en carbohidratos")]
    protein = [i.name for i in base_ingredients_for("Desayuno", "Alto en proteínas")]

    assert "tofu" in vegan_lunch
    assert not any("pollo" in n or "queso" in n for n in vegan_lunch)
    assert "pasta" not in low_carb and "calabacín" in low_carb
    assert "pechuga de pollo" in protein


def test_defaults_when_preferences_are_empty():
    recipe = synthesize_recipe(UserInput())

    assert_valid_recipe(recipe)
    assert recipe.title == "Receta Personalizada"
    assert recipe.prep_time == "15-30 minutos"
    assert recipe.difficulty_level == "Fácil"
    assert recipe.cuisine_type == "Variado"
    assert recipe.diet_type == "Estándar"
    assert recipe.source == "local"


def test_synthesize_never_raises(monkeypatch):
    def boom(user_input):
        raise RuntimeError("plantilla rota")

    monkeypatch.setattr(synthesizer, "_build", boom)

    recipe = synthesize_recipe(UserInput.build(cuisine_type="Almuerzo", diet_type="Vegana"))

    assert recipe.title == "Receta Básica Personalizada - Almuerzo (Vegana)"


def test_fallback_recipe_shape():
    recipe = build_fallback_recipe(
        UserInput.build(electricity_type="Sin electricidad", available_ingredients=["papa"])
    )

    assert_valid_recipe(recipe)
    assert len(recipe.ingredients) == 3
    assert recipe.instructions[-1] == "Ingredientes disponibles: papa"
    assert len(recipe.instructions) == 5


def test_fallback_recipe_respects_allergies():
    recipe = build_fallback_recipe(UserInput.build(allergies=["condimento", "principal", "secundario"]))

    assert_valid_recipe(recipe)
    assert _names(recipe) == ["ingredientes variados"]


def test_placeholder_respects_allergies():
    base = [i.name for i in base_ingredients_for("Merienda")]
    recipe = synthesize_recipe(UserInput.build(cuisine_type="Merienda", allergies=base + ["variados"]))

    assert_valid_recipe(recipe)
    assert _names(recipe) == ["a elección"]


def test_placeholder_ingredients_never_empty():
    assert placeholder_ingredients(["ingrediente"], GENERIC_INGREDIENTS)[0].name == "condimento"
    assert len(placeholder_ingredients(["a", "e", "i", "o", "u"])) == 1
