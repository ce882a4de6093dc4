import random

import pytest
from conftest import assert_valid_recipe, make_recipe

from vitaspoon_core.domains.recipes.catalog import LOCAL_RECIPES
from vitaspoon_core.domains.recipes.models import Recipe, UserInput
from vitaspoon_core.domains.recipes.selector import LocalRecipeSelector, generate_local_recipe


class BrokenCorpus:
    def get_all_recipes(self):
        raise RuntimeError("corpus caído")


class ListCorpus:
    def __init__(self, recipes):
        self.recipes = tuple(recipes)
        self.calls = 0

    def get_all_recipes(self):
        self.calls += 1
        return self.recipes


def test_mediterranean_salad_scenario():
    user_input = UserInput.build(cuisine_type="Almuerzo", available_ingredients=["garbanzos", "tomate"])

    recipe = generate_local_recipe(user_input, recipes=LOCAL_RECIPES, rng=random.Random(0))

    assert recipe.title == "Ensalada Mediterránea con Garbanzos (Personalizada)"
    assert recipe.cuisine_type == "Almuerzo"
    assert recipe.source == "local"
    assert recipe.id
    assert recipe.created_at


def test_full_match_priority():
    full = make_recipe("Completa", ["arroz", "pollo", "cebolla"], cuisine_type="Cena")
    others = [make_recipe(f"Parcial {i}", ["arroz", "sal"], cuisine_type="Cena") for i in range(5)]
    user_input = UserInput.build(available_ingredients=["arroz", "pollo"])

    for seed in range(10):
        recipe = generate_local_recipe(user_input, recipes=others + [full], rng=random.Random(seed))
        assert recipe.title == "Completa (Personalizada)"


def test_totality_with_empty_corpus_uses_synthesizer():
    user_input = UserInput.build(cuisine_type="Cena", available_ingredients=["pollo"])

    recipe = generate_local_recipe(user_input, recipes=[])

    assert_valid_recipe(recipe)
    assert recipe.source == "local"
    assert recipe.title.startswith("Pollo")


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"cuisine_type": "Postre", "diet_type": "Vegana"},
        {"electricity_type": "Sin electricidad", "available_ingredients": ["arroz"]},
        {"cuisine_type": "Inexistente", "allergies": ["sal", "aceite"]},
        {"available_ingredients": ["trufa blanca"], "difficulty_level": "Avanzada"},
    ],
)
def test_totality_over_varied_inputs(kwargs):
    recipe = generate_local_recipe(UserInput.build(**kwargs), recipes=LOCAL_RECIPES, rng=random.Random(3))

    assert_valid_recipe(recipe)


def test_allergy_safety_across_seeds():
    user_input = UserInput.build(available_ingredients=["pollo"], allergies=["pollo", "huevo"])

    for seed in range(20):
        recipe = generate_local_recipe(user_input, recipes=LOCAL_RECIPES, rng=random.Random(seed))
        for ingredient in recipe.ingredients:
            assert "pollo" not in ingredient.name.lower()
            assert "huevo" not in ingredient.name.lower()


def test_cuisine_fidelity():
    for cuisine in ("Desayuno", "Cena", "Merienda", "Postre", "Snack"):
        recipe = generate_local_recipe(
            UserInput.build(cuisine_type=cuisine), recipes=LOCAL_RECIPES, rng=random.Random(1)
        )
        assert recipe.cuisine_type == cuisine


def test_no_electricity_prefers_marked_recipes():
    user_input = UserInput.build(cuisine_type="Postre", electricity_type="Sin electricidad")

    recipe = generate_local_recipe(user_input, recipes=LOCAL_RECIPES, rng=random.Random(0))

    assert recipe.title == "Plátanos Asados con Canela (Sin Electricidad)"


def test_seeded_selection_is_reproducible():
    user_input = UserInput.build(cuisine_type="Almuerzo")

    first = generate_local_recipe(user_input, recipes=LOCAL_RECIPES, rng=random.Random(42))
    second = generate_local_recipe(user_input, recipes=LOCAL_RECIPES, rng=random.Random(42))

    assert first.title == second.title


def test_selection_is_drawn_from_top_three():
    recipes = [make_recipe(f"Receta {i}", ["sal"], cuisine_type="Cena") for i in range(6)]
    user_input = UserInput.build(cuisine_type="Cena")

    titles = {
        generate_local_recipe(user_input, recipes=recipes, rng=random.Random(seed)).title
        for seed in range(30)
    }

    assert titles <= {"Receta 0", "Receta 1", "Receta 2"}


def test_last_resort_draws_from_corpus():
    recipes = [make_recipe("Sopa", ["agua", "sal"], cuisine_type="Cena")]
    user_input = UserInput.build(cuisine_type="Desayuno", available_ingredients=["trufa"])

    recipe = generate_local_recipe(user_input, recipes=recipes, rng=random.Random(0))

    assert recipe.title.startswith("Sopa")
    # El tipo de comida pedido se respeta en la receta devuelta
    assert recipe.cuisine_type == "Desayuno"


def test_stage_names_follow_cascade():
    selector = LocalRecipeSelector(rng=random.Random(0))
    user_input = UserInput.build(cuisine_type="Almuerzo", available_ingredients=["cerdo", "trufa"])

    stage, candidates = selector.find_candidates(LOCAL_RECIPES, user_input)

    assert stage == "proteins"
    assert [r.title for r in candidates] == ["Cerdo Asado con Mojo (Sin Electricidad)"]


def test_selector_loads_from_injected_corpus():
    corpus = ListCorpus([make_recipe("Única", ["sal"])])

    recipe = LocalRecipeSelector(corpus=corpus, rng=random.Random(0)).select(UserInput.build())

    assert recipe.title == "Única"
    assert corpus.calls == 1


def test_selector_errors_degrade_to_basic_recipe():
    user_input = UserInput.build(cuisine_type="Cena")

    recipe = LocalRecipeSelector(corpus=BrokenCorpus()).select(user_input)

    assert_valid_recipe(recipe)
    assert recipe.title == "Receta Básica Personalizada - Cena"


def test_incomplete_corpus_recipes_are_never_returned():
    corpus = ListCorpus([Recipe(title="Vacía", ingredients=(), instructions=())])

    recipe = LocalRecipeSelector(corpus=corpus, rng=random.Random(0)).select(UserInput.build())

    assert_valid_recipe(recipe)
    assert recipe.title != "Vacía"


def test_incomplete_recipes_are_skipped_in_favor_of_complete_ones():
    corpus = ListCorpus(
        [
            Recipe(title="", ingredients=(), instructions=("Servir.",)),
            make_recipe("Sin pasos", ["arroz"]).evolve(instructions=()),
            make_recipe("Arroz Blanco", ["arroz"]),
        ]
    )

    for seed in range(5):
        recipe = LocalRecipeSelector(corpus=corpus, rng=random.Random(seed)).select(
            UserInput.build(available_ingredients=["arroz"])
        )
        assert recipe.title.startswith("Arroz Blanco")
