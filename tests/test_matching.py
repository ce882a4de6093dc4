from conftest import make_recipe

from vitaspoon_core.domains.recipes.matching import (
    filter_recipes,
    find_recipes_with_proteins,
    personalize_recipe,
    recipe_contains_all_user_ingredients,
    score_by_ingredient_match,
    sort_by_relevance,
)
from vitaspoon_core.domains.recipes.models import Recipe, ScoredRecipe, UserInput


# ------------------------------------------------------------
# Puntaje
# ------------------------------------------------------------

def test_score_counts_matching_ingredients_and_percentage():
    recipe = make_recipe("Arroz con pollo", ["arroz", "pollo"])

    [scored] = score_by_ingredient_match([recipe], ["arroz", "cebolla"])

    assert scored.matching_count == 1
    assert scored.match_percentage == 0.5
    # "cebolla" no está en la receta
    assert scored.has_all_ingredients is False


def test_score_full_match_when_every_available_ingredient_is_in_recipe():
    recipe = make_recipe("Arroz con pollo", ["arroz blanco", "pechuga de pollo", "sal"])

    [scored] = score_by_ingredient_match([recipe], ["arroz", "pollo"])

    assert scored.matching_count == 2
    assert scored.has_all_ingredients is True


def test_score_without_available_ingredients_is_neutral():
    recipes = [make_recipe("A", ["arroz"]), make_recipe("B", ["pollo"])]

    scored = score_by_ingredient_match(recipes, [])

    assert [(s.matching_count, s.match_percentage, s.has_all_ingredients) for s in scored] == [
        (0, 0.0, False),
        (0, 0.0, False),
    ]


def test_score_recipe_without_ingredients_has_zero_percentage():
    empty = Recipe(title="Vacía", ingredients=(), instructions=("Nada.",))

    [scored] = score_by_ingredient_match([empty], ["arroz"])

    assert scored.match_percentage == 0.0
    assert scored.matching_count == 0


def test_recipe_contains_all_user_ingredients_empty_list_is_false():
    assert not recipe_contains_all_user_ingredients(make_recipe("A", ["arroz"]), [])


# ------------------------------------------------------------
# Ranking
# ------------------------------------------------------------

def test_sort_puts_full_match_first_regardless_of_count():
    a = ScoredRecipe(make_recipe("A", ["x"]), matching_count=3, has_all_ingredients=False)
    b = ScoredRecipe(make_recipe("B", ["x"]), matching_count=1, has_all_ingredients=True)
    c = ScoredRecipe(make_recipe("C", ["x"]), matching_count=5, has_all_ingredients=False)

    ordered = sort_by_relevance([a, b, c])

    assert [s.recipe.title for s in ordered] == ["B", "C", "A"]


def test_sort_uses_percentage_as_last_criterion_and_is_stable():
    a = ScoredRecipe(make_recipe("A", ["x"]), matching_count=1, match_percentage=0.25)
    b = ScoredRecipe(make_recipe("B", ["x"]), matching_count=1, match_percentage=0.5)
    c = ScoredRecipe(make_recipe("C", ["x"]), matching_count=1, match_percentage=0.25)

    ordered = sort_by_relevance([a, b, c])

    assert [s.recipe.title for s in ordered] == ["B", "A", "C"]


# ------------------------------------------------------------
# Filtro
# ------------------------------------------------------------

def _corpus():
    return [
        make_recipe("Ensalada", ["lechuga", "tomate"], cuisine_type="Almuerzo", diet_type="Vegetariana"),
        make_recipe("Tortilla", ["huevo", "papa"], cuisine_type="Cena", diet_type="Vegetariana"),
        make_recipe("Pollo Asado (Sin Electricidad)", ["pollo", "limón"], cuisine_type="Almuerzo"),
        make_recipe("Pollo al horno", ["pollo", "papa"], cuisine_type="Almuerzo"),
    ]


def test_filter_always_enforces_cuisine_type():
    user_input = UserInput.build(cuisine_type="Cena")

    for strict in (True, False):
        titles = [r.title for r in filter_recipes(_corpus(), user_input, strict=strict)]
        assert titles == ["Tortilla"]


def test_filter_allergy_exclusion_in_both_modes():
    user_input = UserInput.build(allergies=["Huevo"])

    for strict in (True, False):
        result = filter_recipes(_corpus(), user_input, strict=strict)
        assert "Tortilla" not in [r.title for r in result]
        assert len(result) == 3


def test_filter_strict_enforces_diet_relaxed_ignores_it():
    user_input = UserInput.build(cuisine_type="Almuerzo", diet_type="Vegetariana")

    assert [r.title for r in filter_recipes(_corpus(), user_input, strict=True)] == ["Ensalada"]
    assert len(filter_recipes(_corpus(), user_input, strict=False)) == 3


def test_filter_no_electricity_requires_title_marker():
    user_input = UserInput.build(electricity_type="Sin electricidad")

    result = filter_recipes(_corpus(), user_input, strict=True)

    assert [r.title for r in result] == ["Pollo Asado (Sin Electricidad)"]


def test_filter_other_electricity_values_impose_nothing():
    user_input = UserInput.build(electricity_type="Con electricidad")

    assert len(filter_recipes(_corpus(), user_input, strict=True)) == 4


def test_filter_prepass_restricts_to_full_matches():
    user_input = UserInput.build(available_ingredients=["pollo", "papa"])

    result = filter_recipes(_corpus(), user_input, strict=False)

    assert [r.title for r in result] == ["Pollo al horno"]


def test_filter_prepass_falls_back_to_full_pool():
    user_input = UserInput.build(available_ingredients=["trufa"])

    assert len(filter_recipes(_corpus(), user_input, strict=False)) == 4


def test_find_recipes_with_proteins_narrows_by_cuisine_only_if_non_empty():
    corpus = _corpus()

    narrowed = find_recipes_with_proteins(corpus, ["pollo"], "Almuerzo")
    not_narrowed = find_recipes_with_proteins(corpus, ["pollo"], "Postre")

    assert len(narrowed) == 2
    assert len(not_narrowed) == 2
    assert find_recipes_with_proteins(corpus, [], "Almuerzo") == []


# ------------------------------------------------------------
# Personalización
# ------------------------------------------------------------

def test_personalize_adds_note_and_marks_title_once():
    recipe = make_recipe("Arroz con Pollo", ["arroz", "pollo"])

    once = personalize_recipe(recipe, ["arroz", "pollo"])
    twice = personalize_recipe(once, ["arroz", "pollo"])

    assert once.title == "Arroz con Pollo (Personalizada)"
    assert twice.title == "Arroz con Pollo (Personalizada)"
    assert "¡Excelente!" in once.instructions[-1]
    # La receta original no se modifica
    assert recipe.title == "Arroz con Pollo"
    assert len(recipe.instructions) == 2


def test_personalize_partial_and_no_match_notes():
    recipe = make_recipe("Guiso", ["papa", "zanahoria", "cebolla", "carne"])

    partial = personalize_recipe(recipe, ["papa"])
    none = personalize_recipe(recipe, ["trufa"])

    assert "1 de tus ingredientes disponibles: papa" in partial.instructions[-1]
    assert "trufa" in none.instructions[-1]


def test_personalize_without_ingredients_is_noop():
    recipe = make_recipe("Guiso", ["papa"])

    assert personalize_recipe(recipe, []) is recipe
