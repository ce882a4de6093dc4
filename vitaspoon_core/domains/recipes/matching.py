"""
Filtro, puntaje y ranking de recetas contra la entrada del usuario.

Funciones puras (sin I/O). El corpus se trata como una colección de solo
lectura: cada función devuelve listas nuevas y nunca muta las recetas.

Resumen
-------
- `filter_recipes`: restricciones duras (tipo de comida, alergias, y en modo
  estricto dieta/tiempo/dificultad/electricidad).
- `score_by_ingredient_match`: cantidad y porcentaje de ingredientes que
  coinciden con los disponibles.
- `sort_by_relevance`: orden total y estable sobre `ScoredRecipe`.
- `personalize_recipe`: agrega una nota de coincidencia y marca el título.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .classifier import contains_term, matches_any
from .models import Recipe, ScoredRecipe, UserInput
from .vocabulary import NO_ELECTRICITY, NO_ELECTRICITY_MARKER, PERSONALIZED_MARKER

logger = logging.getLogger(__name__)


# ============================================================
# Predicados
# ============================================================

def ingredient_matches(ingredient_name: str, available: str) -> bool:
    """Coincidencia exacta primero, y si no, por substring."""
    name = (ingredient_name or "").strip().lower()
    term = (available or "").strip().lower()
    if not term:
        return False
    return name == term or contains_term(name, term)


def recipe_contains_all_user_ingredients(recipe: Recipe, available_ingredients: Sequence[str]) -> bool:
    """
    True si cada ingrediente disponible coincide con al menos un ingrediente
    de la receta. Con lista vacía devuelve False (no hay nada que coincida).
    """
    if not available_ingredients:
        return False
    return all(
        any(ingredient_matches(ing.name, available) for ing in recipe.ingredients)
        for available in available_ingredients
    )


def recipe_has_allergen(recipe: Recipe, allergies: Sequence[str]) -> bool:
    if not allergies:
        return False
    return any(matches_any(ing.name, allergies) for ing in recipe.ingredients)


def _passes_strict_preferences(recipe: Recipe, user_input: UserInput) -> bool:
    prefs = user_input.preferences

    if prefs.diet_type and recipe.diet_type != prefs.diet_type:
        return False
    if prefs.prep_time and recipe.prep_time != prefs.prep_time:
        return False
    if prefs.difficulty_level and recipe.difficulty_level != prefs.difficulty_level:
        return False
    # Solo "Sin electricidad" restringe; cualquier otro valor no impone nada
    if prefs.electricity_type == NO_ELECTRICITY and NO_ELECTRICITY_MARKER not in recipe.title:
        return False
    return True


# ============================================================
# Filtro
# ============================================================

def filter_recipes(
    recipes: Sequence[Recipe],
    user_input: UserInput,
    strict: bool = True,
    match_ingredients: bool = True,
) -> List[Recipe]:
    """
    Devuelve las recetas que cumplen las restricciones del usuario.

    Siempre se aplican (en ambos modos):
    - igualdad de `cuisine_type` cuando el usuario lo especificó;
    - exclusión por alergias (substring, sin distinguir mayúsculas).

    En modo estricto además: dieta, tiempo de preparación, dificultad y
    electricidad. En modo relajado el resto de dimensiones se ignora.

    Si `match_ingredients` y hay ingredientes disponibles, primero se
    restringe el pool a las recetas que los contienen todos; si eso deja
    cero recetas se usa el pool completo.

    Un resultado vacío no es un error: indica pasar a la siguiente etapa.
    """
    available = user_input.available_ingredients
    pool = list(recipes)

    if match_ingredients and available:
        full_matches = [r for r in pool if recipe_contains_all_user_ingredients(r, available)]
        if full_matches:
            pool = full_matches

    cuisine_type = user_input.preferences.cuisine_type
    allergies = user_input.allergies

    result: List[Recipe] = []
    for recipe in pool:
        if cuisine_type and recipe.cuisine_type != cuisine_type:
            continue
        if recipe_has_allergen(recipe, allergies):
            continue
        if strict and not _passes_strict_preferences(recipe, user_input):
            continue
        result.append(recipe)

    return result


def exclude_allergens(recipes: Sequence[Recipe], allergies: Sequence[str]) -> List[Recipe]:
    return [r for r in recipes if not recipe_has_allergen(r, allergies)]


def narrow_by_cuisine(recipes: Sequence[Recipe], cuisine_type: str) -> List[Recipe]:
    """Filtra por tipo de comida solo si el resultado no queda vacío."""
    if not cuisine_type:
        return list(recipes)
    narrowed = [r for r in recipes if r.cuisine_type == cuisine_type]
    return narrowed if narrowed else list(recipes)


def find_recipes_with_proteins(
    recipes: Sequence[Recipe],
    protein_ingredients: Sequence[str],
    cuisine_type: str = "",
) -> List[Recipe]:
    """Recetas que contienen al menos una de las proteínas indicadas."""
    if not protein_ingredients:
        return []

    matching = [
        r for r in recipes
        if any(matches_any(ing.name, protein_ingredients) for ing in r.ingredients)
    ]
    if not matching:
        return []
    return narrow_by_cuisine(matching, cuisine_type)


def find_recipes_with_any_ingredient(
    recipes: Sequence[Recipe],
    available_ingredients: Sequence[str],
) -> List[Recipe]:
    if not available_ingredients:
        return []
    return [
        r for r in recipes
        if any(matches_any(ing.name, available_ingredients) for ing in r.ingredients)
    ]


# ============================================================
# Puntaje y ranking
# ============================================================

def score_by_ingredient_match(
    recipes: Sequence[Recipe],
    available_ingredients: Sequence[str],
) -> List[ScoredRecipe]:
    """
    Puntúa las recetas según su coincidencia con los ingredientes disponibles.

    - matching_count: ingredientes de la receta que contienen algún disponible.
    - match_percentage: matching_count / total de ingredientes (0 si no tiene).
    - has_all_ingredients: ver `recipe_contains_all_user_ingredients`.

    Sin ingredientes disponibles todas puntúan (0, 0.0, False).
    """
    if not available_ingredients:
        return [ScoredRecipe(recipe=r) for r in recipes]

    scored: List[ScoredRecipe] = []
    for recipe in recipes:
        matching_count = sum(
            1 for ing in recipe.ingredients if matches_any(ing.name, available_ingredients)
        )
        total = len(recipe.ingredients)
        scored.append(
            ScoredRecipe(
                recipe=recipe,
                matching_count=matching_count,
                match_percentage=(matching_count / total) if total else 0.0,
                has_all_ingredients=recipe_contains_all_user_ingredients(recipe, available_ingredients),
            )
        )
    return scored


def sort_by_relevance(scored: Sequence[ScoredRecipe]) -> List[ScoredRecipe]:
    """
    Orden: coincidencia total primero, luego más ingredientes coincidentes,
    luego mayor porcentaje. `sorted` es estable: los empates respetan el
    orden del corpus.
    """
    return sorted(
        scored,
        key=lambda s: (not s.has_all_ingredients, -s.matching_count, -s.match_percentage),
    )


# ============================================================
# Personalización
# ============================================================

def personalize_recipe(recipe: Recipe, available_ingredients: Sequence[str] = ()) -> Recipe:
    """
    Devuelve una nueva receta con una nota sobre los ingredientes del usuario
    y el título marcado como "(Personalizada)".

    Sin ingredientes disponibles la receta se devuelve sin cambios.
    """
    if not available_ingredients:
        return recipe

    matching = [ing for ing in recipe.ingredients if matches_any(ing.name, available_ingredients)]
    total = len(recipe.ingredients)
    names = ", ".join(ing.name for ing in matching)

    if matching:
        if total and len(matching) / total >= 0.5:
            note = (
                f"Nota: ¡Excelente! Tienes {len(matching)} de los {total} ingredientes "
                f"principales para esta receta: {names}."
            )
        else:
            note = (
                f"Nota: Esta receta incluye {len(matching)} de tus ingredientes disponibles: "
                f"{names}. Puedes adaptar la receta según lo que tengas."
            )
    else:
        note = (
            "Nota: Esta receta ha sido seleccionada considerando tus preferencias. "
            f"Puedes adaptarla usando tus ingredientes disponibles: {', '.join(available_ingredients)}."
        )

    title = recipe.title
    if PERSONALIZED_MARKER not in title:
        title = f"{title} {PERSONALIZED_MARKER}"

    return recipe.evolve(title=title, instructions=recipe.instructions + (note,))


def mark_recipe_as_saved(recipe: Recipe) -> Recipe:
    return recipe.evolve(is_saved=True)
