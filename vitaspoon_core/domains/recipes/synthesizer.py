"""
Sintetizador de recetas personalizadas.

Construye una receta desde cero (sin corpus) a partir de las preferencias
y los ingredientes del usuario. Es el último recurso de todo el sistema,
por eso `synthesize_recipe` nunca lanza: si algo falla internamente
devuelve la receta mínima de `build_fallback_recipe`.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ...ids import generate_id, utc_now_iso
from .classifier import contains_term, has_ingredient_type, identify_main_protein, matches_any
from .models import Ingredient, Recipe, UserInput
from .templates import (
    CUISINE_TYPE_INGREDIENTS,
    HIGH_PROTEIN_EXTRA,
    LOW_CARB_MAIN_EXTRA,
    PANTRY_BASICS,
    VEGAN_MAIN_EXTRA,
    instructions_for_cuisine,
    protein_instructions,
    rice_with_protein_instructions,
    rice_with_vegetables_instructions,
    title_for,
)
from .vocabulary import (
    DEFAULT_CUISINE,
    DEFAULT_DIET,
    DEFAULT_DIFFICULTY,
    DEFAULT_PREP_TIME,
    HIGH_CARB,
    LOCAL_SOURCE,
    MAIN_MEALS,
    NO_ELECTRICITY,
    NO_ELECTRICITY_MARKER,
    NON_VEGAN,
    NON_VEGETARIAN,
    PROTEINS,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_INGREDIENT = Ingredient("ingredientes variados", "Al gusto", "")

GENERIC_INGREDIENTS = (
    Ingredient("ingrediente principal", "1", "unidad"),
    Ingredient("ingrediente secundario", "2", "unidades"),
    Ingredient("condimento", "1", "cucharada"),
)

# Últimos recursos si las alergias excluyen a todos los anteriores
NEUTRAL_INGREDIENTS = (
    PLACEHOLDER_INGREDIENT,
    Ingredient("a elección", "Al gusto", ""),
)


def placeholder_ingredients(
    allergies: Sequence[str],
    candidates: Sequence[Ingredient] = (PLACEHOLDER_INGREDIENT,),
) -> List[Ingredient]:
    """
    Ingredientes genéricos que no chocan con las alergias.

    Se prueban `candidates` y luego `NEUTRAL_INGREDIENTS`; nunca devuelve
    una lista vacía.
    """
    for pool in (candidates, NEUTRAL_INGREDIENTS):
        safe = [i for i in pool if not matches_any(i.name, allergies)]
        if safe:
            return safe
    return [NEUTRAL_INGREDIENTS[-1]]



# ============================================================
# Ingredientes
# ============================================================

def base_ingredients_for(cuisine_type: str, diet_type: str = "") -> List[Ingredient]:
    """
    Ingredientes base del tipo de comida, adaptados a la dieta.

    - Vegetariana/Vegana: se quitan carnes (y en vegana lácteos y huevo);
      en platos principales veganos se agrega tofu.
    - Alto en proteínas: se agrega pollo si no hay.
    - Bajo en carbohidratos: se quitan harinas/azúcar/arroz; en platos
      principales se agrega calabacín.
    """
    ingredients = list(CUISINE_TYPE_INGREDIENTS.get(cuisine_type, CUISINE_TYPE_INGREDIENTS["Almuerzo"]))

    if diet_type in ("Vegetariana", "Vegana"):
        ingredients = [i for i in ingredients if not matches_any(i.name, NON_VEGETARIAN)]
        if diet_type == "Vegana":
            ingredients = [i for i in ingredients if not matches_any(i.name, NON_VEGAN)]
            if cuisine_type in MAIN_MEALS:
                ingredients.append(VEGAN_MAIN_EXTRA)
    elif diet_type == "Alto en proteínas":
        if not any(contains_term(i.name, "pollo") for i in ingredients):
            ingredients.append(HIGH_PROTEIN_EXTRA)
    elif diet_type == "Bajo en carbohidratos":
        ingredients = [i for i in ingredients if not matches_any(i.name, HIGH_CARB)]
        if cuisine_type in MAIN_MEALS:
            ingredients.append(LOW_CARB_MAIN_EXTRA)

    return ingredients


def _with_quantity(name: str) -> Ingredient:
    """Cantidades orientativas para los ingredientes más comunes."""
    if contains_term(name, "arroz"):
        return Ingredient(name, "2", "tazas")
    if matches_any(name, PROTEINS):
        return Ingredient(name, "500", "g")
    if contains_term(name, "cebolla"):
        return Ingredient(name, "1", "unidad")
    if contains_term(name, "ajo"):
        return Ingredient(name, "3", "dientes")
    if contains_term(name, "tomate"):
        return Ingredient(name, "2", "unidades")
    return Ingredient(name, "Al gusto", "")


def _overlaps(a: str, b: str) -> bool:
    return contains_term(a, b) or contains_term(b, a)


def combine_ingredients(
    available_ingredients: Sequence[str],
    base: Sequence[Ingredient],
    allergies: Sequence[str] = (),
) -> List[Ingredient]:
    """
    Ingredientes del usuario (con cantidad estimada) + los de la base que no
    se solapan por substring con ninguno ya incluido. Al final se quitan los
    que coinciden con alguna alergia.
    """
    combined: List[Ingredient] = []
    for name in available_ingredients:
        if any(_overlaps(existing.name, name) for existing in combined):
            continue
        combined.append(_with_quantity(name))

    for item in base:
        if any(_overlaps(existing.name, item.name) for existing in combined):
            continue
        combined.append(item)

    return [i for i in combined if not matches_any(i.name, allergies)]


# ============================================================
# Título e instrucciones
# ============================================================

def synthesized_title(user_input: UserInput) -> str:
    prefs = user_input.preferences
    available = user_input.available_ingredients

    protein = identify_main_protein(available)
    has_rice = has_ingredient_type(available, "rice")
    has_vegetables = has_ingredient_type(available, "vegetables")

    if protein:
        protein = protein[:1].upper() + protein[1:]
        if has_rice:
            title = f"Arroz con {protein}"
        elif has_vegetables:
            title = f"{protein} con Vegetales"
        else:
            title = f"{protein} al Ajillo"
    elif has_rice:
        title = "Arroz con Vegetales" if has_vegetables else "Arroz Especiado"
    else:
        title = title_for(prefs.cuisine_type, prefs.diet_type)

    if prefs.diet_type and prefs.diet_type != DEFAULT_DIET:
        title += f" ({prefs.diet_type})"
    if prefs.electricity_type == NO_ELECTRICITY:
        title += f" {NO_ELECTRICITY_MARKER}"
    return title


def synthesized_instructions(user_input: UserInput) -> List[str]:
    prefs = user_input.preferences
    available = user_input.available_ingredients

    has_protein = has_ingredient_type(available, "proteins")
    has_rice = has_ingredient_type(available, "rice")

    if has_rice and has_protein:
        steps = rice_with_protein_instructions(prefs.electricity_type)
    elif has_rice:
        steps = rice_with_vegetables_instructions(prefs.electricity_type)
    elif has_protein:
        steps = protein_instructions(prefs.electricity_type)
    else:
        steps = instructions_for_cuisine(
            prefs.cuisine_type or "Almuerzo", prefs.diet_type, prefs.electricity_type
        )

    if available:
        note = (
            f"Esta receta ha sido personalizada con tus ingredientes: {', '.join(available)}. "
            "Ajusta las cantidades según tu preferencia."
        )
        if prefs.electricity_type == NO_ELECTRICITY and (prefs.cuisine_type in MAIN_MEALS or has_protein):
            note += " Esta receta está optimizada para preparación en parrilla de carbón."
        steps.append(note)
    return steps


# ============================================================
# API pública
# ============================================================

def _build(user_input: UserInput) -> Recipe:
    prefs = user_input.preferences
    available = user_input.available_ingredients

    if has_ingredient_type(available, "proteins") or has_ingredient_type(available, "rice"):
        base = list(PANTRY_BASICS)
    else:
        base = base_ingredients_for(prefs.cuisine_type, prefs.diet_type)

    ingredients = combine_ingredients(available, base, user_input.allergies)

    return Recipe(
        id=generate_id(),
        title=synthesized_title(user_input),
        ingredients=tuple(ingredients or placeholder_ingredients(user_input.allergies)),
        instructions=tuple(synthesized_instructions(user_input)),
        prep_time=prefs.prep_time or DEFAULT_PREP_TIME,
        difficulty_level=prefs.difficulty_level or DEFAULT_DIFFICULTY,
        cuisine_type=prefs.cuisine_type or DEFAULT_CUISINE,
        diet_type=prefs.diet_type or DEFAULT_DIET,
        created_at=utc_now_iso(),
        source=LOCAL_SOURCE,
    )


def synthesize_recipe(user_input: UserInput) -> Recipe:
    """
    Crea una receta personalizada desde cero.

    Función total: ante cualquier error interno devuelve la receta mínima
    de `build_fallback_recipe`.
    """
    try:
        return _build(user_input)
    except Exception as e:
        logger.error(f"❌ Error sintetizando receta, se usa la receta básica: {e}")
        return build_fallback_recipe(user_input)


def build_fallback_recipe(user_input: UserInput) -> Recipe:
    """Receta mínima válida: ingredientes genéricos y tres pasos genéricos."""
    prefs = user_input.preferences

    title = "Receta Básica Personalizada"
    if prefs.cuisine_type:
        title = f"{title} - {prefs.cuisine_type}"
    if prefs.diet_type and prefs.diet_type != DEFAULT_DIET:
        title = f"{title} ({prefs.diet_type})"

    instructions = [
        "Esta es una receta básica adaptada a tus preferencias.",
        "Puedes experimentar con los ingredientes que tengas disponibles.",
        "Recuerda ajustar las cantidades según tu gusto personal.",
    ]
    if prefs.electricity_type == NO_ELECTRICITY:
        instructions.append(
            "Esta receta ha sido diseñada para prepararse sin necesidad de electricidad. "
            "Puedes usar una parrilla de carbón o una pequeña estufa de gas."
        )
    if user_input.available_ingredients:
        instructions.append(f"Ingredientes disponibles: {', '.join(user_input.available_ingredients)}")

    return Recipe(
        id=generate_id(),
        title=title,
        ingredients=tuple(placeholder_ingredients(user_input.allergies, GENERIC_INGREDIENTS)),
        instructions=tuple(instructions),
        prep_time=prefs.prep_time or DEFAULT_PREP_TIME,
        difficulty_level=prefs.difficulty_level or DEFAULT_DIFFICULTY,
        cuisine_type=prefs.cuisine_type or DEFAULT_CUISINE,
        diet_type=prefs.diet_type or DEFAULT_DIET,
        created_at=utc_now_iso(),
        source=LOCAL_SOURCE,
    )
