"""
vitaspoon_core.domains.recipes.selector
=======================================

Selector local de recetas: genera una receta sin IA eligiendo del corpus.

Cascada de etapas
-----------------
Se ejecutan en orden; cada etapa solo corre si la anterior no produjo
candidatos:

1. Coincidencia exacta: recetas con TODOS los ingredientes disponibles
   (acotadas por tipo de comida si eso no las vacía), filtro relajado.
2. Prioridad de proteína: recetas con alguna de las proteínas del usuario.
3. Tipo de comida exacto: filtro estricto, y si queda vacío, relajado.
4. Coincidencia parcial: recetas con al menos un ingrediente, puntuadas
   y rankeadas, filtro relajado.
5. Solo tipo de comida: sin requisito de ingredientes.
6. Último recurso: cinco recetas al azar (sin alérgenos) del corpus.

Las recetas incompletas del corpus (sin título, ingredientes o pasos) se
descartan antes de la cascada.

Con los candidatos se rankea por relevancia y se elige al azar entre los
primeros min(3, n). Si el corpus no tiene nada utilizable se recurre al
sintetizador. Cualquier error termina en la receta básica de respaldo.

La aleatoriedad viene de un `random.Random` inyectable para poder fijar
la semilla en tests.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from ...core.abstractions import CorpusProvider
from ...ids import generate_id, utc_now_iso
from .classifier import classify_protein
from .matching import (
    exclude_allergens,
    filter_recipes,
    find_recipes_with_any_ingredient,
    find_recipes_with_proteins,
    narrow_by_cuisine,
    personalize_recipe,
    recipe_contains_all_user_ingredients,
    score_by_ingredient_match,
    sort_by_relevance,
)
from .models import Recipe, UserInput
from .synthesizer import build_fallback_recipe, synthesize_recipe
from .vocabulary import LOCAL_SOURCE

logger = logging.getLogger(__name__)

STAGE_LIMIT = 10
LAST_RESORT_SAMPLE = 5
TOP_K = 3


def is_usable_recipe(recipe: Recipe) -> bool:
    """Título, al menos un ingrediente con nombre y al menos un paso."""
    return bool(
        recipe.title.strip()
        and any(i.name.strip() for i in recipe.ingredients)
        and any(step.strip() for step in recipe.instructions)
    )


class LocalRecipeSelector:
    """
    Orquestador de la selección local.

    Args:
        corpus: proveedor con `get_all_recipes()`; si es None se usa el
            corpus por defecto del proceso.
        rng: fuente de aleatoriedad (default: `random.Random()` sin semilla).
    """

    def __init__(self, corpus: Optional[CorpusProvider] = None, rng: Optional[random.Random] = None):
        self._corpus = corpus
        self.rng = rng or random.Random()

    def _load_recipes(self) -> Sequence[Recipe]:
        if self._corpus is not None:
            return self._corpus.get_all_recipes()
        from .corpus import get_corpus

        return get_corpus().get_all_recipes()

    # ------------------------------------------------------------
    # Etapas
    # ------------------------------------------------------------

    def _stage_exact_ingredients(self, recipes: Sequence[Recipe], user_input: UserInput) -> List[Recipe]:
        available = user_input.available_ingredients
        if not available:
            return []
        full = [r for r in recipes if recipe_contains_all_user_ingredients(r, available)]
        if not full:
            return []
        narrowed = narrow_by_cuisine(full, user_input.preferences.cuisine_type)
        return filter_recipes(narrowed, user_input, strict=False)[:STAGE_LIMIT]

    def _stage_proteins(self, recipes: Sequence[Recipe], user_input: UserInput) -> List[Recipe]:
        proteins = classify_protein(user_input.available_ingredients)
        if not proteins:
            return []
        found = find_recipes_with_proteins(recipes, proteins, user_input.preferences.cuisine_type)
        return filter_recipes(found, user_input, strict=False)[:STAGE_LIMIT]

    def _stage_cuisine_exact(self, recipes: Sequence[Recipe], user_input: UserInput) -> List[Recipe]:
        cuisine_type = user_input.preferences.cuisine_type
        if not cuisine_type:
            return []
        exact = [r for r in recipes if r.cuisine_type == cuisine_type]
        strict = filter_recipes(exact, user_input, strict=True)
        if strict:
            return strict[:STAGE_LIMIT]
        return filter_recipes(exact, user_input, strict=False)[:STAGE_LIMIT]

    def _stage_partial_ingredients(self, recipes: Sequence[Recipe], user_input: UserInput) -> List[Recipe]:
        available = user_input.available_ingredients
        partial = find_recipes_with_any_ingredient(recipes, available)
        if not partial:
            return []
        ranked = sort_by_relevance(score_by_ingredient_match(partial, available))
        top = [s.recipe for s in ranked[:STAGE_LIMIT]]
        return filter_recipes(top, user_input, strict=False, match_ingredients=False)

    def _stage_cuisine_only(self, recipes: Sequence[Recipe], user_input: UserInput) -> List[Recipe]:
        return filter_recipes(recipes, user_input, strict=False, match_ingredients=False)[:STAGE_LIMIT]

    def _stage_last_resort(self, recipes: Sequence[Recipe], user_input: UserInput) -> List[Recipe]:
        safe = exclude_allergens(recipes, user_input.allergies)
        if not safe:
            return []
        return self.rng.sample(safe, min(LAST_RESORT_SAMPLE, len(safe)))

    def stages(self) -> Tuple[Tuple[str, Callable[[Sequence[Recipe], UserInput], List[Recipe]]], ...]:
        return (
            ("exact_ingredients", self._stage_exact_ingredients),
            ("proteins", self._stage_proteins),
            ("cuisine_exact", self._stage_cuisine_exact),
            ("partial_ingredients", self._stage_partial_ingredients),
            ("cuisine_only", self._stage_cuisine_only),
            ("last_resort", self._stage_last_resort),
        )

    def find_candidates(self, recipes: Sequence[Recipe], user_input: UserInput) -> Tuple[str, List[Recipe]]:
        """
        Recorre la cascada y devuelve (nombre de etapa, candidatos).

        Si ninguna etapa produce candidatos devuelve ("none", []).
        """
        for name, stage in self.stages():
            candidates = stage(recipes, user_input)
            if candidates:
                logger.info(f"🔎 Etapa '{name}': {len(candidates)} candidatas")
                return name, candidates
        return "none", []

    def choose(self, candidates: Sequence[Recipe], available_ingredients: Sequence[str]) -> Recipe:
        """Rankea y elige al azar entre las primeras min(3, n)."""
        ranked = sort_by_relevance(score_by_ingredient_match(candidates, available_ingredients))
        window = ranked[: min(TOP_K, len(ranked))]
        return self.rng.choice(window).recipe

    # ------------------------------------------------------------
    # API
    # ------------------------------------------------------------

    def select(self, user_input: UserInput, recipes: Optional[Sequence[Recipe]] = None) -> Recipe:
        """
        Devuelve siempre una receta válida; nunca lanza.

        Args:
            user_input: preferencias, restricciones e ingredientes.
            recipes: corpus explícito; si es None se carga del proveedor.
        """
        try:
            if recipes is None:
                recipes = self._load_recipes()
            recipes = [r for r in recipes if is_usable_recipe(r)]

            _, candidates = self.find_candidates(recipes, user_input)
            if not candidates:
                logger.info("🧪 Sin recetas utilizables en el corpus, se sintetiza una receta")
                return synthesize_recipe(user_input)

            chosen = self.choose(candidates, user_input.available_ingredients)
            personalized = personalize_recipe(chosen, user_input.available_ingredients)

            cuisine_type = user_input.preferences.cuisine_type or personalized.cuisine_type
            return personalized.evolve(
                id=generate_id(),
                created_at=utc_now_iso(),
                source=LOCAL_SOURCE,
                cuisine_type=cuisine_type,
            )
        except Exception as e:
            logger.error(f"❌ Error en la selección local, se usa la receta básica: {e}")
            return build_fallback_recipe(user_input)


def generate_local_recipe(
    user_input: UserInput,
    recipes: Optional[Sequence[Recipe]] = None,
    rng: Optional[random.Random] = None,
) -> Recipe:
    """Atajo funcional sobre `LocalRecipeSelector`."""
    return LocalRecipeSelector(rng=rng).select(user_input, recipes=recipes)
