"""
Endpoints de generación de recetas.

Este endpoint maneja:
- POST /api/v1/recipes/generate: cadena de proveedores de IA + respaldo local
- POST /api/v1/recipes/local: solo el selector local (sin red)
- GET /api/v1/recipes/providers: proveedores configurados
- GET /api/v1/recipes/options: valores sugeridos del formulario
"""

import logging
import random

from fastapi import APIRouter, HTTPException

from vitaspoon_core import engine
from vitaspoon_core.domains.recipes import vocabulary
from vitaspoon_core.providers import provider_names

from ..models.requests import ProvidersResponse, RecipeModel, RecipeOptionsResponse, UserInputRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def _rng(request: UserInputRequest):
    return random.Random(request.seed) if request.seed is not None else None


@router.post("/generate", response_model=RecipeModel)
def generate_recipe(request: UserInputRequest):
    """
    Genera una receta probando los proveedores de IA en orden y, si ninguno
    responde, con el generador local.

    Returns:
        RecipeModel. `source` indica qué proveedor la produjo.
    """
    user_input = request.to_user_input()
    try:
        recipe = engine.generate_recipe(user_input, rng=_rng(request))
        return RecipeModel.from_recipe(recipe)
    except Exception as e:
        # Solo si falló hasta la receta básica de respaldo
        logger.exception(f"❌ No se pudo generar ninguna receta: {e}")
        raise HTTPException(status_code=500, detail="No se pudo generar la receta")


@router.post("/local", response_model=RecipeModel)
def generate_local_recipe(request: UserInputRequest):
    """Genera una receta solo con el corpus local."""
    recipe = engine.generate_local_only(request.to_user_input(), rng=_rng(request))
    return RecipeModel.from_recipe(recipe)


@router.get("/providers", response_model=ProvidersResponse)
def list_providers():
    return ProvidersResponse(providers=provider_names())


@router.get("/options", response_model=RecipeOptionsResponse)
def list_options():
    return RecipeOptionsResponse(
        cuisine_types=list(vocabulary.MEAL_TYPE_OPTIONS),
        diet_types=list(vocabulary.DIET_TYPE_OPTIONS),
        prep_times=list(vocabulary.PREP_TIME_OPTIONS),
        difficulty_levels=list(vocabulary.DIFFICULTY_OPTIONS),
        electricity_types=list(vocabulary.ELECTRICITY_OPTIONS),
        allergies=list(vocabulary.ALLERGY_OPTIONS),
    )
