"""
Endpoints de recetas guardadas.

Este endpoint maneja:
- POST /api/v1/saved-recipes: guardar una receta
- GET /api/v1/saved-recipes: listar (filtro opcional por tipo de comida)
- GET /api/v1/saved-recipes/{recipe_id}: obtener una receta
- DELETE /api/v1/saved-recipes/{recipe_id}: borrar una receta
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vitaspoon_core.db.helpers import (
    delete_saved_recipe,
    get_saved_recipe,
    list_saved_recipes,
    save_recipe,
)

from ..dependencies import get_db
from ..models.requests import RecipeModel, SavedRecipeListResponse

router = APIRouter(prefix="/api/v1/saved-recipes", tags=["saved-recipes"])


@router.post("", response_model=RecipeModel, status_code=201)
def create_saved_recipe(payload: RecipeModel, session: Session = Depends(get_db)):
    saved = save_recipe(session, payload.to_recipe())
    return RecipeModel.from_recipe(saved)


@router.get("", response_model=SavedRecipeListResponse)
def get_saved_recipes(cuisine_type: str = "", session: Session = Depends(get_db)):
    recipes = list_saved_recipes(session, cuisine_type=cuisine_type)
    return SavedRecipeListResponse(
        recipes=[RecipeModel.from_recipe(r) for r in recipes],
        total=len(recipes),
    )


@router.get("/{recipe_id}", response_model=RecipeModel)
def get_saved_recipe_by_id(recipe_id: str, session: Session = Depends(get_db)):
    recipe = get_saved_recipe(session, recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Receta {recipe_id} no encontrada")
    return RecipeModel.from_recipe(recipe)


@router.delete("/{recipe_id}", status_code=204)
def remove_saved_recipe(recipe_id: str, session: Session = Depends(get_db)):
    if not delete_saved_recipe(session, recipe_id):
        raise HTTPException(status_code=404, detail=f"Receta {recipe_id} no encontrada")
