"""
Funciones helper para guardar y recuperar recetas.

Estas funciones facilitan:
- Guardar una Recipe (marcándola como guardada)
- Listar / obtener / borrar recetas guardadas
- Convertir filas ORM de vuelta a Recipe
"""

from __future__ import annotations

import json
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..domains.recipes.matching import mark_recipe_as_saved
from ..domains.recipes.models import Recipe
from ..ids import generate_id
from .models import SavedRecipe


def save_recipe(session: Session, recipe: Recipe) -> Recipe:
    """
    Guarda la receta y la devuelve marcada como guardada.

    Si la receta no tiene id se le asigna uno. Guardar dos veces el mismo
    id actualiza la fila existente.

    Args:
        session: Sesión de base de datos
        recipe: Receta a guardar

    Returns:
        Recipe con `is_saved=True`
    """
    saved = mark_recipe_as_saved(recipe if recipe.id else recipe.evolve(id=generate_id()))

    row = session.get(SavedRecipe, saved.id)
    if row is None:
        row = SavedRecipe(id=saved.id)
        session.add(row)

    row.title = saved.title
    row.cuisine_type = saved.cuisine_type
    row.diet_type = saved.diet_type
    row.source = saved.source or ""
    row.payload_json = json.dumps(saved.to_dict(), ensure_ascii=False)
    session.flush()
    return saved


def row_to_recipe(row: SavedRecipe) -> Recipe:
    data = json.loads(row.payload_json or "{}")
    data["id"] = row.id
    data["is_saved"] = True
    return Recipe.from_dict(data)


def list_saved_recipes(session: Session, cuisine_type: str = "") -> List[Recipe]:
    stmt = select(SavedRecipe).order_by(SavedRecipe.created_at.desc())
    if cuisine_type:
        stmt = stmt.where(SavedRecipe.cuisine_type == cuisine_type)
    return [row_to_recipe(row) for row in session.execute(stmt).scalars()]


def get_saved_recipe(session: Session, recipe_id: str) -> Optional[Recipe]:
    row = session.get(SavedRecipe, recipe_id)
    return row_to_recipe(row) if row else None


def delete_saved_recipe(session: Session, recipe_id: str) -> bool:
    """Borra la receta. Devuelve False si no existía."""
    row = session.get(SavedRecipe, recipe_id)
    if row is None:
        return False
    session.delete(row)
    session.flush()
    return True
