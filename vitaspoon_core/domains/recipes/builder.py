"""
Builder para recetas generadas por IA.

Construye el prompt de usuario a partir de `UserInput` y parsea la
respuesta del modelo (JSON, posiblemente envuelto en markdown) a `Recipe`.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from ...exceptions import ProviderResponseError
from ...ids import generate_id, utc_now_iso
from .models import Ingredient, Recipe, UserInput
from .prompts import ANY_METHOD_MESSAGE, NO_ELECTRICITY_MESSAGE, get_recipe_system_prompt
from .vocabulary import NO_ELECTRICITY

_FENCED_JSON_RE = re.compile(r"```json\s*([\s\S]*?)\s*```")
_FENCED_RE = re.compile(r"```\s*([\s\S]*?)\s*```")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def extract_json(text: str) -> str:
    """
    Extrae el objeto JSON de la respuesta del modelo.

    Acepta bloques ```json ...```, bloques ``` ...``` o el primer `{...}`.
    """
    for pattern in (_FENCED_JSON_RE, _FENCED_RE):
        match = pattern.search(text)
        if match:
            return match.group(1)
    match = _OBJECT_RE.search(text)
    if match:
        return match.group(0)
    raise ValueError("No se encontró JSON en la respuesta")


def _ingredient(raw: Any) -> Ingredient:
    if isinstance(raw, dict):
        return Ingredient(
            name=str(raw.get("name", "")).strip(),
            quantity=str(raw.get("quantity", "") or "").strip(),
            unit=str(raw.get("unit", "") or "").strip(),
        )
    return Ingredient(name=str(raw).strip())


class RecipeBuilder:
    """
    Builder para recetas de IA.

    Implementa la lógica específica de recetas:
    - Construcción del prompt de usuario
    - Parsing de la respuesta a Recipe
    """

    def build_prompt(self, user_input: UserInput) -> str:
        """
        Construye el prompt de usuario con las características de la receta.
        """
        prefs = user_input.preferences
        restrictions = user_input.dietary_restrictions

        parts: List[str] = []
        parts.append("Crea una receta de cocina en español con estas características:\n")
        parts.append(f"TIPO DE COMIDA: {prefs.cuisine_type}")
        parts.append(f"DIETA: {prefs.diet_type}")
        parts.append(f"TIEMPO DE PREPARACIÓN: {prefs.prep_time}")
        parts.append(f"NIVEL DE DIFICULTAD: {prefs.difficulty_level}")
        parts.append(f"DISPONIBILIDAD DE ELECTRICIDAD: {prefs.electricity_type}")

        if restrictions.allergies:
            parts.append(f"ALERGIAS A EVITAR: {', '.join(restrictions.allergies)}")
        if restrictions.preferences:
            parts.append(f"PREFERENCIAS ADICIONALES: {', '.join(restrictions.preferences)}")
        if restrictions.other_restrictions:
            parts.append(f"OTRAS RESTRICCIONES: {restrictions.other_restrictions}")
        if user_input.available_ingredients:
            parts.append(f"INGREDIENTES DISPONIBLES: {', '.join(user_input.available_ingredients)}")

        parts.append("")
        parts.append(NO_ELECTRICITY_MESSAGE if prefs.electricity_type == NO_ELECTRICITY else ANY_METHOD_MESSAGE)
        return "\n".join(parts)

    def parse_document(self, text: str, user_input: UserInput, source: str) -> Recipe:
        """
        Parsea la respuesta del modelo a una Recipe.

        Los campos que el modelo no devuelve se completan con las
        preferencias del usuario. El tipo de comida siempre es el pedido.

        Raises:
            ProviderResponseError: si no hay JSON válido, falta el título,
            o la receta no tiene ingredientes o instrucciones.
        """
        try:
            data: Dict[str, Any] = json.loads(extract_json(text or ""))
        except ValueError as e:
            raise ProviderResponseError(source, f"Respuesta no parseable: {e}") from e

        if not isinstance(data, dict):
            raise ProviderResponseError(source, "La respuesta no es un objeto JSON")

        title = str(data.get("title", "") or "").strip()
        ingredients = tuple(
            ing for ing in (_ingredient(raw) for raw in data.get("ingredients") or []) if ing.name
        )
        instructions = tuple(str(s).strip() for s in data.get("instructions") or [] if str(s).strip())

        if not title or not ingredients or not instructions:
            raise ProviderResponseError(source, "Receta incompleta en la respuesta")

        prefs = user_input.preferences
        return Recipe(
            id=generate_id(),
            title=title,
            ingredients=ingredients,
            instructions=instructions,
            prep_time=str(data.get("prepTime") or prefs.prep_time),
            difficulty_level=str(data.get("difficultyLevel") or prefs.difficulty_level),
            cuisine_type=prefs.cuisine_type or str(data.get("cuisineType") or ""),
            diet_type=str(data.get("dietType") or prefs.diet_type),
            created_at=utc_now_iso(),
            source=source,
        )

    def get_system_prompt(self) -> str:
        """
        Devuelve el prompt del sistema para recetas.
        """
        return get_recipe_system_prompt()
