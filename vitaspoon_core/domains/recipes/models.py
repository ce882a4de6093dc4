"""
Modelos de dominio específicos para recetas.

Estos modelos definen la estructura de datos que circula por todo el core:
- `Ingredient` y `Recipe`: valores inmutables producidos por cada estrategia
  de generación (IA, selector local, sintetizador).
- `UserInput`: restricciones, preferencias e ingredientes del usuario.
- `ScoredRecipe`: resultado transitorio del puntaje por ingredientes.

Convención: un string vacío en cualquier preferencia significa
"sin restricción en esta dimensión", nunca un valor literal a comparar.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Ingredient:
    """
    Representa un ingrediente de la receta.

    `quantity` y `unit` son texto libre (no se normalizan a números).
    """
    name: str
    quantity: str = ""
    unit: str = ""


@dataclass(frozen=True)
class Recipe:
    """
    Receta completa (objeto valor).

    Una vez producida no se muta: cualquier ajuste (personalización, marcar
    como guardada, estampar id) devuelve una nueva instancia vía `evolve`.
    """
    title: str
    ingredients: Tuple[Ingredient, ...]
    instructions: Tuple[str, ...]
    prep_time: str = ""
    difficulty_level: str = ""
    cuisine_type: str = ""
    diet_type: str = ""
    id: Optional[str] = None
    created_at: Optional[str] = None
    is_saved: Optional[bool] = None
    source: Optional[str] = None

    def evolve(self, **changes: Any) -> "Recipe":
        """Devuelve una copia con los campos indicados reemplazados."""
        if "ingredients" in changes:
            changes["ingredients"] = tuple(changes["ingredients"])
        if "instructions" in changes:
            changes["instructions"] = tuple(changes["instructions"])
        return replace(self, **changes)

    def ingredient_names(self) -> Tuple[str, ...]:
        return tuple(ing.name for ing in self.ingredients)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["ingredients"] = [asdict(ing) for ing in self.ingredients]
        data["instructions"] = list(self.instructions)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recipe":
        return cls(
            title=str(data.get("title", "")),
            ingredients=tuple(
                Ingredient(
                    name=str(ing.get("name", "")),
                    quantity=str(ing.get("quantity", "") or ""),
                    unit=str(ing.get("unit", "") or ""),
                )
                for ing in data.get("ingredients", []) or []
            ),
            instructions=tuple(str(step) for step in data.get("instructions", []) or []),
            prep_time=str(data.get("prep_time", "") or ""),
            difficulty_level=str(data.get("difficulty_level", "") or ""),
            cuisine_type=str(data.get("cuisine_type", "") or ""),
            diet_type=str(data.get("diet_type", "") or ""),
            id=data.get("id"),
            created_at=data.get("created_at"),
            is_saved=data.get("is_saved"),
            source=data.get("source"),
        )


@dataclass(frozen=True)
class DietaryRestrictions:
    allergies: Tuple[str, ...] = ()
    preferences: Tuple[str, ...] = ()
    other_restrictions: str = ""


@dataclass(frozen=True)
class Preferences:
    """Preferencias del formulario. "" = sin restricción."""
    cuisine_type: str = ""
    diet_type: str = ""
    prep_time: str = ""
    difficulty_level: str = ""
    electricity_type: str = ""


@dataclass(frozen=True)
class UserInput:
    dietary_restrictions: DietaryRestrictions = field(default_factory=DietaryRestrictions)
    preferences: Preferences = field(default_factory=Preferences)
    available_ingredients: Tuple[str, ...] = ()

    @property
    def allergies(self) -> Tuple[str, ...]:
        return self.dietary_restrictions.allergies

    @classmethod
    def build(
        cls,
        *,
        cuisine_type: str = "",
        diet_type: str = "",
        prep_time: str = "",
        difficulty_level: str = "",
        electricity_type: str = "",
        available_ingredients: Iterable[str] = (),
        allergies: Iterable[str] = (),
        dietary_preferences: Iterable[str] = (),
        other_restrictions: str = "",
    ) -> "UserInput":
        """
        Atajo para construir un `UserInput` plano (CLI, API, tests).

        Los ingredientes se limpian de espacios y se descartan los vacíos,
        preservando el orden en que el usuario los ingresó.
        """
        return cls(
            dietary_restrictions=DietaryRestrictions(
                allergies=tuple(a.strip() for a in allergies if a and a.strip()),
                preferences=tuple(p for p in dietary_preferences if p),
                other_restrictions=other_restrictions or "",
            ),
            preferences=Preferences(
                cuisine_type=cuisine_type or "",
                diet_type=diet_type or "",
                prep_time=prep_time or "",
                difficulty_level=difficulty_level or "",
                electricity_type=electricity_type or "",
            ),
            available_ingredients=tuple(
                i.strip() for i in available_ingredients if i and i.strip()
            ),
        )


@dataclass(frozen=True)
class ScoredRecipe:
    """
    Receta puntuada según su coincidencia con los ingredientes disponibles.

    Derivada, nunca se persiste.
    """
    recipe: Recipe
    matching_count: int = 0
    match_percentage: float = 0.0
    has_all_ingredients: bool = False
