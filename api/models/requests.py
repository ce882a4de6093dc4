"""
Modelos de request/response para la API.

Estos modelos definen la estructura esperada de los requests HTTP,
validando tipos y valores antes de pasarlos al core.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from vitaspoon_core.domains.recipes.models import Ingredient, Recipe, UserInput


class UserInputRequest(BaseModel):
    """
    Request para generar una receta.

    Un string vacío en cualquier preferencia significa "sin restricción".
    """

    cuisine_type: str = Field(default="", description="Tipo de comida (Desayuno, Almuerzo, Cena, ...)")
    diet_type: str = Field(default="", description="Tipo de dieta (Vegetariana, Vegana, ...)")
    prep_time: str = Field(default="", description="Tiempo de preparación")
    difficulty_level: str = Field(default="", description="Nivel de dificultad")
    electricity_type: str = Field(default="", description='Disponibilidad de electricidad ("Sin electricidad" restringe)')

    available_ingredients: List[str] = Field(default_factory=list, description="Ingredientes disponibles")
    allergies: List[str] = Field(default_factory=list, description="Alergias a evitar (nunca se relajan)")
    dietary_preferences: List[str] = Field(default_factory=list, description="Preferencias adicionales")
    other_restrictions: str = Field(default="", description="Otras restricciones en texto libre")

    seed: Optional[int] = Field(default=None, description="Semilla para la selección local (reproducible)")

    def to_user_input(self) -> UserInput:
        return UserInput.build(
            cuisine_type=self.cuisine_type,
            diet_type=self.diet_type,
            prep_time=self.prep_time,
            difficulty_level=self.difficulty_level,
            electricity_type=self.electricity_type,
            available_ingredients=self.available_ingredients,
            allergies=self.allergies,
            dietary_preferences=self.dietary_preferences,
            other_restrictions=self.other_restrictions,
        )


class IngredientModel(BaseModel):
    name: str = Field(..., description="Nombre del ingrediente")
    quantity: str = Field(default="", description="Cantidad (texto libre)")
    unit: str = Field(default="", description="Unidad (texto libre)")


class RecipeModel(BaseModel):
    """
    Receta completa tal como viaja por HTTP.

    Se usa como response de generación y como body para guardar recetas.
    """

    id: Optional[str] = Field(default=None, description="ID único de la receta")
    title: str = Field(..., description="Título de la receta")
    ingredients: List[IngredientModel] = Field(..., min_length=1, description="Ingredientes")
    instructions: List[str] = Field(..., min_length=1, description="Pasos de preparación")
    prep_time: str = Field(default="")
    difficulty_level: str = Field(default="")
    cuisine_type: str = Field(default="")
    diet_type: str = Field(default="")
    created_at: Optional[str] = Field(default=None, description="Fecha de creación (ISO-8601)")
    is_saved: Optional[bool] = Field(default=None)
    source: Optional[str] = Field(default=None, description="openai|gemini|openrouter|local|csv_database")

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeModel":
        return cls(**recipe.to_dict())

    def to_recipe(self) -> Recipe:
        return Recipe(
            id=self.id,
            title=self.title,
            ingredients=tuple(Ingredient(i.name, i.quantity, i.unit) for i in self.ingredients),
            instructions=tuple(self.instructions),
            prep_time=self.prep_time,
            difficulty_level=self.difficulty_level,
            cuisine_type=self.cuisine_type,
            diet_type=self.diet_type,
            created_at=self.created_at,
            is_saved=self.is_saved,
            source=self.source,
        )


class ProvidersResponse(BaseModel):
    """Proveedores configurados en orden nominal ("local" siempre al final)."""

    providers: List[str] = Field(..., description="Nombres de proveedores")


class SavedRecipeListResponse(BaseModel):
    recipes: List[RecipeModel] = Field(default_factory=list)
    total: int = Field(..., description="Cantidad de recetas guardadas")


class RecipeOptionsResponse(BaseModel):
    """Valores sugeridos para cada preferencia del formulario."""

    cuisine_types: List[str] = Field(..., description="Tipos de comida")
    diet_types: List[str] = Field(..., description="Tipos de dieta")
    prep_times: List[str] = Field(..., description="Tiempos de preparación")
    difficulty_levels: List[str] = Field(..., description="Niveles de dificultad")
    electricity_types: List[str] = Field(..., description="Disponibilidad de electricidad")
    allergies: List[str] = Field(..., description="Alergias frecuentes")
