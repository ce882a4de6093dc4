"""
Vocabularios y valores predeterminados del dominio de recetas.

Las listas de grupos de alimentos se usan con coincidencia por substring
(ver `classifier.contains_term`), por eso están en minúsculas y en su forma
más corta posible ("pollo" cubre "pechuga de pollo").
"""

from __future__ import annotations

from typing import Dict, Tuple

# ============================================================
# Valores predeterminados
# ============================================================

DEFAULT_PREP_TIME = "15-30 minutos"
DEFAULT_DIFFICULTY = "Fácil"
DEFAULT_DIET = "Estándar"
DEFAULT_CUISINE = "Variado"
LOCAL_SOURCE = "local"
CSV_SOURCE = "csv_database"

NO_ELECTRICITY = "Sin electricidad"
NO_ELECTRICITY_MARKER = "(Sin Electricidad)"
PERSONALIZED_MARKER = "(Personalizada)"

MAIN_MEALS = ("Almuerzo", "Cena")
PLANT_BASED_DIETS = ("Vegetariana", "Vegana")


# ============================================================
# Grupos de alimentos
# ============================================================

PROTEINS: Tuple[str, ...] = (
    "cerdo",
    "pollo",
    "res",
    "pescado",
    "camarones",
    "atún",
    "jamón",
    "pavo",
    "carne",
)

VEGETABLES: Tuple[str, ...] = (
    "tomate",
    "cebolla",
    "ajo",
    "pimiento",
    "zanahoria",
    "vegetales",
    "verduras",
)

RICE: Tuple[str, ...] = ("arroz",)

NON_VEGETARIAN: Tuple[str, ...] = (
    "pollo",
    "cerdo",
    "res",
    "pescado",
    "atún",
    "jamón",
    "carne",
)

NON_VEGAN: Tuple[str, ...] = ("queso", "leche", "yogur", "huevo", "mantequilla")

HIGH_CARB: Tuple[str, ...] = ("pasta", "arroz", "pan", "azúcar", "masa")

INGREDIENT_TYPES: Dict[str, Tuple[str, ...]] = {
    "proteins": PROTEINS,
    "rice": RICE,
    "vegetables": VEGETABLES,
}


# ============================================================
# Opciones del formulario (referencia para API/CLI)
# ============================================================

MEAL_TYPE_OPTIONS = ("Desayuno", "Almuerzo", "Merienda", "Cena", "Postre", "Snack")

DIET_TYPE_OPTIONS = (
    "Estándar",
    "Vegetariana",
    "Vegana",
    "Alto en proteínas",
    "Bajo en carbohidratos",
    "Bajo en grasas",
    "Bajo en calorías",
)

PREP_TIME_OPTIONS = ("< 15 minutos", "15-30 minutos", "30-60 minutos")

DIFFICULTY_OPTIONS = ("Fácil", "Intermedia", "Avanzada")

ELECTRICITY_OPTIONS = ("Con electricidad", NO_ELECTRICITY)

ALLERGY_OPTIONS = ("Lácteos", "Huevo", "Mariscos", "Frutos secos")
