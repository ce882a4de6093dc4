"""
Catálogo curado de recetas locales (cubanas e internacionales).

Es la base mínima del corpus: siempre está disponible, incluso sin red y
sin el dataset CSV. Las recetas aptas para cocinar sin electricidad llevan
el marcador "(Sin Electricidad)" en el título, que es lo que revisa el filtro.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from .models import Ingredient, Recipe
from .vocabulary import LOCAL_SOURCE


def _recipe(
    title: str,
    cuisine_type: str,
    diet_type: str,
    prep_time: str,
    difficulty_level: str,
    ingredients: Sequence[Tuple[str, str, str]],
    instructions: Sequence[str],
) -> Recipe:
    return Recipe(
        title=title,
        ingredients=tuple(Ingredient(name, quantity, unit) for name, quantity, unit in ingredients),
        instructions=tuple(instructions),
        prep_time=prep_time,
        difficulty_level=difficulty_level,
        cuisine_type=cuisine_type,
        diet_type=diet_type,
        source=LOCAL_SOURCE,
    )


# ============================================================
# Desayunos
# ============================================================

DESAYUNOS: Tuple[Recipe, ...] = (
    _recipe(
        "Tostadas de Aguacate con Huevo",
        "Desayuno", "Estándar", "< 15 minutos", "Fácil",
        [
            ("pan integral", "2", "rebanadas"),
            ("aguacate", "1", "unidad"),
            ("huevos", "2", "unidades"),
            ("sal", "1", "pizca"),
            ("pimienta", "1", "pizca"),
            ("jugo de limón", "1", "cucharadita"),
        ],
        [
            "Tuesta el pan hasta que esté dorado.",
            "Machaca el aguacate en un tazón y agrega sal, pimienta y jugo de limón.",
            "Extiende el aguacate sobre las tostadas.",
            "En una sartén, fríe los huevos al gusto.",
            "Coloca los huevos sobre las tostadas de aguacate.",
        ],
    ),
    _recipe(
        "Avena Remojada con Frutas (Sin Electricidad)",
        "Desayuno", "Vegetariana", "< 15 minutos", "Fácil",
        [
            ("avena", "1", "taza"),
            ("leche", "1", "taza"),
            ("plátano", "1", "unidad"),
            ("miel", "1", "cucharada"),
            ("canela", "1", "pizca"),
        ],
        [
            "Mezcla la avena con la leche en un recipiente.",
            "Añade el plátano en rodajas y la miel.",
            "Deja reposar durante la noche o por al menos 30 minutos.",
            "Espolvorea canela y sirve frío, sin necesidad de cocción.",
        ],
    ),
    _recipe(
        "Revoltillo de Huevos con Jamón",
        "Desayuno", "Alto en proteínas", "< 15 minutos", "Fácil",
        [
            ("huevos", "3", "unidades"),
            ("jamón", "50", "g"),
            ("cebolla", "1/2", "unidad"),
            ("pimiento", "1/2", "unidad"),
            ("aceite", "1", "cucharada"),
            ("sal", "", "al gusto"),
        ],
        [
            "Pica la cebolla, el pimiento y el jamón en cubos pequeños.",
            "Sofríe la cebolla y el pimiento en el aceite hasta que estén tiernos.",
            "Agrega el jamón y cocina un minuto más.",
            "Bate los huevos con sal, viértelos en la sartén y revuelve hasta que cuajen.",
        ],
    ),
)


# ============================================================
# Almuerzos
# ============================================================

ALMUERZOS: Tuple[Recipe, ...] = (
    _recipe(
        "Ensalada Mediterránea con Garbanzos",
        "Almuerzo", "Vegetariana", "15-30 minutos", "Fácil",
        [
            ("garbanzos cocidos", "1", "taza"),
            ("tomates cherry", "1", "taza"),
            ("pepino", "1/2", "unidad"),
            ("cebolla roja", "1/4", "unidad"),
            ("aceitunas negras", "1/4", "taza"),
            ("queso feta", "50", "g"),
            ("aceite de oliva", "2", "cucharadas"),
            ("limón", "1/2", "unidad"),
            ("orégano", "1", "cucharadita"),
        ],
        [
            "Enjuaga y escurre los garbanzos.",
            "Corta los tomates cherry por la mitad.",
            "Pela y corta el pepino en cubos pequeños.",
            "Pica finamente la cebolla roja.",
            "En un bol grande, combina los garbanzos, tomates, pepino, cebolla y aceitunas.",
            "Desmenuza el queso feta por encima.",
            "Mezcla el aceite de oliva, el jugo de limón y el orégano, y vierte sobre la ensalada.",
        ],
    ),
    _recipe(
        "Arroz con Pollo a la Cubana",
        "Almuerzo", "Estándar", "30-60 minutos", "Intermedia",
        [
            ("arroz", "2", "tazas"),
            ("pollo", "500", "g"),
            ("cebolla", "1", "unidad"),
            ("ajo", "3", "dientes"),
            ("pimiento", "1", "unidad"),
            ("tomate", "2", "unidades"),
            ("comino", "1", "cucharadita"),
            ("aceite", "2", "cucharadas"),
        ],
        [
            "Sazona el pollo con sal, ajo y comino.",
            "Dora el pollo en el aceite y retíralo.",
            "Sofríe la cebolla, el pimiento y el tomate.",
            "Agrega el arroz, el pollo y 4 tazas de agua caliente.",
            "Cocina tapado a fuego lento 20-25 minutos hasta que el arroz esté tierno.",
        ],
    ),
    _recipe(
        "Cerdo Asado con Mojo (Sin Electricidad)",
        "Almuerzo", "Estándar", "30-60 minutos", "Intermedia",
        [
            ("cerdo", "800", "g"),
            ("naranja agria", "1", "taza"),
            ("ajo", "6", "dientes"),
            ("cebolla", "1", "unidad"),
            ("orégano", "1", "cucharadita"),
            ("sal", "", "al gusto"),
        ],
        [
            "Prepara un mojo con la naranja agria, el ajo machacado, el orégano y la sal.",
            "Marina el cerdo en el mojo al menos 1 hora.",
            "Enciende la parrilla de carbón y espera a que las brasas estén cubiertas de ceniza.",
            "Asa el cerdo a calor indirecto, volteando cada 10 minutos, hasta que esté cocido.",
            "Sirve con la cebolla en rodajas por encima.",
        ],
    ),
    _recipe(
        "Potaje de Frijoles Negros",
        "Almuerzo", "Vegana", "30-60 minutos", "Fácil",
        [
            ("frijoles negros", "2", "tazas"),
            ("cebolla", "1", "unidad"),
            ("ajo", "4", "dientes"),
            ("pimiento", "1", "unidad"),
            ("comino", "1", "cucharadita"),
            ("aceite de oliva", "2", "cucharadas"),
        ],
        [
            "Cocina los frijoles remojados en agua hasta que estén blandos.",
            "Sofríe la cebolla, el ajo y el pimiento en el aceite.",
            "Agrega el sofrito y el comino a los frijoles.",
            "Cocina 15 minutos más a fuego lento hasta que espese.",
        ],
    ),
)


# ============================================================
# Cenas
# ============================================================

CENAS: Tuple[Recipe, ...] = (
    _recipe(
        "Pasta al Pesto con Pollo",
        "Cena", "Estándar", "15-30 minutos", "Fácil",
        [
            ("pasta", "200", "g"),
            ("pechuga de pollo", "1", "unidad"),
            ("salsa pesto", "3", "cucharadas"),
            ("tomates cherry", "1", "taza"),
            ("queso parmesano", "2", "cucharadas"),
            ("aceite de oliva", "1", "cucharada"),
        ],
        [
            "Cuece la pasta según las instrucciones del paquete.",
            "Corta la pechuga de pollo en cubos y sazona con sal y pimienta.",
            "Cocina el pollo en el aceite hasta que esté dorado.",
            "Escurre la pasta y mezcla con la salsa pesto, el pollo y los tomates.",
            "Sirve caliente con queso parmesano rallado por encima.",
        ],
    ),
    _recipe(
        "Pescado a la Parrilla con Vegetales (Sin Electricidad)",
        "Cena", "Bajo en carbohidratos", "15-30 minutos", "Intermedia",
        [
            ("filete de pescado", "2", "unidades"),
            ("calabacín", "1", "unidad"),
            ("pimiento", "1", "unidad"),
            ("limón", "1", "unidad"),
            ("aceite", "2", "cucharadas"),
            ("sal y pimienta", "", "al gusto"),
        ],
        [
            "Enciende la parrilla de carbón y limpia la rejilla.",
            "Pincela el pescado y los vegetales con aceite y sazona.",
            "Asa los vegetales hasta que estén tiernos.",
            "Cocina el pescado 4-5 minutos por lado.",
            "Sirve con jugo de limón por encima.",
        ],
    ),
    _recipe(
        "Tortilla de Papas",
        "Cena", "Vegetariana", "30-60 minutos", "Intermedia",
        [
            ("papas", "3", "unidades"),
            ("huevos", "4", "unidades"),
            ("cebolla", "1", "unidad"),
            ("aceite de oliva", "1/2", "taza"),
            ("sal", "", "al gusto"),
        ],
        [
            "Pela y corta las papas en láminas finas.",
            "Fríe las papas y la cebolla a fuego medio hasta que estén tiernas.",
            "Bate los huevos con sal y mezcla con las papas escurridas.",
            "Cuaja la tortilla en la sartén por ambos lados.",
        ],
    ),
)


# ============================================================
# Meriendas, snacks y postres
# ============================================================

MERIENDAS: Tuple[Recipe, ...] = (
    _recipe(
        "Batido Energético de Frutas",
        "Merienda", "Vegetariana", "< 15 minutos", "Fácil",
        [
            ("plátano", "1", "unidad"),
            ("fresas", "1", "taza"),
            ("yogur natural", "1/2", "taza"),
            ("miel", "1", "cucharada"),
            ("avena", "2", "cucharadas"),
        ],
        [
            "Pela el plátano y córtalo en trozos.",
            "Lava y quita el tallo de las fresas.",
            "Licúa todos los ingredientes hasta obtener una mezcla suave.",
            "Sirve inmediatamente.",
        ],
    ),
    _recipe(
        "Ensalada de Frutas Tropicales (Sin Electricidad)",
        "Merienda", "Vegana", "< 15 minutos", "Fácil",
        [
            ("mango", "1", "unidad"),
            ("piña", "1", "taza"),
            ("papaya", "1", "taza"),
            ("limón", "1/2", "unidad"),
        ],
        [
            "Lava y corta las frutas en trozos pequeños.",
            "Combina todas las frutas en un bol.",
            "Exprime el limón por encima y mezcla bien.",
        ],
    ),
)

SNACKS: Tuple[Recipe, ...] = (
    _recipe(
        "Hummus Casero con Crudités",
        "Snack", "Vegana", "15-30 minutos", "Fácil",
        [
            ("garbanzos cocidos", "1", "lata"),
            ("tahini", "2", "cucharadas"),
            ("ajo", "1", "diente"),
            ("limón", "1", "unidad"),
            ("aceite de oliva", "3", "cucharadas"),
            ("zanahorias", "2", "unidades"),
            ("pepino", "1", "unidad"),
        ],
        [
            "Escurre y enjuaga los garbanzos.",
            "Tritura los garbanzos con el tahini, el ajo y el jugo de limón.",
            "Añade el aceite de oliva gradualmente hasta conseguir una textura suave.",
            "Corta las verduras en bastones para acompañar.",
        ],
    ),
)

POSTRES: Tuple[Recipe, ...] = (
    _recipe(
        "Tarta de Manzana Fácil",
        "Postre", "Estándar", "30-60 minutos", "Intermedia",
        [
            ("manzanas", "4", "unidades"),
            ("masa quebrada", "1", "lámina"),
            ("azúcar", "1/2", "taza"),
            ("canela", "1", "cucharadita"),
            ("mantequilla", "2", "cucharadas"),
        ],
        [
            "Precalienta el horno a 180°C.",
            "Pela y corta las manzanas en rodajas finas.",
            "Mezcla las manzanas con el azúcar y la canela.",
            "Extiende la masa en un molde, coloca las manzanas y trozos de mantequilla.",
            "Hornea durante 40-45 minutos hasta que la masa esté dorada.",
        ],
    ),
    _recipe(
        "Plátanos Asados con Canela (Sin Electricidad)",
        "Postre", "Vegana", "15-30 minutos", "Fácil",
        [
            ("plátanos maduros", "2", "unidades"),
            ("azúcar morena", "2", "cucharadas"),
            ("canela", "1", "cucharadita"),
        ],
        [
            "Envuelve los plátanos con azúcar y canela en papel aluminio.",
            "Colócalos en la parrilla a calor indirecto por 10-15 minutos.",
            "Sirve caliente.",
        ],
    ),
)


LOCAL_RECIPES: Tuple[Recipe, ...] = DESAYUNOS + ALMUERZOS + CENAS + MERIENDAS + SNACKS + POSTRES
