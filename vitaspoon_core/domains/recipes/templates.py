"""
Tablas de plantillas para sintetizar recetas desde cero.

- Ingredientes base por tipo de comida.
- Títulos por tipo de comida × dieta.
- Instrucciones por tipo de comida × disponibilidad de electricidad
  (con variantes de parrilla de carbón para cocinar sin electricidad).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .models import Ingredient
from .vocabulary import MAIN_MEALS, NO_ELECTRICITY, PLANT_BASED_DIETS

# ============================================================
# Ingredientes
# ============================================================

def _ings(*rows: Tuple[str, str, str]) -> Tuple[Ingredient, ...]:
    return tuple(Ingredient(name, quantity, unit) for name, quantity, unit in rows)


CUISINE_TYPE_INGREDIENTS: Dict[str, Tuple[Ingredient, ...]] = {
    "Desayuno": _ings(
        ("pan integral", "2", "rebanadas"),
        ("aguacate", "1", "unidad"),
        ("huevos", "2", "unidades"),
        ("sal", "1", "pizca"),
        ("pimienta", "1", "pizca"),
        ("aceite de oliva", "1", "cucharada"),
        ("jugo de limón", "1", "cucharadita"),
    ),
    "Almuerzo": _ings(
        ("garbanzos cocidos", "1", "taza"),
        ("tomates cherry", "1", "taza"),
        ("pepino", "1/2", "unidad"),
        ("cebolla roja", "1/4", "unidad"),
        ("aceitunas negras", "1/4", "taza"),
        ("aceite de oliva", "2", "cucharadas"),
        ("limón", "1/2", "unidad"),
        ("orégano", "1", "cucharadita"),
    ),
    "Merienda": _ings(
        ("plátano", "1", "unidad"),
        ("fresas", "1", "taza"),
        ("yogur natural", "1/2", "taza"),
        ("miel", "1", "cucharada"),
        ("avena", "2", "cucharadas"),
        ("leche de almendras", "1", "taza"),
    ),
    "Cena": _ings(
        ("pasta", "200", "g"),
        ("pechuga de pollo", "1", "unidad"),
        ("salsa pesto", "3", "cucharadas"),
        ("tomates cherry", "1", "taza"),
        ("queso parmesano", "2", "cucharadas"),
        ("aceite de oliva", "1", "cucharada"),
        ("sal y pimienta", "", "al gusto"),
    ),
    "Postre": _ings(
        ("manzanas", "4", "unidades"),
        ("masa quebrada", "1", "lámina"),
        ("azúcar", "1/2", "taza"),
        ("canela", "1", "cucharadita"),
        ("mantequilla", "2", "cucharadas"),
        ("limón", "1/2", "unidad"),
    ),
    "Snack": _ings(
        ("garbanzos cocidos", "1", "lata"),
        ("tahini", "2", "cucharadas"),
        ("ajo", "1", "diente"),
        ("limón", "1", "unidad"),
        ("aceite de oliva", "3", "cucharadas"),
        ("pimentón", "1/2", "cucharadita"),
        ("zanahorias", "2", "unidades"),
        ("apio", "2", "tallos"),
        ("pepino", "1", "unidad"),
    ),
}

PANTRY_BASICS: Tuple[Ingredient, ...] = _ings(
    ("sal", "Al gusto", ""),
    ("pimienta", "Al gusto", ""),
    ("aceite", "2", "cucharadas"),
)

# Reemplazos agregados según dieta en platos principales
VEGAN_MAIN_EXTRA = Ingredient("tofu", "150", "g")
LOW_CARB_MAIN_EXTRA = Ingredient("calabacín", "1", "unidad")
HIGH_PROTEIN_EXTRA = Ingredient("pechuga de pollo", "200", "g")


# ============================================================
# Títulos
# ============================================================

DEFAULT_TITLE = "Plato Personalizado"

CUISINE_TITLES: Dict[str, str] = {
    "Desayuno": "Desayuno Especial",
    "Almuerzo": "Almuerzo Criollo",
    "Cena": "Cena Ligera",
    "Merienda": "Merienda Energética",
    "Postre": "Postre Casero",
    "Snack": "Aperitivo Rápido",
}

# (tipo de comida, dieta) → título; tiene prioridad sobre CUISINE_TITLES
CUISINE_DIET_TITLES: Dict[Tuple[str, str], str] = {
    ("Desayuno", "Vegetariana"): "Tostadas de Vegetales",
    ("Desayuno", "Vegana"): "Tostadas de Vegetales",
    ("Almuerzo", "Vegetariana"): "Salteado de Vegetales",
    ("Almuerzo", "Vegana"): "Salteado de Vegetales con Tofu",
    ("Cena", "Vegetariana"): "Cena Vegetariana de Temporada",
    ("Cena", "Vegana"): "Cena Vegana con Tofu",
    ("Almuerzo", "Alto en proteínas"): "Almuerzo Proteico",
    ("Cena", "Bajo en carbohidratos"): "Cena Ligera sin Harinas",
}


def title_for(cuisine_type: str, diet_type: str) -> str:
    if not cuisine_type:
        return "Receta Personalizada"
    return CUISINE_DIET_TITLES.get(
        (cuisine_type, diet_type),
        CUISINE_TITLES.get(cuisine_type, DEFAULT_TITLE),
    )


# ============================================================
# Instrucciones
# ============================================================

CUISINE_TYPE_INSTRUCTIONS: Dict[str, Tuple[str, ...]] = {
    "Desayuno": (
        "Tuesta el pan hasta que esté dorado.",
        "Machaca el aguacate en un tazón y agrega sal, pimienta y jugo de limón.",
        "Extiende el aguacate sobre las tostadas.",
        "En una sartén, fríe los huevos al gusto.",
        "Coloca los huevos sobre las tostadas de aguacate.",
        "Agrega más sal y pimienta al gusto.",
    ),
    "Almuerzo": (
        "Enjuaga y escurre los garbanzos.",
        "Corta los tomates cherry por la mitad.",
        "Pela y corta el pepino en cubos pequeños.",
        "Pica finamente la cebolla roja.",
        "En un bol grande, combina los garbanzos, tomates, pepino, cebolla y aceitunas.",
        "En un recipiente pequeño, mezcla el aceite de oliva, el jugo de limón y el orégano.",
        "Vierte el aderezo sobre la ensalada y mezcla bien.",
        "Sirve inmediatamente o refrigera por 30 minutos para que los sabores se integren.",
    ),
    "Merienda": (
        "Pela el plátano y córtalo en trozos.",
        "Lava y quita el tallo de las fresas.",
        "Coloca todos los ingredientes en una licuadora.",
        "Licúa hasta obtener una mezcla suave.",
        "Sirve inmediatamente.",
    ),
    "Cena": (
        "Cuece la pasta según las instrucciones del paquete.",
        "Corta la pechuga de pollo en cubos y sazona con sal y pimienta.",
        "En una sartén, calienta el aceite y cocina el pollo hasta que esté dorado.",
        "Corta los tomates cherry por la mitad.",
        "Escurre la pasta y mezcla con la salsa pesto.",
        "Agrega el pollo y los tomates a la pasta.",
        "Sirve caliente con queso parmesano rallado por encima.",
    ),
    "Postre": (
        "Precalienta el horno a 180°C.",
        "Pela y corta las manzanas en rodajas finas.",
        "Mezcla las manzanas con el azúcar, la canela y el zumo de medio limón.",
        "Extiende la masa quebrada en un molde para tarta.",
        "Coloca las manzanas sobre la masa.",
        "Añade pequeños trozos de mantequilla sobre las manzanas.",
        "Hornea durante 40-45 minutos hasta que la masa esté dorada.",
        "Deja enfriar antes de servir.",
    ),
    "Snack": (
        "Escurre y enjuaga los garbanzos.",
        "En un procesador de alimentos, mezcla los garbanzos, tahini, ajo picado y el jugo de limón.",
        "Mientras procesas, añade el aceite de oliva gradualmente hasta conseguir una textura suave.",
        "Sazona con sal y pimienta al gusto.",
        "Sirve en un bol con un poco de aceite de oliva y pimentón por encima.",
        "Lava y corta las verduras en bastones para acompañar.",
    ),
}

# Sin electricidad, para comidas que no son plato principal
NO_ELECTRICITY_INSTRUCTIONS: Dict[str, Tuple[str, ...]] = {
    "Desayuno": (
        "Corta el aguacate por la mitad y extrae la pulpa en un bol.",
        "Machaca con un tenedor hasta obtener una consistencia suave.",
        "Añade sal, pimienta y jugo de limón al gusto.",
        "Unta sobre las rebanadas de pan.",
        "Si tienes parrilla de carbón, puedes tostar el pan brevemente sobre ella.",
    ),
    "Merienda": (
        "Lava y corta las frutas en trozos pequeños.",
        "Combina todas las frutas en un bol.",
        "Añade cereales, frutos secos o semillas si los tienes disponibles.",
        "Opcional: añade un poco de miel o algún edulcorante natural.",
        "Mezcla bien y sirve fresco.",
    ),
    "Postre": (
        "Pela y corta las frutas en trozos medianos.",
        "Envuelve las frutas en papel aluminio con un poco de azúcar y canela.",
        "Coloca el paquete en la parrilla con calor indirecto por 10-15 minutos.",
        "Sirve caliente, opcionalmente con un poco de miel por encima.",
    ),
    "Snack": (
        "Escurre y enjuaga los garbanzos.",
        "Machácalos con un tenedor o un mortero junto con el ajo y el limón.",
        "Añade el aceite de oliva poco a poco hasta lograr una pasta.",
        "Sirve con las verduras cortadas en bastones.",
    ),
}

GRILL_INSTRUCTIONS: Dict[str, Tuple[str, ...]] = {
    "General": (
        "Prepara la parrilla de carbón: coloca los carbones en una pirámide y enciéndelos.",
        "Espera hasta que los carbones estén cubiertos de ceniza blanca (aproximadamente 20-30 minutos).",
        "Distribuye los carbones de manera uniforme para tener zonas de calor directo e indirecto.",
        "Coloca la rejilla y límpiala con un cepillo de alambre.",
    ),
    "Proteína": (
        "Sazona la proteína con sal, pimienta y especias al gusto.",
        "Coloca la carne sobre la zona de calor directo para sellarla (2-3 minutos por lado).",
        "Mueve la carne a la zona de calor indirecto para terminar la cocción sin quemarla.",
        "Deja reposar la carne 5-10 minutos antes de cortarla.",
    ),
    "Vegetales": (
        "Corta los vegetales en trozos grandes para evitar que se caigan entre la rejilla.",
        "Pincela los vegetales con aceite y sazona con sal y pimienta.",
        "Coloca los vegetales sobre la parrilla caliente.",
        "Voltea ocasionalmente hasta que estén tiernos pero aún crujientes.",
    ),
    "Arroz": (
        "Lava el arroz hasta que el agua salga clara.",
        "Coloca el arroz en el centro de un trozo grande de papel aluminio resistente.",
        "Añade agua (proporción 1:2 arroz-agua), sal y especias.",
        "Cierra el papel aluminio formando un paquete sellado.",
        "Coloca sobre la parrilla en calor indirecto y cocina 20-25 minutos.",
    ),
}

DIET_NOTES: Dict[str, str] = {
    "Bajo en carbohidratos": (
        "Recuerda que esta receta es baja en carbohidratos. "
        "Evita añadir pan, arroz, pasta o azúcares refinados."
    ),
    "Alto en proteínas": (
        "Para aumentar el contenido proteico, puedes añadir más huevos, "
        "carnes magras, pescado o legumbres a la receta."
    ),
    "Bajo en grasas": (
        "Esta receta es baja en grasas. Si utilizas aceite, hazlo con moderación."
    ),
}

NO_ELECTRICITY_NOTE = (
    "Esta receta ha sido diseñada para prepararse sin necesidad de utilizar "
    "electrodomésticos o cocina eléctrica."
)


def instructions_for_cuisine(cuisine_type: str, diet_type: str = "", electricity_type: str = "") -> List[str]:
    """
    Instrucciones por tipo de comida, adaptadas a dieta y electricidad.

    Un tipo de comida desconocido usa la plantilla de "Almuerzo".
    """
    no_electricity = electricity_type == NO_ELECTRICITY
    plant_based = diet_type in PLANT_BASED_DIETS

    if no_electricity:
        if cuisine_type in MAIN_MEALS or cuisine_type not in NO_ELECTRICITY_INSTRUCTIONS:
            steps = list(GRILL_INSTRUCTIONS["General"])
            steps.append("Ahora prepararemos los ingredientes para la parrilla:")
            if plant_based:
                steps.extend(GRILL_INSTRUCTIONS["Vegetales"])
            else:
                steps.append("Para la proteína principal:")
                steps.extend(GRILL_INSTRUCTIONS["Proteína"])
                steps.append("Para los vegetales de acompañamiento:")
                steps.extend(GRILL_INSTRUCTIONS["Vegetales"])
            steps.append("Sirve caliente directamente de la parrilla.")
            return steps
        steps = list(NO_ELECTRICITY_INSTRUCTIONS[cuisine_type])
        steps.append(NO_ELECTRICITY_NOTE)
        return steps

    if cuisine_type in MAIN_MEALS and plant_based:
        return [
            "Lava y corta todos los vegetales en trozos regulares.",
            "Calienta aceite en una sartén grande a fuego medio-alto.",
            "Saltea los vegetales comenzando por los más duros (zanahorias, etc).",
            "Añade los vegetales más blandos (pimientos, etc) y cocina 3-4 minutos más.",
            "Añade las especias, sal y pimienta al gusto.",
            "Si tienes tofu, córtalo en cubos y añádelo al final."
            if diet_type == "Vegana"
            else "Añade queso si lo deseas.",
            "Sirve caliente, opcionalmente sobre arroz o con pan.",
        ]

    steps = list(CUISINE_TYPE_INSTRUCTIONS.get(cuisine_type, CUISINE_TYPE_INSTRUCTIONS["Almuerzo"]))
    note: Optional[str] = DIET_NOTES.get(diet_type)
    if note:
        steps.append(note)
    return steps


def rice_with_protein_instructions(electricity_type: str = "") -> List[str]:
    if electricity_type == NO_ELECTRICITY:
        return [
            *GRILL_INSTRUCTIONS["General"],
            *GRILL_INSTRUCTIONS["Arroz"],
            "Mientras el arroz se cocina, prepara la proteína:",
            *GRILL_INSTRUCTIONS["Proteína"],
            "Sirve el arroz con la proteína cocinada por encima.",
        ]
    return [
        "Lava el arroz hasta que el agua salga clara.",
        "Corta la carne en trozos pequeños.",
        "En una olla, calienta el aceite a fuego medio-alto.",
        "Sofríe la carne hasta que esté dorada.",
        "Añade los condimentos y mezcla bien.",
        "Agrega el arroz y remueve para que se impregne de los sabores.",
        "Vierte agua caliente (2 partes de agua por cada parte de arroz).",
        "Cocina tapado a fuego lento por 15-20 minutos hasta que el arroz esté tierno.",
        "Deja reposar 5 minutos antes de servir.",
    ]


def rice_with_vegetables_instructions(electricity_type: str = "") -> List[str]:
    if electricity_type == NO_ELECTRICITY:
        return [
            *GRILL_INSTRUCTIONS["General"],
            *GRILL_INSTRUCTIONS["Arroz"],
            "Mientras el arroz se cocina, prepara los vegetales:",
            *GRILL_INSTRUCTIONS["Vegetales"],
            "Sirve el arroz con los vegetales asados por encima.",
        ]
    return [
        "Lava el arroz hasta que el agua salga clara.",
        "Corta los vegetales en trozos pequeños.",
        "En una olla, calienta el aceite a fuego medio.",
        "Sofríe los vegetales hasta que estén tiernos.",
        "Agrega el arroz y remueve para que se impregne de los sabores.",
        "Vierte agua caliente (2 partes de agua por cada parte de arroz).",
        "Cocina tapado a fuego lento por 15-20 minutos hasta que el arroz esté tierno.",
        "Deja reposar 5 minutos antes de servir.",
    ]


def protein_instructions(electricity_type: str = "") -> List[str]:
    if electricity_type == NO_ELECTRICITY:
        return [
            *GRILL_INSTRUCTIONS["General"],
            *GRILL_INSTRUCTIONS["Proteína"],
            "Para acompañar, también puedes asar vegetales en la parrilla:",
            *GRILL_INSTRUCTIONS["Vegetales"][:3],
            "Sirve la proteína con los vegetales asados como guarnición.",
        ]
    return [
        "Corta la carne en trozos del tamaño deseado.",
        "Sazona la carne con sal, pimienta y tus especias preferidas.",
        "En una sartén, calienta el aceite a fuego medio-alto.",
        "Cocina la carne hasta que esté dorada por todos lados.",
        "Si tienes vegetales, añádelos ahora y cocina hasta que estén tiernos.",
        "Sirve caliente, acompañado de tu guarnición preferida.",
    ]
