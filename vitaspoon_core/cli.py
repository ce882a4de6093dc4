"""
vitaspoon_core.cli
==================

Punto de entrada mínimo (CLI) para generar una receta desde la terminal.

1) Arma un `UserInput` con los argumentos.
2) Genera la receta con la cadena de proveedores (o solo local con `--local-only`).
3) Imprime la receta como JSON.

Este archivo está pensado para:
- demo local rápida,
- smoke tests manuales,
- validar que el selector local "no se rompió" al tocar el catálogo o el filtro.

Ejemplo
-------
    vitaspoon --cuisine Almuerzo --ingredient garbanzos --ingredient tomate --local-only --seed 7
"""

from __future__ import annotations

import argparse
import json
import logging
import random
from typing import List, Optional

from .domains.recipes.models import UserInput
from .engine import generate_local_only, generate_recipe


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vitaspoon", description="Genera una receta personalizada")
    parser.add_argument("--cuisine", default="", help="Tipo de comida: Desayuno|Almuerzo|Merienda|Cena|Postre|Snack")
    parser.add_argument("--diet", default="", help="Tipo de dieta (ej: Vegetariana, Vegana)")
    parser.add_argument("--prep-time", default="", help="Tiempo de preparación")
    parser.add_argument("--difficulty", default="", help="Nivel de dificultad")
    parser.add_argument("--electricity", default="", help='Disponibilidad de electricidad (ej: "Sin electricidad")')
    parser.add_argument("--ingredient", action="append", default=[], help="Ingrediente disponible (repetible)")
    parser.add_argument("--allergy", action="append", default=[], help="Alergia a evitar (repetible)")
    parser.add_argument("--local-only", action="store_true", help="No usar proveedores de IA")
    parser.add_argument("--seed", type=int, default=None, help="Semilla para la selección local")
    parser.add_argument("-v", "--verbose", action="store_true", help="Logs de nivel INFO")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Genera e imprime una receta.

    Returns
    -------
    int
        Código de salida (0 siempre: la generación no falla).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    user_input = UserInput.build(
        cuisine_type=args.cuisine,
        diet_type=args.diet,
        prep_time=args.prep_time,
        difficulty_level=args.difficulty,
        electricity_type=args.electricity,
        available_ingredients=args.ingredient,
        allergies=args.allergy,
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.local_only:
        recipe = generate_local_only(user_input, rng=rng)
    else:
        recipe = generate_recipe(user_input, rng=rng)

    print(json.dumps(recipe.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
