from __future__ import annotations

import csv
import logging
import re
import threading
from concurrent.futures import Future
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ...ids import generate_id
from .catalog import LOCAL_RECIPES
from .models import Ingredient, Recipe
from .vocabulary import CSV_SOURCE

"""
vitaspoon_core.domains.recipes.corpus
=====================================

Proveedor del corpus de recetas (`get_all_recipes`).

Responsabilidad
----------------
- Leer el dataset CSV opcional y convertir cada fila a `Recipe`.
- Combinarlo con el catálogo curado, deduplicando por título
  (el CSV tiene prioridad ante un conflicto).
- Cachear el resultado: se carga una sola vez por proceso.

Caché single-flight
-------------------
`RecipeCorpus` mantiene un estado explícito:

    EMPTY  →  LOADING(Future)  →  READY(recetas)

Los llamadores concurrentes que llegan durante la carga inicial esperan el
mismo `Future` en lugar de disparar otra carga. Si la carga falla, el
estado vuelve a EMPTY y todos los que esperaban reciben la excepción;
la próxima llamada reintenta.

El corpus se entrega como tupla: es una instantánea de solo lectura.
"""

logger = logging.getLogger(__name__)

_QUANTITY_RE = re.compile(r"^(\d+\.?\d*)\s*(\w+)?\s+(.+)$")


# ============================================================
# Conversión CSV → Recipe
# ============================================================

def _parse_ingredients(raw: str) -> Tuple[Ingredient, ...]:
    items = [item.strip() for item in (raw or "").split(",") if item.strip()]
    if not items:
        return (Ingredient("Ingredientes no especificados"),)

    ingredients: List[Ingredient] = []
    for item in items:
        parts = _QUANTITY_RE.match(item)
        if parts:
            ingredients.append(
                Ingredient(name=parts.group(3).strip(), quantity=parts.group(1), unit=parts.group(2) or "")
            )
        else:
            ingredients.append(Ingredient(name=item))
    return tuple(ingredients)


def _parse_instructions(raw: str) -> Tuple[str, ...]:
    raw = raw or ""
    if "\n" in raw:
        steps = [line.strip() for line in raw.split("\n") if line.strip()]
    else:
        steps = [s.strip() for s in raw.split(".") if s.strip()]
        steps = [s if s.endswith(".") else f"{s}." for s in steps]
    return tuple(steps) if steps else ("Instrucciones no disponibles.",)


def _parse_minutes(raw: str) -> Optional[float]:
    try:
        return float(raw) if raw not in (None, "") else None
    except (TypeError, ValueError):
        return None


def convert_csv_row(row: Dict[str, str]) -> Recipe:
    """
    Convierte una fila del dataset CSV al formato interno `Recipe`.

    Columnas esperadas: id, name, ingredients, instructions, minutes,
    cuisine, diet, difficulty (todas opcionales salvo name).
    """
    minutes = _parse_minutes(row.get("minutes", ""))
    effective_minutes = minutes if minutes is not None else 30

    if effective_minutes <= 15:
        prep_time = "Rápido"
    elif effective_minutes > 45:
        prep_time = "Largo"
    else:
        prep_time = "Medio"

    difficulty = (row.get("difficulty") or "").strip()
    if not difficulty:
        if minutes is None:
            difficulty = "Medio"
        else:
            difficulty = "Fácil" if minutes <= 20 else "Medio" if minutes <= 40 else "Difícil"

    return Recipe(
        id=(row.get("id") or "").strip() or generate_id(),
        title=(row.get("name") or "").strip() or "Receta sin nombre",
        ingredients=_parse_ingredients(row.get("ingredients", "")),
        instructions=_parse_instructions(row.get("instructions", "")),
        prep_time=prep_time,
        difficulty_level=difficulty,
        cuisine_type=(row.get("cuisine") or "").strip() or "Internacional",
        diet_type=(row.get("diet") or "").strip() or "Regular",
        source=CSV_SOURCE,
    )


def load_csv_recipes(path: Path) -> List[Recipe]:
    """
    Lee el CSV y convierte cada fila. Las filas que fallan se saltean.

    Si el archivo no existe devuelve una lista vacía (el dataset es opcional).
    """
    if not path.exists():
        logger.info(f"📄 Dataset CSV no encontrado en {path}, se usa solo el catálogo local")
        return []

    recipes: List[Recipe] = []
    with path.open("r", encoding="utf-8", newline="") as fh:
        for index, row in enumerate(csv.DictReader(fh), start=1):
            try:
                recipes.append(convert_csv_row(row))
            except Exception as e:
                logger.warning(f"⚠️ Fila {index} del CSV ignorada: {e}")

    logger.info(f"✅ CSV procesado: {len(recipes)} recetas convertidas")
    return recipes


def merge_recipes(external: Sequence[Recipe], curated: Sequence[Recipe]) -> Tuple[Recipe, ...]:
    """Combina ambas fuentes deduplicando por título; `external` gana."""
    seen = {r.title.lower() for r in external}
    unique_curated = [r for r in curated if r.title.lower() not in seen]
    return tuple(external) + tuple(unique_curated)


# ============================================================
# Caché single-flight
# ============================================================

class CacheState(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"


class RecipeCorpus:
    """
    Corpus memoizado con carga única compartida entre hilos.

    Args:
        loader: función que devuelve las recetas (por defecto CSV + catálogo).
    """

    def __init__(self, loader: Callable[[], Sequence[Recipe]]):
        self._loader = loader
        self._lock = threading.Lock()
        self._state = CacheState.EMPTY
        self._pending: Optional[Future] = None
        self._data: Tuple[Recipe, ...] = ()

    @property
    def state(self) -> CacheState:
        return self._state

    def get_all_recipes(self) -> Tuple[Recipe, ...]:
        with self._lock:
            if self._state is CacheState.READY:
                return self._data
            if self._state is CacheState.LOADING:
                pending = self._pending
                owner = False
            else:
                pending = Future()
                self._pending = pending
                self._state = CacheState.LOADING
                owner = True

        if not owner:
            return pending.result()

        try:
            data = tuple(self._loader())
        except Exception as e:
            with self._lock:
                self._state = CacheState.EMPTY
                self._pending = None
            logger.error(f"❌ Error cargando el corpus de recetas: {e}")
            pending.set_exception(e)
            raise

        with self._lock:
            self._data = data
            self._state = CacheState.READY
            self._pending = None
        pending.set_result(data)
        return data

    def invalidate(self) -> None:
        """Vuelve a EMPTY (la próxima llamada recarga). No afecta cargas en curso."""
        with self._lock:
            if self._state is CacheState.READY:
                self._state = CacheState.EMPTY
                self._data = ()


def default_loader(csv_path: Optional[Path] = None) -> Callable[[], Tuple[Recipe, ...]]:
    def _load() -> Tuple[Recipe, ...]:
        from ...config import get_settings

        path = csv_path or Path(get_settings().recipes_csv_path)
        combined = merge_recipes(load_csv_recipes(path), LOCAL_RECIPES)
        logger.info(f"🍽️ Corpus combinado: {len(combined)} recetas")
        return combined

    return _load


_corpus: Optional[RecipeCorpus] = None
_corpus_lock = threading.Lock()


def get_corpus() -> RecipeCorpus:
    """Singleton de módulo del corpus por defecto."""
    global _corpus
    with _corpus_lock:
        if _corpus is None:
            _corpus = RecipeCorpus(default_loader())
        return _corpus