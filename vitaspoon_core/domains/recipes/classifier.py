"""
Clasificador de ingredientes.

Etiqueta strings de ingredientes en clases semánticas (proteína, arroz,
vegetales) por contención de substring contra listas curadas.

La coincidencia es deliberadamente laxa: "res" también aparece dentro de
"fresas" y "jamón" dentro de palabras compuestas. Ese comportamiento se
mantiene tal cual y está cubierto por tests (`contains_term`).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .vocabulary import INGREDIENT_TYPES, PROTEINS


def contains_term(haystack: str, needle: str) -> bool:
    """
    True si `needle` aparece dentro de `haystack` (sin distinguir mayúsculas).

    Un término vacío nunca coincide: una alergia "" no debe excluir todo.
    """
    term = (needle or "").strip().lower()
    if not term:
        return False
    return term in (haystack or "").lower()


def matches_any(haystack: str, terms: Sequence[str]) -> bool:
    return any(contains_term(haystack, term) for term in terms)


def classify_protein(ingredients: Sequence[str]) -> List[str]:
    """
    Devuelve los ingredientes que contienen algún término de proteína,
    en su orden original.

    >>> classify_protein(["pollo", "zanahoria", "cerdo"])
    ['pollo', 'cerdo']
    """
    return [ing for ing in ingredients if matches_any(ing, PROTEINS)]


def identify_main_protein(ingredients: Sequence[str]) -> Optional[str]:
    proteins = classify_protein(ingredients)
    return proteins[0] if proteins else None


def has_ingredient_type(ingredients: Sequence[str], ingredient_type: str) -> bool:
    """
    Verifica si los ingredientes contienen cierto tipo: "proteins" | "rice" | "vegetables".

    Un tipo desconocido devuelve False.
    """
    vocabulary = INGREDIENT_TYPES.get(ingredient_type)
    if not vocabulary:
        return False
    return any(matches_any(ing, vocabulary) for ing in ingredients or ())
