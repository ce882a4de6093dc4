"""
Abstracciones (Protocols) para el motor de generación de recetas.

Estos protocols definen las interfaces de los colaboradores externos del
core, para que la cadena de respaldo y el selector local puedan trabajar
con implementaciones reales o dobles de test indistintamente.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..domains.recipes.models import Recipe, UserInput


class RecipeProvider(Protocol):
    """
    Interfaz de un proveedor de generación de recetas (IA o local).

    Cada proveedor define:
    - Su nombre (clave en la cadena de respaldo)
    - Cómo generar una receta a partir de la entrada del usuario
    """

    name: str

    def generate(self, user_input: UserInput) -> Recipe:
        """
        Genera una receta completa.

        Args:
            user_input: restricciones, preferencias e ingredientes del usuario

        Returns:
            Receta generada.

        Raises:
            ProviderError: ante cualquier falla (red, autenticación, cuota,
            timeout, JSON inválido). La cadena de respaldo solo distingue
            "devolvió receta" de "lanzó".
        """
        ...


class CorpusProvider(Protocol):
    """Interfaz del proveedor del corpus de recetas (memoizado)."""

    def get_all_recipes(self) -> Sequence[Recipe]:
        """Devuelve el corpus como instantánea de solo lectura."""
        ...
