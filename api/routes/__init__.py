"""Rutas de la API."""

from . import recipes, saved_recipes

__all__ = ["recipes", "saved_recipes"]
