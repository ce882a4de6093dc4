"""
VitaSpoon core: generación de recetas personalizadas.

Punto de entrada recomendado: `vitaspoon_core.engine.generate_recipe`.
"""
