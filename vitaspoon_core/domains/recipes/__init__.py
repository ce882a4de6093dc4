"""
Dominio de recetas de cocina.

Este módulo contiene toda la lógica específica para generar recetas:
- Modelos de datos (Recipe, Ingredient, UserInput)
- Clasificador de ingredientes, filtro, puntaje y ranking
- Corpus (catálogo curado + dataset CSV) con caché single-flight
- Selector local por etapas y sintetizador de recetas
- Prompts y builder para los proveedores de IA
"""
