"""
API HTTP para VitaSpoon.

Esta capa expone endpoints REST que usan el core interno (vitaspoon_core.engine)
para generar y guardar recetas.

La API está diseñada para ser consumida por:
- UI web
- Clientes externos
- Scripts de automatización
"""
