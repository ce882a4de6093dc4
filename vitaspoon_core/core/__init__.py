"""
Interfaces compartidas del core de generación.

Los protocols de `abstractions` describen los colaboradores externos:
- Proveedores de generación (IA o local)
- Proveedor del corpus de recetas
"""
