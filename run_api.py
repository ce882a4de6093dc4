#!/usr/bin/env python3
"""
Script helper para ejecutar la API FastAPI de VitaSpoon.
Ejecuta desde la raíz del proyecto para asegurar que Python encuentre el módulo 'api'.
"""

import os
import sys
from pathlib import Path

# Asegurar que el directorio raíz esté en el PYTHONPATH
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

if __name__ == "__main__":
    try:
        import uvicorn
        port = int(os.getenv("PORT", "8000"))
        print(f"🚀 Iniciando API FastAPI en http://localhost:{port}")
        print(f"📖 Documentación disponible en http://localhost:{port}/docs")
        uvicorn.run("api.main:app", host="0.0.0.0", port=port, reload=True)
    except ImportError as e:
        print("❌ Error: No se pudo importar uvicorn. ¿Instalaste las dependencias?")
        print("   Ejecuta: pip install -e .")
        print(f"   Error: {e}")
        sys.exit(1)
