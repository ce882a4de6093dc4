"""
API HTTP principal para VitaSpoon.

Esta aplicación FastAPI expone endpoints REST que usan el core interno
(vitaspoon_core.engine) para generar recetas personalizadas.

Uso:
    uvicorn api.main:app --reload --port 8000
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vitaspoon_core.db.database import init_db

from .routes import recipes, saved_recipes

# Cargar variables de entorno
load_dotenv()

# Determinar ambiente
ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configurar logging según ambiente
log_level = getattr(logging, LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)
logger.info(f"🚀 Iniciando API en ambiente: {ENVIRONMENT}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("✅ DB creada/verificada usando DATABASE_URL")
    yield


app = FastAPI(
    title="VitaSpoon API",
    description="API para generar recetas personalizadas con IA y respaldo local",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS: configurar según ambiente
cors_origins_str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:4321")
cors_origins = [origin.strip() for origin in cors_origins_str.split(",") if origin.strip()]

logger.info(f"🌐 CORS origins configurados: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar rutas
app.include_router(recipes.router)
app.include_router(saved_recipes.router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "vitaspoon-api"}


@app.get("/health")
async def health():
    """Health check detallado."""
    return {
        "status": "ok",
        "service": "vitaspoon-api",
        "version": "0.1.0",
    }
