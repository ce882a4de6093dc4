# vitaspoon_core/config.py
from dataclasses import dataclass, field
from functools import lru_cache
import os
from typing import Tuple

from dotenv import load_dotenv

"""
vitaspoon_core.config
=====================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Objetivos de diseño
-------------------
1. **Fuente única de verdad**
   Toda la app debe obtener configuración solo a través de `get_settings()`.

2. **Inmutabilidad práctica**
   `Settings` se crea una sola vez y luego se reutiliza (cache LRU).

3. **Facilidad de testing**
   En tests se puede llamar `get_settings.cache_clear()` después de
   modificar el entorno con `monkeypatch.setenv`.

Notas importantes
-----------------
- `load_dotenv()` se ejecuta al importar el módulo.
- Si una API key no está presente NO se falla acá: el proveedor
  correspondiente simplemente no se incluye en la cadena de generación.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "si", "sí", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: str) -> Tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip().upper() for item in raw.split(",") if item.strip())


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global de la aplicación.

    Attributes
    ----------
    openai_api_key / gemini_api_key / openrouter_api_key:
        Credenciales de cada proveedor de IA. Vacías = proveedor no configurado.
    openai_model_text / gemini_model / openrouter_model:
        Modelo a usar en cada proveedor.
    probe_timeout_s:
        Timeout (segundos) de cada sonda de alcanzabilidad y de la geolocalización.
    generation_timeout_s:
        Timeout (segundos) de cada llamada de generación a un proveedor.
    region_detection:
        Si False, no se ejecuta la heurística de región (se asume no restringida).
    geolocation_url:
        Endpoint JSON de geolocalización por IP (debe devolver `country_code`).
    restricted_countries:
        Códigos ISO de países con acceso restringido a los proveedores directos.
    recipes_csv_path:
        Dataset CSV opcional de recetas que se combina con el catálogo local.
    database_url:
        URL SQLAlchemy para el almacenamiento de recetas guardadas.
    """

    # Proveedores de IA
    openai_api_key: str
    openai_model_text: str
    gemini_api_key: str
    gemini_model: str
    openrouter_api_key: str
    openrouter_model: str

    # Red
    probe_timeout_s: float = 3.0
    generation_timeout_s: float = 30.0
    region_detection: bool = True
    geolocation_url: str = "https://ipapi.co/json/"
    restricted_countries: Tuple[str, ...] = field(default_factory=lambda: ("CU", "IR", "KP", "SY"))

    # Datos
    recipes_csv_path: str = "data/recipes.csv"
    database_url: str = "sqlite:///data/vitaspoon.sqlite"


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - OPENAI_API_KEY, OPENAI_MODEL_TEXT (default: "gpt-4o-mini")
    - GEMINI_API_KEY, GEMINI_MODEL (default: "gemini-2.0-flash")
    - OPENROUTER_API_KEY (o DEEPSEEK_API_KEY), OPENROUTER_MODEL
      (default: "deepseek/deepseek-chat")
    - PROBE_TIMEOUT_S, GENERATION_TIMEOUT_S
    - REGION_DETECTION, GEOLOCATION_URL, RESTRICTED_COUNTRIES
    - RECIPES_CSV_PATH, DATABASE_URL
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model_text=os.getenv("OPENAI_MODEL_TEXT", "gpt-4o-mini"),
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        # OpenRouter reemplazó al acceso directo a DeepSeek; se acepta la variable vieja
        openrouter_api_key=os.getenv("OPENROUTER_API_KEY", "") or os.getenv("DEEPSEEK_API_KEY", ""),
        openrouter_model=os.getenv("OPENROUTER_MODEL", "deepseek/deepseek-chat"),
        probe_timeout_s=_env_float("PROBE_TIMEOUT_S", 3.0),
        generation_timeout_s=_env_float("GENERATION_TIMEOUT_S", 30.0),
        region_detection=_env_bool("REGION_DETECTION", True),
        geolocation_url=os.getenv("GEOLOCATION_URL", "https://ipapi.co/json/"),
        restricted_countries=_env_list("RESTRICTED_COUNTRIES", "CU,IR,KP,SY"),
        recipes_csv_path=os.getenv("RECIPES_CSV_PATH", "data/recipes.csv"),
        database_url=os.getenv("DATABASE_URL", "sqlite:///data/vitaspoon.sqlite"),
    )
