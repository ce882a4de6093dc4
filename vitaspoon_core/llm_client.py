from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from openai import OpenAI, OpenAIError

from .config import Settings, get_settings
from .exceptions import ProviderError, ProviderNotConfiguredError, ProviderResponseError

"""
vitaspoon_core.llm_client
=========================

Llamadas de generación a los proveedores de IA.

Los tres proveedores exponen una API compatible con OpenAI, por eso se usa
el mismo SDK (`openai`) cambiando `base_url`, API key y modelo:

- openai      → API oficial (primario)
- gemini      → endpoint OpenAI-compatible de Google (secundario)
- openrouter  → proxy OpenRouter con modelo DeepSeek (terciario)

Cada llamada lleva su propio timeout (`GENERATION_TIMEOUT_S`) y no
reintenta: la política de reintentos es de la cadena de respaldo.
Cualquier error del SDK se envuelve en `ProviderError`.
"""

logger = logging.getLogger(__name__)

OPENAI = "openai"
GEMINI = "gemini"
OPENROUTER = "openrouter"


@dataclass(frozen=True)
class VendorEndpoint:
    name: str
    base_url: Optional[str]
    probe_url: str


VENDORS: Dict[str, VendorEndpoint] = {
    OPENAI: VendorEndpoint(OPENAI, None, "https://api.openai.com/v1/models"),
    GEMINI: VendorEndpoint(
        GEMINI,
        "https://generativelanguage.googleapis.com/v1beta/openai/",
        "https://generativelanguage.googleapis.com/v1beta/models",
    ),
    OPENROUTER: VendorEndpoint(
        OPENROUTER,
        "https://openrouter.ai/api/v1",
        "https://openrouter.ai/api/v1/models",
    ),
}


def credentials_for(provider: str, settings: Optional[Settings] = None) -> tuple[str, str]:
    """Devuelve (api_key, modelo) del proveedor según la configuración."""
    settings = settings or get_settings()
    if provider == OPENAI:
        return settings.openai_api_key, settings.openai_model_text
    if provider == GEMINI:
        return settings.gemini_api_key, settings.gemini_model
    if provider == OPENROUTER:
        return settings.openrouter_api_key, settings.openrouter_model
    raise ProviderNotConfiguredError(provider, "Proveedor desconocido")


def get_client(provider: str) -> OpenAI:
    settings = get_settings()
    api_key, _ = credentials_for(provider, settings)
    if not api_key:
        raise ProviderNotConfiguredError(provider, "API key no configurada en el .env")

    kwargs: Dict[str, Any] = {
        "api_key": api_key,
        "timeout": settings.generation_timeout_s,
        "max_retries": 0,
    }
    base_url = VENDORS[provider].base_url
    if base_url:
        kwargs["base_url"] = base_url
    return OpenAI(**kwargs)


def generate_recipe_json(provider: str, prompt: str, system_prompt: str) -> str:
    """
    Usa un modelo de texto (chat.completions) para generar el JSON de la receta.

    Returns:
        Contenido crudo del mensaje (se parsea en `RecipeBuilder.parse_document`).

    Raises:
        ProviderError: credenciales faltantes, error de red/HTTP/timeout,
        o respuesta vacía.
    """
    settings = get_settings()
    client = get_client(provider)
    _, model = credentials_for(provider, settings)

    kwargs: Dict[str, Any] = {}
    # Solo la API oficial garantiza json_object en todos los modelos
    if provider == OPENAI:
        kwargs["response_format"] = {"type": "json_object"}

    logger.info(f"🤖 Generando receta con {provider} ({model})...")
    try:
        completion = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            temperature=0.7,
            max_tokens=1500,
            **kwargs,
        )
    except OpenAIError as e:
        raise ProviderError(provider, f"Error de API: {e}") from e

    if not completion.choices:
        raise ProviderResponseError(provider, "Respuesta sin contenido")
    content = completion.choices[0].message.content
    if not content:
        raise ProviderResponseError(provider, "Respuesta sin contenido")

    logger.info(f"✅ Respuesta recibida de {provider}")
    return content
