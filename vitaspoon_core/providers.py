"""
Registro de proveedores de generación.

El orden nominal es fijo: openai (primario), gemini (secundario),
openrouter (proxy terciario) y por último "local", que siempre está.
Solo se listan los proveedores de IA con API key configurada.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from . import llm_client
from .config import Settings, get_settings
from .domains.recipes.builder import RecipeBuilder
from .domains.recipes.models import Recipe, UserInput

logger = logging.getLogger(__name__)

LOCAL = "local"
PROVIDER_ORDER = (llm_client.OPENAI, llm_client.GEMINI, llm_client.OPENROUTER)


class AIRecipeProvider:
    """Proveedor de IA: prompt → llamada al vendor → parseo a Recipe."""

    def __init__(self, name: str, builder: Optional[RecipeBuilder] = None):
        self.name = name
        self.builder = builder or RecipeBuilder()

    def generate(self, user_input: UserInput) -> Recipe:
        prompt = self.builder.build_prompt(user_input)
        text = llm_client.generate_recipe_json(self.name, prompt, self.builder.get_system_prompt())
        return self.builder.parse_document(text, user_input, source=self.name)

    def __repr__(self) -> str:
        return f"AIRecipeProvider({self.name!r})"


def configured_ai_providers(settings: Optional[Settings] = None) -> List[str]:
    """Nombres de los proveedores de IA con credenciales, en orden nominal."""
    settings = settings or get_settings()
    names: List[str] = []
    for name in PROVIDER_ORDER:
        api_key, _ = llm_client.credentials_for(name, settings)
        if api_key:
            names.append(name)
    return names


def provider_names(settings: Optional[Settings] = None) -> List[str]:
    """Lista completa, con "local" siempre al final."""
    return configured_ai_providers(settings) + [LOCAL]


def build_providers(settings: Optional[Settings] = None) -> List[AIRecipeProvider]:
    names = configured_ai_providers(settings)
    if not names:
        logger.warning("⚠️ No hay API keys configuradas, solo se usará el generador local")
    return [AIRecipeProvider(name) for name in names]
