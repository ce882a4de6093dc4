from __future__ import annotations

"""
vitaspoon_core.engine
=====================

Orquestador de alto nivel de la generación de recetas.

Este módulo expone una **API interna** y estable para generar una receta
a partir de la entrada del usuario, sin preocuparse por:

- HTTP
- frameworks web
- detalles de CLI

La idea es que:

- La CLI (`cli.py`) use estas funciones.
- La API HTTP (`api/routes/recipes.py`) también llame a este módulo.
- Nadie hable directo con `llm_client.py` / `network.py`, sino con el engine.

Contrato
--------
`generate_recipe` es total: siempre devuelve una `Recipe`. Los errores se
degradan en cada frontera interna (proveedor → siguiente proveedor →
selector local → sintetizador → receta básica).
"""

import logging
import random
from typing import Optional

from .config import Settings, get_settings
from .domains.recipes.models import Recipe, UserInput
from .domains.recipes.selector import LocalRecipeSelector
from .domains.recipes.synthesizer import build_fallback_recipe
from .fallback_chain import ProviderFallbackChain
from .network import RegionDetector, probe_vendors
from .providers import build_providers

logger = logging.getLogger(__name__)


def build_chain(
    settings: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
) -> ProviderFallbackChain:
    """
    Arma la cadena de respaldo a partir de la configuración.

    Args:
        settings: configuración (default: `get_settings()`).
        rng: aleatoriedad del selector local (para fijar semilla).
    """
    settings = settings or get_settings()
    return ProviderFallbackChain(
        providers=build_providers(settings),
        local=LocalRecipeSelector(rng=rng),
        region_detector=RegionDetector(settings) if settings.region_detection else None,
        probe=lambda names: probe_vendors(names, settings),
    )


def generate_recipe(
    user_input: UserInput,
    *,
    chain: Optional[ProviderFallbackChain] = None,
    rng: Optional[random.Random] = None,
) -> Recipe:
    """
    Genera una receta probando los proveedores de IA y luego el generador local.

    Args:
        user_input: restricciones, preferencias e ingredientes del usuario.
        chain: cadena ya armada (tests); por defecto se arma desde la configuración.
        rng: aleatoriedad del selector local.

    Returns:
        Siempre una receta válida.
    """
    try:
        chain = chain or build_chain(rng=rng)
        return chain.generate(user_input)
    except Exception as e:
        logger.error(f"❌ Error al generar receta, usando generador local: {e}")

    try:
        return LocalRecipeSelector(rng=rng).select(user_input)
    except Exception as e:
        logger.error(f"❌ Error en el generador local, usando receta básica: {e}")
        return build_fallback_recipe(user_input)


def generate_local_only(user_input: UserInput, rng: Optional[random.Random] = None) -> Recipe:
    """Genera una receta solo con el corpus local (sin red)."""
    return LocalRecipeSelector(rng=rng).select(user_input)
