"""
vitaspoon_core.fallback_chain
=============================

Cadena de respaldo entre proveedores de IA.

Algoritmo
---------
1. Heurística de región (una vez por generación).
2. Sondeo de alcanzabilidad de los proveedores que quedan.
3. Región restringida y proxy alcanzable → se prefiere el proxy.
4. Si no, el primer alcanzable en orden nominal.
5. Se invoca al elegido. Si falla se agrega al conjunto de excluidos y se
   repiten 2-4 sobre los restantes.
6. Sin proveedores restantes (o ninguno alcanzable) → selector local.

Es un bucle sobre una lista que se achica, no recursión: cada proveedor
se intenta a lo sumo una vez por generación.

`generate` es total: cualquier error inesperado termina en el selector
local, y si este también fallara, en la receta básica de respaldo.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Set

from .core.abstractions import RecipeProvider
from .domains.recipes.models import Recipe, UserInput
from .domains.recipes.selector import LocalRecipeSelector
from .domains.recipes.synthesizer import build_fallback_recipe
from .llm_client import OPENROUTER
from .network import RegionDetector, probe_vendors

logger = logging.getLogger(__name__)


class ProviderFallbackChain:
    """
    Args:
        providers: proveedores de IA en orden nominal.
        local: selector local (terminal).
        region_detector: objeto con `is_restricted()`; None desactiva la heurística.
        probe: (nombres) → {nombre: alcanzable}.
        proxy_name: proveedor preferido en región restringida.
    """

    def __init__(
        self,
        providers: Sequence[RecipeProvider],
        local: Optional[LocalRecipeSelector] = None,
        region_detector: Optional[RegionDetector] = None,
        probe: Optional[Callable[[Sequence[str]], Mapping[str, bool]]] = None,
        proxy_name: str = OPENROUTER,
    ):
        self.providers = list(providers)
        self.local = local or LocalRecipeSelector()
        self.region_detector = region_detector
        self._probe = probe or (lambda names: probe_vendors(names))
        self.proxy_name = proxy_name

    def _detect_region(self) -> bool:
        if self.region_detector is None:
            return False
        try:
            return self.region_detector.is_restricted()
        except Exception as e:
            logger.warning(f"⚠️ Heurística de región con error, se asume no restringida: {e}")
            return False

    def _reachability(self, remaining: Sequence[RecipeProvider]) -> Dict[str, bool]:
        try:
            return dict(self._probe([p.name for p in remaining]))
        except Exception as e:
            logger.warning(f"⚠️ Sondeo con error, se asume todo inalcanzable: {e}")
            return {}

    def pick(
        self,
        remaining: Sequence[RecipeProvider],
        reachability: Mapping[str, bool],
        restricted: bool,
    ) -> Optional[RecipeProvider]:
        """Elige el siguiente proveedor, o None si ninguno es alcanzable."""
        reachable = [p for p in remaining if reachability.get(p.name, False)]
        if not reachable:
            return None
        if restricted:
            for provider in reachable:
                if provider.name == self.proxy_name:
                    return provider
        return reachable[0]

    def _generate_local(self, user_input: UserInput) -> Recipe:
        logger.info("🏠 Usando generador local")
        try:
            return self.local.select(user_input)
        except Exception as e:
            logger.error(f"❌ Error en el generador local: {e}")
            return build_fallback_recipe(user_input)

    def generate(self, user_input: UserInput) -> Recipe:
        try:
            restricted = self._detect_region()
            excluded: Set[str] = set()

            while True:
                remaining: List[RecipeProvider] = [p for p in self.providers if p.name not in excluded]
                if not remaining:
                    logger.info("🔚 Proveedores de IA agotados")
                    break

                chosen = self.pick(remaining, self._reachability(remaining), restricted)
                if chosen is None:
                    logger.info("📴 Ningún proveedor de IA alcanzable")
                    break

                try:
                    recipe = chosen.generate(user_input)
                    logger.info(f"✅ Receta generada con {chosen.name}: {recipe.title}")
                    return recipe
                except Exception as e:
                    logger.warning(f"⚠️ Falló {chosen.name}, se excluye y se prueba el siguiente: {e}")
                    excluded.add(chosen.name)

        except Exception as e:
            logger.error(f"❌ Error inesperado en la cadena de proveedores: {e}")

        return self._generate_local(user_input)
