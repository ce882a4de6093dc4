from __future__ import annotations

import concurrent.futures
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

import requests

from .config import Settings, get_settings
from .llm_client import GEMINI, OPENAI, OPENROUTER, VENDORS

"""
vitaspoon_core.network
======================

Sondas de alcanzabilidad y heurística de región restringida.

Sondas
------
Un HEAD corto contra el endpoint de cada proveedor:

- cualquier respuesta HTTP (200, 401, 404, 405, 5xx...) → alcanzable
- error de red/timeout → no alcanzable (nunca corta el flujo)

Todas las sondas de un intento corren en paralelo (ThreadPoolExecutor) y
se esperan todas antes de decidir.

Región restringida
------------------
1. Geolocalización por IP: un país de `RESTRICTED_COUNTRIES` → restringida;
   cualquier otro país → no restringida.
2. Si la geolocalización falla o no es concluyente, se sondean los
   proveedores directos y el proxy:
   - proxy alcanzable y al menos la mitad de los directos caídos → restringida;
   - algún directo caído dentro de la franja horaria pico → restringida.
"""

logger = logging.getLogger(__name__)

DIRECT_VENDORS = (OPENAI, GEMINI)
PROXY_VENDOR = OPENROUTER

# Franja horaria (hora local) con mayor congestión en redes restringidas
PEAK_HOURS = range(18, 24)


def probe_endpoint(url: str, timeout: float) -> bool:
    """HEAD con timeout propio. Cualquier respuesta cuenta como alcanzable; nunca lanza."""
    try:
        response = requests.head(url, timeout=timeout, allow_redirects=False)
    except requests.RequestException as e:
        logger.debug(f"Sonda fallida para {url}: {e}")
        return False
    logger.debug(f"Sonda {url}: HTTP {response.status_code}")
    return True


def probe_endpoints(
    urls: Mapping[str, str],
    timeout: float,
    probe: Callable[[str, float], bool] = probe_endpoint,
) -> Dict[str, bool]:
    """
    Sondea todos los endpoints en paralelo.

    Args:
        urls: nombre → URL.
        timeout: timeout por sonda (segundos).
        probe: función de sonda (inyectable en tests).

    Returns:
        nombre → alcanzable. Una sonda que lanza cuenta como no alcanzable.
    """
    if not urls:
        return {}

    results: Dict[str, bool] = {}
    with concurrent.futures.ThreadPoolExecutor(max_workers=len(urls)) as executor:
        future_to_name = {
            executor.submit(probe, url, timeout): name
            for name, url in urls.items()
        }
        for future in concurrent.futures.as_completed(future_to_name):
            name = future_to_name[future]
            try:
                results[name] = bool(future.result())
            except Exception as e:
                logger.warning(f"⚠️ Sonda de {name} con error: {e}")
                results[name] = False

    logger.info(f"📡 Alcanzabilidad: {results}")
    return results


def probe_vendors(names, settings: Optional[Settings] = None) -> Dict[str, bool]:
    """Sondea los proveedores indicados por nombre (ignora los desconocidos)."""
    settings = settings or get_settings()
    urls = {name: VENDORS[name].probe_url for name in names if name in VENDORS}
    return probe_endpoints(urls, settings.probe_timeout_s)


def _default_geolocate(url: str, timeout: float) -> Optional[str]:
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    data: Any = response.json()
    if not isinstance(data, dict):
        return None
    country = data.get("country_code") or data.get("country")
    return str(country).strip().upper() if country else None


class RegionDetector:
    """
    Heurística de "región restringida".

    Args:
        settings: configuración (default: `get_settings()`).
        geolocate: (url, timeout) → código de país o None. Puede lanzar.
        probe: (nombres) → {nombre: alcanzable}.
        clock: devuelve la hora local actual (inyectable en tests).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        geolocate: Optional[Callable[[str, float], Optional[str]]] = None,
        probe: Optional[Callable[..., Dict[str, bool]]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.settings = settings or get_settings()
        self._geolocate = geolocate or _default_geolocate
        self._probe = probe or (lambda names: probe_vendors(names, self.settings))
        self._clock = clock

    def lookup_country(self) -> Optional[str]:
        try:
            return self._geolocate(self.settings.geolocation_url, self.settings.probe_timeout_s)
        except (requests.RequestException, ValueError) as e:
            logger.info(f"🌐 Geolocalización no disponible: {e}")
            return None

    def is_restricted(self) -> bool:
        if not self.settings.region_detection:
            return False

        country = self.lookup_country()
        if country:
            restricted = country in self.settings.restricted_countries
            logger.info(f"🌐 País detectado: {country} (restringido={restricted})")
            return restricted

        reachability = self._probe(DIRECT_VENDORS + (PROXY_VENDOR,))
        return self.restricted_from_reachability(reachability)

    def restricted_from_reachability(self, reachability: Mapping[str, bool]) -> bool:
        unreachable_direct = sum(1 for name in DIRECT_VENDORS if not reachability.get(name, False))
        proxy_ok = reachability.get(PROXY_VENDOR, False)

        if proxy_ok and unreachable_direct * 2 >= len(DIRECT_VENDORS):
            logger.info("🌐 Proxy alcanzable y proveedores directos caídos: región restringida")
            return True
        if unreachable_direct and self._clock().hour in PEAK_HOURS:
            logger.info("🌐 Proveedor directo caído en horario pico: región restringida")
            return True
        return False
