"""
Prozessweiter GA4-Client mit Single-Flight-Initialisierung

Der erste Aufrufer startet die Initialisierung, alle gleichzeitigen
Aufrufer warten auf dasselbe Future. Schlägt sie fehl, wird das Future
verworfen und der nächste Request versucht es erneut.
"""

import asyncio
from typing import Any, Callable, Optional

from ...logging.logger import create_module_logger

ga4_logger = create_module_logger('GA4', 'ga4')


class AnalyticsClientProvider:
    """Hält genau eine Client-Instanz pro Prozess"""

    def __init__(self, factory: Callable[[], Any]):
        self._factory = factory
        self._client: Optional[Any] = None
        self._init_future: Optional[asyncio.Future] = None

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    async def get(self) -> Any:
        """Client holen, ggf. einmalig initialisieren"""
        if self._client is not None:
            return self._client

        if self._init_future is None:
            self._init_future = asyncio.ensure_future(self._initialize())

        future = self._init_future
        try:
            # shield: Timeout eines Wartenden bricht die Initialisierung nicht ab
            return await asyncio.shield(future)
        except Exception:
            if self._init_future is future:
                self._init_future = None
            raise

    async def _initialize(self) -> Any:
        ga4_logger.info("→ Initialisiere Analytics Client")
        client = await asyncio.to_thread(self._factory)
        self._client = client
        ga4_logger.info("✓ Analytics Client initialisiert")
        return client

    def reset(self) -> None:
        """Client verwerfen (Shutdown / Tests)"""
        self._client = None
        self._init_future = None
