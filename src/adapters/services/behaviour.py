"""Cliente de tracking de comportamiento (behaviour-service).

Implementación:
- `track` encola el evento y pide un flush.
- El flush es no-op si hay un timer armado o la cola está vacía. Si no,
  intercambia la cola por una vacía, envía el lote como un único
  `POST /events` (fire-and-forget) y arma el timer. Al vencer, el timer se
  desarma y vuelve a pedir un flush para drenar lo acumulado en la ventana.

Notas:
- El orden dentro de un lote es el de inserción; entre lotes, FIFO.
- Un envío fallido se descarta (solo se loguea); no hay reintentos.
- Requiere un event loop en ejecución: `track` se llama desde código async.
"""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Union

import httpx
from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from adapters.http_client import APIClient
from core.config import AppSettings
from core.domain.api_mapping import ServiceName

TrackingEvent = Union[Mapping[str, Any], BaseModel]


class BehaviourService(APIClient):
    def __init__(
        self,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
        *,
        flush_interval: float | None = None,
    ) -> None:
        super().__init__(ServiceName.BEHAVIOUR, settings, client)
        self._flush_interval = (
            flush_interval if flush_interval is not None else self.settings.behaviour_flush_interval_seconds
        )
        self._events: list[Any] = []
        self._timer: asyncio.TimerHandle | None = None
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def flush_interval(self) -> float:
        return self._flush_interval

    @property
    def pending_events(self) -> int:
        return len(self._events)

    @property
    def flush_armed(self) -> bool:
        return self._timer is not None

    def track(self, event: TrackingEvent) -> None:
        """Registra el uso de una funcionalidad."""

        self._events.append(to_jsonable_python(event, by_alias=True))
        self._post_events()

    def _post_events(self) -> None:
        if self._timer is not None or not self._events:
            return

        loop = asyncio.get_running_loop()
        batch = self._events
        self._events = []

        task = loop.create_task(self._send_batch(batch))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

        self._timer = loop.call_later(self._flush_interval, self._on_timer)

    def _on_timer(self) -> None:
        self._timer = None
        self._post_events()

    async def _send_batch(self, batch: list[Any]) -> None:
        response = await self.invoke_api_with_error_handling("/events", "POST", {"events": batch})
        if response.is_success:
            self._log.debug("Tracking batch sent", batch_size=len(batch))
        else:
            self._log.warning("Tracking batch dropped", batch_size=len(batch))

    async def aclose(self) -> None:
        """Desarma el timer, envía lo pendiente y espera los envíos en vuelo.

        Pensado para el cierre del proceso (CLI, shutdown de la app).
        """

        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._events:
            batch = self._events
            self._events = []
            await self._send_batch(batch)
        if self._in_flight:
            await asyncio.gather(*self._in_flight)
