"""Router factory for the rates HTTP adapter."""

from __future__ import annotations

import httpx
from litestar import Router
from litestar.di import Provide

from pirateship_rates.config import PirateShipConfig
from pirateship_rates.exceptions import EXCEPTION_HANDLERS
from pirateship_rates.routes.rates import RatesController


def create_rates_router(
    *,
    config: PirateShipConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> Router:
    """Create a configured Litestar router.

    Args:
        config: Rates client configuration. Built from the environment
            if not provided.
        http_client: Client used for outgoing lookups. A client is
            created per request if not provided.

    Returns:
        A Litestar Router with the rates endpoints.
    """
    actual_config = config or PirateShipConfig()

    return Router(
        path="/",
        route_handlers=[RatesController],
        dependencies={
            "config": Provide(lambda: actual_config, sync_to_thread=False),
            "http_client": Provide(
                lambda: http_client,
                sync_to_thread=False,
            ),
        },
        exception_handlers=EXCEPTION_HANDLERS,
    )
