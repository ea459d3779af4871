"""Rate lookup endpoints."""

from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar

import httpx
from litestar import Controller, get, post
from litestar.params import Dependency

from pirateship_rates.client import fetch_shipping_rates
from pirateship_rates.config import PirateShipConfig
from pirateship_rates.schemas import ShippingOptions

logger = logging.getLogger(__name__)


class RatesController(Controller):
    """Expose the rates lookup over HTTP."""

    path = "/rates"
    tags: ClassVar[list[str]] = ["rates"]

    @get("/health")
    async def rates_health(self) -> dict[str, str]:
        """Healthcheck endpoint for rate routes."""
        return {"status": "ok"}

    @post("/", status_code=200)
    async def lookup_rates(
        self,
        data: dict[str, Any],
        config: Annotated[PirateShipConfig, Dependency(skip_validation=True)],
        http_client: Annotated[
            httpx.AsyncClient | None, Dependency(skip_validation=True)
        ] = None,
    ) -> list[dict[str, Any]]:
        """Validate the posted options and return rates by wire name.

        The body uses the same camelCase keys as the GraphQL variables.
        """
        # Parsed here rather than as a typed body so malformed options
        # reach the invalid_options handler instead of Litestar's own 400.
        options = ShippingOptions.model_validate(data)
        rates = await fetch_shipping_rates(
            options, config=config, client=http_client
        )
        logger.debug("Returning %d rate(s)", len(rates))
        # Dumped by alias so clients get the remote wire names back.
        return [
            rate.model_dump(mode="json", by_alias=True, exclude_unset=True)
            for rate in rates
        ]
