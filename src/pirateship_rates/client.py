"""Async rates lookup against the PirateShip GraphQL endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import pydantic

from pirateship_rates.config import DEFAULT_ENDPOINT_URL, PirateShipConfig
from pirateship_rates.exceptions import ApplicationError, TransportError
from pirateship_rates.query import OPERATION_NAME, build_request_body
from pirateship_rates.schemas import Rate, RatesEnvelope, ShippingOptions
from pirateship_rates.validation import validate_dimensions

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred in the response"
NO_DATA_MESSAGE = "No data in response"


async def fetch_shipping_rates(
    options: ShippingOptions,
    *,
    config: PirateShipConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Rate]:
    """Look up rate quotes for a package.

    Args:
        options: Package and route description.
        config: Endpoint configuration. When omitted the fixed PirateShip
            endpoint is used and the environment is not consulted.
        client: HTTP client to send the request with. It is left open.
            When omitted, a client without a timeout is created for this
            call only.

    Returns:
        Rates in the order the service returned them.

    Raises:
        ValidationError: A dimension is below its minimum. Raised before
            any network access.
        TransportError: The request failed or got a non-success status.
        ApplicationError: The service reported an error or sent no data.
    """
    validate_dimensions(options)

    endpoint_url = DEFAULT_ENDPOINT_URL
    if config is not None:
        endpoint_url = config.endpoint_url
    body = build_request_body(options)

    if client is None:
        async with httpx.AsyncClient(timeout=None) as owned_client:
            response = await _post(owned_client, endpoint_url, body)
    else:
        response = await _post(client, endpoint_url, body)

    if not response.is_success:
        logger.warning(
            "%s failed with HTTP status %s",
            OPERATION_NAME,
            response.status_code,
        )
        raise TransportError(response.status_code)

    try:
        envelope = RatesEnvelope.model_validate_json(response.content)
    except pydantic.ValidationError as exc:
        raise ApplicationError(
            "Malformed response from PirateShip API"
        ) from exc

    return extract_rates(envelope)


async def _post(
    client: httpx.AsyncClient, url: str, body: dict[str, Any]
) -> httpx.Response:
    logger.debug("Sending %s to %s", OPERATION_NAME, url)
    try:
        return await client.post(
            url,
            json=body,
            headers={"content-type": "application/json"},
        )
    except httpx.HTTPError as exc:
        raise TransportError(
            None, f"PirateShip API request failed: {exc}"
        ) from exc


def extract_rates(envelope: RatesEnvelope) -> list[Rate]:
    """Return the envelope's rates or raise ApplicationError.

    Only the first remote error is reported.
    """
    if envelope.errors and envelope.data is None:
        message = envelope.errors[0].message or GENERIC_ERROR_MESSAGE
        logger.warning("%s returned an error: %s", OPERATION_NAME, message)
        raise ApplicationError(message, envelope.errors)
    if envelope.data is None:
        raise ApplicationError(NO_DATA_MESSAGE)
    if envelope.errors:
        logger.warning(
            "%s returned %d error(s) alongside data",
            OPERATION_NAME,
            len(envelope.errors),
        )
    return envelope.data.rates
