"""Rates client configuration."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT_URL = (
    "https://ship.pirateship.com/api/graphql?opname=RatesQuery"
)


class PirateShipConfig(BaseSettings):
    """Runtime config for the rates client.

    Reads from environment variables with PIRATESHIP_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="PIRATESHIP_")

    endpoint_url: str = DEFAULT_ENDPOINT_URL
