"""Typed async client for PirateShip shipping rates."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "CarrierKey",
    "MailClassKey",
    "PackageType",
    "PirateShipConfig",
    "PirateShipError",
    "Rate",
    "RateError",
    "ShippingOptions",
    "TransportError",
    "ValidationError",
    "__version__",
    "create_rates_router",
    "fetch_shipping_rates",
]

if TYPE_CHECKING:
    from pirateship_rates.client import fetch_shipping_rates
    from pirateship_rates.config import PirateShipConfig
    from pirateship_rates.enums import CarrierKey, MailClassKey, PackageType
    from pirateship_rates.exceptions import (
        ApplicationError,
        PirateShipError,
        TransportError,
        ValidationError,
    )
    from pirateship_rates.plugin import create_rates_router
    from pirateship_rates.schemas import Rate, RateError, ShippingOptions


def __getattr__(name: str):
    # Lazy imports to avoid loading all submodules on package import.
    if name == "fetch_shipping_rates":
        from pirateship_rates.client import fetch_shipping_rates

        return fetch_shipping_rates
    if name == "PirateShipConfig":
        from pirateship_rates.config import PirateShipConfig

        return PirateShipConfig
    if name == "create_rates_router":
        from pirateship_rates.plugin import create_rates_router

        return create_rates_router
    if name in ("CarrierKey", "MailClassKey", "PackageType"):
        from pirateship_rates import enums

        return getattr(enums, name)
    if name in (
        "ApplicationError",
        "PirateShipError",
        "TransportError",
        "ValidationError",
    ):
        from pirateship_rates import exceptions

        return getattr(exceptions, name)
    if name in ("Rate", "RateError", "ShippingOptions"):
        from pirateship_rates import schemas

        return getattr(schemas, name)
    raise AttributeError(
        f"module 'pirateship_rates' has no attribute {name!r}"
    )
