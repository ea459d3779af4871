"""Litestar example app exposing PirateShip rate lookups."""

from __future__ import annotations

import logging

from litestar import Litestar

from pirateship_rates.config import PirateShipConfig
from pirateship_rates.plugin import create_rates_router

logging.basicConfig(level=logging.INFO)

config = PirateShipConfig()

app = Litestar(route_handlers=[create_rates_router(config=config)])
