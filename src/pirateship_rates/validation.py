"""Minimum-size rules for shipper-declared package dimensions."""

from __future__ import annotations

from typing import NamedTuple

from pirateship_rates.enums import PackageType
from pirateship_rates.exceptions import ValidationError
from pirateship_rates.schemas import ShippingOptions


class DimensionRule(NamedTuple):
    attribute: str
    field: str
    label: str
    minimum: float


DIMENSION_RULES: tuple[DimensionRule, ...] = (
    DimensionRule("dimension_x", "dimensionX", "length", 6),
    DimensionRule("dimension_y", "dimensionY", "width", 3),
    DimensionRule("dimension_z", "dimensionZ", "height", 0.25),
)

# Soft envelopes have no meaningful height.
_HEIGHT_EXEMPT = frozenset({PackageType.SOFT_ENVELOPE})


def validate_dimensions(options: ShippingOptions) -> None:
    """Raise ValidationError for the first dimension below its minimum.

    Flat-rate package types are skipped entirely. Dimensions that were not
    provided are not checked.
    """
    for package_type in options.package_type_keys:
        if package_type.is_flat_rate:
            continue
        for rule in DIMENSION_RULES:
            if (
                rule.field == "dimensionZ"
                and package_type in _HEIGHT_EXEMPT
            ):
                continue
            value = getattr(options, rule.attribute)
            if value is not None and value < rule.minimum:
                raise ValidationError(
                    package_type=str(package_type),
                    field=rule.field,
                    label=rule.label,
                    minimum=rule.minimum,
                    actual=value,
                )
