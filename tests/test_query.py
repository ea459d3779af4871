"""Request builder tests."""

from __future__ import annotations

import re

from pirateship_rates.enums import MailClassKey, PackageType
from pirateship_rates.query import (
    OPERATION_NAME,
    RATES_QUERY,
    build_request_body,
    build_variables,
)
from pirateship_rates.schemas import ShippingOptions


def _minimal(**kwargs) -> ShippingOptions:
    return ShippingOptions(
        origin_zip="10001",
        mail_class_keys=[MailClassKey.PRIORITY],
        package_type_keys=[PackageType.PARCEL],
        **kwargs,
    )


def test_required_fields_always_present() -> None:
    assert build_variables(_minimal()) == {
        "originZip": "10001",
        "mailClassKeys": ["Priority"],
        "packageTypeKeys": ["Parcel"],
    }


def test_absent_optional_field_is_omitted() -> None:
    variables = build_variables(_minimal(destination_zip="94105"))
    assert "destinationCountryCode" not in variables
    assert variables["destinationZip"] == "94105"


def test_falsy_values_are_kept() -> None:
    variables = build_variables(
        _minimal(is_residential=False, weight=0, pricing_types=[])
    )
    assert variables["isResidential"] is False
    assert variables["weight"] == 0
    assert variables["pricingTypes"] == []


def test_all_fields_use_wire_names() -> None:
    options = _minimal(
        origin_city="New York",
        origin_region_code="NY",
        is_residential=True,
        destination_zip="94105",
        destination_country_code="US",
        weight=12.5,
        dimension_x=10,
        dimension_y=8,
        dimension_z=2,
        show_ups_rates_when_2x7_selected=True,
        pricing_types=["CUBIC"],
    )
    assert set(build_variables(options)) == {
        "originZip",
        "originCity",
        "originRegionCode",
        "isResidential",
        "destinationZip",
        "destinationCountryCode",
        "mailClassKeys",
        "packageTypeKeys",
        "weight",
        "dimensionX",
        "dimensionY",
        "dimensionZ",
        "showUpsRatesWhen2x7Selected",
        "pricingTypes",
    }


def test_query_declares_every_variable() -> None:
    declared = set(re.findall(r"\$(\w+):", RATES_QUERY))
    options = _minimal(
        origin_city="x",
        origin_region_code="x",
        is_residential=True,
        destination_zip="x",
        destination_country_code="x",
        weight=1,
        dimension_x=6,
        dimension_y=3,
        dimension_z=1,
        show_ups_rates_when_2x7_selected=False,
        pricing_types=["x"],
    )
    assert declared == set(build_variables(options))


def test_request_body_shape() -> None:
    body = build_request_body(_minimal())
    assert body["operationName"] == OPERATION_NAME == "RatesQuery"
    assert body["query"] is RATES_QUERY
    assert body["variables"]["originZip"] == "10001"
