"""Request options and response envelope models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pirateship_rates.enums import MailClassKey, PackageType


class _WireModel(BaseModel):
    """Base for models whose attributes carry camelCase wire aliases.

    Keys the service adds later are kept and dumped back unchanged.
    """

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, extra="allow"
    )


class ShippingOptions(_WireModel):
    """Package and route description for a rates lookup.

    Optional fields left as ``None`` are treated as not provided and are
    never sent to the remote service.
    """

    model_config = ConfigDict(extra="forbid")

    origin_zip: str = Field(alias="originZip")
    origin_city: str | None = Field(default=None, alias="originCity")
    origin_region_code: str | None = Field(
        default=None, alias="originRegionCode"
    )
    is_residential: bool | None = Field(default=None, alias="isResidential")
    destination_zip: str | None = Field(default=None, alias="destinationZip")
    destination_country_code: str | None = Field(
        default=None, alias="destinationCountryCode"
    )
    mail_class_keys: list[MailClassKey] = Field(
        alias="mailClassKeys", min_length=1
    )
    package_type_keys: list[PackageType] = Field(
        alias="packageTypeKeys", min_length=1
    )
    # ounces
    weight: float | None = None
    # inches
    dimension_x: float | None = Field(default=None, alias="dimensionX")
    dimension_y: float | None = Field(default=None, alias="dimensionY")
    dimension_z: float | None = Field(default=None, alias="dimensionZ")
    show_ups_rates_when_2x7_selected: bool | None = Field(
        default=None, alias="showUpsRatesWhen2x7Selected"
    )
    pricing_types: list[str] | None = Field(
        default=None, alias="pricingTypes"
    )


class Carrier(_WireModel):
    carrier_key: str | None = Field(default=None, alias="carrierKey")
    title: str | None = None
    typename: str | None = Field(default=None, alias="__typename")


class MailClass(_WireModel):
    accuracy: str | None = None
    international: bool | None = None
    typename: str | None = Field(default=None, alias="__typename")


class Surcharge(_WireModel):
    title: str | None = None
    price: float | None = None
    typename: str | None = Field(default=None, alias="__typename")


class Rate(_WireModel):
    """A single priced quote exactly as returned by the remote service.

    Only the identifying and price fields are required; descriptive and
    metadata fields may be missing or null without failing the response.
    ``mail_class_key`` and ``package_type_key`` are kept as plain strings:
    the service may answer with keys this package does not enumerate yet.
    Use ``model_dump(by_alias=True, exclude_unset=True)`` to get the wire
    record back key for key.
    """

    title: str
    delivery_description: str | None = Field(
        default=None, alias="deliveryDescription"
    )
    tracking_description: str | None = Field(
        default=None, alias="trackingDescription"
    )
    service_description: str | None = Field(
        default=None, alias="serviceDescription"
    )
    pricing_description: str | None = Field(
        default=None, alias="pricingDescription"
    )
    cubic_tier: str | None = Field(default=None, alias="cubicTier")
    mail_class_key: str = Field(alias="mailClassKey")
    mail_class: MailClass | None = Field(default=None, alias="mailClass")
    package_type_key: str = Field(alias="packageTypeKey")
    zone: str | None = None
    surcharges: list[Surcharge] | None = None
    carrier: Carrier | None = None
    total_price: float = Field(alias="totalPrice")
    price_base_type_key: str | None = Field(
        default=None, alias="priceBaseTypeKey"
    )
    base_price: float | None = Field(default=None, alias="basePrice")
    crossed_total_price: float | None = Field(
        default=None, alias="crossedTotalPrice"
    )
    pricing_type: str | None = Field(default=None, alias="pricingType")
    pricing_sub_type: str | None = Field(
        default=None, alias="pricingSubType"
    )
    rate_period_id: int | None = Field(default=None, alias="ratePeriodId")
    learn_more_url: str | None = Field(default=None, alias="learnMoreUrl")
    cheapest: bool = False
    fastest: bool = False
    typename: str | None = Field(default=None, alias="__typename")


class ErrorLocation(_WireModel):
    line: int
    column: int


class ErrorExtensions(_WireModel):
    code: int | None = None
    title: str | None = None
    mail_class_key: str | None = Field(default=None, alias="mailClassKey")
    package_type_key: str | None = Field(
        default=None, alias="packageTypeKey"
    )


class RateError(_WireModel):
    """GraphQL error entry. Only ``message`` is ever interpreted."""

    message: str | None = None
    locations: list[ErrorLocation] = Field(default_factory=list)
    path: list[str | int] = Field(default_factory=list)
    extensions: ErrorExtensions | None = None


class RatesData(_WireModel):
    rates: list[Rate]


class RatesEnvelope(_WireModel):
    """Top-level GraphQL response for ``RatesQuery``."""

    errors: list[RateError] | None = None
    data: RatesData | None = None
