"""GraphQL request construction for the rates lookup."""

from __future__ import annotations

from typing import Any

from pirateship_rates.schemas import ShippingOptions

OPERATION_NAME = "RatesQuery"

# Must match the arguments and selections the remote schema accepts.
RATES_QUERY = """
query RatesQuery($originZip: String!, $originCity: String, $originRegionCode: String, $destinationZip: String, $isResidential: Boolean, $destinationCountryCode: String, $weight: Float, $dimensionX: Float, $dimensionY: Float, $dimensionZ: Float, $mailClassKeys: [String!]!, $packageTypeKeys: [String!]!, $pricingTypes: [String!], $showUpsRatesWhen2x7Selected: Boolean) {
  rates(
    originZip: $originZip
    originCity: $originCity
    originRegionCode: $originRegionCode
    destinationZip: $destinationZip
    isResidential: $isResidential
    destinationCountryCode: $destinationCountryCode
    weight: $weight
    dimensionX: $dimensionX
    dimensionY: $dimensionY
    dimensionZ: $dimensionZ
    mailClassKeys: $mailClassKeys
    packageTypeKeys: $packageTypeKeys
    pricingTypes: $pricingTypes
    showUpsRatesWhen2x7Selected: $showUpsRatesWhen2x7Selected
  ) {
    title
    deliveryDescription
    trackingDescription
    serviceDescription
    pricingDescription
    cubicTier
    mailClassKey
    mailClass {
      accuracy
      international
      __typename
    }
    packageTypeKey
    zone
    surcharges {
      title
      price
      __typename
    }
    carrier {
      carrierKey
      title
      __typename
    }
    totalPrice
    priceBaseTypeKey
    basePrice
    crossedTotalPrice
    pricingType
    pricingSubType
    ratePeriodId
    learnMoreUrl
    cheapest
    fastest
    __typename
  }
}
"""  # noqa: E501


def build_variables(options: ShippingOptions) -> dict[str, Any]:
    """Map provided options to GraphQL variables keyed by wire name.

    ``None`` means "not provided" and is dropped; falsy values such as
    ``0`` or ``False`` are sent.
    """
    return options.model_dump(mode="json", by_alias=True, exclude_none=True)


def build_request_body(options: ShippingOptions) -> dict[str, Any]:
    return {
        "operationName": OPERATION_NAME,
        "variables": build_variables(options),
        "query": RATES_QUERY,
    }
