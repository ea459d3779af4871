"""Selector enumerations accepted by the rates endpoint."""

from __future__ import annotations

from enum import StrEnum


class PackageType(StrEnum):
    """Package types available on the unauthenticated rates endpoint.

    UPS-only containers (Express Envelope, Express Box, Express Tube,
    Express Pak) require an authenticated session and are not listed.
    """

    SOFT_ENVELOPE = "SoftEnvelope"
    PARCEL = "Parcel"
    IRREGULAR = "Irregular"
    FLAT_RATE_ENVELOPE = "FlatRateEnvelope"
    FLAT_RATE_LEGAL_ENVELOPE = "FlatRateLegalEnvelope"
    FLAT_RATE_PADDED_ENVELOPE = "FlatRatePaddedEnvelope"
    SMALL_FLAT_RATE_BOX = "SmallFlatRateBox"
    MEDIUM_FLAT_RATE_BOX = "MediumFlatRateBox"
    LARGE_FLAT_RATE_BOX = "LargeFlatRateBox"
    EXPRESS_FLAT_RATE_ENVELOPE = "ExpressFlatRateEnvelope"
    EXPRESS_FLAT_RATE_LEGAL_ENVELOPE = "ExpressFlatRateLegalEnvelope"
    EXPRESS_FLAT_RATE_PADDED_ENVELOPE = "ExpressFlatRatePaddedEnvelope"

    @property
    def is_flat_rate(self) -> bool:
        """Whether the carrier fixes this container's outer dimensions."""
        return self in FLAT_RATE_PACKAGE_TYPES


class MailClassKey(StrEnum):
    PRIORITY_EXPRESS = "PriorityExpress"
    FIRST = "First"
    PARCEL_SELECT = "ParcelSelect"
    PRIORITY = "Priority"
    GROUND_ADVANTAGE = "GroundAdvantage"
    MEDIA_MAIL = "MediaMail"
    FIRST_CLASS_PACKAGE_INTERNATIONAL_SERVICE = (
        "FirstClassPackageInternationalService"
    )
    PRIORITY_MAIL_INTERNATIONAL = "PriorityMailInternational"
    PRIORITY_MAIL_EXPRESS_INTERNATIONAL = "PriorityMailExpressInternational"


class CarrierKey(StrEnum):
    USPS = "usps"
    UPS = "ups"


FLAT_RATE_PACKAGE_TYPES: frozenset[PackageType] = frozenset(
    {
        PackageType.FLAT_RATE_ENVELOPE,
        PackageType.FLAT_RATE_LEGAL_ENVELOPE,
        PackageType.FLAT_RATE_PADDED_ENVELOPE,
        PackageType.SMALL_FLAT_RATE_BOX,
        PackageType.MEDIUM_FLAT_RATE_BOX,
        PackageType.LARGE_FLAT_RATE_BOX,
        PackageType.EXPRESS_FLAT_RATE_ENVELOPE,
        PackageType.EXPRESS_FLAT_RATE_LEGAL_ENVELOPE,
        PackageType.EXPRESS_FLAT_RATE_PADDED_ENVELOPE,
    }
)
