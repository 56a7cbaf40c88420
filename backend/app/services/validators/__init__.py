"""Frequent flyer number validation service integrations."""

from .base import (
    FrequentFlyerNumberValidator,
    FrequentFlyerValidationError,
    License,
    LookupPerformedEvent,
    ServiceInformation,
    ValidityCheckResult,
    get_frequent_flyer_validator,
)
from .mock_validator import MockFrequentFlyerValidator

__all__ = [
    "FrequentFlyerNumberValidator",
    "FrequentFlyerValidationError",
    "License",
    "LookupPerformedEvent",
    "MockFrequentFlyerValidator",
    "ServiceInformation",
    "ValidityCheckResult",
    "get_frequent_flyer_validator",
]
