"""Mock frequent flyer validator for development and testing.

Answers lookups in-process against a regular expression instead of
calling the vendor service. Every completed lookup is recorded and
published to lookup listeners, the same as a live integration.
"""

import logging
import re
from typing import List, Optional, Tuple

from app.config import settings
from app.core.enums import ValidationMode
from app.services.validators.base import (
    FrequentFlyerNumberValidator,
    FrequentFlyerValidationError,
    License,
    ServiceInformation,
)

logger = logging.getLogger(__name__)


class MockFrequentFlyerValidator(FrequentFlyerNumberValidator):
    """Deterministic validator backed by a regular expression."""

    def __init__(
        self,
        license_key: Optional[str] = None,
        valid_pattern: Optional[str] = None,
        unavailable: bool = False,
    ):
        """
        Initialize the mock validator.

        Args:
            license_key: License key to report (defaults to settings)
            valid_pattern: Regex a number must match to be valid (defaults to settings)
            unavailable: Simulate an unreachable service on every lookup
        """
        super().__init__()
        if license_key is None:
            license_key = settings.MOCK_VALIDATOR_LICENSE_KEY
        if valid_pattern is None:
            valid_pattern = settings.MOCK_VALIDATOR_VALID_PATTERN

        self._service_information = ServiceInformation(
            license=License(license_key=license_key)
        )
        self._pattern = re.compile(valid_pattern)
        self.unavailable = unavailable
        self.lookups: List[Tuple[str, ValidationMode]] = []

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def service_information(self) -> ServiceInformation:
        return self._service_information

    def is_valid(self, frequent_flyer_number: str) -> bool:
        if self.unavailable:
            raise FrequentFlyerValidationError(
                "Frequent flyer validation service is unavailable"
            )

        is_valid = self._pattern.search(frequent_flyer_number) is not None
        self.lookups.append((frequent_flyer_number, self.validation_mode))
        logger.debug(
            f"{self.validation_mode.value} lookup for {frequent_flyer_number!r}: "
            f"{'valid' if is_valid else 'invalid'}"
        )

        self._notify_lookup_performed(frequent_flyer_number)
        return is_valid
