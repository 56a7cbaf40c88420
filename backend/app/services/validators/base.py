"""Frequent flyer number validator interface and factory."""

import inspect
import logging
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional

from app.config import settings
from app.core.enums import ValidationMode

logger = logging.getLogger(__name__)


class FrequentFlyerValidationError(Exception):
    """Raised by a validator when the validation service cannot answer."""


@dataclass(frozen=True)
class License:
    """License granted to us by the validation service vendor."""

    license_key: str


@dataclass(frozen=True)
class ServiceInformation:
    """Read-only information about the validation service."""

    license: License


@dataclass(frozen=True)
class LookupPerformedEvent:
    """Published by a validator each time one of its lookups completes."""

    frequent_flyer_number: str


class ValidityCheckResult(NamedTuple):
    """
    Result of a validity check that reports completion separately.

    Attributes:
        completed: Whether the service produced an answer
        is_valid: Whether the frequent flyer number is valid
    """

    completed: bool
    is_valid: bool


LookupListener = Callable[[LookupPerformedEvent], None]
ListenerRef = Callable[[], Optional[LookupListener]]


def _listener_ref(listener: LookupListener) -> ListenerRef:
    """Reference bound methods weakly, any other callable strongly."""
    if inspect.ismethod(listener):
        return weakref.WeakMethod(listener)
    return lambda: listener


class FrequentFlyerNumberValidator(ABC):
    """
    Abstract interface for frequent flyer validation service integrations.

    Concrete validators implement is_valid() and service_information.
    The base class owns the validation mode and the lookup-performed
    listeners so every integration exposes the same shape.
    """

    def __init__(self):
        self._validation_mode = ValidationMode.QUICK
        self._lookup_listeners: List[ListenerRef] = []

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the validation service provider."""
        ...

    @property
    @abstractmethod
    def service_information(self) -> ServiceInformation:
        """Service and license information."""
        ...

    @abstractmethod
    def is_valid(self, frequent_flyer_number: str) -> bool:
        """
        Check whether a frequent flyer number is valid.

        Raises:
            FrequentFlyerValidationError: If the service is unreachable or errors
        """
        ...

    def check_validity(self, frequent_flyer_number: str) -> ValidityCheckResult:
        """Check a frequent flyer number, returning completion and validity together."""
        return ValidityCheckResult(
            completed=True,
            is_valid=self.is_valid(frequent_flyer_number),
        )

    @property
    def validation_mode(self) -> ValidationMode:
        return self._validation_mode

    @validation_mode.setter
    def validation_mode(self, mode: ValidationMode) -> None:
        self._validation_mode = ValidationMode(mode)

    def add_lookup_listener(self, listener: LookupListener) -> None:
        """
        Subscribe to lookup-performed notifications.

        Bound methods are held weakly: a listener whose owner has been
        garbage collected is dropped on the next notification.
        """
        self._lookup_listeners.append(_listener_ref(listener))

    def remove_lookup_listener(self, listener: LookupListener) -> None:
        """Unsubscribe from lookup-performed notifications (no-op if absent)."""
        self._lookup_listeners = [
            ref for ref in self._lookup_listeners if ref() != listener
        ]

    def lookup_listeners(self) -> List[LookupListener]:
        """Currently subscribed listeners that are still alive."""
        listeners = (ref() for ref in self._lookup_listeners)
        return [listener for listener in listeners if listener is not None]

    def _notify_lookup_performed(self, frequent_flyer_number: str) -> None:
        """Synchronously notify every live listener that a lookup completed."""
        event = LookupPerformedEvent(frequent_flyer_number=frequent_flyer_number)
        for listener in self.lookup_listeners():
            listener(event)
        self._lookup_listeners = [
            ref for ref in self._lookup_listeners if ref() is not None
        ]


def get_frequent_flyer_validator() -> FrequentFlyerNumberValidator:
    """Factory function that returns the configured frequent flyer validator."""
    provider = settings.FREQUENT_FLYER_VALIDATOR_PROVIDER.lower()
    logger.info(f"Using frequent flyer validator provider: {provider}")

    if provider == "mock":
        from app.services.validators.mock_validator import MockFrequentFlyerValidator
        return MockFrequentFlyerValidator()

    raise ValueError(f"Unknown frequent flyer validator provider: {provider!r}")
