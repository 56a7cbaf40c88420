"""Shared fixtures and hand-written collaborators for the test suite."""

import re
from typing import List, Optional

import pytest

from app.core.enums import ValidationMode
from app.models.domain.application import CreditCardApplication
from app.services.fraud_lookup import FraudLookup
from app.services.rule_engine.engine import CreditCardApplicationEvaluator
from app.services.validators.base import (
    FrequentFlyerNumberValidator,
    License,
    ServiceInformation,
    ValidityCheckResult,
)


class StubValidator(FrequentFlyerNumberValidator):
    """
    Scriptable validator recording every interaction with it.

    ``results`` are returned in order, the last one repeating. When
    ``pattern`` is given it decides validity instead.
    """

    def __init__(
        self,
        license_key: str = "OK",
        results: Optional[List[bool]] = None,
        pattern: Optional[str] = None,
        error: Optional[Exception] = None,
        notifications_per_lookup: int = 0,
        check_result: Optional[ValidityCheckResult] = None,
    ):
        super().__init__()
        self.license_key = license_key
        self.results = list(results) if results else [True]
        self.pattern = pattern
        self.error = error
        self.notifications_per_lookup = notifications_per_lookup
        self.check_result = check_result

        self.calls: List[str] = []
        self.check_calls: List[str] = []
        self.license_reads = 0
        self.mode_writes: List[ValidationMode] = []

    @property
    def provider_name(self) -> str:
        return "stub"

    @property
    def service_information(self) -> ServiceInformation:
        self.license_reads += 1
        return ServiceInformation(license=License(license_key=self.license_key))

    @property
    def validation_mode(self) -> ValidationMode:
        return self._validation_mode

    @validation_mode.setter
    def validation_mode(self, mode: ValidationMode) -> None:
        self.mode_writes.append(mode)
        self._validation_mode = mode

    def is_valid(self, frequent_flyer_number: str) -> bool:
        self.calls.append(frequent_flyer_number)
        if self.error is not None:
            raise self.error

        if self.pattern is not None:
            result = re.search(self.pattern, frequent_flyer_number) is not None
        elif len(self.results) > 1:
            result = self.results.pop(0)
        else:
            result = self.results[0]

        for _ in range(self.notifications_per_lookup):
            self._notify_lookup_performed(frequent_flyer_number)
        return result

    def check_validity(self, frequent_flyer_number: str) -> ValidityCheckResult:
        if self.check_result is None:
            return super().check_validity(frequent_flyer_number)

        self.check_calls.append(frequent_flyer_number)
        if self.error is not None:
            raise self.error
        return self.check_result


class StubFraudLookup(FraudLookup):
    """Fraud lookup returning a fixed answer and recording what it saw."""

    def __init__(self, is_fraud_risk: bool):
        self.is_fraud_risk = is_fraud_risk
        self.checked: List[CreditCardApplication] = []

    def check_application(self, application: CreditCardApplication) -> bool:
        self.checked.append(application)
        return self.is_fraud_risk


@pytest.fixture
def validator() -> StubValidator:
    return StubValidator()


@pytest.fixture
def evaluator(validator: StubValidator) -> CreditCardApplicationEvaluator:
    return CreditCardApplicationEvaluator(validator)
