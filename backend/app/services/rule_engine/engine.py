"""Rule engine deciding credit card applications."""

import logging
from decimal import Decimal
from typing import Callable, Optional

from app.config import settings
from app.core.enums import CreditCardApplicationDecision, ValidationMode
from app.models.domain.application import CreditCardApplication
from app.services.fraud_lookup import FraudLookup, NoFraudRiskLookup
from app.services.validators.base import (
    FrequentFlyerNumberValidator,
    LookupPerformedEvent,
)

logger = logging.getLogger(__name__)

ValidityCheck = Callable[[str], bool]


class CreditCardApplicationEvaluator:
    """
    Priority-ordered rule chain for credit card applications.

    Rules, first match wins:
    1. Income at or above the high income threshold is auto-accepted
    2. Applicants younger than the auto-referral age are referred,
       flagged as a fraud risk when the fraud lookup reports one
    3. The validation mode is written onto the validator
    4. An unusable validator license refers the application
    5. The frequent flyer number is validated: invalid numbers and
       validator faults are referred, valid numbers with low income
       are auto-declined, everything else is referred

    Each validity consultation increments validator_lookup_count exactly
    once, whether the validator publishes a lookup-performed notification
    or not.

    An instance is single-writer: the counter and the in-flight
    consultation marker are unsynchronised, so callers sharing one
    evaluator must serialise evaluations.

    The validator holds the lookup listener weakly, so a dropped evaluator
    stops listening once it is garbage collected; close() detaches it
    immediately.
    """

    def __init__(
        self,
        validator: FrequentFlyerNumberValidator,
        fraud_lookup: Optional[FraudLookup] = None,
        high_income_threshold: Optional[int] = None,
        low_income_threshold: Optional[int] = None,
        auto_referral_max_age: Optional[int] = None,
        detailed_lookup_min_age: Optional[int] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            validator: Frequent flyer number validator
            fraud_lookup: Fraud risk strategy (defaults to NoFraudRiskLookup)
            high_income_threshold: Override of settings.HIGH_INCOME_THRESHOLD
            low_income_threshold: Override of settings.LOW_INCOME_THRESHOLD
            auto_referral_max_age: Override of settings.AUTO_REFERRAL_MAX_AGE
            detailed_lookup_min_age: Override of settings.DETAILED_LOOKUP_MIN_AGE
        """
        self._validator = validator
        self._fraud_lookup = (
            fraud_lookup if fraud_lookup is not None else NoFraudRiskLookup()
        )

        self.high_income_threshold = Decimal(
            high_income_threshold
            if high_income_threshold is not None
            else settings.HIGH_INCOME_THRESHOLD
        )
        self.low_income_threshold = Decimal(
            low_income_threshold
            if low_income_threshold is not None
            else settings.LOW_INCOME_THRESHOLD
        )
        self.auto_referral_max_age = (
            auto_referral_max_age
            if auto_referral_max_age is not None
            else settings.AUTO_REFERRAL_MAX_AGE
        )
        self.detailed_lookup_min_age = (
            detailed_lookup_min_age
            if detailed_lookup_min_age is not None
            else settings.DETAILED_LOOKUP_MIN_AGE
        )

        self._validator_lookup_count = 0
        self._consultation_in_flight = False
        self._consultation_counted = False
        self._validator.add_lookup_listener(self._on_lookup_performed)

    @property
    def validator_lookup_count(self) -> int:
        """Number of validity consultations made by this evaluator."""
        return self._validator_lookup_count

    def evaluate(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Decide an application using the validator's boolean validity check.

        Args:
            application: The application to evaluate

        Returns:
            The decision reached by the first matching rule
        """
        return self._evaluate(application, self._validator.is_valid)

    def evaluate_using_out(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Decide an application using the validator's check_validity() result.

        Same rule chain as evaluate(); a check that reports it did not
        complete is treated as inconclusive.
        """
        return self._evaluate(application, self._check_validity)

    def close(self) -> None:
        """Stop listening to the validator's lookup notifications."""
        self._validator.remove_lookup_listener(self._on_lookup_performed)

    def __enter__(self) -> "CreditCardApplicationEvaluator":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _evaluate(
        self,
        application: CreditCardApplication,
        is_valid: ValidityCheck,
    ) -> CreditCardApplicationDecision:
        if application.gross_annual_income >= self.high_income_threshold:
            return CreditCardApplicationDecision.AUTO_ACCEPTED

        # Young applicants never reach the validator
        if application.age < self.auto_referral_max_age:
            if self._fraud_lookup.check_application(application):
                logger.info(f"Fraud risk reported for {application!r}")
                return CreditCardApplicationDecision.REFERRED_HUMAN_FRAUD_RISK
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        self._validator.validation_mode = (
            ValidationMode.DETAILED
            if application.age >= self.detailed_lookup_min_age
            else ValidationMode.QUICK
        )

        license_key = self._validator.service_information.license.license_key
        if license_key != settings.VALID_LICENSE_KEY:
            logger.warning(
                f"Validator license key {license_key!r} is not usable, "
                f"referring application"
            )
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        try:
            is_valid_frequent_flyer_number = self._consult(
                is_valid, application.frequent_flyer_number
            )
        except Exception as e:
            logger.warning(f"Frequent flyer validation failed, referring application: {e}")
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        if not is_valid_frequent_flyer_number:
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN

        if application.gross_annual_income < self.low_income_threshold:
            return CreditCardApplicationDecision.AUTO_DECLINED

        return CreditCardApplicationDecision.REFERRED_TO_HUMAN

    def _check_validity(self, frequent_flyer_number: str) -> bool:
        result = self._validator.check_validity(frequent_flyer_number)
        return result.completed and result.is_valid

    def _consult(self, is_valid: ValidityCheck, frequent_flyer_number: str) -> bool:
        """Run one validity consultation, counting it exactly once."""
        self._consultation_in_flight = True
        self._consultation_counted = False
        try:
            return is_valid(frequent_flyer_number)
        finally:
            # Validator did not notify (or raised before it could)
            if not self._consultation_counted:
                self._record_lookup()
            self._consultation_in_flight = False

    def _on_lookup_performed(self, event: LookupPerformedEvent) -> None:
        if not self._consultation_in_flight:
            logger.debug(
                f"Ignoring lookup notification for {event.frequent_flyer_number!r} "
                f"outside of a consultation"
            )
            return
        if not self._consultation_counted:
            self._record_lookup()

    def _record_lookup(self) -> None:
        self._validator_lookup_count += 1
        self._consultation_counted = True
