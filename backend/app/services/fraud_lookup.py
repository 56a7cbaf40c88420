"""Fraud risk lookup strategies."""

from abc import ABC, abstractmethod

from app.models.domain.application import CreditCardApplication


class FraudLookup(ABC):
    """
    Strategy interface for fraud risk checks.

    The evaluator receives an implementation at construction time;
    tests substitute their own.
    """

    @abstractmethod
    def check_application(self, application: CreditCardApplication) -> bool:
        """Return True if the application carries a fraud risk."""
        pass


class NoFraudRiskLookup(FraudLookup):
    """Default lookup that never reports a fraud risk."""

    def check_application(self, application: CreditCardApplication) -> bool:
        return False
