"""Core enums for type safety across the application."""

from enum import Enum


class CreditCardApplicationDecision(str, Enum):
    """Terminal outcome of evaluating one credit card application."""

    AUTO_ACCEPTED = "AutoAccepted"
    AUTO_DECLINED = "AutoDeclined"
    REFERRED_TO_HUMAN = "ReferredToHuman"
    REFERRED_HUMAN_FRAUD_RISK = "ReferredHumanFraudRisk"


class ValidationMode(str, Enum):
    """Lookup depth requested from the frequent flyer validation service."""

    QUICK = "Quick"
    DETAILED = "Detailed"
