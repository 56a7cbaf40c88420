"""Dependency injection for FastAPI endpoints."""

from functools import lru_cache

from app.services.application_service import ApplicationService
from app.services.rule_engine.engine import CreditCardApplicationEvaluator
from app.services.validators.base import (
    FrequentFlyerNumberValidator,
    get_frequent_flyer_validator,
)

__all__ = ["get_application_service", "get_validator"]


@lru_cache
def get_validator() -> FrequentFlyerNumberValidator:
    """Get the process-wide frequent flyer validator."""
    return get_frequent_flyer_validator()


@lru_cache
def get_application_service() -> ApplicationService:
    """
    Get the application service dependency.

    The evaluator is shared across requests so its lookup count covers
    the lifetime of the process. Endpoints using it are async and run on
    the event loop, which keeps evaluations single-writer. The validator
    call is synchronous and runs on the loop too: the in-process mock is
    fine, but a network-backed validator would block every request for
    the duration of its lookup.
    """
    return ApplicationService(CreditCardApplicationEvaluator(get_validator()))
