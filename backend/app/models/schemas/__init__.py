"""Pydantic schemas for API validation and serialization."""

from app.models.schemas.application import (
    CreditCardApplicationCreate,
    EvaluationResponse,
    LookupCountResponse,
)

__all__ = [
    "CreditCardApplicationCreate",
    "EvaluationResponse",
    "LookupCountResponse",
]
