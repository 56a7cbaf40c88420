"""Pydantic schemas for credit card application requests and decisions."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from app.core.enums import CreditCardApplicationDecision


class CreditCardApplicationCreate(BaseModel):
    """Schema for submitting a credit card application."""

    gross_annual_income: Decimal = Field(default=Decimal("0"), ge=0)
    age: int = Field(default=0, ge=0, le=150)
    frequent_flyer_number: str = Field(default="", max_length=50)

    @field_validator("frequent_flyer_number")
    @classmethod
    def strip_frequent_flyer_number(cls, v: str) -> str:
        """Remove surrounding whitespace."""
        return v.strip()


class EvaluationResponse(BaseModel):
    """Schema for an evaluation decision."""

    decision: CreditCardApplicationDecision
    requires_human_review: bool
    validator_lookup_count: int = Field(..., ge=0)


class LookupCountResponse(BaseModel):
    """Schema for the running validator lookup count."""

    validator_lookup_count: int = Field(..., ge=0)
