"""Domain models for the application."""

from app.models.domain.application import CreditCardApplication

__all__ = ["CreditCardApplication"]
