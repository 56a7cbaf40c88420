"""Service layer for business logic."""

from app.services.application_service import ApplicationService

__all__ = ["ApplicationService"]
