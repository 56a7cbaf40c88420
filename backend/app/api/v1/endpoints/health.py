"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.config import settings
from app.deps import get_validator
from app.services.validators.base import FrequentFlyerNumberValidator

router = APIRouter()


@router.get("/health")
async def health_check(
    validator: FrequentFlyerNumberValidator = Depends(get_validator),
) -> dict:
    """
    Health check endpoint.

    Verifies that the API is running and the validator license is usable.

    Returns:
        dict: Health status with API and validator status
    """
    try:
        license_key = validator.service_information.license.license_key
        if license_key == settings.VALID_LICENSE_KEY:
            validator_status = "healthy"
        else:
            validator_status = f"unhealthy: license key {license_key!r}"
    except Exception as e:
        validator_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if validator_status == "healthy" else "degraded",
        "api": "healthy",
        "validator_provider": validator.provider_name,
        "validator": validator_status,
    }
