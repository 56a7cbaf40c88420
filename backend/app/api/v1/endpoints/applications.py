"""Credit card application evaluation endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.deps import get_application_service
from app.models.schemas.application import (
    CreditCardApplicationCreate,
    EvaluationResponse,
    LookupCountResponse,
)
from app.services.application_service import ApplicationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/evaluate",
    response_model=EvaluationResponse,
    status_code=status.HTTP_200_OK,
    summary="Evaluate a credit card application",
    description="Run the decision rules and return the resulting decision",
)
async def evaluate_application(
    application_data: CreditCardApplicationCreate,
    service: Annotated[ApplicationService, Depends(get_application_service)],
    use_out_check: bool = Query(
        False, description="Validate using the completion-reporting validity check"
    ),
) -> EvaluationResponse:
    """
    Evaluate a credit card application.

    Validator faults never surface here; they are reported as a
    ReferredToHuman decision.
    """
    try:
        return service.evaluate_application(application_data, use_out_check)
    except Exception as e:
        logger.error(f"Error evaluating application: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error evaluating application: {str(e)}",
        )


@router.get(
    "/lookup-count",
    response_model=LookupCountResponse,
    summary="Get validator lookup count",
    description="Number of frequent flyer validity consultations made so far",
)
async def get_lookup_count(
    service: Annotated[ApplicationService, Depends(get_application_service)],
) -> LookupCountResponse:
    """Get the running validator lookup count."""
    return LookupCountResponse(validator_lookup_count=service.get_lookup_count())
