"""Application service for running credit card decisions."""

import logging

from app.core.enums import CreditCardApplicationDecision
from app.models.domain.application import CreditCardApplication
from app.models.schemas.application import (
    CreditCardApplicationCreate,
    EvaluationResponse,
)
from app.services.rule_engine.engine import CreditCardApplicationEvaluator

logger = logging.getLogger(__name__)


class ApplicationService:
    """
    Application service handling credit card evaluation requests.

    This service:
    - Converts incoming schemas into domain applications
    - Runs the evaluator using the requested validity check
    - Reports the decision together with the running lookup count
    """

    def __init__(self, evaluator: CreditCardApplicationEvaluator):
        """
        Initialize the application service.

        Args:
            evaluator: Evaluator shared by every request
        """
        self.evaluator = evaluator

    def evaluate_application(
        self,
        application_data: CreditCardApplicationCreate,
        use_out_check: bool = False,
    ) -> EvaluationResponse:
        """
        Evaluate a submitted application.

        Args:
            application_data: Application from the request body
            use_out_check: Use the validator's check_validity() result instead of is_valid()

        Returns:
            EvaluationResponse with the decision and current lookup count
        """
        application = CreditCardApplication(
            gross_annual_income=application_data.gross_annual_income,
            age=application_data.age,
            frequent_flyer_number=application_data.frequent_flyer_number,
        )

        if use_out_check:
            decision = self.evaluator.evaluate_using_out(application)
        else:
            decision = self.evaluator.evaluate(application)

        logger.info(f"Evaluated {application!r}: {decision.value}")

        return EvaluationResponse(
            decision=decision,
            requires_human_review=not self.is_automatic(decision),
            validator_lookup_count=self.evaluator.validator_lookup_count,
        )

    def get_lookup_count(self) -> int:
        """Return the number of validator consultations made so far."""
        return self.evaluator.validator_lookup_count

    @staticmethod
    def is_automatic(decision: CreditCardApplicationDecision) -> bool:
        """Whether a decision was reached without human review."""
        return decision in (
            CreditCardApplicationDecision.AUTO_ACCEPTED,
            CreditCardApplicationDecision.AUTO_DECLINED,
        )
