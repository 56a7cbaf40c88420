"""Credit card application domain model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CreditCardApplication:
    """
    A credit card application submitted for evaluation.

    Instances are immutable once created; the evaluator reads them and
    does not retain them beyond a single evaluation.

    Attributes:
        gross_annual_income: Applicant's gross annual income
        age: Applicant's age in years
        frequent_flyer_number: Frequent flyer number (may be empty)
    """

    gross_annual_income: Decimal = Decimal("0")
    age: int = 0
    frequent_flyer_number: str = ""

    def __post_init__(self):
        """Ensure income is a Decimal."""
        if not isinstance(self.gross_annual_income, Decimal):
            object.__setattr__(
                self, "gross_annual_income", Decimal(str(self.gross_annual_income))
            )

    def __repr__(self) -> str:
        return (
            f"<CreditCardApplication(age={self.age}, "
            f"gross_annual_income={self.gross_annual_income}, "
            f"frequent_flyer_number={self.frequent_flyer_number!r})>"
        )
