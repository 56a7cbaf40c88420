"""Rule engine for evaluating credit card applications."""

from .engine import CreditCardApplicationEvaluator

__all__ = ["CreditCardApplicationEvaluator"]
