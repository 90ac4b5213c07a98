"""
Rule 003 v1: Payment Amount

Validates that the amount is a positive number no larger than the configured
maximum (10 crore by default).
"""

from typing import Tuple

from payment_rules.rules.base import ValidationRule
from payment_rules.validators import MAX_PAYMENT_AMOUNT, validate_payment_amount


class Rule(ValidationRule):
    """Validates the payment amount."""

    def validates(self) -> str:
        """Return entity type this rule validates."""
        return "payment"

    def description(self) -> str:
        """Return plain English description of rule."""
        return "Amount must be a positive number within the maximum limit"

    def run(self) -> Tuple[str, str]:
        max_amount = self.policy.get("max_amount", MAX_PAYMENT_AMOUNT)
        result = validate_payment_amount(self.entity.amount, max_amount=max_amount)
        return self._from_single_result(result, "amount")
