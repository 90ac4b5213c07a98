"""
Rule 002 v1: Credit Adjustment

Validates a credit adjustment:
- Customer is present
- Amount is a positive number within the maximum limit
- Credit type is present
- Reason is present and long enough to be meaningful
"""

from typing import Tuple

from payment_rules.rules.base import ValidationRule
from payment_rules.validators import (
    MAX_PAYMENT_AMOUNT,
    MIN_REASON_LENGTH,
    validate_credit_payment,
)


class Rule(ValidationRule):
    """Validates credit adjustment fields."""

    def validates(self) -> str:
        """Return entity type this rule validates."""
        return "credit_payment"

    def description(self) -> str:
        """Return plain English description of rule."""
        return "Credit adjustment must have a customer, valid amount, credit type and a reason"

    def run(self) -> Tuple[str, str]:
        result = validate_credit_payment(
            self.entity,
            max_amount=self.policy.get("max_amount", MAX_PAYMENT_AMOUNT),
            min_reason_length=self.policy.get("min_reason_length", MIN_REASON_LENGTH),
        )
        return self._from_field_result(result)
