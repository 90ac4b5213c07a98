"""Validate fields required by the chosen payment method"""

from payment_rules.rules.base import ValidationRule
from payment_rules.validators import validate_payment_method_fields


class Rule(ValidationRule):
    """Validates cheque, online, card and UPI specific fields."""

    def validates(self) -> str:
        return "payment"

    def description(self) -> str:
        return "Cheque payments need a cheque number and bank; online, card and UPI payments need a valid transaction ID"

    def run(self) -> tuple:
        result = validate_payment_method_fields(self.entity.payment_method, self.entity)
        return self._from_field_result(result)
