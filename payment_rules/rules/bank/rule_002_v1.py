"""Validate bank master details"""

from payment_rules.rules.base import ValidationRule
from payment_rules.validators import validate_bank_details


class Rule(ValidationRule):
    """Validates bank name, branch, IFSC code and contact details."""

    def validates(self) -> str:
        return "bank"

    def description(self) -> str:
        return "Bank must have a name, branch and well-formed IFSC code; email and contact number must be well-formed"

    def run(self) -> tuple:
        return self._from_field_result(validate_bank_details(self.entity))
