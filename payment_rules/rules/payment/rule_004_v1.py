"""
Rule 004 v1: Payment Date Window

Validates that the payment date is neither in the future nor older than the
configured age (one year by default). Uses the injected clock for "today".
"""

from typing import Tuple

from payment_rules.rules.base import ValidationRule
from payment_rules.validators import MAX_PAYMENT_AGE_YEARS, validate_payment_date


class Rule(ValidationRule):
    """Validates the payment date against today's date."""

    def validates(self) -> str:
        """Return entity type this rule validates."""
        return "payment"

    def description(self) -> str:
        """Return plain English description of rule."""
        return "Payment date must be today or earlier, and not more than a year old"

    def run(self) -> Tuple[str, str]:
        max_age_years = self.policy.get("max_payment_age_years", MAX_PAYMENT_AGE_YEARS)
        result = validate_payment_date(
            self.entity.payment_date, clock=self.clock, max_age_years=max_age_years
        )
        return self._from_single_result(result, "payment_date")
