"""Validate payment entry required fields"""

from payment_rules.rules.base import ValidationRule


class Rule(ValidationRule):
    """Validates that the customer and payment method are filled in."""

    def validates(self) -> str:
        return "payment"

    def description(self) -> str:
        return "Payment must name a customer and a payment method"

    def run(self) -> tuple:
        errors = {}

        if not self.entity.customer_id:
            errors["customer_id"] = "Customer is required"

        method = self.entity.payment_method
        if not method or (isinstance(method, str) and not method.strip()):
            errors["payment_method"] = "Payment method is required"

        return self._from_field_result({"valid": not errors, "errors": errors})
