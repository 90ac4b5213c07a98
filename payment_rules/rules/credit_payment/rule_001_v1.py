"""
Rule 001 v1: JSON Schema Validation

Validates that credit payment data conforms to the bundled credit_payment.schema.json.
"""

from payment_rules.rules.base import JsonSchemaRule


class Rule(JsonSchemaRule):
    """Validates credit payment data against its JSON schema."""

    schema_name = "credit_payment"

    def validates(self) -> str:
        """Return entity type this rule validates."""
        return "credit_payment"
