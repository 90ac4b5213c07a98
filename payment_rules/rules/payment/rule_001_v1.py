"""
Rule 001 v1: JSON Schema Validation

Validates that payment data conforms to the bundled payment.schema.json.
"""

from payment_rules.rules.base import JsonSchemaRule


class Rule(JsonSchemaRule):
    """Validates payment data against its JSON schema."""

    schema_name = "payment"

    def validates(self) -> str:
        """Return entity type this rule validates."""
        return "payment"
