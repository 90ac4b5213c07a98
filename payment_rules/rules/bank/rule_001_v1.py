"""
Rule 001 v1: JSON Schema Validation

Validates that bank data conforms to the bundled bank.schema.json.
"""

from payment_rules.rules.base import JsonSchemaRule


class Rule(JsonSchemaRule):
    """Validates bank data against its JSON schema."""

    schema_name = "bank"

    def validates(self) -> str:
        """Return entity type this rule validates."""
        return "bank"
