"""
Abstract base class for payment rules.

All rules inherit from ValidationRule and implement validates(), description()
and run(). The rule executor injects three attributes before calling run():

- self.entity: the entity helper (PaymentForm, CreditPaymentForm, BankForm)
- self.clock: the clock used for date-relative checks
- self.policy: the policy limits from business-config.yaml
"""

import json
from abc import ABC, abstractmethod
from importlib.resources import files
from typing import Dict, Tuple

from jsonschema import Draft7Validator


class ValidationRule(ABC):
    """
    Abstract base class for all payment rules.

    The rule ID is injected at instantiation time by the rule loader,
    derived from the filename.
    """

    def __init__(self, rule_id: str):
        """
        Initialize the rule with its identifier.

        Args:
            rule_id: Unique rule identifier (derived from filename by loader)
        """
        self._rule_id = rule_id
        self._field_errors: Dict[str, str] = {}
        self.entity = None
        self.clock = None
        self.policy: dict = {}

    def get_id(self) -> str:
        """Return rule identifier (e.g. 'rule_001_v1')."""
        return self._rule_id

    @abstractmethod
    def validates(self) -> str:
        """Return entity type this rule validates (e.g. 'payment')."""

    @abstractmethod
    def description(self) -> str:
        """Return plain English description of what this rule checks."""

    @abstractmethod
    def run(self) -> Tuple[str, str]:
        """
        Execute the validation rule.

        Returns:
            Tuple of (status, message) where:
            - status: "PASS" | "FAIL" | "NORUN"
            - message: Error description (empty string for PASS)
        """

    def field_errors(self) -> Dict[str, str]:
        """Per-field messages recorded by the last run()."""
        return dict(self._field_errors)

    def _from_field_result(self, result: dict) -> Tuple[str, str]:
        """Turn a {"valid", "errors"} validator result into (status, message)."""
        self._field_errors = dict(result["errors"])
        if result["valid"]:
            return ("PASS", "")
        return ("FAIL", "; ".join(f"{field}: {msg}" for field, msg in self._field_errors.items()))

    def _from_single_result(self, result: dict, field: str) -> Tuple[str, str]:
        """Turn a {"valid", "error"} validator result into (status, message)."""
        if result["valid"]:
            self._field_errors = {}
            return ("PASS", "")
        self._field_errors = {field: result["error"]}
        return ("FAIL", result["error"])


class JsonSchemaRule(ValidationRule):
    """Checks the raw entity dict against a schema bundled with the package."""

    schema_name: str = ""

    def description(self) -> str:
        return f"Entity data must conform to the {self.validates()} JSON schema"

    def load_schema(self) -> dict:
        schema_file = files("payment_rules").joinpath("schemas").joinpath(f"{self.schema_name}.schema.json")
        with schema_file.open("r") as f:
            return json.load(f)

    def run(self) -> Tuple[str, str]:
        entity_data = self.entity.raw
        if not isinstance(entity_data, dict):
            self._field_errors = {}
            return ("FAIL", f"Entity data must be an object, got {type(entity_data).__name__}")

        try:
            schema = self.load_schema()
        except (OSError, ValueError) as e:
            return ("NORUN", f"Failed to load schema {self.schema_name}: {e}")

        validator = Draft7Validator(schema)
        errors = {}
        for error in sorted(validator.iter_errors(entity_data), key=lambda e: list(e.path)):
            field = str(error.path[0]) if error.path else "entity"
            errors.setdefault(field, error.message)

        self._field_errors = errors
        if errors:
            return ("FAIL", "Schema validation failed: " +
                    "; ".join(f"{field}: {msg}" for field, msg in errors.items()))
        return ("PASS", "")
