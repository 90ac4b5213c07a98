"""
Public API for payment-rules

This is the "front door" - the main entry point for ruleset validation,
eligibility checks and payload formatting.
"""

import logging
from typing import Any, Dict, List, Optional

from .clock import resolve_clock
from .config_loader import ConfigLoader
from .eligibility import can_delete_payment, can_edit_payment
from .formatting import format_payment_data
from .validation_engine import ValidationEngine

logger = logging.getLogger(__name__)


def collect_field_errors(results: List[Dict[str, Any]]) -> Dict[str, str]:
    """
    Flatten hierarchical rule results into a {field: message} mapping.

    FAIL results contribute their per-field errors (or, when a rule reports
    none, its message under the rule ID). ERROR results contribute their
    message under the rule ID. The first message for a field wins.
    """
    errors: Dict[str, str] = {}
    for result in results:
        if result["status"] == "FAIL":
            field_errors = result.get("errors") or {result["rule_id"]: result["message"]}
            for field, message in field_errors.items():
                errors.setdefault(field, message)
        elif result["status"] == "ERROR":
            errors.setdefault(result["rule_id"], result["message"])
        errors_below = collect_field_errors(result.get("children", []))
        for field, message in errors_below.items():
            errors.setdefault(field, message)
    return errors


class PaymentRuleService:
    """
    Main payment rule service class.

    Example:
        from payment_rules import PaymentRuleService

        service = PaymentRuleService()
        outcome = service.validate_form("payment", form_data, "thorough")
        if outcome["valid"]:
            payload = service.format_payment(form_data)
    """

    def __init__(self, config_loader: Optional[ConfigLoader] = None, clock=None):
        """
        Initialize the service.

        Args:
            config_loader: ConfigLoader to use (bundled configuration by default)
            clock: Clock for date-relative rules and eligibility (SystemClock by default)

        Raises:
            ValueError, RuntimeError: If configuration cannot be loaded
        """
        self.clock = resolve_clock(clock)
        self._config_loader_supplied = config_loader is not None
        self.config_loader = config_loader or ConfigLoader()
        self._initialize()

    def _initialize(self):
        self.policy = self.config_loader.get_policy()
        self.engine = ValidationEngine(self.config_loader, clock=self.clock)

    def validate(self, entity_type: str, entity_data: dict, ruleset_name: str) -> List[Dict[str, Any]]:
        """
        Validate a single entity against a ruleset.

        Args:
            entity_type: "payment", "credit_payment" or "bank"
            entity_data: Raw form data
            ruleset_name: Ruleset to use (e.g. "quick", "thorough")

        Returns:
            List of hierarchical rule result dicts, each containing:
                - rule_id, description
                - status: "PASS", "FAIL", "NORUN" or "ERROR"
                - message: Failure message ("" on PASS)
                - errors: {field: message} for FAIL results
                - execution_time_ms
                - children: Nested child rule results

        Raises:
            ValueError: If entity_type or ruleset_name is unknown

        Example:
            for result in service.validate("payment", form_data, "quick"):
                if result['status'] == 'FAIL':
                    print(f"{result['rule_id']}: {result['message']}")
        """
        return self.engine.validate(entity_type, entity_data, ruleset_name)

    def validate_form(self, entity_type: str, entity_data: dict, ruleset_name: str) -> Dict[str, Any]:
        """
        Validate an entity and return form-friendly output.

        Returns:
            {"valid": bool, "errors": {field: message}}
        """
        results = self.validate(entity_type, entity_data, ruleset_name)
        errors = collect_field_errors(results)
        return {"valid": not errors, "errors": errors}

    def batch_validate(self, entities: List[dict], entity_type: str,
                       id_fields: List[str], ruleset_name: str) -> List[Dict[str, Any]]:
        """
        Validate several entities of the same type.

        Args:
            entities: List of entity dicts
            entity_type: Entity type shared by all entities
            id_fields: Field names used to build each entity's identifier
            ruleset_name: Ruleset to use

        Returns:
            List of {"entity_id", "entity_type", "valid", "results"} in input order
        """
        batch = []
        for entity in entities:
            results = self.validate(entity_type, entity, ruleset_name)
            batch.append(
                {
                    "entity_id": self._extract_id(entity, id_fields),
                    "entity_type": entity_type,
                    "valid": not collect_field_errors(results),
                    "results": results,
                }
            )
        logger.info(
            "Batch validated",
            extra={"entity_type": entity_type, "ruleset": ruleset_name, "count": len(batch)},
        )
        return batch

    def discover_rules(self, entity_type: str, ruleset_name: str) -> Dict[str, Dict]:
        """
        Describe the rules a ruleset runs for an entity type.

        Returns:
            Dict mapping rule_id to rule metadata (description, field_dependencies, rulesets)
        """
        return self.engine.discover_rules(entity_type, ruleset_name)

    def discover_rulesets(self) -> Dict[str, Dict]:
        """
        Describe every configured ruleset.

        Returns:
            Dict mapping ruleset_name to {"metadata": ..., "stats": ...}
        """
        return self.engine.discover_rulesets()

    def check_edit(self, payment) -> Dict[str, Any]:
        """Edit eligibility for a stored payment, using the configured window."""
        return can_edit_payment(
            payment, clock=self.clock, window_days=self.policy["edit_window_days"]
        )

    def check_delete(self, payment) -> Dict[str, Any]:
        """Delete eligibility for a stored payment, using the configured window."""
        return can_delete_payment(
            payment, clock=self.clock, window_days=self.policy["delete_window_days"]
        )

    def format_payment(self, form_data) -> Dict[str, Any]:
        """Canonical submission payload for a validated payment form."""
        return format_payment_data(form_data)

    def reload_config(self):
        """
        Reload configuration from source and rebuild the engine.

        A service built with its own ConfigLoader reloads from the same local
        config path.
        """
        path = self.config_loader.local_config_path if self._config_loader_supplied else None
        self.config_loader = ConfigLoader(path)
        self._initialize()
        logger.info("Configuration reloaded")

    def get_config_age(self) -> Optional[float]:
        """Seconds since the business config was loaded."""
        return self.config_loader.get_business_config_age()

    def _extract_id(self, entity, id_fields):
        """
        Extract entity identifier from entity data.

        Returns:
            String identifier (concatenated if multiple fields), or "unknown"
        """
        id_parts = [str(entity[field]) for field in id_fields if field in entity]
        if not id_parts:
            return "unknown"
        return "-".join(id_parts)
