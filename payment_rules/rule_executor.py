import logging
import time
from typing import Any, Dict, List

from .entity_helpers import create_entity_helper

logger = logging.getLogger(__name__)


class RuleExecutor:
    """Executes payment rules hierarchically with timing"""

    def __init__(self, rules: List[Any], entity_type: str, entity_data: dict,
                 clock=None, policy: dict = None):
        """
        Initialize rule executor.

        Args:
            rules: List of rule objects to execute
            entity_type: Type of the entity being validated
            entity_data: The entity being validated
            clock: Clock injected into rules for date-relative checks
            policy: Policy limits injected into rules
        """
        self.rules = {r.get_id(): r for r in rules}
        self.entity_type = entity_type
        self.entity_helper = create_entity_helper(entity_type, entity_data, track_access=False)
        self.clock = clock
        self.policy = policy or {}

    def execute_hierarchical(
        self, rule_configs: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Execute rules respecting hierarchical dependencies.

        Args:
            rule_configs: List of rule config dicts with structure:
                [{"rule_id": "rule_001_v1", "children": [...]}, ...]

        Returns:
            Hierarchical results structure matching config
        """
        return [self._execute_rule(config) for config in rule_configs]

    def _execute_rule(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Execute a single rule and its children."""
        rule_id = config["rule_id"]
        rule = self.rules.get(rule_id)

        if not rule:
            return {
                "rule_id": rule_id,
                "description": "",
                "status": "NORUN",
                "message": f"Rule {rule_id} not found",
                "errors": {},
                "execution_time_ms": 0,
                "children": [],
            }

        rule.entity = self.entity_helper
        rule.clock = self.clock
        rule.policy = self.policy

        start = time.time()
        try:
            status, message = rule.run()
            errors = rule.field_errors() if status == "FAIL" else {}
        except Exception as e:
            logger.exception(
                f"Rule {rule_id} raised",
                extra={"entity_type": self.entity_type, "rule_id": rule_id},
            )
            status = "ERROR"
            message = f"{type(e).__name__}: {e}"
            errors = {}
        elapsed_ms = round((time.time() - start) * 1000, 2)

        logger.debug(
            f"Rule {rule_id} -> {status}",
            extra={"entity_type": self.entity_type, "rule_id": rule_id, "elapsed_ms": elapsed_ms},
        )

        result = {
            "rule_id": rule_id,
            "description": rule.description(),
            "status": status,
            "message": message,
            "errors": errors,
            "execution_time_ms": elapsed_ms,
            "children": [],
        }

        # Children run only when the parent passed
        if status == "PASS" and "children" in config:
            for child_config in config["children"]:
                result["children"].append(self._execute_rule(child_config))
        elif "children" in config:
            for child_config in config["children"]:
                result["children"].append(self._mark_skipped(child_config))

        return result

    def _mark_skipped(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Mark a rule and its children as skipped."""
        rule_id = config["rule_id"]
        rule = self.rules.get(rule_id)

        result = {
            "rule_id": rule_id,
            "description": rule.description() if rule else "",
            "status": "NORUN",
            "message": "Parent rule did not pass, rule skipped",
            "errors": {},
            "execution_time_ms": 0,
            "children": [],
        }

        if "children" in config:
            for child_config in config["children"]:
                result["children"].append(self._mark_skipped(child_config))

        return result
