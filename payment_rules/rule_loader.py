"""
Rule Loader - Dynamic Rule Loading

Loads payment rule modules using a convention-based approach.

## Filename as Single Source of Truth

- File: `payment_rules/rules/payment/rule_003_v1.py`
- Contains: `class Rule(ValidationRule)`
- Rule ID: `rule_003_v1` (derived from filename)
- Instantiation: `Rule(rule_id="rule_003_v1")`

Rule IDs are scoped by entity type, so `payment/rule_001_v1` and
`bank/rule_001_v1` are different rules.
"""

import importlib
from typing import Any, Dict, List

RULES_PACKAGE = "payment_rules.rules"


class RuleLoader:
    """Dynamically loads validation rules by entity type and rule ID"""

    def __init__(self, rules_package: str = RULES_PACKAGE):
        """
        Initialize rule loader.

        Args:
            rules_package: Dotted package holding one subpackage per entity type
        """
        self.rules_package = rules_package
        self.loaded_rules = {}  # Cache: (entity_type, rule_id) -> rule_class

    def load_rules(self, entity_type: str, rule_configs: List[Dict[str, Any]]) -> List[Any]:
        """
        Load rules from hierarchical configuration.

        Args:
            entity_type: Entity type the rules belong to
            rule_configs: List of rule config dicts with rule_id and optional children

        Returns:
            List of instantiated rule objects (flattened from hierarchy)
        """
        rules = []
        for config in rule_configs:
            rules.append(self._load_single_rule(entity_type, config["rule_id"]))

            if "children" in config:
                rules.extend(self.load_rules(entity_type, config["children"]))

        return rules

    def _load_single_rule(self, entity_type: str, rule_id: str) -> Any:
        """
        Load a single rule by ID.

        Raises:
            ImportError: If the rule module doesn't exist
            AttributeError: If the module defines no Rule class
        """
        key = (entity_type, rule_id)
        if key in self.loaded_rules:
            return self.loaded_rules[key](rule_id)

        module_name = f"{self.rules_package}.{entity_type}.{rule_id}"
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            raise ImportError(f"Failed to import rule {rule_id} for {entity_type}: {e}") from e

        class_name = "Rule"
        if not hasattr(module, class_name):
            raise AttributeError(
                f"Rule class '{class_name}' not found in {module_name}. "
                f"All rules must define a class named 'Rule'."
            )

        rule_class = getattr(module, class_name)
        self.loaded_rules[key] = rule_class
        return rule_class(rule_id)
