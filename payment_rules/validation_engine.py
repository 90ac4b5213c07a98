from typing import Any, Dict, List

from .entity_helpers import HELPERS, create_entity_helper
from .rule_executor import RuleExecutor
from .rule_loader import RuleLoader


class ValidationEngine:
    """Runs configured rulesets against payment entities"""

    def __init__(self, config_loader, clock=None, rule_loader: RuleLoader = None):
        """
        Initialize validation engine.

        Args:
            config_loader: ConfigLoader instance
            clock: Clock injected into date-relative rules
            rule_loader: RuleLoader to use (a fresh one by default)
        """
        self.config_loader = config_loader
        self.config = config_loader.get_business_config()
        self.policy = config_loader.get_policy()
        self.clock = clock
        self.rule_loader = rule_loader or RuleLoader()

    def validate(
        self,
        entity_type: str,
        entity_data: dict,
        ruleset_name: str,
    ) -> List[Dict[str, Any]]:
        """
        Execute a ruleset and return hierarchical results.

        Args:
            entity_type: Type of entity ("payment", "credit_payment", "bank")
            entity_data: The entity data to validate
            ruleset_name: Rule set to use (e.g. "quick", "thorough")

        Returns:
            List of hierarchical result dicts with structure:
            [{
                "rule_id": str,
                "description": str,
                "status": "PASS" | "FAIL" | "NORUN" | "ERROR",
                "message": str,
                "errors": {field: message},
                "execution_time_ms": float,
                "children": [...]
            }, ...]

        Raises:
            ValueError: If entity_type or ruleset_name is unknown
        """
        rule_configs = self._get_rules_for_ruleset(entity_type, ruleset_name)
        rules = self.rule_loader.load_rules(entity_type, rule_configs)

        executor = RuleExecutor(
            rules, entity_type, entity_data, clock=self.clock, policy=self.policy
        )
        return executor.execute_hierarchical(rule_configs)

    def discover_rules(self, entity_type: str, ruleset_name: str,
                       sample_data: dict = None) -> Dict[str, Dict]:
        """
        Discover the rules of a ruleset and their metadata.

        Each rule is run once against sample_data (an empty entity by default)
        with access tracking on, to record which fields it reads.

        Returns:
            Dict mapping rule_id to:
            - rule_id: Unique identifier
            - entity_type: What entity type this rule validates
            - description: Human-readable business purpose
            - field_dependencies: List of (logical, physical) field tuples
            - rulesets: Names of every ruleset that includes this rule
        """
        rule_configs = self._get_rules_for_ruleset(entity_type, ruleset_name)
        rules = self.rule_loader.load_rules(entity_type, rule_configs)

        result = {}
        for rule in rules:
            rule_id = rule.get_id()

            helper = create_entity_helper(entity_type, dict(sample_data or {}), track_access=True)
            rule.entity = helper
            rule.clock = self.clock
            rule.policy = self.policy
            rule.run()

            result[rule_id] = {
                "rule_id": rule_id,
                "entity_type": rule.validates(),
                "description": rule.description(),
                "field_dependencies": helper.get_accesses(),
                "rulesets": self._get_rulesets_containing(rule_id, entity_type),
            }

        return result

    def discover_rulesets(self) -> Dict[str, Dict]:
        """
        Discover available rulesets with metadata and statistics.

        Returns:
            Dict mapping ruleset_name to {metadata, stats} where stats has
            rules_by_entity, total_rules and supported_entities
        """
        result = {}
        for ruleset_name, ruleset_data in self.config.get("rulesets", {}).items():
            metadata = dict(ruleset_data.get("metadata", {}))
            stats = self._compute_ruleset_stats(ruleset_data.get("rules", {}))
            result[ruleset_name] = {"metadata": metadata, "stats": stats}
        return result

    def _compute_ruleset_stats(self, rules_section: Dict[str, List]) -> Dict[str, Any]:
        rules_by_entity = {
            entity_type: self._count_rules_recursive(rule_list)
            for entity_type, rule_list in rules_section.items()
        }
        return {
            "rules_by_entity": rules_by_entity,
            "total_rules": sum(rules_by_entity.values()),
            "supported_entities": sorted(rules_by_entity),
        }

    def _count_rules_recursive(self, rules_list: List[Dict]) -> int:
        """Recursively count rules including nested children."""
        count = len(rules_list)
        for rule_config in rules_list:
            if "children" in rule_config:
                count += self._count_rules_recursive(rule_config["children"])
        return count

    def _get_rulesets_containing(self, rule_id: str, entity_type: str) -> List[str]:
        return [
            name
            for name, data in self.config.get("rulesets", {}).items()
            if self._rule_in_list(rule_id, data.get("rules", {}).get(entity_type, []))
        ]

    def _rule_in_list(self, rule_id: str, rule_list: List[Dict]) -> bool:
        """Check if rule_id appears anywhere in a rule list, including nested children."""
        for r in rule_list:
            if r.get("rule_id") == rule_id:
                return True
            if "children" in r and self._rule_in_list(rule_id, r["children"]):
                return True
        return False

    def _get_rules_for_ruleset(self, entity_type: str, ruleset_name: str) -> List[Dict[str, Any]]:
        """
        Extract rule configs for an entity type from a ruleset.

        Raises:
            ValueError: If the ruleset or entity type is unknown
        """
        if entity_type not in HELPERS:
            raise ValueError(f"Unknown entity type: {entity_type}")

        rulesets = self.config.get("rulesets", {})
        if ruleset_name not in rulesets:
            raise ValueError(
                f"Unknown ruleset: {ruleset_name}. Available: {', '.join(sorted(rulesets))}"
            )

        return rulesets[ruleset_name].get("rules", {}).get(entity_type, [])
