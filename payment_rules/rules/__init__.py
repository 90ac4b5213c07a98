"""
Payment rules, one module per rule.

Rules live at rules/<entity_type>/<rule_id>.py and each defines a class named
``Rule``. The rule ID is the filename; the loader injects it at instantiation.
"""

from .base import JsonSchemaRule, ValidationRule

__all__ = ["JsonSchemaRule", "ValidationRule"]
