"""
Entity helper classes for payment rules.

Provides stable interfaces to form and record data (payments, credit
adjustments, bank masters, stored payments) that shield validators and rules
from the raw field layout.
"""

from .bank import BankForm
from .base import EntityHelper, as_helper
from .credit_payment import CreditPaymentForm
from .payment import PaymentForm
from .persisted_payment import PersistedPayment

__all__ = [
    'BankForm',
    'CreditPaymentForm',
    'EntityHelper',
    'PaymentForm',
    'PersistedPayment',
    'as_helper',
    'create_entity_helper',
    'HELPERS',
]

HELPERS = {
    "payment": PaymentForm,
    "credit_payment": CreditPaymentForm,
    "bank": BankForm,
    "persisted_payment": PersistedPayment,
}


def create_entity_helper(entity_type: str, entity_data: dict,
                         track_access: bool = False):
    """
    Factory function to create the helper for an entity type.

    Args:
        entity_type: Type of entity ("payment", "credit_payment", "bank", "persisted_payment")
        entity_data: Raw entity data as dictionary
        track_access: If True, track which fields are accessed (for discover_rules)

    Returns:
        Entity helper instance

    Raises:
        ValueError: If entity_type is not recognized
    """
    helper_class = HELPERS.get(entity_type)
    if helper_class is None:
        raise ValueError(
            f"Unknown entity type: {entity_type!r}. "
            f"Expected one of: {', '.join(sorted(HELPERS))}"
        )
    return helper_class(entity_data, track_access=track_access)
