"""
payment-rules: Payment validation and eligibility rules

This library provides pure Python business rules for payment records:
- Amount, date and payment-method field validators
- Credit adjustment and bank master validators
- Customer balance arithmetic and API payload formatting
- Edit/delete eligibility for stored payments (injectable clock)
- Configurable rulesets run through PaymentRuleService

Example:
    from payment_rules import PaymentRuleService, validate_payment_amount

    validate_payment_amount("50000")
    # {'valid': True, 'error': None}

    service = PaymentRuleService()
    service.validate_form("payment", form_data, "thorough")
"""

from .api import PaymentRuleService, collect_field_errors
from .balance import calculate_customer_balance
from .clock import FixedClock, SystemClock
from .eligibility import can_delete_payment, can_edit_payment
from .formatting import format_payment_data
from .methods import PaymentMethod
from .validators import (
    validate_bank_details,
    validate_credit_payment,
    validate_payment,
    validate_payment_amount,
    validate_payment_date,
    validate_payment_method_fields,
)

__version__ = "0.1.0"
__all__ = [
    "FixedClock",
    "PaymentMethod",
    "PaymentRuleService",
    "SystemClock",
    "calculate_customer_balance",
    "can_delete_payment",
    "can_edit_payment",
    "collect_field_errors",
    "format_payment_data",
    "validate_bank_details",
    "validate_credit_payment",
    "validate_payment",
    "validate_payment_amount",
    "validate_payment_date",
    "validate_payment_method_fields",
]
