"""Customer balance arithmetic."""

import logging
from typing import Any

from .parsing import parse_number

logger = logging.getLogger(__name__)


def _coerce(value: Any, name: str) -> float:
    number = parse_number(value)
    if number is None:
        logger.warning(
            f"Non-numeric {name} treated as 0",
            extra={"field": name, "value": repr(value)},
        )
        return 0.0
    return number


def calculate_customer_balance(current_balance: Any, payment_amount: Any,
                               payment_type: str = "debit") -> float:
    """
    Calculate a customer's balance after a payment.

    Non-numeric or missing inputs count as 0 (and are logged), so a malformed
    amount leaves the balance unchanged. Uses plain float arithmetic; callers
    needing exact currency amounts must round themselves.

    Args:
        current_balance: Balance before the payment
        payment_amount: Payment amount
        payment_type: "credit" adds the amount, anything else subtracts it

    Returns:
        New balance
    """
    balance = _coerce(current_balance, "current_balance")
    amount = _coerce(payment_amount, "payment_amount")

    if payment_type == "credit":
        return balance + amount
    return balance - amount
