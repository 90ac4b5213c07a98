"""Payment payload formatting for API submission."""

import logging
import math
from typing import Any, Dict

from .entity_helpers import PaymentForm, as_helper
from .parsing import parse_number

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("project_id", "unit_id", "transaction_id", "cheque_number", "bank_id", "remarks")


def format_payment_data(form_data) -> Dict[str, Any]:
    """
    Map a payment form to the payload sent to the payments endpoint.

    Always includes customer_id, amount (as a float), payment_method and
    payment_date. Optional fields are included only when truthy; otherwise the
    key is left out entirely. No validation is done here, so run the
    validators first.

    Args:
        form_data: Payment form dict or PaymentForm helper

    Returns:
        Canonical payment payload
    """
    form = as_helper(PaymentForm, form_data)

    amount = parse_number(form.amount)
    if amount is None or math.isinf(amount):
        amount = None
        logger.warning(
            "Payment amount is not numeric or out of range, sending null",
            extra={"value": repr(form.amount)},
        )

    data = {
        "customer_id": form.customer_id,
        "amount": amount,
        "payment_method": form.payment_method,
        "payment_date": form.payment_date,
    }

    for field in OPTIONAL_FIELDS:
        value = getattr(form, field)
        if value:
            data[field] = value

    return data
