"""
Edit and delete eligibility for stored payments.

A payment may be changed only while it is recent, and never once it is backed
by a cleared cheque. Both checks read the current instant from a clock, so the
answer for the same record changes as time passes; pass a FixedClock to pin it.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from .clock import resolve_clock
from .entity_helpers import PersistedPayment, as_helper

logger = logging.getLogger(__name__)

EDIT_WINDOW_DAYS = 30
DELETE_WINDOW_DAYS = 7


def _result(reason: Optional[str]) -> Dict[str, Any]:
    return {"allowed": reason is None, "reason": reason}


def _align(moment: datetime, reference: datetime) -> datetime:
    """Make moment comparable with reference (both naive or both aware)."""
    if moment.tzinfo is None and reference.tzinfo is not None:
        return moment.replace(tzinfo=reference.tzinfo)
    if moment.tzinfo is not None and reference.tzinfo is None:
        return moment.astimezone().replace(tzinfo=None)
    return moment


def _check(payment, clock, window_days: int, action: str) -> Dict[str, Any]:
    if payment is None:
        return _result("Payment not found")

    record = as_helper(PersistedPayment, payment)

    try:
        paid_at = record.paid_at
    except ValueError:
        logger.warning(
            f"Cannot {action} payment with unparseable date",
            extra={"payment_id": record.id, "payment_date": repr(record.payment_date)},
        )
        return _result("Invalid payment date")

    if paid_at is None:
        return _result("Payment date is missing")

    now = resolve_clock(clock).now()
    cutoff = now - timedelta(days=window_days)
    if _align(paid_at, now) < cutoff:
        return _result(f"Cannot {action} payments older than {window_days} days")

    if record.cheque_cleared:
        return _result(f"Cannot {action} payment with cleared cheque")

    return _result(None)


def can_edit_payment(payment, clock=None, window_days: int = EDIT_WINDOW_DAYS) -> Dict[str, Any]:
    """
    Decide whether a stored payment may be edited.

    Args:
        payment: Stored payment dict or PersistedPayment helper (None if not found)
        clock: Clock supplying "now" (SystemClock by default)
        window_days: Payments older than this many days are locked

    Returns:
        {"allowed": bool, "reason": str | None}
    """
    return _check(payment, clock, window_days, "edit")


def can_delete_payment(payment, clock=None, window_days: int = DELETE_WINDOW_DAYS) -> Dict[str, Any]:
    """
    Decide whether a stored payment may be deleted.

    Same rules as can_edit_payment with a shorter window.
    """
    return _check(payment, clock, window_days, "delete")
