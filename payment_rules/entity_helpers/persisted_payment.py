"""
Stored payment helper.

Wraps a payment record as returned by the ERP API. Used by the edit/delete
eligibility checks; never mutated.
"""

from datetime import datetime
from typing import Any, Optional

from ..methods import PaymentMethod
from ..parsing import parse_date_value
from .base import EntityHelper


class PersistedPayment(EntityHelper):
    """Read-only view over a stored payment record."""

    @property
    def id(self) -> Any:
        return self._field("id")

    @property
    def amount(self) -> Any:
        return self._field("amount")

    @property
    def payment_method(self) -> Optional[str]:
        return self._field("payment_method")

    @property
    def method(self) -> PaymentMethod:
        return PaymentMethod.from_tag(self.payment_method)

    @property
    def cheque_status(self) -> Optional[str]:
        return self._field("cheque_status")

    @property
    def payment_date(self) -> Any:
        return self._field("payment_date")

    @property
    def paid_at(self) -> Optional[datetime]:
        """
        payment_date as a datetime, or None when absent.

        Raises:
            ValueError: If payment_date cannot be parsed
        """
        self._record_access("paid_at", "payment_date")
        value = self._data.get("payment_date")
        if not value:
            return None
        return parse_date_value(value)

    @property
    def cheque_cleared(self) -> bool:
        self._record_access("cheque_cleared", "cheque_status")
        status = self._data.get("cheque_status")
        return (
            self.method is PaymentMethod.CHEQUE
            and isinstance(status, str)
            and status.strip().lower() == "cleared"
        )

    def __repr__(self) -> str:
        return (
            f"PersistedPayment(id={self._data.get('id')!r}, "
            f"payment_date={self._data.get('payment_date')!r})"
        )
