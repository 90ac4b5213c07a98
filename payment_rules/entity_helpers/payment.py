"""
Payment form helper.

FIELDS:
- customer_id, amount, payment_method, payment_date (always submitted)
- project_id, unit_id (property selection)
- transaction_id (online / card / upi)
- cheque_number, bank_id (cheque)
- remarks
"""

from typing import Any, Optional

from ..methods import PaymentMethod
from .base import EntityHelper


class PaymentForm(EntityHelper):
    """Helper class providing a stable interface to payment entry data."""

    @property
    def customer_id(self) -> Any:
        return self._field("customer_id")

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
    def payment_date(self) -> Any:
        return self._field("payment_date")

    @property
    def project_id(self) -> Any:
        return self._field("project_id")

    @property
    def unit_id(self) -> Any:
        return self._field("unit_id")

    @property
    def transaction_id(self) -> Any:
        return self._field("transaction_id")

    @property
    def cheque_number(self) -> Any:
        return self._field("cheque_number")

    @property
    def bank_id(self) -> Any:
        return self._field("bank_id")

    @property
    def remarks(self) -> Optional[str]:
        return self._field("remarks")

    def __repr__(self) -> str:
        return (
            f"PaymentForm(customer_id={self._data.get('customer_id')!r}, "
            f"amount={self._data.get('amount')!r}, "
            f"payment_method={self._data.get('payment_method')!r})"
        )
