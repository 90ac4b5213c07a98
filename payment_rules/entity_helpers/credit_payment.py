"""Credit adjustment form helper."""

from typing import Any, Optional

from .base import EntityHelper


class CreditPaymentForm(EntityHelper):
    """Helper class for credit adjustments (refunds, discounts, waivers...)."""

    @property
    def customer_id(self) -> Any:
        return self._field("customer_id")

    @property
    def amount(self) -> Any:
        return self._field("amount")

    @property
    def credit_type(self) -> Optional[str]:
        return self._field("credit_type")

    @property
    def reason(self) -> Optional[str]:
        return self._field("reason")

    @property
    def remarks(self) -> Optional[str]:
        return self._field("remarks")
