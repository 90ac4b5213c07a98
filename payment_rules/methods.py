"""Payment method tags accepted by the payment forms."""

from enum import Enum


class PaymentMethod(str, Enum):
    """Payment methods offered on the payment entry form."""

    CASH = "cash"
    CHEQUE = "cheque"
    ONLINE = "online"
    CARD = "card"
    UPI = "upi"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag) -> "PaymentMethod":
        """
        Parse a raw method tag (case-insensitive).

        Missing or unrecognised tags map to OTHER, which carries no
        method-specific field checks.
        """
        if not isinstance(tag, str):
            return cls.OTHER
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return cls.OTHER
