"""Bank master form helper."""

from typing import Optional

from .base import EntityHelper


class BankForm(EntityHelper):
    """Helper class for bank master records."""

    @property
    def bank_name(self) -> Optional[str]:
        return self._field("bank_name")

    @property
    def branch_name(self) -> Optional[str]:
        return self._field("branch_name")

    @property
    def ifsc_code(self) -> Optional[str]:
        return self._field("ifsc_code")

    @property
    def address(self) -> Optional[str]:
        return self._field("address")

    @property
    def contact_person(self) -> Optional[str]:
        return self._field("contact_person")

    @property
    def contact_number(self) -> Optional[str]:
        return self._field("contact_number")

    @property
    def email(self) -> Optional[str]:
        return self._field("email")
