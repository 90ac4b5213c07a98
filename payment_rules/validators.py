"""
Payment and bank master validators.

Every validator is a pure function returning a result dict instead of raising:

- single-field checks return {"valid": bool, "error": str | None}
- multi-field checks return {"valid": bool, "errors": {field: message}}

Callers branch on "valid" and show the messages next to the offending fields.
"""

import re
from datetime import date
from typing import Any, Callable, Dict, Optional

from .clock import resolve_clock
from .entity_helpers import BankForm, CreditPaymentForm, PaymentForm, as_helper
from .methods import PaymentMethod
from .parsing import parse_date_value, parse_number

MAX_PAYMENT_AMOUNT = 100_000_000  # 10 crore
MIN_REASON_LENGTH = 10
MAX_PAYMENT_AGE_YEARS = 1

CARD_TRANSACTION_ID_MIN_LENGTH = 4
UPI_TRANSACTION_ID_MIN_LENGTH = 12

IFSC_PATTERN = re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
CONTACT_NUMBER_LENGTH = 10


def _single_result(error: Optional[str]) -> Dict[str, Any]:
    return {"valid": error is None, "error": error}


def _field_result(errors: Dict[str, str]) -> Dict[str, Any]:
    return {"valid": not errors, "errors": errors}


def _is_blank(value: Any) -> bool:
    """True for missing, falsy, or whitespace-only values."""
    if not value:
        return True
    return isinstance(value, str) and not value.strip()


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def validate_payment_amount(amount: Any, max_amount: float = MAX_PAYMENT_AMOUNT) -> Dict[str, Any]:
    """
    Validate a payment amount.

    Args:
        amount: Raw amount (number or numeric string)
        max_amount: Upper bound, inclusive

    Returns:
        {"valid": bool, "error": str | None}
    """
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        return _single_result("Amount is required")

    number = parse_number(amount)
    if number is None:
        return _single_result("Amount must be a valid number")

    if number <= 0:
        return _single_result("Amount must be greater than zero")

    if number > max_amount:
        return _single_result("Amount exceeds maximum limit")

    return _single_result(None)


# Method-specific field checks, one per PaymentMethod member

def _no_field_checks(form: PaymentForm, errors: Dict[str, str]) -> None:
    pass


def _check_cheque_fields(form: PaymentForm, errors: Dict[str, str]) -> None:
    if _is_blank(form.cheque_number):
        errors["cheque_number"] = "Cheque number is required"
    if not form.bank_id:
        errors["bank_id"] = "Bank is required for cheque payments"


def _check_online_fields(form: PaymentForm, errors: Dict[str, str]) -> None:
    if _is_blank(form.transaction_id):
        errors["transaction_id"] = "Transaction ID is required"


def _check_card_fields(form: PaymentForm, errors: Dict[str, str]) -> None:
    transaction_id = form.transaction_id
    if transaction_id and len(str(transaction_id)) < CARD_TRANSACTION_ID_MIN_LENGTH:
        errors["transaction_id"] = "Invalid transaction ID"


def _check_upi_fields(form: PaymentForm, errors: Dict[str, str]) -> None:
    transaction_id = form.transaction_id
    if transaction_id and len(str(transaction_id)) < UPI_TRANSACTION_ID_MIN_LENGTH:
        errors["transaction_id"] = "Invalid UPI transaction ID"


METHOD_FIELD_CHECKS: Dict[PaymentMethod, Callable[[PaymentForm, Dict[str, str]], None]] = {
    PaymentMethod.CASH: _no_field_checks,
    PaymentMethod.CHEQUE: _check_cheque_fields,
    PaymentMethod.ONLINE: _check_online_fields,
    PaymentMethod.CARD: _check_card_fields,
    PaymentMethod.UPI: _check_upi_fields,
    PaymentMethod.OTHER: _no_field_checks,
}


def validate_payment_method_fields(method: Any, data) -> Dict[str, Any]:
    """
    Validate the fields a payment method depends on.

    Args:
        method: Method tag ("cheque", "online", "card", "upi", ...), case-insensitive
        data: Payment form dict or PaymentForm helper

    Returns:
        {"valid": bool, "errors": {field: message}}
    """
    form = as_helper(PaymentForm, data)
    errors: Dict[str, str] = {}
    METHOD_FIELD_CHECKS[PaymentMethod.from_tag(method)](form, errors)
    return _field_result(errors)


def validate_payment_date(value: Any, clock=None,
                          max_age_years: int = MAX_PAYMENT_AGE_YEARS) -> Dict[str, Any]:
    """
    Validate a payment date.

    Today and the same calendar day max_age_years ago are both accepted.

    Args:
        value: ISO date string (YYYY-MM-DD), ISO datetime string, or date object
        clock: Clock supplying "today" (SystemClock by default)
        max_age_years: Oldest accepted age in calendar years

    Returns:
        {"valid": bool, "error": str | None}
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return _single_result("Payment date is required")

    try:
        payment_day = parse_date_value(value).date()
    except ValueError:
        return _single_result("Invalid date format")

    today = resolve_clock(clock).today()

    if payment_day > today:
        return _single_result("Payment date cannot be in the future")

    if payment_day < _years_before(today, max_age_years):
        return _single_result(
            f"Payment date cannot be more than {max_age_years} year"
            f"{'' if max_age_years == 1 else 's'} old"
        )

    return _single_result(None)


def validate_credit_payment(data, max_amount: float = MAX_PAYMENT_AMOUNT,
                            min_reason_length: int = MIN_REASON_LENGTH) -> Dict[str, Any]:
    """
    Validate a credit adjustment.

    Args:
        data: Credit payment dict or CreditPaymentForm helper
        max_amount: Upper bound passed to the amount check
        min_reason_length: Shortest accepted reason

    Returns:
        {"valid": bool, "errors": {field: message}}
    """
    form = as_helper(CreditPaymentForm, data)
    errors: Dict[str, str] = {}

    if not form.customer_id:
        errors["customer_id"] = "Customer is required"

    amount_check = validate_payment_amount(form.amount, max_amount=max_amount)
    if not amount_check["valid"]:
        errors["amount"] = amount_check["error"]

    if not form.credit_type:
        errors["credit_type"] = "Credit type is required"

    reason = form.reason
    if _is_blank(reason):
        errors["reason"] = "Reason is required"
    elif len(str(reason)) < min_reason_length:
        errors["reason"] = f"Reason must be at least {min_reason_length} characters"

    return _field_result(errors)


def validate_payment(data, clock=None, max_amount: float = MAX_PAYMENT_AMOUNT,
                     max_age_years: int = MAX_PAYMENT_AGE_YEARS) -> Dict[str, Any]:
    """
    Validate a complete payment entry form.

    Combines the required-field checks of the entry form with the amount,
    date and method-specific validators.

    Returns:
        {"valid": bool, "errors": {field: message}}
    """
    form = as_helper(PaymentForm, data)
    errors: Dict[str, str] = {}

    if not form.customer_id:
        errors["customer_id"] = "Customer is required"

    amount_check = validate_payment_amount(form.amount, max_amount=max_amount)
    if not amount_check["valid"]:
        errors["amount"] = amount_check["error"]

    if _is_blank(form.payment_method):
        errors["payment_method"] = "Payment method is required"

    date_check = validate_payment_date(form.payment_date, clock=clock, max_age_years=max_age_years)
    if not date_check["valid"]:
        errors["payment_date"] = date_check["error"]

    errors.update(validate_payment_method_fields(form.payment_method, form)["errors"])

    return _field_result(errors)


def validate_bank_details(data) -> Dict[str, Any]:
    """
    Validate a bank master record.

    Returns:
        {"valid": bool, "errors": {field: message}}
    """
    form = as_helper(BankForm, data)
    errors: Dict[str, str] = {}

    if _is_blank(form.bank_name):
        errors["bank_name"] = "Bank name is required"
    if _is_blank(form.branch_name):
        errors["branch_name"] = "Branch name is required"

    ifsc_code = form.ifsc_code
    if _is_blank(ifsc_code):
        errors["ifsc_code"] = "IFSC code is required"
    elif not IFSC_PATTERN.match(str(ifsc_code)):
        errors["ifsc_code"] = "Invalid IFSC code format (e.g., SBIN0001234)"

    email = form.email
    if email and not EMAIL_PATTERN.search(str(email)):
        errors["email"] = "Invalid email format"

    contact_number = form.contact_number
    if contact_number and len(str(contact_number)) != CONTACT_NUMBER_LENGTH:
        errors["contact_number"] = f"Contact number must be {CONTACT_NUMBER_LENGTH} digits"

    return _field_result(errors)
