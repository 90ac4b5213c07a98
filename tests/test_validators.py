"""
Tests for the payment and bank master validators.
"""
from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction

import pytest

from payment_rules import (
    FixedClock,
    PaymentMethod,
    validate_bank_details,
    validate_credit_payment,
    validate_payment,
    validate_payment_amount,
    validate_payment_date,
    validate_payment_method_fields,
)
from payment_rules.entity_helpers import PaymentForm
from payment_rules.validators import METHOD_FIELD_CHECKS


@pytest.fixture
def clock():
    """Clock pinned to 15 June 2025, mid-morning."""
    return FixedClock(datetime(2025, 6, 15, 10, 30))


@pytest.fixture
def cheque_payment():
    """Complete cheque payment form."""
    return {
        "customer_id": 42,
        "amount": "250000",
        "payment_method": "cheque",
        "payment_date": "2025-06-10",
        "project_id": 7,
        "unit_id": 113,
        "cheque_number": "004512",
        "bank_id": 3,
        "remarks": "Second installment",
    }


class TestValidatePaymentAmount:
    """Test validate_payment_amount()."""

    @pytest.mark.parametrize("amount", [None, "", "   "])
    def test_missing_amount_is_required(self, amount):
        """Absent and blank amounts report the required message."""
        result = validate_payment_amount(amount)
        assert result == {"valid": False, "error": "Amount is required"}

    @pytest.mark.parametrize("amount", ["abc", "nan", "₹500", "1,000", "1_000", "\u0665\u0660\u0660", True, [100]])
    def test_non_numeric_amount(self, amount):
        """Values that don't parse as a plain number are rejected."""
        result = validate_payment_amount(amount)
        assert result["valid"] is False
        assert result["error"] == "Amount must be a valid number"

    @pytest.mark.parametrize("amount", [0, "0", -1, "-250.50"])
    def test_non_positive_amount(self, amount):
        """Zero and negative amounts are rejected."""
        result = validate_payment_amount(amount)
        assert result["error"] == "Amount must be greater than zero"

    def test_amount_over_ten_crore(self):
        """Anything above 100,000,000 exceeds the limit."""
        result = validate_payment_amount(100000001)
        assert result == {"valid": False, "error": "Amount exceeds maximum limit"}

    def test_ten_crore_is_allowed(self):
        """The ceiling itself is accepted."""
        assert validate_payment_amount(100000000)["valid"] is True

    @pytest.mark.parametrize("amount", [50000, "50000", " 250.75 ", 0.01])
    def test_valid_amounts(self, amount):
        """Positive amounts within the limit pass with no error."""
        assert validate_payment_amount(amount) == {"valid": True, "error": None}

    def test_custom_ceiling(self):
        """max_amount overrides the default ceiling."""
        assert validate_payment_amount(5000, max_amount=1000)["valid"] is False
        assert validate_payment_amount(500, max_amount=1000)["valid"] is True

    @pytest.mark.parametrize("amount", [Decimal("500"), Decimal("0.01"), Fraction(1, 2)])
    def test_decimal_and_fraction_amounts(self, amount):
        """Exact numeric types are accepted like ints and floats."""
        assert validate_payment_amount(amount) == {"valid": True, "error": None}

    @pytest.mark.parametrize("amount", [Decimal("100000000.01"), Decimal("1e400")])
    def test_decimal_over_limit(self, amount):
        assert validate_payment_amount(amount)["error"] == "Amount exceeds maximum limit"

    @pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("sNaN")])
    def test_decimal_nan(self, amount):
        assert validate_payment_amount(amount)["error"] == "Amount must be a valid number"

    def test_huge_integer_exceeds_limit(self):
        """Integers beyond float range report the limit instead of raising."""
        assert validate_payment_amount(10 ** 400)["error"] == "Amount exceeds maximum limit"
        assert validate_payment_amount(-(10 ** 400))["error"] == "Amount must be greater than zero"


class TestValidatePaymentMethodFields:
    """Test validate_payment_method_fields()."""

    def test_cheque_needs_number_and_bank(self):
        """An empty cheque form is missing both cheque number and bank."""
        result = validate_payment_method_fields("cheque", {})
        assert result["valid"] is False
        assert result["errors"] == {
            "cheque_number": "Cheque number is required",
            "bank_id": "Bank is required for cheque payments",
        }

    def test_cheque_blank_number(self):
        """A whitespace-only cheque number counts as missing."""
        result = validate_payment_method_fields("cheque", {"cheque_number": "   ", "bank_id": 3})
        assert list(result["errors"]) == ["cheque_number"]

    def test_cheque_complete(self, cheque_payment):
        """A cheque with number and bank passes."""
        result = validate_payment_method_fields("cheque", cheque_payment)
        assert result == {"valid": True, "errors": {}}

    def test_method_is_case_insensitive(self):
        """Method tags are matched regardless of case."""
        result = validate_payment_method_fields("CHEQUE", {})
        assert set(result["errors"]) == {"cheque_number", "bank_id"}

    @pytest.mark.parametrize("transaction_id", [None, "", "   "])
    def test_online_requires_transaction_id(self, transaction_id):
        """Online transfers need a non-blank transaction ID."""
        result = validate_payment_method_fields("online", {"transaction_id": transaction_id})
        assert result["errors"] == {"transaction_id": "Transaction ID is required"}

    def test_card_transaction_id_length(self):
        """Card transaction IDs, when given, need at least 4 characters."""
        assert validate_payment_method_fields("card", {"transaction_id": "123"})["errors"] == {
            "transaction_id": "Invalid transaction ID"
        }
        assert validate_payment_method_fields("card", {"transaction_id": "1234"})["valid"] is True
        assert validate_payment_method_fields("card", {})["valid"] is True

    def test_upi_transaction_id_length(self):
        """UPI transaction IDs, when given, need at least 12 characters."""
        short = validate_payment_method_fields("upi", {"transaction_id": "12345"})
        assert short["valid"] is False
        assert short["errors"]["transaction_id"] == "Invalid UPI transaction ID"

        assert validate_payment_method_fields("upi", {"transaction_id": "123456789012"})["valid"] is True
        assert validate_payment_method_fields("upi", {})["valid"] is True

    def test_numeric_transaction_id(self):
        assert validate_payment_method_fields("upi", {"transaction_id": 412345678901})["valid"] is True
        assert validate_payment_method_fields("card", {"transaction_id": 123})["valid"] is False

    @pytest.mark.parametrize("method", ["cash", "crypto", None, 7])
    def test_methods_without_field_checks(self, method):
        """Cash and unknown methods have no field requirements."""
        assert validate_payment_method_fields(method, {}) == {"valid": True, "errors": {}}

    def test_accepts_helper(self):
        """A PaymentForm helper can be passed instead of a dict."""
        form = PaymentForm({"transaction_id": "TXN-9981"})
        assert validate_payment_method_fields("online", form)["valid"] is True

    def test_every_method_has_checks(self):
        """Each PaymentMethod member has exactly one check function."""
        assert set(METHOD_FIELD_CHECKS) == set(PaymentMethod)


class TestValidatePaymentDate:
    """Test validate_payment_date()."""

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_missing_date(self, clock, value):
        """Absent dates report the required message."""
        assert validate_payment_date(value, clock=clock)["error"] == "Payment date is required"

    @pytest.mark.parametrize("value", ["not-a-date", "2025-13-01", "15/06/2025", 20250615])
    def test_unparseable_date(self, clock, value):
        """Values that aren't ISO dates report a format error."""
        assert validate_payment_date(value, clock=clock)["error"] == "Invalid date format"

    def test_today_is_valid(self, clock):
        """A payment dated today passes."""
        assert validate_payment_date("2025-06-15", clock=clock) == {"valid": True, "error": None}

    def test_tomorrow_is_future(self, clock):
        """A payment dated tomorrow is rejected."""
        result = validate_payment_date("2025-06-16", clock=clock)
        assert result == {"valid": False, "error": "Payment date cannot be in the future"}

    def test_exactly_one_year_ago_is_valid(self, clock):
        """The same calendar day last year is still accepted."""
        assert validate_payment_date("2024-06-15", clock=clock)["valid"] is True

    def test_one_year_and_one_day_ago_is_too_old(self, clock):
        """One day beyond a year is rejected."""
        result = validate_payment_date("2024-06-14", clock=clock)
        assert result == {"valid": False, "error": "Payment date cannot be more than 1 year old"}

    def test_leap_day_boundary(self):
        """On 29 February the one-year bound falls on 28 February."""
        leap_clock = FixedClock(date(2024, 2, 29))
        assert validate_payment_date("2023-02-28", clock=leap_clock)["valid"] is True
        assert validate_payment_date("2023-02-27", clock=leap_clock)["valid"] is False

    def test_datetime_string_and_date_object(self, clock):
        """ISO datetimes and date objects are accepted."""
        assert validate_payment_date("2025-06-15T08:00:00Z", clock=clock)["valid"] is True
        assert validate_payment_date(date(2025, 6, 1), clock=clock)["valid"] is True

    def test_result_depends_on_clock(self):
        """The same date can pass today and fail once the clock moves on."""
        assert validate_payment_date("2024-07-01", clock=FixedClock(date(2025, 6, 30)))["valid"] is True
        assert validate_payment_date("2024-07-01", clock=FixedClock(date(2025, 7, 2)))["valid"] is False


class TestValidateCreditPayment:
    """Test validate_credit_payment()."""

    def test_valid_credit(self):
        """A complete credit adjustment passes."""
        result = validate_credit_payment({
            "customer_id": 42,
            "amount": "1500",
            "credit_type": "refund",
            "reason": "Duplicate payment refunded",
        })
        assert result == {"valid": True, "errors": {}}

    def test_empty_credit(self):
        """Every field is reported on an empty form."""
        result = validate_credit_payment({})
        assert result["valid"] is False
        assert result["errors"] == {
            "customer_id": "Customer is required",
            "amount": "Amount is required",
            "credit_type": "Credit type is required",
            "reason": "Reason is required",
        }

    def test_short_reason(self):
        """A reason under 10 characters gets the length message, not the required one."""
        result = validate_credit_payment({
            "customer_id": 42, "amount": 100, "credit_type": "waiver", "reason": "late fee",
        })
        assert result["errors"] == {"reason": "Reason must be at least 10 characters"}

    def test_blank_reason_is_required(self):
        """Whitespace-only reasons count as missing."""
        result = validate_credit_payment({
            "customer_id": 42, "amount": 100, "credit_type": "waiver", "reason": "    ",
        })
        assert result["errors"]["reason"] == "Reason is required"

    def test_amount_error_attached(self):
        """The amount validator's message is attached under 'amount'."""
        result = validate_credit_payment({
            "customer_id": 42, "amount": "abc", "credit_type": "discount",
            "reason": "Festive season discount",
        })
        assert result["errors"] == {"amount": "Amount must be a valid number"}


class TestValidatePayment:
    """Test validate_payment() (full payment entry form)."""

    def test_complete_cheque_payment(self, cheque_payment, clock):
        """A complete cheque payment passes every check."""
        assert validate_payment(cheque_payment, clock=clock) == {"valid": True, "errors": {}}

    def test_empty_form(self, clock):
        """Core fields are all reported on an empty form."""
        result = validate_payment({}, clock=clock)
        assert result["valid"] is False
        assert result["errors"] == {
            "customer_id": "Customer is required",
            "amount": "Amount is required",
            "payment_method": "Payment method is required",
            "payment_date": "Payment date is required",
        }

    def test_method_fields_merged(self, cheque_payment, clock):
        """Method-specific errors appear alongside the core field errors."""
        cheque_payment.update({"payment_method": "online", "payment_date": "2025-07-01"})
        result = validate_payment(cheque_payment, clock=clock)
        assert result["errors"] == {
            "payment_date": "Payment date cannot be in the future",
            "transaction_id": "Transaction ID is required",
        }

    def test_policy_limits(self, cheque_payment, clock):
        cheque_payment["amount"] = 5000
        result = validate_payment(cheque_payment, clock=clock, max_amount=1000, max_age_years=0)
        assert result["errors"]["amount"] == "Amount exceeds maximum limit"
        assert result["errors"]["payment_date"] == "Payment date cannot be more than 0 years old"


class TestValidateBankDetails:
    """Test validate_bank_details()."""

    @pytest.fixture
    def bank(self):
        return {
            "bank_name": "State Bank of India",
            "branch_name": "Connaught Place",
            "ifsc_code": "SBIN0001234",
            "address": "11 Sansad Marg, New Delhi",
            "contact_person": "R. Mehta",
            "contact_number": "9876543210",
            "email": "cp.branch@sbi.co.in",
        }

    def test_valid_bank(self, bank):
        assert validate_bank_details(bank) == {"valid": True, "errors": {}}

    def test_empty_bank(self):
        """Name, branch and IFSC are required."""
        result = validate_bank_details({})
        assert result["errors"] == {
            "bank_name": "Bank name is required",
            "branch_name": "Branch name is required",
            "ifsc_code": "IFSC code is required",
        }

    @pytest.mark.parametrize("ifsc", ["sbin0001234", "SBIN1001234", "SBIN000123", "SB0N0001234"])
    def test_bad_ifsc(self, bank, ifsc):
        """IFSC codes need four letters, a zero, then six alphanumerics."""
        bank["ifsc_code"] = ifsc
        result = validate_bank_details(bank)
        assert result["errors"] == {"ifsc_code": "Invalid IFSC code format (e.g., SBIN0001234)"}

    def test_bad_email_and_contact(self, bank):
        bank.update({"email": "not-an-email", "contact_number": "12345"})
        result = validate_bank_details(bank)
        assert result["errors"] == {
            "email": "Invalid email format",
            "contact_number": "Contact number must be 10 digits",
        }

    def test_optional_contact_fields(self, bank):
        """Email and contact number may be left empty."""
        bank.update({"email": "", "contact_number": None})
        assert validate_bank_details(bank)["valid"] is True
