"""
Clock abstraction for time-dependent rules.

Date validation and edit/delete eligibility depend on "now". Callers pass a
clock so tests can pin the current instant:

    from payment_rules.clock import FixedClock

    clock = FixedClock(datetime(2025, 6, 15, 10, 30))
    can_edit_payment(payment, clock=clock)
"""

from datetime import date, datetime


class SystemClock:
    """Reads the local wall clock."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()


class FixedClock(SystemClock):
    """Clock pinned to a single instant."""

    def __init__(self, instant):
        if isinstance(instant, datetime):
            self._instant = instant
        elif isinstance(instant, date):
            self._instant = datetime.combine(instant, datetime.min.time())
        else:
            raise ValueError(f"FixedClock needs a date or datetime, got {type(instant).__name__}")

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


def resolve_clock(clock=None) -> SystemClock:
    """Return the given clock, or a SystemClock when none is supplied."""
    return clock if clock is not None else SystemClock()
