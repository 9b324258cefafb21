from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.domain.deposit_limit import DepositLimitPolicy
from app.domain.report_window import ReportWindow, to_naive_utc
from app.errors import InvalidRangeError


# ============================================================================
# DEPOSIT LIMIT POLICY TESTS
# ============================================================================


def test_deposit_limit_quarter_of_owed():
    policy = DepositLimitPolicy.from_ratio(0.25)
    assert policy.max_deposit(Decimal("400")) == Decimal("100")
    assert policy.allows(amount=Decimal("80"), total_owed=Decimal("400"))
    assert policy.allows(amount=Decimal("100"), total_owed=Decimal("400"))
    assert not policy.allows(amount=Decimal("120"), total_owed=Decimal("400"))


def test_deposit_limit_nothing_owed():
    policy = DepositLimitPolicy.from_ratio("0.25")
    assert policy.max_deposit(Decimal("0")) == Decimal("0")
    assert not policy.allows(amount=Decimal("0.01"), total_owed=Decimal("0"))


def test_deposit_limit_ratio_is_exact():
    assert DepositLimitPolicy.from_ratio(0.1).ratio == Decimal("0.1")


# ============================================================================
# REPORT WINDOW TESTS
# ============================================================================


def test_report_window_normalizes_aware_bounds():
    start = datetime(2026, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
    end = datetime(2026, 1, 31)
    window = ReportWindow.build(start, end)
    assert window.start == datetime(2026, 1, 1, 0, 0)
    assert window.end == end


def test_report_window_single_instant():
    moment = datetime(2026, 5, 5, 5, 5)
    window = ReportWindow.build(moment, moment)
    assert window.start == window.end == moment


def test_report_window_rejects_reversed_range():
    with pytest.raises(InvalidRangeError):
        ReportWindow.build(datetime(2026, 2, 1), datetime(2026, 1, 1))


def test_to_naive_utc():
    aware = datetime(2026, 1, 1, 3, 0, tzinfo=timezone(timedelta(hours=3)))
    assert to_naive_utc(aware) == datetime(2026, 1, 1, 0, 0)
    naive = datetime(2026, 1, 1, 3, 0)
    assert to_naive_utc(naive) is naive
