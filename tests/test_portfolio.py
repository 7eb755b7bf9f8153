from __future__ import annotations

from datetime import date, timedelta
from math import isclose

from fincast.domain.portfolio import (
    active_investments,
    project_investment,
    summarize_portfolio,
    years_elapsed,
)
from fincast.models import ContributionInterval, Investment, InvestmentStatus

AS_OF = date(2024, 6, 30)


def make_portfolio() -> list:
    return [
        Investment(name="CDB", principal=1000.0, annualInterestRate=10.0, startDate=AS_OF),
        Investment(
            name="Savings",
            principal=500.0,
            annualInterestRate=0.0,
            startDate=AS_OF,
            contribution=100.0,
            interval=ContributionInterval.YEARLY,
        ),
        Investment(
            name="Old fund",
            principal=9000.0,
            annualInterestRate=12.0,
            startDate=date(2015, 1, 1),
            status=InvestmentStatus.CANCELED,
        ),
    ]


def test_years_elapsed_uses_julian_year():
    assert isclose(years_elapsed(date(2020, 1, 1), date(2021, 1, 1)), 366 / 365.25)


def test_future_start_counts_as_zero_years():
    assert years_elapsed(date(2030, 1, 1), date(2024, 1, 1)) == 0.0


def test_only_active_investments_are_considered():
    names = [inv.name for inv in active_investments(make_portfolio())]
    assert names == ["CDB", "Savings"]


def test_summary_aggregates_active_investments():
    summary = summarize_portfolio(make_portfolio(), AS_OF)

    assert summary.activeCount == 2
    assert summary.totalPrincipal == 1500.0
    # both start today, so nothing has grown yet
    assert summary.currentValue == 1500.0
    assert summary.totalGain == 0.0
    assert summary.gainPct == 0.0

    ten_years = summary.horizons[0]
    assert ten_years.years == 10
    # 1000 * 1.1^10 + (500 + 10 * 100)
    assert ten_years.total == 4093.74
    assert ten_years.gain == 2593.74
    assert [h.years for h in summary.horizons] == [10, 20, 30]


def test_current_value_grows_with_elapsed_time():
    start = AS_OF - timedelta(days=1000)
    inv = Investment(name="Bond", principal=2000.0, annualInterestRate=8.0, startDate=start)

    summary = summarize_portfolio([inv], AS_OF)

    expected = 2000.0 * 1.08 ** (1000 / 365.25)
    assert isclose(summary.currentValue, round(expected, 2))
    assert isclose(summary.gainPct, (expected - 2000.0) / 2000.0 * 100, abs_tol=0.01)


def test_empty_portfolio_is_all_zero():
    summary = summarize_portfolio([], AS_OF, horizons=[5])

    assert summary.activeCount == 0
    assert summary.totalPrincipal == 0.0
    assert summary.currentValue == 0.0
    assert summary.gainPct == 0.0
    assert [(h.years, h.total, h.gain) for h in summary.horizons] == [(5, 0.0, 0.0)]


def test_project_investment_bundles_horizons_milestones_and_series():
    inv = Investment(name="CDB", principal=1000.0, annualInterestRate=10.0, startDate=AS_OF)

    projection = project_investment(inv, horizons=[10], series_years=5, milestone_years=50)

    assert projection.name == "CDB"
    assert projection.horizons[0].total == 2593.74
    assert [m.multiple for m in projection.milestones] == [2, 5, 10, 20]
    assert projection.milestones[0].years == 7.3
    assert len(projection.series) == 6
    assert projection.series[1].total == 1100.0


def test_rate_is_read_as_percentage():
    inv = Investment(principal=100.0, annualInterestRate=10.65, startDate=AS_OF)
    assert isclose(inv.rate_fraction, 0.1065)
