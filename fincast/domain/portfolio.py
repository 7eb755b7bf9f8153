from __future__ import annotations

from datetime import date
from typing import Iterable, List, Sequence

import structlog

from fincast.core.projection import (
    build_growth_series,
    calculate_milestones,
    round_half_up,
    total_projected_value,
)
from fincast.models import (
    PROJECTION_HORIZONS,
    HorizonValue,
    Investment,
    InvestmentProjection,
    InvestmentStatus,
    PortfolioSummary,
)

logger = structlog.get_logger(__name__)

DAYS_PER_YEAR = 365.25


def years_elapsed(start: date, as_of: date) -> float:
    """Fractional years between two days; a start in the future counts as 0."""
    return max((as_of - start).days / DAYS_PER_YEAR, 0.0)


def active_investments(investments: Iterable[Investment]) -> List[Investment]:
    active: List[Investment] = []
    for inv in investments:
        if inv.status != InvestmentStatus.ACTIVE:
            logger.debug("investment_skipped", name=inv.name, status=inv.status.value)
            continue
        active.append(inv)
    return active


def value_at(inv: Investment, years: float) -> float:
    return total_projected_value(
        inv.principal,
        inv.rate_fraction,
        years,
        inv.contribution,
        inv.interval,
    )


def project_investment(
    inv: Investment,
    horizons: Sequence[int] = PROJECTION_HORIZONS,
    series_years: int = 30,
    milestone_years: float = 50,
) -> InvestmentProjection:
    """Horizon values, milestones and chart series for a single investment."""
    horizon_values = []
    for years in horizons:
        total = value_at(inv, years)
        horizon_values.append(
            HorizonValue(
                years=years,
                total=round_half_up(total, 2),
                gain=round_half_up(total - inv.principal, 2),
            )
        )

    return InvestmentProjection(
        name=inv.name,
        principal=inv.principal,
        horizons=horizon_values,
        milestones=calculate_milestones(
            inv.principal,
            inv.rate_fraction,
            inv.contribution,
            inv.interval,
            milestone_years,
        ),
        series=build_growth_series(
            inv.principal,
            inv.rate_fraction,
            series_years,
            inv.contribution,
            inv.interval,
        ),
    )


def summarize_portfolio(
    investments: Iterable[Investment],
    as_of: date,
    horizons: Sequence[int] = PROJECTION_HORIZONS,
) -> PortfolioSummary:
    """
    Aggregate totals over the ACTIVE investments.

    currentValue grows every investment for the time elapsed since its start
    date up to as_of. Horizon totals project all of them the same number of
    years ahead from their principal.
    """
    active = active_investments(investments)

    total_principal = sum(inv.principal for inv in active)
    current_value = sum(value_at(inv, years_elapsed(inv.startDate, as_of)) for inv in active)
    total_gain = current_value - total_principal
    gain_pct = round_half_up(total_gain / total_principal * 100, 2) if total_principal > 0 else 0.0

    horizon_values = []
    for years in horizons:
        total = sum(value_at(inv, years) for inv in active)
        horizon_values.append(
            HorizonValue(
                years=years,
                total=round_half_up(total, 2),
                gain=round_half_up(total - total_principal, 2),
            )
        )

    return PortfolioSummary(
        activeCount=len(active),
        totalPrincipal=round_half_up(total_principal, 2),
        currentValue=round_half_up(current_value, 2),
        totalGain=round_half_up(total_gain, 2),
        gainPct=gain_pct,
        horizons=horizon_values,
    )
