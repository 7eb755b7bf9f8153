from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from fincast.models import (
    INTERVAL_YEAR_FRACTION,
    MILESTONE_MULTIPLES,
    ContributionInterval,
    GrowthPoint,
    Milestone,
    ProjectionInput,
)

BISECTION_STEPS = 50


def round_half_up(value: float, places: int = 2) -> float:
    """Round like a cash register: halves go away from zero (1000.125 -> 1000.13)."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def future_value(principal: float, annual_rate: float, years: float) -> float:
    """Compound growth of a lump sum. annual_rate is a decimal (0.1065 == 10.65%).

    A total loss (rate -1) looked at backwards in time is unbounded: the
    growth factor is inf rather than a division by zero.
    """
    growth = 1 + annual_rate
    if growth == 0 and years < 0:
        return principal * math.inf
    return principal * growth ** years


def future_value_recurring(
    contribution: float,
    annual_rate: float,
    years: float,
    interval: ContributionInterval,
) -> float:
    """
    Future value of a stream of equal contributions.

        FV = sum_{n=1..N} contribution * (1 + r)^max(T - n*d, 0),   N = floor(T / d)

    d is the year fraction of one interval. Contributions land at the end of
    each interval; the last one may sit a hair past the horizon because of
    float error and then counts at face value.
    """
    delta = INTERVAL_YEAR_FRACTION[ContributionInterval(interval)]
    count = math.floor(years / delta)

    fv = 0.0
    for n in range(1, count + 1):
        remaining = years - n * delta
        fv += contribution * (1 + annual_rate) ** max(remaining, 0)
    return fv


def total_projected_value(
    principal: float,
    annual_rate: float,
    years: float,
    contribution: float = 0.0,
    interval: Optional[ContributionInterval] = None,
) -> float:
    """Principal growth plus contribution growth; contributions need an interval to count."""
    principal_fv = future_value(principal, annual_rate, years)
    if not contribution or interval is None:
        return principal_fv
    return principal_fv + future_value_recurring(contribution, annual_rate, years, interval)


def project(inputs: ProjectionInput) -> float:
    return total_projected_value(
        inputs.principal,
        inputs.annualRate,
        inputs.years,
        inputs.contribution,
        inputs.interval,
    )


def calculate_milestones(
    principal: float,
    annual_rate: float,
    contribution: float = 0.0,
    interval: Optional[ContributionInterval] = None,
    max_years: float = 50,
) -> List[Milestone]:
    """
    Years needed to reach 2x, 5x, 10x and 20x the principal.

    Multiples not reached within max_years are left out, so the result can be
    shorter than four entries. Each reachable one is found by a fixed number
    of bisection steps over [0, max_years] and rounded to one decimal.
    """
    milestones: List[Milestone] = []
    if principal <= 0:
        return milestones

    at_max = total_projected_value(principal, annual_rate, max_years, contribution, interval)

    for multiple in MILESTONE_MULTIPLES:
        target = principal * multiple
        if at_max < target:
            continue

        lo, hi = 0.0, float(max_years)
        for _ in range(BISECTION_STEPS):
            mid = (lo + hi) / 2
            if total_projected_value(principal, annual_rate, mid, contribution, interval) < target:
                lo = mid
            else:
                hi = mid

        milestones.append(Milestone(multiple=multiple, years=round_half_up((lo + hi) / 2, 1)))

    return milestones


def build_growth_series(
    principal: float,
    annual_rate: float,
    max_years: int,
    contribution: float = 0.0,
    interval: Optional[ContributionInterval] = None,
) -> List[GrowthPoint]:
    """One chart point per whole year, 0..max_years inclusive, values rounded to cents."""
    series: List[GrowthPoint] = []
    for year in range(0, int(max_years) + 1):
        principal_only = future_value(principal, annual_rate, year)
        total = total_projected_value(principal, annual_rate, year, contribution, interval)
        series.append(
            GrowthPoint(
                year=year,
                principalOnly=round_half_up(principal_only),
                total=round_half_up(total),
            )
        )
    return series


__all__ = [
    "round_half_up",
    "future_value",
    "future_value_recurring",
    "total_projected_value",
    "project",
    "calculate_milestones",
    "build_growth_series",
]
