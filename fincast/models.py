from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ContributionInterval(str, Enum):
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    YEARLY = "YEARLY"


class Frequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class InvestmentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"
    COMPLETED = "COMPLETED"


# Fraction of a year covered by one contribution interval.
INTERVAL_YEAR_FRACTION: Dict[ContributionInterval, float] = {
    ContributionInterval.MONTHLY: 1 / 12,
    ContributionInterval.QUARTERLY: 1 / 4,
    ContributionInterval.YEARLY: 1.0,
}

MILESTONE_MULTIPLES = (2, 5, 10, 20)

PROJECTION_HORIZONS = (10, 20, 30)


class ProjectionInput(BaseModel):
    """One investment as seen by the projection engine.

    annualRate is a decimal fraction (0.12 == 12%). A contribution without an
    interval has no effect.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float
    annualRate: float
    years: float
    contribution: float = 0.0
    interval: Optional[ContributionInterval] = None


class GrowthPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=0)
    principalOnly: float
    total: float


class Milestone(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    multiple: int
    years: float


class RecurrenceInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    startDate: date
    frequency: Frequency
    recurrenceEnd: Optional[date] = None


class DueOccurrences(BaseModel):
    """Pending dates of a schedule up to a reference day.

    ended is True once the next pending date lies past the schedule's end,
    i.e. the schedule can be deactivated.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dates: List[date] = Field(default_factory=list)
    ended: bool = False


class RecurringRule(BaseModel):
    """A stored recurring transaction rule, reduced to its schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    startDate: date
    frequency: Frequency
    endDate: Optional[date] = None
    lastGeneratedDate: Optional[date] = None

    @property
    def schedule(self) -> RecurrenceInput:
        return RecurrenceInput(
            startDate=self.startDate,
            frequency=self.frequency,
            recurrenceEnd=self.endDate,
        )


class Investment(BaseModel):
    """
    A stored investment as handed over by the persistence layer.
    annualInterestRate is a percentage (10.65 means 10.65% a year).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = "Investment"
    principal: float = Field(ge=0)
    annualInterestRate: float = Field(ge=0)
    startDate: date
    contribution: float = Field(default=0.0, ge=0)
    interval: Optional[ContributionInterval] = None
    status: InvestmentStatus = InvestmentStatus.ACTIVE

    @property
    def rate_fraction(self) -> float:
        return self.annualInterestRate / 100


class HorizonValue(BaseModel):
    model_config = ConfigDict(extra="forbid")

    years: int
    total: float
    gain: float


class InvestmentProjection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    principal: float
    horizons: List[HorizonValue]
    milestones: List[Milestone]
    series: List[GrowthPoint]


class PortfolioSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    activeCount: int
    totalPrincipal: float
    currentValue: float
    totalGain: float
    gainPct: float
    horizons: List[HorizonValue]
