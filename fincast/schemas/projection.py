"""Data contracts for single-investment projections."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fincast.models import ContributionInterval, GrowthPoint, Milestone, ProjectionInput


class ContributionPlan(BaseModel):
    """Fields shared by every projection request."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, description="Amount invested at year 0.")
    annualRate: float = Field(
        ...,
        ge=0,
        le=10,
        description="Annualized return rate expressed as a decimal (e.g. 0.12 for 12%).",
    )
    contribution: float = Field(
        0.0,
        ge=0,
        description="Amount added at the end of every interval.",
    )
    interval: Optional[ContributionInterval] = Field(
        None,
        description="Contribution interval; without one the contribution is ignored.",
    )


class ProjectionRequest(ContributionPlan):
    years: float = Field(..., ge=0, le=100, description="Horizon in years, fractions allowed.")

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(
            principal=self.principal,
            annualRate=self.annualRate,
            years=self.years,
            contribution=self.contribution,
            interval=self.interval,
        )


class ProjectionResponse(BaseModel):
    principalValue: float
    contributionValue: float
    total: float


class MilestonesRequest(ContributionPlan):
    maxYears: Optional[int] = Field(None, ge=1, le=100, description="Search horizon in years.")


class MilestonesResponse(BaseModel):
    milestones: List[Milestone]


class GrowthSeriesRequest(ContributionPlan):
    maxYears: Optional[int] = Field(None, ge=0, le=100, description="Last year on the chart.")


class GrowthSeriesResponse(BaseModel):
    points: List[GrowthPoint]
