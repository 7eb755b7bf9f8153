"""Data contracts for portfolio aggregation."""

from datetime import date
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fincast.models import Investment, InvestmentProjection, PortfolioSummary

HorizonYears = Annotated[int, Field(ge=0, le=100)]


class PortfolioRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    investments: List[Investment] = Field(default_factory=list)
    asOf: Optional[date] = Field(None, description="Valuation day; today when omitted.")
    horizons: Optional[List[HorizonYears]] = Field(None, description="Projection horizons in years.")


class PortfolioResponse(BaseModel):
    summary: PortfolioSummary
    investments: List[InvestmentProjection]
