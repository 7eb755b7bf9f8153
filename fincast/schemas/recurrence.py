"""Data contracts for recurring schedules."""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fincast.models import DueOccurrences, Frequency, RecurrenceInput, RecurringRule


class ScheduleRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    startDate: date
    frequency: Frequency
    recurrenceEnd: Optional[date] = None

    @property
    def schedule(self) -> RecurrenceInput:
        return RecurrenceInput(
            startDate=self.startDate,
            frequency=self.frequency,
            recurrenceEnd=self.recurrenceEnd,
        )


class NextOccurrenceRequest(ScheduleRequest):
    after: Optional[date] = Field(None, description="Reference day; today when omitted.")


class NextOccurrenceResponse(BaseModel):
    nextDate: Optional[date]


class OccurrencesRequest(ScheduleRequest):
    fromDate: date
    toDate: date


class OccurrencesResponse(BaseModel):
    dates: List[date]


class DueRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rules: List[RecurringRule] = Field(default_factory=list)
    today: Optional[date] = None


class DueResponse(BaseModel):
    results: Dict[str, DueOccurrences]
