"""HTTP routes for the Flask API."""

from datetime import date
from http import HTTPStatus
from typing import Any, Dict

import structlog
from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from fincast import __version__
from fincast.config import Settings
from fincast.core.projection import (
    build_growth_series,
    calculate_milestones,
    future_value,
    project,
    round_half_up,
)
from fincast.core.recurrence import next_occurrence, occurrences_in_range
from fincast.domain.portfolio import active_investments, project_investment, summarize_portfolio
from fincast.domain.schedule import collect_due_occurrences
from fincast.schemas.health import HealthResponse
from fincast.schemas.portfolio import PortfolioRequest, PortfolioResponse
from fincast.schemas.projection import (
    GrowthSeriesRequest,
    GrowthSeriesResponse,
    MilestonesRequest,
    MilestonesResponse,
    ProjectionRequest,
    ProjectionResponse,
)
from fincast.schemas.recurrence import (
    DueRequest,
    DueResponse,
    NextOccurrenceRequest,
    NextOccurrenceResponse,
    OccurrencesRequest,
    OccurrencesResponse,
)

api_bp = Blueprint("api", __name__)
logger = structlog.get_logger(__name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _payload() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        raise BadRequest("request body must be a JSON object")
    return raw_payload


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("payload_rejected", path=request.path, error_count=exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    logger.warning("payload_rejected", path=request.path, reason=exc.description)
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", version=__version__)
    return jsonify(response.model_dump())


# ---------- Projections ----------


@api_bp.post("/projection/value")
def projection_value() -> Any:
    payload = ProjectionRequest.model_validate(_payload())
    inputs = payload.to_input()

    total = project(inputs)
    principal_value = future_value(inputs.principal, inputs.annualRate, inputs.years)

    logger.info(
        "projection_computed",
        years=inputs.years,
        interval=inputs.interval.value if inputs.interval else None,
        total=total,
    )
    response = ProjectionResponse(
        principalValue=round_half_up(principal_value, 2),
        contributionValue=round_half_up(total - principal_value, 2),
        total=round_half_up(total, 2),
    )
    return jsonify(response.model_dump())


@api_bp.post("/projection/milestones")
def projection_milestones() -> Any:
    payload = MilestonesRequest.model_validate(_payload())
    max_years = payload.maxYears or _settings().milestone_max_years

    milestones = calculate_milestones(
        payload.principal,
        payload.annualRate,
        payload.contribution,
        payload.interval,
        max_years,
    )

    logger.info("milestones_computed", max_years=max_years, reached=len(milestones))
    return jsonify(MilestonesResponse(milestones=milestones).model_dump())


@api_bp.post("/projection/series")
def projection_series() -> Any:
    payload = GrowthSeriesRequest.model_validate(_payload())
    max_years = payload.maxYears if payload.maxYears is not None else _settings().growth_series_years

    points = build_growth_series(
        payload.principal,
        payload.annualRate,
        max_years,
        payload.contribution,
        payload.interval,
    )

    logger.info("growth_series_built", max_years=max_years, points=len(points))
    return jsonify(GrowthSeriesResponse(points=points).model_dump())


@api_bp.post("/portfolio/summary")
def portfolio_summary() -> Any:
    payload = PortfolioRequest.model_validate(_payload())
    settings = _settings()
    as_of = payload.asOf or date.today()
    horizons = payload.horizons if payload.horizons is not None else settings.projection_horizons

    active = active_investments(payload.investments)
    summary = summarize_portfolio(active, as_of, horizons)
    projections = [
        project_investment(
            inv,
            horizons=horizons,
            series_years=settings.growth_series_years,
            milestone_years=settings.milestone_max_years,
        )
        for inv in active
    ]

    logger.info(
        "portfolio_summarized",
        as_of=as_of.isoformat(),
        active=summary.activeCount,
        current_value=summary.currentValue,
    )
    response = PortfolioResponse(summary=summary, investments=projections)
    return jsonify(response.model_dump(mode="json"))


# ---------- Recurring schedules ----------


@api_bp.post("/recurrence/next")
def recurrence_next() -> Any:
    payload = NextOccurrenceRequest.model_validate(_payload())
    after = payload.after or date.today()

    next_date = next_occurrence(payload.schedule, after)

    logger.info("next_occurrence_computed", frequency=payload.frequency.value, ended=next_date is None)
    return jsonify(NextOccurrenceResponse(nextDate=next_date).model_dump(mode="json"))


@api_bp.post("/recurrence/occurrences")
def recurrence_occurrences() -> Any:
    payload = OccurrencesRequest.model_validate(_payload())

    dates = occurrences_in_range(payload.schedule, payload.fromDate, payload.toDate)

    logger.info("occurrences_listed", frequency=payload.frequency.value, count=len(dates))
    return jsonify(OccurrencesResponse(dates=dates).model_dump(mode="json"))


@api_bp.post("/recurrence/due")
def recurrence_due() -> Any:
    payload = DueRequest.model_validate(_payload())
    today = payload.today or date.today()

    results = collect_due_occurrences(payload.rules, today)

    logger.info(
        "due_occurrences_collected",
        rules=len(results),
        due=sum(len(r.dates) for r in results.values()),
    )
    return jsonify(DueResponse(results=results).model_dump(mode="json"))
