"""POST /v1/scenarios/trajectory and /v1/summary - projections for the chart layer"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from guidewell_scenarios.api.v1.schemas import (
    GoalProgressSchema,
    ProjectionPointSchema,
    SummaryRequest,
    SummaryResponse,
    TrajectoryRequest,
    TrajectoryResponse,
)
from guidewell_scenarios.api.dependencies import get_request_id, get_settings
from guidewell_scenarios.config import Settings
from guidewell_scenarios.domain.exceptions import DomainException
from guidewell_scenarios.domain.health import calculate_goal_progress, summarize_net_worth
from guidewell_scenarios.domain.models import GrowthRates, StrategyConfig
from guidewell_scenarios.domain.trajectory import (
    default_growth_rates,
    find_milestone,
    generate_trajectory,
    horizon_for_preset,
)
from guidewell_scenarios.infrastructure.observability.metrics import record_calculation, record_calculation_error
from guidewell_scenarios.infrastructure.observability.logging import log_calculation
from guidewell_scenarios.utils.date_utils import months_between

router = APIRouter()


def resolve_horizon(request_body: TrajectoryRequest, app_settings: Settings) -> int:
    if request_body.horizon_months is not None:
        return request_body.horizon_months
    if request_body.timeline is not None:
        return horizon_for_preset(request_body.timeline)
    if request_body.end_date is not None:
        return months_between(date.today(), request_body.end_date)
    return app_settings.default_horizon_months


def resolve_growth_rates(request_body: TrajectoryRequest, app_settings: Settings) -> GrowthRates:
    if request_body.growth_rates is not None:
        return request_body.growth_rates.to_domain()
    annual = (
        request_body.annual_return_percent
        if request_body.annual_return_percent is not None
        else app_settings.default_annual_return_percent
    )
    return default_growth_rates(
        annual,
        checking_share=app_settings.checking_growth_share,
        savings_share=app_settings.savings_growth_share,
        investment_share=app_settings.investment_growth_share,
    )


@router.post("/scenarios/trajectory", response_model=TrajectoryResponse)
def project_trajectory(
    request_body: TrajectoryRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Month-by-month net worth projection for a strategy allocation.

    Points run from month 0 to the horizon with no gaps; at most one point
    is flagged as the milestone.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        horizon = resolve_horizon(request_body, app_settings)
        config = StrategyConfig(
            horizon_months=horizon,
            extra_monthly_amount=request_body.extra_monthly_amount,
            allocation=request_body.allocation.to_domain(),
        )
        points = generate_trajectory(
            request_body.balances.to_domain(),
            config,
            resolve_growth_rates(request_body, app_settings),
            request_body.target_net_worth,
        )
    except DomainException as e:
        record_calculation_error("trajectory", e)
        logging.warning(f"Trajectory rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation_error("trajectory", e)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    milestone = find_milestone(points)
    milestone_month = milestone.month if milestone else None

    record_calculation("trajectory")
    log_calculation(
        request_id,
        "trajectory",
        (time.time() - start_time) * 1000,
        horizon_months=horizon,
        milestone_month=milestone_month,
    )

    return TrajectoryResponse(
        horizon_months=horizon,
        milestone_month=milestone_month,
        points=[
            ProjectionPointSchema(
                month=p.month,
                checking_balance=p.checking_balance,
                savings_balance=p.savings_balance,
                investment_balance=p.investment_balance,
                debt_balance=p.debt_balance,
                net_worth=p.net_worth,
                is_milestone=p.is_milestone,
            )
            for p in points
        ],
    )


@router.post("/summary", response_model=SummaryResponse)
def summarize(request_body: SummaryRequest, request: Request):
    """Net worth totals, health score and progress for each goal"""
    start_time = time.time()
    request_id = get_request_id(request)
    accounts = [a.to_domain() for a in request_body.accounts]

    try:
        summary = summarize_net_worth(accounts)
        goals = [
            (goal.id, calculate_goal_progress(goal.to_domain(), accounts, as_of=request_body.as_of))
            for goal in request_body.goals
        ]
    except DomainException as e:
        record_calculation_error("summary", e)
        logging.warning(f"Summary rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation_error("summary", e)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_calculation("summary")
    log_calculation(request_id, "summary", (time.time() - start_time) * 1000, net_worth=summary.net_worth)

    return SummaryResponse(
        total_assets=summary.total_assets,
        total_debt=summary.total_debt,
        net_worth=summary.net_worth,
        health_score=summary.health_score,
        goals=[
            GoalProgressSchema(
                goal_id=goal_id,
                progress_percentage=progress.progress_percentage,
                months_remaining=progress.months_remaining,
                recommended_monthly_contribution=progress.recommended_monthly_contribution,
                current_monthly_contribution=progress.current_monthly_contribution,
                is_on_track=progress.is_on_track,
                acceleration_needed=progress.acceleration_needed,
            )
            for goal_id, progress in goals
        ],
    )
