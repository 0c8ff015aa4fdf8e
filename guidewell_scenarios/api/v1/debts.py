"""POST /v1/debts/payoff and /v1/debts/strategy - debt payoff calculations"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from guidewell_scenarios.api.v1.schemas import (
    PayoffRequest,
    PayoffResponse,
    PayoffStepSchema,
    StrategyPlanSchema,
    StrategyRequest,
    StrategyResponse,
)
from guidewell_scenarios.api.dependencies import get_request_id, get_settings
from guidewell_scenarios.config import Settings
from guidewell_scenarios.domain.amortization import calculate_debt_payoff
from guidewell_scenarios.domain.debt_strategy import compare_strategies
from guidewell_scenarios.domain.exceptions import DomainException
from guidewell_scenarios.domain.models import StrategyPlan
from guidewell_scenarios.infrastructure.observability.metrics import (
    record_calculation,
    record_calculation_error,
    record_recommendation,
)
from guidewell_scenarios.infrastructure.observability.logging import log_calculation

router = APIRouter()


def _plan_schema(plan: StrategyPlan) -> StrategyPlanSchema:
    return StrategyPlanSchema(
        total_interest=plan.total_interest,
        steps=[
            PayoffStepSchema(
                account_id=step.account.id,
                balance=step.account.balance,
                annual_interest_rate_percent=step.account.annual_interest_rate_percent,
                minimum_payment=step.minimum_payment,
                monthly_payment=step.monthly_payment,
                months_to_payoff=step.months_to_payoff,
                total_interest=step.total_interest,
            )
            for step in plan.steps
        ],
    )


@router.post("/debts/payoff", response_model=PayoffResponse)
def calculate_payoff(request_body: PayoffRequest, request: Request):
    """
    Months, total paid and interest to retire one debt at a fixed payment.

    Returns 422 when the payment never covers the monthly interest.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = calculate_debt_payoff(
            balance=request_body.balance,
            apr_percent=request_body.apr_percent,
            monthly_payment=request_body.monthly_payment,
            minimum_payment=request_body.minimum_payment,
            start_date=request_body.start_date,
        )
    except DomainException as e:
        record_calculation_error("payoff", e)
        logging.warning(f"Payoff rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation_error("payoff", e)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_calculation("payoff")
    log_calculation(
        request_id,
        "payoff",
        (time.time() - start_time) * 1000,
        months_to_payoff=result.months_to_payoff,
    )

    return PayoffResponse(
        months_to_payoff=result.months_to_payoff,
        total_paid=result.total_paid,
        total_interest=result.total_interest,
        monthly_payment=result.monthly_payment,
        payoff_date=result.payoff_date,
        interest_savings=result.interest_savings,
    )


@router.post("/debts/strategy", response_model=StrategyResponse)
def compare_debt_strategies(
    request_body: StrategyRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Compare snowball and avalanche orderings for the supplied debts.

    Both plans are returned so callers can present the cheaper and the more
    motivating option side by side.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        comparison = compare_strategies(
            [debt.to_domain() for debt in request_body.debts],
            fallback_rate=app_settings.default_minimum_payment_rate,
        )
    except DomainException as e:
        record_calculation_error("strategy", e)
        logging.warning(f"Strategy comparison rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation_error("strategy", e)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_calculation("strategy")
    record_recommendation(comparison.recommendation)
    log_calculation(
        request_id,
        "strategy",
        (time.time() - start_time) * 1000,
        recommendation=comparison.recommendation,
        savings=comparison.savings,
    )

    return StrategyResponse(
        snowball=_plan_schema(comparison.snowball),
        avalanche=_plan_schema(comparison.avalanche),
        recommendation=comparison.recommendation,
        savings=comparison.savings,
    )
