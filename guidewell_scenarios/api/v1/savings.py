"""POST /v1/savings/growth and /v1/savings/emergency-fund"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from guidewell_scenarios.api.v1.schemas import (
    EmergencyFundRequest,
    EmergencyFundResponse,
    GrowthRequest,
    GrowthResponse,
    YearlySnapshotSchema,
)
from guidewell_scenarios.api.dependencies import get_request_id, get_settings
from guidewell_scenarios.config import Settings
from guidewell_scenarios.domain.emergency_fund import plan_emergency_fund
from guidewell_scenarios.domain.exceptions import DomainException
from guidewell_scenarios.domain.growth import project_growth
from guidewell_scenarios.infrastructure.observability.metrics import record_calculation, record_calculation_error
from guidewell_scenarios.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/savings/growth", response_model=GrowthResponse)
def calculate_growth(request_body: GrowthRequest, request: Request):
    """Compound growth of a balance with monthly (optionally escalating) contributions"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = project_growth(
            initial_amount=request_body.initial_amount,
            monthly_contribution=request_body.monthly_contribution,
            annual_return_percent=request_body.annual_return_percent,
            years=request_body.years,
            annual_contribution_escalation_percent=request_body.annual_contribution_escalation_percent,
        )
    except DomainException as e:
        record_calculation_error("growth", e)
        logging.warning(f"Growth projection rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation_error("growth", e)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_calculation("growth")
    log_calculation(request_id, "growth", (time.time() - start_time) * 1000, final_value=result.final_value)

    return GrowthResponse(
        final_value=result.final_value,
        total_contributed=result.total_contributed,
        growth=result.growth,
        monthly_rate=result.monthly_rate,
        annual_return_percent=result.annual_return_percent,
        projected_value_by_year=[
            YearlySnapshotSchema(year=s.year, value=s.value) for s in result.projected_value_by_year
        ],
    )


@router.post("/savings/emergency-fund", response_model=EmergencyFundResponse)
def calculate_emergency_fund(
    request_body: EmergencyFundRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """Emergency fund target, shortfall and months to complete"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = plan_emergency_fund(
            monthly_expenses=request_body.monthly_expenses,
            target_months=request_body.target_months,
            current_savings=request_body.current_savings,
            monthly_contribution=request_body.monthly_contribution,
            default_contribution_rate=app_settings.emergency_fund_default_contribution_rate,
        )
    except DomainException as e:
        record_calculation_error("emergency_fund", e)
        logging.warning(f"Emergency fund plan rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation_error("emergency_fund", e)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_calculation("emergency_fund")
    log_calculation(
        request_id,
        "emergency_fund",
        (time.time() - start_time) * 1000,
        months_to_complete=result.months_to_complete,
    )

    return EmergencyFundResponse(
        target_amount=result.target_amount,
        remaining_amount=result.remaining_amount,
        months_to_complete=result.months_to_complete,
        is_complete=result.is_complete,
        recommended_monthly_contribution=result.recommended_monthly_contribution,
    )
