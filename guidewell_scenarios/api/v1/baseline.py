"""POST /v1/baseline - current monthly contribution estimate per scope"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from guidewell_scenarios.api.v1.schemas import BaselineRequest, BaselineResponse
from guidewell_scenarios.api.dependencies import get_request_id, get_settings
from guidewell_scenarios.config import Settings
from guidewell_scenarios.domain.baseline import estimate_baseline_monthly, resolve_scope
from guidewell_scenarios.domain.exceptions import DomainException
from guidewell_scenarios.infrastructure.observability.metrics import record_calculation, record_calculation_error
from guidewell_scenarios.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/baseline", response_model=BaselineResponse)
def estimate_baseline(
    request_body: BaselineRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Seed a scenario's monthly amount from account metadata and recent history.

    Debt prefers observed payments; savings and investing prefer declared
    goal contributions.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    lookback_days = (
        request_body.lookback_days
        if request_body.lookback_days is not None
        else app_settings.baseline_lookback_days
    )

    try:
        scope = resolve_scope(request_body.scope, request_body.focus)
        monthly_amount = estimate_baseline_monthly(
            scope,
            accounts=[a.to_domain() for a in request_body.accounts],
            transactions=[t.to_domain() for t in request_body.transactions],
            goals=[g.to_domain() for g in request_body.goals],
            lookback_days=lookback_days,
            as_of=request_body.as_of,
        )
    except DomainException as e:
        record_calculation_error("baseline", e)
        logging.warning(f"Baseline estimate rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation_error("baseline", e)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_calculation("baseline")
    log_calculation(
        request_id,
        "baseline",
        (time.time() - start_time) * 1000,
        scope=scope.value,
        monthly_amount=monthly_amount,
    )

    return BaselineResponse(scope=scope, monthly_amount=monthly_amount)
