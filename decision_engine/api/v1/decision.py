"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from decision_engine.api.v1.schemas import DecisionRequest, DecisionResponse
from decision_engine.api.dependencies import get_decision_engine, get_request_id
from decision_engine.domain.decision import DecisionEngine
from decision_engine.domain.exceptions import NoValidLoanError
from decision_engine.infrastructure.observability.metrics import record_decision
from decision_engine.infrastructure.observability.logging import log_decision

router = APIRouter()


@router.post(
    "/loan/decision",
    response_model=DecisionResponse,
    responses={400: {"model": DecisionResponse}, 404: {"model": DecisionResponse}},
)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the maximum approvable loan amount and period.

    Flow:
    1. Validate personal code, amount, period and age
    2. Look up the client's credit modifier and reconcile the age
    3. Extend the period until the minimum amount is reachable
    4. Return the approved amount and period, or the rejection reason

    Status: 200 approved, 400 invalid input, 404 no valid loan.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = engine.decide(
            request_body.personal_code,
            request_body.age,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="An unexpected error occurred")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(result)
    log_decision(request_id, request_body.personal_code, result, duration_ms)

    response = DecisionResponse(
        loan_amount=result.approved_amount,
        loan_period=result.approved_period,
        error_message=result.error_message,
    )

    if result.is_approved:
        return response

    status_code = 404 if result.error_kind == NoValidLoanError.kind else 400
    return JSONResponse(status_code=status_code, content=response.model_dump(by_alias=True))
