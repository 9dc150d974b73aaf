"""GET /v1/clients/{personal_code}/age - Fetch a client's registered age"""

from fastapi import APIRouter, Depends, HTTPException

from decision_engine.api.v1.schemas import ClientAgeResponse
from decision_engine.api.dependencies import get_decision_engine
from decision_engine.domain.decision import DecisionEngine

router = APIRouter()


@router.get("/clients/{personal_code}/age", response_model=ClientAgeResponse)
def get_client_age(personal_code: str, engine: DecisionEngine = Depends(get_decision_engine)):
    """
    Retrieve the birth date stored for a client.

    Returns:
        Stored age, empty if the client has not submitted one yet
    """
    age = engine.registry.age_of(personal_code)
    if age is None:
        raise HTTPException(status_code=404, detail="Client not found")

    return ClientAgeResponse(personal_code=personal_code, age=age)
