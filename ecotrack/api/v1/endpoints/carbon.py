# ecotrack/api/v1/endpoints/carbon.py
from fastapi import APIRouter

from ecotrack.schemas.carbon import CarbonEstimateRequest, CarbonEstimateResponse
from ecotrack.services.carbon_estimator import (
    CARBON_FACTORS,
    estimate_carbon,
    estimate_from_description,
)

router = APIRouter(prefix="/carbon", tags=["Carbon"])


@router.post("/estimate", response_model=CarbonEstimateResponse)
def estimate(request_in: CarbonEstimateRequest):
    """
    Estimates kg of CO2 saved. With ``useAI`` and a description, the
    quantity is read from the description text instead of the request.
    """
    quantity = request_in.quantity or 1
    if request_in.use_ai and request_in.description:
        carbon_saved = estimate_from_description(
            request_in.description, request_in.activity_type
        )
    else:
        carbon_saved = estimate_carbon(
            request_in.activity_type, quantity, request_in.sub_type
        )

    return {
        "carbon_saved_kg": carbon_saved,
        "calculation": {
            "activity_type": request_in.activity_type,
            "quantity": quantity,
            "factor": CARBON_FACTORS.get(request_in.activity_type),
            "method": "ai-enhanced" if request_in.use_ai else "deterministic",
        },
    }
