# ecotrack/schemas/carbon.py
from typing import Any, Dict, Optional

from pydantic import Field

from .base import CamelModel


class CarbonEstimateRequest(CamelModel):
    activity_type: str
    quantity: Optional[float] = Field(None, gt=0)
    sub_type: Optional[str] = None
    description: Optional[str] = None
    use_ai: bool = Field(False, alias="useAI")


class CarbonCalculation(CamelModel):
    activity_type: str
    quantity: float
    factor: Optional[Dict[str, Any]] = None
    method: str


class CarbonEstimateResponse(CamelModel):
    carbon_saved_kg: float
    calculation: CarbonCalculation
