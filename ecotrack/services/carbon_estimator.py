# ecotrack/services/carbon_estimator.py
"""
Static carbon-savings estimates (kg CO2 saved) per activity type.
"""

import re
from typing import Optional

CARBON_FACTORS = {
    "tree-planting": {"perTree": 21.77, "unit": "trees"},  # per tree per year
    "recycling": {"plastic": 2.5, "paper": 3.5, "metal": 4.0, "unit": "kg"},
    "cleanup": {"perBag": 0.5, "unit": "bags"},
    "biking": {"perKm": 0.16, "unit": "km"},  # instead of driving
    "composting": {"perKg": 0.8, "unit": "kg"},
}

DEFAULT_FACTOR = 1.0
DEFAULT_RECYCLING_FACTOR = 2.5


def estimate_carbon(
    activity_type: Optional[str], quantity: float = 1, sub_type: Optional[str] = None
) -> float:
    """Returns the estimated kg of CO2 saved, rounded to two decimals."""
    if activity_type == "tree-planting":
        saved = quantity * CARBON_FACTORS["tree-planting"]["perTree"]
    elif activity_type == "recycling":
        material = sub_type or "plastic"
        factor = CARBON_FACTORS["recycling"].get(material)
        if not isinstance(factor, (int, float)):
            factor = DEFAULT_RECYCLING_FACTOR
        saved = quantity * factor
    elif activity_type == "cleanup":
        saved = quantity * CARBON_FACTORS["cleanup"]["perBag"]
    elif activity_type == "biking":
        saved = quantity * CARBON_FACTORS["biking"]["perKm"]
    elif activity_type == "composting":
        saved = quantity * CARBON_FACTORS["composting"]["perKg"]
    else:
        saved = quantity * DEFAULT_FACTOR

    return round(saved, 2)


def quantity_from_description(description: Optional[str]) -> int:
    """First integer mentioned in the text, or 1."""
    match = re.search(r"\d+", description or "")
    return int(match.group()) if match else 1


def estimate_from_description(description: Optional[str], activity_type: Optional[str]) -> float:
    return estimate_carbon(activity_type, quantity_from_description(description))
