"""
Quick calculator endpoints. A null result means the inputs were invalid.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict

from .. import quick_calcs

router = APIRouter(prefix="/calculators", tags=["calculators"])


class QuickInput(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)


class AreaInput(QuickInput):
    width_m: str = ""
    length_m: str = ""


class CostInput(QuickInput):
    area_m2: str = ""
    price_per_m2: str = ""


class OccupancyInput(QuickInput):
    building_area_m2: str = ""
    land_area_m2: str = ""


class LandUseInput(QuickInput):
    total_built_area_m2: str = ""
    land_area_m2: str = ""


class QuickResult(BaseModel):
    result: Optional[float] = None


@router.post("/area", response_model=QuickResult)
def area(data: AreaInput):
    return QuickResult(result=quick_calcs.rectangle_area(data.width_m, data.length_m))


@router.post("/cost", response_model=QuickResult)
def cost(data: CostInput):
    return QuickResult(result=quick_calcs.cost_estimate(data.area_m2, data.price_per_m2))


@router.post("/occupancy", response_model=QuickResult)
def occupancy(data: OccupancyInput):
    return QuickResult(result=quick_calcs.occupancy_rate(data.building_area_m2, data.land_area_m2))


@router.post("/land-use", response_model=QuickResult)
def land_use(data: LandUseInput):
    return QuickResult(result=quick_calcs.land_use_coefficient(
        data.total_built_area_m2, data.land_area_m2))
