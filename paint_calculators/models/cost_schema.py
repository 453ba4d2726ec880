from typing import List, Optional

from pydantic import BaseModel, Field

from .coverage_schema import CoatingSystem


class ProjectSurface(BaseModel):
    """A named surface with its own coating system and production-rate keys."""
    description: str
    area: float = Field(..., description="sq ft")
    type: str = Field(..., description="walls | ceilings | floors | trim")
    condition: str = Field(..., description="good | fair | poor")
    height: Optional[float] = None
    coating_system: CoatingSystem
    transfer_efficiency: Optional[float] = None

    model_config = {"frozen": True}


class ProjectCostSpec(BaseModel):
    surfaces: List[ProjectSurface]
    labor_rate: float = Field(..., description="$/h per painter")
    crew_size: int
    overhead_percent: float
    profit_margin: float = Field(..., description="% applied on direct costs + overhead")

    model_config = {"frozen": True}


class SurfaceCostLine(BaseModel):
    description: str
    area: float
    material_cost: float
    labor_hours: float
    labor_cost: float

    model_config = {"frozen": True}


class ProjectCostSummary(BaseModel):
    total_surface_area: float
    material_cost: float
    labor_cost: float
    labor_hours: float
    direct_costs: float
    overhead: float
    profit: float
    total: float
    price_per_sq_ft: float

    model_config = {"frozen": True}


class ProjectCostResult(BaseModel):
    breakdown: List[SurfaceCostLine]
    summary: ProjectCostSummary

    model_config = {"frozen": True}


class CurrentSystem(BaseModel):
    maintenance_cost: float = Field(..., description="Maintenance spend per service life")
    lifespan: float = Field(..., description="Years")
    heat_transfer: Optional[float] = None

    model_config = {"frozen": True}


class ProposedSystem(BaseModel):
    initial_cost: float
    maintenance_cost: float
    lifespan: float
    reflectivity: Optional[float] = None

    model_config = {"frozen": True}


class ROISpec(BaseModel):
    current_system: CurrentSystem
    proposed_system: ProposedSystem
    facility_size: float = Field(..., description="sq ft")
    energy_costs: Optional[float] = Field(None, description="$/kWh; default from constants")
    discount_rate: Optional[float] = Field(None, description="Fraction; default from constants")

    model_config = {"frozen": True}


class CurrentSystemCost(BaseModel):
    annual_cost: float
    ten_year_cost: float

    model_config = {"frozen": True}


class ProposedSystemSavings(BaseModel):
    initial_cost: float
    annual_savings: float
    ten_year_savings: float

    model_config = {"frozen": True}


class ROIMetrics(BaseModel):
    payback_period: float
    ten_year_roi: float
    net_present_value: float

    model_config = {"frozen": True}


class ROIResult(BaseModel):
    current_system: CurrentSystemCost
    proposed_system: ProposedSystemSavings
    roi: ROIMetrics

    model_config = {"frozen": True}
