from typing import List, Optional

from pydantic import BaseModel, Field


class WFTSpec(BaseModel):
    target_dft: float = Field(..., description="mils")
    volume_solids: float = Field(..., description="%")
    reduction_percent: float = Field(0.0, description="Thinning, % by volume")

    model_config = {"frozen": True}


class WFTResult(BaseModel):
    wet_film_thickness: float
    adjusted_solids: float
    wet_film_gauge: str
    application_tips: List[str]

    model_config = {"frozen": True}


class Dimensions(BaseModel):
    """Shape dimensions in feet; which fields apply depends on the shape."""
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    diameter: Optional[float] = None
    include_ends: bool = False
    total_area: Optional[float] = Field(None, description="Pre-measured area for complex shapes")

    model_config = {"frozen": True}


class Deduction(BaseModel):
    """Opening excluded from the painted area (window, door, louvre)."""
    width: float
    height: float
    quantity: int = 1

    model_config = {"frozen": True}


class SurfaceAreaSpec(BaseModel):
    shape: str = Field(..., description="rectangular | cylindrical | spherical | complex")
    dimensions: Dimensions
    deductions: List[Deduction] = Field(default_factory=list)

    model_config = {"frozen": True}


class AreaMeasurement(BaseModel):
    square_feet: float
    square_meters: float
    square_yards: float

    model_config = {"frozen": True}


class SurfaceAreaResult(BaseModel):
    gross_area: float
    deduction_area: float
    net_area: float
    waste_allowance: float
    measurement: AreaMeasurement

    model_config = {"frozen": True}


class CoatBuild(BaseModel):
    wft: float = Field(..., description="Wet film applied, mils")
    volume_solids: float

    model_config = {"frozen": True}


class FilmBuildResult(BaseModel):
    total_dft: float
    coat_builds: List[float]

    model_config = {"frozen": True}


class MixRatioResult(BaseModel):
    part_a: float
    part_b: float
    part_c: Optional[float] = None

    model_config = {"frozen": True}


class SolventReductionResult(BaseModel):
    solvent_volume: float
    total_volume: float

    model_config = {"frozen": True}


class ProfileDepthResult(BaseModel):
    min_profile: float
    max_profile: float
    typical: float

    model_config = {"frozen": True}
