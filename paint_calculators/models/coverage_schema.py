from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

from ..config import DEFAULT_TRANSFER_EFFICIENCY


class CoverageSpec(BaseModel):
    """Single-product coverage request. Units: sq ft, mils, %, $/gal."""
    surface_area: float = Field(..., description="Area to coat, sq ft (> 0)")
    coats: int = Field(1, description="Number of coats")
    volume_solids: float = Field(..., description="Volume solids %, in (0, 100]")
    target_dft: float = Field(..., description="Dry film thickness per coat, mils (> 0)")
    transfer_efficiency: float = Field(DEFAULT_TRANSFER_EFFICIENCY, description="% of material reaching the surface")
    price_per_gallon: float = Field(0.0, description="Optional price; 0 disables costing")

    model_config = {"frozen": True}


class CoverageResult(BaseModel):
    theoretical_coverage: float      # sq ft/gal
    practical_coverage: float        # sq ft/gal after transfer losses
    gallons_per_coat: float
    total_gallons: float
    total_with_waste: float
    waste_factor_gallons: float
    five_gallon_buckets: Union[int, float]   # whole count; inf only for degenerate input
    one_gallon_cans: Union[int, float]
    estimated_cost: float
    coverage_per_gallon: Union[int, float]   # practical coverage, whole sq ft

    model_config = {"frozen": True}


class CoatingLayer(BaseModel):
    """One layer of a coating system (primer, intermediate or topcoat)."""
    volume_solids: float
    dft: float = Field(..., description="DFT per coat, mils")
    coats: int
    price_per_gallon: Optional[float] = None
    product_name: Optional[str] = None
    transfer_efficiency: Optional[float] = Field(
        None, description="Overrides the system transfer efficiency for this layer"
    )

    model_config = {"frozen": True}


class CoatingSystem(BaseModel):
    primer: Optional[CoatingLayer] = None
    intermediate: Optional[CoatingLayer] = None
    topcoat: Optional[CoatingLayer] = None

    model_config = {"frozen": True}


class MultiCoatSpec(BaseModel):
    surface_area: float
    system: CoatingSystem
    transfer_efficiency: float = DEFAULT_TRANSFER_EFFICIENCY

    model_config = {"frozen": True}


class LayerResult(CoverageResult):
    """Coverage figures for one layer plus its film build and material cost."""
    total_dft: float
    cost: float
    product_name: Optional[str] = None


class SystemSummary(BaseModel):
    total_dft: float
    total_cost: float
    cost_per_square_foot: float
    total_gallons: float
    system_description: str

    model_config = {"frozen": True}


class MultiCoatResult(BaseModel):
    layers: Dict[str, LayerResult]   # insertion order: primer, intermediate, topcoat
    summary: SystemSummary

    model_config = {"frozen": True}
