"""
cost_engine.py — Project cost roll-up and coating-upgrade ROI.

Covers:
  - Project estimate: material (via CoverageEngine coating systems) + labour
    from production rates, then overhead and profit
  - Labour cost for a single area
  - ROI / payback / NPV of replacing an existing coating system

Roll-up order:
    direct   = material + labour
    overhead = direct × overhead %
    profit   = (direct + overhead) × profit %
    total    = direct + overhead + profit
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..config import DEFAULT_CONSTANTS, CalculatorConstants
from ..models.coverage_schema import MultiCoatSpec
from ..models.cost_schema import (
    CurrentSystemCost,
    ProjectCostResult,
    ProjectCostSpec,
    ProjectCostSummary,
    ProposedSystemSavings,
    ROIMetrics,
    ROIResult,
    ROISpec,
    SurfaceCostLine,
)
from .coverage_engine import CoverageEngine
from .rounding import round_nearest, round_whole, safe_div

logger = logging.getLogger("paintcalc-cost")

# Energy model coefficients for ROI
HEAT_TRANSFER_ENERGY_FACTOR: float = 0.01
REFLECTIVITY_ENERGY_FACTOR: float = 0.0015


class SurfaceType(str, Enum):
    WALLS = "walls"
    CEILINGS = "ceilings"
    FLOORS = "floors"
    TRIM = "trim"


class SurfaceCondition(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


def _coerce_enum(enum_cls, value: str):
    """Enum member for ``value`` (exact, case-sensitive) or None when it is not a known key."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


class CostEngine:
    """
    Project estimating and ROI engine. Material quantities come from a
    ``CoverageEngine`` sharing the same constants.
    """

    def __init__(
        self,
        constants: Optional[CalculatorConstants] = None,
        coverage_engine: Optional[CoverageEngine] = None,
    ) -> None:
        self.constants: CalculatorConstants = constants or DEFAULT_CONSTANTS
        self.coverage_engine: CoverageEngine = coverage_engine or CoverageEngine(self.constants)

        # (surface type, condition) → sq ft/h
        self._production_rates: Dict[Tuple[SurfaceType, SurfaceCondition], float] = {}
        for surface_type in SurfaceType:
            by_condition = self.constants.estimating_rates.get(surface_type.value, {})
            for condition in SurfaceCondition:
                if condition.value in by_condition:
                    self._production_rates[(surface_type, condition)] = by_condition[condition.value]

    # ------------------------------------------------------------------
    # 1. Production rates & labour
    # ------------------------------------------------------------------

    def get_production_rate(self, surface_type: str, condition: str) -> float:
        """
        Sq ft per hour for a surface type / condition pair.

        Unknown types or conditions fall back to ``default_production_rate``
        (150 sq ft/h).
        """
        key = (_coerce_enum(SurfaceType, surface_type), _coerce_enum(SurfaceCondition, condition))
        rate = self._production_rates.get(key)
        if rate is None:
            logger.debug(
                f"No production rate for ({surface_type}, {condition}); "
                f"using {self.constants.default_production_rate} sq ft/h"
            )
            return self.constants.default_production_rate
        return rate

    def calculate_labor_cost(
        self,
        area: float,
        labor_rate: float,
        production_rate: Optional[float] = None,
    ) -> float:
        """
        Labour cost for ``area`` sq ft at ``production_rate`` sq ft/h (default
        150), to the cent.
        """
        if production_rate is None:
            production_rate = self.constants.default_production_rate
        hours = safe_div(area, production_rate, "labour hours")
        return round_nearest(hours * labor_rate, 2)

    # ------------------------------------------------------------------
    # 2. Project estimate
    # ------------------------------------------------------------------

    def estimate_project_cost(self, spec: ProjectCostSpec) -> ProjectCostResult:
        """
        Material, labour, overhead and profit for a set of surfaces.

        Each surface's material cost is its coating-system total; a missing
        or zero transfer efficiency uses the default (65 %). Line labour cost
        is shown to the whole currency unit; summary figures to the cent.
        Coverage validation errors on any surface propagate as InvalidInput.
        """
        c = self.constants
        total_material_cost = 0.0
        total_labor_hours = 0.0
        total_surface_area = 0.0
        breakdown: List[SurfaceCostLine] = []

        for surface in spec.surfaces:
            materials = self.coverage_engine.calculate_multi_coat_system(MultiCoatSpec(
                surface_area=surface.area,
                system=surface.coating_system,
                transfer_efficiency=surface.transfer_efficiency or c.default_transfer_efficiency,
            ))
            material_cost = materials.summary.total_cost

            production_rate = self.get_production_rate(surface.type, surface.condition)
            labor_hours = safe_div(surface.area, production_rate, "surface labour hours")

            total_material_cost += material_cost
            total_labor_hours += labor_hours
            total_surface_area += surface.area

            breakdown.append(SurfaceCostLine(
                description=surface.description,
                area=surface.area,
                material_cost=material_cost,
                labor_hours=round_nearest(labor_hours, 1),
                labor_cost=round_whole(labor_hours * spec.labor_rate * spec.crew_size),
            ))

        labor_cost = total_labor_hours * spec.labor_rate * spec.crew_size
        direct_costs = total_material_cost + labor_cost
        overhead = direct_costs * (spec.overhead_percent / 100.0)
        subtotal = direct_costs + overhead
        profit = subtotal * (spec.profit_margin / 100.0)
        total = subtotal + profit

        summary = ProjectCostSummary(
            total_surface_area=round_whole(total_surface_area),
            material_cost=round_nearest(total_material_cost, 2),
            labor_cost=round_nearest(labor_cost, 2),
            labor_hours=round_nearest(total_labor_hours, 1),
            direct_costs=round_nearest(direct_costs, 2),
            overhead=round_nearest(overhead, 2),
            profit=round_nearest(profit, 2),
            total=round_nearest(total, 2),
            price_per_sq_ft=round_nearest(
                safe_div(total, total_surface_area, "price per square foot"), 2
            ),
        )
        logger.debug(
            f"Project estimate: {len(spec.surfaces)} surface(s), "
            f"{summary.total_surface_area} sq ft, total {summary.total}"
        )
        return ProjectCostResult(breakdown=breakdown, summary=summary)

    # ------------------------------------------------------------------
    # 3. ROI / NPV
    # ------------------------------------------------------------------

    def calculate_npv(
        self,
        annual_cash_flow: float,
        initial_investment: float,
        years: int,
        discount_rate: float,
    ) -> float:
        """NPV = −investment + Σ cash_flow / (1 + r)^y for y = 1 … years (unrounded)."""
        npv = -initial_investment
        for year in range(1, years + 1):
            npv += safe_div(annual_cash_flow, (1.0 + discount_rate) ** year, "NPV discounting")
        return npv

    def calculate_roi(self, spec: ROISpec) -> ROIResult:
        """
        Compare an existing coating system against a proposed replacement.

        Annual cost = maintenance spread over lifespan, plus energy loss for
        the current system and minus reflectivity energy savings for the
        proposed one. Savings, ROI and NPV use the configured horizon
        (10 years). Zero savings or lifespans give non-finite figures.
        """
        c = self.constants
        current = spec.current_system
        proposed = spec.proposed_system
        energy_costs = spec.energy_costs if spec.energy_costs is not None else c.default_energy_cost
        discount_rate = (
            spec.discount_rate if spec.discount_rate is not None else c.default_discount_rate
        )
        horizon = c.roi_horizon_years

        current_annual_maintenance = safe_div(
            current.maintenance_cost, current.lifespan, "current system annual maintenance"
        )
        current_energy_loss = (
            (current.heat_transfer or 0.0) * spec.facility_size * energy_costs
            * HEAT_TRANSFER_ENERGY_FACTOR
        )
        current_total_annual = current_annual_maintenance + current_energy_loss

        proposed_annual_maintenance = safe_div(
            proposed.maintenance_cost, proposed.lifespan, "proposed system annual maintenance"
        )
        proposed_energy_savings = (
            (proposed.reflectivity or 0.0) * spec.facility_size * energy_costs
            * REFLECTIVITY_ENERGY_FACTOR
        )
        proposed_total_annual = proposed_annual_maintenance - proposed_energy_savings

        annual_savings = current_total_annual - proposed_total_annual
        payback_period = safe_div(proposed.initial_cost, annual_savings, "payback period")
        horizon_savings = annual_savings * horizon
        horizon_roi = safe_div(
            horizon_savings - proposed.initial_cost, proposed.initial_cost, "ROI"
        ) * 100.0
        npv = self.calculate_npv(annual_savings, proposed.initial_cost, horizon, discount_rate)

        logger.debug(
            f"ROI: annual savings {round_nearest(annual_savings, 2)}, "
            f"payback {round_nearest(payback_period, 1)} yr"
        )
        return ROIResult(
            current_system=CurrentSystemCost(
                annual_cost=round_nearest(current_total_annual, 2),
                ten_year_cost=round_nearest(current_total_annual * horizon, 2),
            ),
            proposed_system=ProposedSystemSavings(
                initial_cost=proposed.initial_cost,
                annual_savings=round_nearest(annual_savings, 2),
                ten_year_savings=round_nearest(horizon_savings, 2),
            ),
            roi=ROIMetrics(
                payback_period=round_nearest(payback_period, 1),
                ten_year_roi=round_nearest(horizon_roi, 1),
                net_present_value=round_nearest(npv, 2),
            ),
        )
