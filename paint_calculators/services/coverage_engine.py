"""
coverage_engine.py — Paint coverage and material quantity calculations.

Covers:
  - Single-product coverage (theoretical / practical rate, gallons, containers, cost)
  - Layered coating systems (primer → intermediate → topcoat)
  - Primer allowance with fixed primer assumptions

Formula (SSPC / PDCA convention):
    theoretical (sq ft/gal) = K × (volume solids / 100) / DFT
    practical               = theoretical × (transfer efficiency / 100)
with K = 1604 sq ft/gal at 1 mil DFT and 100 % solids.

Rounding policy: coverage rates to 0.1 (nearest), material quantities
UP to 0.1 gal, currency to the nearest cent.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..config import DEFAULT_CONSTANTS, CalculatorConstants
from ..exceptions import InvalidInput
from ..models.coverage_schema import (
    CoatingLayer,
    CoverageResult,
    CoverageSpec,
    LayerResult,
    MultiCoatResult,
    MultiCoatSpec,
    SystemSummary,
)
from .rounding import ceil_count, round_nearest, round_up, round_whole, safe_div

logger = logging.getLogger("paintcalc-coverage")

# Fixed layer order for coating systems
LAYER_ORDER: Tuple[str, ...] = ("primer", "intermediate", "topcoat")

# Primer allowance assumptions
PRIMER_VOLUME_SOLIDS: float = 35.0
PRIMER_DFT_MILS: float = 1.5
PRIMER_TRANSFER_EFFICIENCY: float = 75.0


def _format_mils(value: float) -> str:
    """3.0 → '3', 4.5 → '4.5'."""
    return f"{value:g}"


class CoverageEngine:
    """
    Stateless coverage calculator. Reference values come from the injected
    ``CalculatorConstants`` (default ``DEFAULT_CONSTANTS``).
    """

    def __init__(self, constants: Optional[CalculatorConstants] = None) -> None:
        self.constants: CalculatorConstants = constants or DEFAULT_CONSTANTS

    # ------------------------------------------------------------------
    # 1. Single-product coverage
    # ------------------------------------------------------------------

    def calculate_paint_coverage(self, spec: CoverageSpec) -> CoverageResult:
        """
        Gallons of material needed to coat ``spec.surface_area``.

        Raises
        ------
        InvalidInput
            surface_area <= 0, volume_solids outside (0, 100], or target_dft <= 0.
            Coats, transfer efficiency and price are not range-checked.

        Returns
        -------
        CoverageResult with rates, per-coat / total / with-waste gallons,
        5-gal and 1-gal container counts (rounded up from the unrounded total)
        and estimated cost (0 when no price is given).
        """
        if spec.surface_area <= 0:
            raise InvalidInput("Surface area must be greater than 0")
        if spec.volume_solids <= 0 or spec.volume_solids > 100:
            raise InvalidInput("Volume solids must be between 0 and 100")
        if spec.target_dft <= 0:
            raise InvalidInput("Target DFT must be greater than 0")

        c = self.constants

        theoretical = (c.coverage_constant * spec.volume_solids / 100.0) / spec.target_dft
        practical = theoretical * (spec.transfer_efficiency / 100.0)

        gallons_per_coat = safe_div(spec.surface_area, practical, "gallons per coat")
        total_gallons = gallons_per_coat * spec.coats

        waste_gallons = total_gallons * c.waste_allowance
        total_with_waste = total_gallons + waste_gallons

        # Partial containers still have to be bought whole
        five_gallon_buckets = ceil_count(total_with_waste / c.large_container_gallons)
        one_gallon_cans = ceil_count(total_with_waste)

        estimated_cost = (
            total_with_waste * spec.price_per_gallon if spec.price_per_gallon > 0 else 0.0
        )

        result = CoverageResult(
            theoretical_coverage=round_nearest(theoretical, 1),
            practical_coverage=round_nearest(practical, 1),
            gallons_per_coat=round_up(gallons_per_coat, 1),
            total_gallons=round_up(total_gallons, 1),
            total_with_waste=round_up(total_with_waste, 1),
            waste_factor_gallons=round_up(waste_gallons, 1),
            five_gallon_buckets=five_gallon_buckets,
            one_gallon_cans=one_gallon_cans,
            estimated_cost=round_nearest(estimated_cost, 2),
            coverage_per_gallon=round_whole(practical),
        )
        logger.debug(
            f"Coverage: {spec.surface_area} sq ft × {spec.coats} coat(s) @ "
            f"{spec.target_dft} mils → {result.total_with_waste} gal incl. waste"
        )
        return result

    # ------------------------------------------------------------------
    # 2. Layered coating system
    # ------------------------------------------------------------------

    def calculate_multi_coat_system(self, spec: MultiCoatSpec) -> MultiCoatResult:
        """
        Material, film build and cost for a primer / intermediate / topcoat system.

        Layers are evaluated in fixed order and skipped when absent or when
        ``coats <= 0``. A layer inherits ``spec.transfer_efficiency`` unless it
        sets its own. Layer cost is priced on the layer's total gallons
        (before waste). Any layer failing validation aborts the whole system
        with ``InvalidInput``; partial results are never returned.
        """
        layers: Dict[str, LayerResult] = {}
        descriptions: List[str] = []
        total_cost = 0.0
        total_dft = 0.0
        total_gallons = 0.0

        system_layers: Dict[str, Optional[CoatingLayer]] = {
            "primer": spec.system.primer,
            "intermediate": spec.system.intermediate,
            "topcoat": spec.system.topcoat,
        }
        for layer_name in LAYER_ORDER:
            layer = system_layers[layer_name]
            if layer is None or layer.coats <= 0:
                continue

            price = layer.price_per_gallon or 0.0
            transfer_efficiency = (
                layer.transfer_efficiency
                if layer.transfer_efficiency is not None
                else spec.transfer_efficiency
            )
            coverage = self.calculate_paint_coverage(CoverageSpec(
                surface_area=spec.surface_area,
                coats=layer.coats,
                volume_solids=layer.volume_solids,
                target_dft=layer.dft,
                transfer_efficiency=transfer_efficiency,
                price_per_gallon=price,
            ))

            layer_dft = layer.dft * layer.coats
            layer_cost = coverage.total_gallons * price

            layers[layer_name] = LayerResult(
                **coverage.model_dump(),
                total_dft=layer_dft,
                cost=round_nearest(layer_cost, 2),
                product_name=layer.product_name,
            )
            descriptions.append(f"{layer_name.capitalize()}: {_format_mils(layer_dft)} mils DFT")

            total_cost += layer_cost
            total_dft += layer_dft
            total_gallons += coverage.total_gallons

        summary = SystemSummary(
            total_dft=round_nearest(total_dft, 1),
            total_cost=round_nearest(total_cost, 2),
            cost_per_square_foot=round_nearest(
                safe_div(total_cost, spec.surface_area, "cost per square foot"), 2
            ),
            total_gallons=round_nearest(total_gallons, 1),
            system_description=" | ".join(descriptions),
        )
        logger.debug(f"Coating system: {summary.system_description or 'no layers'}")
        return MultiCoatResult(layers=layers, summary=summary)

    # ------------------------------------------------------------------
    # 3. Primer allowance
    # ------------------------------------------------------------------

    def calculate_primer_needed(
        self,
        surface_area: float,
        substrate_type: str = "drywall",
        porosity: str = "medium",
    ) -> CoverageResult:
        """
        Single-coat primer quantity at 35 % solids, 1.5 mils DFT and 75 %
        transfer efficiency. ``substrate_type`` and ``porosity`` do not yet
        change the estimate.
        """
        logger.debug(f"Primer estimate for {substrate_type} substrate, {porosity} porosity")
        return self.calculate_paint_coverage(CoverageSpec(
            surface_area=surface_area,
            coats=1,
            volume_solids=PRIMER_VOLUME_SOLIDS,
            target_dft=PRIMER_DFT_MILS,
            transfer_efficiency=PRIMER_TRANSFER_EFFICIENCY,
        ))
