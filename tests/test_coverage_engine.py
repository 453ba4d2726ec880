"""
test_coverage_engine.py — Unit tests for CoverageEngine.

Tests cover:
  - calculate_paint_coverage: K-constant formula, ceiling vs nearest rounding,
    container counts, cost, boundary validation
  - calculate_multi_coat_system: layer order, film build totals, layer
    transfer efficiency overrides, failure propagation
  - calculate_primer_needed: fixed primer assumptions

All tests are pure unit tests; no database or external services required.
"""

import math
import pytest

from paint_calculators.exceptions import InvalidInput
from paint_calculators.models import CoatingLayer, CoatingSystem, CoverageSpec, MultiCoatSpec


# ---------------------------------------------------------------------------
# Constants mirrored from config (for assertion math)
# ---------------------------------------------------------------------------
COVERAGE_CONSTANT = 1604.0
WASTE_ALLOWANCE = 0.10


def _spec(**overrides):
    values = {"surface_area": 1000.0, "coats": 1, "volume_solids": 50.0, "target_dft": 4.0}
    values.update(overrides)
    return CoverageSpec(**values)


# ===========================================================================
# Class 1: Single-product coverage
# ===========================================================================

class TestPaintCoverage:
    """Tests for calculate_paint_coverage."""

    def test_reference_example(self, coverage_engine, reference_coverage_spec):
        """
        1000 sq ft, 2 coats, 65 % solids, 5 mils, 65 % TE:
        theoretical 208.52 → 208.5, practical 135.538 → 135.5,
        per coat 7.378 → 7.4, total 14.756 → 14.8.
        """
        result = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        assert result.theoretical_coverage == pytest.approx(208.5)
        assert result.practical_coverage == pytest.approx(135.5)
        assert result.gallons_per_coat == pytest.approx(7.4)
        assert result.total_gallons == pytest.approx(14.8)
        assert result.estimated_cost > 0

    def test_material_quantities_round_up(self, coverage_engine, reference_coverage_spec):
        """
        total with waste = 14.756 × 1.1 = 16.2316 → 16.3 (not 16.2);
        waste = 1.4756 → 1.5.
        """
        result = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        assert result.total_with_waste == pytest.approx(16.3)
        assert result.waste_factor_gallons == pytest.approx(1.5)

    def test_cost_rounds_to_nearest_cent(self, coverage_engine, reference_coverage_spec):
        """Cost uses the unrounded total: 16.2316 × 45 = 730.42 (nearest, not ceiling)."""
        result = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        assert result.estimated_cost == pytest.approx(730.42, abs=0.005)

    def test_coverage_per_gallon_is_whole_number(self, coverage_engine, reference_coverage_spec):
        """Practical 135.538 sq ft/gal displays as 136."""
        result = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        assert result.coverage_per_gallon == 136
        assert isinstance(result.coverage_per_gallon, int)

    def test_container_counts_round_up(self, coverage_engine, reference_coverage_spec):
        """16.2316 gal → 4 five-gallon pails and 17 one-gallon cans."""
        result = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        assert result.five_gallon_buckets == 4
        assert result.one_gallon_cans == 17

    def test_no_price_means_zero_cost(self, coverage_engine):
        result = coverage_engine.calculate_paint_coverage(_spec())
        assert result.estimated_cost == 0.0

    def test_default_transfer_efficiency_is_65(self, coverage_engine):
        """theoretical = 1604 × 0.5 / 4 = 200.5; practical = 200.5 × 0.65 = 130.325 → 130.3."""
        result = coverage_engine.calculate_paint_coverage(_spec())
        assert result.theoretical_coverage == pytest.approx(200.5)
        assert result.practical_coverage == pytest.approx(130.3)

    @pytest.mark.parametrize("area, coats, solids, dft, te", [
        (50, 1, 30, 2, 65),
        (2500, 3, 80, 6, 65),
        (12, 2, 100, 0.5, 65),
        (1, 1, 100, 1, 100),
        (1000, 2, 65, 5, 65),
        (7300, 1, 45, 3, 35),
        (333.3, 4, 72.5, 2.5, 90),
        (15000, 2, 55, 8, 75),
        (820, 3, 38, 1.5, 85),
    ])
    def test_totals_and_containers_bound_total_with_waste(
        self, coverage_engine, area, coats, solids, dft, te
    ):
        """
        total_with_waste >= total_gallons >= gallons_per_coat > 0, and whole
        containers always cover the rounded total_with_waste.
        """
        result = coverage_engine.calculate_paint_coverage(_spec(
            surface_area=area, coats=coats, volume_solids=solids,
            target_dft=dft, transfer_efficiency=te,
        ))
        assert result.total_with_waste >= result.total_gallons >= result.gallons_per_coat > 0
        assert result.five_gallon_buckets >= math.ceil(result.total_with_waste / 5)
        assert result.one_gallon_cans >= math.ceil(result.total_with_waste)

    def test_waste_is_ten_percent(self, coverage_engine):
        """total_with_waste ≈ total_gallons × 1.10 within the 0.1-gal rounding step."""
        result = coverage_engine.calculate_paint_coverage(
            _spec(surface_area=4321.0, coats=3, volume_solids=72.0, target_dft=3.5)
        )
        assert result.total_with_waste == pytest.approx(
            result.total_gallons * (1 + WASTE_ALLOWANCE), abs=0.2
        )

    def test_deterministic(self, coverage_engine, reference_coverage_spec):
        first = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        second = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        assert first == second

    def test_result_is_immutable(self, coverage_engine, reference_coverage_spec):
        result = coverage_engine.calculate_paint_coverage(reference_coverage_spec)
        with pytest.raises(Exception):
            result.total_gallons = 0.0

    @pytest.mark.parametrize("overrides", [
        {"surface_area": 0.0},
        {"surface_area": -10.0},
        {"volume_solids": 0.0},
        {"volume_solids": 101.0},
        {"target_dft": 0.0},
    ])
    def test_invalid_inputs_raise(self, coverage_engine, overrides):
        with pytest.raises(InvalidInput):
            coverage_engine.calculate_paint_coverage(_spec(**overrides))

    def test_error_messages(self, coverage_engine):
        with pytest.raises(InvalidInput, match="Surface area must be greater than 0"):
            coverage_engine.calculate_paint_coverage(_spec(surface_area=0.0))
        with pytest.raises(InvalidInput, match="Volume solids must be between 0 and 100"):
            coverage_engine.calculate_paint_coverage(_spec(volume_solids=150.0))
        with pytest.raises(InvalidInput, match="Target DFT must be greater than 0"):
            coverage_engine.calculate_paint_coverage(_spec(target_dft=-1.0))

    def test_invalid_input_is_value_error(self, coverage_engine):
        with pytest.raises(ValueError):
            coverage_engine.calculate_paint_coverage(_spec(surface_area=0.0))

    def test_boundary_values_accepted(self, coverage_engine):
        """volume_solids = 100 and a tiny DFT are valid."""
        full_solids = coverage_engine.calculate_paint_coverage(_spec(volume_solids=100.0))
        thin_film = coverage_engine.calculate_paint_coverage(_spec(target_dft=0.0001))
        assert full_solids.theoretical_coverage == pytest.approx(401.0)
        assert thin_film.total_gallons > 0

    def test_zero_transfer_efficiency_is_not_rejected(self, coverage_engine):
        """Transfer efficiency is unguarded; 0 % gives an infinite quantity."""
        result = coverage_engine.calculate_paint_coverage(_spec(transfer_efficiency=0.0))
        assert math.isinf(result.gallons_per_coat)
        assert math.isinf(result.five_gallon_buckets)

    def test_injected_constants_are_used(self, metric_pail_constants, reference_coverage_spec):
        """
        4-gal containers and 15 % waste: 14.756 × 1.15 = 16.969 → 17.0 gal,
        ceil(16.969 / 4) = 5 containers.
        """
        from paint_calculators.services.coverage_engine import CoverageEngine
        result = CoverageEngine(metric_pail_constants).calculate_paint_coverage(
            reference_coverage_spec
        )
        assert result.total_with_waste == pytest.approx(17.0)
        assert result.five_gallon_buckets == 5


# ===========================================================================
# Class 2: Multi-coat system
# ===========================================================================

class TestMultiCoatSystem:
    """Tests for calculate_multi_coat_system."""

    def test_primer_plus_topcoat_total_dft(self, coverage_engine, two_layer_system):
        """Primer 3 × 1 + topcoat 3 × 2 = 9 mils."""
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=1000.0, system=two_layer_system, transfer_efficiency=65.0)
        )
        assert result.summary.total_dft == 9
        assert result.summary.total_gallons > 0
        assert "primer" in result.layers
        assert "topcoat" in result.layers
        assert "intermediate" not in result.layers

    def test_topcoat_only(self, coverage_engine):
        system = CoatingSystem(topcoat=CoatingLayer(volume_solids=65.0, dft=5.0, coats=2))
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=500.0, system=system)
        )
        assert result.summary.total_dft == 10
        assert list(result.layers) == ["topcoat"]
        assert result.summary.total_cost == 0.0

    def test_layer_costs_use_total_gallons(self, coverage_engine, two_layer_system):
        """
        Primer: 1000 / (401 × 0.65) = 3.837 → 3.9 gal × $35 = 136.50
        Topcoat: 2 × 1000 / (347.53 × 0.65) = 8.854 → 8.9 gal × $45 = 400.50
        System: 537.00, 0.54 $/sq ft, 12.8 gal.
        """
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=1000.0, system=two_layer_system)
        )
        assert result.layers["primer"].cost == pytest.approx(136.5)
        assert result.layers["topcoat"].cost == pytest.approx(400.5)
        assert result.summary.total_cost == pytest.approx(537.0)
        assert result.summary.cost_per_square_foot == pytest.approx(0.54)
        assert result.summary.total_gallons == pytest.approx(12.8)

    def test_layer_carries_product_name_and_dft(self, coverage_engine, two_layer_system):
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=1000.0, system=two_layer_system)
        )
        assert result.layers["primer"].product_name == "Epoxy primer"
        assert result.layers["topcoat"].total_dft == 6

    def test_system_description_order_and_omission(self, coverage_engine, two_layer_system):
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=1000.0, system=two_layer_system)
        )
        assert result.summary.system_description == "Primer: 3 mils DFT | Topcoat: 6 mils DFT"

    def test_three_layers_in_fixed_order(self, coverage_engine):
        system = CoatingSystem(
            topcoat=CoatingLayer(volume_solids=60.0, dft=2.0, coats=1),
            intermediate=CoatingLayer(volume_solids=70.0, dft=4.5, coats=1),
            primer=CoatingLayer(volume_solids=80.0, dft=3.0, coats=1),
        )
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=800.0, system=system)
        )
        assert list(result.layers) == ["primer", "intermediate", "topcoat"]
        assert result.summary.system_description == (
            "Primer: 3 mils DFT | Intermediate: 4.5 mils DFT | Topcoat: 2 mils DFT"
        )
        assert result.summary.total_dft == pytest.approx(9.5)

    def test_zero_coat_layer_is_skipped(self, coverage_engine):
        system = CoatingSystem(
            primer=CoatingLayer(volume_solids=80.0, dft=3.0, coats=0),
            topcoat=CoatingLayer(volume_solids=60.0, dft=2.0, coats=1),
        )
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=800.0, system=system)
        )
        assert "primer" not in result.layers
        assert result.summary.system_description == "Topcoat: 2 mils DFT"

    def test_empty_system(self, coverage_engine):
        result = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=800.0, system=CoatingSystem())
        )
        assert result.layers == {}
        assert result.summary.total_dft == 0
        assert result.summary.system_description == ""

    def test_layer_transfer_efficiency_override(self, coverage_engine):
        """A brushed stripe coat at 85 % needs less material than the system's 65 %."""
        inherited = CoatingLayer(volume_solids=60.0, dft=3.0, coats=1)
        overridden = CoatingLayer(volume_solids=60.0, dft=3.0, coats=1, transfer_efficiency=85.0)
        base = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=1000.0, system=CoatingSystem(primer=inherited))
        )
        brushed = coverage_engine.calculate_multi_coat_system(
            MultiCoatSpec(surface_area=1000.0, system=CoatingSystem(primer=overridden))
        )
        assert brushed.layers["primer"].practical_coverage > base.layers["primer"].practical_coverage
        assert brushed.summary.total_gallons < base.summary.total_gallons

    def test_invalid_layer_aborts_system(self, coverage_engine):
        system = CoatingSystem(
            primer=CoatingLayer(volume_solids=75.0, dft=3.0, coats=1),
            topcoat=CoatingLayer(volume_solids=120.0, dft=3.0, coats=2),
        )
        with pytest.raises(InvalidInput):
            coverage_engine.calculate_multi_coat_system(
                MultiCoatSpec(surface_area=1000.0, system=system)
            )


# ===========================================================================
# Class 3: Primer allowance
# ===========================================================================

class TestPrimerNeeded:
    """Tests for calculate_primer_needed (35 % solids, 1.5 mils, 75 % TE)."""

    def test_primer_assumptions(self, coverage_engine):
        """
        theoretical = 1604 × 0.35 / 1.5 = 374.27 → 374.3
        practical   = 374.27 × 0.75 = 280.7 → 280.7
        gallons     = 1000 / 280.7 = 3.563 → 3.6
        """
        result = coverage_engine.calculate_primer_needed(1000.0)
        assert result.theoretical_coverage == pytest.approx(374.3)
        assert result.practical_coverage == pytest.approx(280.7)
        assert result.total_gallons == pytest.approx(3.6)

    def test_substrate_does_not_change_estimate(self, coverage_engine):
        drywall = coverage_engine.calculate_primer_needed(600.0)
        masonry = coverage_engine.calculate_primer_needed(600.0, "masonry", "high")
        assert drywall == masonry

    def test_invalid_area_raises(self, coverage_engine):
        with pytest.raises(InvalidInput):
            coverage_engine.calculate_primer_needed(0.0)
