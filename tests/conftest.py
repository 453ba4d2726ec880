"""
conftest.py — Shared pytest fixtures for the paint calculator test suite.

All tests are pure unit tests that exercise the engines in isolation; no
database, network or file fixtures exist.

Import-path bootstrapping:
    The repository root is inserted into sys.path so that
    ``paint_calculators.*`` imports resolve without an editable install.
"""

import sys
import os
import pytest

# ---------------------------------------------------------------------------
# Ensure the repository root is on the import path before any package imports.
# ---------------------------------------------------------------------------
_ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def coverage_engine():
    """CoverageEngine with DEFAULT_CONSTANTS (K = 1604, 10 % waste, 5-gal pails)."""
    from paint_calculators.services.coverage_engine import CoverageEngine
    return CoverageEngine()


@pytest.fixture(scope="session")
def environmental_engine():
    """EnvironmentalEngine with DEFAULT_CONSTANTS (5 °F margin, Magnus 17.27 / 237.7)."""
    from paint_calculators.services.environmental_engine import EnvironmentalEngine
    return EnvironmentalEngine()


@pytest.fixture(scope="session")
def cost_engine():
    """CostEngine with DEFAULT_CONSTANTS and its own CoverageEngine."""
    from paint_calculators.services.cost_engine import CostEngine
    return CostEngine()


@pytest.fixture(scope="session")
def technical_engine():
    """TechnicalEngine with DEFAULT_CONSTANTS."""
    from paint_calculators.services.technical_engine import TechnicalEngine
    return TechnicalEngine()


@pytest.fixture(scope="session")
def metric_pail_constants():
    """
    Constants variant with a 4-gal large container and 15 % waste; used to
    verify engines read injected constants instead of module globals.
    """
    from paint_calculators.config import DEFAULT_CONSTANTS
    return DEFAULT_CONSTANTS.model_copy(
        update={"large_container_gallons": 4.0, "waste_allowance": 0.15}
    )


# ---------------------------------------------------------------------------
# Shared sample specs
# ---------------------------------------------------------------------------

@pytest.fixture
def reference_coverage_spec():
    """
    1000 sq ft, 2 coats, 65 % solids, 5 mils, 65 % TE, $45/gal.

    theoretical = 1604 × 0.65 / 5  = 208.52 sq ft/gal
    practical   = 208.52 × 0.65    = 135.538
    per coat    = 1000 / 135.538   = 7.378  → 7.4 (ceil)
    total       = 14.756           → 14.8 (ceil)
    with waste  = 16.2316          → 16.3 (ceil)
    """
    from paint_calculators.models import CoverageSpec
    return CoverageSpec(
        surface_area=1000.0,
        coats=2,
        volume_solids=65.0,
        target_dft=5.0,
        transfer_efficiency=65.0,
        price_per_gallon=45.0,
    )


@pytest.fixture
def two_layer_system():
    """Epoxy primer (75 % / 3 mils × 1) + polyurethane topcoat (65 % / 3 mils × 2)."""
    from paint_calculators.models import CoatingLayer, CoatingSystem
    return CoatingSystem(
        primer=CoatingLayer(volume_solids=75.0, dft=3.0, coats=1, price_per_gallon=35.0,
                            product_name="Epoxy primer"),
        topcoat=CoatingLayer(volume_solids=65.0, dft=3.0, coats=2, price_per_gallon=45.0,
                             product_name="Aliphatic polyurethane"),
    )
