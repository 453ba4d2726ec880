"""
paint_calculators — coverage, environmental, cost and technical formulas for
industrial and commercial painting work.

Each engine is stateless apart from its injected ``CalculatorConstants``.
The module-level ``coverage``, ``environmental``, ``cost`` and ``technical``
instances use ``DEFAULT_CONSTANTS``; build your own engines to substitute
other reference values.
"""
from .config import DEFAULT_CONSTANTS, CalculatorConstants
from .exceptions import InvalidInput
from .models import *  # noqa: F401,F403
from .services import (
    ApplicationMethod,
    BlastMedia,
    CostEngine,
    CoverageEngine,
    EnvironmentalEngine,
    JSONFormatter,
    Shape,
    SurfaceCondition,
    SurfaceType,
    TechnicalEngine,
    setup_logging,
)

__version__ = "1.0.0"

coverage = CoverageEngine(DEFAULT_CONSTANTS)
environmental = EnvironmentalEngine(DEFAULT_CONSTANTS)
cost = CostEngine(DEFAULT_CONSTANTS, coverage_engine=coverage)
technical = TechnicalEngine(DEFAULT_CONSTANTS)

# Coverage
calculate_paint_coverage = coverage.calculate_paint_coverage
calculate_multi_coat_system = coverage.calculate_multi_coat_system
calculate_primer_needed = coverage.calculate_primer_needed

# Environmental
calculate_dew_point = environmental.calculate_dew_point
calculate_voc = environmental.calculate_voc
calculate_weather_window = environmental.calculate_weather_window

# Cost
estimate_project_cost = cost.estimate_project_cost
calculate_roi = cost.calculate_roi
calculate_labor_cost = cost.calculate_labor_cost

# Technical
calculate_wft = technical.calculate_wft
calculate_surface_area = technical.calculate_surface_area
calculate_spreading_rate = technical.calculate_spreading_rate
calculate_film_build = technical.calculate_film_build
calculate_practical_coverage = technical.calculate_practical_coverage
calculate_mix_ratio = technical.calculate_mix_ratio
calculate_solvent_reduction = technical.calculate_solvent_reduction
calculate_profile_depth = technical.calculate_profile_depth
