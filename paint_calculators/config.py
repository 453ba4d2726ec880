"""
Calculator configuration — single source of truth for coverage constants,
environmental limits, production rates, regulatory limits and lifespans.

Engines take a ``CalculatorConstants`` at construction and fall back to
``DEFAULT_CONSTANTS``. Derive a variant for tests or regional rules with
``DEFAULT_CONSTANTS.model_copy(update={...})`` rather than editing values.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, Field, field_serializer, field_validator


# ── Coverage ──────────────────────────────────────────────────────────────────
# Sq ft covered by one US gallon at 1 mil DFT and 100 % volume solids
# (231 in³/gal × 1000 mil/in ÷ 144 in²/ft²).
COVERAGE_CONSTANT: float = 1604.0

DEFAULT_TRANSFER_EFFICIENCY: float = 65.0     # %, airless spray
STANDARD_WASTE_ALLOWANCE: float = 0.10        # 10 % on material and area
LARGE_CONTAINER_GALLONS: float = 5.0          # 5-gal pail

# ── Environmental limits ──────────────────────────────────────────────────────
MIN_TEMP_F: float = 50.0
MAX_TEMP_F: float = 100.0
MAX_HUMIDITY_PCT: float = 85.0
DEW_POINT_MARGIN_F: float = 5.0               # surface must sit this far above dew point
MAX_WIND_SPEED_MPH: float = 15.0
SURFACE_TEMP_OFFSET_F: float = 5.0            # assumed surface temp = air temp − offset

# Magnus approximation (°C domain, -45 °C … 60 °C)
MAGNUS_A: float = 17.27
MAGNUS_B: float = 237.7

# ── Cost / ROI ────────────────────────────────────────────────────────────────
DEFAULT_PRODUCTION_RATE: float = 150.0        # sq ft/h when no table entry matches
ROI_HORIZON_YEARS: int = 10
DEFAULT_ENERGY_COST: float = 0.12             # $/kWh
DEFAULT_DISCOUNT_RATE: float = 0.05


_TABLE_FIELDS = (
    "transfer_efficiency",
    "production_rates",
    "estimating_rates",
    "voc_limits",
    "surface_profile",
    "waste_factors",
    "coating_lifespan",
    "conversions",
)


def _read_only(table: Mapping[str, Any]) -> Mapping[str, Any]:
    """Copy ``table`` into nested ``MappingProxyType`` views."""
    return MappingProxyType({
        key: _read_only(value) if isinstance(value, Mapping) else value
        for key, value in table.items()
    })


def _plain(table: Mapping[str, Any]) -> dict:
    return {
        key: _plain(value) if isinstance(value, Mapping) else value
        for key, value in table.items()
    }


class CalculatorConstants(BaseModel):
    """
    Immutable reference values shared by every calculator engine.

    Table fields are read-only mappings keyed by the lower-case names used
    in the engine enumerations; item assignment raises ``TypeError``. Tables
    passed to ``model_copy(update=...)`` skip validation, so construct a new
    ``CalculatorConstants(**{...})`` to replace a table.
    """

    coverage_constant: float = Field(
        COVERAGE_CONSTANT, description="sq ft/gal at 1 mil DFT, 100 % solids"
    )
    default_transfer_efficiency: float = DEFAULT_TRANSFER_EFFICIENCY
    waste_allowance: float = STANDARD_WASTE_ALLOWANCE
    large_container_gallons: float = LARGE_CONTAINER_GALLONS

    min_temp_f: float = MIN_TEMP_F
    max_temp_f: float = MAX_TEMP_F
    max_humidity_pct: float = MAX_HUMIDITY_PCT
    dew_point_margin_f: float = DEW_POINT_MARGIN_F
    max_wind_speed_mph: float = MAX_WIND_SPEED_MPH
    surface_temp_offset_f: float = SURFACE_TEMP_OFFSET_F
    magnus_a: float = MAGNUS_A
    magnus_b: float = MAGNUS_B

    # Transfer efficiency (%) by application method
    transfer_efficiency: Mapping[str, float] = Field(default_factory=lambda: {
        "airless":       65.0,
        "air_spray":     35.0,
        "hvlp":          75.0,
        "brush_roll":    85.0,
        "electrostatic": 90.0,
    })

    # Reference production rates (sq ft/h) by method and surface
    production_rates: Mapping[str, Mapping[str, float]] = Field(default_factory=lambda: {
        "spray":      {"walls": 1500.0, "ceilings": 1200.0, "trim": 300.0, "doors": 150.0},
        "brush_roll": {"walls": 350.0,  "ceilings": 300.0,  "trim": 100.0, "doors": 50.0},
    })

    # Estimating production rates (sq ft/h) by surface type → condition
    estimating_rates: Mapping[str, Mapping[str, float]] = Field(default_factory=lambda: {
        "walls":    {"good": 200.0, "fair": 150.0, "poor": 100.0},
        "ceilings": {"good": 150.0, "fair": 120.0, "poor": 80.0},
        "floors":   {"good": 250.0, "fair": 200.0, "poor": 150.0},
        "trim":     {"good": 50.0,  "fair": 40.0,  "poor": 30.0},
    })
    default_production_rate: float = DEFAULT_PRODUCTION_RATE

    # VOC regulatory limits (g/L) by coating category
    voc_limits: Mapping[str, float] = Field(default_factory=lambda: {
        "flat":       50.0,
        "non_flat":   150.0,
        "primer":     200.0,
        "floor":      400.0,
        "industrial": 450.0,
    })

    # Surface profile requirement bands (mils)
    surface_profile: Mapping[str, Mapping[str, float]] = Field(default_factory=lambda: {
        "thin_film":   {"min": 0.5, "max": 1.5},
        "medium_film": {"min": 1.5, "max": 2.5},
        "thick_film":  {"min": 2.5, "max": 4.0},
    })

    # Waste factors by project type
    waste_factors: Mapping[str, float] = Field(default_factory=lambda: {
        "residential": 0.10,
        "commercial":  0.15,
        "industrial":  0.20,
        "precision":   0.05,
    })

    # Service life estimates (years) by resin family
    coating_lifespan: Mapping[str, int] = Field(default_factory=lambda: {
        "acrylic":       7,
        "epoxy":         10,
        "polyurethane":  12,
        "fluoropolymer": 20,
        "siloxane":      15,
    })

    roi_horizon_years: int = ROI_HORIZON_YEARS
    default_energy_cost: float = DEFAULT_ENERGY_COST
    default_discount_rate: float = DEFAULT_DISCOUNT_RATE

    # Unit conversion factors
    conversions: Mapping[str, float] = Field(default_factory=lambda: {
        "sq_ft_to_sq_m":   0.092903,
        "sq_ft_to_sq_yd":  0.111111,
        "gallon_to_liter": 3.78541,
        "mil_to_micron":   25.4,
        "psi_to_bar":      0.0689476,
    })

    model_config = {"frozen": True, "validate_default": True}

    @field_validator(*_TABLE_FIELDS)
    @classmethod
    def _freeze_table(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _read_only(value)

    @field_serializer(*_TABLE_FIELDS)
    def _dump_table(self, value: Mapping[str, Any]) -> dict:
        return _plain(value)


DEFAULT_CONSTANTS = CalculatorConstants()
