"""
technical_engine.py — Film-thickness, geometry and mixing helpers.

Covers:
  - Wet film thickness (WFT) from target DFT, solids and thinning
  - Surface area of walls/floors, tanks, spheres and pre-measured areas
  - Spreading rate, multi-coat film build, practical coverage by method
  - Multi-component mix ratios and solvent reduction
  - Blast profile depth by abrasive and nozzle pressure
"""

import logging
import math
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import DEFAULT_CONSTANTS, CalculatorConstants
from ..exceptions import InvalidInput
from ..models.technical_schema import (
    AreaMeasurement,
    CoatBuild,
    FilmBuildResult,
    MixRatioResult,
    ProfileDepthResult,
    SolventReductionResult,
    SurfaceAreaResult,
    SurfaceAreaSpec,
    WFTResult,
    WFTSpec,
)
from .rounding import round_nearest, safe_div

logger = logging.getLogger("paintcalc-technical")

# ---------------------------------------------------------------------------
# Wet film gauge bands: (max WFT mils, gauge)
# ---------------------------------------------------------------------------
_WFT_GAUGES: List[Tuple[float, str]] = [
    (25.0, "0-25 mil gauge"),
    (50.0, "0-50 mil gauge"),
    (100.0, "0-100 mil gauge"),
]
_WFT_GAUGE_OVERFLOW: str = "Use multiple passes or special gauge"

SAG_RISK_WFT_MILS: float = 20.0
MAX_REDUCTION_PCT: float = 10.0
LOW_SOLIDS_PCT: float = 50.0

SQ_FT_PER_SQ_YD: float = 9.0


class Shape(str, Enum):
    RECTANGULAR = "rectangular"     # floor (L × W) or walls (perimeter × H)
    CYLINDRICAL = "cylindrical"
    SPHERICAL = "spherical"
    COMPLEX = "complex"             # pre-measured total area


class ApplicationMethod(str, Enum):
    SPRAY = "spray"
    ROLLER = "roller"
    BRUSH = "brush"


class BlastMedia(str, Enum):
    STEEL_GRIT = "steel-grit"
    STEEL_SHOT = "steel-shot"
    GARNET = "garnet"
    ALUMINUM_OXIDE = "aluminum-oxide"


# Fraction of applied material reaching the surface
_METHOD_EFFICIENCY: Dict[ApplicationMethod, float] = {
    ApplicationMethod.SPRAY: 0.65,
    ApplicationMethod.ROLLER: 0.85,
    ApplicationMethod.BRUSH: 0.90,
}
_DEFAULT_METHOD_EFFICIENCY: float = 0.65

# Anchor profile: typical mils = base + (psi − 80) × factor
_PROFILE_PARAMS: Dict[BlastMedia, Dict[str, float]] = {
    BlastMedia.STEEL_GRIT:     {"base": 2.0, "factor": 0.015},
    BlastMedia.STEEL_SHOT:     {"base": 1.0, "factor": 0.010},
    BlastMedia.GARNET:         {"base": 1.5, "factor": 0.012},
    BlastMedia.ALUMINUM_OXIDE: {"base": 2.5, "factor": 0.018},
}
_DEFAULT_BLAST_MEDIA: BlastMedia = BlastMedia.STEEL_SHOT
PROFILE_REFERENCE_PSI: float = 80.0
PROFILE_SPREAD: float = 0.20    # ±20 % around typical


def _wft_gauge(wet_film_thickness: float) -> str:
    for limit, gauge in _WFT_GAUGES:
        if wet_film_thickness <= limit:
            return gauge
    return _WFT_GAUGE_OVERFLOW


class TechnicalEngine:
    """Film-build, geometry and mixing calculations for coating specifications."""

    def __init__(self, constants: Optional[CalculatorConstants] = None) -> None:
        self.constants: CalculatorConstants = constants or DEFAULT_CONSTANTS

    # ------------------------------------------------------------------
    # 1. Wet film thickness
    # ------------------------------------------------------------------

    def calculate_wft(self, spec: WFTSpec) -> WFTResult:
        """
        WFT needed to reach ``target_dft`` once solvent (and thinner) evaporates.

            adjusted solids = solids × (1 − reduction / 100)
            WFT             = DFT / adjusted solids × 100
        """
        adjusted_solids = spec.volume_solids * (1.0 - spec.reduction_percent / 100.0)
        wet_film_thickness = safe_div(spec.target_dft, adjusted_solids, "wet film thickness") * 100.0
        gauge = _wft_gauge(wet_film_thickness)

        tips: List[str] = []
        if wet_film_thickness > SAG_RISK_WFT_MILS:
            tips.append("Apply in multiple passes to avoid sagging")
        if spec.reduction_percent > MAX_REDUCTION_PCT:
            tips.append(
                f"Thinning by {spec.reduction_percent:g}% may affect coating properties"
            )
        if adjusted_solids < LOW_SOLIDS_PCT:
            tips.append("Multiple coats may be required for proper build")
        tips.append(f"Check WFT immediately after application using {gauge}")

        return WFTResult(
            wet_film_thickness=round_nearest(wet_film_thickness, 1),
            adjusted_solids=round_nearest(adjusted_solids, 1),
            wet_film_gauge=gauge,
            application_tips=tips,
        )

    # ------------------------------------------------------------------
    # 2. Surface area
    # ------------------------------------------------------------------

    def calculate_surface_area(self, spec: SurfaceAreaSpec) -> SurfaceAreaResult:
        """
        Net paintable area after openings, with a 10 % waste allowance.

        Shapes:
          rectangular — length × width; with height, the four walls
                        (perimeter × height) instead
          cylindrical — 2πrh lateral, + 2πr² when ``include_ends``
          spherical   — 4πr²
          complex     — ``total_area`` as measured
        Shape names match exactly; anything else, including "Rectangular",
        gives 0 gross area. Radius may be given as diameter. Missing
        dimensions give 0 gross area.
        The waste allowance is reported separately, not added to net area.
        """
        d = spec.dimensions
        try:
            shape = Shape(spec.shape)
        except ValueError:
            logger.warning(f"Unknown shape '{spec.shape}'; gross area is 0")
            shape = None

        gross_area = 0.0
        if shape is Shape.RECTANGULAR:
            if d.length and d.width:
                gross_area = d.length * d.width
            if d.height:
                perimeter = 2.0 * ((d.length or 0.0) + (d.width or 0.0))
                gross_area = perimeter * d.height
        elif shape is Shape.CYLINDRICAL:
            radius = d.radius or (d.diameter / 2.0 if d.diameter else 0.0)
            if radius and d.height:
                gross_area = 2.0 * math.pi * radius * d.height
                if d.include_ends:
                    gross_area += 2.0 * math.pi * radius ** 2
        elif shape is Shape.SPHERICAL:
            radius = d.radius or (d.diameter / 2.0 if d.diameter else 0.0)
            if radius:
                gross_area = 4.0 * math.pi * radius ** 2
        elif shape is Shape.COMPLEX:
            gross_area = d.total_area or 0.0

        deduction_area = sum(o.width * o.height * o.quantity for o in spec.deductions)
        net_area = gross_area - deduction_area
        waste_allowance = net_area * self.constants.waste_allowance

        return SurfaceAreaResult(
            gross_area=round_nearest(gross_area, 1),
            deduction_area=round_nearest(deduction_area, 1),
            net_area=round_nearest(net_area, 1),
            waste_allowance=round_nearest(waste_allowance, 1),
            measurement=AreaMeasurement(
                square_feet=round_nearest(net_area, 1),
                square_meters=round_nearest(
                    net_area * self.constants.conversions["sq_ft_to_sq_m"], 2
                ),
                square_yards=round_nearest(net_area / SQ_FT_PER_SQ_YD, 2),
            ),
        )

    # ------------------------------------------------------------------
    # 3. Spreading rate / film build / practical coverage
    # ------------------------------------------------------------------

    def calculate_spreading_rate(self, wft: float, volume_solids: float) -> float:
        """
        Theoretical sq ft/gal for a coat applied at ``wft`` mils wet.

        Equals K / WFT, consistent with ``CoverageEngine``. The
        moorhouse-coating-paint-calculators npm package reports 100 × this
        value.
        """
        dft = (wft * volume_solids) / 100.0
        coverage = safe_div(
            self.constants.coverage_constant * volume_solids / 100.0, dft, "spreading rate"
        )
        return round_nearest(coverage, 1)

    def calculate_film_build(self, coats: Sequence[CoatBuild]) -> FilmBuildResult:
        """Dry film per coat (WFT × solids / 100) and the system total."""
        builds = [(coat.wft * coat.volume_solids) / 100.0 for coat in coats]
        return FilmBuildResult(
            total_dft=round_nearest(sum(builds), 1),
            coat_builds=[round_nearest(b, 1) for b in builds],
        )

    def calculate_practical_coverage(self, theoretical_coverage: float, application_method: str) -> float:
        """Theoretical coverage reduced by method efficiency; unknown methods use spray (0.65)."""
        try:
            efficiency = _METHOD_EFFICIENCY[ApplicationMethod(application_method)]
        except ValueError:
            efficiency = _DEFAULT_METHOD_EFFICIENCY
        return round_nearest(theoretical_coverage * efficiency, 1)

    # ------------------------------------------------------------------
    # 4. Mixing
    # ------------------------------------------------------------------

    def calculate_mix_ratio(self, total_volume: float, ratio: str) -> MixRatioResult:
        """
        Split ``total_volume`` by a mix ratio such as "4:1" or "2:1:1".

        Raises
        ------
        InvalidInput
            ``ratio`` is not two or more numbers separated by ':'.
        """
        try:
            parts = [float(p) for p in ratio.split(":")]
        except ValueError:
            raise InvalidInput(f"Mix ratio must be numbers separated by ':', got '{ratio}'")
        if len(parts) < 2:
            raise InvalidInput(f"Mix ratio needs at least two parts, got '{ratio}'")

        total_parts = sum(parts)

        def _share(part: float) -> float:
            return round_nearest(safe_div(total_volume * part, total_parts, "mix ratio"), 2)

        part_c = _share(parts[2]) if len(parts) > 2 and parts[2] else None
        return MixRatioResult(part_a=_share(parts[0]), part_b=_share(parts[1]), part_c=part_c)

    def calculate_solvent_reduction(
        self, paint_volume: float, reduction_percent: float
    ) -> SolventReductionResult:
        solvent_volume = paint_volume * (reduction_percent / 100.0)
        return SolventReductionResult(
            solvent_volume=round_nearest(solvent_volume, 2),
            total_volume=round_nearest(paint_volume + solvent_volume, 2),
        )

    # ------------------------------------------------------------------
    # 5. Surface preparation
    # ------------------------------------------------------------------

    def calculate_profile_depth(self, media_type: str, pressure: float) -> ProfileDepthResult:
        """
        Estimated anchor profile (mils) for an abrasive at ``pressure`` psi.
        Unknown media are treated as steel shot.
        """
        try:
            media = BlastMedia(media_type)
        except ValueError:
            logger.debug(f"Unknown blast media '{media_type}'; using {_DEFAULT_BLAST_MEDIA.value}")
            media = _DEFAULT_BLAST_MEDIA
        params = _PROFILE_PARAMS[media]
        typical = params["base"] + (pressure - PROFILE_REFERENCE_PSI) * params["factor"]
        return ProfileDepthResult(
            min_profile=round_nearest(typical * (1.0 - PROFILE_SPREAD), 1),
            max_profile=round_nearest(typical * (1.0 + PROFILE_SPREAD), 1),
            typical=round_nearest(typical, 1),
        )
