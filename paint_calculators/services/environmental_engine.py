"""
environmental_engine.py — Application-condition checks for coating work.

Covers:
  - Dew point and surface-temperature safety margin (Magnus approximation)
  - VOC emissions, ventilation air changes and compliance
  - Weather window (static optimal-condition envelope; no forecast data)

Dew point (Magnus, °C domain):
    α  = A·T / (B + T) + ln(RH / 100)
    Td = B·α / (A − α)            A = 17.27, B = 237.7 °C
Inputs and outputs are °F; the surface is assumed to sit 5 °F below air
temperature and must stay at least 5 °F above the dew point.
"""

import logging
from typing import List, Optional

from ..config import DEFAULT_CONSTANTS, CalculatorConstants
from ..models.environmental_schema import (
    DewPointResult,
    DewPointSpec,
    OptimalConditions,
    TemperatureRange,
    VOCResult,
    VOCSpec,
    WeatherForecast,
    WeatherWindowResult,
)
from .rounding import round_nearest, round_whole, safe_div, safe_log

logger = logging.getLogger("paintcalc-environmental")

# Ventilation guidance
MIN_AIR_CHANGES_PER_HOUR: float = 4.0
LOW_VOC_THRESHOLD: float = 50.0          # g/L
VOC_CLEARANCE_FACTOR: float = 0.075      # lb of VOC cleared per CFM per hour

# Weather window envelope
OPTIMAL_MAX_TEMP_F: float = 90.0


def _f_to_c(temp_f: float) -> float:
    return (temp_f - 32.0) / 1.8


def _c_to_f(temp_c: float) -> float:
    return temp_c * 1.8 + 32.0


class EnvironmentalEngine:
    """Dew point, VOC and weather-window checks for coating application."""

    def __init__(self, constants: Optional[CalculatorConstants] = None) -> None:
        self.constants: CalculatorConstants = constants or DEFAULT_CONSTANTS

    # ------------------------------------------------------------------
    # 1. Dew point
    # ------------------------------------------------------------------

    def calculate_dew_point(self, spec: DewPointSpec) -> DewPointResult:
        """
        Dew point for the given air temperature (°F) and relative humidity (%).

        No range validation: RH <= 0 gives a non-finite dew point and the
        formula loses accuracy outside roughly -50 °F … 140 °F.

        Returns
        -------
        DewPointResult with dew_point, minimum_surface_temp (dew point +
        margin), surface_temp (air − offset), current_margin, is_safe and a
        recommendation naming the minimum safe surface temperature when unsafe.
        """
        c = self.constants
        temp_c = _f_to_c(spec.temperature)

        alpha = (c.magnus_a * temp_c) / (c.magnus_b + temp_c) + safe_log(
            spec.humidity / 100.0, "dew point humidity"
        )
        dew_point_c = safe_div(c.magnus_b * alpha, c.magnus_a - alpha, "dew point")
        dew_point = _c_to_f(dew_point_c)

        surface_temp = spec.temperature - c.surface_temp_offset_f
        current_margin = surface_temp - dew_point
        minimum_surface_temp = dew_point + c.dew_point_margin_f
        is_safe = current_margin >= c.dew_point_margin_f

        if is_safe:
            recommendation = "✅ Conditions are acceptable for painting"
        else:
            recommendation = (
                "⚠️ Warning: Risk of condensation. Wait until surface temp is above "
                f"{round_whole(minimum_surface_temp)}°F"
            )
            logger.info(
                f"Dew point check failed: {spec.temperature}°F / {spec.humidity}% RH, "
                f"margin {round_nearest(current_margin, 1)}°F"
            )

        return DewPointResult(
            dew_point=round_nearest(dew_point, 1),
            minimum_surface_temp=round_nearest(minimum_surface_temp, 1),
            surface_temp=round_nearest(surface_temp, 1),
            current_margin=round_nearest(current_margin, 1),
            is_safe=is_safe,
            recommendation=recommendation,
        )

    # ------------------------------------------------------------------
    # 2. VOC emissions
    # ------------------------------------------------------------------

    def calculate_voc(self, spec: VOCSpec) -> VOCResult:
        """
        Total VOC released, per-area load, compliance and ventilation needs.

        Compliance is always judged against the non-flat category limit;
        the per-category table in the constants is not consulted.
        """
        c = self.constants

        total_voc = spec.coating_volume * spec.voc_content
        voc_per_sq_ft = safe_div(total_voc, spec.area, "VOC per square foot")

        regulatory_limit = c.voc_limits["non_flat"]
        is_compliant = spec.voc_content <= regulatory_limit

        air_changes_per_hour = 0.0
        estimated_clear_time = 0.0
        if spec.ventilation_rate > 0:
            room_volume = spec.area * spec.ceiling_height
            air_changes_per_hour = safe_div(
                spec.ventilation_rate * 60.0, room_volume, "air changes per hour"
            )
            estimated_clear_time = total_voc / (spec.ventilation_rate * VOC_CLEARANCE_FACTOR)

        recommendations: List[str] = []
        if not is_compliant:
            recommendations.append("⚠️ VOC content exceeds regulatory limits")
            logger.info(
                f"VOC content {spec.voc_content} exceeds limit {regulatory_limit}"
            )
        if air_changes_per_hour < MIN_AIR_CHANGES_PER_HOUR:
            recommendations.append("Increase ventilation to minimum 4 air changes per hour")
        if spec.voc_content > LOW_VOC_THRESHOLD:
            recommendations.append("Consider using low-VOC alternatives (<50 g/L)")

        return VOCResult(
            total_voc=round_nearest(total_voc, 2),
            voc_per_sq_ft=round_nearest(voc_per_sq_ft, 2),
            regulatory_limit=regulatory_limit,
            is_compliant=is_compliant,
            air_changes_per_hour=round_nearest(air_changes_per_hour, 1),
            estimated_clear_time=round_nearest(estimated_clear_time, 1),
            recommendations=recommendations,
        )

    # ------------------------------------------------------------------
    # 3. Weather window
    # ------------------------------------------------------------------

    def calculate_weather_window(
        self, forecast: Optional[WeatherForecast] = None
    ) -> WeatherWindowResult:
        """
        Static optimal-condition envelope. The forecast is not evaluated;
        there is no weather-data source behind this call.
        """
        c = self.constants
        return WeatherWindowResult(
            is_optimal=True,
            recommendation="Weather conditions are suitable for painting",
            optimal_conditions=OptimalConditions(
                temperature=TemperatureRange(min=c.min_temp_f, max=OPTIMAL_MAX_TEMP_F),
                humidity_max=c.max_humidity_pct,
                wind_speed_max=c.max_wind_speed_mph,
                precipitation=0.0,
            ),
        )
