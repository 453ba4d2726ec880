from typing import List, Optional

from pydantic import BaseModel, Field


class DewPointSpec(BaseModel):
    temperature: float = Field(..., description="Ambient air temperature, °F")
    humidity: float = Field(..., description="Relative humidity %, in (0, 100]")

    model_config = {"frozen": True}


class DewPointResult(BaseModel):
    dew_point: float
    minimum_surface_temp: float
    surface_temp: float
    current_margin: float
    is_safe: bool
    recommendation: str

    model_config = {"frozen": True}


class VOCSpec(BaseModel):
    coating_volume: float = Field(..., description="Gallons applied")
    voc_content: float = Field(..., description="VOC content per gallon")
    area: float = Field(..., description="Room floor area, sq ft")
    ventilation_rate: float = Field(0.0, description="Exhaust rate, CFM")
    ceiling_height: float = Field(10.0, description="Feet")

    model_config = {"frozen": True}


class VOCResult(BaseModel):
    total_voc: float
    voc_per_sq_ft: float
    regulatory_limit: float
    is_compliant: bool
    air_changes_per_hour: float
    estimated_clear_time: float
    recommendations: List[str]

    model_config = {"frozen": True}


class TemperatureRange(BaseModel):
    min: float
    max: float

    model_config = {"frozen": True}


class WeatherForecast(BaseModel):
    """Forecast snapshot; accepted for interface parity, not evaluated."""
    temperature: Optional[TemperatureRange] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    precipitation: Optional[float] = None
    conditions: Optional[str] = None

    model_config = {"frozen": True}


class OptimalConditions(BaseModel):
    temperature: TemperatureRange
    humidity_max: float
    wind_speed_max: float
    precipitation: float

    model_config = {"frozen": True}


class WeatherWindowResult(BaseModel):
    is_optimal: bool
    recommendation: str
    optimal_conditions: OptimalConditions

    model_config = {"frozen": True}
