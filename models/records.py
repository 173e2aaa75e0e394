"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from models.conditions import (
    AlertCondition,
    CloudCondition,
    DarknessCondition,
    RainCondition,
    WindCondition,
)


@dataclass(frozen=True, slots=True)
class SensorRecord:
    """One decoded line of SkyAlert (Boltwood II) sensor output.

    ``generated_at`` records when the line was decoded and is left out of
    equality so repeated decodes of the same line compare equal.
    """

    timestamp: datetime
    temperature_scale: str
    wind_scale: str
    sky_temp: float
    ambient_temp: float
    sensor_temp: float
    wind_speed: float
    humidity: int
    dew_point: float
    dew_heater_percentage: int
    rain_flag: int
    wet_flag: int
    seconds_since_good_data: int
    cloud_condition: CloudCondition
    wind_condition: WindCondition
    rain_condition: RainCondition
    darkness_condition: DarknessCondition
    roof_close_requested: int
    alert_condition: AlertCondition
    generated_at: datetime = field(compare=False)
    days_since_last_write: float = 0.0
