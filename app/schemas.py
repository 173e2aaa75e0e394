"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from models.records import SensorRecord


class SensorRecordPayload(BaseModel):
    """Serializable view of a decoded sensor line.

    Condition codes are exposed as plain integers so values outside the
    documented range survive a round trip.
    """

    timestamp: datetime
    temperature_scale: str = Field(..., description="'C' or 'F'.")
    wind_scale: str = Field(..., description="'K' km/h, 'M' mph or 'm' m/s.")
    sky_temp: float
    ambient_temp: float
    sensor_temp: float
    wind_speed: float
    humidity: int
    dew_point: float
    dew_heater_percentage: int
    rain_flag: int = Field(..., description="0 dry, 1 rain last minute, 2 rain now.")
    wet_flag: int = Field(..., description="0 dry, 1 wet last minute, 2 wet now.")
    seconds_since_good_data: int
    days_since_last_write: float
    cloud_condition: int
    wind_condition: int
    rain_condition: int
    darkness_condition: int
    roof_close_requested: int
    alert_condition: int

    @classmethod
    def from_record(cls, record: SensorRecord) -> "SensorRecordPayload":
        return cls(
            timestamp=record.timestamp,
            temperature_scale=record.temperature_scale,
            wind_scale=record.wind_scale,
            sky_temp=record.sky_temp,
            ambient_temp=record.ambient_temp,
            sensor_temp=record.sensor_temp,
            wind_speed=record.wind_speed,
            humidity=record.humidity,
            dew_point=record.dew_point,
            dew_heater_percentage=record.dew_heater_percentage,
            rain_flag=record.rain_flag,
            wet_flag=record.wet_flag,
            seconds_since_good_data=record.seconds_since_good_data,
            days_since_last_write=record.days_since_last_write,
            cloud_condition=int(record.cloud_condition),
            wind_condition=int(record.wind_condition),
            rain_condition=int(record.rain_condition),
            darkness_condition=int(record.darkness_condition),
            roof_close_requested=record.roof_close_requested,
            alert_condition=int(record.alert_condition),
        )
