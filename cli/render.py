from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

from models.conditions import (
    AlertCondition,
    CloudCondition,
    DarknessCondition,
    RainCondition,
    WindCondition,
)

_CONDITIONS = (
    ("cloud_condition", CloudCondition),
    ("wind_condition", WindCondition),
    ("rain_condition", RainCondition),
    ("darkness_condition", DarknessCondition),
    ("alert_condition", AlertCondition),
)


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def _describe_condition(enum_type: type, value: Any) -> str:
    if value is None:
        return "None"
    member = enum_type(int(value))
    return f"{int(member)} ({member.name})"


def render_record(payload: Dict[str, Any]) -> None:
    echo_heading("Sensor Record")
    echo_key_values(
        [
            ("timestamp", payload.get("timestamp")),
            ("temperature_scale", payload.get("temperature_scale")),
            ("wind_scale", payload.get("wind_scale")),
        ]
    )

    typer.echo()
    echo_heading("Readings")
    echo_key_values(
        (key, payload.get(key))
        for key in (
            "sky_temp",
            "ambient_temp",
            "sensor_temp",
            "wind_speed",
            "humidity",
            "dew_point",
            "dew_heater_percentage",
            "rain_flag",
            "wet_flag",
            "seconds_since_good_data",
            "days_since_last_write",
        )
    )

    typer.echo()
    echo_heading("Conditions")
    echo_key_values(
        (key, _describe_condition(enum_type, payload.get(key)))
        for key, enum_type in _CONDITIONS
    )
    echo_key_values([("roof_close_requested", payload.get("roof_close_requested"))])
