"""Column layout of a SkyAlert (Boltwood II) one-line data file.

Sample line, as written by the sensor software::

    2024-06-11 14:09:57.00 F M 79.6   92.8  93      0      42  66.3   000 1 1 00019 045454.59025 3 1 1 1 1 1

Offsets below are zero-based, end-exclusive character positions. The spaces
between columns are padding, not delimiters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Tuple, Type, TypeVar

from models.conditions import (
    AlertCondition,
    CloudCondition,
    DarknessCondition,
    RainCondition,
    WindCondition,
)

Number = TypeVar("Number", int, float)

DATE_COLUMNS = slice(0, 10)
TIME_COLUMNS = slice(11, 22)
MINIMUM_LINE_LENGTH = 104

_INFINITY_SPELLINGS = ("inf", "infinity")


def parse_number(raw: str, kind: Type[Number]) -> Number:
    """Parse a padded numeric column, returning ``kind()`` when it is unusable.

    Only space padding is removed; blank columns and sensor noise decode to
    zero instead of failing the line.
    """
    candidate = raw.strip(" ")
    if (
        not candidate
        or not candidate.isascii()
        or candidate != candidate.strip()
        or "_" in candidate
    ):
        return kind()
    try:
        value = kind(candidate)
    except ValueError:
        return kind()
    # Out-of-range exponents overflow to inf; only spelled-out infinities count.
    spelled = candidate.lstrip("+-").lower()
    if kind is float and math.isinf(value) and spelled not in _INFINITY_SPELLINGS:
        return kind()
    return value


def _text(raw: str) -> str:
    return raw


def _integer(raw: str) -> int:
    return parse_number(raw, int)


def _real(raw: str) -> float:
    return parse_number(raw, float)


def _condition(enum_type: Type[IntEnum]) -> Callable[[str], IntEnum]:
    def convert(raw: str) -> IntEnum:
        return enum_type(parse_number(raw, int))

    return convert


@dataclass(frozen=True)
class FieldSpec:
    name: str
    start: int
    end: int
    convert: Callable[[str], object]

    def extract(self, line: str) -> object:
        return self.convert(line[self.start:self.end])


FIELD_LAYOUT: Tuple[FieldSpec, ...] = (
    FieldSpec("temperature_scale", 23, 24, _text),
    FieldSpec("wind_scale", 25, 26, _text),
    FieldSpec("sky_temp", 27, 32, _real),
    FieldSpec("ambient_temp", 34, 39, _real),
    FieldSpec("sensor_temp", 40, 46, _real),
    FieldSpec("wind_speed", 48, 53, _real),
    FieldSpec("humidity", 55, 57, _integer),
    FieldSpec("dew_point", 59, 64, _real),
    FieldSpec("dew_heater_percentage", 66, 68, _integer),
    FieldSpec("rain_flag", 70, 71, _integer),
    FieldSpec("wet_flag", 72, 73, _integer),
    FieldSpec("seconds_since_good_data", 74, 79, _integer),
    # VB6 Now() value, in days, from when the sensor software last wrote the file.
    FieldSpec("days_since_last_write", 80, 92, _real),
    FieldSpec("cloud_condition", 93, 94, _condition(CloudCondition)),
    FieldSpec("wind_condition", 95, 96, _condition(WindCondition)),
    FieldSpec("rain_condition", 97, 98, _condition(RainCondition)),
    FieldSpec("darkness_condition", 99, 100, _condition(DarknessCondition)),
    FieldSpec("roof_close_requested", 101, 102, _integer),
    FieldSpec("alert_condition", 103, 104, _condition(AlertCondition)),
)
