"""Condition codes reported in the trailing columns of a sensor line."""

from __future__ import annotations

from enum import IntEnum


class _PreservingIntEnum(IntEnum):
    """IntEnum that keeps numerals outside the documented range.

    Unknown values resolve to an ``UNRECOGNIZED_<n>`` pseudo-member that is
    still an instance of the enum and compares equal to ``n``.
    """

    @classmethod
    def _missing_(cls, value: object):
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        member = int.__new__(cls, value)
        member._name_ = f"UNRECOGNIZED_{value}"
        member._value_ = value
        return member

    @property
    def is_recognized(self) -> bool:
        return self._value_ in type(self)._value2member_map_


class CloudCondition(_PreservingIntEnum):
    """Sky clarity reading."""

    unknown = 0
    clear = 1
    light_clouds = 2
    very_cloudy = 3
    disabled = 4


class WindCondition(_PreservingIntEnum):
    """Wind-speed bucket."""

    unknown = 0
    calm = 1
    windy = 2
    very_windy = 3
    disabled = 4


class RainCondition(_PreservingIntEnum):
    """Precipitation bucket, derived by the sensor from the rain/wet flags."""

    unknown = 0
    dry = 1
    damp = 2
    rain = 3
    disabled = 4


class DarknessCondition(_PreservingIntEnum):
    """Ambient light bucket."""

    unknown = 0
    dark = 1
    light = 2
    very_light = 3
    disabled = 4


class AlertCondition(_PreservingIntEnum):
    """Binary safety flag, usually wired to automated roof closure."""

    no_alert = 0
    alert = 1
