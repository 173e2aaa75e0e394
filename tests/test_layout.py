from __future__ import annotations

import math
from dataclasses import fields

import pytest

from models.conditions import AlertCondition, CloudCondition, RainCondition, WindCondition
from models.records import SensorRecord
from services.layout import FIELD_LAYOUT, MINIMUM_LINE_LENGTH, parse_number


@pytest.mark.parametrize(
    ("raw", "kind", "expected"),
    [
        ("42", int, 42),
        ("  42 ", int, 42),
        ("00019", int, 19),
        ("-3", int, -3),
        ("", int, 0),
        ("     ", int, 0),
        ("4.5", int, 0),
        ("\t4", int, 0),
        ("1_0", int, 0),
        ("x0", int, 0),
        ("93    ", float, 93.0),
        ("79.6 ", float, 79.6),
        ("045454.59025", float, 45454.59025),
        ("-12.5", float, -12.5),
        ("", float, 0.0),
        ("abc", float, 0.0),
        ("1e400", float, 0.0),
        ("-1e400", float, 0.0),
        ("inf", float, math.inf),
        ("-Infinity", float, -math.inf),
        ("\u0664\u0662", int, 0),
        ("\u0664\u0662.5", float, 0.0),
    ],
)
def test_parse_number(raw: str, kind: type, expected: object) -> None:
    value = parse_number(raw, kind)

    assert value == expected
    assert type(value) is kind


def test_layout_columns_do_not_overlap() -> None:
    previous_end = 22
    for spec in FIELD_LAYOUT:
        assert spec.start >= previous_end, spec.name
        assert spec.end > spec.start, spec.name
        previous_end = spec.end

    assert previous_end == MINIMUM_LINE_LENGTH


def test_layout_covers_every_record_field() -> None:
    record_fields = {field.name for field in fields(SensorRecord)}

    assert {spec.name for spec in FIELD_LAYOUT} == record_fields - {"timestamp", "generated_at"}


def test_conditions_map_documented_values() -> None:
    assert CloudCondition(2) is CloudCondition.light_clouds
    assert WindCondition(3) is WindCondition.very_windy
    assert RainCondition(3) is RainCondition.rain
    assert AlertCondition(0) is AlertCondition.no_alert
    assert CloudCondition.clear.is_recognized


def test_conditions_keep_axes_apart() -> None:
    assert type(CloudCondition(1)) is not type(WindCondition(1))
    assert CloudCondition(1).name == "clear"
    assert WindCondition(1).name == "calm"


def test_unrecognized_condition_value_is_preserved() -> None:
    value = RainCondition(8)

    assert isinstance(value, RainCondition)
    assert int(value) == 8
    assert value.name == "UNRECOGNIZED_8"
    assert not value.is_recognized
    assert 8 not in {member.value for member in RainCondition}


def test_non_integer_condition_value_is_rejected() -> None:
    with pytest.raises(ValueError):
        CloudCondition("3")
