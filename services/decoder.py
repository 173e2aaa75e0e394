"""Decoding of single SkyAlert sensor lines into ``SensorRecord`` values."""

from __future__ import annotations

import logging
import os
import re
from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from models.records import SensorRecord
from services.errors import BufferTooShortError, TimestampError
from services.layout import DATE_COLUMNS, FIELD_LAYOUT, MINIMUM_LINE_LENGTH, TIME_COLUMNS
from settings import get_settings

logger = logging.getLogger(__name__)

Location = Union[tzinfo, str]

_TIMESTAMP_LAYOUT = "YYYY-MM-DD HH:MM:SS.ss"
_TIMESTAMP_PATTERN = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2}):([0-9]{2}):([0-9]{2})\.([0-9]{2})"
)
_SYSTEM_ZONE_FILE = "/etc/localtime"


def load_zone(location: Location) -> tzinfo:
    """Return ``location`` as a tzinfo, loading IANA names through zoneinfo."""
    if isinstance(location, tzinfo):
        return location
    name = location.strip()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"Unknown timezone {location!r}.") from exc


def resolve_local_zone() -> tzinfo:
    """Resolve the zone of the running process.

    ``TZ`` wins when it names a known zone, then the system zone file; hosts
    without either get the current fixed UTC offset.
    """
    name = os.getenv("TZ", "").strip().lstrip(":")
    if name:
        try:
            return load_zone(name)
        except ValueError:
            logger.warning("Ignoring unknown TZ value", extra={"timezone": name})
    try:
        with open(_SYSTEM_ZONE_FILE, "rb") as handle:
            return ZoneInfo.from_file(handle, key="localtime")
    except (OSError, ValueError):
        return datetime.now().astimezone().tzinfo or timezone.utc


def _as_text(raw: Union[bytes, bytearray, memoryview, str]) -> str:
    if isinstance(raw, str):
        return raw
    # latin-1 keeps one character per byte, so column offsets survive.
    return bytes(raw).decode("latin-1")


def parse_timestamp(date_text: str, time_text: str, zone: tzinfo) -> datetime:
    """Parse the date and time columns strictly, in ``zone``."""
    value = f"{date_text} {time_text}"
    match = _TIMESTAMP_PATTERN.fullmatch(value)
    if match is None:
        raise TimestampError(value, f"does not match layout {_TIMESTAMP_LAYOUT}")

    year, month, day, hour, minute, second, hundredths = (int(part) for part in match.groups())
    try:
        return datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            hundredths * 10_000,
            tzinfo=zone,
        )
    except ValueError as exc:
        raise TimestampError(value, str(exc)) from exc


class RecordDecoder:
    """Turns one raw sensor line into a :class:`SensorRecord`.

    The zone used for the timestamp columns is fixed when the decoder is
    built; instances hold no other state and can be shared between threads.
    """

    def __init__(self, location: Optional[Location] = None) -> None:
        self._location = resolve_local_zone() if location is None else load_zone(location)

    @property
    def location(self) -> tzinfo:
        return self._location

    def with_location(self, location: Location) -> "RecordDecoder":
        """Return a decoder that reads timestamps in ``location``."""
        return RecordDecoder(location=load_zone(location))

    def decode(
        self,
        raw: Union[bytes, bytearray, memoryview, str],
        location: Optional[Location] = None,
    ) -> SensorRecord:
        generated_at = datetime.now(timezone.utc)
        zone = self._location if location is None else load_zone(location)
        line = _as_text(raw)

        if len(line) < MINIMUM_LINE_LENGTH:
            logger.warning(
                "Rejected short sensor line",
                extra={"length": len(line), "reason": "buffer too short"},
            )
            raise BufferTooShortError(len(line), MINIMUM_LINE_LENGTH)

        try:
            timestamp = parse_timestamp(line[DATE_COLUMNS], line[TIME_COLUMNS], zone)
        except TimestampError as exc:
            logger.warning(
                "Rejected sensor line with invalid timestamp",
                extra={"value": exc.value, "reason": exc.reason},
            )
            raise

        values = {spec.name: spec.extract(line) for spec in FIELD_LAYOUT}
        record = SensorRecord(timestamp=timestamp, generated_at=generated_at, **values)
        logger.debug(
            "Decoded sensor line",
            extra={"value": timestamp.isoformat(), "timezone": zone},
        )
        return record


@lru_cache
def build_default_decoder(location: Optional[str] = None) -> RecordDecoder:
    """Factory that wires the decoder with the configured timezone."""
    settings = get_settings()
    zone_name = location or settings.timezone
    return RecordDecoder(location=zone_name)
