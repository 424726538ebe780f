# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm:ss")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    # Local time applies only to values that carry no offset of their own
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def get_duration(
    start: Optional[pendulum.DateTime], end: Optional[pendulum.DateTime]
) -> float:
    """Milliseconds from start to end, or 0 when either side is missing."""
    if start is None or end is None:
        return 0
    return (end - start).total_seconds() * 1000


def duration_ms_to_str(duration_ms: float) -> str:
    """Format a millisecond duration as HH:mm:ss, keeping a sign for negatives."""
    sign = "-" if duration_ms < 0 else ""
    total_seconds = int(abs(duration_ms) // 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="UTC")
    return pendulum_value.in_tz("UTC")


def datetime_from_yaml_optional(
    value: Optional[str | datetime.datetime],
) -> Optional[pendulum.DateTime]:
    """Accept either an ISO string or the datetime YAML builds from an unquoted timestamp."""
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_utc(value)
    return datetime_from_str(str(value))
