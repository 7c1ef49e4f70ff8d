# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="local")
    return pendulum_value.in_tz("UTC")


def python_to_pendulum_utc_optional(
    python_value: Optional[datetime.datetime],
) -> Optional[pendulum.DateTime]:
    if python_value is None:
        return None
    return python_to_pendulum_utc(python_value)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_date_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def whole_days_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Number of complete 24 hour periods from start to end, truncated toward zero."""
    seconds = (end - start).total_seconds()
    return int(seconds / 86400)


def is_aware(datetime: pendulum.DateTime) -> bool:
    return datetime.tzinfo is not None and datetime.utcoffset() is not None
