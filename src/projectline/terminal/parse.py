# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from projectline.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today().add(days=days_offset).start_of("day")
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today().start_of("day").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday().start_of("day").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow().start_of("day").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def end_of_day(
    datetime: Optional[pendulum.DateTime],
) -> Optional[pendulum.DateTime]:
    """Push a parsed date to the last moment of its local day, for inclusive upper bounds."""
    if datetime is None:
        return None
    return datetime.in_tz("local").end_of("day").in_tz("UTC")
