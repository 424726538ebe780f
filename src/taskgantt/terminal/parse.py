# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskgantt.time import datetime_from_str_utc, now_utc

_DATE_P = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_P = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")
_DAY_OFFSET_P = re.compile(r"^-?\d+$")

# Keywords that name the start of a day, as offsets from today
_DAY_KEYWORDS = {"today": 0, "t": 0, "yesterday": -1, "y": -1}


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a window bound given on the command line into a UTC datetime.

    Accepts YYYY-MM-DD with an optional time, (H)H:mm(:ss) on today's date,
    a day offset such as -1, and the keywords now (n), today (t) and
    yesterday (y). Values without a zone are read in local time.
    """
    if datetime_param is None:
        return None

    value = str(datetime_param).strip()

    if _DATE_P.match(value):
        try:
            return datetime_from_str_utc(value)
        except ValueError as e:
            raise typer.BadParameter(f"Incorrect datetime format: {e}") from e

    time_match = _TIME_P.match(value)
    if time_match:
        hour, minute, second = (int(part or 0) for part in time_match.groups())
        if hour > 23 or minute > 59 or second > 59:
            raise typer.BadParameter(f"No such time of day: {value}")
        return (
            pendulum.today("local")
            .set(hour=hour, minute=minute, second=second)
            .in_tz("UTC")
        )

    if value in ("now", "n"):
        return now_utc()

    if _DAY_OFFSET_P.match(value):
        days = int(value)
    elif value in _DAY_KEYWORDS:
        days = _DAY_KEYWORDS[value]
    else:
        raise typer.BadParameter(f"Incorrect datetime format: {value}")
    return pendulum.today("local").add(days=days).in_tz("UTC")


def parse_task_id_list(id_params: Optional[list[str]]) -> list[str]:
    """
    Parse repeated task id options, each holding one id or a comma-separated list.

    Args:
        id_params: Option values such as ["extract", "load,transform"]

    Returns:
        Task ids in the order given, without duplicates

    Raises:
        typer.BadParameter: If an option value holds no id at all
    """
    ids: list[str] = []
    for id_param in id_params or []:
        id_strings = [s.strip() for s in id_param.split(",") if s.strip()]
        if not id_strings:
            raise typer.BadParameter(f"No valid task ids in '{id_param}'")
        for id_str in id_strings:
            if id_str not in ids:
                ids.append(id_str)
    return ids
