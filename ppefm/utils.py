# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import timeit
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from functools import wraps
from numbers import Real
from typing import ParamSpec, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

def timed_function(func_name:str|None=None,
                   log_level:int=logging.INFO) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """A decorator that logs the execution time of a function.

    This decorator measures the time it takes for a decorated function to execute
    and logs the result to a logger at the given level. The log message can be
    prefixed with an optional function name.

    Parameters:
        func_name (str | None): An optional name to use in the log message. If `None`,
                                a generic message is used.
        log_level (int): The level of the log message. Defaults to logging.INFO.

    Returns:
        Callable: A decorator that wraps the target function with timing logic.
    """
    def timed_function_(f: Callable[P, R]) -> Callable[P, R]:
        @wraps(f)
        def wrap(*args: P.args, **kwargs: P.kwargs) -> R:
            tic = timeit.default_timer()
            result = f(*args, **kwargs)
            toc = timeit.default_timer()
            if func_name:
                logger.log(log_level, f"\t\t{func_name} finished in {toc-tic:0.3f} seconds")
            else:
                logger.log(log_level, f"\t\tFinished in {toc-tic:0.3f} seconds")

            return result
        return wrap
    return timed_function_

def enforce_utc_timezone(time:datetime) -> datetime:
    """Ensures a datetime object has UTC timezone information.

    If the provided datetime object is naive (lacks timezone info), it is assigned
    the UTC timezone. If it already has a timezone, it is returned unchanged.

    Parameters:
        time (datetime): The datetime object to process.

    Returns:
        datetime: The datetime object with `timezone.utc` assigned.
    """
    if time.tzinfo is None:
        time = time.replace(tzinfo=timezone.utc)
    return time

def to_posixtime(time:datetime|np.datetime64|float) -> float:
    """Converts an absolute time value to seconds since 1970-01-01 UTC.

    Naive datetimes are interpreted as UTC, timezone-aware datetimes keep their
    absolute instant and plain numbers are taken as POSIX seconds already.

    Parameters:
        time (datetime | np.datetime64 | float): The time value to convert.

    Returns:
        float: The POSIX timestamp in seconds.

    Raises:
        TypeError: If the time value is of an unsupported type.
    """
    if isinstance(time, datetime):
        return enforce_utc_timezone(time).timestamp()

    if isinstance(time, np.datetime64):
        return float((time - np.datetime64(0, "s")) / np.timedelta64(1, "s"))

    if isinstance(time, Real) and not isinstance(time, bool):
        return float(time)

    msg = f"Unsupported time type {type(time).__name__}! Expected datetime, numpy.datetime64 or POSIX seconds."
    raise TypeError(msg)

def posixtime_to_datetime(timestamps:Iterable[float]) -> list[datetime]:
    """Converts POSIX timestamps to timezone-aware UTC datetime objects.

    Parameters:
        timestamps (Iterable[float]): POSIX timestamps in seconds.

    Returns:
        list[datetime]: The corresponding UTC datetimes.
    """
    return [datetime.fromtimestamp(float(t), tz=timezone.utc) for t in timestamps]
