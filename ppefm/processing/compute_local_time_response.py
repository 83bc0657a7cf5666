# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

import numpy as np
import scipy as sp
from numpy.typing import NDArray

from ppefm.local_time_table import LT_RESPONSE_TABLE, LocalTimeTable

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 3600
DEGREES_PER_HOUR = 15


def normalize_longitude(longitude_deg:float) -> float:
    """Maps a longitude given in [-180, 360] degrees to [-180, 180] degrees.

    Longitudes outside of [-180, 360] are replaced by 0.

    Args:
        longitude_deg (float): Geographic longitude in degrees.

    Returns:
        float: The normalized longitude in degrees.
    """
    if longitude_deg < -180 or longitude_deg > 360:  # noqa: PLR2004
        logger.debug(f"Longitude {longitude_deg} is outside of [-180, 360] degrees! Using 0 instead.")
        return 0.0

    if longitude_deg > 180:  # noqa: PLR2004
        return longitude_deg - 360

    return float(longitude_deg)


def compute_local_time_hours(start_posixtime:float,
                             n_samples:int,
                             spacing_seconds:float,
                             longitude_deg:float) -> NDArray[np.float64]:
    """Computes the local time of every sample of an evenly spaced series.

    The running local time is wrapped by subtracting 24 h at most once per sample,
    before the sample is recorded.

    Args:
        start_posixtime (float): Time of the first sample in POSIX seconds.
        n_samples (int): Number of samples.
        spacing_seconds (float): Spacing between samples in seconds.
        longitude_deg (float): Geographic longitude in degrees.

    Returns:
        NDArray[np.float64]: Local time in hours for every sample.
    """
    longitude_deg = normalize_longitude(longitude_deg)

    start_ut = (start_posixtime % SECONDS_PER_DAY) / 3600
    local_time = start_ut + longitude_deg / DEGREES_PER_HOUR
    if local_time < 0.0:
        local_time += 24.0

    step_hours = spacing_seconds / 3600
    lt_hours = np.zeros(n_samples, dtype=np.float64)

    for i in range(n_samples):
        if local_time > 24.0:  # noqa: PLR2004
            local_time -= 24.0
        lt_hours[i] = local_time
        local_time += step_hours

    return lt_hours


def compute_local_time_response(start_posixtime:float,
                                n_samples:int,
                                spacing_seconds:float,
                                longitude_deg:float,
                                lt_table:LocalTimeTable = LT_RESPONSE_TABLE) -> NDArray[np.float64]:
    """Computes the local time response factor of every sample of an evenly spaced series.

    The factors are linearly interpolated from the local time table. Local times outside
    of the table are not extrapolated but set to NaN.

    Args:
        start_posixtime (float): Time of the first sample in POSIX seconds.
        n_samples (int): Number of samples.
        spacing_seconds (float): Spacing between samples in seconds.
        longitude_deg (float): Geographic longitude in degrees.
        lt_table (LocalTimeTable): The local time table to interpolate. Defaults to
            the built-in response table.

    Returns:
        NDArray[np.float64]: Local time response factor for every sample.
    """
    lt_hours = compute_local_time_hours(start_posixtime, n_samples, spacing_seconds, longitude_deg)

    f = sp.interpolate.interp1d(lt_table.hours, lt_table.values, kind="linear", bounds_error=False, fill_value=np.nan)
    lt_response = np.asarray(f(lt_hours), dtype=np.float64)

    if np.any(np.isnan(lt_response)):
        logger.warning("Local times outside of the local time table encountered! Response set to NaN.")

    return lt_response
