# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

"""Loader for 5-minute OMNI solar wind data from OMNIWeb.

OMNI data are already propagated to the bow shock nose, so they can be passed to
`ppefm.compute_equatorial_electric_field` directly. Missing values are linearly
interpolated, since the model expects gap-free input.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from io import StringIO

import numpy as np
import pandas as pd
import requests

from ppefm import units
from ppefm.utils import enforce_utc_timezone, timed_function
from ppefm.variable import Variable

logger = logging.getLogger(__name__)

OMNIWEB_URL = "https://omniweb.gsfc.nasa.gov/cgi/nx1.cgi"

# OMNIWeb variable numbers of the 5-minute data set
OMNI_VARS = {
    "by_gsm": "17",
    "bz_gsm": "18",
    "speed": "21",
}

OMNI_FILL_VALUES = {
    "by_gsm": 9999.99,
    "bz_gsm": 9999.99,
    "speed": 99999.9,
}

OMNI_COLUMNS = ["year", "doy", "hour", "minute", "by_gsm", "bz_gsm", "speed"]

_DATA_ROW_PATTERN = re.compile(r"^\d{4}\s+\d{1,3}\s+\d{1,2}\s+\d{1,2}")


def build_omni_query(start_time:datetime, end_time:datetime) -> dict[str, str | list[str]]:
    """Builds the OMNIWeb query parameters for 5-minute By, Bz (GSM) and solar wind speed."""
    start_time = enforce_utc_timezone(start_time).astimezone(timezone.utc)
    end_time = enforce_utc_timezone(end_time).astimezone(timezone.utc)

    return {
        "activity": "retrieve",
        "res": "5min",
        "spacecraft": "omni_5min",
        "vars": list(OMNI_VARS.values()),
        "start_date": start_time.strftime("%Y%m%d%H"),
        "end_date": end_time.strftime("%Y%m%d%H"),
        "view": "0",
    }


def download_omni_text(start_time:datetime, end_time:datetime, timeout:float = 30) -> str:
    """Requests 5-minute OMNI data from OMNIWeb and returns the raw response text.

    Raises:
        requests.HTTPError: If OMNIWeb responds with an error status.
    """
    params = build_omni_query(start_time, end_time)
    logger.info(f"Requesting OMNI data from {OMNIWEB_URL} for {params['start_date']} to {params['end_date']}")

    response = requests.get(OMNIWEB_URL, params=params, timeout=timeout)
    response.raise_for_status()

    return response.text


def parse_omni_text(text:str) -> pd.DataFrame:
    """Parses an OMNIWeb text response into a gap-free data frame.

    Only lines starting with year, day of year, hour and minute are considered data rows.
    Fill values are replaced by NaN and interpolated linearly; leading and trailing gaps
    are filled with the nearest valid value.

    Args:
        text (str): The OMNIWeb response text.

    Returns:
        pd.DataFrame: Columns 'by_gsm', 'bz_gsm' (nT) and 'speed' (km/s), indexed by UTC time.

    Raises:
        ValueError: If the response does not contain any data rows.
    """
    rows = [line.strip() for line in text.splitlines() if _DATA_ROW_PATTERN.match(line.strip())]

    if not rows:
        msg = "No data rows parsed from OMNI response!"
        raise ValueError(msg)

    df = pd.read_csv(StringIO("\n".join(rows)),
                     names=OMNI_COLUMNS,
                     usecols=range(len(OMNI_COLUMNS)),
                     sep=r"\s+")

    df.index = pd.DatetimeIndex(pd.to_datetime(df["year"].astype(str), format="%Y", utc=True)
                                + pd.to_timedelta(df["doy"] - 1, unit="D")
                                + pd.to_timedelta(df["hour"], unit="h")
                                + pd.to_timedelta(df["minute"], unit="min"),
                                name="time")
    df = df.drop(columns=["year", "doy", "hour", "minute"])

    for key, fill_value in OMNI_FILL_VALUES.items():
        n_missing = int(np.sum(np.isclose(df[key].to_numpy(dtype=np.float64), fill_value)))
        if n_missing > 0:
            logger.info(f"Interpolating {n_missing} missing values of {key}")
        df[key] = df[key].mask(np.isclose(df[key].to_numpy(dtype=np.float64), fill_value))
        df[key] = df[key].interpolate(method="linear").ffill().bfill()

    return df


@timed_function("Loading OMNI data")
def load_omni_solar_wind(start_time:datetime, end_time:datetime, timeout:float = 30) -> dict[str, Variable]:
    """Loads gap-free 5-minute solar wind speed and IMF from OMNIWeb.

    Args:
        start_time (datetime): Start of the requested interval. Naive datetimes are taken as UTC.
        end_time (datetime): End of the requested interval. Naive datetimes are taken as UTC.
        timeout (float): Timeout of the request in seconds. Defaults to 30.

    Returns:
        dict[str, Variable]: Variables 'SW_speed' (km/s), 'IMF_By' (nT), 'IMF_Bz' (nT) and
            'Time' (posixtime).
    """
    df = parse_omni_text(download_omni_text(start_time, end_time, timeout=timeout))

    cadence_seconds = 5 * 60
    timestamps = ((df.index - pd.Timestamp(0, tz="UTC")) / pd.Timedelta(seconds=1)).to_numpy(dtype=np.float64)

    return {
        "SW_speed": Variable(units.km_per_s, df["speed"].to_numpy(dtype=np.float64),
                             "Solar wind bulk speed (OMNI)", cadence_seconds=cadence_seconds),
        "IMF_By": Variable(units.nT, df["by_gsm"].to_numpy(dtype=np.float64),
                           "IMF By in GSM (OMNI)", cadence_seconds=cadence_seconds),
        "IMF_Bz": Variable(units.nT, df["bz_gsm"].to_numpy(dtype=np.float64),
                           "IMF Bz in GSM (OMNI)", cadence_seconds=cadence_seconds),
        "Time": Variable(units.posixtime, timestamps, "Time of the OMNI samples (UTC)",
                         cadence_seconds=cadence_seconds),
    }
