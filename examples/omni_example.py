# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

"""Download 5-minute OMNI By, Bz (GSM) and solar wind speed from OMNIWeb and run PPEFM.

Requires internet access to https://omniweb.gsfc.nasa.gov.
"""

import logging
from datetime import datetime, timezone

import ppefm
from ppefm.omni import load_omni_solar_wind

logging.captureWarnings(True)

logger = logging.getLogger()
logger.setLevel(logging.INFO)

log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
date_format = "%H:%M:%S"

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter(fmt=log_format, datefmt=date_format))
logger.addHandler(console_handler)

start_time = datetime(2024, 5, 11, 0, 0, 0, tzinfo=timezone.utc)
end_time = datetime(2024, 5, 11, 2, 0, 0, tzinfo=timezone.utc)
longitude_deg = -105

omni = load_omni_solar_wind(start_time, end_time)

result = ppefm.compute_equatorial_electric_field(
    omni["SW_speed"],
    omni["IMF_By"],
    omni["IMF_Bz"],
    cadence_seconds=300,
    longitude_deg=longitude_deg,
    start_time=float(omni["Time"].get_data(ppefm.units.posixtime)[0]),
    apply_lt=True,
    apply_delay=True,
    delay_seconds=17 * 60,
    verbose=True,
)

print(result.to_dataframe().to_string())  # noqa: T201
