# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import numpy as np
import pandas as pd
from astropy import units as u  # type: ignore[reportMissingTypeStubs]
from numpy.typing import ArrayLike, NDArray

from ppefm import units
from ppefm.config import PPEFMConfig
from ppefm.exceptions import InputSizeMismatchError, NonStandardCadenceWarning
from ppefm.local_time_table import LT_RESPONSE_TABLE, LocalTimeTable
from ppefm.processing import (
    apply_transfer_function,
    compute_interplanetary_electric_field,
    compute_local_time_response,
)
from ppefm.transfer_functions import STANDARD_CADENCE_SECONDS, TX, TY
from ppefm.utils import posixtime_to_datetime, timed_function
from ppefm.variable import Variable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PPEFMResult:
    """Output of a model run.

    Attributes:
        eef (Variable): Equatorial eastward electric field in mV/m.
        ief_ey (Variable): Interplanetary electric field Ey in mV/m.
        ief_ez (Variable): Interplanetary electric field Ez in mV/m.
        eef_from_ey (Variable): Filtered contribution of IEF Ey in mV/m.
        eef_from_ez (Variable): Filtered contribution of IEF Ez in mV/m.
        lt_response (Variable): Local time response factor. Empty if the local time
            response was not applied.
        time (Variable): POSIX time of every sample, shifted by the propagation delay if
            applied. Empty if no start time was configured.
    """

    eef: Variable
    ief_ey: Variable
    ief_ez: Variable
    eef_from_ey: Variable
    eef_from_ez: Variable
    lt_response: Variable
    time: Variable

    def get_datetimes(self) -> list[datetime]:
        """Returns the sample times as timezone-aware UTC datetimes."""
        return posixtime_to_datetime(self.time.get_data(units.posixtime))

    def to_dataframe(self) -> pd.DataFrame:
        """Collects all output series in a data frame.

        The frame is indexed by the UTC sample times if they are available.
        """
        columns = {
            "eef": self.eef.get_data(),
            "ief_ey": self.ief_ey.get_data(),
            "ief_ez": self.ief_ez.get_data(),
            "eef_from_ey": self.eef_from_ey.get_data(),
            "eef_from_ez": self.eef_from_ez.get_data(),
        }
        if len(self.lt_response.get_data()) > 0:
            columns["lt_response"] = self.lt_response.get_data()

        index = None
        if len(self.time.get_data()) > 0:
            index = pd.to_datetime(self.time.get_data(units.posixtime), unit="s", utc=True)
            index.name = "time"

        return pd.DataFrame(columns, index=index)


def _get_input_data(data:Variable|ArrayLike, unit:u.UnitBase, name:str) -> NDArray[np.float64]:
    if isinstance(data, Variable):
        data = data.get_data(unit)

    data = np.asarray(data, dtype=np.float64)

    if data.ndim != 1:
        msg = f"Input {name} must be one-dimensional, got {data.ndim} dimensions!"
        raise ValueError(msg)

    return data


@timed_function("PPEFM", log_level=logging.DEBUG)
def compute_equatorial_electric_field(sw_speed:Variable|ArrayLike,
                                      imf_by:Variable|ArrayLike,
                                      imf_bz:Variable|ArrayLike,
                                      config:PPEFMConfig|None = None,
                                      *,
                                      local_time_table:LocalTimeTable = LT_RESPONSE_TABLE,
                                      **config_kwargs:Any) -> PPEFMResult:
    """Converts solar wind data to the equatorial ionospheric eastward electric field.

    Implements the Prompt Penetration Electric Field Model (PPEFM) in the time domain:

    1. The interplanetary electric field is computed from solar wind speed and IMF.
    2. Both IEF components are filtered with their transfer functions.
    3. If requested, the sum of both filtered components is modulated by the local time
       response, looked up at the start time shifted by the propagation delay.

    References:
        Manoj, C., S. Maus, H. Luhr, and P. Alken (2008), J. Geophys. Res., 113, A00A17,
        doi:10.1029/2008JA013323.
        Manoj, C., and S. Maus (2012), Space Weather, 10, S09002, doi:10.1029/2012SW000825.

    Args:
        sw_speed (Variable | ArrayLike): Solar wind bulk speed. Plain arrays are taken as km/s.
        imf_by (Variable | ArrayLike): IMF By in GSM. Plain arrays are taken as nT.
        imf_bz (Variable | ArrayLike): IMF Bz in GSM. Plain arrays are taken as nT.
        config (PPEFMConfig | None): The run configuration. If None, it is built from
            `config_kwargs`.
        local_time_table (LocalTimeTable): The local time response table. Defaults to
            the built-in table.
        **config_kwargs: Fields of `PPEFMConfig`, only allowed if `config` is None.

    Returns:
        PPEFMResult: The model output.

    Raises:
        TypeError: If both `config` and `config_kwargs` are given.
        LocalTimeConfigurationError: If the local time response is requested without
            longitude or start time.
        InputSizeMismatchError: If the input series differ in length.
    """
    if config is None:
        config = PPEFMConfig(**config_kwargs)
    elif config_kwargs:
        msg = f"Either pass a PPEFMConfig or configuration keywords, not both! Got {sorted(config_kwargs)}."
        raise TypeError(msg)

    sw_speed_data = _get_input_data(sw_speed, units.km_per_s, "sw_speed")
    imf_by_data = _get_input_data(imf_by, units.nT, "imf_by")
    imf_bz_data = _get_input_data(imf_bz, units.nT, "imf_bz")

    n_samples = sw_speed_data.size
    if imf_by_data.size != n_samples or imf_bz_data.size != n_samples:
        msg = (f"All input series (sw_speed, imf_by, imf_bz) must have the same length! "
               f"Got {n_samples}, {imf_by_data.size}, {imf_bz_data.size}.")
        raise InputSizeMismatchError(msg)

    if not config.is_standard_cadence:
        msg = (f"Transfer functions were derived for a {STANDARD_CADENCE_SECONDS/60:.1f}-minute cadence. "
               f"Using {config.cadence_seconds/60:.1f}-minute cadence may affect accuracy.")
        warnings.warn(msg, NonStandardCadenceWarning, stacklevel=3)

    ief_ey_data, ief_ez_data = compute_interplanetary_electric_field(sw_speed_data, imf_by_data, imf_bz_data)

    eef_from_ey_data = apply_transfer_function(TX, ief_ey_data)
    eef_from_ez_data = apply_transfer_function(TY, ief_ez_data)

    start_posixtime = config.start_posixtime

    lt_response_data = np.array([], dtype=np.float64)
    if config.apply_lt:
        lt_response_data = compute_local_time_response(start_posixtime,  # type: ignore[reportArgumentType]
                                                       n_samples,
                                                       config.cadence_seconds,
                                                       config.longitude_deg,  # type: ignore[reportArgumentType]
                                                       local_time_table)

    time_data = np.array([], dtype=np.float64)
    if start_posixtime is not None:
        time_data = start_posixtime + np.arange(n_samples, dtype=np.float64) * config.cadence_seconds

    if config.apply_lt:
        eef_data = lt_response_data * (eef_from_ey_data + eef_from_ez_data)
    else:
        eef_data = eef_from_ey_data + eef_from_ez_data

    result = _create_result(config,
                            eef_data,
                            ief_ey_data,
                            ief_ez_data,
                            eef_from_ey_data,
                            eef_from_ez_data,
                            lt_response_data,
                            time_data)

    if config.verbose:
        _log_summary(config, result)

    return result


def _create_result(config:PPEFMConfig,
                   eef_data:NDArray[np.float64],
                   ief_ey_data:NDArray[np.float64],
                   ief_ez_data:NDArray[np.float64],
                   eef_from_ey_data:NDArray[np.float64],
                   eef_from_ez_data:NDArray[np.float64],
                   lt_response_data:NDArray[np.float64],
                   time_data:NDArray[np.float64]) -> PPEFMResult:

    cadence = config.cadence_seconds

    ief_ey = Variable(units.mV_per_m, ief_ey_data, "Interplanetary electric field Ey", cadence_seconds=cadence)
    ief_ey.metadata.add_processing_note("Computed as -V*Bz/1000 from solar wind speed and IMF Bz (GSM).")

    ief_ez = Variable(units.mV_per_m, ief_ez_data, "Interplanetary electric field Ez", cadence_seconds=cadence)
    ief_ez.metadata.add_processing_note("Computed as -V*By/1000 from solar wind speed and IMF By (GSM).")

    eef_from_ey = Variable(units.mV_per_m, eef_from_ey_data, "Equatorial electric field driven by IEF Ey",
                           cadence_seconds=cadence)
    eef_from_ey.metadata.add_processing_note(f"IEF Ey filtered with transfer function {TX.name} ({TX.calibration}).")

    eef_from_ez = Variable(units.mV_per_m, eef_from_ez_data, "Equatorial electric field driven by IEF Ez",
                           cadence_seconds=cadence)
    eef_from_ez.metadata.add_processing_note(f"IEF Ez filtered with transfer function {TY.name} ({TY.calibration}).")

    lt_response = Variable(units.dimensionless, lt_response_data, "Local time response factor",
                           cadence_seconds=cadence)
    eef = Variable(units.mV_per_m, eef_data, "Equatorial ionospheric eastward electric field",
                   cadence_seconds=cadence)
    eef.metadata.add_processing_note("Sum of the filtered IEF Ey and IEF Ez contributions.")

    if config.apply_lt:
        lt_response.metadata.add_processing_note(
            f"Interpolated from the local time table at longitude {config.longitude_deg} deg.")
        eef.metadata.add_processing_note("Multiplied with the local time response factor.")

    time = Variable(units.posixtime, time_data, "Time of the samples (UTC)", cadence_seconds=cadence)
    if config.apply_delay and config.delay_seconds > 0 and len(time_data) > 0:
        time.metadata.add_processing_note(f"Shifted by a propagation delay of {config.delay_seconds} seconds.")

    return PPEFMResult(eef=eef,
                       ief_ey=ief_ey,
                       ief_ez=ief_ez,
                       eef_from_ey=eef_from_ey,
                       eef_from_ez=eef_from_ez,
                       lt_response=lt_response,
                       time=time)


def _log_summary(config:PPEFMConfig, result:PPEFMResult) -> None:

    def _range(var:Variable) -> tuple[float, float]:
        data = var.get_data()
        if len(data) == 0:
            return (np.nan, np.nan)
        return float(np.nanmin(data)), float(np.nanmax(data))

    logger.info("PPEFM Time-Domain Filter")
    logger.info(f"Input data length: {len(result.eef)} samples")
    logger.info(f"Cadence: {config.cadence_seconds/60:.1f} minutes")
    logger.info("IEF_Ey range: {:.4f} to {:.4f} mV/m".format(*_range(result.ief_ey)))
    logger.info("IEF_Ez range: {:.4f} to {:.4f} mV/m".format(*_range(result.ief_ez)))
    if config.apply_lt:
        logger.info("LT response range: {:.3f} to {:.3f}".format(*_range(result.lt_response)))
        if config.apply_delay:
            logger.info(f"Applied propagation delay: {config.delay_seconds/60:.1f} minutes")
    logger.info("EEF range: {:.4f} to {:.4f} mV/m".format(*_range(result.eef)))
