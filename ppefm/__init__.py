# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache 2.0

# ruff: noqa: E402, I001

from ppefm.variable import Variable
from ppefm import omni, processing, units
from ppefm.config import DEFAULT_DELAY_SECONDS, PPEFMConfig
from ppefm.exceptions import InputSizeMismatchError, LocalTimeConfigurationError, NonStandardCadenceWarning
from ppefm.local_time_table import LT_RESPONSE_TABLE, LocalTimeTable
from ppefm.transfer_functions import STANDARD_CADENCE_SECONDS, TX, TY, TransferFunction
from ppefm.compute_equatorial_electric_field import PPEFMResult, compute_equatorial_electric_field


__all__ = [
    "DEFAULT_DELAY_SECONDS",
    "LT_RESPONSE_TABLE",
    "STANDARD_CADENCE_SECONDS",
    "TX",
    "TY",
    "InputSizeMismatchError",
    "LocalTimeConfigurationError",
    "LocalTimeTable",
    "NonStandardCadenceWarning",
    "PPEFMConfig",
    "PPEFMResult",
    "TransferFunction",
    "Variable",
    "compute_equatorial_electric_field",
    "omni",
    "processing",
    "units",
]
