# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache 2.0

from ppefm.processing.compute_interplanetary_electric_field import compute_interplanetary_electric_field
from ppefm.processing.compute_local_time_response import (
    compute_local_time_hours,
    compute_local_time_response,
    normalize_longitude,
)
from ppefm.processing.iir_filter import apply_transfer_function, iir_filter

__all__ = [
    "apply_transfer_function",
    "compute_interplanetary_electric_field",
    "compute_local_time_hours",
    "compute_local_time_response",
    "iir_filter",
    "normalize_longitude",
]
