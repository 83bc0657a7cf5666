# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

import numpy as np
from numpy.typing import ArrayLike, NDArray

# 1 km/s * 1 nT = 1e3 m/s * 1e-9 T = 1e-6 V/m
KM_S_NT_TO_MV_M = 1000


def compute_interplanetary_electric_field(sw_speed:ArrayLike,
                                          imf_by:ArrayLike,
                                          imf_bz:ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    r"""Computes the interplanetary electric field from solar wind speed and IMF.

    Using GSM coordinates with the solar wind flowing along -X, $E = -V \times B$ gives

    $$
    E_y = -V B_z, \quad E_z = -V B_y
    $$

    Args:
        sw_speed (ArrayLike): Solar wind bulk speed in km/s.
        imf_by (ArrayLike): IMF By (GSM) in nT.
        imf_bz (ArrayLike): IMF Bz (GSM) in nT.

    Returns:
        tuple[NDArray[np.float64], NDArray[np.float64]]: IEF Ey and IEF Ez in mV/m.
    """
    sw_speed = np.asarray(sw_speed, dtype=np.float64)
    imf_by = np.asarray(imf_by, dtype=np.float64)
    imf_bz = np.asarray(imf_bz, dtype=np.float64)

    ief_ey = -sw_speed * imf_bz / KM_S_NT_TO_MV_M
    ief_ez = -sw_speed * imf_by / KM_S_NT_TO_MV_M

    return ief_ey, ief_ez
