# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# Cadence the transfer functions were derived for
STANDARD_CADENCE_SECONDS = 300


@dataclass(frozen=True)
class TransferFunction:
    """Fixed coefficient set of a recursive (IIR) transfer function.

    Attributes:
        name (str): Short name of the transfer function.
        b (NDArray[np.float64]): Feed-forward coefficients.
        a (NDArray[np.float64]): Feedback coefficients including the leading unity term.
        calibration (str): Calibration epoch the coefficients belong to.
    """

    name: str
    b: NDArray[np.float64]
    a: NDArray[np.float64]
    calibration: str = ""

    def __post_init__(self) -> None:
        b = np.array(self.b, dtype=np.float64)
        a = np.array(self.a, dtype=np.float64)

        if b.ndim != 1 or a.ndim != 1 or b.size == 0 or a.size == 0:
            msg = f"Coefficients of transfer function {self.name} must be non-empty 1D sequences!"
            raise ValueError(msg)
        if a[0] != 1.0:
            msg = f"Leading feedback coefficient of transfer function {self.name} must be 1, got {a[0]}!"
            raise ValueError(msg)
        if a.size > b.size:
            msg = (f"Transfer function {self.name} has more feedback ({a.size}) than "
                   f"feed-forward ({b.size}) coefficients!")
            raise ValueError(msg)

        b.setflags(write=False)
        a.setflags(write=False)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "a", a)


# Manoj, C., S. Maus, H. Luhr, and P. Alken (2008), J. Geophys. Res., 113, A00A17.
# Manoj, C., and S. Maus (2012), Space Weather, 10, S09002.

# IEF Ey -> eastward equatorial electric field
TX = TransferFunction(
    name="Tx",
    b=[0.0052, 0.0151, 0.0014, -0.0152, -0.0061],
    a=[1.0000, -0.6023, -0.6600, 0.4451, -0.0463],
    calibration="December 2008",
)

# IEF Ez -> eastward equatorial electric field
TY = TransferFunction(
    name="Ty",
    b=[0.000824, 0.000170, -0.000296, -0.001166],
    a=[1.0000, -1.256299, 0.412882],
    calibration="December 2008",
)
