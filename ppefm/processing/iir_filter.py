# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ppefm.transfer_functions import TransferFunction


def iir_filter(b:ArrayLike, a:ArrayLike, x:ArrayLike) -> NDArray[np.float64]:
    """Applies a recursive filter to a series, starting from a zero state.

    The filter state is a buffer of the length of `b`. For every sample the buffer
    is shifted by one, the weighted input is added to all slots and the fed back
    output is subtracted from the slots 1 to len(a)-1. The first slot is the output.
    This is equivalent to `scipy.signal.lfilter(b, a, x)` for `a[0] == 1`.

    The whole series has to be filtered in one call, since the state carries
    information from sample to sample.

    Args:
        b (ArrayLike): Feed-forward coefficients.
        a (ArrayLike): Feedback coefficients including the leading unity term.
        x (ArrayLike): The 1D input series.

    Returns:
        NDArray[np.float64]: The filtered series with the same length as `x`.

    Raises:
        ValueError: If `x` is not one-dimensional or `a` is longer than `b`.
    """
    b = np.asarray(b, dtype=np.float64)
    a = np.asarray(a, dtype=np.float64)
    x = np.asarray(x, dtype=np.float64)

    if x.ndim != 1:
        msg = f"Input series must be one-dimensional, got {x.ndim} dimensions!"
        raise ValueError(msg)

    nb = b.size
    na = a.size
    if na > nb:
        msg = f"Number of feedback coefficients ({na}) must not exceed number of feed-forward coefficients ({nb})!"
        raise ValueError(msg)

    buffer = np.zeros(nb, dtype=np.float64)
    y = np.empty_like(x)

    for j, x_j in enumerate(x):
        buffer[:-1] = buffer[1:]
        buffer[-1] = 0.0

        buffer += x_j * b

        y_j = buffer[0]
        buffer[1:na] -= y_j * a[1:]

        y[j] = y_j

    return y


def apply_transfer_function(transfer_function:TransferFunction, x:ArrayLike) -> NDArray[np.float64]:
    """Filters a series with the coefficients of a transfer function."""
    return iir_filter(transfer_function.b, transfer_function.a, x)
