# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

import dataclasses

import numpy as np
import pytest

from ppefm import TX, TY, TransferFunction


@pytest.mark.basic
def test_coefficients() -> None:
    np.testing.assert_array_equal(TX.a, [1.0, -0.6023, -0.6600, 0.4451, -0.0463])
    np.testing.assert_array_equal(TX.b, [0.0052, 0.0151, 0.0014, -0.0152, -0.0061])
    np.testing.assert_array_equal(TY.a, [1.0, -1.256299, 0.412882])
    np.testing.assert_array_equal(TY.b, [0.000824, 0.000170, -0.000296, -0.001166])


@pytest.mark.basic
def test_coefficients_are_immutable() -> None:
    with pytest.raises(ValueError, match="read-only"):
        TX.b[0] = 1.0

    with pytest.raises(dataclasses.FrozenInstanceError):
        TY.a = np.ones(3)  # type: ignore[misc]


@pytest.mark.basic
@pytest.mark.parametrize(("b", "a", "match"), [
    ([0.1, 0.2], [2.0, 0.5], "must be 1"),
    ([0.1], [1.0, 0.5], "more feedback"),
    ([], [1.0], "non-empty"),
])
def test_invalid_coefficients(b: list[float], a: list[float], match: str) -> None:
    with pytest.raises(ValueError, match=match):
        TransferFunction(name="invalid", b=b, a=a)  # type: ignore[arg-type]
