# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest

from ppefm import LT_RESPONSE_TABLE, LocalTimeTable

# ruff: noqa: PLR2004


@pytest.mark.basic
def test_table_layout() -> None:
    hours = LT_RESPONSE_TABLE.hours

    assert hours.shape == (291,)
    assert LT_RESPONSE_TABLE.values.shape == (291,)
    assert np.all(np.diff(hours) > 0)
    assert hours[0] == pytest.approx(-1 / 12, abs=1e-6)
    assert hours[-1] == pytest.approx(24 + 1 / 12, abs=1e-6)
    np.testing.assert_allclose(np.diff(hours), 1 / 12, atol=1e-6)


@pytest.mark.basic
def test_table_wraps_around_midnight() -> None:
    values = LT_RESPONSE_TABLE.values

    # samples at -5 min, 0 min and +5 min repeat at 23:55, 24:00 and 24:05
    np.testing.assert_array_equal(values[:3], values[-3:])


@pytest.mark.basic
def test_table_is_immutable() -> None:
    with pytest.raises(ValueError, match="read-only"):
        LT_RESPONSE_TABLE.values[0] = 0.0


@pytest.mark.basic
def test_value_range() -> None:
    v_min, v_max = LT_RESPONSE_TABLE.value_range()

    assert v_min == pytest.approx(-1.73346046)
    assert v_max == pytest.approx(1.30259422)


@pytest.mark.basic
@pytest.mark.parametrize(("hours", "values", "match"), [
    ([0.0, 24.0, 12.0], [1.0, 1.0, 1.0], "strictly increasing"),
    ([0.0, 24.0], [1.0], "equal length"),
    ([1.0, 24.0], [1.0, 1.0], "cover"),
    ([0.0, 23.0], [1.0, 1.0], "cover"),
])
def test_invalid_tables(hours: list[float], values: list[float], match: str) -> None:
    with pytest.raises(ValueError, match=match):
        LocalTimeTable(hours=hours, values=values)  # type: ignore[arg-type]
