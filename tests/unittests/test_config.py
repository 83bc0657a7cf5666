# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

import dataclasses
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from ppefm import DEFAULT_DELAY_SECONDS, LocalTimeConfigurationError, PPEFMConfig

# ruff: noqa: PLR2004

START_TIME = datetime(2024, 5, 11, tzinfo=timezone.utc)


@pytest.mark.basic
def test_defaults() -> None:
    config = PPEFMConfig(longitude_deg=-105, start_time=START_TIME)

    assert config.cadence_seconds == 300
    assert config.apply_lt
    assert config.apply_delay
    assert config.delay_seconds == DEFAULT_DELAY_SECONDS == 1020
    assert not config.verbose
    assert config.is_standard_cadence


@pytest.mark.basic
@pytest.mark.parametrize("kwargs", [
    {},
    {"longitude_deg": 10.0},
    {"start_time": START_TIME},
])
def test_local_time_requires_longitude_and_start_time(kwargs: dict[str, object]) -> None:
    with pytest.raises(LocalTimeConfigurationError, match="longitude_deg"):
        PPEFMConfig(**kwargs)  # type: ignore[arg-type]


@pytest.mark.basic
def test_local_time_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        PPEFMConfig(apply_lt=True)


@pytest.mark.basic
def test_no_local_time() -> None:
    config = PPEFMConfig(apply_lt=False)

    assert config.start_posixtime is None


@pytest.mark.basic
@pytest.mark.parametrize("cadence", [0, -300, np.nan])
def test_invalid_cadence(cadence: float) -> None:
    with pytest.raises(ValueError, match="Cadence"):
        PPEFMConfig(apply_lt=False, cadence_seconds=cadence)


@pytest.mark.basic
def test_invalid_delay() -> None:
    with pytest.raises(ValueError, match="delay"):
        PPEFMConfig(apply_lt=False, delay_seconds=-1)


@pytest.mark.basic
def test_unsupported_start_time() -> None:
    with pytest.raises(TypeError, match="Unsupported time type"):
        PPEFMConfig(longitude_deg=0, start_time="2024-05-11")  # type: ignore[arg-type]


@pytest.mark.basic
@pytest.mark.parametrize("longitude", ["-105", True, [10.0]])
def test_unsupported_longitude(longitude: object) -> None:
    with pytest.raises(TypeError, match="Longitude must be a real number"):
        PPEFMConfig(longitude_deg=longitude, start_time=0.0)  # type: ignore[arg-type]


@pytest.mark.basic
@pytest.mark.parametrize("longitude", [-105, 250.5, np.float64(10.0)])
def test_numeric_longitude(longitude: float) -> None:
    assert PPEFMConfig(longitude_deg=longitude, start_time=0.0).longitude_deg == longitude


@pytest.mark.basic
def test_config_is_frozen() -> None:
    config = PPEFMConfig(apply_lt=False)

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.verbose = True  # type: ignore[misc]


@pytest.mark.basic
@pytest.mark.parametrize("start_time", [
    START_TIME,
    datetime(2024, 5, 11),
    datetime(2024, 5, 11, 2, tzinfo=timezone(timedelta(hours=2))),
    START_TIME.timestamp(),
    int(START_TIME.timestamp()),
    np.datetime64("2024-05-11T00:00:00"),
])
def test_start_posixtime(start_time: object) -> None:
    config = PPEFMConfig(longitude_deg=0, start_time=start_time, apply_delay=False)  # type: ignore[arg-type]

    assert config.start_posixtime == pytest.approx(START_TIME.timestamp())


@pytest.mark.basic
def test_start_posixtime_with_delay() -> None:
    config = PPEFMConfig(longitude_deg=0, start_time=START_TIME)
    assert config.start_posixtime == pytest.approx(START_TIME.timestamp() + 1020)

    config = PPEFMConfig(longitude_deg=0, start_time=START_TIME, delay_seconds=0)
    assert config.start_posixtime == pytest.approx(START_TIME.timestamp())
