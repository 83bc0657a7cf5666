# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from numbers import Real

import numpy as np

from ppefm.exceptions import LocalTimeConfigurationError
from ppefm.transfer_functions import STANDARD_CADENCE_SECONDS
from ppefm.utils import to_posixtime

# Propagation delay from the bow shock nose to the equatorial ionosphere (Manoj et al., 2008)
DEFAULT_DELAY_SECONDS = 17 * 60


@dataclass(frozen=True)
class PPEFMConfig:
    """Configuration of a single model run.

    Attributes:
        cadence_seconds (float): Spacing of the input samples in seconds. Defaults to 300.
        longitude_deg (float | None): Geographic longitude in [-180, 180] or [0, 360] degrees.
            Required if `apply_lt` is True.
        start_time (datetime | np.datetime64 | float | None): Time of the first sample. Naive
            datetimes are treated as UTC, numbers as POSIX seconds. Required if `apply_lt` is True.
        apply_lt (bool): Modulate the output with the local time response. Defaults to True.
        apply_delay (bool): Shift the local time start time and the output time by
            `delay_seconds`. Defaults to True.
        delay_seconds (float): Propagation delay in seconds. Defaults to 1020 (17 minutes).
        verbose (bool): Log a processing summary. Defaults to False.

    Raises:
        ValueError: If the cadence is not positive or the delay is negative.
        LocalTimeConfigurationError: If `apply_lt` is True but longitude or start time is missing.
        TypeError: If longitude or start time has an unsupported type.
    """

    cadence_seconds: float = STANDARD_CADENCE_SECONDS
    longitude_deg: float | None = None
    start_time: datetime | np.datetime64 | float | None = None
    apply_lt: bool = True
    apply_delay: bool = True
    delay_seconds: float = DEFAULT_DELAY_SECONDS
    verbose: bool = False

    def __post_init__(self) -> None:
        if not np.isfinite(self.cadence_seconds) or self.cadence_seconds <= 0:
            msg = f"Cadence must be a positive number of seconds, got {self.cadence_seconds}!"
            raise ValueError(msg)

        if not np.isfinite(self.delay_seconds) or self.delay_seconds < 0:
            msg = f"Propagation delay must be a non-negative number of seconds, got {self.delay_seconds}!"
            raise ValueError(msg)

        if self.apply_lt and (self.longitude_deg is None or self.start_time is None):
            msg = "When apply_lt is True, provide 'longitude_deg' and 'start_time'!"
            raise LocalTimeConfigurationError(msg)

        if self.longitude_deg is not None and (not isinstance(self.longitude_deg, Real)
                                               or isinstance(self.longitude_deg, bool)):
            msg = f"Longitude must be a real number of degrees, got {type(self.longitude_deg).__name__}!"
            raise TypeError(msg)

        if self.start_time is not None:
            # fail early on unsupported time types
            to_posixtime(self.start_time)

    @property
    def is_standard_cadence(self) -> bool:
        return self.cadence_seconds == STANDARD_CADENCE_SECONDS

    @property
    def start_posixtime(self) -> float | None:
        """The start time in POSIX seconds, shifted by the propagation delay if applied."""
        if self.start_time is None:
            return None

        start = to_posixtime(self.start_time)
        if self.apply_delay and self.delay_seconds > 0:
            start += self.delay_seconds

        return start
