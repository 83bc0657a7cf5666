# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0


class InputSizeMismatchError(ValueError):
    """Raised if the solar wind speed and IMF input series differ in length."""


class LocalTimeConfigurationError(ValueError):
    """Raised if the local time response is requested without longitude or start time."""


class NonStandardCadenceWarning(UserWarning):
    """Issued if the data cadence differs from the one the transfer functions were derived for."""
