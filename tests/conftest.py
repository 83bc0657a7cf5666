# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "basic: fast unit tests without network access")
