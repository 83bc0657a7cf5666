# SPDX-FileCopyrightText: 2025 GFZ Helmholtz Centre for Geosciences
# SPDX-FileContributor: Bernhard Haas
#
# SPDX-License-Identifier: Apache-2.0

from astropy import units as u

# -----------------------------------------------------------------------------
# 1. Custom Unit Definitions
# -----------------------------------------------------------------------------

# Seconds since 1970-01-01 UTC
posixtime = u.def_unit("posixtime")

# -----------------------------------------------------------------------------
# 2. Units used throughout the model
# -----------------------------------------------------------------------------

km_per_s = u.km / u.s
nT = u.nT
mV_per_m = u.mV / u.m
dimensionless = u.dimensionless_unscaled

# -----------------------------------------------------------------------------
# 3. Enable Custom Units
# -----------------------------------------------------------------------------

# Add custom units to the astropy.units namespace for direct access
u.add_enabled_units(posixtime)
