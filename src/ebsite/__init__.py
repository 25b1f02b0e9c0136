# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Back-office API for a single real-estate agent's site."""

__version__ = "0.1.0"
