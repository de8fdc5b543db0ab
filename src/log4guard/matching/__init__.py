# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CVE matching against the log4j rule table."""

from .cve_matcher import (
    INVALID_VERSION_STATUS,
    UNKNOWN_VERSION_STATUS,
    CveMatcher,
    is_fixed,
    is_vulnerable,
)

__all__ = [
    "CveMatcher",
    "INVALID_VERSION_STATUS",
    "UNKNOWN_VERSION_STATUS",
    "is_fixed",
    "is_vulnerable",
]
