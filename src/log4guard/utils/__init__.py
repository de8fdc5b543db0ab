# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility exports."""

from .version import (
    UNKNOWN_VERSION,
    Log4jVersion,
    parse_log4j_version,
    sort_versions,
)
from .version_thresholds import CVE_RULES, VulnerabilityRule

__all__ = [
    "CVE_RULES",
    "UNKNOWN_VERSION",
    "Log4jVersion",
    "VulnerabilityRule",
    "parse_log4j_version",
    "sort_versions",
]
