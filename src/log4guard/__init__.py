# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Log4Guard package entrypoint.

This package holds the matching and reporting core of a filesystem scanner for
vulnerable log4j versions. Crawlers hand each suspicious file to a ``Reporter``
as a path, a ``Finding`` bitmask and the set of version strings they found; the
reporter maps versions onto CVEs, applies suppression and writes one line per
reported file.
"""

from .config import OutputMode, ReporterSettings, load_reporter_settings
from .errors import ErrorCategory, Log4GuardError, RuleTableError
from .log import setup_logging
from .matching import INVALID_VERSION_STATUS, UNKNOWN_VERSION_STATUS, CveMatcher
from .models import Finding, ReportRecord
from .scan import Reporter, create_default_reporter
from .utils import CVE_RULES, UNKNOWN_VERSION, Log4jVersion, VulnerabilityRule, parse_log4j_version
from .version import __version__

__all__ = [
    "CVE_RULES",
    "CveMatcher",
    "ErrorCategory",
    "Finding",
    "INVALID_VERSION_STATUS",
    "Log4GuardError",
    "Log4jVersion",
    "OutputMode",
    "ReportRecord",
    "Reporter",
    "ReporterSettings",
    "RuleTableError",
    "UNKNOWN_VERSION",
    "UNKNOWN_VERSION_STATUS",
    "VulnerabilityRule",
    "create_default_reporter",
    "load_reporter_settings",
    "parse_log4j_version",
    "setup_logging",
    "__version__",
]
