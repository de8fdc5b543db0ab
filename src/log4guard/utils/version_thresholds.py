# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized version thresholds for log4j vulnerability checks."""

from __future__ import annotations

from dataclasses import dataclass

from .version import Log4jVersion


@dataclass(frozen=True)
class VulnerabilityRule:
    """
    A CVE together with the versions that are no longer affected by it.

    ``fixed_after`` is a floor checked component by component. ``patched_versions``
    lists older release lines that received a backported fix: same major and minor,
    patch at or above the listed one.
    """

    cve: str
    fixed_after: Log4jVersion
    patched_versions: tuple[Log4jVersion, ...] = ()


CVE_RULES: tuple[VulnerabilityRule, ...] = (
    VulnerabilityRule(
        cve="CVE-2021-44228",
        fixed_after=Log4jVersion(2, 16, 0),
        patched_versions=(Log4jVersion(2, 12, 2), Log4jVersion(2, 3, 1)),
    ),
    VulnerabilityRule(
        cve="CVE-2021-45046",
        fixed_after=Log4jVersion(2, 16, 0),
        patched_versions=(Log4jVersion(2, 12, 2), Log4jVersion(2, 3, 1)),
    ),
    VulnerabilityRule(
        cve="CVE-2021-45105",
        fixed_after=Log4jVersion(2, 17, 0),
        patched_versions=(Log4jVersion(2, 12, 3), Log4jVersion(2, 3, 1)),
    ),
    VulnerabilityRule(
        cve="CVE-2021-44832",
        fixed_after=Log4jVersion(2, 17, 1),
        patched_versions=(Log4jVersion(2, 12, 4), Log4jVersion(2, 3, 2)),
    ),
)

__all__ = [
    "CVE_RULES",
    "VulnerabilityRule",
]
