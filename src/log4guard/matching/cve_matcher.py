# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Map detected log4j version strings onto the CVEs that affect them."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import RuleTableError
from ..utils.version import Log4jVersion
from ..utils.version_thresholds import CVE_RULES, VulnerabilityRule

logger = logging.getLogger(__name__)

UNKNOWN_VERSION_STATUS = "unknown version - unknown CVE status"
INVALID_VERSION_STATUS = "invalid version - unknown CVE status"


def is_fixed(rule: VulnerabilityRule, version: Log4jVersion) -> bool:
    # Components are compared independently, so 3.0.0 does not clear a 2.16.0 floor.
    floor = rule.fixed_after
    if version.major >= floor.major and version.minor >= floor.minor and version.patch >= floor.patch:
        return True
    return any(
        version.major == patched.major and version.minor == patched.minor and version.patch >= patched.patch
        for patched in rule.patched_versions
    )


def is_vulnerable(rule: VulnerabilityRule, version: Log4jVersion) -> bool:
    return not is_fixed(rule, version)


class CveMatcher:
    """Applies the vulnerability rule table to sets of version strings."""

    def __init__(
        self,
        rules: Iterable[VulnerabilityRule] = CVE_RULES,
        disabled_cves: Iterable[str] = (),
    ):
        self.rules: tuple[VulnerabilityRule, ...] = tuple(rules)
        self.disabled_cves: frozenset[str] = frozenset(disabled_cves)
        self._validate()

    def _validate(self) -> None:
        if not self.rules:
            raise RuleTableError("vulnerability rule table is empty")
        known: set[str] = set()
        for rule in self.rules:
            if rule.cve in known:
                raise RuleTableError(f"duplicate rule for {rule.cve}")
            known.add(rule.cve)
        unknown = sorted(self.disabled_cves - known)
        if unknown:
            raise RuleTableError(f"cannot disable CVEs missing from the rule table: {', '.join(unknown)}")
        if self.disabled_cves:
            logger.debug("CVE detection disabled for %s", ", ".join(sorted(self.disabled_cves)))

    def matched_cves(self, versions: Iterable[str]) -> list[str]:
        """
        Return the sorted CVE ids that apply to any of ``versions``.

        An empty input yields the unknown-version marker; each unparseable string
        contributes the invalid-version marker without stopping the others.
        """
        version_list = list(versions)
        if not version_list:
            return [UNKNOWN_VERSION_STATUS]

        found: set[str] = set()
        for raw in version_list:
            parsed = Log4jVersion.parse(raw)
            if parsed is None:
                found.add(INVALID_VERSION_STATUS)
                continue
            for rule in self.rules:
                if is_vulnerable(rule, parsed):
                    found.add(rule.cve)
        return sorted(found - self.disabled_cves)

    def __call__(self, versions: Iterable[str]) -> list[str]:
        return self.matched_cves(versions)


__all__ = [
    "CveMatcher",
    "INVALID_VERSION_STATUS",
    "UNKNOWN_VERSION_STATUS",
    "is_fixed",
    "is_vulnerable",
]
