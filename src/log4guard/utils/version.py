# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Version parsing utilities for log4j version strings."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# Placeholder version recorded by crawlers that could not determine a version.
UNKNOWN_VERSION = "unknown"

# Leading MAJOR.MINOR, optional PATCH, optional suffix introduced by '.', '/' or '-'.
LOG4J_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.?(\d+)?(?:[./-].*)?", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class Log4jVersion:
    major: int
    minor: int
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @classmethod
    def parse(cls, version: str | None) -> Log4jVersion | None:
        major, minor, patch, ok = parse_log4j_version(version)
        if not ok:
            return None
        return cls(major=major, minor=minor, patch=patch)


def parse_log4j_version(version: str | None) -> tuple[int, int, int, bool]:
    """
    Parse a free-form version string into ``(major, minor, patch, ok)``.

    Unparseable input yields ``(0, 0, 0, False)``; a missing patch is ``0``.
    """
    if not version:
        return (0, 0, 0, False)
    match = LOG4J_VERSION_RE.fullmatch(str(version))
    if not match:
        return (0, 0, 0, False)
    patch = match.group(3)
    return (int(match.group(1)), int(match.group(2)), int(patch) if patch else 0, True)


def sort_versions(versions: Iterable[str] | None) -> list[str]:
    """Deduplicate and sort version strings lexically for stable output."""
    if not versions:
        return []
    # Lexical order misplaces multi-digit components (2.9 after 2.17) but is deterministic.
    return sorted({str(v) for v in versions})


__all__ = [
    "LOG4J_VERSION_RE",
    "Log4jVersion",
    "UNKNOWN_VERSION",
    "parse_log4j_version",
    "sort_versions",
]
