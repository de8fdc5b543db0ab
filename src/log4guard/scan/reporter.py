# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Suppression, counting and formatting of per-file log4j findings."""

from __future__ import annotations

import logging
import os
import sys
import threading
from collections.abc import Iterable
from typing import TextIO

from colorama import Fore, Style

from ..config import OutputMode, ReporterSettings, load_reporter_settings
from ..errors import categorize_exception, error_category_to_reason
from ..matching.cve_matcher import CveMatcher
from ..models.findings import is_jndi_lookup_only
from ..models.report import ReportRecord
from ..utils.version import UNKNOWN_VERSION, sort_versions
from .findings import decode_findings

logger = logging.getLogger(__name__)


class Reporter:
    """
    Decides whether a scanned file is reported and writes one line per report.

    ``collect`` may be called from many crawler threads at once: the counter
    increment and the sink write of a single record happen under one lock, so
    records never interleave. Nothing raised while formatting or writing escapes
    ``collect``.
    """

    def __init__(self, settings: ReporterSettings | None = None, output: TextIO | None = None):
        self.settings = settings or ReporterSettings()
        self.output = output
        self.matcher = CveMatcher(disabled_cves=self.settings.disabled_cves)
        self._color = self._resolve_color(self.settings.color, output)
        self._count = 0
        self._lock = threading.Lock()

    @staticmethod
    def _resolve_color(color: bool | None, output: TextIO | None) -> bool:
        if color is not None:
            return color
        if output is None or os.getenv("NO_COLOR"):
            return False
        isatty = getattr(output, "isatty", None)
        try:
            return bool(isatty and isatty())
        except (OSError, ValueError):
            return False

    def collect(self, path: str, result: int, versions: Iterable[str] | None) -> None:
        version_list = sort_versions(versions)
        if self.settings.suppress_unknown_versions and self._unknown_only(version_list):
            logger.debug("Skipping %s: log4j version unknown", path)
            return
        cves = self.matched_cves(version_list)
        if not cves:
            logger.debug("Skipping %s: no CVEs for versions %s", path, version_list)
            return
        if self.settings.suppress_jndi_lookup_only and is_jndi_lookup_only(result):
            logger.debug("Skipping %s: only JndiLookup class matched", path)
            return

        line = None
        if self.output is not None:
            record = self.build_record(path, result, version_list, cves)
            line = self.format_record(record)

        with self._lock:
            self._count += 1
            if line is not None:
                self._write(path, line)

    def count(self) -> int:
        """Number of findings reported since construction."""
        with self._lock:
            return self._count

    def matched_cves(self, versions: Iterable[str]) -> list[str]:
        return self.matcher.matched_cves(versions)

    def build_record(
        self,
        path: str,
        result: int,
        versions: list[str],
        cves: list[str],
    ) -> ReportRecord:
        decoded = decode_findings(result, include_jndi_lookup=not self.settings.suppress_jndi_lookup_only)
        return ReportRecord(
            message=f"{', '.join(cves)} detected",
            file_path=path,
            cves_detected=tuple(cves),
            findings=tuple(entry.key for entry in decoded),
            log4j_versions=tuple(versions),
            reasons=tuple(entry.reason for entry in decoded),
        )

    def format_record(self, record: ReportRecord) -> str | None:
        """Render ``record`` for the configured output mode; None if it cannot be serialized."""
        mode = self.settings.output_mode
        if mode == OutputMode.JSON:
            try:
                return record.to_json()
            except (TypeError, ValueError, RecursionError) as exc:
                category = categorize_exception(exc)
                logger.warning(
                    "%s for %s: %s (%s)",
                    error_category_to_reason(category),
                    record.file_path,
                    exc,
                    category.value,
                )
                return None
        if mode == OutputMode.PATH:
            return record.file_path
        line = (
            f"[MATCH] {record.message} in file {record.file_path}. "
            f"log4j versions: {', '.join(record.log4j_versions)}. "
            f"Reasons: {', '.join(record.reasons)}"
        )
        if self._color:
            return f"{Fore.YELLOW}{line}{Style.RESET_ALL}"
        return line

    def _write(self, path: str, line: str) -> None:
        try:
            self.output.write(line + "\n")
        except (OSError, ValueError) as exc:
            category = categorize_exception(exc)
            logger.warning(
                "%s for %s: %s (%s)",
                error_category_to_reason(category),
                path,
                exc,
                category.value,
            )

    @staticmethod
    def _unknown_only(versions: list[str]) -> bool:
        return not versions or (len(versions) == 1 and versions[0] == UNKNOWN_VERSION)


def create_default_reporter(
    settings: ReporterSettings | None = None,
    output: TextIO | None = None,
) -> Reporter:
    """Build a reporter from environment settings, writing to the current stdout by default."""
    return Reporter(settings or load_reporter_settings(), output=output if output is not None else sys.stdout)


__all__ = ["Reporter", "create_default_reporter"]
