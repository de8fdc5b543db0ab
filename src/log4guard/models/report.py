# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for per-file vulnerability reports."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ReportRecord:
    """
    One reported file.

    ``findings`` holds machine keys and ``reasons`` the matching human phrases,
    both in decoder order. ``reasons`` is not part of the structured output.
    """

    message: str
    file_path: str
    cves_detected: tuple[str, ...] = ()
    findings: tuple[str, ...] = ()
    log4j_versions: tuple[str, ...] = ()
    reasons: tuple[str, ...] = field(default=(), compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "filePath": self.file_path,
            "cvesDetected": list(self.cves_detected),
            "findings": list(self.findings),
            "log4jVersions": list(self.log4j_versions),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

