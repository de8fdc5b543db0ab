# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for Log4Guard."""

import os
from dataclasses import dataclass
from enum import Enum

CVE_2021_45105 = "CVE-2021-45105"
CVE_2021_44832 = "CVE-2021-44832"


class OutputMode(str, Enum):
    JSON = "json"
    PATH = "path"
    HUMAN = "human"

    @classmethod
    def parse(cls, value: str | None, default: "OutputMode") -> "OutputMode":
        if value is None:
            return default
        try:
            return cls(value.strip().lower())
        except ValueError:
            return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_bool_env(name: str, default: bool | None) -> bool | None:
    value = os.getenv(name)
    if value is None or value.strip().lower() in {"", "auto"}:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ReporterSettings:
    """Reporter output and suppression switches."""

    output_mode: OutputMode = OutputMode.HUMAN
    suppress_unknown_versions: bool = False
    suppress_jndi_lookup_only: bool = False
    disable_cve_2021_45105: bool = False
    disable_cve_2021_44832: bool = False
    # None means colour only when the sink is a terminal.
    color: bool | None = None

    @property
    def disabled_cves(self) -> frozenset[str]:
        disabled: set[str] = set()
        if self.disable_cve_2021_45105:
            disabled.add(CVE_2021_45105)
        if self.disable_cve_2021_44832:
            disabled.add(CVE_2021_44832)
        return frozenset(disabled)

    @classmethod
    def from_env(cls) -> "ReporterSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            output_mode=OutputMode.parse(os.getenv("LOG4GUARD_OUTPUT_MODE"), cls.output_mode),
            suppress_unknown_versions=_bool_env("LOG4GUARD_SUPPRESS_UNKNOWN_VERSIONS", cls.suppress_unknown_versions),
            suppress_jndi_lookup_only=_bool_env("LOG4GUARD_SUPPRESS_JNDI_LOOKUP_ONLY", cls.suppress_jndi_lookup_only),
            disable_cve_2021_45105=_bool_env("LOG4GUARD_DISABLE_CVE_2021_45105", cls.disable_cve_2021_45105),
            disable_cve_2021_44832=_bool_env("LOG4GUARD_DISABLE_CVE_2021_44832", cls.disable_cve_2021_44832),
            color=_optional_bool_env("LOG4GUARD_COLOR", cls.color),
        )


def load_reporter_settings() -> ReporterSettings:
    """Load reporter settings from environment with sensible defaults."""
    return ReporterSettings.from_env()
