# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from log4guard import config, log
from log4guard.config import OutputMode, ReporterSettings
from log4guard.errors import (
    ErrorCategory,
    Log4GuardError,
    RuleTableError,
    categorize_exception,
    error_category_to_reason,
)


def test_reporter_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG4GUARD_OUTPUT_MODE", "JSON")
    monkeypatch.setenv("LOG4GUARD_SUPPRESS_UNKNOWN_VERSIONS", "true")
    monkeypatch.setenv("LOG4GUARD_SUPPRESS_JNDI_LOOKUP_ONLY", "1")
    monkeypatch.setenv("LOG4GUARD_DISABLE_CVE_2021_45105", "yes")
    monkeypatch.setenv("LOG4GUARD_DISABLE_CVE_2021_44832", "off")
    monkeypatch.setenv("LOG4GUARD_COLOR", "false")

    settings = config.load_reporter_settings()

    assert settings.output_mode is OutputMode.JSON
    assert settings.suppress_unknown_versions is True
    assert settings.suppress_jndi_lookup_only is True
    assert settings.disable_cve_2021_45105 is True
    assert settings.disable_cve_2021_44832 is False
    assert settings.color is False
    assert settings.disabled_cves == frozenset({"CVE-2021-45105"})


def test_reporter_settings_defaults_and_bad_values(monkeypatch):
    for name in (
        "LOG4GUARD_SUPPRESS_UNKNOWN_VERSIONS",
        "LOG4GUARD_SUPPRESS_JNDI_LOOKUP_ONLY",
        "LOG4GUARD_DISABLE_CVE_2021_45105",
        "LOG4GUARD_DISABLE_CVE_2021_44832",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG4GUARD_OUTPUT_MODE", "xml")
    monkeypatch.setenv("LOG4GUARD_COLOR", "auto")

    settings = ReporterSettings.from_env()

    assert settings == ReporterSettings()
    assert settings.output_mode is OutputMode.HUMAN
    assert settings.color is None
    assert settings.disabled_cves == frozenset()


def test_disabled_cves_combines_switches():
    settings = ReporterSettings(disable_cve_2021_45105=True, disable_cve_2021_44832=True)
    assert settings.disabled_cves == frozenset({"CVE-2021-45105", "CVE-2021-44832"})


def test_output_mode_parse():
    assert OutputMode.parse(" path ", OutputMode.HUMAN) is OutputMode.PATH
    assert OutputMode.parse(None, OutputMode.JSON) is OutputMode.JSON
    assert OutputMode.parse("yaml", OutputMode.HUMAN) is OutputMode.HUMAN


def test_categorize_exception_and_reason_mapping():
    assert categorize_exception(UnicodeEncodeError("ascii", "☃", 0, 1, "nope")) == ErrorCategory.ENCODING_ERROR
    assert categorize_exception(TypeError("not serializable")) == ErrorCategory.SERIALIZATION_ERROR
    assert categorize_exception(ValueError("circular reference")) == ErrorCategory.SERIALIZATION_ERROR
    assert categorize_exception(BrokenPipeError()) == ErrorCategory.WRITE_ERROR
    assert categorize_exception(KeyError("x")) == ErrorCategory.UNKNOWN_ERROR

    assert error_category_to_reason(ErrorCategory.WRITE_ERROR) == "Report line could not be written"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""


def test_rule_table_error_hierarchy():
    assert issubclass(RuleTableError, Log4GuardError)
    assert issubclass(RuleTableError, ValueError)


def test_setup_logging_uses_requested_level(monkeypatch):
    calls = {}

    def fake_basic_config(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    log.setup_logging("debug")
    assert calls["level"] == logging.DEBUG
    log.setup_logging("nonsense")
    assert calls["level"] == logging.WARNING
