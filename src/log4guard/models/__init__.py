# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Domain models for Log4Guard."""

from .findings import JNDI_LOOKUP_FINDINGS, Finding, is_jndi_lookup_only
from .report import ReportRecord

__all__ = [
    "Finding",
    "JNDI_LOOKUP_FINDINGS",
    "ReportRecord",
    "is_jndi_lookup_only",
]
