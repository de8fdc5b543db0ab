# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Finding decoding and report orchestration."""

from .findings import DecodedFinding, decode_findings, keys_for, reasons_for
from .reporter import Reporter, create_default_reporter

__all__ = [
    "DecodedFinding",
    "Reporter",
    "create_default_reporter",
    "decode_findings",
    "keys_for",
    "reasons_for",
]
