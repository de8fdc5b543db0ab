# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from enum import Enum
from typing import Optional


class Log4GuardError(Exception):
    """Base class for Log4Guard errors."""


class RuleTableError(Log4GuardError, ValueError):
    """The vulnerability rule table or its suppression switches are inconsistent."""


class ErrorCategory(str, Enum):
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    ENCODING_ERROR = "ENCODING_ERROR"
    WRITE_ERROR = "WRITE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map reporting failures to ErrorCategory.
    """
    # UnicodeError subclasses ValueError, so it has to be checked first.
    if isinstance(exc, UnicodeError):
        return ErrorCategory.ENCODING_ERROR

    if isinstance(exc, (TypeError, ValueError, RecursionError)):
        return ErrorCategory.SERIALIZATION_ERROR

    if isinstance(exc, OSError):
        return ErrorCategory.WRITE_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.SERIALIZATION_ERROR: "Report record could not be serialized",
        ErrorCategory.ENCODING_ERROR: "Report line could not be encoded for the output",
        ErrorCategory.WRITE_ERROR: "Report line could not be written",
        ErrorCategory.UNKNOWN_ERROR: "Report failed due to an unexpected error",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Report failed due to an unexpected error")
