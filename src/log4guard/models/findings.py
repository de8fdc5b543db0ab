# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection heuristics reported by the file and archive crawler."""

from enum import IntFlag


class Finding(IntFlag):
    """
    Bitmask of the heuristics that flagged a file as containing log4j.

    Bits are independent; a crawler sets every heuristic that matched. Values
    outside the named bits are tolerated and ignored when decoding.
    """

    NOTHING = 0
    JNDI_LOOKUP_CLASS_NAME = 1 << 0
    JNDI_LOOKUP_CLASS_PACKAGE_AND_NAME = 1 << 1
    JNDI_MANAGER_CLASS_NAME = 1 << 2
    JAR_NAME = 1 << 3
    JAR_NAME_INSIDE_ARCHIVE = 1 << 4
    JNDI_MANAGER_CLASS_PACKAGE_AND_NAME = 1 << 5
    CLASS_FILE_MD5 = 1 << 6
    CLASS_BYTECODE_INSTRUCTION_MD5 = 1 << 7
    JAR_FILE_OBFUSCATED = 1 << 8
    CLASS_BYTECODE_PARTIAL_MATCH = 1 << 9


JNDI_LOOKUP_FINDINGS = Finding.JNDI_LOOKUP_CLASS_NAME | Finding.JNDI_LOOKUP_CLASS_PACKAGE_AND_NAME


def is_jndi_lookup_only(result: int) -> bool:
    """True when the only signal is exactly one of the two JndiLookup class bits."""
    return int(result) in (Finding.JNDI_LOOKUP_CLASS_NAME, Finding.JNDI_LOOKUP_CLASS_PACKAGE_AND_NAME)
