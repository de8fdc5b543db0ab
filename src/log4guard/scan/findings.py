# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decode detection bitmasks into reasons and stable finding keys."""

from __future__ import annotations

from dataclasses import dataclass

from ..models.findings import JNDI_LOOKUP_FINDINGS, Finding


@dataclass(frozen=True)
class DecodedFinding:
    finding: Finding
    reason: str
    key: str


# Output order follows this table, not bit order.
FINDING_DESCRIPTIONS: tuple[DecodedFinding, ...] = (
    DecodedFinding(Finding.JNDI_LOOKUP_CLASS_NAME, "JndiLookup class name matched", "jndiLookupClassName"),
    DecodedFinding(
        Finding.JNDI_LOOKUP_CLASS_PACKAGE_AND_NAME,
        "JndiLookup class and package name matched",
        "jndiLookupClassPackageAndName",
    ),
    DecodedFinding(Finding.JNDI_MANAGER_CLASS_NAME, "JndiManager class name matched", "jndiManagerClassName"),
    DecodedFinding(Finding.JAR_NAME, "jar name matched", "jarName"),
    DecodedFinding(Finding.JAR_NAME_INSIDE_ARCHIVE, "jar name inside archive matched", "jarNameInsideArchive"),
    DecodedFinding(
        Finding.JNDI_MANAGER_CLASS_PACKAGE_AND_NAME,
        "JndiManager class and package name matched",
        "jndiManagerClassPackageAndName",
    ),
    DecodedFinding(Finding.CLASS_FILE_MD5, "class file MD5 matched", "classFileMd5"),
    DecodedFinding(
        Finding.CLASS_BYTECODE_INSTRUCTION_MD5,
        "byte code instruction MD5 matched",
        "classBytecodeInstructionMd5",
    ),
    DecodedFinding(Finding.JAR_FILE_OBFUSCATED, "jar file appeared obfuscated", "jarFileObfuscated"),
    DecodedFinding(
        Finding.CLASS_BYTECODE_PARTIAL_MATCH,
        "byte code partially matched known version",
        "classBytecodePartialMatch",
    ),
)


def decode_findings(result: int, *, include_jndi_lookup: bool = True) -> list[DecodedFinding]:
    """Return the table entries whose bit is set in ``result``; unknown bits are ignored."""
    value = int(result)
    decoded: list[DecodedFinding] = []
    for entry in FINDING_DESCRIPTIONS:
        if not value & entry.finding:
            continue
        if not include_jndi_lookup and entry.finding & JNDI_LOOKUP_FINDINGS:
            continue
        decoded.append(entry)
    return decoded


def reasons_for(result: int, *, include_jndi_lookup: bool = True) -> list[str]:
    return [entry.reason for entry in decode_findings(result, include_jndi_lookup=include_jndi_lookup)]


def keys_for(result: int, *, include_jndi_lookup: bool = True) -> list[str]:
    return [entry.key for entry in decode_findings(result, include_jndi_lookup=include_jndi_lookup)]


__all__ = [
    "DecodedFinding",
    "FINDING_DESCRIPTIONS",
    "decode_findings",
    "keys_for",
    "reasons_for",
]
