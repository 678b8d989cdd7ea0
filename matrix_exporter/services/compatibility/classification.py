"""
Module `classification` — coarse compliancy check by license category.

When a pair is not in the OSADL matrix, licenses can still be compared by
their "pillar": open, viral (copyleft), affero, commercial. A host license
accepts dependencies of its own pillar and of the pillars below it.

Main functions:
- spdx_category_to_classification(category) -> LicenseClassification
- compliancy_check(host, found, unknown_is_compliant) -> ClassificationCheckResult
"""

from enum import Enum
from typing import Iterable
from matrix_exporter.models.schemas import ClassificationCheckResult


class LicenseClassification(str, Enum):
    OPEN = "open"
    VIRAL = "viral"
    AFFERO = "affero"
    COMMERCIAL = "commercial"
    # special case that always needs a manual decision
    SPECIAL = "special"
    UNKNOWN = "unknown"


_C = LicenseClassification

# (host, dependency) pairs that are compliant; every other pair is not
_COMPLIANT_PAIRS = {
    (_C.OPEN, _C.OPEN),
    (_C.VIRAL, _C.OPEN),
    (_C.VIRAL, _C.VIRAL),
    (_C.AFFERO, _C.OPEN),
    (_C.AFFERO, _C.VIRAL),
    (_C.AFFERO, _C.AFFERO),
    (_C.COMMERCIAL, _C.OPEN),
    (_C.COMMERCIAL, _C.VIRAL),
    (_C.COMMERCIAL, _C.AFFERO),
    (_C.COMMERCIAL, _C.COMMERCIAL),
}

# ScanCode/SPDX category -> pillar. Copyleft needs a human to decide
# whether it is viral, so it stays unknown.
_CATEGORY_MAP = {
    "Public Domain": _C.OPEN,
    "Permissive": _C.OPEN,
    "Copyleft": _C.UNKNOWN,
    "Copyleft Limited": _C.UNKNOWN,
    "Commercial": _C.COMMERCIAL,
    "Source-available": _C.COMMERCIAL,
    "Proprietary Free": _C.COMMERCIAL,
    "CLA": _C.UNKNOWN,
    "Patent License": _C.UNKNOWN,
    "Unstated License": _C.UNKNOWN,
}


def spdx_category_to_classification(category: str) -> LicenseClassification:
    return _CATEGORY_MAP.get(category, _C.UNKNOWN)


def _is_compliant(host: LicenseClassification, dependency: LicenseClassification,
                  unknown_is_compliant: bool) -> bool:
    if _C.UNKNOWN in (host, dependency):
        return unknown_is_compliant
    return (host, dependency) in _COMPLIANT_PAIRS


def compliancy_check(host: LicenseClassification,
                     found: Iterable[LicenseClassification],
                     unknown_is_compliant: bool = False) -> ClassificationCheckResult:
    """
    Compares the host pillar with the pillars of the dependencies.

    An unknown pillar on either side is compliant only when
    `unknown_is_compliant` is set. Special licenses are never compliant.
    The returned list keeps every non-compliant dependency, duplicates included.
    """
    non_compliant = [
        LicenseClassification(c) for c in found
        if not _is_compliant(LicenseClassification(host), LicenseClassification(c), unknown_is_compliant)
    ]
    return ClassificationCheckResult(
        status="non_compliant" if non_compliant else "compliant",
        non_compliant=[c.value for c in non_compliant],
    )
