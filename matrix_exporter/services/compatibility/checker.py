"""
This module checks a set of subordinate licenses against a leading license
using the map loaded from the exported matrix.

Outcome priority:
- the leading license is not in the matrix -> "unknown_leading";
- at least one pair is unknown -> "unknown" (even if some are incompatible);
- at least one pair is incompatible -> "non_compliant";
- otherwise -> "compliant".
"""

from typing import Dict, Iterable
from matrix_exporter.models.schemas import ComplianceResult
from .matrix import lookup_status


def check_compliancy(matrix: Dict[str, Dict[str, str]], leading: str,
                     subordinates: Iterable[str]) -> ComplianceResult:
    """
    Evaluates every subordinate license against `leading`.

    A subordinate missing from the leading license's row counts as unknown.
    The `incompatible` and `unknown` lists keep the order of `subordinates`.

    Args:
        matrix (Dict[str, Dict[str, str]]): Map returned by `load_flat_matrix`.
        leading (str): License of the project.
        subordinates (Iterable[str]): Licenses of the dependencies.

    Returns:
        ComplianceResult: The outcome plus the offending licenses.
    """
    if leading not in matrix:
        return ComplianceResult(leading=leading, status="unknown_leading")

    incompatible = []
    unknown = []
    for subordinate in subordinates:
        status = lookup_status(matrix, leading, subordinate)
        if status == "no":
            incompatible.append(subordinate)
        elif status != "yes":
            unknown.append(subordinate)

    if unknown:
        status = "unknown"
    elif incompatible:
        status = "non_compliant"
    else:
        status = "compliant"

    return ComplianceResult(
        leading=leading,
        status=status,
        incompatible=incompatible,
        unknown=unknown,
    )
