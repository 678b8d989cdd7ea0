"""
Module `serializer` — flattening of the compatibility matrix into text rows.

Every (leading license, subordinate license) pair becomes one row with three
fields joined by the field separator. The default separator `[:::]` is a token
that does not occur in license names, which may contain commas, spaces or
parentheses.

Main functions:
- serialize_entries(fields, separator) -> str
- flatten_matrix(matrix) -> Iterator[Tuple[str, str, str]]
- serialize_matrix(matrix, separator) -> str
- collect_verdicts(matrix) -> List[str]
"""

from typing import Iterable, Iterator, List, Tuple, Union
from matrix_exporter.core.config import MATRIX_FIELD_SEPARATOR
from matrix_exporter.models.schemas import CompatibilityMatrix


def serialize_entries(fields: Iterable[Union[str, int, bool]],
                      separator: str = MATRIX_FIELD_SEPARATOR) -> str:
    """Joins the fields of a single row."""
    return separator.join(str(f) for f in fields)


def flatten_matrix(matrix: CompatibilityMatrix) -> Iterator[Tuple[str, str, str]]:
    """
    Yields a `(leading, subordinate, verdict)` triple for every compatibility
    record, in document order: entry order first, then record order within
    each entry. Nothing is sorted or deduplicated.
    """
    for leading in matrix.licenses:
        for subordinate in leading.compatibilities:
            yield leading.name, subordinate.name, subordinate.compatibility


def serialize_matrix(matrix: CompatibilityMatrix,
                     separator: str = MATRIX_FIELD_SEPARATOR) -> str:
    """
    Returns the whole matrix as text: one row per triple, rows joined by "\\n".
    No header and no trailing newline; an empty matrix gives an empty string.
    """
    return "\n".join(serialize_entries(row, separator) for row in flatten_matrix(matrix))


def collect_verdicts(matrix: CompatibilityMatrix) -> List[str]:
    """Distinct verdict values present in the matrix, sorted."""
    return sorted({verdict for _, _, verdict in flatten_matrix(matrix)})
