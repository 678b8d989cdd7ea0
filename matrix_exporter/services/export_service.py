"""
This module implements the export of the compatibility matrix: fetch the
JSON document, flatten it into delimited rows and write them to a single file.

No error is caught here. A failed download, a body that is not a valid
matrix or an unwritable output path aborts the export; since the document is
parsed and serialized before the file is opened, a failed fetch or parse
never touches an existing output file.
"""

import logging
from typing import Callable, Optional

from matrix_exporter.core.config import (
    OSADL_MATRIX_URL,
    MATRIX_OUTPUT_PATH,
    MATRIX_FIELD_SEPARATOR,
)
from matrix_exporter.models.schemas import CompatibilityMatrix, ExportResult, KNOWN_VERDICTS
from matrix_exporter.services.compatibility import serialize_matrix, collect_verdicts
from matrix_exporter.services.osadl_client import fetch_matrix

logger = logging.getLogger(__name__)


def export_matrix(url: str = OSADL_MATRIX_URL,
                  output_path: str = MATRIX_OUTPUT_PATH,
                  separator: str = MATRIX_FIELD_SEPARATOR,
                  fetcher: Optional[Callable[[str], CompatibilityMatrix]] = None) -> ExportResult:
    """
    Downloads the matrix from `url` and writes it to `output_path`.

    Args:
        url (str): Source of the JSON document.
        output_path (str): Destination file, overwritten if it exists.
        separator (str): Field separator placed between the three columns.
        fetcher (Callable): Function returning the parsed matrix for a url.
            Defaults to `fetch_matrix`.

    Returns:
        ExportResult: The written path, the number of rows and the distinct
        verdicts found in the document.
    """
    if fetcher is None:
        fetcher = fetch_matrix

    matrix = fetcher(url)

    text = serialize_matrix(matrix, separator)
    rows = sum(len(entry.compatibilities) for entry in matrix.licenses)

    verdicts = collect_verdicts(matrix)
    unexpected = [v for v in verdicts if v not in KNOWN_VERDICTS]
    if unexpected:
        logger.warning("Verdetti non previsti nella matrice: %s", ", ".join(unexpected))

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.info("Scritte %d righe in %s", rows, output_path)
    return ExportResult(output_path=output_path, rows=rows, verdicts=verdicts)
