"""
This module downloads the OSADL license compatibility matrix and turns the
JSON body into a `CompatibilityMatrix`.

Errors are not handled here: `requests` exceptions (network, HTTP status),
`ValueError` (body is not JSON) and `pydantic.ValidationError` (missing
`licenses` or `compatibilities`) reach the caller unchanged.
"""

import logging
from typing import Optional

import requests

from matrix_exporter.core.config import OSADL_MATRIX_URL, MATRIX_REQUEST_TIMEOUT
from matrix_exporter.models.schemas import CompatibilityMatrix

logger = logging.getLogger(__name__)


def fetch_matrix(url: str = OSADL_MATRIX_URL,
                 timeout: Optional[float] = MATRIX_REQUEST_TIMEOUT) -> CompatibilityMatrix:
    """
    Retrieves the compatibility matrix from `url`.

    Args:
        url (str): Address of the `matrixseqexpl.json` document.
        timeout (Optional[float]): Seconds to wait for the server, None for no limit.

    Returns:
        CompatibilityMatrix: The parsed document.
    """
    logger.info("Scarico la matrice di compatibilità da %s", url)
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    data = resp.json()
    matrix = CompatibilityMatrix.model_validate(data)
    logger.info("Matrice scaricata: %d licenze", len(matrix.licenses))
    return matrix
