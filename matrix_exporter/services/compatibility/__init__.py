"""
Package `matrix_exporter.services.compatibility`

Conversione della matrice di compatibilità OSADL da/verso il formato testuale piatto
e verifica di conformità delle licenze.

API pubblica:
- serialize_matrix(matrix, separator) -> str
- load_flat_matrix(path, separator) -> Dict[str, Dict[str, str]]
- check_compliancy(matrix, leading, subordinates) -> ComplianceResult

Nota: la logica è suddivisa in moduli separati:
- serializer: appiattimento del documento JSON in righe delimitate
- matrix: rilettura del file piatto in una mappa {leading: {subordinate: status}}
- checker: verifica di una licenza principale contro più dipendenze
- classification: verifica per categoria (open/viral/affero/commercial)
"""

from .serializer import serialize_matrix, flatten_matrix, collect_verdicts
from .matrix import load_flat_matrix, lookup_status, save_index, load_index
from .checker import check_compliancy
from .classification import compliancy_check, spdx_category_to_classification

__all__ = [
    "serialize_matrix",
    "flatten_matrix",
    "collect_verdicts",
    "load_flat_matrix",
    "lookup_status",
    "save_index",
    "load_index",
    "check_compliancy",
    "compliancy_check",
    "spdx_category_to_classification",
]
