"""
Modulo `matrix` — rilettura del file piatto prodotto dall'export.

Ogni riga del file ha la forma `leading[:::]subordinate[:::]verdict`. Il
modulo la trasforma in una mappa {leading: {subordinate: status}} dove status
è uno di "yes" | "no" | "unknown".

Differenze rispetto al JSON originale:
- la spiegazione testuale non è presente nel file piatto;
- "Same" viene trattato come "yes" (stessa licenza, quindi compatibile).

La mappa può essere salvata e ricaricata come JSON (`save_index` / `load_index`)
per evitare di rileggere il file piatto a ogni avvio.
"""

import json
import logging
from typing import Dict, Tuple
from matrix_exporter.core.config import MATRIX_FIELD_SEPARATOR
from matrix_exporter.models.schemas import KNOWN_VERDICTS

logger = logging.getLogger(__name__)

# Same, Yes, No, Unknown -> status interno; tutto il resto è "unknown"
_STATUS_BY_VERDICT = dict(zip(KNOWN_VERDICTS, ("yes", "yes", "no", "unknown")))


def parse_line(line: str, separator: str = MATRIX_FIELD_SEPARATOR) -> Tuple[str, str, str]:
    """
    Divide una riga nei tre campi (leading, subordinate, verdict).

    Raises:
        ValueError: se la riga non contiene esattamente tre campi.
    """
    fields = line.split(separator)
    if len(fields) != 3:
        raise ValueError(f"Riga non valida ({len(fields)} campi invece di 3): {line!r}")
    leading, subordinate, verdict = fields
    return leading, subordinate, verdict


def coerce_status(verdict: str) -> str:
    """Converte un verdetto OSADL (Same/Yes/No/Unknown) nello status interno."""
    if verdict is None:
        return "unknown"
    return _STATUS_BY_VERDICT.get(verdict.strip(), "unknown")


def load_flat_matrix(path: str, separator: str = MATRIX_FIELD_SEPARATOR) -> Dict[str, Dict[str, str]]:
    """
    Carica il file esportato in una mappa {main: {dep: status}}.

    Le righe vuote vengono ignorate; se una coppia compare più volte vale
    l'ultima occorrenza. Una riga malformata solleva ValueError.
    """
    matrix: Dict[str, Dict[str, str]] = {}
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f.read().split("\n"), start=1):
            if not line.strip():
                continue
            try:
                leading, subordinate, verdict = parse_line(line, separator)
            except ValueError:
                logger.warning("Riga %d malformata in %s", lineno, path)
                raise
            matrix.setdefault(leading, {})[subordinate] = coerce_status(verdict)
    return matrix


def lookup_status(matrix: Dict[str, Dict[str, str]], leading: str, subordinate: str) -> str:
    """Restituisce lo status della coppia, 'unknown' se non presente nella matrice."""
    return matrix.get(leading, {}).get(subordinate, "unknown")


def save_index(matrix: Dict[str, Dict[str, str]], path: str) -> str:
    """Salva la mappa normalizzata in JSON e restituisce il path scritto."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(matrix, f, indent=4, ensure_ascii=False)
    return path


def load_index(path: str) -> Dict[str, Dict[str, str]]:
    """Ricarica una mappa salvata con `save_index`."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Indice non valido in {path}: atteso un oggetto JSON")
    return data
