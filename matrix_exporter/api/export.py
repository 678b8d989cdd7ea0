import os
from typing import Optional

import requests
from fastapi import APIRouter, HTTPException
from pydantic import ValidationError
from matrix_exporter.core.config import (
    OSADL_MATRIX_URL,
    OUTPUT_BASE_DIR,
    MATRIX_OUTPUT_PATH,
    MATRIX_FIELD_SEPARATOR,
)
from matrix_exporter.models.schemas import (
    ExportRequest,
    ExportResponse,
    CompatibilityLookupResponse,
    ComplianceRequest,
    ComplianceResult,
    ClassificationCheckRequest,
    ClassificationCheckResult,
)
from matrix_exporter.services.export_service import export_matrix
from matrix_exporter.services.compatibility import (
    load_flat_matrix,
    lookup_status,
    check_compliancy,
    compliancy_check,
    spdx_category_to_classification,
)


router = APIRouter()


def _resolve_output_path(file_name: Optional[str]) -> str:
    """Risolve il file di output dentro OUTPUT_BASE_DIR; rifiuta path e nomi speciali."""
    if not file_name:
        return MATRIX_OUTPUT_PATH
    if os.path.basename(file_name) != file_name or file_name in {".", ".."}:
        raise HTTPException(status_code=400, detail=f"Nome file non valido: {file_name}")
    return os.path.join(OUTPUT_BASE_DIR, file_name)


def _load_exported(file_name: Optional[str]):
    path = _resolve_output_path(file_name)
    if not os.path.exists(path):
        raise HTTPException(status_code=404, detail="Matrice non ancora esportata")
    try:
        return load_flat_matrix(path, MATRIX_FIELD_SEPARATOR)
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/export", response_model=ExportResponse)
def export_endpoint(payload: ExportRequest):
    output_path = _resolve_output_path(payload.file_name)

    try:
        os.makedirs(OUTPUT_BASE_DIR, exist_ok=True)
        result = export_matrix(OSADL_MATRIX_URL, output_path, MATRIX_FIELD_SEPARATOR)
    # ValidationError e JSONDecodeError di requests derivano da ValueError: vanno prima di RequestException
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Matrice non valida: {e.error_count()} errori")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Risposta non JSON: {e}")
    except requests.RequestException as e:
        raise HTTPException(status_code=502, detail=f"Errore download matrice: {e}")
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Errore scrittura file: {e}")

    return ExportResponse(
        source_url=OSADL_MATRIX_URL,
        output_path=result.output_path,
        rows=result.rows,
        verdicts=result.verdicts,
    )


@router.get("/compatibility", response_model=CompatibilityLookupResponse)
def compatibility_endpoint(leading: str, subordinate: str, file_name: Optional[str] = None):
    matrix = _load_exported(file_name)

    return CompatibilityLookupResponse(
        leading=leading,
        subordinate=subordinate,
        status=lookup_status(matrix, leading, subordinate),
    )


@router.post("/compliancy", response_model=ComplianceResult)
def compliancy_endpoint(payload: ComplianceRequest):
    matrix = _load_exported(payload.file_name)
    return check_compliancy(matrix, payload.leading, payload.subordinates)


@router.post("/classification/check", response_model=ClassificationCheckResult)
def classification_endpoint(payload: ClassificationCheckRequest):
    host = spdx_category_to_classification(payload.host_category)
    found = [spdx_category_to_classification(c) for c in payload.found_categories]
    return compliancy_check(host, found, payload.unknown_is_compliant)
