"""
Pydantic models shared by the services and the API layer.

The first three models mirror the shape of the OSADL `matrixseqexpl.json`
document. Verdict values are kept as plain strings: the upstream source is
trusted to use Same/Yes/No/Unknown and anything else is passed through.
"""

from typing import List, Optional
from pydantic import BaseModel


KNOWN_VERDICTS = ("Same", "Yes", "No", "Unknown")


# ------------ UPSTREAM DOCUMENT -----------------

class CompatibilityRecord(BaseModel):
    name: str
    compatibility: str
    explanation: Optional[str] = None


class LicenseEntry(BaseModel):
    name: str
    compatibilities: List[CompatibilityRecord]


class CompatibilityMatrix(BaseModel):
    licenses: List[LicenseEntry]


# ------------ EXPORT -----------------

class ExportResult(BaseModel):
    output_path: str
    rows: int
    verdicts: List[str] = []


class ExportRequest(BaseModel):
    # solo un nome di file: la directory è sempre OUTPUT_BASE_DIR
    file_name: Optional[str] = None


class ExportResponse(BaseModel):
    source_url: str
    output_path: str
    rows: int
    verdicts: List[str]


class CompatibilityLookupResponse(BaseModel):
    leading: str
    subordinate: str
    status: str


# ------------ COMPLIANCY -----------------

class ComplianceRequest(BaseModel):
    leading: str
    subordinates: List[str]
    file_name: Optional[str] = None


class ComplianceResult(BaseModel):
    leading: str
    # compliant | non_compliant | unknown | unknown_leading
    status: str
    incompatible: List[str] = []
    unknown: List[str] = []


class ClassificationCheckRequest(BaseModel):
    host_category: str
    found_categories: List[str]
    unknown_is_compliant: bool = False


class ClassificationCheckResult(BaseModel):
    # compliant | non_compliant
    status: str
    non_compliant: List[str] = []
