"""
test: services/export_service.py

Unit tests for the export operation. The source document is injected through
the `fetcher` argument, or by patching `requests.get` where the failure path
of the real client matters. Output files live under pytest's `tmp_path`.
"""

import logging
import pytest
import requests
from unittest.mock import patch, MagicMock
from pydantic import ValidationError
from matrix_exporter.models.schemas import CompatibilityMatrix
from matrix_exporter.services.export_service import export_matrix

URL = "https://example.org/matrixseqexpl.json"

# ==================================================================================
#                                     FIXTURES
# ==================================================================================

def _fetcher_for(document):
    """Returns a fetcher that ignores the url and parses `document`."""
    def fetcher(url):
        return CompatibilityMatrix.model_validate(document)
    return fetcher


@pytest.fixture
def document():
    return {
        "licenses": [
            {
                "name": "MIT",
                "compatibilities": [
                    {"name": "GPL-2.0", "compatibility": "No", "explanation": "x"},
                    {"name": "MIT", "compatibility": "Same", "explanation": "y"},
                ],
            },
            {
                "name": "LGPL-2.1-only",
                "compatibilities": [
                    {"name": "MIT", "compatibility": "Yes", "explanation": "z"},
                ],
            },
        ]
    }

# ==================================================================================
#                                 TEST: SUCCESS
# ==================================================================================

class TestExportMatrix:
    """Tests for the export_matrix function."""

    def test_export_writes_rows(self, tmp_path, document):
        output = tmp_path / "x.txt"

        result = export_matrix(URL, str(output), "[:::]", fetcher=_fetcher_for(document))

        assert output.read_text(encoding="utf-8") == (
            "MIT[:::]GPL-2.0[:::]No\n"
            "MIT[:::]MIT[:::]Same\n"
            "LGPL-2.1-only[:::]MIT[:::]Yes"
        )
        assert result.output_path == str(output)
        assert result.rows == 3
        assert result.verdicts == ["No", "Same", "Yes"]

    def test_export_passes_url_to_fetcher(self, tmp_path):
        fetcher = MagicMock(return_value=CompatibilityMatrix(licenses=[]))

        export_matrix(URL, str(tmp_path / "x.txt"), "[:::]", fetcher=fetcher)

        fetcher.assert_called_once_with(URL)

    def test_export_single_record(self, tmp_path):
        output = tmp_path / "x.txt"
        doc = {"licenses": [{"name": "MIT", "compatibilities": [
            {"name": "GPL-2.0", "compatibility": "No", "explanation": "x"}]}]}

        export_matrix(URL, str(output), "[:::]", fetcher=_fetcher_for(doc))

        assert output.read_text(encoding="utf-8").split("\n") == ["MIT[:::]GPL-2.0[:::]No"]

    def test_export_empty_licenses_writes_empty_file(self, tmp_path):
        output = tmp_path / "x.txt"

        result = export_matrix(URL, str(output), "[:::]", fetcher=_fetcher_for({"licenses": []}))

        assert output.exists()
        assert output.read_text(encoding="utf-8") == ""
        assert result.rows == 0
        assert result.verdicts == []

    def test_export_overwrites_existing_file(self, tmp_path, document):
        output = tmp_path / "x.txt"
        output.write_text("old content that is longer than the new one " * 100, encoding="utf-8")

        export_matrix(URL, str(output), "[:::]", fetcher=_fetcher_for(document))

        assert output.read_text(encoding="utf-8").startswith("MIT[:::]GPL-2.0[:::]No")
        assert "old content" not in output.read_text(encoding="utf-8")

    def test_export_writes_utf8(self, tmp_path):
        output = tmp_path / "x.txt"
        doc = {"licenses": [{"name": "Licence Libre du Québec", "compatibilities": [
            {"name": "MIT", "compatibility": "Unknown"}]}]}

        export_matrix(URL, str(output), "[:::]", fetcher=_fetcher_for(doc))

        assert output.read_text(encoding="utf-8") == "Licence Libre du Québec[:::]MIT[:::]Unknown"

    def test_export_warns_on_unexpected_verdict(self, tmp_path, caplog):
        doc = {"licenses": [{"name": "MIT", "compatibilities": [
            {"name": "X", "compatibility": "Maybe"}]}]}

        with caplog.at_level(logging.WARNING, logger="matrix_exporter.services.export_service"):
            result = export_matrix(URL, str(tmp_path / "x.txt"), "[:::]", fetcher=_fetcher_for(doc))

        assert result.verdicts == ["Maybe"]
        assert "Maybe" in caplog.text

# ==================================================================================
#                                 TEST: FAILURES
# ==================================================================================

class TestExportMatrixFailures:
    """Failures abort the export and leave the output untouched."""

    @patch("matrix_exporter.services.osadl_client.requests.get")
    def test_non_json_body_does_not_create_file(self, mock_get, tmp_path):
        resp = MagicMock()
        resp.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = resp
        output = tmp_path / "x.txt"

        with pytest.raises(ValueError):
            export_matrix(URL, str(output), "[:::]")

        assert not output.exists()

    @patch("matrix_exporter.services.osadl_client.requests.get")
    def test_non_json_body_leaves_existing_file(self, mock_get, tmp_path):
        resp = MagicMock()
        resp.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = resp
        output = tmp_path / "x.txt"
        output.write_text("previous export", encoding="utf-8")

        with pytest.raises(ValueError):
            export_matrix(URL, str(output), "[:::]")

        assert output.read_text(encoding="utf-8") == "previous export"

    @patch("matrix_exporter.services.osadl_client.requests.get")
    def test_network_failure_propagates(self, mock_get, tmp_path):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        output = tmp_path / "x.txt"

        with pytest.raises(requests.ConnectionError):
            export_matrix(URL, str(output), "[:::]")

        assert not output.exists()

    def test_invalid_shape_propagates(self, tmp_path):
        output = tmp_path / "x.txt"

        with pytest.raises(ValidationError):
            export_matrix(URL, str(output), "[:::]", fetcher=_fetcher_for({"licenses": [{"name": "MIT"}]}))

        assert not output.exists()

    def test_unwritable_path_raises_oserror(self, tmp_path, document):
        output = tmp_path / "missing_dir" / "x.txt"

        with pytest.raises(OSError):
            export_matrix(URL, str(output), "[:::]", fetcher=_fetcher_for(document))
