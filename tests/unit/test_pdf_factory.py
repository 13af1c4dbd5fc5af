from unittest.mock import patch

import pytest

from app.config.settings import Settings
from app.pdf.exceptions import PdfExtractionError
from app.pdf.factory import PdfExtractorFactory
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter
from app.pdf.unavailable import UnavailablePdfExtractor


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_unknown_engine_is_unavailable(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="unknown"))
        assert isinstance(adapter, UnavailablePdfExtractor)
        assert "Unknown PDF engine" in adapter.reason

    def test_import_failure_is_unavailable(self) -> None:
        with patch(
            "app.pdf.factory.importlib.import_module",
            side_effect=ImportError("No module named 'pdfplumber'"),
        ):
            adapter = PdfExtractorFactory.create(Settings(pdf_engine="pdfplumber"))
        assert isinstance(adapter, UnavailablePdfExtractor)
        with pytest.raises(PdfExtractionError, match="No module named"):
            adapter.extract(b"%PDF-1.4")
