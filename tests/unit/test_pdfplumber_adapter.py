from unittest.mock import MagicMock, patch

import pytest

from app.pdf.exceptions import PdfExtractionError
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter


class TestPdfPlumberAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(sample_pdf_bytes)
        assert "Hello PDF World" in result.text
        assert result.page_count == 1

    def test_extract_multi_page_in_order(self, multi_page_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(multi_page_pdf_bytes)
        assert result.page_count == 2
        assert result.text.index("Page one content") < result.text.index("Page two content")
        assert result.failed_pages == ()

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(empty_pdf_bytes)
        assert result.text == ""
        assert result.page_count == 1

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfExtractionError, match="pdfplumber"):
            PdfPlumberAdapter().extract(b"not a pdf")

    def test_metadata_is_json_safe(self, sample_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(sample_pdf_bytes)
        for value in result.metadata.values():
            assert isinstance(value, (str, int, float, bool))

    def test_failing_page_is_skipped_and_recorded(self) -> None:
        good = MagicMock()
        good.extract_text.return_value = "readable page"
        bad = MagicMock()
        bad.extract_text.side_effect = RuntimeError("broken font")
        pdf = MagicMock()
        pdf.pages = [bad, good]
        pdf.metadata = {}
        pdf.__enter__.return_value = pdf
        with patch("app.pdf.pdfplumber_adapter.pdfplumber.open", return_value=pdf):
            result = PdfPlumberAdapter().extract(b"%PDF-fake")
        assert result.text == "readable page"
        assert result.failed_pages == (0,)
        assert result.page_count == 2
