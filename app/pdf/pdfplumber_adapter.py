import io

import pdfplumber

from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError
from app.pdf.models import PdfDocumentText, json_safe_metadata


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    name = "pdfplumber"

    def extract(self, pdf_bytes: bytes) -> PdfDocumentText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages: list[str] = []
                failed: list[int] = []
                for index, page in enumerate(pdf.pages):
                    try:
                        pages.append(page.extract_text() or "")
                    except Exception as exc:
                        Log.warning(f"pdfplumber could not read page {index + 1}: {exc}")
                        failed.append(index)
                metadata = json_safe_metadata(pdf.metadata)
                page_count = len(pdf.pages)
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return PdfDocumentText(
            text="\n".join(pages).strip(),
            page_count=page_count,
            metadata=metadata,
            failed_pages=tuple(failed),
        )
