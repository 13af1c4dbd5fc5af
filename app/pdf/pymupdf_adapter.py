import pymupdf

from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError
from app.pdf.models import PdfDocumentText, json_safe_metadata


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    name = "pymupdf"

    def extract(self, pdf_bytes: bytes) -> PdfDocumentText:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages: list[str] = []
                failed: list[int] = []
                for index, page in enumerate(doc):
                    try:
                        pages.append(page.get_text())
                    except Exception as exc:
                        Log.warning(f"pymupdf could not read page {index + 1}: {exc}")
                        failed.append(index)
                metadata = json_safe_metadata(doc.metadata)
                page_count = doc.page_count
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return PdfDocumentText(
            text="\n".join(pages).strip(),
            page_count=page_count,
            metadata=metadata,
            failed_pages=tuple(failed),
        )
