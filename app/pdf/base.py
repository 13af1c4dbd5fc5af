from abc import ABC, abstractmethod

from app.pdf.models import PdfDocumentText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    name: str = "base"

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> PdfDocumentText:
        """Extract plain text from PDF bytes.

        Pages are read in order and joined with a newline. A page that fails
        on its own is skipped and its zero-based index recorded in
        ``failed_pages``.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PdfDocumentText with the stripped text, page count and metadata.

        Raises:
            PdfExtractionError: if the document cannot be opened at all.
        """
