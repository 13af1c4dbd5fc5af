from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError
from app.pdf.models import PdfDocumentText


class UnavailablePdfExtractor(BasePdfExtractor):
    """Stands in for an engine that could not be loaded at startup.

    Every call fails with the original load reason so the text extractor can
    degrade to vision-mode per request.
    """

    name = "unavailable"

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def extract(self, pdf_bytes: bytes) -> PdfDocumentText:
        raise PdfExtractionError(f"PDF engine unavailable: {self.reason}")
