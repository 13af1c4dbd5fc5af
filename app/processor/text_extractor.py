from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.exceptions import PdfExtractionError
from app.processor.exceptions import ExtractionError
from app.processor.media_types import is_image, is_pdf
from app.processor.models import ExtractedText, ExtractionStatus


class TextExtractor:
    """Turns document bytes into ExtractedText, degrading instead of failing.

    PDF library failures and thin text both come back as ``EMPTY`` so the
    prompt builder can fall back to sending the original bytes. Only a media
    type that is neither PDF nor image is fatal.
    """

    def __init__(self, pdf_extractor: BasePdfExtractor, min_usable_chars: int = 50) -> None:
        self._pdf_extractor = pdf_extractor
        self._min_usable_chars = min_usable_chars

    def extract(self, data: bytes, media_type: str) -> ExtractedText:
        if is_image(media_type):
            Log.info(f"Image upload ({media_type}), skipping text extraction")
            return ExtractedText(text="", status=ExtractionStatus.EMPTY)
        if not is_pdf(media_type):
            raise ExtractionError(f"Unsupported media type '{media_type}'")
        return self._extract_pdf(data)

    def _extract_pdf(self, data: bytes) -> ExtractedText:
        try:
            pdf_text = self._pdf_extractor.extract(data)
        except PdfExtractionError as exc:
            Log.warning(f"PDF text extraction failed, falling back to vision-mode: {exc}")
            return ExtractedText(text="", status=ExtractionStatus.EMPTY, error=str(exc))

        if len(pdf_text.text) < self._min_usable_chars:
            Log.warning(
                f"PDF yielded {len(pdf_text.text)} chars "
                f"(< {self._min_usable_chars}), treating as scanned"
            )
            return ExtractedText(
                text=pdf_text.text,
                status=ExtractionStatus.EMPTY,
                page_count=pdf_text.page_count,
                metadata=pdf_text.metadata,
                error="no usable text layer",
            )

        status = ExtractionStatus.PARTIAL if pdf_text.failed_pages else ExtractionStatus.OK
        Log.info(
            f"Extracted {len(pdf_text.text)} chars from {pdf_text.page_count} pages "
            f"({status.value})"
        )
        return ExtractedText(
            text=pdf_text.text,
            status=status,
            page_count=pdf_text.page_count,
            metadata=pdf_text.metadata,
        )
