class PdfExtractionError(Exception):
    """Raised when a PDF engine cannot read the document at all."""
