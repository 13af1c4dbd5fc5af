import importlib
from typing import ClassVar

from app.config.settings import Settings
from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.unavailable import UnavailablePdfExtractor


class PdfExtractorFactory:
    """Creates the configured PDF extractor once, at startup.

    Engines are imported lazily so a missing optional engine only disables
    PDF text extraction instead of breaking the service.
    """

    ADAPTERS: ClassVar[dict[str, tuple[str, str]]] = {
        "pdfplumber": ("app.pdf.pdfplumber_adapter", "PdfPlumberAdapter"),
        "pymupdf": ("app.pdf.pymupdf_adapter", "PyMuPdfAdapter"),
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        target = cls.ADAPTERS.get(engine)
        if target is None:
            reason = f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            Log.error(reason)
            return UnavailablePdfExtractor(reason)
        module_name, class_name = target
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            reason = f"PDF engine '{engine}' failed to load: {exc}"
            Log.error(reason)
            return UnavailablePdfExtractor(reason)
        adapter_cls: type[BasePdfExtractor] = getattr(module, class_name)
        Log.info(f"PDF engine '{engine}' loaded")
        return adapter_cls()
