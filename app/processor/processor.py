from typing import ClassVar

from app.config.settings import Settings
from app.llm.exceptions import ProviderError, ProviderTimeout
from app.llm.factory import ChatClientFactory
from app.logging.logger import Log
from app.pdf.factory import PdfExtractorFactory
from app.processor.exceptions import ConfigurationError, ExtractionError
from app.processor.models import (
    PipelineFailure,
    PipelineResult,
    PipelineSuccess,
    UploadedDocument,
)
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    BuildPromptStep,
    ExtractTextStep,
    InvokeModelStep,
    ReconcileStep,
)
from app.processor.text_extractor import TextExtractor
from app.prompting.builder import PromptBuilder
from app.reconciliation.reconciler import ResponseReconciler


class Processor:
    """Orchestrates the report pipeline.

    Pipeline: extract -> build prompt -> invoke model -> reconcile. Every
    exception is turned into a PipelineFailure here; nothing escapes ``run``.
    """

    # Checked in order, so subclasses come before their bases.
    FAILURE_KINDS: ClassVar[tuple[tuple[type[Exception], str, str], ...]] = (
        (ConfigurationError, "configuration", "configuration error"),
        (ExtractionError, "extraction", "extraction failed"),
        (ProviderTimeout, "timeout", "OpenAI call timed out"),
        (ProviderError, "provider", "OpenAI call failed"),
    )

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    async def run(self, document: UploadedDocument) -> PipelineResult:
        """Run the full pipeline for one uploaded document."""
        Log.info(
            f"Processing {document.filename or 'upload'} "
            f"({document.media_type}, {document.size_bytes} bytes)"
        )
        context = PipelineContext(document=document)
        try:
            for step in self._steps:
                context = await step.run(context)
            return self._success(context)
        except Exception as exc:
            return self._failure(exc)

    @staticmethod
    def _success(context: PipelineContext) -> PipelineSuccess:
        if (
            context.extracted is None
            or context.completion is None
            or context.reconciliation is None
        ):
            raise ValueError("Pipeline finished without producing every stage output")
        return PipelineSuccess(
            fields=context.reconciliation.fields,
            raw_assistant_text=context.completion.assistant_text,
            raw_provider_response=context.completion.raw_response,
            extracted=context.extracted,
            document=context.document,
        )

    @classmethod
    def _failure(cls, exc: Exception) -> PipelineFailure:
        for exc_type, stage, message in cls.FAILURE_KINDS:
            if isinstance(exc, exc_type):
                Log.error(f"Pipeline failed at {stage}: {exc}")
                return PipelineFailure(stage=stage, message=message, details=str(exc))
        Log.exception(f"Unexpected pipeline error: {exc}")
        return PipelineFailure(stage="unexpected", message="unexpected error", details=str(exc))


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with every capability it needs, once per process."""
    text_extractor = TextExtractor(
        PdfExtractorFactory.create(settings),
        min_usable_chars=settings.min_usable_text_chars,
    )
    prompt_builder = PromptBuilder(text_budget_chars=settings.prompt_text_budget_chars)
    invoker = ChatClientFactory.create_invoker(settings)
    steps: list[PipelineStep] = [
        ExtractTextStep(text_extractor),
        BuildPromptStep(prompt_builder),
        InvokeModelStep(invoker),
        ReconcileStep(ResponseReconciler()),
    ]
    return Processor(steps=steps)
