from app.llm.invoker import LlmInvoker
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.text_extractor import TextExtractor
from app.prompting.builder import PromptBuilder
from app.prompting.models import Attachment
from app.reconciliation.reconciler import ResponseReconciler


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        with Log.timed("Text extraction"):
            context.extracted = self._text_extractor.extract(
                document.data, document.media_type
            )
        return context


class BuildPromptStep(PipelineStep):
    def __init__(self, prompt_builder: PromptBuilder) -> None:
        self._prompt_builder = prompt_builder

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None:
            raise ValueError("PipelineContext.extracted must be set before prompt building")
        document = context.document
        attachment = None
        if not context.extracted.usable:
            attachment = Attachment(
                data=document.data,
                media_type=document.media_type,
                filename=document.filename,
            )
        context.prompt = self._prompt_builder.build(
            context.extracted, document.language, attachment
        )
        Log.info(
            f"Built {context.prompt.mode.value}-mode prompt "
            f"({len(context.prompt.instruction)} chars, language={context.prompt.language})"
        )
        return context


class InvokeModelStep(PipelineStep):
    def __init__(self, invoker: LlmInvoker) -> None:
        self._invoker = invoker

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.prompt is None:
            raise ValueError("PipelineContext.prompt must be set before invoking the model")
        context.completion = await self._invoker.invoke(context.prompt)
        Log.info(f"Model returned {len(context.completion.assistant_text)} chars")
        return context


class ReconcileStep(PipelineStep):
    def __init__(self, reconciler: ResponseReconciler) -> None:
        self._reconciler = reconciler

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.completion is None:
            raise ValueError("PipelineContext.completion must be set before reconciliation")
        context.reconciliation = self._reconciler.reconcile(
            context.completion.assistant_text
        )
        return context
