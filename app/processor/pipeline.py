from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.llm.models import Completion
from app.processor.models import ExtractedText, UploadedDocument
from app.prompting.models import ExtractionPrompt
from app.reconciliation.reconciler import Reconciliation


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    extracted: ExtractedText | None = None
    prompt: ExtractionPrompt | None = None
    completion: Completion | None = None
    reconciliation: Reconciliation | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
