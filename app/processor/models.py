from dataclasses import dataclass, field
from enum import Enum
from typing import Any

REPORT_SCHEMA_VERSION = "1"

REPORT_FIELD_KEYS: tuple[str, ...] = (
    "patient_name",
    "age_gender",
    "study",
    "summary_for_patient",
    "impression",
    "findings",
    "recommended_next_steps",
    "specialty_referral",
    "triage_urgency",
)

TRIAGE_LEVELS: frozenset[str] = frozenset({"normal", "low", "medium", "high"})

# Parsed model output. Keys are not validated, consumers must tolerate gaps.
ReportFields = dict[str, Any]


@dataclass(frozen=True)
class UploadedDocument:
    """A document received in one request; lives only for that request."""

    data: bytes = field(repr=False)
    media_type: str
    filename: str | None = None
    language: str = "en"

    @property
    def size_bytes(self) -> int:
        return len(self.data)


class ExtractionStatus(str, Enum):
    OK = "ok"
    PARTIAL = "partial"
    EMPTY = "empty"


@dataclass(frozen=True)
class ExtractedText:
    """Plain text derived from an UploadedDocument."""

    text: str
    status: ExtractionStatus
    page_count: int | None = None
    metadata: dict[str, object] | None = None
    error: str | None = None

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def usable(self) -> bool:
        return self.status is not ExtractionStatus.EMPTY


@dataclass(frozen=True)
class PipelineSuccess:
    """Terminal state of a run that reached the model and back."""

    fields: ReportFields | None
    raw_assistant_text: str
    raw_provider_response: dict[str, Any]
    extracted: ExtractedText
    document: UploadedDocument

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class PipelineFailure:
    """Terminal state of a run that stopped at ``stage``."""

    stage: str
    message: str
    details: str

    @property
    def ok(self) -> bool:
        return False


PipelineResult = PipelineSuccess | PipelineFailure
