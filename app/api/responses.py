from typing import Any

from fastapi.responses import JSONResponse

from app.processor.exceptions import InputError
from app.processor.models import PipelineFailure, PipelineResult, PipelineSuccess


def error_response(
    status_code: int,
    error: str,
    details: str | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {"ok": False, "error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(body, status_code=status_code)


def input_error_response(exc: InputError) -> JSONResponse:
    cause = exc.__cause__
    return error_response(400, str(exc), str(cause) if cause is not None else None)


def success_body(result: PipelineSuccess) -> dict[str, Any]:
    return {
        "ok": True,
        "filename": result.document.filename,
        "length": result.document.size_bytes,
        "pages": result.extracted.page_count,
        "info": result.extracted.metadata,
        "raw_text": result.extracted.text,
        "ai_raw": result.raw_assistant_text,
        "ai_response_full": result.raw_provider_response,
        "extracted": result.fields,
    }


def pipeline_response(result: PipelineResult) -> JSONResponse:
    if isinstance(result, PipelineFailure):
        return error_response(500, result.message, result.details)
    return JSONResponse(success_body(result), status_code=200)
