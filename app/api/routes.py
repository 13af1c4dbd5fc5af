from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.api.ingress import read_document
from app.api.responses import input_error_response, pipeline_response
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import InputError
from app.processor.processor import Processor

router = APIRouter(prefix="/api")


@router.post("/analyze-and-summarize")
@router.post("/analyze-report")
async def analyze_report(request: Request) -> JSONResponse:
    settings: Settings = request.app.state.settings
    processor: Processor = request.app.state.processor
    try:
        document = await read_document(request, settings)
    except InputError as exc:
        Log.warning(f"Rejected upload: {exc}")
        return input_error_response(exc)
    result = await processor.run(document)
    return pipeline_response(result)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/env-check")
async def env_check(request: Request) -> dict[str, bool]:
    settings: Settings = request.app.state.settings
    return {"ok": True, "OPENAI_API_KEY_present": bool(settings.openai_api_key.strip())}
