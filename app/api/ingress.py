"""Turns an incoming analyze request into an UploadedDocument."""

import base64
import binascii
import json
from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

from app.config.settings import Settings
from app.processor.exceptions import InputError
from app.processor.media_types import resolve_media_type
from app.processor.models import UploadedDocument
from app.prompting.builder import normalize_language

NO_FILE_MESSAGE = 'no file uploaded (field must be named "file")'

# Room for multipart boundaries, part headers and the small form fields.
ENVELOPE_OVERHEAD_BYTES = 64 * 1024


async def read_document(request: Request, settings: Settings) -> UploadedDocument:
    """Accept a multipart ``file`` upload or a JSON ``documentBase64`` body.

    The body is never buffered past the configured upload limit.

    Raises:
        InputError: if no document was sent, it is too large, or it cannot be decoded.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("multipart/form-data"):
        return await _read_multipart(request, settings)
    if content_type.startswith("application/json"):
        return await _read_json(request, settings)
    raise InputError(NO_FILE_MESSAGE)


def _body_limit(settings: Settings, *, base64_encoded: bool) -> int:
    limit = settings.max_upload_bytes
    if base64_encoded:
        limit = (limit + 2) // 3 * 4
    return limit + ENVELOPE_OVERHEAD_BYTES


def _too_large(settings: Settings) -> InputError:
    return InputError(f"uploaded file is too large (limit {settings.max_upload_bytes} bytes)")


def _check_declared_length(request: Request, limit: int, settings: Settings) -> None:
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise _too_large(settings)


async def _read_capped_body(request: Request, limit: int, settings: Settings) -> bytes:
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise _too_large(settings)
    return bytes(body)


async def _read_multipart(request: Request, settings: Settings) -> UploadedDocument:
    _check_declared_length(request, _body_limit(settings, base64_encoded=False), settings)
    async with request.form() as form:
        upload = form.get("file")
        if not isinstance(upload, UploadFile):
            raise InputError(NO_FILE_MESSAGE)
        if upload.size is not None and upload.size > settings.max_upload_bytes:
            raise _too_large(settings)
        data = await upload.read(settings.max_upload_bytes + 1)
        language = form.get("languagePreference")
    return _make_document(
        data,
        declared_type=upload.content_type,
        filename=upload.filename,
        language=language if isinstance(language, str) else None,
        settings=settings,
    )


async def _read_json(request: Request, settings: Settings) -> UploadedDocument:
    limit = _body_limit(settings, base64_encoded=True)
    _check_declared_length(request, limit, settings)
    body = await _read_capped_body(request, limit, settings)
    try:
        payload: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InputError("request body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise InputError("request body must be a JSON object")

    encoded = payload.get("documentBase64")
    if not isinstance(encoded, str) or not encoded.strip():
        raise InputError("no file uploaded (documentBase64 is required)")

    declared_type = payload.get("mediaType")
    if encoded.startswith("data:") and "," in encoded:
        header, encoded = encoded.split(",", 1)
        declared_type = declared_type or header[5:].split(";", 1)[0]
    try:
        data = base64.b64decode("".join(encoded.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InputError("documentBase64 is not valid base64") from exc

    filename = payload.get("filename")
    language = payload.get("languagePreference")
    return _make_document(
        data,
        declared_type=declared_type if isinstance(declared_type, str) else None,
        filename=filename if isinstance(filename, str) else None,
        language=language if isinstance(language, str) else None,
        settings=settings,
    )


def _make_document(
    data: bytes,
    *,
    declared_type: str | None,
    filename: str | None,
    language: str | None,
    settings: Settings,
) -> UploadedDocument:
    if not data:
        raise InputError("uploaded file is empty")
    if len(data) > settings.max_upload_bytes:
        raise _too_large(settings)
    return UploadedDocument(
        data=data,
        media_type=resolve_media_type(declared_type, filename, data),
        filename=filename or None,
        language=normalize_language(language, default=settings.default_language),
    )
