"""Content negotiation for uploaded documents."""

import mimetypes

PDF_MEDIA_TYPE = "application/pdf"
GENERIC_MEDIA_TYPE = "application/octet-stream"

IMAGE_MEDIA_TYPES = frozenset({"image/png", "image/jpeg", "image/webp", "image/gif"})

_ALIASES = {
    "image/jpg": "image/jpeg",
    "image/pjpeg": "image/jpeg",
    "application/x-pdf": PDF_MEDIA_TYPE,
}

_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"%PDF", PDF_MEDIA_TYPE),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


def normalize_media_type(value: str | None) -> str:
    """Lower-case a media type and drop parameters such as ``charset``."""
    if not value:
        return ""
    base = value.split(";", 1)[0].strip().lower()
    return _ALIASES.get(base, base)


def sniff_media_type(data: bytes) -> str | None:
    head = data[:16]
    for signature, media_type in _SIGNATURES:
        if head.startswith(signature):
            return media_type
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"
    return None


def resolve_media_type(declared: str | None, filename: str | None, data: bytes) -> str:
    """Pick the media type to process the upload as.

    A specific declared type wins, then the filename extension, then the
    leading magic bytes. Anything undecidable stays generic.
    """
    media_type = normalize_media_type(declared)
    if media_type and media_type != GENERIC_MEDIA_TYPE:
        return media_type
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        guessed = normalize_media_type(guessed)
        if guessed:
            return guessed
    return sniff_media_type(data) or GENERIC_MEDIA_TYPE


def is_pdf(media_type: str) -> bool:
    return media_type == PDF_MEDIA_TYPE


def is_image(media_type: str) -> bool:
    return media_type in IMAGE_MEDIA_TYPES
