from dataclasses import dataclass, field


@dataclass(frozen=True)
class PdfDocumentText:
    """Text pulled out of a PDF by one of the engine adapters."""

    text: str
    page_count: int
    metadata: dict[str, object] = field(default_factory=dict)
    failed_pages: tuple[int, ...] = ()


def json_safe_metadata(raw: dict[str, object] | None) -> dict[str, object]:
    """Drop empty entries and stringify anything JSON cannot carry."""
    cleaned: dict[str, object] = {}
    for key, value in (raw or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, (str, int, float, bool)):
            cleaned[str(key)] = value
        elif isinstance(value, bytes):
            cleaned[str(key)] = value.decode("latin-1")
        else:
            cleaned[str(key)] = str(value)
    return cleaned
