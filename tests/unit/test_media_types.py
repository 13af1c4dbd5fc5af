from app.processor.media_types import (
    GENERIC_MEDIA_TYPE,
    normalize_media_type,
    resolve_media_type,
    sniff_media_type,
)


class TestNormalizeMediaType:
    def test_strips_parameters_and_case(self) -> None:
        assert normalize_media_type("Application/PDF; charset=binary") == "application/pdf"

    def test_maps_aliases(self) -> None:
        assert normalize_media_type("image/jpg") == "image/jpeg"

    def test_empty_stays_empty(self) -> None:
        assert normalize_media_type(None) == ""


class TestSniffMediaType:
    def test_detects_pdf(self) -> None:
        assert sniff_media_type(b"%PDF-1.7\n...") == "application/pdf"

    def test_detects_png(self, png_bytes: bytes) -> None:
        assert sniff_media_type(png_bytes) == "image/png"

    def test_detects_webp(self) -> None:
        assert sniff_media_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"

    def test_unknown_returns_none(self) -> None:
        assert sniff_media_type(b"hello") is None


class TestResolveMediaType:
    def test_declared_type_wins(self, png_bytes: bytes) -> None:
        assert resolve_media_type("application/pdf", "scan.png", png_bytes) == "application/pdf"

    def test_generic_declared_type_falls_back_to_filename(self) -> None:
        assert resolve_media_type(GENERIC_MEDIA_TYPE, "report.pdf", b"") == "application/pdf"

    def test_falls_back_to_magic_bytes(self, png_bytes: bytes) -> None:
        assert resolve_media_type(None, None, png_bytes) == "image/png"

    def test_undecidable_stays_generic(self) -> None:
        assert resolve_media_type(None, "notes", b"plain words") == GENERIC_MEDIA_TYPE
