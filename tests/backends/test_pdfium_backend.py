from __future__ import annotations

import io
import logging

import pytest
from PIL import Image

from pdfconvert.backends import pdfium_backend
from pdfconvert.backends.pdfium_backend import PdfiumBackend, prepare_rendering_surface
from pdfconvert.exceptions import ConversionFailed, InvalidInput
from pdfconvert.types import ConversionRequest, ImageFormat

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8"


def _request(source: bytes, **overrides) -> ConversionRequest:
    options = {"image_format": ImageFormat.PNG, "quality": 1.0, "pages": ()}
    options.update(overrides)
    return ConversionRequest(source=source, **options)


def test_renders_every_page_when_selection_empty(pdf_factory) -> None:
    images = PdfiumBackend().rasterize(_request(pdf_factory(4)))

    assert [image.page_number for image in images] == [1, 2, 3, 4]
    assert all(image.data.startswith(PNG_SIGNATURE) for image in images)
    assert images[0].file_name == "page_1.png"
    assert images[0].mime_type == "image/png"


def test_renders_selected_pages_in_request_order(pdf_factory) -> None:
    images = PdfiumBackend().rasterize(_request(pdf_factory(5), pages=(2, 4, 5)))

    assert [image.page_number for image in images] == [2, 4, 5]
    assert [image.file_name for image in images] == ["page_2.png", "page_4.png", "page_5.png"]


def test_scale_controls_image_size(pdf_factory) -> None:
    images = PdfiumBackend().rasterize(_request(pdf_factory(1), quality=2.0))

    with Image.open(io.BytesIO(images[0].data)) as rendered:
        assert rendered.size == (400, 400)


def test_jpeg_output(pdf_factory) -> None:
    images = PdfiumBackend().rasterize(_request(pdf_factory(1), image_format=ImageFormat.JPEG))

    assert images[0].data.startswith(JPEG_SIGNATURE)
    assert images[0].mime_type == "image/jpeg"
    assert images[0].file_name == "page_1.jpeg"


def test_page_beyond_document_fails(pdf_factory) -> None:
    with pytest.raises(ConversionFailed, match="Page 3 does not exist"):
        PdfiumBackend().rasterize(_request(pdf_factory(2), pages=(1, 3)))


def test_invalid_document_fails() -> None:
    with pytest.raises(ConversionFailed) as excinfo:
        PdfiumBackend().rasterize(_request(b"definitely not a pdf"))

    message = str(excinfo.value)
    assert "pdfium" in message.lower()
    assert message.startswith("PDF conversion failed: ")
    assert message.endswith("Make sure pypdfium2 with Pillow is installed in your system.")


def test_validate_quality_accepts_range() -> None:
    backend = PdfiumBackend()
    assert backend.validate_quality("1.5") == 1.5
    assert backend.validate_quality(0.5) == 0.5
    assert backend.validate_quality(5) == 5.0


@pytest.mark.parametrize("value", [0.4, 5.1, "fast", None])
def test_validate_quality_rejects_invalid(value) -> None:
    with pytest.raises(InvalidInput):
        PdfiumBackend().validate_quality(value)


def test_summary_reports_scale() -> None:
    assert PdfiumBackend().summary(_request(b"", quality=2.5)) == {"scale": 2.5}


def test_prepare_rendering_surface_succeeds() -> None:
    assert prepare_rendering_surface() is True


def test_rendering_surface_failure_is_logged_and_ignored(monkeypatch, caplog, pdf_factory) -> None:
    def broken_init() -> None:
        raise OSError("codec registry unavailable")

    monkeypatch.setattr(Image, "init", broken_init)

    with caplog.at_level(logging.WARNING, logger=pdfium_backend.__name__):
        assert prepare_rendering_surface() is False
        images = PdfiumBackend().rasterize(_request(pdf_factory(1)))

    assert len(images) == 1
    assert "codec registry unavailable" in caplog.text


def test_render_errors_are_wrapped_with_hint(monkeypatch, pdf_factory) -> None:
    def missing_pillow(*args, **kwargs):
        raise ImportError("No module named 'PIL'")

    monkeypatch.setattr(PdfiumBackend, "_render_page", staticmethod(missing_pillow))

    with pytest.raises(ConversionFailed) as excinfo:
        PdfiumBackend().rasterize(_request(pdf_factory(1)))

    assert "No module named 'PIL'" in str(excinfo.value)
    assert "Make sure pypdfium2 with Pillow is installed" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ImportError)
