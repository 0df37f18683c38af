"""In-memory rasterization backend built on pypdfium2."""

from __future__ import annotations

import io
import logging
from typing import Any, Dict, List

import pypdfium2 as pdfium

from ..exceptions import ConversionFailed, InvalidInput
from ..types import ConversionRequest, ConvertedImage, ImageFormat
from .base import RasterBackend, conversion_failed, register_backend

LOGGER = logging.getLogger(__name__)

MIN_SCALE = 0.5
MAX_SCALE = 5.0
HINT_PATTERNS = ("pdfium", "pillow", "'pil'")
HINT_DEPENDENCY = "pypdfium2 with Pillow"


def prepare_rendering_surface() -> bool:
    """Load Pillow's codecs ahead of rendering.

    Rendering still proceeds when this fails; a missing Pillow surfaces later
    as a conversion error with an installation hint.
    """

    try:
        from PIL import Image

        Image.init()
    except Exception as exc:
        LOGGER.warning("Rendering surface could not be initialised: %s", exc)
        return False
    return True


def _encode(image: Any, image_format: ImageFormat) -> bytes:
    if image_format is ImageFormat.JPEG and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format=image_format.value.upper())
    return buffer.getvalue()


@register_backend("pdfium")
class PdfiumBackend(RasterBackend):
    """Renders pages in memory at a scale factor relative to 72 DPI."""

    name = "pdfium"
    quality_parameter = "scale"
    default_quality = 1.0
    includes_page_metadata = True

    def validate_quality(self, value: Any) -> float:
        try:
            scale = float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"Scale must be a number, got '{value}'.") from exc
        if not MIN_SCALE <= scale <= MAX_SCALE:
            raise InvalidInput(
                f"Scale {scale} is out of range ({MIN_SCALE}-{MAX_SCALE})."
            )
        return scale

    def summary(self, request: ConversionRequest) -> Dict[str, Any]:
        return {"scale": request.quality}

    def rasterize(self, request: ConversionRequest) -> List[ConvertedImage]:
        prepare_rendering_surface()

        try:
            document = pdfium.PdfDocument(request.source)
        except Exception as exc:
            raise conversion_failed(exc, patterns=HINT_PATTERNS, dependency=HINT_DEPENDENCY) from exc

        try:
            page_count = len(document)
            page_numbers = list(request.pages) or list(range(1, page_count + 1))
            LOGGER.debug(
                "Rendering %s of %s page(s) at scale %s", len(page_numbers), page_count, request.quality
            )

            images: List[ConvertedImage] = []
            for page_number in page_numbers:
                if page_number > page_count:
                    raise ConversionFailed(
                        f"Page {page_number} does not exist; the document has {page_count} page(s)."
                    )
                data = self._render_page(document, page_number, request)
                images.append(ConvertedImage.for_page(data, page_number, request.image_format))
            return images
        except ConversionFailed:
            raise
        except Exception as exc:
            raise conversion_failed(exc, patterns=HINT_PATTERNS, dependency=HINT_DEPENDENCY) from exc
        finally:
            document.close()

    @staticmethod
    def _render_page(document: Any, page_number: int, request: ConversionRequest) -> bytes:
        page = document[page_number - 1]
        try:
            image = page.render(scale=request.quality).to_pil()
        finally:
            page.close()
        return _encode(image, request.image_format)
