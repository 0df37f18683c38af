"""File-based rasterization backend driving poppler through pdf2image."""

from __future__ import annotations

import logging
import tempfile
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from pdf2image import convert_from_path

from ..exceptions import ConversionFailed, InvalidInput
from ..types import ConversionRequest, ConvertedImage
from .base import RasterBackend, conversion_failed, register_backend

LOGGER = logging.getLogger(__name__)

HINT_PATTERNS = ("poppler", "pdftoppm", "pdfinfo", "pdf2image")
HINT_DEPENDENCY = "poppler-utils"


def remove_quietly(path: Path) -> None:
    """Delete ``path``; failures are logged and ignored."""

    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        LOGGER.debug("Could not remove temporary file %s: %s", path, exc)


@contextmanager
def temporary_pdf(data: bytes, directory: Path, name: str) -> Iterator[Path]:
    """Write ``data`` to ``directory / name`` for the duration of the block."""

    path = directory / name
    try:
        path.write_bytes(data)
        yield path
    finally:
        remove_quietly(path)


def page_number_from_path(path: Union[str, Path], default: int) -> int:
    """Read the page number poppler encodes as ``<prefix>-<page>.<ext>``."""

    stem = Path(path).stem
    _, separator, suffix = stem.rpartition("-")
    if separator and suffix.isdigit():
        return int(suffix)
    return default


@register_backend("poppler")
class PopplerBackend(RasterBackend):
    """Renders pages with ``pdftoppm`` using temporary files at a DPI density."""

    name = "poppler"
    quality_parameter = "density"
    default_quality = 150
    includes_page_metadata = False

    def __init__(
        self,
        *,
        temp_dir: Optional[Union[str, Path]] = None,
        poppler_path: Optional[str] = None,
    ) -> None:
        self.temp_dir = Path(temp_dir) if temp_dir else Path(tempfile.gettempdir())
        self.poppler_path = poppler_path

    def validate_quality(self, value: Any) -> int:
        try:
            density = int(value)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"Density must be an integer, got '{value}'.") from exc
        if density <= 0:
            raise InvalidInput(f"Density must be positive, got {density}.")
        return density

    def summary(self, request: ConversionRequest) -> Dict[str, Any]:
        return {"density": request.quality}

    def rasterize(self, request: ConversionRequest) -> List[ConvertedImage]:
        token = uuid.uuid4().hex
        pdf_name = f"pdf_{token}_{request.item_index}.pdf"
        prefix = f"page_{token}_{request.item_index}"

        try:
            with temporary_pdf(request.source, self.temp_dir, pdf_name) as pdf_path:
                try:
                    return self._render(pdf_path, prefix, request)
                finally:
                    self._sweep(prefix)
        except ConversionFailed:
            raise
        except Exception as exc:
            raise conversion_failed(exc, patterns=HINT_PATTERNS, dependency=HINT_DEPENDENCY) from exc

    def _render(self, pdf_path: Path, prefix: str, request: ConversionRequest) -> List[ConvertedImage]:
        if request.all_pages:
            return self._convert(pdf_path, prefix, request)

        images: List[ConvertedImage] = []
        for page_number in request.pages:
            produced = self._convert(pdf_path, prefix, request, page=page_number)
            if not produced:
                raise ConversionFailed(
                    f"Page {page_number} was not rendered; the document may have fewer pages."
                )
            images.extend(produced)
        return images

    def _convert(
        self,
        pdf_path: Path,
        prefix: str,
        request: ConversionRequest,
        page: Optional[int] = None,
    ) -> List[ConvertedImage]:
        paths = convert_from_path(
            str(pdf_path),
            dpi=request.quality,
            fmt=request.image_format.value,
            output_folder=str(self.temp_dir),
            output_file=prefix,
            paths_only=True,
            first_page=page,
            last_page=page,
            poppler_path=self.poppler_path,
        )

        start = page or 1
        numbered = sorted(
            (page_number_from_path(path, start + offset), Path(path))
            for offset, path in enumerate(paths)
        )

        images: List[ConvertedImage] = []
        for page_number, path in numbered:
            try:
                data = path.read_bytes()
            finally:
                remove_quietly(path)
            images.append(ConvertedImage.for_page(data, page_number, request.image_format))
        LOGGER.debug("pdftoppm produced %s image(s) for %s", len(images), pdf_path.name)
        return images

    def _sweep(self, prefix: str) -> None:
        for leftover in self.temp_dir.glob(f"{prefix}*"):
            remove_quietly(leftover)


__all__ = ["PopplerBackend", "temporary_pdf", "page_number_from_path", "remove_quietly"]
