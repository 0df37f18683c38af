"""The PDF Convert node: turns each input item's PDF into page images."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .assembler import assemble_failure, assemble_output
from .backends import registry
from .backends.base import RasterBackend
from .description import NodeDescription, build_description
from .exceptions import NodeOperationError
from .host import ExecuteFunctions, LocalExecution, NodeIdentity
from .pages import describe_selection, resolve_page_selection
from .source import resolve_pdf_source
from .types import ConversionRequest, ImageFormat, InputMode, NodeItem
from .utils import time_block

LOGGER = logging.getLogger(__name__)


class PdfConvertNode:
    """Converts PDF documents to PNG or JPEG page images.

    The backend is chosen at construction time, either by registry name
    (``"pdfium"`` or ``"poppler"``) or as a ready backend instance. Items are
    processed one at a time and every parameter is read again for each item.
    """

    def __init__(
        self,
        backend: Union[str, RasterBackend] = "pdfium",
        **backend_options: Any,
    ) -> None:
        if isinstance(backend, str):
            backend = registry.create(backend, **backend_options)
        self.backend: RasterBackend = backend
        self.description: NodeDescription = build_description(backend)

    def execute(self, context: ExecuteFunctions) -> List[List[NodeItem]]:
        items = context.get_input_data()
        results: List[NodeItem] = []

        for item_index, item in enumerate(items):
            try:
                results.append(self._process_item(context, item, item_index))
            except Exception as exc:
                message = str(exc) or type(exc).__name__
                if context.continue_on_fail():
                    LOGGER.warning("Item %s failed, continuing: %s", item_index, message)
                    results.append(assemble_failure(item, message, item_index))
                    continue
                raise NodeOperationError(
                    context.get_node().name,
                    message,
                    item_index=item_index,
                    description=type(exc).__name__,
                ) from exc

        return [results]

    def run(
        self,
        items: Sequence[NodeItem],
        parameters: Optional[Mapping[str, Any]] = None,
        *,
        continue_on_fail: bool = False,
        node_name: Optional[str] = None,
    ) -> List[NodeItem]:
        """Execute the node in-process and return its single output stream."""

        context = LocalExecution(
            items,
            parameters,
            defaults=self.description.parameter_defaults(),
            continue_on_fail=continue_on_fail,
            node=NodeIdentity(name=node_name or self.description.display_name),
        )
        return self.execute(context)[0]

    def _process_item(self, context: ExecuteFunctions, item: NodeItem, item_index: int) -> NodeItem:
        def parameter(name: str) -> Any:
            return context.get_node_parameter(name, item_index, self.description.default_for(name))

        pages = resolve_page_selection(parameter("pages"))
        image_format = ImageFormat.from_value(parameter("format"))
        quality = self.backend.validate_quality(parameter(self.backend.quality_parameter))
        output_property = parameter("outputProperty") or "images"

        mode = InputMode.from_value(parameter("inputMode"))
        if mode is InputMode.BINARY:
            source = resolve_pdf_source(
                context, item_index, mode, binary_property=parameter("binaryPropertyName")
            )
        else:
            source = resolve_pdf_source(context, item_index, mode, base64_data=parameter("base64Data"))

        request = ConversionRequest(
            source=source,
            image_format=image_format,
            quality=quality,
            pages=tuple(pages),
            item_index=item_index,
        )
        LOGGER.debug(
            "Item %s: converting pages %s to %s with %s",
            item_index,
            describe_selection(pages),
            image_format.value,
            self.backend.name,
        )
        with time_block(LOGGER, f"Item {item_index} conversion"):
            images = self.backend.rasterize(request)

        extra: Dict[str, Any] = self.backend.summary(request)
        return assemble_output(
            item,
            images,
            image_format,
            output_property=output_property,
            item_index=item_index,
            pdf_size=len(source),
            extra=extra,
            include_pages=self.backend.includes_page_metadata,
        )


__all__ = ["PdfConvertNode"]
