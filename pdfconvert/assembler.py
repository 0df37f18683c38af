"""Packaging of converted pages into host output items."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .types import BinaryData, ConvertedImage, ImageFormat, NodeItem


def build_binary_key(output_property: str, page_number: int) -> str:
    return f"{output_property}_page_{page_number}"


def assemble_output(
    item: NodeItem,
    images: Sequence[ConvertedImage],
    image_format: ImageFormat,
    *,
    output_property: str = "images",
    item_index: Optional[int] = None,
    pdf_size: Optional[int] = None,
    extra: Optional[Mapping[str, Any]] = None,
    include_pages: bool = False,
) -> NodeItem:
    """Build the output item for a successful conversion.

    The item's structured fields are kept and a summary is stored under
    ``output_property``. Each image becomes an attachment named
    ``<output_property>_page_<N>``; a repeated page number overwrites the
    earlier attachment.
    """

    summary: Dict[str, Any] = {
        "totalPages": len(images),
        "format": image_format.value,
    }
    if pdf_size is not None:
        summary["pdfSize"] = pdf_size
    if extra:
        summary.update(extra)

    binary: Dict[str, BinaryData] = {}
    pages: List[Dict[str, Any]] = []
    for image in images:
        key = build_binary_key(output_property, image.page_number)
        binary[key] = BinaryData.from_bytes(
            image.data,
            mime_type=image.mime_type,
            file_name=image.file_name,
            file_extension=image_format.extension,
        )
        pages.append(
            {
                "pageNumber": image.page_number,
                "fileName": image.file_name,
                "mimeType": image.mime_type,
                "binaryKey": key,
                "fileSize": len(image.data),
            }
        )

    if include_pages:
        summary["pages"] = pages

    return NodeItem(
        json={**item.json, output_property: summary},
        binary=binary,
        paired_item=item_index,
    )


def assemble_failure(item: NodeItem, message: str, item_index: int) -> NodeItem:
    """Build the diagnostic item recorded when continuing after a failure."""

    return NodeItem(
        json={**item.json, "error": message, "conversionFailed": True},
        paired_item=item_index,
    )


__all__ = ["build_binary_key", "assemble_output", "assemble_failure"]
