"""
Type definitions and dataclasses for PDF Convert.

This module defines the data structures exchanged between the node, its
host and the rasterization backends.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .exceptions import InvalidInput, UnsupportedMode


class ImageFormat(str, Enum):
    """Output image formats supported by every backend."""

    PNG = "png"
    JPEG = "jpeg"

    @property
    def mime_type(self) -> str:
        return f"image/{self.value}"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Union[str, "ImageFormat"]) -> "ImageFormat":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized == "jpg":
            normalized = "jpeg"
        try:
            return cls(normalized)
        except ValueError as exc:
            raise InvalidInput(
                f"Unsupported output format: '{value}'. Expected 'png' or 'jpeg'."
            ) from exc


class InputMode(str, Enum):
    """Where the PDF bytes of an item come from."""

    BINARY = "binary"
    BASE64 = "base64"

    @classmethod
    def from_value(cls, value: Union[str, "InputMode"]) -> "InputMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise UnsupportedMode(
                f"Unsupported input mode: '{value}'. Expected 'binary' or 'base64'."
            ) from exc


@dataclass(frozen=True)
class ConversionRequest:
    """
    A single PDF to image conversion.

    Attributes:
        source: Raw PDF bytes
        image_format: Requested output format
        quality: Scale factor or DPI density, depending on the backend
        pages: Sorted 1-based page numbers; empty means all pages
        item_index: Index of the input item the request belongs to
    """
    source: bytes
    image_format: ImageFormat
    quality: Union[int, float]
    pages: Tuple[int, ...] = ()
    item_index: int = 0

    @property
    def all_pages(self) -> bool:
        return not self.pages


@dataclass
class ConvertedImage:
    """One rendered page."""

    data: bytes
    mime_type: str
    page_number: int
    file_name: str

    @classmethod
    def for_page(cls, data: bytes, page_number: int, image_format: ImageFormat) -> "ConvertedImage":
        return cls(
            data=data,
            mime_type=image_format.mime_type,
            page_number=page_number,
            file_name=f"page_{page_number}.{image_format.extension}",
        )


@dataclass
class BinaryData:
    """A named attachment as stored by the host, with base64 encoded content."""

    data: str
    mime_type: str
    file_name: Optional[str] = None
    file_extension: Optional[str] = None

    @classmethod
    def from_bytes(
        cls,
        raw: bytes,
        mime_type: str,
        file_name: Optional[str] = None,
        file_extension: Optional[str] = None,
    ) -> "BinaryData":
        return cls(
            data=base64.b64encode(raw).decode("ascii"),
            mime_type=mime_type,
            file_name=file_name,
            file_extension=file_extension,
        )

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"data": self.data, "mimeType": self.mime_type}
        if self.file_name is not None:
            payload["fileName"] = self.file_name
        if self.file_extension is not None:
            payload["fileExtension"] = self.file_extension
        return payload


@dataclass
class NodeItem:
    """
    One unit of the host's batch.

    Attributes:
        json: Structured fields
        binary: Named attachments
        paired_item: Index of the input item this output was derived from
    """
    json: Dict[str, Any] = field(default_factory=dict)
    binary: Dict[str, BinaryData] = field(default_factory=dict)
    paired_item: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"json": dict(self.json)}
        if self.binary:
            payload["binary"] = {key: value.to_dict() for key, value in self.binary.items()}
        if self.paired_item is not None:
            payload["pairedItem"] = {"item": self.paired_item}
        return payload

    @property
    def failed(self) -> bool:
        return bool(self.json.get("conversionFailed"))


__all__ = [
    "ImageFormat",
    "InputMode",
    "ConversionRequest",
    "ConvertedImage",
    "BinaryData",
    "NodeItem",
]
