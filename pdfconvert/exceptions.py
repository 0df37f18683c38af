"""
Custom exceptions for PDF Convert.

This module defines all custom exceptions raised while turning PDF documents
into page images.
"""

from __future__ import annotations

from typing import Optional


class PDFConvertException(Exception):
    """Base exception for all PDF Convert errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF conversion error occurred."


class InvalidPageExpression(PDFConvertException):
    """Raised when a page selection expression cannot be parsed."""

    @property
    def default_message(self) -> str:
        return "Invalid page selection."


class SourceResolutionError(PDFConvertException):
    """Raised when the PDF bytes for an item cannot be obtained."""

    @property
    def default_message(self) -> str:
        return "Unable to resolve the PDF source."


class MissingInput(SourceResolutionError):
    """Raised when the selected input mode has no data on the item."""

    @property
    def default_message(self) -> str:
        return "No PDF input data found on the item."


class InvalidInput(SourceResolutionError):
    """Raised when a supplied parameter or input value is unusable."""

    @property
    def default_message(self) -> str:
        return "Invalid input value."


class UnsupportedMode(SourceResolutionError):
    """Raised when an unknown input mode or backend is requested."""

    @property
    def default_message(self) -> str:
        return "Unsupported mode."


class ConversionFailed(PDFConvertException):
    """Raised when the rasterization backend fails."""

    @property
    def default_message(self) -> str:
        return "PDF conversion failed."


class NodeOperationError(PDFConvertException):
    """Raised to the host when an item aborts the run."""

    def __init__(
        self,
        node_name: str,
        message: str = "",
        *,
        item_index: Optional[int] = None,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.node_name = node_name
        self.item_index = item_index
        self.description = description

    @property
    def default_message(self) -> str:
        return "The node failed to process an item."

    def __str__(self) -> str:
        if self.item_index is None:
            return f"[{self.node_name}] {self.message}"
        return f"[{self.node_name}] item {self.item_index}: {self.message}"
