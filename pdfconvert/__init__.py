"""
PDF Convert - turn PDF documents into PNG or JPEG page images.

The package provides a workflow node that reads a PDF from each input item
(binary attachment or base64 text), renders the selected pages through one of
two interchangeable backends and returns one output item per input item.

Quick Start:
    >>> from pdfconvert import PdfConvertNode, NodeItem, BinaryData
    >>> node = PdfConvertNode(backend="pdfium")
    >>> item = NodeItem(binary={"data": BinaryData.from_bytes(pdf_bytes, "application/pdf")})
    >>> [result] = node.run([item], {"pages": "1-2", "format": "png"})

Backends:
    - pdfium: in-memory rendering with pypdfium2 and Pillow (``scale``)
    - poppler: pdftoppm through pdf2image with temporary files (``density``)

For CLI usage, use the 'pdfconvert' command after installation.
"""

from pdfconvert.node import PdfConvertNode
from pdfconvert.backends import PdfiumBackend, PopplerBackend, registry as backend_registry
from pdfconvert.host import ExecuteFunctions, LocalExecution, NodeIdentity
from pdfconvert.pages import parse_page_expression, resolve_page_selection
from pdfconvert.types import (
    BinaryData,
    ConversionRequest,
    ConvertedImage,
    ImageFormat,
    InputMode,
    NodeItem,
)
from pdfconvert.exceptions import (
    PDFConvertException,
    InvalidPageExpression,
    SourceResolutionError,
    MissingInput,
    InvalidInput,
    UnsupportedMode,
    ConversionFailed,
    NodeOperationError,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "PdfConvertNode",
    "PdfiumBackend",
    "PopplerBackend",
    "backend_registry",
    "ExecuteFunctions",
    "LocalExecution",
    "NodeIdentity",
    "parse_page_expression",
    "resolve_page_selection",
    "BinaryData",
    "ConversionRequest",
    "ConvertedImage",
    "ImageFormat",
    "InputMode",
    "NodeItem",
    "PDFConvertException",
    "InvalidPageExpression",
    "SourceResolutionError",
    "MissingInput",
    "InvalidInput",
    "UnsupportedMode",
    "ConversionFailed",
    "NodeOperationError",
    "__version__",
]
