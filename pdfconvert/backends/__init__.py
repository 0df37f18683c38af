"""Rasterization backends for PDF Convert."""

from .base import BackendRegistry, RasterBackend, failure_message, register_backend, registry
from .pdfium_backend import PdfiumBackend
from .poppler_backend import PopplerBackend

__all__ = [
    "BackendRegistry",
    "RasterBackend",
    "PdfiumBackend",
    "PopplerBackend",
    "failure_message",
    "register_backend",
    "registry",
]
