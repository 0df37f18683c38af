"""Utility helpers for PDF Convert."""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterator, Optional, Union

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .exceptions import InvalidInput


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        end = datetime.now(tz=timezone.utc)
        elapsed = (end - start).total_seconds()
        logger.info("%s completed in %.2fs", message, elapsed)


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


@dataclass
class PDFInfo:
    """Basic facts about a PDF document."""

    num_pages: int
    file_size: int
    is_encrypted: bool = False
    title: Optional[str] = None


def get_pdf_info(data: bytes) -> PDFInfo:
    """Read page count and title from PDF bytes."""
    try:
        reader = PdfReader(io.BytesIO(data))
        encrypted = reader.is_encrypted
        num_pages = len(reader.pages)
        metadata = reader.metadata
    except (PdfReadError, ValueError) as exc:
        raise InvalidInput(f"Corrupted or invalid PDF data: {exc}") from exc

    title = metadata.title if metadata and metadata.title else None
    return PDFInfo(num_pages=num_pages, file_size=len(data), is_encrypted=encrypted, title=title)
