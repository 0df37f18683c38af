from __future__ import annotations

import base64
import io
from pathlib import Path
from typing import Callable
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfconvert.types import BinaryData, NodeItem  # noqa: E402


def build_pdf(num_pages: int, title: str | None = None) -> bytes:
    writer = PdfWriter()
    for _ in range(num_pages):
        writer.add_blank_page(width=200, height=200)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture()
def pdf_factory() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    return build_pdf(3, title="Sample")


@pytest.fixture()
def sample_pdf(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    pdf_path.write_bytes(sample_pdf_bytes)
    return pdf_path


@pytest.fixture()
def binary_item() -> Callable[..., NodeItem]:
    def _create(data: bytes, property_name: str = "data", **fields) -> NodeItem:
        attachment = BinaryData.from_bytes(data, "application/pdf", file_name="document.pdf")
        return NodeItem(json=dict(fields), binary={property_name: attachment})

    return _create


@pytest.fixture()
def base64_item() -> Callable[..., NodeItem]:
    def _create(text: str | bytes, **fields) -> NodeItem:
        if isinstance(text, bytes):
            text = base64.b64encode(text).decode("ascii")
        return NodeItem(json={"pdf": text, **fields})

    return _create
