from __future__ import annotations

import pytest

from pdfconvert.exceptions import InvalidInput, UnsupportedMode
from pdfconvert.types import BinaryData, ConversionRequest, ConvertedImage, ImageFormat, InputMode, NodeItem


@pytest.mark.parametrize(
    "value, expected",
    [("png", ImageFormat.PNG), ("PNG", ImageFormat.PNG), ("jpeg", ImageFormat.JPEG), ("jpg", ImageFormat.JPEG)],
)
def test_image_format_from_value(value, expected) -> None:
    assert ImageFormat.from_value(value) is expected


def test_image_format_rejects_unknown() -> None:
    with pytest.raises(InvalidInput):
        ImageFormat.from_value("tiff")


def test_image_format_properties() -> None:
    assert ImageFormat.PNG.mime_type == "image/png"
    assert ImageFormat.JPEG.mime_type == "image/jpeg"
    assert ImageFormat.JPEG.extension == "jpeg"


def test_input_mode_from_value() -> None:
    assert InputMode.from_value("Binary") is InputMode.BINARY
    assert InputMode.from_value(InputMode.BASE64) is InputMode.BASE64
    with pytest.raises(UnsupportedMode):
        InputMode.from_value("url")


def test_converted_image_for_page() -> None:
    image = ConvertedImage.for_page(b"x", 12, ImageFormat.PNG)
    assert image.file_name == "page_12.png"
    assert image.mime_type == "image/png"
    assert image.page_number == 12


def test_conversion_request_all_pages() -> None:
    assert ConversionRequest(source=b"", image_format=ImageFormat.PNG, quality=1.0).all_pages
    assert not ConversionRequest(source=b"", image_format=ImageFormat.PNG, quality=1.0, pages=(1,)).all_pages


def test_binary_data_round_trip_and_dict() -> None:
    attachment = BinaryData.from_bytes(b"%PDF", "application/pdf", file_name="a.pdf")
    assert attachment.to_bytes() == b"%PDF"
    assert attachment.to_dict() == {"data": "JVBERg==", "mimeType": "application/pdf", "fileName": "a.pdf"}


def test_node_item_to_dict_omits_empty_sections() -> None:
    assert NodeItem(json={"a": 1}).to_dict() == {"json": {"a": 1}}
