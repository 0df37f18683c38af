"""Resolution of the PDF bytes for an input item."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Optional, Union

from .exceptions import InvalidInput, MissingInput
from .host import ExecuteFunctions
from .types import InputMode

LOGGER = logging.getLogger(__name__)

_DATA_URI_PREFIX = re.compile(r"^data:[^;,]*;base64,", re.IGNORECASE)


def decode_base64_pdf(text: Optional[str]) -> bytes:
    """Decode base64 PDF text, accepting embedded whitespace and data URIs."""

    if text is None or not str(text).strip():
        raise InvalidInput("Base64 PDF data is empty.")

    payload = "".join(str(text).split())
    payload = _DATA_URI_PREFIX.sub("", payload, count=1)
    try:
        decoded = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInput(f"Base64 PDF data could not be decoded: {exc}") from exc

    if not decoded:
        raise InvalidInput("Base64 PDF data decoded to an empty document.")
    return decoded


def resolve_pdf_source(
    context: ExecuteFunctions,
    item_index: int,
    mode: Union[str, InputMode],
    *,
    binary_property: str = "data",
    base64_data: Optional[str] = None,
) -> bytes:
    """Return the raw PDF bytes for ``item_index``.

    Raises:
        MissingInput: The binary attachment is absent.
        InvalidInput: The base64 text is empty or malformed.
        UnsupportedMode: ``mode`` is neither binary nor base64.
    """

    input_mode = InputMode.from_value(mode)

    if input_mode is InputMode.BINARY:
        if not binary_property:
            raise MissingInput("No binary property name was given.")
        context.assert_binary_data(item_index, binary_property)
        data = context.get_binary_data_buffer(item_index, binary_property)
        LOGGER.debug(
            "Item %s: read %s bytes from binary property '%s'",
            item_index,
            len(data),
            binary_property,
        )
        return data

    data = decode_base64_pdf(base64_data)
    LOGGER.debug("Item %s: decoded %s bytes of base64 PDF data", item_index, len(data))
    return data


__all__ = ["resolve_pdf_source", "decode_base64_pdf"]
