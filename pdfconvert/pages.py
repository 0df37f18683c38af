"""Page selection parsing."""

from __future__ import annotations

import re
from typing import List, Optional

from .exceptions import InvalidPageExpression

PageList = List[int]

_RANGE_PATTERN = re.compile(r"^\s*(-?\d+)\s*-\s*(-?\d+)\s*$")


def _parse_int(value: str, token: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidPageExpression(
            f"Invalid page number: '{token}'. Expected a positive integer."
        ) from exc


def parse_page_expression(expression: str) -> PageList:
    """Parse a page expression such as ``"1,3-5,7"`` into sorted unique pages.

    Tokens are separated by commas. A token containing a dash is an inclusive
    ``start-end`` range, anything else is a single page number. Page numbers
    are 1-based; overlapping ranges and repeated pages are collapsed.

    Raises:
        InvalidPageExpression: If any token is malformed, a range is reversed
            or a page number is lower than 1.
    """

    pages: set[int] = set()
    for raw_token in expression.split(","):
        token = raw_token.strip()
        if "-" in token.lstrip("-"):
            match = _RANGE_PATTERN.match(token)
            if not match:
                raise InvalidPageExpression(
                    f"Invalid page range format: '{token}'. Expected 'start-end'."
                )

            start = _parse_int(match.group(1), token)
            end = _parse_int(match.group(2), token)
            if start > end:
                raise InvalidPageExpression(
                    f"Invalid range '{token}': start page ({start}) must be <= end page ({end})."
                )
            if start < 1:
                raise InvalidPageExpression(
                    f"Invalid range '{token}': page numbers must be >= 1."
                )

            pages.update(range(start, end + 1))
        else:
            page_num = _parse_int(token, token)
            if page_num < 1:
                raise InvalidPageExpression(
                    f"Invalid page number: {page_num}. Page numbers must be >= 1."
                )

            pages.add(page_num)

    return sorted(pages)


def resolve_page_selection(expression: Optional[str]) -> PageList:
    """Return the selection for ``expression``; blank means all pages (``[]``)."""

    if expression is None or not str(expression).strip():
        return []
    return parse_page_expression(str(expression))


def describe_selection(pages: PageList) -> str:
    """Render a selection compactly, e.g. ``[1, 2, 3, 7]`` -> ``"1-3,7"``."""

    if not pages:
        return "all"

    parts: list[str] = []
    start = previous = pages[0]
    for page in pages[1:]:
        if page == previous + 1:
            previous = page
            continue
        parts.append(str(start) if start == previous else f"{start}-{previous}")
        start = previous = page
    parts.append(str(start) if start == previous else f"{start}-{previous}")
    return ",".join(parts)


__all__ = [
    "PageList",
    "parse_page_expression",
    "resolve_page_selection",
    "describe_selection",
]
