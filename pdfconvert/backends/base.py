"""Backend protocol and registry for PDF rasterization."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Union

from ..exceptions import ConversionFailed, UnsupportedMode
from ..types import ConversionRequest, ConvertedImage

Quality = Union[int, float]


class RasterBackend(Protocol):
    """Protocol implemented by every rasterization backend."""

    name: str
    quality_parameter: str
    default_quality: Quality
    includes_page_metadata: bool

    def validate_quality(self, value: Any) -> Quality:
        """Coerce and range-check the quality parameter."""

    def rasterize(self, request: ConversionRequest) -> List[ConvertedImage]:
        """Render the requested pages, one image per page."""

    def summary(self, request: ConversionRequest) -> Dict[str, Any]:
        """Backend specific fields reported alongside the images."""


def failure_message(
    error: Union[BaseException, str],
    *,
    patterns: Sequence[str],
    dependency: str,
) -> str:
    """Return a user-facing message for ``error``.

    When the text matches one of ``patterns`` the message is extended with a
    hint about a missing system dependency. The original text is kept.
    """

    if isinstance(error, BaseException):
        text = str(error) or type(error).__name__
        haystack = f"{type(error).__name__} {text}".lower()
    else:
        text = str(error)
        haystack = text.lower()

    if any(pattern.lower() in haystack for pattern in patterns):
        return (
            f"PDF conversion failed: {text}. "
            f"Make sure {dependency} is installed in your system."
        )
    return text


def conversion_failed(
    error: BaseException,
    *,
    patterns: Sequence[str],
    dependency: str,
) -> ConversionFailed:
    return ConversionFailed(failure_message(error, patterns=patterns, dependency=dependency))


class BackendRegistry:
    """Registry storing available rasterization backends."""

    def __init__(self) -> None:
        self._backends: Dict[str, type] = {}

    def register(self, name: str, backend_class: type) -> None:
        if name in self._backends:
            raise ValueError(f"Backend '{name}' is already registered")
        self._backends[name] = backend_class

    def create(self, name: str, **options: Any) -> RasterBackend:
        try:
            backend_class = self._backends[name]
        except KeyError as exc:
            raise UnsupportedMode(
                f"Unknown conversion backend: '{name}'. Available: {', '.join(self.names())}"
            ) from exc
        return backend_class(**options)

    def names(self) -> Iterable[str]:
        return sorted(self._backends.keys())

    def get(self, name: str) -> Optional[type]:
        return self._backends.get(name)


registry = BackendRegistry()


def register_backend(name: str):
    def decorator(cls: type) -> type:
        registry.register(name, cls)
        return cls

    return decorator
