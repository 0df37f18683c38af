"""Node description and parameter definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .backends.base import RasterBackend


@dataclass(frozen=True)
class NodeParameter:
    """A configurable node parameter as presented by the host."""

    name: str
    display_name: str
    type: str
    default: Any
    description: str = ""
    options: Tuple[Tuple[str, str], ...] = ()
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    step: Optional[float] = None
    show_for_input_mode: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "displayName": self.display_name,
            "name": self.name,
            "type": self.type,
            "default": self.default,
            "description": self.description,
        }
        if self.options:
            payload["options"] = [{"name": label, "value": value} for label, value in self.options]
        type_options = {
            key: value
            for key, value in (
                ("minValue", self.min_value),
                ("maxValue", self.max_value),
                ("numberStepSize", self.step),
            )
            if value is not None
        }
        if type_options:
            payload["typeOptions"] = type_options
        if self.show_for_input_mode:
            payload["displayOptions"] = {"show": {"inputMode": [self.show_for_input_mode]}}
        return payload


@dataclass(frozen=True)
class NodeDescription:
    """Static metadata describing the node to its host."""

    display_name: str
    name: str
    version: int
    description: str
    group: Tuple[str, ...] = ("transform",)
    defaults: Dict[str, Any] = field(default_factory=dict)
    properties: Tuple[NodeParameter, ...] = ()

    def parameter(self, name: str) -> Optional[NodeParameter]:
        for parameter in self.properties:
            if parameter.name == name:
                return parameter
        return None

    def default_for(self, name: str) -> Any:
        parameter = self.parameter(name)
        return parameter.default if parameter is not None else None

    def parameter_defaults(self) -> Dict[str, Any]:
        return {parameter.name: parameter.default for parameter in self.properties}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "displayName": self.display_name,
            "name": self.name,
            "group": list(self.group),
            "version": self.version,
            "description": self.description,
            "defaults": dict(self.defaults),
            "inputs": ["main"],
            "outputs": ["main"],
            "properties": [parameter.to_dict() for parameter in self.properties],
        }


def _quality_parameter(backend: RasterBackend) -> NodeParameter:
    if backend.quality_parameter == "scale":
        return NodeParameter(
            name="scale",
            display_name="Scale",
            type="number",
            default=backend.default_quality,
            description="Rendering scale relative to 72 DPI (higher = better quality, larger file)",
            min_value=0.5,
            max_value=5.0,
            step=0.1,
        )
    return NodeParameter(
        name=backend.quality_parameter,
        display_name="Density (DPI)",
        type="number",
        default=backend.default_quality,
        description="Image density in DPI (higher = better quality, larger file)",
    )


def build_description(backend: RasterBackend) -> NodeDescription:
    """Return the description of a node using ``backend``."""

    properties = (
        NodeParameter(
            name="inputMode",
            display_name="Input Mode",
            type="options",
            default="binary",
            description="Where to read the PDF document from",
            options=(("Binary Data", "binary"), ("Base64 String", "base64")),
        ),
        NodeParameter(
            name="binaryPropertyName",
            display_name="Binary Property",
            type="string",
            default="data",
            description="Name of the binary property that contains the PDF file",
            show_for_input_mode="binary",
        ),
        NodeParameter(
            name="base64Data",
            display_name="Base64 Data",
            type="string",
            default="",
            description="Base64 encoded PDF document",
            show_for_input_mode="base64",
        ),
        NodeParameter(
            name="format",
            display_name="Output Format",
            type="options",
            default="png",
            description="Output image format",
            options=(("PNG", "png"), ("JPEG", "jpeg")),
        ),
        _quality_parameter(backend),
        NodeParameter(
            name="pages",
            display_name="Pages",
            type="string",
            default="",
            description="Pages to convert, e.g. '1,3-5'. Leave empty to convert all pages",
        ),
        NodeParameter(
            name="outputProperty",
            display_name="Output Property",
            type="string",
            default="images",
            description="Name of the output property that will contain the converted images",
        ),
    )
    return NodeDescription(
        display_name="PDF Convert",
        name="pdfConvert",
        version=1,
        description=f"Convert PDF files to images ({backend.name} backend)",
        defaults={"name": "PDF Convert"},
        properties=properties,
    )


__all__ = ["NodeParameter", "NodeDescription", "build_description"]
