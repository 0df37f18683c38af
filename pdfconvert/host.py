"""Host collaborator interface and an in-process implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from .exceptions import MissingInput
from .types import BinaryData, NodeItem

ParameterValue = Any
DynamicParameter = Callable[[NodeItem, int], Any]


@dataclass(frozen=True)
class NodeIdentity:
    """Identifies the node instance when errors are reported."""

    name: str
    type: str = "pdfConvert"


class ExecuteFunctions(Protocol):
    """Operations the node needs from the workflow host."""

    def get_input_data(self) -> List[NodeItem]:
        """Return the input batch."""

    def get_node_parameter(self, name: str, item_index: int, default: Any = None) -> Any:
        """Return the value of ``name`` evaluated for ``item_index``."""

    def assert_binary_data(self, item_index: int, property_name: str) -> BinaryData:
        """Return the attachment or raise :class:`MissingInput`."""

    def get_binary_data_buffer(self, item_index: int, property_name: str) -> bytes:
        """Return the raw bytes of an attachment."""

    def continue_on_fail(self) -> bool:
        """Whether per-item failures are recorded instead of aborting."""

    def get_node(self) -> NodeIdentity:
        """Return the identity of the running node."""


class LocalExecution(ExecuteFunctions):
    """Runs a node in-process over a list of items.

    ``parameters`` maps parameter names to literal values or to callables
    taking ``(item, item_index)``; callables are evaluated for every item,
    which mirrors per-item expressions in a workflow host. Parameters that
    are not given fall back to ``defaults``.
    """

    def __init__(
        self,
        items: Sequence[NodeItem],
        parameters: Optional[Mapping[str, Union[ParameterValue, DynamicParameter]]] = None,
        *,
        defaults: Optional[Mapping[str, Any]] = None,
        continue_on_fail: bool = False,
        node: Optional[NodeIdentity] = None,
    ) -> None:
        self._items = list(items)
        self._parameters: Dict[str, Union[ParameterValue, DynamicParameter]] = dict(parameters or {})
        self._defaults: Dict[str, Any] = dict(defaults or {})
        self._continue_on_fail = continue_on_fail
        self._node = node or NodeIdentity(name="PDF Convert")

    def get_input_data(self) -> List[NodeItem]:
        return list(self._items)

    def get_node_parameter(self, name: str, item_index: int, default: Any = None) -> Any:
        if name in self._parameters:
            value = self._parameters[name]
            if callable(value):
                return value(self._items[item_index], item_index)
            return value
        if name in self._defaults:
            return self._defaults[name]
        return default

    def assert_binary_data(self, item_index: int, property_name: str) -> BinaryData:
        item = self._items[item_index]
        if not item.binary:
            raise MissingInput(f"No binary data exists on item {item_index}.")
        attachment = item.binary.get(property_name)
        if attachment is None:
            raise MissingInput(
                f"Item {item_index} has no binary field '{property_name}'."
            )
        return attachment

    def get_binary_data_buffer(self, item_index: int, property_name: str) -> bytes:
        return self.assert_binary_data(item_index, property_name).to_bytes()

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail

    def get_node(self) -> NodeIdentity:
        return self._node


__all__ = [
    "NodeIdentity",
    "ExecuteFunctions",
    "LocalExecution",
    "DynamicParameter",
]
