"""
Attribute source contract and an in-memory implementation.

An attribute source answers "what is attribute X given these active namespaces"
for one presentation node. The first namespace in the precedence list that
defines the attribute wins. Lookups are pure from the caller's point of view,
although a source may evaluate an expression against the data item.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from evalnode.attribute_result import (
    AttributeResult,
    BooleanAttributeResult,
    BufferAttributeResult,
    ComputedStringAttributeResult,
    DataItemAttributeResult,
    DataItemListAttributeResult,
    FixedStringAttributeResult,
)
from evalnode.attributes import NodeAttribute
from evalnode.data_item import DataItem

logger = logging.getLogger(__name__)

# Key for attributes defined without a namespace; consulted after all active namespaces
NO_NAMESPACE = None

AttributeKey = Union[NodeAttribute, str]


class AttributeSource(ABC):
    """Resolves attribute definitions for one presentation node."""

    @abstractmethod
    def lookup(self, attribute: NodeAttribute, namespaces: Sequence[str]) -> Optional[AttributeResult]:
        """
        Resolve an attribute against a namespace precedence list.

        Args:
            attribute: Attribute to resolve
            namespaces: Active namespaces, most important first

        Returns:
            The winning definition's result, or None if no active namespace defines it
        """

    def lookup_in_namespace(self, attribute: NodeAttribute, namespace: str) -> Optional[AttributeResult]:
        """Resolve attribute as defined in exactly one namespace, or None."""
        return self.lookup(attribute, (namespace,))


class MappingAttributeSource(AttributeSource):
    """
    Attribute source backed by nested mappings.

    Definitions are keyed by namespace, then by attribute (member or external
    name). Values may be:
    - str: a fixed string
    - bool: a boolean
    - a DataItem, or list/tuple of DataItems
    - an AttributeResult, returned as-is
    - a callable taking the bound data item, evaluated on lookup; its return
      value is wrapped as above (str becomes a computed string)
    - anything else: a buffer (evaluated presentation sub-tree)

    Every callable is treated as an expression. A buffer that is itself
    callable (a class, an object with __call__) must be given wrapped as
    BufferAttributeResult(buffer).

    Example:
        source = MappingAttributeSource({
            "fox": {"prompt": "Name", "widget": "input"},
            "edit": {"run": True},
            None: {"hint": lambda item: item.select_text("help")},
        }, data_item=item)
    """

    def __init__(self, definitions: Mapping[Optional[str], Mapping[AttributeKey, Any]],
                 data_item: Optional[DataItem] = None):
        self._definitions: Dict[Optional[str], Dict[str, Any]] = {
            namespace: {self._key(attr): value for attr, value in attrs.items()}
            for namespace, attrs in definitions.items()
        }
        self._data_item = data_item

    @staticmethod
    def _key(attribute: AttributeKey) -> str:
        return attribute.external_name if isinstance(attribute, NodeAttribute) else attribute

    def lookup_in_namespace(self, attribute: NodeAttribute, namespace: str) -> Optional[AttributeResult]:
        attrs = self._definitions.get(namespace, {})
        key = self._key(attribute)
        return self._to_result(attrs[key]) if key in attrs else None

    def lookup(self, attribute: NodeAttribute, namespaces: Sequence[str]) -> Optional[AttributeResult]:
        key = self._key(attribute)
        for namespace in list(namespaces) + [NO_NAMESPACE]:
            attrs = self._definitions.get(namespace)
            if attrs is not None and key in attrs:
                logger.debug(f"Attribute {namespace}:{key} defined, resolving")
                return self._to_result(attrs[key])
        return None

    def _to_result(self, value: Any) -> AttributeResult:
        if isinstance(value, AttributeResult):
            return value
        if callable(value) and not isinstance(value, DataItem):
            return self._wrap(self._evaluate(value), computed=True)
        return self._wrap(value, computed=False)

    def _evaluate(self, expression: Callable[[Optional[DataItem]], Any]) -> Any:
        return expression(self._data_item)

    @staticmethod
    def _wrap(value: Any, computed: bool) -> AttributeResult:
        if isinstance(value, AttributeResult):
            return value
        if isinstance(value, bool):
            return BooleanAttributeResult(value)
        if value is None or isinstance(value, str):
            if computed:
                return ComputedStringAttributeResult(value)
            return FixedStringAttributeResult(value)
        if isinstance(value, DataItem):
            return DataItemAttributeResult(value)
        if isinstance(value, (list, tuple)):
            return DataItemListAttributeResult(tuple(value))
        if isinstance(value, (int, float)):
            return FixedStringAttributeResult(str(value))
        return BufferAttributeResult(value)
