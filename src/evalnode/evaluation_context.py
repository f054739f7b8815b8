"""
Per-node evaluation context.

A NodeEvaluationContext binds a presentation node's attribute source to the
namespaces active for the node, the data item it is rendered against, and the
pass-scoped EvaluationPass. Contexts are built by the tree builder; nodes never
construct their own.

Attribute lookups are cached per context: the namespace precedence list and
data item are fixed for the context's lifetime, so a lookup's answer is too.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from evalnode.attribute_result import (
    AttributeResult,
    BooleanAttributeResult,
    BufferAttributeResult,
    DataItemAttributeResult,
    DataItemListAttributeResult,
    StringAttributeResult,
)
from evalnode.attribute_source import AttributeSource
from evalnode.attributes import NamespaceListType, NodeAttribute
from evalnode.config import EvaluationSettings
from evalnode.data_item import DataItem
from evalnode.errors import AttributeTypeError
from evalnode.evaluation_pass import EvaluationPass

logger = logging.getLogger(__name__)

_CACHE_SENTINEL = object()

_TRUE_STRINGS = frozenset({"true", "y", "yes", "1"})


class NodeEvaluationContext:
    """
    Evaluation context for one evaluated node (or a set of siblings sharing it).

    Args:
        evaluation_pass: Pass-scoped state (default action slot, field set)
        attribute_source: Source of attribute definitions for the presentation node
        namespaces: Active namespaces, most important first
        mode_namespaces: Namespaces the node is editable in (subset of namespaces)
        data_item: Data item the node is bound to, if any
        action_context_item: Data item actions run against when no action-context
                             attribute is given; defaults to data_item
    """

    def __init__(
        self,
        evaluation_pass: EvaluationPass,
        attribute_source: AttributeSource,
        namespaces: Sequence[str] = (),
        mode_namespaces: Sequence[str] = (),
        data_item: Optional[DataItem] = None,
        action_context_item: Optional[DataItem] = None,
    ):
        self._evaluation_pass = evaluation_pass
        self._attribute_source = attribute_source
        self._namespaces: Tuple[str, ...] = tuple(namespaces)
        self._mode_namespaces: Tuple[str, ...] = tuple(mode_namespaces)
        self._data_item = data_item
        self._action_context_item = action_context_item if action_context_item is not None else data_item
        self._lookup_cache: Dict[NodeAttribute, Any] = {}
        self._namespace_function_cache: Dict[Tuple[NamespaceListType, NodeAttribute], bool] = {}

    @property
    def evaluation_pass(self) -> EvaluationPass:
        return self._evaluation_pass

    @property
    def attribute_source(self) -> AttributeSource:
        return self._attribute_source

    @property
    def data_item(self) -> Optional[DataItem]:
        return self._data_item

    @property
    def action_context_item(self) -> Optional[DataItem]:
        return self._action_context_item

    @property
    def settings(self) -> EvaluationSettings:
        return self._evaluation_pass.settings

    def get_namespace_precedence_list(self) -> List[str]:
        """Active namespaces, most important first."""
        return list(self._namespaces)

    def get_mode_list(self) -> List[str]:
        return list(self._mode_namespaces)

    def get_namespace_list(self, list_type: NamespaceListType) -> Tuple[str, ...]:
        if list_type == NamespaceListType.MODE:
            return self._mode_namespaces
        return tuple(ns for ns in self._namespaces if ns not in self._mode_namespaces)

    # ------------------------------------------------------------------
    # Raw lookups
    # ------------------------------------------------------------------

    def lookup(self, attribute: NodeAttribute) -> Optional[AttributeResult]:
        """Winning definition of attribute across the active namespaces, or None."""
        cached = self._lookup_cache.get(attribute, _CACHE_SENTINEL)
        if cached is not _CACHE_SENTINEL:
            return cached
        result = self._attribute_source.lookup(attribute, self._namespaces)
        self._lookup_cache[attribute] = result
        return result

    def is_attribute_defined(self, attribute: NodeAttribute) -> bool:
        return self.lookup(attribute) is not None

    def has_node_attribute(self, namespace: str, attribute: NodeAttribute) -> bool:
        """True if attribute is defined in one specific namespace, active or not."""
        return self._attribute_source.lookup_in_namespace(attribute, namespace) is not None

    def check_namespace_function(self, list_type: NamespaceListType, attribute: NodeAttribute) -> bool:
        """
        True if any namespace of the given list defines attribute as true.

        Used for "namespace functions" such as run, which only take effect in
        a namespace the node is in the matching mode for.
        """
        key = (list_type, attribute)
        if key in self._namespace_function_cache:
            return self._namespace_function_cache[key]

        result = False
        for namespace in self.get_namespace_list(list_type):
            attr_result = self._attribute_source.lookup_in_namespace(attribute, namespace)
            if attr_result is not None and self._to_boolean(attribute, attr_result):
                result = True
                break
        self._namespace_function_cache[key] = result
        return result

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def _typed_lookup(self, attribute: NodeAttribute, expected: Type[AttributeResult]):
        result = self.lookup(attribute)
        if result is None or isinstance(result, expected):
            return result
        raise AttributeTypeError(
            f"Attribute {attribute.external_name} resolved to {type(result).__name__}, "
            f"expected {expected.__name__}"
        )

    def get_string_attribute_or_none(self, attribute: NodeAttribute) -> Optional[StringAttributeResult]:
        return self._typed_lookup(attribute, StringAttributeResult)

    def get_string_attributes(self, *attributes: NodeAttribute) -> List[Optional[str]]:
        results = [self.get_string_attribute_or_none(a) for a in attributes]
        return [r.get_string() if r is not None else None for r in results]

    def get_boolean_attribute_or_none(self, attribute: NodeAttribute) -> Optional[BooleanAttributeResult]:
        result = self.lookup(attribute)
        if result is None or isinstance(result, BooleanAttributeResult):
            return result
        return BooleanAttributeResult(self._to_boolean(attribute, result))

    def get_data_item_attribute_or_none(self, attribute: NodeAttribute) -> Optional[DataItemAttributeResult]:
        return self._typed_lookup(attribute, DataItemAttributeResult)

    def get_data_item_list_attribute_or_none(self, attribute: NodeAttribute) -> Optional[DataItemListAttributeResult]:
        return self._typed_lookup(attribute, DataItemListAttributeResult)

    def get_buffer_attribute_or_none(self, attribute: NodeAttribute) -> Optional[BufferAttributeResult]:
        return self._typed_lookup(attribute, BufferAttributeResult)

    @staticmethod
    def _to_boolean(attribute: NodeAttribute, result: AttributeResult) -> bool:
        if isinstance(result, BooleanAttributeResult):
            return result.get_boolean()
        if isinstance(result, StringAttributeResult):
            value = result.get_string()
            return value is not None and value.strip().lower() in _TRUE_STRINGS
        raise AttributeTypeError(
            f"Attribute {attribute.external_name} resolved to {type(result).__name__}, expected a boolean"
        )
