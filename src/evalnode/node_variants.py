"""
Concrete evaluated node variants.

- EvaluatedNodeInfo: a data field bound to a schema element
- EvaluatedNodeAction: a button/link running an action
- EvaluatedNodeContainer: a form, list or cellmates grouping other nodes
"""

import logging
import math
import re
import sys
from enum import Enum
from typing import Any, Optional

from evalnode.attribute_result import FixedStringAttributeResult, StringAttributeResult
from evalnode.attributes import NodeAttribute
from evalnode.errors import NodeValidationError
from evalnode.evaluated_node import EvaluatedNode
from evalnode.evaluation_context import NodeEvaluationContext
from evalnode.evaluation_pass import FieldMgr
from evalnode.memo import MemoCell
from evalnode.node_info import NodeInfo
from evalnode.options import NodeVisibility
from evalnode.widget_type import WidgetBuilderType, WidgetType

logger = logging.getLogger(__name__)

UNLIMITED_DATA_LENGTH = sys.maxsize


class NodeKind(Enum):
    FIELD = "field"
    ACTION = "action"
    CONTAINER = "container"


def init_cap(name: Optional[str]) -> Optional[str]:
    """Turn an element or action name into a prompt: "first_name" -> "First Name"."""
    if name is None:
        return None
    return " ".join(word.capitalize() for word in re.split(r"[_\s]+", name) if word)


class EvaluatedNodeInfo(EvaluatedNode):
    """Evaluated node for a data field.

    Args:
        node_info: Schema description of the bound element
    """

    kind = NodeKind.FIELD

    def __init__(self, parent: Optional[EvaluatedNode], presentation_node: Any,
                 context: NodeEvaluationContext, node_info: NodeInfo,
                 visibility: NodeVisibility = NodeVisibility.VIEW):
        super().__init__(parent, presentation_node, context, visibility)
        self._node_info = node_info
        self._field_mgr: MemoCell[FieldMgr] = MemoCell('field_mgr')

    def get_node_info(self) -> NodeInfo:
        return self._node_info

    def get_name(self) -> str:
        return self._node_info.name

    def get_action_name(self) -> Optional[str]:
        return self.get_string_attribute(NodeAttribute.ACTION)

    def is_phantom(self) -> bool:
        return self._node_info.is_phantom

    def is_mandatory(self) -> bool:
        return self.get_boolean_attribute(NodeAttribute.MANDATORY, False)

    def get_prompt_internal(self) -> Optional[str]:
        return init_cap(self.get_name())

    def _get_default_summary_prompt(self) -> StringAttributeResult:
        return FixedStringAttributeResult(init_cap(self.get_name()))

    def _get_widget_type(self) -> Optional[WidgetType]:
        declared = self.get_string_attribute(NodeAttribute.WIDGET)
        if declared is not None:
            return WidgetType.from_string(declared)

        if self.is_phantom():
            # Phantoms have no data to show; only a phantom buffer makes sense by default
            if self.is_attribute_defined(NodeAttribute.PHANTOM_BUFFER):
                return WidgetType.from_builder_type(WidgetBuilderType.PHANTOM_BUFFER)
            return None
        if not self.is_editable():
            return WidgetType.from_builder_type(WidgetBuilderType.TEXT)
        if self._node_info.is_date:
            return WidgetType.from_builder_type(WidgetBuilderType.DATE)
        if self._node_info.enumeration or self.is_multi_select():
            return WidgetType.from_builder_type(WidgetBuilderType.SELECTOR)
        return WidgetType.from_builder_type(WidgetBuilderType.INPUT)

    def get_max_data_length(self) -> int:
        declared = self.get_string_attribute(NodeAttribute.MAX_DATA_LENGTH)
        if declared is not None:
            return self._parse_size(declared, NodeAttribute.MAX_DATA_LENGTH)
        if self._node_info.max_length is not None:
            return self._node_info.max_length
        return UNLIMITED_DATA_LENGTH

    def _get_auto_field_width(self) -> str:
        max_length = self.get_max_data_length()
        if max_length == UNLIMITED_DATA_LENGTH:
            return super()._get_auto_field_width()
        return str(max_length)

    def _get_auto_field_height(self) -> str:
        max_length = self.get_max_data_length()
        if max_length == UNLIMITED_DATA_LENGTH:
            return super()._get_auto_field_height()
        # Enough rows to show the longest allowed value at full width
        return str(math.ceil(max_length / self._context.settings.max_field_width))

    def get_field_mgr(self) -> FieldMgr:
        def create():
            data_item = self.get_data_item()
            return self._get_evaluation_pass().field_set.create_field_mgr(
                data_item.ref if data_item is not None else None
            )
        return self._field_mgr.get_or_compute(create)

    def get_external_field_name(self) -> str:
        return self.get_field_mgr().external_field_name

    def get_selector_max_cardinality(self) -> int:
        """1 for single selectors; the selector child's max occurrences for multi selectors."""
        if not self.is_multi_select():
            return 1
        selector = self.get_string_attribute(NodeAttribute.SELECTOR)
        child = self._node_info.get_child(selector)
        if child is None:
            identity = self.get_identity_information()
            raise NodeValidationError(
                f"Selector '{selector}' does not name a child of {self.get_name()}: {identity}", identity
            )
        return child.max_occurs


class EvaluatedNodeAction(EvaluatedNode):
    """Evaluated node for an action (button, link, image...).

    Args:
        action_name: Name of the action the node runs
    """

    kind = NodeKind.ACTION

    def __init__(self, parent: Optional[EvaluatedNode], presentation_node: Any,
                 context: NodeEvaluationContext, action_name: str,
                 visibility: NodeVisibility = NodeVisibility.VIEW):
        super().__init__(parent, presentation_node, context, visibility)
        self._action_name = action_name
        self._field_mgr: MemoCell[FieldMgr] = MemoCell('field_mgr')

    def get_name(self) -> str:
        return self._action_name

    def get_action_name(self) -> Optional[str]:
        return self._action_name

    def is_phantom(self) -> bool:
        return False

    def get_prompt_internal(self) -> Optional[str]:
        return init_cap(self._action_name)

    def _get_default_summary_prompt(self) -> StringAttributeResult:
        return FixedStringAttributeResult(self.get_prompt_internal())

    def _get_widget_type(self) -> Optional[WidgetType]:
        declared = self.get_string_attribute(NodeAttribute.WIDGET)
        if declared is None:
            return WidgetType.from_builder_type(WidgetBuilderType.BUTTON)
        widget_type = WidgetType.from_string(declared)
        if widget_type is None or not widget_type.builder_type.is_action:
            return None
        return widget_type

    def get_field_mgr(self) -> FieldMgr:
        def create():
            return self._get_evaluation_pass().field_set.create_field_mgr(self.get_action_context_ref())
        return self._field_mgr.get_or_compute(create)

    def get_external_field_name(self) -> str:
        return self.get_field_mgr().external_field_name

    def get_selector_max_cardinality(self) -> int:
        identity = self.get_identity_information()
        raise NodeValidationError(f"Actions do not have a selector cardinality: {identity}", identity)


class EvaluatedNodeContainer(EvaluatedNode):
    """Evaluated node grouping other nodes (form, list or cellmates).

    Args:
        node_info: Schema description of the container element
    """

    kind = NodeKind.CONTAINER

    def __init__(self, parent: Optional[EvaluatedNode], presentation_node: Any,
                 context: NodeEvaluationContext, node_info: NodeInfo,
                 visibility: NodeVisibility = NodeVisibility.VIEW):
        super().__init__(parent, presentation_node, context, visibility)
        self._node_info = node_info

    def get_node_info(self) -> NodeInfo:
        return self._node_info

    def get_name(self) -> str:
        return self._node_info.name

    def get_action_name(self) -> Optional[str]:
        return self.get_string_attribute(NodeAttribute.ACTION)

    def is_phantom(self) -> bool:
        return self._node_info.is_phantom

    def get_prompt_internal(self) -> Optional[str]:
        return init_cap(self.get_name())

    def _get_default_summary_prompt(self) -> StringAttributeResult:
        return FixedStringAttributeResult(init_cap(self.get_name()))

    def _get_widget_type(self) -> Optional[WidgetType]:
        declared = self.get_string_attribute(NodeAttribute.WIDGET)
        if declared is not None:
            widget_type = WidgetType.from_string(declared)
            if widget_type is None or not widget_type.builder_type.is_internal_only:
                return None
            return widget_type
        # Repeating children are laid out as a list, otherwise as a form
        if any(child.max_occurs != 1 for child in self._node_info.children):
            return WidgetType.from_builder_type(WidgetBuilderType.LIST)
        return WidgetType.from_builder_type(WidgetBuilderType.FORM)

    def get_field_mgr(self) -> FieldMgr:
        identity = self.get_identity_information()
        raise NodeValidationError(f"Containers are not bound to a field: {identity}", identity)

    def get_external_field_name(self) -> str:
        return self.get_field_mgr().external_field_name

    def get_selector_max_cardinality(self) -> int:
        identity = self.get_identity_information()
        raise NodeValidationError(f"Containers do not have a selector cardinality: {identity}", identity)
