"""
Evaluated node layer for server-rendered presentation trees.

Given a compiled presentation tree and a runtime data context, the tree
builder creates one EvaluatedNode per presentation node. Each node resolves its
derived attributes (prompt, hint, description, error, history, widget type,
field size, mandatory display...) lazily from a namespace-aware attribute
source, and memoizes them for the lifetime of the render pass.

Key Features:
- Namespace precedence: the first active namespace defining an attribute wins
- Two-tier prompt fallbacks with explicit-empty suppression
- Compute-once memo cells distinguishing "not computed" from "computed as absent"
- At most one default action per evaluation pass, checked lazily
- Optional presentation behaviours queried by capability

Quick Start:
    >>> from evalnode import (
    ...     EvaluationPass, NodeEvaluationContext, MappingAttributeSource,
    ...     EvaluatedNodeAction,
    ... )
    >>> evaluation_pass = EvaluationPass()
    >>> source = MappingAttributeSource({"fox": {"prompt": "Save", "default-action": "true"}})
    >>> context = NodeEvaluationContext(evaluation_pass, source, namespaces=["fox"])
    >>> save = EvaluatedNodeAction(None, "action:save", context, "save")
    >>> save.get_prompt().get_string()
    'Save'
    >>> save.get_widget_builder_type()
    <WidgetBuilderType.SUBMIT: ('submit', True, False)>

Modules:
    - evaluated_node: Abstract evaluated node contract
    - node_variants: Field, action and container nodes
    - evaluation_context: Per-node attribute access
    - evaluation_pass: Pass-scoped default action slot and field set
    - attribute_source: Attribute source contract and mapping implementation
    - behaviour: Optional presentation behaviours
    - config: Evaluation settings
"""

from evalnode.attributes import NodeAttribute, NamespaceListType

from evalnode.attribute_result import (
    AttributeResult,
    StringAttributeResult,
    FixedStringAttributeResult,
    ComputedStringAttributeResult,
    BooleanAttributeResult,
    DataItemAttributeResult,
    DataItemListAttributeResult,
    BufferAttributeResult,
)

from evalnode.attribute_source import AttributeSource, MappingAttributeSource

from evalnode.data_item import DataItem, ElementDataItem

from evalnode.config import (
    EvaluationSettings,
    get_evaluation_settings,
    set_evaluation_settings,
    reset_evaluation_settings,
    settings_context,
)

from evalnode.errors import (
    EvaluationError,
    NodeValidationError,
    AttributeTypeError,
    MissingBehaviourError,
    DefaultActionConflictError,
)

from evalnode.memo import MemoCell

from evalnode.evaluation_pass import EvaluationPass, FieldSet, FieldMgr

from evalnode.evaluation_context import NodeEvaluationContext

from evalnode.widget_type import WidgetBuilderType, WidgetType

from evalnode.options import (
    NodeVisibility,
    HelpDisplayOption,
    LayoutDirection,
    MandatoryDisplayOption,
    DisplayMode,
)

from evalnode.outputs import OutputHint, OutputDescription, OutputError, OutputHistory

from evalnode.behaviour import (
    PresentationBehaviour,
    ClientVisibilityBehaviour,
    CellAttributesBehaviour,
    register_behaviour_adapter,
    unregister_behaviour_adapter,
    resolve_behaviour,
)

from evalnode.node_info import NodeInfo, UNBOUNDED

from evalnode.evaluated_node import EvaluatedNode

from evalnode.node_variants import (
    NodeKind,
    EvaluatedNodeInfo,
    EvaluatedNodeAction,
    EvaluatedNodeContainer,
)

__all__ = [
    # Attributes
    'NodeAttribute',
    'NamespaceListType',
    'AttributeResult',
    'StringAttributeResult',
    'FixedStringAttributeResult',
    'ComputedStringAttributeResult',
    'BooleanAttributeResult',
    'DataItemAttributeResult',
    'DataItemListAttributeResult',
    'BufferAttributeResult',
    'AttributeSource',
    'MappingAttributeSource',
    # Data
    'DataItem',
    'ElementDataItem',
    # Configuration
    'EvaluationSettings',
    'get_evaluation_settings',
    'set_evaluation_settings',
    'reset_evaluation_settings',
    'settings_context',
    # Errors
    'EvaluationError',
    'NodeValidationError',
    'AttributeTypeError',
    'MissingBehaviourError',
    'DefaultActionConflictError',
    # Evaluation state
    'MemoCell',
    'EvaluationPass',
    'FieldSet',
    'FieldMgr',
    'NodeEvaluationContext',
    # Widgets and options
    'WidgetBuilderType',
    'WidgetType',
    'NodeVisibility',
    'HelpDisplayOption',
    'LayoutDirection',
    'MandatoryDisplayOption',
    'DisplayMode',
    # Outputs
    'OutputHint',
    'OutputDescription',
    'OutputError',
    'OutputHistory',
    # Behaviours
    'PresentationBehaviour',
    'ClientVisibilityBehaviour',
    'CellAttributesBehaviour',
    'register_behaviour_adapter',
    'unregister_behaviour_adapter',
    'resolve_behaviour',
    # Nodes
    'NodeInfo',
    'UNBOUNDED',
    'EvaluatedNode',
    'NodeKind',
    'EvaluatedNodeInfo',
    'EvaluatedNodeAction',
    'EvaluatedNodeContainer',
]

__version__ = '1.0.0'
__description__ = 'Lazy, memoized evaluation of presentation tree nodes'
