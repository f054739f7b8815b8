"""
Evaluated node base class.

An EvaluatedNode is a presentation node bound to runtime data. Every derived
attribute (prompt, hint, description, error, history, widget type, ...) is
computed from the node's attribute source on first access and memoized for
the node's lifetime. Nothing is ever invalidated: a node lives for one render
pass and is discarded after serialisation.

Evaluation is lazy. In particular the "one default action per pass" check runs
when a node's widget type is first resolved, not when the tree is built.
"""

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, List, Optional, Type, TypeVar

from evalnode.attribute_result import (
    BooleanAttributeResult,
    BufferAttributeResult,
    DataItemAttributeResult,
    DataItemListAttributeResult,
    FixedStringAttributeResult,
    StringAttributeResult,
)
from evalnode.attributes import NamespaceListType, NodeAttribute
from evalnode.behaviour import CellAttributesBehaviour, ClientVisibilityBehaviour, resolve_behaviour
from evalnode.data_item import DataItem
from evalnode.errors import MissingBehaviourError, NodeValidationError
from evalnode.evaluation_context import NodeEvaluationContext
from evalnode.evaluation_pass import EvaluationPass, FieldMgr
from evalnode.memo import MemoCell
from evalnode.options import (
    DisplayMode,
    HelpDisplayOption,
    LayoutDirection,
    MandatoryDisplayOption,
    NodeVisibility,
)
from evalnode.outputs import OutputDescription, OutputError, OutputHint, OutputHistory
from evalnode.widget_type import WidgetBuilderType, WidgetType

logger = logging.getLogger(__name__)

B = TypeVar('B')

AUTO_SIZE = "auto"


class EvaluatedNode(ABC):
    """
    Abstract evaluated node.

    Subclasses supply the variant-specific hooks: name, action name, phantom
    status, default prompts, default widget type, field manager binding and
    selector cardinality.

    Args:
        parent: Parent evaluated node, None for the root. Held weakly; the tree
                builder owns the tree.
        presentation_node: Evaluated presentation node this node renders
        context: Evaluation context (namespaces, attribute source, data item, pass)
        visibility: Initial visibility
    """

    kind = None  # NodeKind, set by each variant

    def __init__(
        self,
        parent: Optional['EvaluatedNode'],
        presentation_node: Any,
        context: NodeEvaluationContext,
        visibility: NodeVisibility = NodeVisibility.VIEW,
    ):
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._presentation_node = presentation_node
        self._context = context
        self._visibility = visibility

        self._hint: MemoCell[Optional[OutputHint]] = MemoCell('hint')
        self._error: MemoCell[Optional[OutputError]] = MemoCell('error')
        self._description: MemoCell[Optional[OutputDescription]] = MemoCell('description')
        self._history: MemoCell[Optional[OutputHistory]] = MemoCell('history')
        self._widget_type: MemoCell[WidgetType] = MemoCell('widget_type')
        self._prompt: MemoCell[StringAttributeResult] = MemoCell('prompt')
        self._summary_prompt: MemoCell[StringAttributeResult] = MemoCell('summary_prompt')
        self._is_runnable: MemoCell[bool] = MemoCell('is_runnable')

    # ------------------------------------------------------------------
    # Tree and context
    # ------------------------------------------------------------------

    def get_parent(self) -> Optional['EvaluatedNode']:
        return self._parent_ref() if self._parent_ref is not None else None

    def get_node_evaluation_context(self) -> NodeEvaluationContext:
        return self._context

    def get_evaluated_presentation_node(self) -> Any:
        return self._presentation_node

    def _get_evaluation_pass(self) -> EvaluationPass:
        # Not for serialisers: the pass holds mutable tree-wide state
        return self._context.evaluation_pass

    def get_data_item(self) -> Optional[DataItem]:
        return self._context.data_item

    def get_namespace_precedence_list(self) -> List[str]:
        """Namespaces that are "on" for this node, most important first."""
        return self._context.get_namespace_precedence_list()

    def get_visibility(self) -> NodeVisibility:
        return self._visibility

    def _set_visibility(self, visibility: NodeVisibility) -> None:
        self._visibility = visibility

    def is_editable(self) -> bool:
        return self._visibility == NodeVisibility.EDIT

    # ------------------------------------------------------------------
    # Attribute access
    # ------------------------------------------------------------------

    def is_attribute_defined(self, attribute: NodeAttribute) -> bool:
        """True if at least one active namespace defines attribute."""
        return self._context.is_attribute_defined(attribute)

    def get_string_attribute_result_or_none(self, attribute: NodeAttribute) -> Optional[StringAttributeResult]:
        """Typed result for attribute, or None if no active namespace defines it.

        Use this (and escape) when embedding the value in output.
        """
        return self._context.get_string_attribute_or_none(attribute)

    def get_string_attribute(self, attribute: NodeAttribute, default: Optional[str] = None) -> Optional[str]:
        """
        Raw, unescaped string value of attribute.

        Do not embed the returned value directly in output; use
        get_string_attribute_result_or_none() and escape where necessary.

        Args:
            attribute: Attribute to resolve
            default: Returned when the attribute is not defined. An attribute
                     defined as "" returns "", not the default.
        """
        result = self._context.get_string_attribute_or_none(attribute)
        value = result.get_string() if result is not None else None
        return value if value is not None else default

    def get_string_attributes(self, *attributes: NodeAttribute) -> List[Optional[str]]:
        """Unescaped values of several attributes, None for undefined ones."""
        return self._context.get_string_attributes(*attributes)

    def get_boolean_attribute_or_none(self, attribute: NodeAttribute) -> Optional[BooleanAttributeResult]:
        return self._context.get_boolean_attribute_or_none(attribute)

    def get_boolean_attribute(self, attribute: NodeAttribute, default: bool) -> bool:
        result = self._context.get_boolean_attribute_or_none(attribute)
        return result.get_boolean() if result is not None else default

    def get_data_item_attribute_or_none(self, attribute: NodeAttribute) -> Optional[DataItemAttributeResult]:
        return self._context.get_data_item_attribute_or_none(attribute)

    def get_data_item_list_attribute_or_none(self, attribute: NodeAttribute) -> Optional[DataItemListAttributeResult]:
        return self._context.get_data_item_list_attribute_or_none(attribute)

    def get_buffer_attribute_or_none(self, attribute: NodeAttribute) -> Optional[BufferAttributeResult]:
        return self._context.get_buffer_attribute_or_none(attribute)

    def _get_buffer(self, *attributes: NodeAttribute) -> Any:
        """Evaluated buffer of the first defined attribute, or None."""
        for attribute in attributes:
            result = self.get_buffer_attribute_or_none(attribute)
            if result is not None:
                return result.get_evaluated_buffer()
        return None

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def _resolve_two_tier(self, primary: NodeAttribute, secondary: NodeAttribute) -> Optional[StringAttributeResult]:
        """
        Resolve a value defined by a pair of related attributes.

        A defined primary wins over the secondary. A winner that resolves to
        an empty string suppresses the value: the explicit-empty marker is
        returned instead of falling through.

        Returns:
            The winning result, the explicit-empty marker, or None if neither
            attribute is defined
        """
        winner = self.get_string_attribute_result_or_none(primary)
        if winner is None:
            winner = self.get_string_attribute_result_or_none(secondary)
            if winner is None:
                return None
        if winner.get_string():
            return winner
        return FixedStringAttributeResult.empty()

    def get_summary_prompt(self) -> StringAttributeResult:
        """
        Prompt for list column headings: prompt-short, falling back to prompt,
        then to the variant default. Always returns a result object, though its
        string may be None.
        """
        def compute():
            result = self._resolve_two_tier(NodeAttribute.PROMPT_SHORT, NodeAttribute.PROMPT)
            return result if result is not None else self._get_default_summary_prompt()
        return self._summary_prompt.get_or_compute(compute)

    def get_prompt(self) -> StringAttributeResult:
        """Prompt: prompt, falling back to prompt-short, then to get_prompt_internal()."""
        def compute():
            result = self._resolve_two_tier(NodeAttribute.PROMPT, NodeAttribute.PROMPT_SHORT)
            return result if result is not None else FixedStringAttributeResult(self.get_prompt_internal())
        return self._prompt.get_or_compute(compute)

    def has_prompt(self) -> bool:
        """True if the prompt resolves to a non-empty string."""
        return bool(self.get_prompt().get_string())

    def get_prompt_buffer(self) -> Any:
        """prompt-buffer, falling back to prompt-short-buffer (same direction as get_prompt)."""
        return self._get_buffer(NodeAttribute.PROMPT_BUFFER, NodeAttribute.PROMPT_SHORT_BUFFER)

    def get_prompt_summary_buffer(self) -> Any:
        """prompt-short-buffer, falling back to prompt-buffer (same direction as get_summary_prompt)."""
        return self._get_buffer(NodeAttribute.PROMPT_SHORT_BUFFER, NodeAttribute.PROMPT_BUFFER)

    @abstractmethod
    def get_prompt_internal(self) -> Optional[str]:
        """Variant default prompt when neither prompt nor prompt-short is defined."""

    @abstractmethod
    def _get_default_summary_prompt(self) -> StringAttributeResult:
        """Variant default summary prompt when neither prompt-short nor prompt is defined."""

    # ------------------------------------------------------------------
    # Names and actions
    # ------------------------------------------------------------------

    @abstractmethod
    def get_name(self) -> str:
        """Name of the underlying element or action."""

    @abstractmethod
    def get_action_name(self) -> Optional[str]:
        """Name of the action this node runs, if any."""

    def get_action_context_ref(self) -> Optional[str]:
        """Reference of the data item the action runs against."""
        result = self.get_data_item_attribute_or_none(NodeAttribute.ACTION_CONTEXT_DOM)
        if result is not None and result.get_data_item() is not None:
            return result.get_data_item().ref
        action_context_item = self._context.action_context_item
        return action_context_item.ref if action_context_item is not None else None

    def get_change_action_name(self) -> Optional[str]:
        return self.get_string_attribute(NodeAttribute.CHANGE_ACTION)

    def get_confirm_message(self) -> Optional[str]:
        return self.get_string_attribute(NodeAttribute.CONFIRM)

    def is_runnable(self) -> bool:
        """
        True if the run attribute is set in a namespace the node is in mode for
        (e.g. edit:run="true" with edit in the mode list).
        """
        return self._is_runnable.get_or_compute(self._resolve_is_runnable)

    def _resolve_is_runnable(self) -> bool:
        default_namespace = self._context.settings.default_namespace
        if (self._context.has_node_attribute(default_namespace, NodeAttribute.RUN)
                and default_namespace not in self._context.get_mode_list()):
            logger.warning(
                f"RunWithoutMode: {default_namespace}:run found on element ({self.get_identity_information()}), "
                f"this should probably be under a specific namespace, it won't have any effect "
                f"without a {default_namespace} mode"
            )

        runnable = self._context.check_namespace_function(NamespaceListType.MODE, NodeAttribute.RUN)

        if runnable and not self.get_action_name():
            logger.warning(
                f"RunnableWithoutAction: Runnable element ({self.get_identity_information()}) "
                f"does not have any action defined"
            )
        return runnable

    # ------------------------------------------------------------------
    # Widget type
    # ------------------------------------------------------------------

    @abstractmethod
    def _get_widget_type(self) -> Optional[WidgetType]:
        """Variant widget type, None if the declared widget is not valid for the variant."""

    def get_widget_type(self) -> WidgetType:
        """
        Resolved widget type.

        The first call validates the variant's widget and, if the node is marked
        default-action, claims the pass's default action slot and forces the
        type to SUBMIT.

        Raises:
            NodeValidationError: The declared widget is invalid for this node
            DefaultActionConflictError: Another node already claimed default action
        """
        return self._widget_type.get_or_compute(self._resolve_widget_type)

    def _resolve_widget_type(self) -> WidgetType:
        widget_type = self._get_widget_type()
        if widget_type is None:
            identity = self.get_identity_information()
            raise NodeValidationError(
                f"Invalid widget ({self.get_string_attribute(NodeAttribute.WIDGET)}) defined on node {identity}",
                identity,
            )

        if self.get_boolean_attribute(NodeAttribute.DEFAULT_ACTION, False):
            self._get_evaluation_pass().claim_default_action(self)
            widget_type = WidgetType.from_builder_type(WidgetBuilderType.SUBMIT)

        return widget_type

    def get_widget_builder_type(self) -> WidgetBuilderType:
        return self.get_widget_type().builder_type

    def is_plus_widget(self) -> bool:
        return self.get_widget_type().is_plus_widget

    def is_widget_auto_resize(self) -> bool:
        return (self.get_boolean_attribute(NodeAttribute.AUTO_RESIZE, False)
                or self.get_string_attribute(NodeAttribute.WIDGET) == "input-resizable")

    def is_in_radio_group(self) -> bool:
        return self.get_string_attribute(NodeAttribute.RADIO_GROUP) is not None

    def is_multi_select(self) -> bool:
        return self.get_string_attribute(NodeAttribute.SELECTOR, ".") != "."

    @abstractmethod
    def is_phantom(self) -> bool:
        """True if the element is marked up as a phantom (has no data of its own)."""

    # ------------------------------------------------------------------
    # Hints and descriptions
    # ------------------------------------------------------------------

    def _get_default_hint(self) -> Optional[StringAttributeResult]:
        """Hint text, from the hint attribute. Variants may supply another default."""
        return self.get_string_attribute_result_or_none(NodeAttribute.HINT)

    def get_hint(self) -> Optional[OutputHint]:
        """Hint for this node, or None if it has neither hint text nor a hint buffer."""
        return self._hint.get_or_compute(self._build_hint)

    def _build_hint(self) -> Optional[OutputHint]:
        hint_text = self._get_default_hint()
        hint_buffer = self._get_buffer(NodeAttribute.HINT_BUFFER)

        if not ((hint_text is not None and hint_text.get_string()) or hint_buffer is not None):
            return None

        # A description displayed as an icon is shown in front of the hint
        description = None
        description_display = self.get_string_attribute(NodeAttribute.DESCRIPTION_DISPLAY)
        if HelpDisplayOption.from_external_string(description_display) == HelpDisplayOption.ICON:
            description = self.get_description()

        hint_title = self.get_string_attribute_result_or_none(NodeAttribute.HINT_TITLE)
        if hint_title is None and self.get_widget_builder_type().is_action and self.has_prompt():
            hint_title = self.get_prompt()

        evaluation_pass = self._get_evaluation_pass()
        hint_id = f"{evaluation_pass.settings.hint_id_prefix}{evaluation_pass.field_set.get_next_field_sequence()}"

        return OutputHint(
            hint_id=hint_id,
            title=hint_title,
            content=hint_text,
            buffer=hint_buffer,
            description=description,
            url=self.get_string_attribute(NodeAttribute.HINT_URL),
        )

    def has_hint(self) -> bool:
        return self.get_hint() is not None and DisplayMode.is_display_allowed(self, NodeAttribute.HINT_DISPLAY_MODE)

    def is_enable_focus_hint_display(self) -> bool:
        return self.get_boolean_attribute(NodeAttribute.ENABLE_FOCUS_HINT_DISPLAY, False)

    def _get_default_description(self) -> Optional[StringAttributeResult]:
        return self.get_string_attribute_result_or_none(NodeAttribute.DESCRIPTION)

    def get_description(self) -> Optional[OutputDescription]:
        return self._description.get_or_compute(self._build_description)

    def _build_description(self) -> Optional[OutputDescription]:
        content = self._get_default_description()
        buffer = self._get_buffer(NodeAttribute.DESCRIPTION_BUFFER)
        if (content is not None and content.get_string()) or buffer is not None:
            return OutputDescription(content, buffer)
        return None

    def has_description(self) -> bool:
        """True if there is a description to show inline (the default description-display)."""
        display = HelpDisplayOption.from_external_string(
            self.get_string_attribute(NodeAttribute.DESCRIPTION_DISPLAY, HelpDisplayOption.INLINE.value)
        )
        return (self.get_description() is not None
                and display == HelpDisplayOption.INLINE
                and DisplayMode.is_display_allowed(self, NodeAttribute.DESCRIPTION_DISPLAY_MODE))

    def get_description_layout(self) -> LayoutDirection:
        """Position of the description relative to the field, SOUTH by default."""
        return LayoutDirection.from_external_string(
            self.get_string_attribute(NodeAttribute.DESCRIPTION_LAYOUT, LayoutDirection.SOUTH.value)
        )

    # ------------------------------------------------------------------
    # Errors and history
    # ------------------------------------------------------------------

    def get_error(self) -> Optional[OutputError]:
        """Error message(s) recorded on the bound data item, or None."""
        return self._error.get_or_compute(self._build_error)

    def _build_error(self) -> Optional[OutputError]:
        data_item = self.get_data_item()
        if data_item is None:
            return None

        messages = [msg.text() for msg in data_item.select_all(self._context.settings.error_message_path)]
        if not messages:
            return None

        if len(messages) == 1:
            content = messages[0]
        else:
            numbered = " ".join(f"({i}) {message}" for i, message in enumerate(messages, start=1))
            content = f"{len(messages)} Errors: {numbered}"

        return OutputError(
            content,
            url=self.get_string_attribute(NodeAttribute.ERROR_URL),
            url_prompt=self.get_string_attribute(NodeAttribute.ERROR_URL_PROMPT),
        )

    def has_error(self) -> bool:
        return self.get_error() is not None

    def get_history(self) -> Optional[OutputHistory]:
        """
        Edit history recorded on the bound data item.

        Internal-only widgets (forms, lists, cellmates...) never report history.
        """
        return self._history.get_or_compute(self._build_history)

    def _build_history(self) -> Optional[OutputHistory]:
        data_item = self.get_data_item()
        settings = self._context.settings
        if data_item is None or data_item.select_one_or_none(settings.history_path) is None:
            return None
        if self.get_widget_builder_type().is_internal_only:
            return None
        return OutputHistory(
            label=data_item.select_text(settings.history_label_path),
            operation=data_item.select_text(settings.history_operation_path),
            value=data_item.select_text(settings.history_value_path),
        )

    def has_history(self) -> bool:
        return self.get_history() is not None

    # ------------------------------------------------------------------
    # Field layout
    # ------------------------------------------------------------------

    def get_field_width(self) -> str:
        settings = self._context.settings
        return self._get_field_size(
            NodeAttribute.FIELD_WIDTH, NodeAttribute.FIELD_MIN_WIDTH, NodeAttribute.FIELD_MAX_WIDTH,
            self._get_auto_field_width, settings.min_field_width, settings.max_field_width,
        )

    def get_field_height(self) -> str:
        settings = self._context.settings
        return self._get_field_size(
            NodeAttribute.FIELD_HEIGHT, NodeAttribute.FIELD_MIN_HEIGHT, NodeAttribute.FIELD_MAX_HEIGHT,
            self._get_auto_field_height, settings.min_field_height, settings.max_field_height,
        )

    def _get_field_size(self, size_attr, min_attr, max_attr, auto_fn, default_min: int, default_max: int) -> str:
        size = self.get_string_attribute(size_attr, AUTO_SIZE)
        if size != AUTO_SIZE:
            return size

        # Automatic size, kept within the min/max boundaries
        auto_size = self._parse_size(auto_fn(), size_attr)
        minimum = self._parse_size(self.get_string_attribute(min_attr, str(default_min)), min_attr)
        maximum = self._parse_size(self.get_string_attribute(max_attr, str(default_max)), max_attr)
        return str(min(max(auto_size, minimum), maximum))

    def _parse_size(self, value: str, attribute: NodeAttribute) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            identity = self.get_identity_information()
            raise NodeValidationError(
                f"Invalid {attribute.external_name} '{value}' on node {identity}", identity
            ) from None

    def _get_auto_field_width(self) -> str:
        return str(self._context.settings.auto_field_width)

    def _get_auto_field_height(self) -> str:
        return str(self._context.settings.auto_field_height)

    def get_max_data_length(self) -> int:
        """Maximum data length in characters. Only field nodes have one."""
        identity = self.get_identity_information()
        raise NodeValidationError(f"Only field nodes can have a maximum length: {identity}", identity)

    def get_prefix(self) -> Optional[StringAttributeResult]:
        """Read-only text displayed before an input."""
        return self.get_string_attribute_result_or_none(NodeAttribute.FIELD_PREFIX)

    def get_suffix(self) -> Optional[StringAttributeResult]:
        """Read-only text displayed after an input."""
        return self.get_string_attribute_result_or_none(NodeAttribute.FIELD_SUFFIX)

    # ------------------------------------------------------------------
    # Mandatoryness
    # ------------------------------------------------------------------

    def is_mandatory(self) -> bool:
        return False

    def get_mandatory_display(self) -> MandatoryDisplayOption:
        """
        What to show for mandatoryness. NONE when mandatory-display-mode (EDIT by
        default) does not allow display.
        """
        if not DisplayMode.is_display_allowed(self, NodeAttribute.MANDATORY_DISPLAY_MODE, DisplayMode.EDIT):
            return MandatoryDisplayOption.NONE
        return MandatoryDisplayOption.from_string(
            self.get_string_attribute(NodeAttribute.MANDATORY_DISPLAY, MandatoryDisplayOption.MANDATORY.value)
        )

    # ------------------------------------------------------------------
    # Ancestry
    # ------------------------------------------------------------------

    def check_ancestry(self, *builder_types: WidgetBuilderType) -> bool:
        """
        Check whether any ancestor resolves to one of the given widget builder types.

        Raises:
            NodeValidationError: No builder types given
        """
        if not builder_types:
            raise NodeValidationError("You need to pass at least one widget builder type to check ancestry")

        ancestor = self.get_parent()
        while ancestor is not None:
            if ancestor.get_widget_builder_type() in builder_types:
                return True
            ancestor = ancestor.get_parent()
        return False

    def is_nested(self) -> bool:
        """True if the node has a form or list ancestor."""
        return self.check_ancestry(WidgetBuilderType.FORM, WidgetBuilderType.LIST)

    # ------------------------------------------------------------------
    # Presentation behaviours
    # ------------------------------------------------------------------

    def get_behaviour_or_none(self, behaviour_type: Type[B]) -> Optional[B]:
        """The presentation node's behaviour_type implementation, or None."""
        return resolve_behaviour(self._presentation_node, behaviour_type)

    def get_behaviour(self, behaviour_type: Type[B]) -> B:
        """
        Like get_behaviour_or_none(), but the behaviour is required.

        Raises:
            MissingBehaviourError: The presentation node does not provide behaviour_type
        """
        behaviour = self.get_behaviour_or_none(behaviour_type)
        if behaviour is None:
            raise MissingBehaviourError(behaviour_type, self.get_identity_information())
        return behaviour

    def is_initially_displayed(self) -> bool:
        """
        Whether the node starts displayed in the output.

        Unlike visibility, which decides whether the node is output at all, this
        can be toggled client side after serialisation.
        """
        behaviour = self.get_behaviour_or_none(ClientVisibilityBehaviour)
        return behaviour.is_initially_displayed() if behaviour is not None else True

    def get_cell_internal_classes(self) -> FrozenSet[str]:
        """Classes to add to the cell containing this node."""
        behaviour = self.get_behaviour_or_none(CellAttributesBehaviour)
        return frozenset(behaviour.get_cell_classes()) if behaviour is not None else frozenset()

    def get_cell_internal_attributes(self) -> Dict[str, str]:
        """Data attributes to add to the cell containing this node."""
        behaviour = self.get_behaviour_or_none(CellAttributesBehaviour)
        return dict(behaviour.get_cell_attributes()) if behaviour is not None else {}

    # ------------------------------------------------------------------
    # Display ordering
    # ------------------------------------------------------------------

    def get_display_before(self) -> Optional[str]:
        return self.get_string_attribute(NodeAttribute.DISPLAY_BEFORE)

    def get_display_after(self) -> Optional[str]:
        return self.get_string_attribute(NodeAttribute.DISPLAY_AFTER)

    def get_display_order(self) -> str:
        return self.get_string_attribute(NodeAttribute.DISPLAY_ORDER, AUTO_SIZE)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @abstractmethod
    def get_field_mgr(self) -> FieldMgr:
        """Field manager binding this node to a submitted field."""

    @abstractmethod
    def get_external_field_name(self) -> str:
        """Name the node's field is submitted as."""

    @abstractmethod
    def get_selector_max_cardinality(self) -> int:
        """Maximum number of values a selector on this node may submit."""

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def get_identity_information(self) -> str:
        """
        Developer-facing identity string combining kind, prompt, action name and
        presentation node, e.g. "EvaluatedNodeAction[Prompt: 'Save', Action: 'save']".
        """
        parts = []
        prompt = self.get_prompt().get_string()
        if prompt is not None:
            parts.append(f"Prompt: '{prompt}'")
        action_name = self.get_action_name()
        if action_name is not None:
            parts.append(f"Action: '{action_name}'")
        if self._presentation_node is not None:
            parts.append(f"PresentationNode: '{self._presentation_node}'")
        return f"{type(self).__name__}[{', '.join(parts)}]"

    def __str__(self) -> str:
        return self.get_identity_information()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.get_name()!r} kind={self.kind}>"
