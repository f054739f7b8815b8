"""
Closed enumeration of the attribute identifiers a node can be queried for.

Each member's value is the external (markup) attribute name, looked up in every
active namespace of the node, e.g. ``fox:prompt`` or ``edit:prompt``.
"""

from enum import Enum


class NodeAttribute(Enum):
    """Attribute identifiers understood by the evaluation layer."""

    # Prompts
    PROMPT = "prompt"
    PROMPT_SHORT = "prompt-short"
    PROMPT_BUFFER = "prompt-buffer"
    PROMPT_SHORT_BUFFER = "prompt-short-buffer"

    # Hints
    HINT = "hint"
    HINT_BUFFER = "hint-buffer"
    HINT_TITLE = "hint-title"
    HINT_URL = "hint-url"
    HINT_DISPLAY_MODE = "hint-display-mode"
    ENABLE_FOCUS_HINT_DISPLAY = "focus-hint"

    # Descriptions
    DESCRIPTION = "description"
    DESCRIPTION_BUFFER = "description-buffer"
    DESCRIPTION_DISPLAY = "description-display"
    DESCRIPTION_DISPLAY_MODE = "description-display-mode"
    DESCRIPTION_LAYOUT = "description-layout"

    # Errors
    ERROR_URL = "error-url"
    ERROR_URL_PROMPT = "error-url-prompt"

    # Widgets and actions
    WIDGET = "widget"
    DEFAULT_ACTION = "default-action"
    AUTO_RESIZE = "auto-resize"
    RADIO_GROUP = "radio-group"
    SELECTOR = "selector"
    RUN = "run"
    EDIT = "edit"
    ACTION = "action"
    ACTION_CONTEXT_DOM = "action-context"
    CHANGE_ACTION = "change-action"
    CONFIRM = "confirm"
    PHANTOM_BUFFER = "phantom-buffer"

    # Field layout
    FIELD_WIDTH = "field-width"
    FIELD_MIN_WIDTH = "field-min-width"
    FIELD_MAX_WIDTH = "field-max-width"
    FIELD_HEIGHT = "field-height"
    FIELD_MIN_HEIGHT = "field-min-height"
    FIELD_MAX_HEIGHT = "field-max-height"
    FIELD_PREFIX = "prefix"
    FIELD_SUFFIX = "suffix"
    MAX_DATA_LENGTH = "maxlength"

    # Mandatoryness
    MANDATORY = "mand"
    MANDATORY_DISPLAY = "mandatory-display"
    MANDATORY_DISPLAY_MODE = "mandatory-display-mode"

    # Display ordering
    DISPLAY_BEFORE = "displayBefore"
    DISPLAY_AFTER = "displayAfter"
    DISPLAY_ORDER = "displayOrder"

    @property
    def external_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class NamespaceListType(Enum):
    """Which of a node's namespace lists a namespace function is checked against."""
    MODE = "mode"  # namespaces the node is editable in
    VIEW = "view"  # namespaces the node is visible in
