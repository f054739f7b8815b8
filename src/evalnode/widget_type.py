"""
Widget classification.

WidgetBuilderType is the closed set of widget kinds a serialiser knows how to
build. WidgetType is what a node's ``widget`` attribute resolves to: a builder
type plus presentation flags carried by the external widget name.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class WidgetBuilderType(Enum):
    """Widget kinds, with their action and internal-only flags."""

    INPUT = ("input", False, False)
    PASSWORD = ("password", False, False)
    DATE = ("date", False, False)
    SELECTOR = ("selector", False, False)
    RADIO = ("radio", False, False)
    TICKBOX = ("tickbox", False, False)
    TEXT = ("text", False, False)
    HTML = ("html", False, False)
    BUTTON = ("button", True, False)
    LINK = ("link", True, False)
    SUBMIT = ("submit", True, False)
    IMAGE = ("image", True, False)
    FORM = ("form", False, True)
    LIST = ("list", False, True)
    CELLMATES = ("cellmates", False, True)
    PHANTOM_BUFFER = ("phantom-buffer", False, True)

    def __init__(self, external_name: str, is_action: bool, is_internal_only: bool):
        self.external_name = external_name
        self.is_action = is_action
        # Structural widgets never shown to end users directly (no history etc.)
        self.is_internal_only = is_internal_only

    @classmethod
    def from_external_name(cls, name: str) -> Optional['WidgetBuilderType']:
        return _BUILDER_TYPES_BY_NAME.get(name)


_BUILDER_TYPES_BY_NAME: Dict[str, WidgetBuilderType] = {bt.external_name: bt for bt in WidgetBuilderType}

# External widget names that are aliases of a builder type
_WIDGET_ALIASES: Dict[str, WidgetBuilderType] = {
    "input-resizable": WidgetBuilderType.INPUT,
    "textarea": WidgetBuilderType.INPUT,
    "static": WidgetBuilderType.TEXT,
    "tickbox-list": WidgetBuilderType.TICKBOX,
}

PLUS_WIDGET_SUFFIX = "+"


@dataclass(frozen=True)
class WidgetType:
    """A resolved widget: builder type plus the external name it was declared with."""
    external_name: str
    builder_type: WidgetBuilderType
    is_plus_widget: bool = False

    @classmethod
    def from_builder_type(cls, builder_type: WidgetBuilderType) -> 'WidgetType':
        return cls(builder_type.external_name, builder_type)

    @classmethod
    def from_string(cls, name: Optional[str]) -> Optional['WidgetType']:
        """
        Resolve an external widget name, e.g. "input", "selector+", "input-resizable".

        Returns:
            WidgetType, or None if the name is not a known widget
        """
        if not name:
            return None
        is_plus = name.endswith(PLUS_WIDGET_SUFFIX)
        base_name = name[:-len(PLUS_WIDGET_SUFFIX)] if is_plus else name
        builder_type = WidgetBuilderType.from_external_name(base_name) or _WIDGET_ALIASES.get(base_name)
        if builder_type is None:
            return None
        return cls(name, builder_type, is_plus)
