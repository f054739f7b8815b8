"""Small closed option sets used by evaluated nodes."""

import re
from enum import Enum, IntEnum
from typing import Optional, TYPE_CHECKING

from evalnode.attributes import NodeAttribute
from evalnode.errors import NodeValidationError

if TYPE_CHECKING:
    from evalnode.evaluated_node import EvaluatedNode


class NodeVisibility(IntEnum):
    """How much of a node the user may see, ordered least to most."""
    DENIED = 0
    VIEW = 1
    EDIT = 2


class HelpDisplayOption(Enum):
    """Where hints/descriptions are shown."""
    INLINE = "inline"
    ICON = "icon"
    NONE = "none"

    @classmethod
    def from_external_string(cls, value: Optional[str]) -> Optional['HelpDisplayOption']:
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise NodeValidationError(f"Unknown help display option '{value}'") from None


class LayoutDirection(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def from_external_string(cls, value: str) -> 'LayoutDirection':
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise NodeValidationError(f"Unknown layout direction '{value}'") from None


class MandatoryDisplayOption(Enum):
    """What to show next to a field to indicate mandatoryness."""
    MANDATORY = "mandatory"
    OPTIONAL = "optional"
    BOTH = "both"
    NONE = "none"

    @classmethod
    def from_string(cls, value: str) -> 'MandatoryDisplayOption':
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise NodeValidationError(f"Unknown mandatory display option '{value}'") from None


class DisplayMode(Enum):
    """
    Tokens of the *-display-mode attributes.

    An attribute value is a list of tokens separated by spaces or commas,
    e.g. "edit" or "edit, ro".
    """
    ALWAYS = "always"
    NEVER = "never"
    EDIT = "edit"
    RO = "ro"

    @classmethod
    def parse(cls, value: str) -> frozenset:
        tokens = [t for t in re.split(r"[\s,]+", value.strip().lower()) if t]
        modes = set()
        for token in tokens:
            try:
                modes.add(cls(token))
            except ValueError:
                raise NodeValidationError(f"Unknown display mode '{token}' in '{value}'") from None
        return frozenset(modes)

    @staticmethod
    def is_display_allowed(node: 'EvaluatedNode', attribute: NodeAttribute,
                           default: 'DisplayMode' = None) -> bool:
        """
        Check whether node's display-mode attribute allows display.

        Args:
            node: Node to check, its editability decides EDIT/RO
            attribute: The *-display-mode attribute to read
            default: Mode used when the attribute is not defined (ALWAYS if omitted)
        """
        value = node.get_string_attribute(attribute)
        if value is None:
            modes = frozenset({default or DisplayMode.ALWAYS})
        else:
            modes = DisplayMode.parse(value)

        if DisplayMode.NEVER in modes:
            return False
        if DisplayMode.ALWAYS in modes:
            return True
        editable = node.is_editable()
        return (DisplayMode.EDIT in modes and editable) or (DisplayMode.RO in modes and not editable)
