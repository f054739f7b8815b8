"""
Immutable wrappers handed to the serialisation layer.

Serialisers read these; nothing here triggers further evaluation.
"""

from dataclasses import dataclass
from typing import Any, Optional

from evalnode.attribute_result import StringAttributeResult


@dataclass(frozen=True)
class OutputDescription:
    """Description text and/or buffer for a node."""
    content: Optional[StringAttributeResult]
    buffer: Any = None  # Evaluated presentation sub-tree

    def get_description_content(self) -> Optional[str]:
        return self.content.get_string() if self.content is not None else None


@dataclass(frozen=True)
class OutputHint:
    """Hint for a node, identified by a per-pass unique hint_id."""
    hint_id: str
    title: Optional[StringAttributeResult]
    content: Optional[StringAttributeResult]
    buffer: Any = None
    description: Optional[OutputDescription] = None  # prepended when description-display is icon
    url: Optional[str] = None

    def get_title(self) -> Optional[str]:
        return self.title.get_string() if self.title is not None else None

    def get_hint_content(self) -> Optional[str]:
        return self.content.get_string() if self.content is not None else None


@dataclass(frozen=True)
class OutputError:
    """Error message(s) attached to the bound data item."""
    content: str
    url: Optional[str] = None
    url_prompt: Optional[str] = None


@dataclass(frozen=True)
class OutputHistory:
    """Edit history recorded against the bound data item."""
    label: str
    operation: str
    value: str
