"""
Typed wrappers around resolved attribute values.

Results are immutable. String results expose the raw value through
``get_string()`` and an HTML-safe value through ``get_escaped_string()``;
callers embedding a value in output must use the escaped form.
"""

import html
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


class AttributeResult:
    """Marker base class for every attribute result variant."""


@dataclass(frozen=True)
class StringAttributeResult(AttributeResult):
    """A string attribute value, possibly None when the evaluation yielded nothing."""
    value: Optional[str]

    def get_string(self) -> Optional[str]:
        return self.value

    def get_escaped_string(self) -> Optional[str]:
        if self.value is None:
            return None
        if self.is_escaping_required():
            return html.escape(self.value)
        return self.value

    def is_escaping_required(self) -> bool:
        return True

    @property
    def is_explicit_empty(self) -> bool:
        """True when the attribute resolved to the empty string."""
        return self.value == ""


@dataclass(frozen=True)
class FixedStringAttributeResult(StringAttributeResult):
    """A literal string, either from markup or synthesized by the evaluator."""

    @classmethod
    def empty(cls) -> 'FixedStringAttributeResult':
        """The explicit-empty marker used to suppress a derived value."""
        return cls("")


@dataclass(frozen=True)
class ComputedStringAttributeResult(StringAttributeResult):
    """A string produced by evaluating an expression against the data item.

    Args:
        value: Evaluated string
        escaping_required: False when the expression already produced safe markup
    """
    escaping_required: bool = True

    def is_escaping_required(self) -> bool:
        return self.escaping_required


@dataclass(frozen=True)
class BooleanAttributeResult(AttributeResult):
    value: bool

    def get_boolean(self) -> bool:
        return self.value


@dataclass(frozen=True)
class DataItemAttributeResult(AttributeResult):
    """Reference to a single data item (or None if the expression matched nothing)."""
    data_item: Any

    def get_data_item(self) -> Any:
        return self.data_item


@dataclass(frozen=True)
class DataItemListAttributeResult(AttributeResult):
    data_items: Tuple[Any, ...] = field(default_factory=tuple)

    def get_data_items(self) -> Tuple[Any, ...]:
        return self.data_items


@dataclass(frozen=True)
class BufferAttributeResult(AttributeResult):
    """A nested presentation sub-tree, already evaluated by the tree builder."""
    buffer: Any

    def get_evaluated_buffer(self) -> Any:
        return self.buffer
