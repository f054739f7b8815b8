"""Schema element descriptions, as produced by the module compiler."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

UNBOUNDED = -1

PHANTOM_SCHEMA_TYPE = "phantom"


@dataclass(frozen=True)
class NodeInfo:
    """
    Static description of one schema element.

    Args:
        name: Element name
        data_type: Schema data type, e.g. "xs:string", "xs:date"
        schema_type: Markup type of the element, "phantom" for data-less elements
        max_length: Maximum data length in characters, if restricted
        min_occurs: Minimum occurrences within the parent
        max_occurs: Maximum occurrences within the parent, UNBOUNDED for no limit
        enumeration: Allowed values, if the type is an enumeration
        children: Child element descriptions
    """
    name: str
    data_type: str = "xs:string"
    schema_type: Optional[str] = None
    max_length: Optional[int] = None
    min_occurs: int = 1
    max_occurs: int = 1
    enumeration: Tuple[str, ...] = ()
    children: Tuple['NodeInfo', ...] = field(default_factory=tuple)

    @property
    def is_phantom(self) -> bool:
        return self.schema_type == PHANTOM_SCHEMA_TYPE

    @property
    def is_date(self) -> bool:
        return self.data_type in ("xs:date", "xs:dateTime")

    def get_child(self, name: str) -> Optional['NodeInfo']:
        for child in self.children:
            if child.name == name:
                return child
        return None
