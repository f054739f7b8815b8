"""
Data item contract consumed by the evaluation layer.

The data document itself lives outside this package. Nodes only need a handful
of read-only path queries against their bound item, described by DataItem.
ElementDataItem adapts xml.etree.ElementTree elements to that contract.
"""

import itertools
import weakref
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import List, Optional

_ref_sequence = itertools.count(1)

# Generated refs for elements without a "ref" attribute, one per element
_generated_refs: "weakref.WeakKeyDictionary[ET.Element, str]" = weakref.WeakKeyDictionary()


class DataItem(ABC):
    """Read-only view of one node of the data document."""

    @property
    @abstractmethod
    def ref(self) -> str:
        """Stable reference identifying this item within its document."""

    @abstractmethod
    def select_all(self, path: str) -> List['DataItem']:
        """All items matching a relative path, in document order."""

    @abstractmethod
    def select_one_or_none(self, path: str) -> Optional['DataItem']:
        """First item matching a relative path, or None."""

    @abstractmethod
    def text(self) -> str:
        """Text directly inside this item; text of nested elements is not included."""

    def select_text(self, path: str) -> str:
        """Text of the first item matching path, or "" when nothing matches."""
        item = self.select_one_or_none(path)
        return item.text() if item is not None else ""


class ElementDataItem(DataItem):
    """DataItem over an ElementTree element.

    Args:
        element: Wrapped element
        ref: Explicit reference; defaults to the element's "ref" attribute, or a
             generated one
    """

    def __init__(self, element: ET.Element, ref: Optional[str] = None):
        self._element = element
        self._ref = ref or element.get('ref') or _generated_ref(element)

    @classmethod
    def from_string(cls, xml_text: str) -> 'ElementDataItem':
        return cls(ET.fromstring(xml_text))

    @property
    def element(self) -> ET.Element:
        return self._element

    @property
    def ref(self) -> str:
        return self._ref

    def select_all(self, path: str) -> List['ElementDataItem']:
        return [ElementDataItem(e) for e in self._element.findall(path)]

    def select_one_or_none(self, path: str) -> Optional['ElementDataItem']:
        found = self._element.find(path)
        return ElementDataItem(found) if found is not None else None

    def text(self) -> str:
        return self._element.text or ''

    def __repr__(self) -> str:
        return f"ElementDataItem(<{self._element.tag}>, ref={self._ref!r})"


def _generated_ref(element: ET.Element) -> str:
    """Ref for an element with no "ref" attribute, stable for the element's lifetime."""
    ref = _generated_refs.get(element)
    if ref is None:
        ref = f"ref{next(_ref_sequence)}"
        _generated_refs[element] = ref
    return ref
