"""
Optional presentation behaviours.

Some presentation nodes support behaviours outside the core evaluated-node
contract. A behaviour is found either because the presentation node is itself
an instance of the behaviour type, or through an adapter registered for the
presentation node's type (or any of its bases).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

B = TypeVar('B', bound='PresentationBehaviour')

# (presentation type, behaviour type) -> adapter(presentation_node) -> behaviour
_behaviour_adapter_registry: Dict[Tuple[type, type], Callable[[Any], Any]] = {}


class PresentationBehaviour(ABC):
    """Base class for all optional presentation behaviours."""


class ClientVisibilityBehaviour(PresentationBehaviour):
    """Presentation nodes whose output may start hidden and be toggled client side."""

    @abstractmethod
    def is_initially_displayed(self) -> bool:
        """False if the node should be serialised hidden."""


class CellAttributesBehaviour(PresentationBehaviour):
    """Presentation nodes contributing classes/attributes to their containing cell."""

    @abstractmethod
    def get_cell_classes(self) -> frozenset:
        """CSS classes for the containing cell."""

    @abstractmethod
    def get_cell_attributes(self) -> Mapping[str, str]:
        """Data attributes for the containing cell."""


def register_behaviour_adapter(presentation_type: type, behaviour_type: Type[B],
                               adapter: Callable[[Any], B]) -> None:
    """
    Register an adapter giving presentation_type instances behaviour_type.

    Args:
        presentation_type: Presentation node class (subclasses match too)
        behaviour_type: Behaviour the adapter provides
        adapter: Called with the presentation node, returns the behaviour
    """
    _behaviour_adapter_registry[(presentation_type, behaviour_type)] = adapter
    logger.debug(f"Registered {behaviour_type.__name__} adapter for {presentation_type.__name__}")


def unregister_behaviour_adapter(presentation_type: type, behaviour_type: type) -> None:
    _behaviour_adapter_registry.pop((presentation_type, behaviour_type), None)


def resolve_behaviour(presentation_node: Any, behaviour_type: Type[B]) -> Optional[B]:
    """
    Get behaviour_type for a presentation node.

    Returns:
        The presentation node itself if it implements the behaviour, the result
        of the most specific registered adapter, or None
    """
    if presentation_node is None:
        return None
    if isinstance(presentation_node, behaviour_type):
        return presentation_node
    for mro_class in type(presentation_node).__mro__:
        adapter = _behaviour_adapter_registry.get((mro_class, behaviour_type))
        if adapter is not None:
            return adapter(presentation_node)
    return None
