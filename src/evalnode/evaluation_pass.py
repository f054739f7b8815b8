"""
Pass-scoped evaluation state.

One EvaluationPass exists per render pass and is handed explicitly to every
NodeEvaluationContext built during that pass. It owns the only state shared
across the tree:

- the default-action slot (at most one node per pass)
- the FieldSet: field sequence counter and field manager allocation

Not thread-safe: a pass and its tree belong to a single thread.
"""

import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from evalnode.config import EvaluationSettings, get_evaluation_settings
from evalnode.errors import DefaultActionConflictError

if TYPE_CHECKING:
    from evalnode.evaluated_node import EvaluatedNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldMgr:
    """Binding between a node and the field it submits as."""
    field_id: str
    external_field_name: str
    data_ref: Optional[str] = None


class FieldSet:
    """Allocates unique, monotonically increasing field sequence numbers for a pass."""

    def __init__(self, settings: EvaluationSettings):
        self._settings = settings
        self._sequence = 0

    def get_next_field_sequence(self) -> int:
        self._sequence += 1
        return self._sequence

    def create_field_mgr(self, data_ref: Optional[str] = None) -> FieldMgr:
        """Allocate a field manager with a fresh field id."""
        field_id = f"{self._settings.field_id_prefix}{self.get_next_field_sequence()}"
        return FieldMgr(field_id=field_id, external_field_name=field_id, data_ref=data_ref)


class EvaluationPass:
    """
    State shared by every node evaluated in one render pass.

    Args:
        settings: Settings for the pass, defaults to the active evaluation settings
    """

    def __init__(self, settings: Optional[EvaluationSettings] = None):
        self.settings = settings if settings is not None else get_evaluation_settings()
        self.field_set = FieldSet(self.settings)
        self._default_action: Optional['EvaluatedNode'] = None

    @property
    def default_action(self) -> Optional['EvaluatedNode']:
        return self._default_action

    def claim_default_action(self, node: 'EvaluatedNode') -> None:
        """
        Record node as the pass's default action.

        Claims are checked in evaluation order, so which of two competing nodes
        gets reported as the conflict depends on which was evaluated first.

        Raises:
            DefaultActionConflictError: another node already holds the slot
        """
        if self._default_action is not None and self._default_action is not node:
            raise DefaultActionConflictError(node, self._default_action)
        self._default_action = node
        logger.debug(f"Default action claimed by {node.get_identity_information()}")
