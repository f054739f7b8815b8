"""
Exception hierarchy for node evaluation.

Validation errors are markup-author or programmer mistakes. They are not
recoverable for the current render pass and propagate to whoever drives the
render/serialise loop.
"""

from typing import Any, Optional


class EvaluationError(Exception):
    """Base class for all node evaluation failures."""


class NodeValidationError(EvaluationError, ValueError):
    """Invalid markup or misuse of the evaluated node API.

    Args:
        message: Human readable description
        node_identity: Identity string of the node being evaluated, if known
    """

    def __init__(self, message: str, node_identity: Optional[str] = None):
        super().__init__(message)
        self.node_identity = node_identity


class AttributeTypeError(NodeValidationError):
    """An attribute resolved to a result type the caller cannot use."""


class MissingBehaviourError(NodeValidationError):
    """A presentation node does not provide a required behaviour."""

    def __init__(self, behaviour_type: type, node_identity: Optional[str] = None):
        super().__init__(
            f"This EvaluatedNode's presentation node is not an instance of {behaviour_type.__name__}",
            node_identity,
        )
        self.behaviour_type = behaviour_type


class DefaultActionConflictError(NodeValidationError):
    """A second node tried to become the default action of an evaluation pass."""

    def __init__(self, node: Any, conflicting_node: Any):
        super().__init__(
            f"Attempted to set {node.get_action_name()} as a default action when "
            f"{conflicting_node.get_action_name()} has already been declared default. "
            f"You may only have one default action. "
            f"(node: {node.get_identity_information()}, "
            f"existing default: {conflicting_node.get_identity_information()})",
            node.get_identity_information(),
        )
        self.node = node
        self.conflicting_node = conflicting_node
