"""Pytest configuration and shared fixtures."""
from collections import Counter

import pytest

from evalnode import (
    ElementDataItem,
    EvaluatedNodeAction,
    EvaluatedNodeContainer,
    EvaluatedNodeInfo,
    EvaluationPass,
    EvaluationSettings,
    MappingAttributeSource,
    NodeEvaluationContext,
    NodeInfo,
    NodeVisibility,
    reset_evaluation_settings,
)


class CountingAttributeSource(MappingAttributeSource):
    """Mapping source recording how often each attribute is looked up."""

    def __init__(self, definitions, data_item=None):
        super().__init__(definitions, data_item=data_item)
        self.calls = Counter()

    def lookup(self, attribute, namespaces):
        self.calls[attribute] += 1
        return super().lookup(attribute, namespaces)


@pytest.fixture(autouse=True)
def reset_settings():
    """Each test starts from the default evaluation settings."""
    reset_evaluation_settings()
    yield
    reset_evaluation_settings()


@pytest.fixture
def evaluation_pass():
    """A fresh render pass with default settings."""
    return EvaluationPass(EvaluationSettings())


@pytest.fixture
def make_context(evaluation_pass):
    """Build a context whose "fox" namespace holds the given attributes."""
    def factory(attrs=None, definitions=None, namespaces=("fox",), mode_namespaces=(), data_item=None):
        if definitions is None:
            definitions = {"fox": dict(attrs or {})}
        source = CountingAttributeSource(definitions, data_item=data_item)
        return NodeEvaluationContext(
            evaluation_pass, source,
            namespaces=namespaces, mode_namespaces=mode_namespaces, data_item=data_item,
        )
    return factory


@pytest.fixture
def make_field(make_context):
    """Build a field node for element "first_name" (or node_info.name)."""
    def factory(attrs=None, parent=None, node_info=None, visibility=NodeVisibility.EDIT,
                presentation_node="field:first_name", **context_kwargs):
        context = make_context(attrs, **context_kwargs)
        return EvaluatedNodeInfo(parent, presentation_node, context,
                                 node_info or NodeInfo("first_name"), visibility)
    return factory


@pytest.fixture
def make_action(make_context):
    """Build an action node running "save_record"."""
    def factory(attrs=None, parent=None, action_name="save_record", visibility=NodeVisibility.EDIT,
                presentation_node="action:save_record", **context_kwargs):
        context = make_context(attrs, **context_kwargs)
        return EvaluatedNodeAction(parent, presentation_node, context, action_name, visibility)
    return factory


@pytest.fixture
def make_container(make_context):
    """Build a container node for element "person"."""
    def factory(attrs=None, parent=None, node_info=None, visibility=NodeVisibility.EDIT,
                presentation_node="container:person", **context_kwargs):
        context = make_context(attrs, **context_kwargs)
        return EvaluatedNodeContainer(parent, presentation_node, context,
                                      node_info or NodeInfo("person"), visibility)
    return factory


@pytest.fixture
def person_item():
    """Data item for a person with no errors or history."""
    return ElementDataItem.from_string('<person ref="p1"><first_name>Ada</first_name></person>')
