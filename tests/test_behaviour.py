"""Tests for optional presentation behaviours."""
import pytest

from evalnode import (
    CellAttributesBehaviour,
    ClientVisibilityBehaviour,
    MissingBehaviourError,
    register_behaviour_adapter,
    resolve_behaviour,
    unregister_behaviour_adapter,
)


class HiddenPanel(ClientVisibilityBehaviour):
    """Presentation node that implements a behaviour directly."""

    def is_initially_displayed(self):
        return False


class GridCell(CellAttributesBehaviour):

    def get_cell_classes(self):
        return {"wide", "highlight"}

    def get_cell_attributes(self):
        return {"data-column": "3"}


class PlainNode:
    """Presentation node with no behaviours of its own."""

    def __init__(self, displayed=True):
        self.displayed = displayed


class PlainSubNode(PlainNode):
    pass


class _Toggle(ClientVisibilityBehaviour):

    def __init__(self, node):
        self._node = node

    def is_initially_displayed(self):
        return self._node.displayed


@pytest.fixture
def toggle_adapter():
    register_behaviour_adapter(PlainNode, ClientVisibilityBehaviour, _Toggle)
    yield
    unregister_behaviour_adapter(PlainNode, ClientVisibilityBehaviour)


class TestResolveBehaviour:

    def test_instance_provides_behaviour(self):
        panel = HiddenPanel()
        assert resolve_behaviour(panel, ClientVisibilityBehaviour) is panel

    def test_missing_behaviour(self):
        assert resolve_behaviour(PlainNode(), ClientVisibilityBehaviour) is None
        assert resolve_behaviour(None, ClientVisibilityBehaviour) is None

    def test_adapter(self, toggle_adapter):
        behaviour = resolve_behaviour(PlainNode(displayed=False), ClientVisibilityBehaviour)

        assert isinstance(behaviour, _Toggle)
        assert not behaviour.is_initially_displayed()

    def test_adapter_applies_to_subclasses(self, toggle_adapter):
        assert resolve_behaviour(PlainSubNode(), ClientVisibilityBehaviour) is not None

    def test_adapter_is_per_behaviour(self, toggle_adapter):
        assert resolve_behaviour(PlainNode(), CellAttributesBehaviour) is None

    def test_unregister(self):
        register_behaviour_adapter(PlainNode, ClientVisibilityBehaviour, _Toggle)
        unregister_behaviour_adapter(PlainNode, ClientVisibilityBehaviour)

        assert resolve_behaviour(PlainNode(), ClientVisibilityBehaviour) is None


class TestNodeBehaviours:

    def test_get_behaviour_or_none(self, make_field):
        panel = HiddenPanel()

        assert make_field(presentation_node=panel).get_behaviour_or_none(ClientVisibilityBehaviour) is panel
        assert make_field().get_behaviour_or_none(ClientVisibilityBehaviour) is None

    def test_strict_query_raises(self, make_field):
        node = make_field(presentation_node=PlainNode())

        with pytest.raises(MissingBehaviourError, match="not an instance of ClientVisibilityBehaviour") as exc_info:
            node.get_behaviour(ClientVisibilityBehaviour)

        assert exc_info.value.behaviour_type is ClientVisibilityBehaviour
        assert exc_info.value.node_identity == node.get_identity_information()

    def test_strict_query_returns_behaviour(self, make_field):
        panel = HiddenPanel()
        assert make_field(presentation_node=panel).get_behaviour(ClientVisibilityBehaviour) is panel

    def test_initially_displayed_default(self, make_field):
        assert make_field().is_initially_displayed()

    def test_initially_displayed_from_behaviour(self, make_field):
        assert not make_field(presentation_node=HiddenPanel()).is_initially_displayed()

    def test_initially_displayed_from_adapter(self, make_field, toggle_adapter):
        assert not make_field(presentation_node=PlainNode(displayed=False)).is_initially_displayed()
        assert make_field(presentation_node=PlainNode(displayed=True)).is_initially_displayed()

    def test_cell_defaults_empty(self, make_field):
        node = make_field()

        assert node.get_cell_internal_classes() == frozenset()
        assert node.get_cell_internal_attributes() == {}

    def test_cell_from_behaviour(self, make_field):
        node = make_field(presentation_node=GridCell())

        assert node.get_cell_internal_classes() == frozenset({"wide", "highlight"})
        assert node.get_cell_internal_attributes() == {"data-column": "3"}
