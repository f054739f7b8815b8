"""Tests for hint and description resolution."""
import pytest

from evalnode import (
    HelpDisplayOption,
    LayoutDirection,
    NodeAttribute,
    NodeValidationError,
    NodeVisibility,
)


class TestHint:

    def test_no_hint(self, make_field):
        node = make_field()

        assert node.get_hint() is None
        assert not node.has_hint()

    def test_empty_hint_text_is_no_hint(self, make_field):
        assert make_field({"hint": ""}).get_hint() is None

    def test_hint_text(self, make_field):
        hint = make_field({"hint": "Your given name", "hint-url": "/help/name"}).get_hint()

        assert hint.get_hint_content() == "Your given name"
        assert hint.url == "/help/name"
        assert hint.buffer is None

    def test_buffer_alone_makes_a_hint(self, make_field):
        buffer = object()
        hint = make_field({"hint-buffer": buffer}).get_hint()

        assert hint is not None
        assert hint.buffer is buffer
        assert hint.content is None

    def test_hint_ids_unique_within_pass(self, make_field):
        first = make_field({"hint": "One"})
        second = make_field({"hint": "Two"})

        first_id = first.get_hint().hint_id
        second_id = second.get_hint().hint_id

        assert first_id == "hint1"
        assert second_id == "hint2"

    def test_hint_id_stable_across_queries(self, make_field):
        node = make_field({"hint": "One"})
        assert node.get_hint().hint_id == node.get_hint().hint_id
        assert node.get_hint() is node.get_hint()

    def test_absent_hint_cached(self, make_field):
        node = make_field()
        source = node.get_node_evaluation_context().attribute_source

        assert node.get_hint() is None
        assert node.get_hint() is None

        assert source.calls[NodeAttribute.HINT] == 1
        assert source.calls[NodeAttribute.HINT_BUFFER] == 1

    def test_explicit_title(self, make_field):
        hint = make_field({"hint": "Help", "hint-title": "About names"}).get_hint()
        assert hint.get_title() == "About names"

    def test_action_title_defaults_to_prompt(self, make_action):
        hint = make_action({"hint": "Saves the record", "prompt": "Save"}).get_hint()
        assert hint.get_title() == "Save"

    def test_action_without_prompt_has_no_title(self, make_action):
        hint = make_action({"hint": "Saves the record", "prompt": ""}).get_hint()
        assert hint.title is None

    def test_field_title_not_defaulted(self, make_field):
        hint = make_field({"hint": "Help", "prompt": "Name"}).get_hint()
        assert hint.title is None

    def test_icon_description_prepended(self, make_field):
        hint = make_field({
            "hint": "Help",
            "description": "Longer description",
            "description-display": "icon",
        }).get_hint()

        assert hint.description is not None
        assert hint.description.get_description_content() == "Longer description"

    def test_inline_description_not_prepended(self, make_field):
        hint = make_field({"hint": "Help", "description": "Longer description"}).get_hint()
        assert hint.description is None

    @pytest.mark.parametrize("mode, visibility, expected", [
        ("always", NodeVisibility.VIEW, True),
        ("never", NodeVisibility.EDIT, False),
        ("edit", NodeVisibility.EDIT, True),
        ("edit", NodeVisibility.VIEW, False),
        ("ro", NodeVisibility.VIEW, True),
        ("edit, ro", NodeVisibility.VIEW, True),
    ])
    def test_hint_display_mode(self, make_field, mode, visibility, expected):
        node = make_field({"hint": "Help", "hint-display-mode": mode}, visibility=visibility)
        assert node.has_hint() is expected

    def test_unknown_display_mode_raises(self, make_field):
        node = make_field({"hint": "Help", "hint-display-mode": "sometimes"})

        with pytest.raises(NodeValidationError, match="sometimes"):
            node.has_hint()


class TestDescription:

    def test_no_description(self, make_field):
        node = make_field()

        assert node.get_description() is None
        assert not node.has_description()

    def test_text_description(self, make_field):
        node = make_field({"description": "Given name as on passport"})

        assert node.get_description().get_description_content() == "Given name as on passport"
        assert node.has_description()

    def test_buffer_description(self, make_field):
        buffer = object()
        description = make_field({"description-buffer": buffer}).get_description()
        assert description.buffer is buffer

    def test_empty_description_is_none(self, make_field):
        assert make_field({"description": ""}).get_description() is None

    def test_icon_description_not_shown_inline(self, make_field):
        node = make_field({"description": "Text", "description-display": "icon"})

        assert node.get_description() is not None
        assert not node.has_description()

    def test_description_display_mode(self, make_field):
        node = make_field({"description": "Text", "description-display-mode": "ro"},
                          visibility=NodeVisibility.EDIT)
        assert not node.has_description()

    def test_memoized(self, make_field):
        node = make_field({"description": "Text"})
        assert node.get_description() is node.get_description()

    def test_help_display_option_parsing(self):
        assert HelpDisplayOption.from_external_string(None) is None
        assert HelpDisplayOption.from_external_string("ICON") == HelpDisplayOption.ICON


class TestDescriptionLayout:

    def test_default_south(self, make_field):
        assert make_field().get_description_layout() == LayoutDirection.SOUTH

    def test_declared(self, make_field):
        assert make_field({"description-layout": "east"}).get_description_layout() == LayoutDirection.EAST

    def test_invalid(self, make_field):
        with pytest.raises(NodeValidationError):
            make_field({"description-layout": "up"}).get_description_layout()
