"""Tests for prompt and summary prompt fallbacks."""
import pytest

from evalnode import FixedStringAttributeResult, NodeAttribute


class TestSummaryPrompt:
    """prompt-short, falling back to prompt, falling back to the variant default."""

    def test_short_empty_suppresses_regardless_of_prompt(self, make_field):
        node = make_field({"prompt-short": "", "prompt": "Name"})

        summary = node.get_summary_prompt()
        assert summary.is_explicit_empty
        assert summary == FixedStringAttributeResult.empty()

    def test_prompt_empty_suppresses_when_short_absent(self, make_field):
        node = make_field({"prompt": ""})
        assert node.get_summary_prompt().is_explicit_empty

    def test_short_wins_over_prompt(self, make_field):
        node = make_field({"prompt-short": "Nm", "prompt": "Name"})
        assert node.get_summary_prompt().get_string() == "Nm"

    def test_prompt_used_when_short_absent(self, make_field):
        node = make_field({"prompt": "Name"})
        assert node.get_summary_prompt().get_string() == "Name"

    def test_expression_resolving_empty_suppresses(self, make_field, person_item):
        node = make_field({"prompt-short": lambda item: item.select_text("missing")}, data_item=person_item)
        assert node.get_summary_prompt().is_explicit_empty

    def test_field_default_is_element_name(self, make_field):
        node = make_field()
        assert node.get_summary_prompt().get_string() == "First Name"

    def test_action_default_is_action_name(self, make_action):
        node = make_action()
        assert node.get_summary_prompt().get_string() == "Save Record"


class TestPrompt:
    """prompt, falling back to prompt-short, falling back to get_prompt_internal()."""

    def test_summary_and_prompt_resolve_independently(self, make_field):
        node = make_field({"prompt-short": "", "prompt": "Name"})

        assert node.get_summary_prompt().is_explicit_empty
        assert node.get_prompt().get_string() == "Name"

    def test_falls_back_to_short(self, make_field):
        node = make_field({"prompt-short": "Nm"})
        assert node.get_prompt().get_string() == "Nm"

    def test_prompt_wins_over_short(self, make_field):
        node = make_field({"prompt-short": "Nm", "prompt": "Name"})
        assert node.get_prompt().get_string() == "Name"

    def test_empty_prompt_suppresses(self, make_field):
        node = make_field({"prompt": "", "prompt-short": "Nm"})

        assert node.get_prompt().is_explicit_empty
        assert not node.has_prompt()

    def test_variant_default(self, make_field, make_action, make_container):
        assert make_field().get_prompt().get_string() == "First Name"
        assert make_action().get_prompt().get_string() == "Save Record"
        assert make_container().get_prompt().get_string() == "Person"

    def test_has_prompt(self, make_field):
        assert make_field({"prompt": "Name"}).has_prompt()


class TestPromptMemoization:

    @pytest.mark.parametrize("getter", ["get_prompt", "get_summary_prompt"])
    def test_same_object_returned(self, make_field, getter):
        node = make_field({"prompt": "Name"})
        assert getattr(node, getter)() is getattr(node, getter)()

    def test_variant_default_computed_once(self, make_field):
        node = make_field()
        first = node.get_prompt()
        assert node.get_prompt() is first

    def test_attribute_source_queried_once(self, make_field):
        node = make_field({"prompt": "Name"})
        source = node.get_node_evaluation_context().attribute_source

        for _ in range(3):
            node.get_prompt()
            node.get_summary_prompt()

        assert source.calls[NodeAttribute.PROMPT] == 1
        assert source.calls[NodeAttribute.PROMPT_SHORT] == 1


class TestPromptBuffers:

    def test_prompt_buffer_falls_back_to_short_buffer(self, make_field):
        short_buffer = object()
        node = make_field({"prompt-short-buffer": short_buffer})

        assert node.get_prompt_buffer() is short_buffer
        assert node.get_prompt_summary_buffer() is short_buffer

    def test_each_buffer_prefers_its_own_form(self, make_field):
        long_buffer, short_buffer = object(), object()
        node = make_field({"prompt-buffer": long_buffer, "prompt-short-buffer": short_buffer})

        assert node.get_prompt_buffer() is long_buffer
        assert node.get_prompt_summary_buffer() is short_buffer

    def test_no_buffers(self, make_field):
        node = make_field()

        assert node.get_prompt_buffer() is None
        assert node.get_prompt_summary_buffer() is None
