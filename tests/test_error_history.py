"""Tests for error aggregation and history attachment."""
import pytest

from evalnode import (
    ElementDataItem,
    EvaluatedNodeInfo,
    EvaluationPass,
    EvaluationSettings,
    MappingAttributeSource,
    NodeEvaluationContext,
    NodeInfo,
    OutputHistory,
)


def person_with_errors(*messages):
    errors = "".join(f"<msg>{m}</msg>" for m in messages)
    return ElementDataItem.from_string(f"<first_name><fox-error>{errors}</fox-error></first_name>")


HISTORY_ITEM = """
<first_name>
  <fox-history>
    <history>
      <label>Changed by Ada</label>
      <operation>update</operation>
      <value>Grace</value>
    </history>
  </fox-history>
</first_name>
"""


class TestErrorAggregation:

    def test_no_data_item(self, make_field):
        node = make_field()

        assert node.get_error() is None
        assert not node.has_error()

    def test_no_errors(self, make_field, person_item):
        assert make_field(data_item=person_item).get_error() is None

    def test_single_error_verbatim(self, make_field):
        node = make_field(data_item=person_with_errors("Name is required"))

        assert node.get_error().content == "Name is required"
        assert node.has_error()

    def test_multiple_errors_numbered_in_document_order(self, make_field):
        node = make_field(data_item=person_with_errors("Too long", "Invalid character", "Reserved word"))

        assert node.get_error().content == "3 Errors: (1) Too long (2) Invalid character (3) Reserved word"

    def test_nested_markup_in_message_ignored(self, make_field):
        node = make_field(data_item=person_with_errors("Too long", "Bad <b>value</b>"))
        assert node.get_error().content == "2 Errors: (1) Too long (2) Bad "

    def test_error_urls(self, make_field):
        node = make_field({"error-url": "/help/errors", "error-url-prompt": "More"},
                          data_item=person_with_errors("Bad"))
        error = node.get_error()

        assert error.url == "/help/errors"
        assert error.url_prompt == "More"

    def test_error_memoized(self, make_field):
        node = make_field(data_item=person_with_errors("A", "B"))
        assert node.get_error() is node.get_error()

    def test_error_path_from_settings(self):
        settings = EvaluationSettings(error_message_path="errors/error")
        item = ElementDataItem.from_string("<x><errors><error>Custom</error></errors></x>")
        context = NodeEvaluationContext(EvaluationPass(settings), MappingAttributeSource({}),
                                        namespaces=("fox",), data_item=item)
        node = EvaluatedNodeInfo(None, "field:x", context, NodeInfo("x"))

        assert node.get_error().content == "Custom"


class TestHistory:

    def test_history_extracted(self, make_field):
        node = make_field(data_item=ElementDataItem.from_string(HISTORY_ITEM))

        assert node.get_history() == OutputHistory(label="Changed by Ada", operation="update", value="Grace")
        assert node.has_history()

    def test_no_history_marker(self, make_field, person_item):
        node = make_field(data_item=person_item)

        assert node.get_history() is None
        assert not node.has_history()

    def test_missing_history_fields_are_empty(self, make_field):
        item = ElementDataItem.from_string("<first_name><fox-history/></first_name>")
        assert make_field(data_item=item).get_history() == OutputHistory("", "", "")

    @pytest.mark.parametrize("widget", ["form", "list", "cellmates"])
    def test_internal_only_widgets_never_report_history(self, make_container, widget):
        node = make_container({"widget": widget}, data_item=ElementDataItem.from_string(HISTORY_ITEM))

        assert node.get_history() is None
        assert not node.has_history()

    def test_history_memoized(self, make_field):
        node = make_field(data_item=ElementDataItem.from_string(HISTORY_ITEM))
        assert node.get_history() is node.get_history()
