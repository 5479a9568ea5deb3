"""Tests for record access helpers."""

import pytest

from wikitree_api.exceptions import MalformedValueError, MissingValueError, WikiTreeUsageError
from wikitree_api.records import (
    cleanup_date,
    collect_values,
    display_date,
    format_path,
    get_mandatory,
    get_mandatory_string,
    get_optional,
    get_optional_string,
    is_marker_set,
)


class TestMandatoryLookup:
    """get_mandatory walks nested records and refuses to guess."""

    def test_nested_value(self):
        record = {"profile": {"Name": "Churchill-4"}}
        assert get_mandatory(record, "profile", "Name") == "Churchill-4"

    def test_missing_value(self):
        with pytest.raises(MissingValueError) as exc_info:
            get_mandatory({"profile": {}}, "profile", "Name")
        assert exc_info.value.path == '"profile" -> "Name"'

    def test_null_value_is_missing(self):
        with pytest.raises(MissingValueError):
            get_mandatory({"Name": None}, "Name")

    def test_missing_intermediate(self):
        with pytest.raises(MissingValueError) as exc_info:
            get_mandatory({}, "profile", "Name")
        assert exc_info.value.path == '"profile"'

    def test_intermediate_not_a_record(self):
        with pytest.raises(MissingValueError):
            get_mandatory({"profile": "oops"}, "profile", "Name")

    def test_wrong_type(self):
        with pytest.raises(MalformedValueError) as exc_info:
            get_mandatory({"Id": "5589"}, "Id", expected=int)
        assert exc_info.value.expected == "int"
        assert exc_info.value.found == "5589"

    def test_bool_is_not_an_int(self):
        with pytest.raises(MalformedValueError):
            get_mandatory({"Id": True}, "Id", expected=int)

    def test_tuple_of_types(self):
        assert get_mandatory({"PageId": "12"}, "PageId", expected=(int, str)) == "12"

    def test_empty_path_is_misuse(self):
        with pytest.raises(WikiTreeUsageError):
            get_mandatory({"a": 1})

    def test_string_helper(self):
        assert get_mandatory_string({"bio": "text"}, "bio") == "text"
        with pytest.raises(MalformedValueError):
            get_mandatory_string({"bio": 3}, "bio")

    def test_error_message_carries_details(self):
        with pytest.raises(MalformedValueError) as exc_info:
            get_mandatory({"Id": "x"}, "Id", expected=int)
        message = str(exc_info.value)
        assert 'path="Id"' in message
        assert "expected=int" in message
        assert "found='x'" in message


class TestOptionalLookup:
    """get_optional returns None instead of raising for absent data."""

    def test_absent(self):
        assert get_optional({}, "Name") is None

    def test_absent_intermediate(self):
        assert get_optional({"profile": None}, "profile", "Name") is None

    def test_intermediate_not_a_record(self):
        assert get_optional({"profile": 7}, "profile", "Name") is None

    def test_present(self):
        assert get_optional({"a": {"b": 2}}, "a", "b", expected=int) == 2

    def test_present_but_wrong_type(self):
        with pytest.raises(MalformedValueError):
            get_optional({"Name": 5}, "Name", expected=str)

    def test_string_helper(self):
        assert get_optional_string({}, "page_name") is None


class TestCollectValues:
    """Relationship containers come in three shapes."""

    def test_missing(self):
        assert collect_values({}, "Parents") == []

    def test_null(self):
        assert collect_values({"Parents": None}, "Parents") == []

    def test_empty_list(self):
        assert collect_values({"Parents": []}, "Parents") == []

    def test_empty_mapping(self):
        assert collect_values({"Parents": {}}, "Parents") == []

    def test_mapping_values_in_order(self):
        record = {"Parents": {"1001": {"Id": 1001}, "1002": {"Id": 1002}}}
        assert collect_values(record, "Parents") == [{"Id": 1001}, {"Id": 1002}]

    def test_list_is_copied(self):
        parents = [{"Id": 1001}]
        values = collect_values({"Parents": parents}, "Parents")
        assert values == parents
        assert values is not parents

    def test_unexpected_shape(self):
        with pytest.raises(MalformedValueError, match="unexpected relationship container shape"):
            collect_values({"Parents": "1001"}, "Parents")


class TestSmallHelpers:
    """Markers, dates and path formatting."""

    @pytest.mark.parametrize("value", [1, "1", 1.0])
    def test_marker_set(self, value):
        assert is_marker_set(value)

    @pytest.mark.parametrize("value", [0, "0", None, True, "yes", 2])
    def test_marker_not_set(self, value):
        assert not is_marker_set(value)

    def test_cleanup_date(self):
        assert cleanup_date("1874-11-30") == "1874-11-30"
        assert cleanup_date("1874-11-00") == "1874-11"
        assert cleanup_date("1874-00-00") == "1874"
        assert cleanup_date(None) is None

    def test_cleanup_date_rejects_non_strings(self):
        with pytest.raises(MalformedValueError):
            cleanup_date(1874)

    def test_display_date(self):
        assert display_date(None) == "<<unknown>>"
        assert display_date("1921-06-00") == "1921-06"

    def test_format_path(self):
        assert format_path(("profile", "Name")) == '"profile" -> "Name"'
