"""Tests for lenient JSON array recovery."""

from utils.json_recovery import (
    EMPTY_INPUT,
    INVALID_JSON,
    NO_ARRAY,
    extract_json_array,
    parse_json_array,
    repair_json_text,
)


class TestRepairJsonText:
    """Test the fixed repair sequence."""

    def test_removes_trailing_commas(self):
        assert repair_json_text('[{"a": 1,}, {"b": 2},]') == '[{"a": 1}, {"b": 2}]'

    def test_collapses_literal_newline_sequences(self):
        assert repair_json_text('["line one\\nline two"]') == '["line one line two"]'

    def test_collapses_whitespace(self):
        assert repair_json_text('  [\n  1,\n\t2\n]  ') == '[ 1, 2 ]'


class TestParseJsonArray:
    """Test array location and parsing."""

    def test_prose_and_code_fence(self, mcq_reply):
        """Array wrapped in prose and a fence with trailing commas is recovered."""
        result = parse_json_array(mcq_reply)
        assert result.ok
        assert len(result.items) == 2
        assert result.items[0]["topic"] == "Arithmetic"
        assert result.items[1]["correct"] == 1

    def test_bare_array(self):
        result = parse_json_array('[{"question": "Q", "correct": 0}]')
        assert result.items == [{"question": "Q", "correct": 0}]

    def test_empty_input(self):
        assert parse_json_array("").reason == EMPTY_INPUT
        assert parse_json_array(None).reason == EMPTY_INPUT

    def test_no_array(self):
        result = parse_json_array("I could not generate questions for this text.")
        assert result.reason == NO_ARRAY
        assert result.items == []

    def test_invalid_json(self):
        result = parse_json_array("[{question: 'unquoted'}]")
        assert result.reason == INVALID_JSON
        assert not result.ok

    def test_greedy_span_covers_first_to_last_bracket(self):
        """Two separate arrays in one reply make the span unparseable."""
        result = parse_json_array("first [1, 2] and then [3, 4]")
        assert result.reason == INVALID_JSON

    def test_deep_nesting_is_invalid_not_raised(self):
        deep = "[" * 100000 + "]" * 100000
        result = parse_json_array(deep)
        assert result.reason == INVALID_JSON
        assert result.items == []

    def test_nan_and_infinity_rejected(self):
        assert parse_json_array('[{"correct": NaN}]').reason == INVALID_JSON
        assert parse_json_array("[Infinity, -Infinity]").reason == INVALID_JSON

    def test_json_object_without_array(self):
        assert parse_json_array('{"questions": "none"}').reason == NO_ARRAY

    def test_elements_are_not_validated(self):
        result = parse_json_array('["just a string", 42]')
        assert result.items == ["just a string", 42]


class TestExtractJsonArray:
    """Test the best-effort wrapper."""

    def test_returns_items(self):
        assert extract_json_array('[1, 2, 3,]') == [1, 2, 3]

    def test_failure_is_empty_list(self):
        assert extract_json_array("no json here", label="MCQs") == []

    def test_deeply_nested_output_is_empty_list(self):
        assert extract_json_array("[" * 100000 + "]" * 100000) == []
