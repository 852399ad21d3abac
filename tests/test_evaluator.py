"""Tests for jql_core.evaluator."""

import logging

import pytest

from jql_core import (
    IndexOutOfBounds,
    InvalidInput,
    InvalidNeedle,
    KeyNotFound,
    ListNotFound,
    Sequence,
    Single,
    VNumber,
    evaluate,
    from_python,
)
from jql_core.evaluator import evaluate_stage


class TestSingleStage:
    def test_identity(self):
        doc = from_python([1, 2, 3, 4])
        assert evaluate(doc, ".") == Single(doc)

    def test_field(self):
        assert evaluate(from_python({"a": 1, "b": 2}), ".a") == Single(VNumber(1))

    def test_missing_field(self):
        with pytest.raises(KeyNotFound) as exc:
            evaluate(from_python({"a": 1, "b": 2}), ".c")
        assert exc.value.key == "c"

    def test_function(self):
        assert evaluate(from_python([1, 2, 3, 4]), "length(.)") == Single(VNumber(4))

    def test_invalid_command(self):
        with pytest.raises(InvalidNeedle):
            evaluate(from_python([1, 2, 3, 4]), "invalid_command")

    def test_empty_expression(self):
        with pytest.raises(InvalidNeedle):
            evaluate(from_python([1]), "")

    def test_terminal_iteration_stays_lazy(self):
        result = evaluate(from_python([1, 2]), ".[]")
        assert isinstance(result, Sequence)
        assert not result.consumed


class TestPipeline:
    def test_delete_then_length(self):
        assert evaluate(from_python([1, 2, 3, 4]), "del(.[1]) | length") == Single(VNumber(3))

    def test_two_deletes(self):
        doc = from_python([1, 2, 3, 4])
        assert evaluate(doc, "del(.[1]) | del(.[0]) | length(.)") == Single(VNumber(2))

    def test_field_chain(self):
        doc = from_python({"a": {"b": {"c": "deep"}}})
        assert evaluate(doc, ".a | .b | .c") == Single(from_python("deep"))

    def test_iteration_then_length(self):
        doc = from_python(["ab", "cde", ""])
        assert evaluate(doc, ".[] | length") == Single(from_python([2, 3, 0]))

    def test_iteration_last_returns_sequence(self):
        doc = from_python({"items": [1, 2, 3]})
        result = evaluate(doc, ".items | .[]")
        assert isinstance(result, Sequence)
        assert list(result) == [VNumber(1), VNumber(2), VNumber(3)]

    def test_nested_iteration_is_flattened(self):
        doc = from_python([[1, 2], [3]])
        assert evaluate(doc, ".[] | .[]") == Single(from_python([1, 2, 3]))

    def test_flattened_array_feeds_next_stage(self):
        doc = from_python([[1, 2], [3]])
        assert evaluate(doc, ".[] | .[] | length") == Single(VNumber(3))

    def test_collected_array_continues(self):
        doc = from_python([{"n": 1}, {"n": 2}, {"n": 3}])
        assert evaluate(doc, ".[] | .n | add") == Single(VNumber(6))

    def test_first_error_aborts(self):
        doc = from_python({"a": [1, 2]})
        with pytest.raises(ListNotFound):
            evaluate(doc, ".a | .[0] | .[]")

    def test_element_error_aborts(self):
        doc = from_python([[1], "x", [2]])
        with pytest.raises(ListNotFound):
            evaluate(doc, ".[] | .[0]")

    def test_builtin_error_in_pipeline(self):
        with pytest.raises(InvalidInput):
            evaluate(from_python({"a": True}), ".a | length")

    def test_index_error_in_pipeline(self):
        with pytest.raises(IndexOutOfBounds):
            evaluate(from_python({"a": [1]}), ".a | .[4]")

    def test_input_document_untouched(self):
        doc = from_python({"a": 1, "b": 2})
        evaluate(doc, "del(.a) | length")
        assert doc == from_python({"a": 1, "b": 2})

    def test_stages_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="jql_core.evaluator"):
            evaluate(from_python([1, 2]), ". | length")
        assert "length" in caplog.text


def test_evaluate_stage_blank():
    with pytest.raises(InvalidNeedle):
        evaluate_stage(from_python(1), " ")
