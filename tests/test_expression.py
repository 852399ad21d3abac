"""Tests for the expression scanner."""

import pytest

from jql_core.errors import MissingBrackets, ParseError
from jql_core.expression import (
    BracketForm,
    StageKind,
    bracket_content,
    bracket_form,
    call_argument,
    classify,
    function_name,
    has_pipe,
    parse_index,
    parse_index_list,
    parse_slice,
    split_stages,
)


# ---------------------------------------------------------------------------
# split_stages
# ---------------------------------------------------------------------------

def test_split_single_stage():
    assert not has_pipe(".a")
    assert split_stages(".a") == [".a"]


def test_split_multiple_stages():
    assert has_pipe(".[] | length")
    assert split_stages("del(.[1]) | del(.[0]) | length") == [
        "del(.[1])",
        "del(.[0])",
        "length",
    ]


def test_pipe_without_spaces_is_not_a_separator():
    assert not has_pipe(".a|length")


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "stage, kind",
    [
        (".", StageKind.IDENTITY),
        (".name", StageKind.FIELD),
        (".[]", StageKind.BRACKET),
        (".[1:3]", StageKind.BRACKET),
        (".[0]", StageKind.BRACKET),
        ("length", StageKind.FUNCTION),
        ("del(.a)", StageKind.FUNCTION),
        ("nonsense", StageKind.FUNCTION),
        ("", StageKind.INVALID),
        ("   ", StageKind.INVALID),
    ],
)
def test_classify(stage, kind):
    assert classify(stage) is kind


def test_half_bracket_is_a_field():
    assert classify(".[0") is StageKind.FIELD


# ---------------------------------------------------------------------------
# Brackets and calls
# ---------------------------------------------------------------------------

class TestBracketContent:
    def test_first_pair_only(self):
        assert bracket_content(".[1][2]") == "1"

    def test_empty(self):
        assert bracket_content(".[]") == ""

    def test_reversed_brackets(self):
        with pytest.raises(MissingBrackets):
            bracket_content(".]0[")

    def test_forms(self):
        assert bracket_form("") is BracketForm.ITERATE
        assert bracket_form("1:2") is BracketForm.SLICE
        assert bracket_form("3") is BracketForm.INDEX


class TestCallArgument:
    def test_argument(self):
        assert call_argument("del(.a)") == ".a"

    def test_missing_close(self):
        with pytest.raises(MissingBrackets):
            call_argument("del(.a")

    def test_missing_both(self):
        with pytest.raises(MissingBrackets):
            call_argument("del")

    def test_function_name(self):
        assert function_name("del(.a)") == "del"
        assert function_name("length") == "length"
        assert function_name(" add ") == "add"


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

class TestParseIndex:
    def test_valid(self):
        assert parse_index("0") == 0
        assert parse_index("42") == 42

    @pytest.mark.parametrize("text", ["", "-1", "x", "1.5", " 1", "١", "1\n"])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parse_index(text)

    def test_too_many_digits(self):
        with pytest.raises(ParseError):
            parse_index("9" * 5000)

    def test_slice(self):
        assert parse_slice("1:4") == (1, 4)

    def test_slice_missing_bound(self):
        with pytest.raises(ParseError):
            parse_slice(":4")

    def test_index_list(self):
        assert parse_index_list("1, 3,0") == [1, 3, 0]

    def test_index_list_malformed(self):
        with pytest.raises(ParseError):
            parse_index_list("1, a")


def test_oversized_index_through_evaluate():
    from jql_core import evaluate, from_python

    huge = "9" * 5000
    with pytest.raises(ParseError):
        evaluate(from_python([1]), f".[{huge}]")
    with pytest.raises(ParseError):
        evaluate(from_python([1]), f".[0:{huge}]")
    with pytest.raises(ParseError):
        evaluate(from_python([1]), f"del(.[{huge}])")


def test_trailing_newline_index_through_evaluate():
    from jql_core import evaluate, from_python

    with pytest.raises(ParseError):
        evaluate(from_python([10, 20]), ".[1\n]")
