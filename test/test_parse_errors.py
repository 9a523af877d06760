import logging

import pytest

from nhxtree import (
    InvalidNumericLengthError,
    MalformedAnnotationError,
    MissingTerminatorError,
    MultipleRootCandidatesError,
    NewickParseError,
    ParserConfig,
    UnbalancedParenthesesError,
    UnterminatedCommentError,
    parse,
)


@pytest.mark.parametrize("text", ["", "(A,B)C", "(A,B);\n", "A"])
def test_missing_terminator(text):
    with pytest.raises(MissingTerminatorError) as excinfo:
        parse(text)
    assert excinfo.value.position == len(text)


@pytest.mark.parametrize("text", ["((A,B)C;", "(A,B))C;", ")A;"])
def test_unbalanced_parentheses(text):
    with pytest.raises(UnbalancedParenthesesError):
        parse(text)


def test_unterminated_comment_is_malformed_annotation():
    with pytest.raises(MalformedAnnotationError):
        parse("(A[&&NHX:x=1,B)C;")
    with pytest.raises(UnterminatedCommentError):
        parse("(A[&&NHX:x=1,B)C;")


def test_all_errors_share_base_class():
    for error in (
        UnbalancedParenthesesError,
        MissingTerminatorError,
        MultipleRootCandidatesError,
        InvalidNumericLengthError,
        MalformedAnnotationError,
    ):
        assert issubclass(error, NewickParseError)
        assert issubclass(error, ValueError)


def test_multiple_roots_raise_by_default():
    with pytest.raises(MultipleRootCandidatesError) as excinfo:
        parse("(A,B)C,(D,E)F;")
    assert excinfo.value.count == 2


def test_multiple_roots_keep_first_when_configured(caplog):
    config = ParserConfig(multiple_roots="first")
    with caplog.at_level(logging.WARNING, logger="nhxtree"):
        tree = parse("A,B,C;", config)
    assert tree.name == "A"
    assert "discarding 2" in caplog.text


def test_invalid_multiple_roots_policy():
    with pytest.raises(ValueError):
        ParserConfig(multiple_roots="forest")


def test_lenient_errors_are_logged_and_attached(caplog):
    with caplog.at_level(logging.WARNING, logger="nhxtree"):
        tree = parse("(A:1[&&NHX:gn=1:oops],B:zz)C;")
    a, b = tree.children
    assert a.tags == {"gn": "1"}
    assert isinstance(a.errors[0], MalformedAnnotationError)
    assert isinstance(b.errors[0], InvalidNumericLengthError)
    assert tree.errors == []
    assert "oops" in caplog.text
    assert "zz" in caplog.text


def test_strict_mode_raises_span_errors():
    strict = ParserConfig(strict=True)
    with pytest.raises(InvalidNumericLengthError):
        parse("(A:abc,B)C;", strict)
    with pytest.raises(MalformedAnnotationError):
        parse("(A[&&NHX:oops],B)C;", strict)


def test_strict_mode_accepts_valid_input(wikipedia_nhx):
    tree = parse(wikipedia_nhx, ParserConfig(strict=True))
    assert not tree.has_errors()


def test_parse_is_reentrant():
    first = parse("(A:1,B:2)C;")
    second = parse("(A:1,B:2)C;")
    assert first == second
    assert first is not second
    assert first.children[0] is not second.children[0]
