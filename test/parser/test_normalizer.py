import pytest

from nhxtree.parser import append_boundaries, parse
from nhxtree.parser import newick_parser
from nhxtree.parser.normalizer import original_offset


def test_append_boundaries_wikipedia_example(wikipedia_newick):
    assert (
        append_boundaries(wikipedia_newick)
        == "(A:0.1,B:0.2,(C:0.3,D:0.4,)E:0.5,)F,"
    )


def test_append_boundaries_only_replaces_trailing_terminator():
    assert append_boundaries("(A;B)C;") == "(A;B,)C,"


def test_append_boundaries_without_terminator():
    assert append_boundaries("(A,B)") == "(A,B,)"


def test_append_boundaries_leaves_comment_content_alone():
    text = "(A[&&NHX:b=6, 7, 10],B)C;"
    assert append_boundaries(text) == "(A[&&NHX:b=6, 7, 10],B,)C,"


def test_append_boundaries_is_not_idempotent(wikipedia_newick):
    once = append_boundaries(wikipedia_newick)
    twice = append_boundaries(once)
    assert twice != once
    assert twice.count(",,)") == 2
    assert ",,)" in twice


def test_parse_normalizes_exactly_once(monkeypatch, wikipedia_newick):
    calls = []
    original = newick_parser.append_boundaries

    def counting(text):
        calls.append(text)
        return original(text)

    monkeypatch.setattr(newick_parser, "append_boundaries", counting)
    tree = parse(wikipedia_newick)

    assert calls == [wikipedia_newick]
    # A second normalization would add an empty leaf to every branchset
    assert len(tree.children) == 3
    assert len(tree.get_child(2).children) == 2


@pytest.mark.parametrize(
    "original",
    ["(A,B)C;", "((A,B),(C,D));", "(A[&&NHX:x=1],(B)C)D;"],
)
def test_original_offset_maps_back_to_input(original):
    normalized = append_boundaries(original)
    for index, char in enumerate(normalized):
        if char in "()[]":
            assert original[original_offset(normalized, index)] == char
