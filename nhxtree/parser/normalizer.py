"""
Boundary normalization for Newick/NHX text.

Every branchset entry is made comma-terminated so the tokenizer never has to
special-case the last child of a context:

    (A:0.1,B:0.2,(C:0.3,D:0.4)E:0.5)F;
    (A:0.1,B:0.2,(C:0.3,D:0.4,)E:0.5,)F,

The transform is purely textual. Running it twice inserts a second comma
before every ')', so it must be applied exactly once per parse.
"""

NEWICK_TERMINATOR = ";"
BOUNDARY = ","


def append_boundaries(text: str) -> str:
    """
    Insert a comma before every ')' and turn the trailing ';' into a comma.

    Args:
        text: Raw Newick/NHX string, expected to end with ';'

    Returns:
        The normalized string; all other characters are untouched
    """
    text = text.replace(")", BOUNDARY + ")")
    if text.endswith(NEWICK_TERMINATOR):
        text = text[: -len(NEWICK_TERMINATOR)] + BOUNDARY
    return text


def original_offset(normalized: str, index: int) -> int:
    """
    Map an index in normalized text back to the caller's input.

    Each ')' at or before ``index`` was preceded by exactly one inserted comma.
    """
    return index - normalized.count(")", 0, index + 1)
