"""
Translation of raw text spans into structured nodes.

    A:0.1[&&NHX:gn=0.2948622:b=6, 7, 10]
    -> name 'A', length 0.1, tags {'gn': '0.2948622', 'b': '6, 7, 10'}

Tag values are kept as raw strings; no numeric coercion is performed.
"""

import logging
import re
from typing import Dict, List, NamedTuple, Optional, Tuple

from nhxtree.exceptions import (
    InvalidNumericLengthError,
    MalformedAnnotationError,
    NewickParseError,
)
from nhxtree.parser.tokenizer import RawTree
from nhxtree.tree import Node

logger = logging.getLogger(__name__)

NHX_MARKER = "[&&NHX:"
COMMENT_CLOSE = "]"
LENGTH_SEPARATOR = ":"
TAG_SEPARATOR = ":"
TAG_ASSIGNMENT = "="
LENGTH_PATTERN = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class SpanFields(NamedTuple):
    name: str
    length: float
    tags: Dict[str, str]
    errors: List[NewickParseError]


# ===================================================================
# 1. SPAN PIECES
# ===================================================================


def strip_comment_close(text: str) -> str:
    """Remove exactly one trailing ']' left over from comment capture."""
    if text.endswith(COMMENT_CLOSE):
        return text[: -len(COMMENT_CLOSE)]
    return text


def split_nhx(text: str) -> Tuple[str, Optional[str]]:
    """
    Split a span into its label part and NHX attribute part.

    Returns:
        (label, attributes) where attributes is None when the span carries
        no ``[&&NHX:`` marker
    """
    if NHX_MARKER not in text:
        return text, None
    label, _, attributes = text.partition(NHX_MARKER)
    return label, attributes


def parse_length(text: str) -> float:
    """
    Parse the longest numeric prefix of branch length text.

        0.1     -> 0.1
        0.1[95  -> 0.1   (trailing non-NHX comment)
        1_5     -> 1.0

    Raises:
        InvalidNumericLengthError: If the text does not start with a number
    """
    match = LENGTH_PATTERN.match(text)
    if match is None:
        raise InvalidNumericLengthError("Invalid branch length", span=text)
    return float(match.group(0))


def split_name_and_length(
    label: str, strict: bool = False
) -> Tuple[str, float, Optional[NewickParseError]]:
    """
    Split a label part on its first ':' into name and length.

        A:0.1 -> ('A', 0.1)
        A     -> ('A', 0.0)
        ''    -> ('', 0.0)

    A length that does not parse becomes NaN and the error is returned,
    unless ``strict`` is set, in which case it is raised.
    """
    if LENGTH_SEPARATOR not in label:
        return label, 0.0, None

    name, _, length_text = label.partition(LENGTH_SEPARATOR)
    try:
        return name, parse_length(length_text), None
    except InvalidNumericLengthError as error:
        if strict:
            raise
        return name, float("nan"), error


def parse_nhx_tags(
    text: str, strict: bool = False
) -> Tuple[Dict[str, str], List[NewickParseError]]:
    """
    Parse ``key=value`` pairs separated by ':'.

        gn=0.2948622:b=6, 7, 10 -> {'gn': '0.2948622', 'b': '6, 7, 10'}

    Each pair is split once on its first '='. Empty pairs are ignored; pairs
    without '=' are skipped and reported (or raised when ``strict``).
    """
    tags: Dict[str, str] = {}
    errors: List[NewickParseError] = []
    if not text:
        return tags, errors

    for pair in text.split(TAG_SEPARATOR):
        if not pair:
            continue
        if TAG_ASSIGNMENT not in pair:
            error = MalformedAnnotationError("NHX tag is missing '='", span=pair)
            if strict:
                raise error
            errors.append(error)
            continue
        key, _, value = pair.partition(TAG_ASSIGNMENT)
        tags[key] = value
    return tags, errors


def translate_span(text: Optional[str], strict: bool = False) -> SpanFields:
    """Decide name, length and tags for one raw text span."""
    label, attributes = split_nhx(strip_comment_close(text or ""))
    name, length, length_error = split_name_and_length(label, strict=strict)

    errors: List[NewickParseError] = []
    if length_error is not None:
        errors.append(length_error)

    tags: Dict[str, str] = {}
    if attributes is not None:
        tags, tag_errors = parse_nhx_tags(attributes, strict=strict)
        errors.extend(tag_errors)

    return SpanFields(name, length, tags, errors)


# ===================================================================
# 2. TREE TRANSLATION
# ===================================================================


def translate_tree(
    raw: RawTree, index: Optional[int] = None, strict: bool = False
) -> Node:
    """
    Translate the raw subtree at ``index`` into structured nodes.

    Children are built before their parent, so every Node is constructed once
    with its final children and never modified afterwards. The walk uses an
    explicit stack so deep trees do not hit the recursion limit.

    Args:
        raw: Tokenizer output
        index: Arena index of the subtree root (defaults to the tree root)
        strict: Raise span errors instead of attaching them to nodes

    Returns:
        The structured root Node
    """
    if index is None:
        index = raw.root

    built: Dict[int, Node] = {}
    stack: List[Tuple[int, bool]] = [(index, False)]

    while stack:
        current, expanded = stack.pop()
        raw_node = raw[current]

        if not expanded and raw_node.children:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(raw_node.children))
            continue

        fields = translate_span(raw_node.text, strict=strict)
        children = None
        if raw_node.children is not None:
            children = [built.pop(child) for child in raw_node.children]
        built[current] = Node(
            name=fields.name,
            length=fields.length,
            tags=fields.tags,
            children=children,
            errors=fields.errors,
        )

    logger.debug(f"Translated raw subtree {index}")
    return built[index]
