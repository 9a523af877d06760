import logging
from typing import List, Optional

from nhxtree.config import ParserConfig
from nhxtree.exceptions import (
    MissingTerminatorError,
    MultipleRootCandidatesError,
    UnterminatedCommentError,
)
from nhxtree.parser.normalizer import NEWICK_TERMINATOR, append_boundaries
from nhxtree.parser.tokenizer import tokenize
from nhxtree.parser.translator import translate_tree
from nhxtree.tree import Node


# ===================================================================
# 1. PUBLIC API FUNCTIONS
# ===================================================================


def parse(text: str, config: Optional[ParserConfig] = None) -> Node:
    """
    Parse one Newick/NHX tree into a structured Node.

    The input is normalized, tokenized and translated exactly once.

    Args:
        text: Newick or NHX string ending with ';'
        config: Parsing options; defaults to ParserConfig()

    Returns:
        The root Node, with every descendant reachable via ``children``

    Raises:
        MissingTerminatorError: If the input does not end with ';'
        UnbalancedParenthesesError: On unmatched parentheses
        UnterminatedCommentError: On a '[' that is never closed
        MultipleRootCandidatesError: If the top level holds several entries
            and ``config.multiple_roots`` is "error"
        InvalidNumericLengthError, MalformedAnnotationError: Only when
            ``config.strict`` is set
    """
    config = config or ParserConfig()
    logger = logging.getLogger(config.logger_name)

    if not text.endswith(NEWICK_TERMINATOR):
        raise MissingTerminatorError(
            "Newick string must end with ';'", position=len(text)
        )

    normalized = append_boundaries(text)
    raw = tokenize(normalized)

    candidates = raw.root_candidates
    if len(candidates) > 1:
        if config.multiple_roots == "error":
            raise MultipleRootCandidatesError(len(candidates))
        logger.warning(
            f"Found {len(candidates)} top-level entries; "
            f"keeping the first and discarding {len(candidates) - 1}"
        )

    tree = translate_tree(raw, raw.root, strict=config.strict)

    for node in tree.traverse():
        for error in node.errors:
            logger.warning(f"Node {node.name!r}: {error}")

    logger.debug(f"Parsed tree with {len(tree.leaves)} leaves")
    return tree


parse_newick = parse


def split_trees(text: str) -> List[str]:
    """
    Split a document into ';'-terminated tree strings.

    A ';' inside a '[...]' comment does not end a tree. Whitespace around each
    tree is stripped and fragments holding nothing but the terminator are
    skipped. Text after the last ';' is returned as a final fragment so the
    parser can report it.
    """
    trees: List[str] = []
    begin = 0
    in_comment = False
    comment_start = -1

    for i, char in enumerate(text):
        if char == "[":
            in_comment = True
            comment_start = i
        elif char == "]":
            in_comment = False
        elif char == NEWICK_TERMINATOR and not in_comment:
            fragment = text[begin : i + 1].strip()
            if fragment != NEWICK_TERMINATOR:
                trees.append(fragment)
            begin = i + 1

    if in_comment:
        raise UnterminatedCommentError(
            "Comment opened with '[' is never closed", position=comment_start
        )

    rest = text[begin:].strip()
    if rest:
        trees.append(rest)
    return trees


def parse_many(text: str, config: Optional[ParserConfig] = None) -> List[Node]:
    """Parse every tree of a multi-tree document, in order."""
    return [parse(tree, config) for tree in split_trees(text)]
