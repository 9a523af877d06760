"""
Tokenizer for normalized Newick/NHX text.

A single left-to-right scan turns the text into a raw tree whose nodes carry
unparsed text spans (name, length and NHX comment still concatenated). Nodes
live in an arena and refer to each other by index; the open contexts implied
by parenthesis nesting are a stack of indices, so no parent pointers exist.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from nhxtree.exceptions import (
    NewickParseError,
    UnbalancedParenthesesError,
    UnterminatedCommentError,
)
from nhxtree.parser.normalizer import original_offset

logger = logging.getLogger(__name__)

SYNTHETIC_ROOT = 0


@dataclass
class RawNode:
    """A tokenizer node: an unparsed span and, for internal nodes, child indices."""

    text: Optional[str] = None
    children: Optional[List[int]] = None

    def is_leaf(self) -> bool:
        return self.children is None


@dataclass
class RawTree:
    """Arena of raw nodes. Index 0 is the synthetic root that precedes the first '('."""

    nodes: List[RawNode] = field(
        default_factory=lambda: [RawNode(children=[])]
    )

    def add(self, node: RawNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> RawNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root_candidates(self) -> List[int]:
        """Entries of the synthetic root's branchset; a well-formed tree has one."""
        return list(self.nodes[SYNTHETIC_ROOT].children or [])

    @property
    def root(self) -> int:
        candidates = self.root_candidates
        if not candidates:
            raise NewickParseError("Input contains no tree")
        return candidates[0]


def tokenize(text: str) -> RawTree:
    """
    Build the raw tree from normalized text.

    Args:
        text: Output of ``append_boundaries``

    Returns:
        RawTree whose synthetic root holds the top-level entries

    Raises:
        UnbalancedParenthesesError: On a ')' without an open context or an
            unclosed '('
        UnterminatedCommentError: When a '[' is never closed
    """
    tree = RawTree()
    context: List[int] = [SYNTHETIC_ROOT]
    open_positions: List[int] = []
    text_begin = 0
    in_nhx_attr = False
    comment_start = -1
    prev_node: Optional[int] = None

    for i, char in enumerate(text):
        if char == "(":
            new_node = tree.add(RawNode(children=[]))
            tree[context[-1]].children.append(new_node)
            context.append(new_node)
            open_positions.append(i)
            text_begin = i + 1

        elif char == ")":
            if len(context) == 1:
                raise UnbalancedParenthesesError(
                    "Closing parenthesis without a matching '('",
                    position=original_offset(text, i),
                )
            prev_node = context.pop()
            open_positions.pop()
            text_begin = i + 1

        elif char == ",":
            # Commas inside NHX comments belong to tag values such as "6, 7, 10"
            if in_nhx_attr:
                continue
            span = text[text_begin:i]
            # A ')' right before the span means it labels the node just closed;
            # otherwise it is a new leaf of the current context.
            if text_begin > 0 and text[text_begin - 1] == ")":
                tree[prev_node].text = span
            else:
                tree[context[-1]].children.append(tree.add(RawNode(text=span)))
            text_begin = i + 1

        elif char == "[":
            in_nhx_attr = True
            comment_start = i

        elif char == "]":
            in_nhx_attr = False

    if in_nhx_attr:
        raise UnterminatedCommentError(
            "Comment opened with '[' is never closed",
            position=original_offset(text, comment_start),
        )
    if open_positions:
        raise UnbalancedParenthesesError(
            f"{len(open_positions)} unclosed '('",
            position=original_offset(text, open_positions[-1]),
        )

    logger.debug(f"Tokenized {len(text)} characters into {len(tree) - 1} raw nodes")
    return tree
