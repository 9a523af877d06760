"""
Newick/NHX parser module for phylogenetic trees.

Parsing runs in three stages: boundary normalization, tokenization into an
arena of raw text spans, and translation of each span into a structured Node.
"""

from .normalizer import append_boundaries
from .tokenizer import RawNode, RawTree, tokenize
from .translator import (
    parse_length,
    parse_nhx_tags,
    split_name_and_length,
    split_nhx,
    strip_comment_close,
    translate_span,
    translate_tree,
)
from .newick_parser import parse, parse_newick, parse_many, split_trees

__all__ = [
    "append_boundaries",
    "RawNode",
    "RawTree",
    "tokenize",
    "parse_length",
    "parse_nhx_tags",
    "split_name_and_length",
    "split_nhx",
    "strip_comment_close",
    "translate_span",
    "translate_tree",
    "parse",
    "parse_newick",
    "parse_many",
    "split_trees",
]
