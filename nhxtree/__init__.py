"""Newick and NHX tree parsing."""

from nhxtree.config import ParserConfig
from nhxtree.exceptions import (
    NewickParseError,
    UnbalancedParenthesesError,
    MissingTerminatorError,
    MultipleRootCandidatesError,
    InvalidNumericLengthError,
    MalformedAnnotationError,
    UnterminatedCommentError,
)
from nhxtree.parser import parse, parse_newick, parse_many
from nhxtree.tree import Node

__all__ = [
    "Node",
    "ParserConfig",
    "parse",
    "parse_newick",
    "parse_many",
    "NewickParseError",
    "UnbalancedParenthesesError",
    "MissingTerminatorError",
    "MultipleRootCandidatesError",
    "InvalidNumericLengthError",
    "MalformedAnnotationError",
    "UnterminatedCommentError",
]
