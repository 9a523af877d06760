import json
from typing import Any, IO, List, Optional, Union

from nhxtree.config import ParserConfig
from nhxtree.exceptions import MissingTerminatorError
from nhxtree.parser.newick_parser import parse, split_trees
from nhxtree.tree import Node


class NodeEncoder(json.JSONEncoder):
    def __init__(self, *args: Any, flatten_tags: bool = False, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.flatten_tags = flatten_tags

    def default(self, o: Any):
        if isinstance(o, Node):
            return o.to_dict(flatten_tags=self.flatten_tags)
        return super().default(o)


def read_newick(
    path: str, config: Optional[ParserConfig] = None, force_list: bool = False
) -> Union[Node, List[Node]]:
    """
    Read one or more Newick/NHX trees from a file.

    Returns a single Node when the file holds exactly one tree and
    ``force_list`` is not set; otherwise a list of Nodes in file order.

    Raises:
        MissingTerminatorError: If the file holds no tree at all
    """
    with open(path, encoding="utf-8") as f:
        newick_string: str = f.read()

    fragments = split_trees(newick_string)
    if not fragments:
        raise MissingTerminatorError(
            "File contains no Newick tree", position=len(newick_string)
        )
    trees: List[Node] = [parse(tree, config) for tree in fragments]
    if len(trees) == 1 and not force_list:
        return trees[0]
    return trees


def dump_json(
    tree: Union[Node, List[Node]],
    f: IO[str],
    flatten_tags: bool = False,
    indent: Optional[int] = None,
):
    json.dump(tree, f, cls=NodeEncoder, flatten_tags=flatten_tags, indent=indent)


def write_json(
    tree: Union[Node, List[Node]],
    path: str,
    flatten_tags: bool = False,
    indent: Optional[int] = None,
):
    with open(path, mode="w", encoding="utf-8") as f:
        dump_json(tree, f, flatten_tags=flatten_tags, indent=indent)


def write_tree_list_json(
    trees: List[Node],
    path: str,
    flatten_tags: bool = False,
    indent: Optional[int] = None,
):
    """Write trees as a JSON array, even when there is only one."""
    write_json(list(trees), path, flatten_tags=flatten_tags, indent=indent)
