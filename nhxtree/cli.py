import logging
import sys
from typing import Optional

import click

from nhxtree.config import ParserConfig
from nhxtree.exceptions import NewickParseError
from nhxtree.io import dump_json, read_newick, write_json, write_tree_list_json
from nhxtree.logging_config import configure_logging

logger = logging.getLogger(__name__)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write JSON here instead of stdout.",
)
@click.option("--strict", is_flag=True, help="Fail on invalid lengths and tags.")
@click.option(
    "--first-root",
    is_flag=True,
    help="Keep the first of several top-level entries instead of failing.",
)
@click.option(
    "--flatten-tags",
    is_flag=True,
    help="Merge NHX tags into each node record.",
)
@click.option("--indent", type=int, default=None, help="JSON indentation.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.option("--log-file", type=click.Path(dir_okay=False), default=None)
def main(
    path: str,
    output: Optional[str],
    strict: bool,
    first_root: bool,
    flatten_tags: bool,
    indent: Optional[int],
    log_level: str,
    log_file: Optional[str],
):
    """Convert the Newick/NHX tree(s) in PATH to JSON."""
    configure_logging(log_level.upper(), log_file)
    config = ParserConfig(
        strict=strict, multiple_roots="first" if first_root else "error"
    )

    try:
        trees = read_newick(path, config=config)
    except NewickParseError as e:
        raise click.ClickException(f"{path}: {e}") from e

    if output is None:
        dump_json(trees, sys.stdout, flatten_tags=flatten_tags, indent=indent)
        click.echo()
    elif isinstance(trees, list):
        write_tree_list_json(trees, output, flatten_tags=flatten_tags, indent=indent)
        logger.info(f"Wrote {len(trees)} trees to {output}")
    else:
        write_json(trees, output, flatten_tags=flatten_tags, indent=indent)
        logger.info(f"Wrote {output}")


if __name__ == "__main__":
    main()
