from dataclasses import dataclass

MULTIPLE_ROOT_POLICIES = ("error", "first")


@dataclass
class ParserConfig:
    """Configuration for Newick/NHX parsing."""

    strict: bool = False
    multiple_roots: str = "error"
    logger_name: str = "nhxtree.parser"

    def __post_init__(self) -> None:
        if self.multiple_roots not in MULTIPLE_ROOT_POLICIES:
            raise ValueError(
                f"multiple_roots must be one of {MULTIPLE_ROOT_POLICIES}, "
                f"got {self.multiple_roots!r}"
            )
