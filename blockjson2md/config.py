"""
Run configuration: where block metadata lives, which file to update and
which marker tokens delimit the autogenerated region.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Self

# Locations relative to the project root
BLOCK_LIBRARY_SUBDIR: Final[str] = "packages/block-library/src"
DOCS_FILE_SUBPATH: Final[str] = "docs/reference-guides/core-blocks.md"

# One level of block directories, each holding a block.json file
METADATA_GLOB: Final[str] = "*/block.json"

# Marker lines delimiting the region owned by this tool
START_TOKEN: Final[str] = "<!-- START Autogenerated - DO NOT EDIT -->"
END_TOKEN: Final[str] = "<!-- END Autogenerated - DO NOT EDIT -->"

# Keys starting with this prefix are experimental and never documented
EXPERIMENTAL_PREFIX: Final[str] = "__exp"


@dataclass(slots=True, frozen=True)
class Config:
    """
    Paths and tokens used by a single documentation run.

    Attributes
    ----------
    block_library_dir : Path
        Directory whose immediate subdirectories hold block metadata files.
    docs_file : Path
        Markdown file containing the autogenerated region.
    metadata_glob : str, default=METADATA_GLOB
        Glob pattern, relative to ``block_library_dir``, matching metadata files.
    start_token : str, default=START_TOKEN
        Literal line opening the autogenerated region.
    end_token : str, default=END_TOKEN
        Literal line closing the autogenerated region.
    exp_prefix : str, default=EXPERIMENTAL_PREFIX
        Keys beginning with this prefix are left out of supports and attributes.
    strict : bool, default=False
        If True, a docs file without the marker pair is an error instead of a
        silent no-op.
    """

    block_library_dir: Path
    docs_file: Path
    metadata_glob: str = METADATA_GLOB
    start_token: str = START_TOKEN
    end_token: str = END_TOKEN
    exp_prefix: str = EXPERIMENTAL_PREFIX
    strict: bool = False

    @classmethod
    def from_root(cls, root_dir: Path, strict: bool = False) -> Self:
        """
        Build the standard configuration for a project root.

        Parameters
        ----------
        root_dir : Path
            Project root directory. The block library and docs file are
            resolved relative to it.
        strict : bool, default=False
            Fail on a marker mismatch instead of leaving the file unchanged.

        Returns
        -------
        Config
            Configuration pointing at the default locations under ``root_dir``.
        """
        root = root_dir.resolve()
        return cls(
            block_library_dir=root / BLOCK_LIBRARY_SUBDIR,
            docs_file=root / DOCS_FILE_SUBPATH,
            strict=strict,
        )
