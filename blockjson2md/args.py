"""
Module for handling command-line arguments.
"""

import argparse
from pathlib import Path
from typing import Self

from .error import BlockJson2MdError


class ArgumentError(BlockJson2MdError):
    """Error indicating invalid command-line arguments."""


def _directory_must_exist(path_str: str) -> Path:
    """
    Validate that a directory path exists.

    Used as an argparse type validator for ``--root``.

    Parameters
    ----------
    path_str : str
        String representation of the directory path to validate.

    Returns
    -------
    Path
        Validated Path object if the directory exists.

    Raises
    ------
    ArgumentError
        If the path is empty, does not exist, or is not a directory.
    """
    if not path_str:
        raise ArgumentError("Path must not be empty.")
    path = Path(path_str)
    if not path.is_dir():
        raise ArgumentError(f"Directory '{path_str}' does not exist.")
    return path


class Arguments:
    """
    Class to handle configuration and parsing of command-line arguments.

    Parameters
    ----------
    progname : str or None, default=__package__
        Program name to display in help message. If None, defaults to package name.
    """

    parser: argparse.ArgumentParser
    root: Path
    strict: bool
    log: bool
    verbosity: int

    def __init__(self, progname: str | None = __package__):
        parser = argparse.ArgumentParser(
            description="Regenerate the core blocks reference from block.json files.",
            allow_abbrev=False,
            prog=progname if progname else "blockjson2md",
        )
        parser.add_argument(
            "--root",
            help="Project root containing packages/block-library/src and "
            "docs/reference-guides/core-blocks.md. Defaults to the current directory.",
            type=_directory_must_exist,
            default=Path("."),
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Fail if the autogenerated markers are missing from the docs file, "
            "instead of leaving it unchanged.",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="Increase verbosity of output, can be used multiple times. One -v for ERROR/WARNING level, "
            "-vv for INFO level, -vvv for DEBUG level. Combine with --log to redirect log output to file.",
            default=0,
            dest="verbosity",
        )
        parser.add_argument(
            "--log",
            action="store_true",
            help="Redirects logging to file blockjson2md.log in the current directory. "
            "Logging level is controlled by -v/--verbose. Specifying --log implies -v.",
        )

        self.parser = parser

    def parse(self, args: list[str]) -> Self:
        """
        Parse command-line arguments and populate the Arguments object.

        Parameters
        ----------
        args : list[str]
            List of command-line arguments to parse. May be empty, in which
            case defaults are used.

        Returns
        -------
        Self
            Self with parsed argument values set as attributes.

        Notes
        -----
        If --log is specified, verbosity is automatically set to at least 1.
        """
        parser = self.parser
        del self.parser
        parser.parse_args(args=args, namespace=self)

        if self.log:
            self.verbosity = max(self.verbosity, 1)
        if self.verbosity > 3:
            raise ArgumentError("Verbosity can be increased at most 3 times (-vvv).")

        return self

    def __str__(self) -> str:
        return f"Arguments({str(self.__dict__)})"

    def __repr__(self) -> str:
        return f"Arguments({repr(self.__dict__)})"
