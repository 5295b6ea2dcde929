"""
Functions related to replacing the autogenerated region of a docs file.
"""

import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .config import Config
from .error import BlockJson2MdError

log = logging.getLogger(__name__)


class MarkerNotFoundError(BlockJson2MdError):
    """Raised in strict mode when the docs file lacks the marker pair."""


class DocsWriteError(BlockJson2MdError):
    """Custom error class for failures reading or writing the docs file."""


@dataclass(slots=True, frozen=True)
class SpliceResult:
    """
    Outcome of a splice.

    Attributes
    ----------
    text : str
        Document text after the splice. Equal to the input if not ``found``.
    found : bool
        Whether the marker pair was present and the region was replaced.
    """

    text: str
    found: bool


def token_pattern(start_token: str, end_token: str) -> re.Pattern[str]:
    """
    Compile a pattern matching the start token through the end token.

    The region between the tokens may span lines. Matching is greedy, so
    repeated markers make the match run from the first start token to the
    last end token.
    """
    return re.compile(re.escape(start_token) + ".*" + re.escape(end_token), re.DOTALL)


def splice_autogen(
    text: str,
    body: str,
    start_token: str,
    end_token: str,
) -> SpliceResult:
    """
    Replace the autogenerated region of ``text`` with ``body``.

    Parameters
    ----------
    text : str
        Full document text.
    body : str
        New content of the region, without the markers.
    start_token, end_token : str
        Literal marker strings delimiting the region.

    Returns
    -------
    SpliceResult
        The new text, and whether the markers were found. Everything before
        the start token and after the end token is kept as is.
    """
    replacement = f"{start_token}\n{body}\n{end_token}"
    new_text, count = token_pattern(start_token, end_token).subn(
        lambda _: replacement,
        text,
        count=1,
    )
    return SpliceResult(text=new_text, found=count > 0)


def write_text_atomic(path: Path, text: str) -> None:
    """
    Write ``text`` to ``path`` as UTF-8 through a temporary file.

    The temporary file is created next to ``path`` and renamed over it, so
    the target is either fully old or fully new. Permissions of an existing
    target are carried over. A symlinked ``path`` is written through: the
    file it points to is replaced and the link is kept.
    """
    path = path.resolve()
    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        newline="",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    try:
        with tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        if path.exists():
            shutil.copymode(path, tmp.name)
        os.replace(tmp.name, path)
    except BaseException:
        Path(tmp.name).unlink(missing_ok=True)
        raise
    log.debug("Wrote %d characters to %s", len(text), path)


def update_docs_file(docs_file: Path, body: str, config: Config) -> SpliceResult:
    """
    Splice ``body`` into the autogenerated region of ``docs_file``.

    Parameters
    ----------
    docs_file : Path
        Markdown file to update in place.
    body : str
        Concatenated block entries.
    config : Config
        Supplies the marker tokens and the strict flag.

    Returns
    -------
    SpliceResult
        Result of the splice. The text is written back in both cases.

    Raises
    ------
    MarkerNotFoundError
        If ``config.strict`` is set and the markers are missing. Nothing is
        written in that case.
    DocsWriteError
        If the docs file cannot be read or written.
    """
    log.debug("Reading docs file: %s", docs_file)
    try:
        # newline="" keeps line endings outside the region untouched
        with open(docs_file, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.exception("Failed to read docs file %s", docs_file)
        raise DocsWriteError(f"Failed to read docs file {docs_file}: {e}") from e

    result = splice_autogen(text, body, config.start_token, config.end_token)

    if not result.found:
        if config.strict:
            raise MarkerNotFoundError(
                f"Autogenerated markers not found in {docs_file}. Expected "
                f"'{config.start_token}' followed by '{config.end_token}'.",
            )
        log.warning(
            "Autogenerated markers not found in %s, leaving content unchanged",
            docs_file,
        )

    try:
        write_text_atomic(docs_file, result.text)
    except OSError as e:
        log.exception("Failed to write docs file %s", docs_file)
        raise DocsWriteError(f"Failed to write docs file {docs_file}: {e}") from e

    return result
