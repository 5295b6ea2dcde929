"""
The documentation run: find metadata files, render them and update the docs.
"""

import logging

from .blockjson import find_block_files, read_block_json
from .config import Config
from .markdown import format_block_entries
from .splice import SpliceResult, update_docs_file

log = logging.getLogger(__name__)


def generate_block_docs(config: Config) -> SpliceResult:
    """
    Regenerate the block reference region of the docs file.

    Parameters
    ----------
    config : Config
        Locations and markers to use.

    Returns
    -------
    SpliceResult
        Result of splicing the rendered entries into ``config.docs_file``.

    Notes
    -----
    Every metadata file is read before the docs file is opened, so a bad
    file aborts the run without touching the docs. Entries keep the order
    in which files were found.
    """
    files = find_block_files(config.block_library_dir, config.metadata_glob)

    log.info("Reading block metadata")
    blocks = [read_block_json(file, config.exp_prefix) for file in files]

    log.info("Rendering %d block entries", len(blocks))
    body = format_block_entries(blocks)

    log.info("Updating %s", config.docs_file)
    return update_docs_file(config.docs_file, body, config)
