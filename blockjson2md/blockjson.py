"""
Functions related to finding and reading block.json metadata files.
"""

import fnmatch
import json
import logging
import math
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .config import EXPERIMENTAL_PREFIX
from .error import BlockJson2MdError
from .model import (
    BlockMetadata,
    SupportFlag,
    SupportGroup,
    SupportListing,
    SupportValue,
)

log = logging.getLogger(__name__)


class BlockJsonReadError(BlockJson2MdError):
    """Custom error class for block.json reading errors."""


def find_block_files(base_dir: Path, pattern: str) -> list[Path]:
    """
    List metadata files below a directory.

    Parameters
    ----------
    base_dir : Path
        Directory to search.
    pattern : str
        ``<directory glob>/<filename>`` relative to ``base_dir``, e.g.
        ``*/block.json``. Only immediate subdirectories are searched.

    Returns
    -------
    list[Path]
        Absolute paths of matching files, in the order the filesystem
        returned them. Not sorted. Empty if ``base_dir`` does not exist.

    Raises
    ------
    ValueError
        If ``pattern`` is not of the form ``<directory glob>/<filename>``.
    OSError
        If ``base_dir`` exists but cannot be listed.

    Notes
    -----
    Hidden directories (names starting with ``.``) are never matched.
    """
    dir_pattern, sep, filename = pattern.partition("/")
    if not sep or not dir_pattern or not filename or "/" in filename:
        raise ValueError(
            f"Expected a '<directory glob>/<filename>' pattern, got {pattern!r}.",
        )

    base = base_dir.resolve()
    log.debug("Searching %s for %s", base, pattern)
    if not base.exists():
        log.info("Block library directory %s does not exist", base)
        return []

    files = []
    # listing errors propagate; an unreadable library must abort the run
    with os.scandir(base) as entries:
        for entry in entries:
            if entry.name.startswith(".") or not entry.is_dir():
                continue
            if not fnmatch.fnmatchcase(entry.name, dir_pattern):
                continue
            path = base / entry.name / filename
            if path.is_file():
                files.append(path)

    log.info("Found %d metadata files in %s", len(files), base)
    return files


def is_truthy(value: Any) -> bool:
    """
    Tell whether a decoded JSON value counts as enabled.

    False, null, zero, NaN and the empty string are falsy. Objects and
    arrays are always truthy, even when empty, so ``"content": {}`` still
    names an attribute.
    """
    if isinstance(value, (Mapping, list)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def truthy_keys(
    obj: Mapping[str, Any] | None,
    exp_prefix: str = EXPERIMENTAL_PREFIX,
) -> list[str]:
    """
    Return the keys of ``obj`` with truthy values, skipping experimental keys.

    Parameters
    ----------
    obj : Mapping[str, Any] or None
        Decoded JSON object. None and non-mapping values give no keys.
    exp_prefix : str, default=EXPERIMENTAL_PREFIX
        Keys starting with this prefix are dropped regardless of value.

    Returns
    -------
    list[str]
        Keys in mapping order. Callers sort them for display.
    """
    if not isinstance(obj, Mapping):
        return []
    return [
        key
        for key, value in obj.items()
        if is_truthy(value) and not key.startswith(exp_prefix)
    ]


def parse_supports(
    obj: Mapping[str, Any] | None,
    exp_prefix: str = EXPERIMENTAL_PREFIX,
) -> tuple[SupportValue, ...]:
    """
    Classify the enabled entries of a ``supports`` object.

    Parameters
    ----------
    obj : Mapping[str, Any] or None
        The decoded ``supports`` object.
    exp_prefix : str, default=EXPERIMENTAL_PREFIX
        Prefix marking experimental keys, at both nesting levels.

    Returns
    -------
    tuple[SupportValue, ...]
        One entry per truthy key: a ``SupportListing`` for arrays, a
        ``SupportGroup`` holding the truthy inner keys for objects, and a
        ``SupportFlag`` for anything else.
    """
    supports: list[SupportValue] = []
    for key in truthy_keys(obj, exp_prefix):
        value = obj[key]  # type: ignore[index]
        if isinstance(value, list):
            values = tuple(scalar_text(v) for v in value)
            supports.append(SupportListing(key, values))
        elif isinstance(value, Mapping):
            supports.append(SupportGroup(key, tuple(truthy_keys(value, exp_prefix))))
        else:
            supports.append(SupportFlag(key))
    return tuple(supports)


def scalar_text(value: Any) -> str:
    """
    Render a decoded JSON scalar the way it reads in block.json.

    null gives an empty string, booleans are lowercase and integral floats
    lose their fractional part (``1.0`` gives ``1``).
    """
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case float() if value.is_integer():
            return str(int(value))
        case _:
            return str(value)


def parse_block_metadata(
    data: Mapping[str, Any],
    exp_prefix: str = EXPERIMENTAL_PREFIX,
) -> BlockMetadata:
    """
    Build a ``BlockMetadata`` record from a decoded block.json object.

    Missing fields become empty strings or empty tuples.
    """
    return BlockMetadata(
        title=scalar_text(data.get("title")),
        description=scalar_text(data.get("description")),
        name=scalar_text(data.get("name")),
        category=scalar_text(data.get("category")),
        supports=parse_supports(data.get("supports"), exp_prefix),
        attributes=tuple(truthy_keys(data.get("attributes"), exp_prefix)),
    )


def read_block_json(
    file: Path,
    exp_prefix: str = EXPERIMENTAL_PREFIX,
) -> BlockMetadata:
    """
    Read one block.json file.

    Parameters
    ----------
    file : Path
        Path to the metadata file. Read as UTF-8.
    exp_prefix : str, default=EXPERIMENTAL_PREFIX
        Prefix marking experimental keys.

    Returns
    -------
    BlockMetadata
        Documented fields of the block.

    Raises
    ------
    BlockJsonReadError
        If the file cannot be read, is not valid JSON, or does not hold a
        JSON object at the top level.
    """
    log.debug("Reading metadata file: %s", file)
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        log.exception("Invalid JSON in %s", file)
        raise BlockJsonReadError(f"Invalid JSON in {file}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        log.exception("Failed to read %s", file)
        raise BlockJsonReadError(f"Failed to read {file}: {e}") from e

    if not isinstance(data, Mapping):
        raise BlockJsonReadError(
            f"Expected a JSON object in {file}, got {type(data).__name__}.",
        )

    block = parse_block_metadata(data, exp_prefix)
    log.debug(
        "Block %s: %d supports, %d attributes",
        block.name,
        len(block.supports),
        len(block.attributes),
    )
    return block
