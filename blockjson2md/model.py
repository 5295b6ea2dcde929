"""
Data model for block metadata read from block.json files.

Only the fields needed for the reference table are kept. Values under
``supports`` are classified when the file is read, so rendering never has
to inspect raw JSON types.
"""

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(slots=True, frozen=True)
class SupportFlag:
    """
    A support enabled by a plain truthy value, e.g. ``"anchor": true``.

    Attributes
    ----------
    name : str
        Support name.
    """

    name: str


@dataclass(slots=True, frozen=True)
class SupportListing:
    """
    A support given as a list of options, e.g. ``"align": ["wide", "full"]``.

    Attributes
    ----------
    name : str
        Support name.
    values : tuple[str, ...]
        Listed options in file order.
    """

    name: str
    values: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class SupportGroup:
    """
    A support configured by a nested object, e.g. ``"color": {"link": true}``.

    Attributes
    ----------
    name : str
        Support name.
    keys : tuple[str, ...]
        Truthy, non-experimental keys of the nested object in file order.
    """

    name: str
    keys: tuple[str, ...]


SupportValue: TypeAlias = SupportFlag | SupportListing | SupportGroup


@dataclass(slots=True, frozen=True)
class BlockMetadata:
    """
    Documented fields of a single block.

    Attributes
    ----------
    title : str, default=""
        Human readable block title.
    description : str, default=""
        Short description of the block.
    name : str, default=""
        Unique block name, e.g. ``core/paragraph``.
    category : str, default=""
        Inserter category.
    supports : tuple[SupportValue, ...], default=()
        Enabled supports in file order.
    attributes : tuple[str, ...], default=()
        Attribute names in file order.
    """

    title: str = ""
    description: str = ""
    name: str = ""
    category: str = ""
    supports: tuple[SupportValue, ...] = field(default_factory=tuple)
    attributes: tuple[str, ...] = field(default_factory=tuple)
