"""
Functions rendering block metadata as markdown reference entries.
"""

from collections.abc import Iterable

from .model import (
    BlockMetadata,
    SupportFlag,
    SupportGroup,
    SupportListing,
    SupportValue,
)


def render_support(support: SupportValue) -> str:
    """
    Render a single support entry.

    Flags render as their name, listings and groups as
    ``name (item1, item2)`` with items sorted.
    """
    match support:
        case SupportListing(name=name, values=values):
            return f"{name} ({', '.join(sorted(values))})"
        case SupportGroup(name=name, keys=keys):
            return f"{name} ({', '.join(sorted(keys))})"
        case SupportFlag(name=name):
            return name
        case _:
            raise TypeError(f"Unknown support value: {support!r}")


def format_block_entry(block: BlockMetadata) -> str:
    """
    Render one block as a markdown entry.

    Parameters
    ----------
    block : BlockMetadata
        Metadata of the block to render.

    Returns
    -------
    str
        Markdown fragment starting with a newline and ending with the newline
        after the attributes line, so fragments can be concatenated directly.

    Notes
    -----
    Title and description are inserted verbatim, without escaping markdown.
    """
    supports = ", ".join(sorted(render_support(s) for s in block.supports))
    attributes = ", ".join(sorted(block.attributes))

    return (
        f"\n## {block.title}\n"
        "\n"
        f"{block.description}\n"
        "\n"
        f"-\t**Name:** {block.name}\n"
        f"-\t**Category:** {block.category}\n"
        f"-\t**Supports:** {supports}\n"
        f"-\t**Attributes:** {attributes}\n"
    )


def format_block_entries(blocks: Iterable[BlockMetadata]) -> str:
    """Concatenate the entries of ``blocks`` in the given order."""
    return "".join(format_block_entry(block) for block in blocks)
