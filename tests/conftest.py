"""
Shared fixtures for tests.
"""

import json

import pytest

from blockjson2md.config import (
    BLOCK_LIBRARY_SUBDIR,
    DOCS_FILE_SUBPATH,
    END_TOKEN,
    START_TOKEN,
)

DOCS_PREFIX = "# Core Blocks Reference\n\nIntro text.\n\n"
DOCS_SUFFIX = "\n\n## Footer\n\nKeep me.\n"


@pytest.fixture(name="paragraph_metadata")
def fixture_paragraph_metadata():
    return {
        "title": "Paragraph",
        "description": "A block of text.",
        "name": "core/paragraph",
        "category": "text",
        "supports": {"anchor": True},
        "attributes": {"content": {}},
    }


@pytest.fixture(name="paragraph_entry")
def fixture_paragraph_entry():
    return (
        "\n## Paragraph\n\nA block of text.\n\n"
        "-\t**Name:** core/paragraph\n"
        "-\t**Category:** text\n"
        "-\t**Supports:** anchor\n"
        "-\t**Attributes:** content\n"
    )


@pytest.fixture(name="project_root")
def fixture_project_root(tmp_path):
    """Project tree with an empty block library and a docs file with markers."""
    (tmp_path / BLOCK_LIBRARY_SUBDIR).mkdir(parents=True)
    docs = tmp_path / DOCS_FILE_SUBPATH
    docs.parent.mkdir(parents=True)
    docs.write_text(
        f"{DOCS_PREFIX}{START_TOKEN}\nold content\n{END_TOKEN}{DOCS_SUFFIX}",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture(name="block_library")
def fixture_block_library(project_root):
    return project_root / BLOCK_LIBRARY_SUBDIR


@pytest.fixture(name="docs_file")
def fixture_docs_file(project_root):
    return project_root / DOCS_FILE_SUBPATH


@pytest.fixture(name="add_block")
def fixture_add_block(block_library):
    """Factory writing a block.json file into its own block directory."""

    def _add_block(dirname, metadata):
        block_dir = block_library / dirname
        block_dir.mkdir()
        path = block_dir / "block.json"
        if isinstance(metadata, str):
            path.write_text(metadata, encoding="utf-8")
        else:
            path.write_text(json.dumps(metadata), encoding="utf-8")
        return path

    return _add_block


@pytest.fixture(name="docs_parts")
def fixture_docs_parts():
    """Text before the start marker and after the end marker of ``docs_file``."""
    return DOCS_PREFIX, DOCS_SUFFIX
