"""
Integration tests for pipeline.py module.
"""

import os
from unittest.mock import patch

import pytest

from blockjson2md.blockjson import BlockJsonReadError
from blockjson2md.config import END_TOKEN, START_TOKEN, Config
from blockjson2md.pipeline import generate_block_docs


@pytest.fixture(name="config")
def fixture_config(project_root):
    return Config.from_root(project_root)


class TestGenerateBlockDocs:
    """Tests for the generate_block_docs function."""

    def test_single_block_succeeds(
        self,
        config,
        add_block,
        docs_file,
        docs_parts,
        paragraph_metadata,
        paragraph_entry,
    ):
        prefix, suffix = docs_parts
        add_block("paragraph", paragraph_metadata)

        result = generate_block_docs(config)

        expected = f"{prefix}{START_TOKEN}\n{paragraph_entry}\n{END_TOKEN}{suffix}"
        assert result.found
        assert docs_file.read_text(encoding="utf-8") == expected

    def test_no_blocks_gives_empty_region_succeeds(
        self,
        config,
        docs_file,
        docs_parts,
    ):
        prefix, suffix = docs_parts

        generate_block_docs(config)

        assert docs_file.read_text(encoding="utf-8") == (
            f"{prefix}{START_TOKEN}\n\n{END_TOKEN}{suffix}"
        )

    def test_entries_follow_discovery_order_succeeds(
        self,
        config,
        add_block,
        docs_file,
    ):
        add_block("zeta", {"title": "Zeta", "name": "core/zeta"})
        add_block("alpha", {"title": "Alpha", "name": "core/alpha"})
        add_block("mid", {"title": "Mid", "name": "core/mid"})
        with os.scandir(config.block_library_dir) as entries:
            discovered = [entry.name for entry in entries]

        generate_block_docs(config)

        text = docs_file.read_text(encoding="utf-8")
        positions = {name: text.index(f"## {name.title()}\n") for name in discovered}
        assert sorted(discovered, key=positions.__getitem__) == discovered

    def test_complex_supports_succeeds(self, config, add_block, docs_file):
        add_block(
            "group",
            {
                "title": "Group",
                "description": "Gather blocks in a layout container.",
                "name": "core/group",
                "category": "design",
                "supports": {
                    "align": ["wide", "full"],
                    "anchor": True,
                    "html": False,
                    "color": {
                        "gradients": True,
                        "link": True,
                        "__experimentalDefaultControls": {"background": True},
                    },
                    "spacing": {"margin": ["top", "bottom"], "padding": True},
                    "__experimentalLayout": True,
                },
                "attributes": {
                    "tagName": {"type": "string", "default": "div"},
                    "templateLock": {"type": ["string", "boolean"]},
                },
            },
        )

        generate_block_docs(config)

        text = docs_file.read_text(encoding="utf-8")
        assert (
            "-\t**Supports:** align (full, wide), anchor, color (gradients, link), "
            "spacing (margin, padding)\n" in text
        )
        assert "-\t**Attributes:** tagName, templateLock\n" in text
        assert "__experimental" not in text

    def test_idempotent_succeeds(self, config, add_block, docs_file, paragraph_metadata):
        add_block("paragraph", paragraph_metadata)

        generate_block_docs(config)
        first = docs_file.read_bytes()
        generate_block_docs(config)

        assert docs_file.read_bytes() == first

    def test_malformed_file_aborts_without_write_fails(
        self,
        config,
        add_block,
        docs_file,
        paragraph_metadata,
    ):
        add_block("paragraph", paragraph_metadata)
        add_block("broken", "{ not json")
        original = docs_file.read_bytes()

        with pytest.raises(BlockJsonReadError):
            generate_block_docs(config)

        assert docs_file.read_bytes() == original

    def test_missing_markers_no_op_succeeds(self, config, add_block, docs_file):
        add_block("paragraph", {"title": "Paragraph"})
        docs_file.write_text("# No markers\n", encoding="utf-8")

        result = generate_block_docs(config)

        assert not result.found
        assert docs_file.read_text(encoding="utf-8") == "# No markers\n"

    def test_custom_tokens_succeeds(self, tmp_path, add_block, paragraph_metadata):
        add_block("paragraph", paragraph_metadata)
        library = add_block("heading", {"title": "Heading"}).parent.parent
        docs = tmp_path / "custom.md"
        docs.write_text("x\n<!-- BEGIN -->\n<!-- END -->\ny\n", encoding="utf-8")
        config = Config(
            block_library_dir=library,
            docs_file=docs,
            start_token="<!-- BEGIN -->",
            end_token="<!-- END -->",
        )

        result = generate_block_docs(config)

        assert result.found
        text = docs.read_text(encoding="utf-8")
        assert text.startswith("x\n<!-- BEGIN -->\n")
        assert text.endswith("\n<!-- END -->\ny\n")
        assert "## Paragraph" in text
        assert "## Heading" in text

    def test_unreadable_library_aborts_without_write_fails(
        self,
        config,
        add_block,
        docs_file,
        paragraph_metadata,
    ):
        add_block("paragraph", paragraph_metadata)
        generate_block_docs(config)
        generated = docs_file.read_bytes()
        real_scandir = os.scandir

        def _scandir(path="."):
            if os.fspath(path) == os.fspath(config.block_library_dir):
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        with patch("blockjson2md.blockjson.os.scandir", side_effect=_scandir):
            with pytest.raises(OSError):
                generate_block_docs(config)

        assert docs_file.read_bytes() == generated
        assert "## Paragraph" in docs_file.read_text(encoding="utf-8")
