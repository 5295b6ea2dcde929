"""
Generate the core blocks reference table from block.json metadata.

This package scans a block library for ``block.json`` metadata files, renders
a markdown entry for each block and splices the result between the
autogenerated markers of the reference documentation file.

Main modules
------------
- config: Paths and marker tokens used by a run
- blockjson: Finding and reading block.json metadata files
- markdown: Rendering block metadata as markdown entries
- splice: Replacing the autogenerated region of the docs file
- pipeline: The full enumerate, read, render and splice pass
- model: Data models for block metadata
- blockjson2md: Entrypoint when run as a script
- args: Command-line argument parsing
- log: Logging configuration for command-line usage
"""
