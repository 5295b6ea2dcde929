"""
Base error class for the blockjson2md package.
"""


class BlockJson2MdError(Exception):
    """Base class for all errors raised by blockjson2md."""
