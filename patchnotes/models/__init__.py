"""Data models for Patchnotes."""

from .blocks import Block, BlockType
from .changes import ChangeRecord, ChangeLog

__all__ = [
    "Block",
    "BlockType",
    "ChangeRecord",
    "ChangeLog"
]
