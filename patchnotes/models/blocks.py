"""
Generic block tree for Patchnotes.

This module defines the intermediate tree that every changelog document is
reduced to before it is flattened into change records.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class BlockType(str, Enum):
    """Classification of a block. Only leaves carry a type other than UNCLASSIFIED."""

    UNCLASSIFIED = "unclassified"
    DATE = "date"
    TAG = "tag"
    CHANGE = "change"


class Block(BaseModel):
    """
    A node of the generic text tree extracted from markup.

    Text lives on leaves only; a block with children carries empty text once
    the tree has been pruned.
    """

    text: str = Field(
        default="",
        description="Rendered text of an inline run; empty for container blocks"
    )

    type: BlockType = Field(
        default=BlockType.UNCLASSIFIED,
        description="Classification assigned by the classifier"
    )

    children: List['Block'] = Field(
        default_factory=list,
        description="Ordered child blocks, exclusively owned by this block"
    )

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self):
        """Yield this block and all of its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


# Enable forward references for self-referencing model
Block.model_rebuild()
