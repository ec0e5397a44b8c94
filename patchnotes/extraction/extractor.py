"""
Block extraction for Patchnotes.

Turns a parsed markup subtree into a generic Block tree: runs of inline
content become text blocks and block-level elements become nested blocks.
The input soup is never modified.
"""

from typing import Iterator, List, Optional

from bs4 import NavigableString, Tag
from bs4.element import PageElement

from ..models import Block

# Elements whose text is merged into the surrounding text run
INLINE_ELEMENTS = frozenset({"em", "strong", "small", "a", "b", "i", "tt", "code"})

# Grouping wrapper whose children are spliced into its parent's sibling list
CONTAINER_ELEMENT = "div"


def is_inline(node: PageElement) -> bool:
    """Anything that is not an element (text, comments) counts as inline."""
    if not isinstance(node, Tag):
        return True
    return node.name in INLINE_ELEMENTS


def node_text(node: PageElement) -> str:
    """Concatenate the text nodes below ``node``; comments contribute nothing."""
    if isinstance(node, NavigableString):
        return str(node) if type(node) is NavigableString else ""
    return "".join(
        str(s) for s in node.descendants if type(s) is NavigableString
    )


def _unwrapped_children(node: Tag) -> Iterator[PageElement]:
    for child in node.children:
        if isinstance(child, Tag) and child.name == CONTAINER_ELEMENT:
            yield from child.children
        else:
            yield child


def find_start(node: Tag, start_id: str) -> Optional[Tag]:
    """Find the child of ``node`` where extraction with ``start_id`` begins."""
    for child in _unwrapped_children(node):
        if isinstance(child, Tag) and child.get("id") == start_id:
            return child
    return None


def extract_blocks(node: Tag, start_id: Optional[str] = None) -> List[Block]:
    """
    Extract the child blocks of ``node``.

    Args:
        node: The markup element whose children are extracted
        start_id: If given, siblings before the element with this id are skipped

    Returns:
        Ordered list of blocks; text blocks for inline runs and container
        blocks for block-level children
    """
    blocks: List[Block] = []
    text = ""
    started = start_id is None

    for child in _unwrapped_children(node):
        if not started:
            if isinstance(child, Tag) and child.get("id") == start_id:
                started = True
            else:
                continue

        if is_inline(child):
            text += node_text(child)
            continue

        if text:
            blocks.append(Block(text=text))
        blocks.append(Block(children=extract_blocks(child)))
        text = ""

    if text:
        blocks.append(Block(text=text))

    return blocks


def build_tree(node: Tag, start_id: Optional[str] = None) -> Block:
    """Wrap the extracted blocks of ``node`` in an unclassified root block."""
    return Block(children=extract_blocks(node, start_id=start_id))
