"""
Tree pruning for Patchnotes.

Collapses the degenerate structure left behind by extraction: empty
blocks, single-child wrappers and text runs split by empty elements.
"""

from ..models import Block


def prune(block: Block, join_text: bool) -> Block:
    """
    Return a pruned copy of ``block``.

    Children are pruned first. A child with a single grandchild is replaced by
    that grandchild, except while joining text when the grandchild carries its
    own text (so separate paragraphs are not glued together). Empty children
    are dropped, and while joining text a text child is appended to an
    immediately preceding text sibling.

    Args:
        block: Root of the subtree to prune
        join_text: Whether to merge adjacent text siblings

    Returns:
        A new block; ``block`` is left untouched
    """
    children = []
    for child in block.children:
        child = prune(child, join_text)

        # Keep text-bearing wrappers while joining, or adjacent paragraphs merge into one leaf.
        if len(child.children) == 1 and (not join_text or child.children[0].text == ""):
            child = child.children[0]

        if child.text == "" and not child.children:
            continue

        if join_text and child.text and children and children[-1].text:
            previous = children[-1]
            children[-1] = previous.model_copy(update={"text": previous.text + child.text})
            continue

        children.append(child)

    return block.model_copy(update={"children": children})


def trim_text(block: Block) -> Block:
    """Strip leading and trailing whitespace from the text of every block."""
    return block.model_copy(update={
        "text": block.text.strip(),
        "children": [trim_text(child) for child in block.children],
    })


def prune_tree(block: Block) -> Block:
    """Run the full pruning sequence: join text, trim, then unwrap nesting."""
    block = prune(block, join_text=True)
    block = trim_text(block)
    return prune(block, join_text=False)
