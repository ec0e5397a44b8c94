"""
Leaf classification for Patchnotes.

Assigns Date, Tag or Change to every leaf block using ordered heuristics
tuned to the changelog markup: tags and dates are always short, change
statements are full sentences or carry a measurable delta. The order of
the checks in ``classify`` is load-bearing.
"""

import re
from datetime import date
from typing import Optional

from ..models import Block, BlockType

# Tags and dates are always shorter than this many UTF-8 bytes.
CHANGE_MIN_BYTES = 50

# Tags never contain a full stop, while almost every change is a sentence.
CHANGE_MARKERS = (".", "%", "/ping")

CHANGE_SUFFIXES = (":",)

MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

# "January 2, 2006": full month name, day, comma, four-digit year
LONG_DATE_PATTERN = re.compile(
    r"(" + "|".join(MONTHS) + r") (\d{1,2}), (\d{4})",
    re.IGNORECASE,
)


def parse_long_date(text: str) -> Optional[date]:
    """
    Parse a long-form date such as "January 24, 2023".

    Returns:
        The date, or None if the text is not exactly a valid long-form date
    """
    match = LONG_DATE_PATTERN.fullmatch(text)
    if not match:
        return None
    month, day, year = match.groups()
    try:
        return date(int(year), MONTHS.index(month.lower()) + 1, int(day))
    except ValueError:
        return None


def classify(block: Block) -> BlockType:
    if block.children:
        return BlockType.UNCLASSIFIED

    text = block.text

    if len(text.encode("utf-8")) >= CHANGE_MIN_BYTES:
        return BlockType.CHANGE

    # Changes that are not sentences happen to contain a percentage.
    if any(marker in text for marker in CHANGE_MARKERS):
        return BlockType.CHANGE

    if text.endswith(CHANGE_SUFFIXES):
        return BlockType.CHANGE

    if parse_long_date(text) is not None:
        return BlockType.DATE

    return BlockType.TAG


def classify_tree(block: Block) -> Block:
    """Return a copy of ``block`` with every node's type set."""
    children = [classify_tree(child) for child in block.children]
    classified = block.model_copy(update={"children": children})
    return classified.model_copy(update={"type": classify(classified)})
