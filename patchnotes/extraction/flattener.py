"""
Record collection for Patchnotes.

Walks a classified block tree and emits one ChangeRecord per Change leaf,
tagged with the category path under which it was found.
"""

import logging
import posixpath
import re
from datetime import date
from typing import List, Optional
from urllib.parse import urlsplit, urlunsplit

from ..errors import DocumentStructureError
from ..models import Block, BlockType, ChangeRecord
from ..tags.normalizer import clean_tag, split_text_prefixes
from ..tags.rules import TagRules
from .classifier import parse_long_date

LEADING_SPACE = re.compile(r"\n[ \t]+")
REPEATED_SPACE = re.compile(r"[ \t]+")
REPEATED_NEWLINES = re.compile(r"\n\n+")

CHANGE_GROUP_TYPES = (BlockType.TAG, BlockType.CHANGE, BlockType.UNCLASSIFIED)


def normalize_text(text: str) -> str:
    text = text.strip()
    text = LEADING_SPACE.sub("\n", text)
    text = REPEATED_SPACE.sub(" ", text)
    return REPEATED_NEWLINES.sub("\n\n", text)


def source_url(document_url: Optional[str]) -> Optional[str]:
    """Strip the trailing document segment from a URL's path."""
    if not document_url:
        return None
    parts = urlsplit(document_url)
    return urlunsplit(parts._replace(path=posixpath.dirname(parts.path)))


class RecordCollector:
    """
    Collects change records from the classified tree of one document.

    Args:
        rules: Tag rule tables used for cleaning and exclusion
        url: URL of the originating document
        base_tags: Tags prefixed to every record, e.g. a release version
        active_date: Date for documents that do not embed one
    """

    def __init__(self, rules: TagRules, url: Optional[str] = None,
                 base_tags: Optional[List[str]] = None,
                 active_date: Optional[date] = None):
        self.rules = rules
        self.url = source_url(url)
        self.base_tags = list(base_tags or [])
        self.initial_date = active_date

    def collect(self, root: Block) -> List[ChangeRecord]:
        """
        Walk the top-level blocks of ``root``.

        A Date block opens a change set. A Tag block seen while a date is
        active becomes the pending category, and the block right after it is
        collected as that category's change group.

        Raises:
            DocumentStructureError: If the blocks do not follow the
                date / category / change-group grammar
        """
        records: List[ChangeRecord] = []
        active_date = self.initial_date
        category: Optional[str] = None
        in_change_set = False
        groups = 0

        for block in root.children:
            if category is not None:
                if block.type not in CHANGE_GROUP_TYPES:
                    raise DocumentStructureError(
                        f"No changes in category {category!r} ({active_date.isoformat()}): "
                        f"found {block.type.value} block {block.text!r}"
                    )
                tags = self.base_tags + clean_tag(category, self.rules)
                records.extend(self.flatten_changes(block, tags, active_date))
                category = None
                groups += 1
                continue

            if block.type == BlockType.DATE:
                if in_change_set and groups == 0:
                    raise DocumentStructureError(
                        f"No categories in change set {active_date.isoformat()}"
                    )
                active_date = parse_long_date(block.text)
                if active_date is None:
                    raise DocumentStructureError(f"Date block does not parse: {block.text!r}")
                in_change_set = True
                groups = 0
                continue

            if active_date is None:
                logging.debug(f"Skipping {block.type.value} block before the first date")
                continue

            if block.type == BlockType.TAG:
                category = block.text
            elif block.type in CHANGE_GROUP_TYPES:
                logging.debug(f"Skipping {block.type.value} block outside a category")
            else:
                raise DocumentStructureError(f"Unexpected block type: {block.type!r}")

        if category is not None:
            raise DocumentStructureError(
                f"No changes in category {category!r} ({active_date.isoformat()})"
            )
        if in_change_set and groups == 0:
            raise DocumentStructureError(f"No categories in change set {active_date.isoformat()}")

        return records

    def flatten_changes(self, block: Block, tags: List[str], active_date: date) -> List[ChangeRecord]:
        """
        Emit a record for every Change leaf below ``block``.

        Tag blocks extend the tag path for the siblings that follow them.
        Subtrees whose tag path matches an excluded tag yield nothing.
        """
        if self.rules.is_excluded(split_text_prefixes(tags)[0]):
            return []

        if block.type == BlockType.CHANGE:
            return [self._make_record(block.text, tags, active_date)]

        if block.type == BlockType.TAG:
            return []

        if block.type != BlockType.UNCLASSIFIED:
            raise DocumentStructureError(
                f"Unexpected {block.type.value} block {block.text!r} among changes"
            )

        records: List[ChangeRecord] = []
        stack = list(tags)
        for child in block.children:
            if child.type == BlockType.TAG:
                stack = stack + clean_tag(child.text, self.rules)
                continue
            records.extend(self.flatten_changes(child, stack, active_date))

        return records

    def _make_record(self, text: str, tags: List[str], active_date: date) -> ChangeRecord:
        real_tags, prefixes = split_text_prefixes(tags)
        text = normalize_text(text)
        if prefixes:
            text = " ".join(prefixes + [text])
        return ChangeRecord.create(date=active_date, tags=real_tags, text=text, url=self.url)


def collect_changes(root: Block, rules: TagRules, url: Optional[str] = None,
                    base_tags: Optional[List[str]] = None,
                    active_date: Optional[date] = None) -> List[ChangeRecord]:
    """Convenience wrapper around RecordCollector.collect."""
    collector = RecordCollector(rules, url=url, base_tags=base_tags, active_date=active_date)
    return collector.collect(root)
