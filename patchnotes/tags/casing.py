"""
Tag casing reconciliation for Patchnotes.

Some headings are written in upper case in the markup instead of being
styled that way. This module maps every tag to one canonical spelling,
using the current batch and the archive of earlier runs, and refuses to
publish tags that are still upper case afterwards.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..errors import ArchiveError, TagCasingError
from ..models import ChangeRecord
from .rules import TagRules


def is_upper_case(tag: str) -> bool:
    """A tag is upper case if it contains a letter and equals its upper-cased form."""
    return any(ch.isalpha() for ch in tag) and tag == tag.upper()


def read_archive_tags(archive_dir: Optional[str]) -> List[str]:
    """
    Collect the distinct tags of every change log in the archive directory.

    Args:
        archive_dir: Directory holding earlier ``*.json`` outputs

    Returns:
        Sorted list of tags; empty if the directory does not exist

    Raises:
        ArchiveError: If a non-empty file is not a valid change log
    """
    if not archive_dir:
        return []

    directory = Path(archive_dir)
    if not directory.is_dir():
        logging.info(f"No tag archive found at {directory}")
        return []

    tags = set()
    for path in sorted(directory.glob("*.json")):
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
        if not content.strip():
            continue

        try:
            old = json.loads(content)
        except json.JSONDecodeError as e:
            raise ArchiveError(f"{path}: {e}") from e

        if not isinstance(old, dict):
            raise ArchiveError(f"{path}: expected an object with a 'Changes' list")

        changes = old.get("Changes") or []
        if not isinstance(changes, list):
            raise ArchiveError(f"{path}: 'Changes' must be a list")

        for change in changes:
            if not isinstance(change, dict):
                raise ArchiveError(f"{path}: change entries must be objects, found {change!r}")
            change_tags = change.get("Tags") or []
            if not isinstance(change_tags, list) or not all(isinstance(tag, str) for tag in change_tags):
                raise ArchiveError(f"{path}: 'Tags' must be a list of strings, found {change_tags!r}")
            tags.update(change_tags)

    logging.info(f"Loaded {len(tags)} archived tags from {directory}")
    return sorted(tags)


def build_casing_map(changes: Iterable[ChangeRecord], archive_tags: Iterable[str],
                     rules: TagRules) -> Dict[str, str]:
    """
    Build the map from upper-cased tag to canonical spelling.

    Sources in order of precedence: the static overrides, the first mixed-case
    spelling seen in the current batch, then the archive.
    """
    casing = dict(rules.casing_overrides)

    # Canonical spellings map to themselves so a second pass changes nothing.
    for canonical in rules.casing_overrides.values():
        if canonical:
            casing.setdefault(canonical.upper(), canonical)

    for change in changes:
        for tag in change.tags:
            if not is_upper_case(tag):
                casing.setdefault(tag.upper(), tag)

    for tag in archive_tags:
        if not is_upper_case(tag):
            casing.setdefault(tag.upper(), tag)

    return casing


def fix_casing(changes: List[ChangeRecord], rules: TagRules,
               archive_tags: Iterable[str] = ()) -> List[ChangeRecord]:
    """
    Rewrite every tag to its canonical spelling.

    Tags mapped to the empty string are removed.

    Args:
        changes: Records of the current batch
        rules: Tag rules providing the casing overrides
        archive_tags: Tags from earlier runs

    Returns:
        New records with reconciled tags

    Raises:
        TagCasingError: If any tag is still upper case after rewriting
    """
    casing = build_casing_map(changes, archive_tags, rules)

    fixed = []
    invalid = []
    for change in changes:
        tags = []
        for tag in change.tags:
            tag = casing.get(tag.upper(), tag)
            if not tag:
                continue
            if is_upper_case(tag):
                logging.error(f"Upper case tag: {tag}")
                invalid.append(tag)
            tags.append(tag)
        fixed.append(change.model_copy(update={"tags": tags}))

    if invalid:
        raise TagCasingError(invalid)

    return fixed
