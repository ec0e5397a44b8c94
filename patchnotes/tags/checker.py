"""Tag consistency checks for Patchnotes."""

import logging
from typing import Iterable, List, Tuple

from ..models import ChangeRecord


def check_tags(changes: Iterable[ChangeRecord]) -> List[Tuple[str, str]]:
    """
    Warn about tags that are a prefix of another tag.

    Such pairs usually name the same thing and should be unified in the alias
    table. The check never fails the run.

    Returns:
        (prefix, longer tag) pairs among neighbours in sorted order
    """
    tags = sorted({tag for change in changes for tag in change.tags})

    collisions = []
    for previous, current in zip(tags, tags[1:]):
        if current.startswith(previous):
            logging.warning(f"tags: {previous!r} is prefix of {current!r}")
            collisions.append((previous, current))

    return collisions
