"""
Hotfix document importer for Patchnotes.

Hotfix posts list dated change sets: a date heading, then category
paragraphs each followed by a list of changes.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from ..errors import DocumentStructureError
from ..extraction import collect_changes
from ..models import BlockType, ChangeRecord
from .base import BaseImporter


class HotfixImporter(BaseImporter):
    """Importer for hotfix posts, where every change set carries its own date."""

    def collect(self, soup: BeautifulSoup, url: Optional[str] = None) -> List[ChangeRecord]:
        tree = self.classified_tree(self.find_container(soup))

        if not any(block.type == BlockType.DATE for block in tree.children):
            raise DocumentStructureError(f"No change sets in document {url or '<local>'}")

        changes = collect_changes(tree, self.rules, url=url)
        logging.info(f"Collected {len(changes)} hotfix changes from {url or '<local>'}")
        return changes
