"""
Content update document importer for Patchnotes.

Content update notes carry no dates of their own. They are published for a
known release on a known day, and only the headings from a given anchor
onwards describe changes.
"""

import logging
from datetime import date
from typing import List, Optional

from bs4 import BeautifulSoup

from ..errors import DocumentStructureError
from ..extraction import collect_changes
from ..extraction.extractor import find_start
from ..models import ChangeRecord
from ..tags import TagRules
from .base import BaseImporter


class ContentUpdateImporter(BaseImporter):
    """
    Importer for content update notes of a single release.
    """

    def __init__(self, rules: TagRules, first_heading: str, version: str, release_date: date,
                 container_selector: str = ".Blog .detail"):
        """
        Initialize the content update importer.

        Args:
            rules: Tag rule tables
            first_heading: Element id of the first heading that lists changes
            version: Release version, used as the first tag of every change
            release_date: Date every change is recorded under
            container_selector: CSS selector of the article detail container
        """
        super().__init__(rules, container_selector)
        self.first_heading = first_heading
        self.version = version
        self.release_date = release_date

    def collect(self, soup: BeautifulSoup, url: Optional[str] = None) -> List[ChangeRecord]:
        container = self.find_container(soup)
        if find_start(container, self.first_heading) is None:
            raise DocumentStructureError(
                f"Heading #{self.first_heading} is not a top-level block in {url or '<local>'}"
            )

        tree = self.classified_tree(container, start_id=self.first_heading)
        changes = collect_changes(
            tree, self.rules, url=url,
            base_tags=[self.version],
            active_date=self.release_date,
        )
        logging.info(f"Collected {len(changes)} changes for {self.version} from {url or '<local>'}")
        return changes
