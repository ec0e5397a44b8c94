"""
Base importer interface for Patchnotes.

This module defines the abstract interface that all changelog document
importers must implement, plus the extraction steps they share.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..errors import DocumentStructureError
from ..extraction import build_tree, classify_tree, prune_tree
from ..models import Block, ChangeRecord
from ..tags import TagRules


class BaseImporter(ABC):
    """
    Abstract base class for all changelog document importers.

    Each importer converts one document shape (hotfix lists, content update
    notes) into ChangeRecord objects.
    """

    def __init__(self, rules: TagRules, container_selector: str = ".Blog .detail"):
        self.rules = rules
        self.container_selector = container_selector

    @abstractmethod
    def collect(self, soup: BeautifulSoup, url: Optional[str] = None) -> List[ChangeRecord]:
        """
        Extract all change records from a parsed document.

        Args:
            soup: The parsed document
            url: The URL the document was retrieved from

        Returns:
            List of ChangeRecord objects in document order
        """
        pass

    def find_container(self, soup: BeautifulSoup) -> Tag:
        """Locate the article detail container of the document."""
        container = soup.select_one(self.container_selector)
        if container is None:
            raise DocumentStructureError(
                f"No element matches {self.container_selector!r} in document"
            )
        return container

    def classified_tree(self, container: Tag, start_id: Optional[str] = None) -> Block:
        """Extract, prune and classify the block tree below ``container``."""
        return classify_tree(prune_tree(build_tree(container, start_id=start_id)))
