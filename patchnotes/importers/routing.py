"""
Document routing for Patchnotes.

Chooses the importer for a document from its URL.
"""

from typing import Optional

from ..config import ConfigManager
from ..errors import DocumentStructureError
from ..tags import TagRules
from .base import BaseImporter
from .content_update import ContentUpdateImporter
from .hotfix import HotfixImporter


def importer_for_url(url: str, config: ConfigManager, rules: TagRules) -> BaseImporter:
    """
    Select the importer for a document URL.

    Args:
        url: Document URL
        config: Configuration providing the hotfix marker and content update routes
        rules: Tag rule tables handed to the importer

    Returns:
        The importer for the document's shape

    Raises:
        DocumentStructureError: If the URL matches no known document shape
    """
    selector = config.container_selector

    if config.hotfix_marker and config.hotfix_marker in url:
        return HotfixImporter(rules, container_selector=selector)

    route = _find_route(url, config)
    if route is not None:
        return ContentUpdateImporter(
            rules,
            first_heading=route["first_heading"],
            version=str(route["version"]),
            release_date=route["date"],
            container_selector=selector,
        )

    raise DocumentStructureError(f"Unrecognizable URL: {url}")


def _find_route(url: str, config: ConfigManager) -> Optional[dict]:
    for route in config.content_updates:
        if route["url_contains"] in url:
            return route
    return None
