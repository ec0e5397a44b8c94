"""
End-to-end pipeline for Patchnotes.

Documents are processed one at a time, in order. Their records are then
reconciled as one batch against the archive of earlier runs.
"""

import logging
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from .config import ConfigManager
from .fetcher import PageFetcher, discover_urls
from .importers import importer_for_url
from .models import ChangeLog, ChangeRecord
from .tags import TagRules, check_tags, fix_casing, read_archive_tags


def scrape_document(soup: BeautifulSoup, url: str, config: ConfigManager,
                    rules: TagRules, final_url: Optional[str] = None) -> List[ChangeRecord]:
    """
    Route one parsed document to its importer and collect its records.

    The requested URL selects the importer; the final URL after redirects
    becomes the records' source URL.
    """
    importer = importer_for_url(url, config, rules)
    return importer.collect(soup, final_url or url)


def finalize(changes: List[ChangeRecord], rules: TagRules,
             archive_tags: Iterable[str] = ()) -> ChangeLog:
    """
    Reconcile tag casing over the whole batch and run the consistency check.

    Raises:
        TagCasingError: If an upper-case tag survives reconciliation
    """
    changes = fix_casing(changes, rules, archive_tags)
    check_tags(changes)
    return ChangeLog(changes=changes)


def run_pipeline(urls: Optional[List[str]], config: ConfigManager, rules: TagRules,
                 fetcher: PageFetcher, archive_dir: Optional[str] = None) -> ChangeLog:
    """
    Fetch, extract and reconcile a batch of changelog documents.

    Args:
        urls: Document URLs; discovered from the index page when empty
        config: Configuration manager
        rules: Tag rule tables
        fetcher: Page fetcher holding the batch deadline
        archive_dir: Directory of earlier outputs used to seed tag casing

    Returns:
        The change log for the batch
    """
    if not urls:
        index, index_url = fetcher.fetch(config.index_url)
        urls = discover_urls(index, index_url, config.link_selector, config.stop_after)

    all_changes: List[ChangeRecord] = []
    for url in urls:
        soup, final_url = fetcher.fetch(url)
        all_changes.extend(scrape_document(soup, url, config, rules, final_url))

    logging.info(f"Collected {len(all_changes)} changes from {len(urls)} documents")

    archive_tags = read_archive_tags(archive_dir)
    return finalize(all_changes, rules, archive_tags)
