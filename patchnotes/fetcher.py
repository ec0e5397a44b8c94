"""
Page retrieval for Patchnotes.

Fetches the changelog index and documents over HTTP. A single deadline
covers the whole batch of requests.
"""

import logging
import time
from typing import List, Optional

import httpx
from bs4 import BeautifulSoup

from .errors import FetchError


class PageFetcher:
    """
    Fetches and parses pages with one shared deadline.
    """

    def __init__(self, timeout: float = 60.0, user_agent: str = "patchnotes/0.1",
                 transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize the page fetcher.

        Args:
            timeout: Seconds available for all requests made through this fetcher
            user_agent: User-Agent header sent with every request
            transport: Optional httpx transport, used by tests
        """
        self.timeout = timeout
        self.deadline = time.monotonic() + timeout
        self.client = httpx.Client(
            headers={"User-Agent": user_agent},
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.client.close()

    def remaining(self) -> float:
        return self.deadline - time.monotonic()

    def fetch(self, url: str):
        """
        Retrieve a page and parse it.

        Args:
            url: Page URL

        Returns:
            Tuple of (BeautifulSoup document, final URL after redirects)

        Raises:
            FetchError: If the deadline has passed or the request fails
        """
        remaining = self.remaining()
        if remaining <= 0:
            raise FetchError(f"Timed out after {self.timeout:.0f}s before fetching {url}")

        logging.info(url)
        try:
            response = self.client.get(url, timeout=remaining)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(f"Timed out fetching {url}: {e}") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(f"Request for {url} failed: {e}") from e
        except httpx.RequestError as e:
            raise FetchError(f"Failed to connect to {url}: {e}") from e

        return BeautifulSoup(response.text, "lxml"), str(response.url)


def discover_urls(index: BeautifulSoup, index_url: str, link_selector: str,
                  stop_after: Optional[str] = None) -> List[str]:
    """
    Collect article URLs from the changelog index page.

    Args:
        index: Parsed index page
        index_url: URL the index was retrieved from, for resolving relative links
        link_selector: CSS selector of the article links
        stop_after: Href marker of the oldest article to include

    Returns:
        Absolute article URLs in page order
    """
    urls = []
    for link in index.select(link_selector):
        href = link.get("href")
        if not href:
            continue
        urls.append(str(httpx.URL(index_url).join(href)))
        if stop_after and stop_after in href:
            break

    logging.info(f"Found {len(urls)} articles on {index_url}")
    return urls
