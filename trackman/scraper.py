"""Utilities for turning a TrackMan report URL into a scrape result."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List
from urllib.parse import unquote, urlparse

import requests
from bs4 import BeautifulSoup

from .models import ScrapeResult, Snapshot
from .report import build_result

logger = logging.getLogger(__name__)

REPORT_URL_MARKER = "trackman"
DEFAULT_TIMEOUT = 30
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)

# Title-like elements, most specific first.
TITLE_SELECTORS = (
    '[class*="club" i]',
    "h2, h3, h4",
    '[class*="title"]',
)
BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4",
    "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
    "table", "tr", "ul",
]
LINE_BREAK = "\u2029"


class TrackmanError(Exception):
    """Base class for failures outside the extraction core."""

    status_code = 500


class InvalidReportURL(TrackmanError, ValueError):
    """Raised when a URL does not point at a TrackMan report."""

    status_code = 400


class ScrapeError(TrackmanError, RuntimeError):
    """Raised when the report page could not be obtained."""

    status_code = 500


def validate_report_url(url: str) -> str:
    if not url or REPORT_URL_MARKER not in url:
        raise InvalidReportURL("Invalid TrackMan URL")
    return url


def build_session() -> requests.Session:
    """Return a requests session with a browser-like user agent."""

    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def default_fetch(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch *url*; ``file://`` URLs are read from disk."""

    parsed = urlparse(url)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path)).read_text(encoding="utf-8")

    with build_session() as session:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
        return response.text


def _page_text(doc: BeautifulSoup) -> str:
    # Approximate rendered text: source whitespace collapses, blocks end a line.
    for cell in doc.find_all(["td", "th"]):
        cell.append(" ")
    for block in doc.find_all(BLOCK_TAGS):
        block.append(LINE_BREAK)
    root = doc.body or doc
    lines = (" ".join(chunk.split()) for chunk in root.get_text().split(LINE_BREAK))
    return "\n".join(line for line in lines if line)


def _title_candidates(doc: BeautifulSoup) -> List[str]:
    candidates: List[str] = []
    for selector in TITLE_SELECTORS:
        for element in doc.select(selector):
            text = element.get_text(" ", strip=True)
            if text:
                candidates.append(text)
    return candidates


def snapshot_from_html(html: str) -> Snapshot:
    """Reduce a rendered report page to the snapshot the extractors work on."""

    doc = BeautifulSoup(html, "lxml")
    tables = []
    for table in doc.find_all("table"):
        rows = []
        for row in table.find_all("tr"):
            rows.append([cell.get_text(" ", strip=True) for cell in row.find_all(["td", "th"])])
        tables.append(rows)
    candidates = _title_candidates(doc)
    return Snapshot.from_parts(
        tables=tables,
        full_text=_page_text(doc),
        title_candidates=candidates,
    )


def scrape_report(
    url: str,
    *,
    fetcher: Callable[[str], str] = default_fetch,
) -> ScrapeResult:
    """Download the report at *url* and extract its shots and statistics."""

    validate_report_url(url)
    logger.info("Scraping URL: %s", url)
    try:
        html = fetcher(url)
    except (requests.RequestException, OSError) as exc:
        logger.error("Failed to fetch %s: %s", url, exc)
        raise ScrapeError(f"Failed to load report page {url}: {exc}") from exc

    result = build_result(snapshot_from_html(html))
    if not result.shots:
        logger.warning("No shot data detected for %s", url)
    return result
