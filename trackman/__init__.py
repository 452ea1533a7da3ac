"""Toolkit for extracting shot data from TrackMan report pages."""

from .models import AveragesRecord, ReportMetadata, ScrapeResult, ShotRecord, Snapshot, SummaryStats
from .aggregator import summarize_shots
from .report import build_result
from .scraper import InvalidReportURL, ScrapeError, TrackmanError, scrape_report, snapshot_from_html

__all__ = [
    "AveragesRecord",
    "InvalidReportURL",
    "ReportMetadata",
    "ScrapeError",
    "ScrapeResult",
    "ShotRecord",
    "Snapshot",
    "SummaryStats",
    "TrackmanError",
    "build_result",
    "scrape_report",
    "snapshot_from_html",
    "summarize_shots",
]
