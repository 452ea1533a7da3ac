"""Assemble a full scrape result from a page snapshot."""
from __future__ import annotations

import logging

from .aggregator import summarize_shots
from .models import ScrapeResult, Snapshot
from .parser import detect_club, detect_date, extract_table_shots, extract_text_shots

logger = logging.getLogger(__name__)


def build_result(snapshot: Snapshot) -> ScrapeResult:
    """Run every extractor over *snapshot* and return the combined result.

    Table rows are preferred; the page text is only scanned when no table row
    produced a shot. An empty snapshot yields an empty result, not an error.
    """

    club = detect_club(snapshot.title_candidates)
    date = detect_date(snapshot.full_text)

    shots, averages = extract_table_shots(snapshot.tables)
    if not shots:
        logger.debug("No shots in tables; falling back to page text")
        shots = extract_text_shots(snapshot.full_text)

    stats = summarize_shots(shots) if shots else None
    logger.debug("Assembled result: club=%s date=%s shots=%d", club, date, len(shots))
    return ScrapeResult(
        club=club,
        date=date,
        shots=tuple(shots),
        averages=averages,
        stats=stats,
    )
