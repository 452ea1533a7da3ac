"""TrackMan report scraper.

Reads a rendered TrackMan shot report, either live from its URL or from a saved
HTML page, extracts the individual shots plus any averages row, computes session
statistics and writes the result as JSON.  An Excel workbook with one sheet of
shots and one sheet of summary statistics can be written alongside it.

Usage
-----
python main.py --url <report url> --output report.json
python main.py --html saved_report.html --excel shots.xlsx
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from trackman.models import ScrapeResult
from trackman.report import build_result
from trackman.scraper import TrackmanError, scrape_report, snapshot_from_html

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("trackman_report.json")


# -------------------------
# Output helpers
# -------------------------

def shots_to_frame(result: ScrapeResult) -> pd.DataFrame:
    records = [
        {"shot": idx, **shot.to_dict()}
        for idx, shot in enumerate(result.shots, start=1)
    ]
    return pd.DataFrame.from_records(records)


def summary_to_frame(result: ScrapeResult) -> pd.DataFrame:
    record = {"club": result.club, "date": result.date}
    if result.stats is not None:
        record.update(result.stats.to_dict())
    return pd.DataFrame.from_records([record])


def write_excel(result: ScrapeResult, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        shots_to_frame(result).to_excel(writer, sheet_name="shots", index=False)
        summary_to_frame(result).to_excel(writer, sheet_name="summary", index=False)


def run(
    *,
    url: Optional[str] = None,
    html_path: Optional[Path] = None,
    output_path: Path = DEFAULT_OUTPUT,
    excel_path: Optional[Path] = None,
) -> dict:
    """Scrape one report and write it to *output_path*; return the payload."""

    if (url is None) == (html_path is None):
        raise ValueError("Provide exactly one of url or html_path")

    if url is not None:
        result = scrape_report(url)
    else:
        logger.info("Reading saved report: %s", html_path)
        result = build_result(snapshot_from_html(Path(html_path).read_text(encoding="utf-8")))

    payload = result.to_dict()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info("Wrote %d shots to %s", len(result.shots), output_path.resolve())

    if excel_path is not None:
        write_excel(result, excel_path)
        logger.info("Wrote %s", excel_path.resolve())
    return payload


# -------------------------
# CLI entry-point
# -------------------------

def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="TrackMan report URL to scrape.")
    source.add_argument(
        "--html",
        type=Path,
        help="Saved, fully rendered report page to read instead of a URL.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="JSON file to write (default: trackman_report.json)",
    )
    parser.add_argument(
        "--excel",
        type=Path,
        help="Optional Excel workbook with shots and summary sheets.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging for detailed progress information.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output, showing only warnings and errors.",
    )

    args = parser.parse_args(argv)

    if args.verbose and args.quiet:
        parser.error("--verbose and --quiet are mutually exclusive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        run(
            url=args.url,
            html_path=args.html,
            output_path=args.output,
            excel_path=args.excel,
        )
    except TrackmanError as exc:
        raise SystemExit(f"Scraping error: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"File error: {exc}") from exc


if __name__ == "__main__":
    main()
