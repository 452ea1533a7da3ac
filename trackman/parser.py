"""Heuristic extraction of shot data from a rendered report snapshot."""
from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import AveragesRecord, ShotRecord

logger = logging.getLogger(__name__)

# Tokens that identify a club name inside a title-like element.
CLUB_PATTERNS = [
    re.compile(pat, re.I)
    for pat in (
        r"Driver",
        r"Wood",
        r"\d+\s*Iron",
        r"\d+i",
        r"PW|SW|GW|LW",
        r"Pitching|Sand|Gap|Lob|Wedge",
        r"\d+°",
    )
]

DATE_PATTERNS = [
    re.compile(r"\d{1,2}/\d{1,2}/\d{4}"),
    re.compile(r"\d{4}-\d{2}-\d{2}"),
]

AVERAGE_MARKERS = ("average", "avg")

MIN_SHOT_CELLS = 6
FIRST_CELL_RANGE = (0, 500)
CARRY_RANGE = (20, 400)
FALLBACK_RANGE = (50, 350)
MIN_FALLBACK_TOKENS = 6

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NUMERIC_TOKEN = re.compile(r"[\d.]+")

# Field order shared by table rows and text lines.
SHOT_FIELDS = (
    "total",
    "carry",
    "spin",
    "smash",
    "launch",
    "ball_speed",
    "club_speed",
    "height",
    "face_to_path",
    "landing_angle",
)
AVERAGE_FIELDS = SHOT_FIELDS[:7]


def parse_number(raw: Optional[str]) -> Optional[float]:
    """Read the leading number of *raw*, ignoring trailing units.

    Returns ``None`` when the text does not start with a finite number.
    """

    if raw is None:
        return None
    match = _LEADING_NUMBER.match(raw)
    if not match:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


def _cell_number(cells: Sequence[str], index: int) -> Optional[float]:
    if index >= len(cells):
        return None
    return parse_number(cells[index])


def _between(value: Optional[float], bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return value is not None and low < value < high


def detect_club(candidates: Iterable[str]) -> Optional[str]:
    """Return the first candidate text that mentions a known club."""

    for text in candidates:
        text = text.strip()
        if any(pattern.search(text) for pattern in CLUB_PATTERNS):
            return text
    return None


def detect_date(full_text: str) -> Optional[str]:
    """Return the earliest date-looking substring of the page text."""

    best: Optional[re.Match] = None
    for pattern in DATE_PATTERNS:
        match = pattern.search(full_text or "")
        if match and (best is None or match.start() < best.start()):
            best = match
    return best.group(0) if best else None


def is_valid_shot(shot: ShotRecord) -> bool:
    """Carry must be known and strictly inside the plausible range."""

    return _between(shot.carry, CARRY_RANGE)


def _is_averages_row(cells: Sequence[str]) -> bool:
    first = cells[0].lower()
    return any(marker in first for marker in AVERAGE_MARKERS)


def _parse_averages_row(cells: Sequence[str]) -> AveragesRecord:
    values = {name: _cell_number(cells, idx + 1) for idx, name in enumerate(AVERAGE_FIELDS)}
    return AveragesRecord(**values)


def _parse_shot_row(cells: Sequence[str]) -> ShotRecord:
    # Each metric falls back to the next cell when its own cell is missing or zero;
    # a genuine zero reading therefore shifts that metric one column to the right.
    values = {}
    for idx, name in enumerate(SHOT_FIELDS):
        value = _cell_number(cells, idx)
        if not value:
            value = _cell_number(cells, idx + 1)
        values[name] = value
    return ShotRecord(**values)


def extract_table_shots(
    tables: Iterable[Iterable[Sequence[str]]],
) -> Tuple[List[ShotRecord], Optional[AveragesRecord]]:
    """Scan every table row for shot rows and an averages row.

    Rows with fewer than six cells are ignored. An averages row is recognised by
    its leading label and never treated as a shot; when several exist the last
    one wins. Shot rows need a first cell between 0 and 500 and are kept only
    when their carry is plausible.
    """

    shots: List[ShotRecord] = []
    averages: Optional[AveragesRecord] = None
    rejected = 0
    for table in tables:
        for row in table:
            cells = [cell.strip() for cell in row]
            if len(cells) < MIN_SHOT_CELLS:
                continue
            if _is_averages_row(cells):
                averages = _parse_averages_row(cells)
                logger.debug("Found averages row: %s", cells[0])
                continue
            if not _between(parse_number(cells[0]), FIRST_CELL_RANGE):
                continue
            shot = _parse_shot_row(cells)
            if is_valid_shot(shot):
                shots.append(shot)
            else:
                rejected += 1
    logger.debug("Table scan kept %d shots, rejected %d rows", len(shots), rejected)
    return shots, averages


def extract_text_shots(full_text: str) -> List[ShotRecord]:
    """Fallback: read shots from lines of page text holding six or more numbers.

    Tokens are taken positionally. Total and carry must both lie between 50 and
    350; trailing metrics that are absent or unreadable default to zero.
    """

    shots: List[ShotRecord] = []
    for line in (full_text or "").splitlines():
        tokens = _NUMERIC_TOKEN.findall(line)
        if len(tokens) < MIN_FALLBACK_TOKENS:
            continue
        values = [parse_number(token) for token in tokens]
        if not (_between(values[0], FALLBACK_RANGE) and _between(values[1], FALLBACK_RANGE)):
            continue
        padded = values + [None] * (len(SHOT_FIELDS) - len(values))
        shot = {name: padded[idx] for idx, name in enumerate(SHOT_FIELDS[:6])}
        for idx, name in enumerate(SHOT_FIELDS[6:], start=6):
            shot[name] = padded[idx] or 0.0
        shots.append(ShotRecord(**shot))
    logger.debug("Text fallback found %d shots", len(shots))
    return shots
