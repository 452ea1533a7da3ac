"""Data models for launch-monitor shot reports."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Snapshot:
    """Already-rendered report page reduced to tables, text and title candidates."""

    tables: Tuple[Tuple[Tuple[str, ...], ...], ...] = ()
    full_text: str = ""
    title_candidates: Tuple[str, ...] = ()

    @classmethod
    def from_parts(cls, tables=(), full_text: str = "", title_candidates=()) -> "Snapshot":
        return cls(
            tables=tuple(tuple(tuple(row) for row in table) for table in tables),
            full_text=full_text or "",
            title_candidates=tuple(title_candidates),
        )


@dataclass(frozen=True)
class ShotRecord:
    """Single shot as read from one table row or text line."""

    total: Optional[float] = None
    carry: Optional[float] = None
    spin: Optional[float] = None
    smash: Optional[float] = None
    launch: Optional[float] = None
    ball_speed: Optional[float] = None
    club_speed: Optional[float] = None
    height: Optional[float] = None
    face_to_path: Optional[float] = None
    landing_angle: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "carry": self.carry,
            "spin": self.spin,
            "smash": self.smash,
            "launch": self.launch,
            "ballSpeed": self.ball_speed,
            "clubSpeed": self.club_speed,
            "height": self.height,
            "faceToPath": self.face_to_path,
            "landingAngle": self.landing_angle,
        }


@dataclass(frozen=True)
class AveragesRecord:
    """Session averages as printed by the report itself."""

    total: Optional[float] = None
    carry: Optional[float] = None
    spin: Optional[float] = None
    smash: Optional[float] = None
    launch: Optional[float] = None
    ball_speed: Optional[float] = None
    club_speed: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "carry": self.carry,
            "spin": self.spin,
            "smash": self.smash,
            "launch": self.launch,
            "ballSpeed": self.ball_speed,
            "clubSpeed": self.club_speed,
        }


@dataclass(frozen=True)
class ReportMetadata:
    club: Optional[str] = None
    date: Optional[str] = None


@dataclass(frozen=True)
class SummaryStats:
    """Statistics computed over the accepted shots."""

    shot_count: int
    carry: Optional[int] = None
    total: Optional[int] = None
    ball_speed: Optional[int] = None
    club_speed: Optional[int] = None
    launch: Optional[float] = None
    spin: Optional[int] = None
    smash: Optional[float] = None
    height: Optional[int] = None
    dispersion: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "shotCount": self.shot_count,
            "carry": self.carry,
            "total": self.total,
            "ballSpeed": self.ball_speed,
            "clubSpeed": self.club_speed,
            "launch": self.launch,
            "spin": self.spin,
            "smash": self.smash,
            "height": self.height,
            "dispersion": self.dispersion,
        }


@dataclass(frozen=True)
class ScrapeResult:
    """Everything extracted from one report page."""

    club: Optional[str] = None
    date: Optional[str] = None
    shots: Tuple[ShotRecord, ...] = field(default_factory=tuple)
    averages: Optional[AveragesRecord] = None
    stats: Optional[SummaryStats] = None

    @property
    def metadata(self) -> ReportMetadata:
        return ReportMetadata(club=self.club, date=self.date)

    def to_dict(self) -> dict:
        payload = {
            "club": self.club,
            "date": self.date,
            "shots": [shot.to_dict() for shot in self.shots],
            "averages": self.averages.to_dict() if self.averages else None,
        }
        if self.stats is not None:
            payload["stats"] = self.stats.to_dict()
        return payload
