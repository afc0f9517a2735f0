"""Live statistics derived from a trainer session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from doubles_trainer.core.session import DOUBLES, Throw, TrainerSession

UNDEFINED_RATE_TEXT = "-"


@dataclass(frozen=True)
class DoubleStats:
    double: int
    attempts: int
    hits: int
    hit_rate: Optional[float]


@dataclass(frozen=True)
class SessionStats:
    total_throws: int
    total_hits: int
    total_misses: int
    hit_rate: Optional[float]
    per_double: tuple[DoubleStats, ...]


def hit_rate(hits: int, attempts: int) -> Optional[float]:
    """Percentage of hits to one decimal place, or None when nothing was thrown."""
    if attempts <= 0:
        return None
    return round(hits / attempts * 100.0, 1)


def format_hit_rate(rate: Optional[float]) -> str:
    if rate is None:
        return UNDEFINED_RATE_TEXT
    return f"{rate:.1f}"


def stats_for_throws(throws: Iterable[Throw]) -> SessionStats:
    attempts = {double: 0 for double in DOUBLES}
    hits = {double: 0 for double in DOUBLES}
    for throw in throws:
        attempts[throw.double] += 1
        if throw.is_hit:
            hits[throw.double] += 1

    total = sum(attempts.values())
    total_hits = sum(hits.values())
    per_double = tuple(
        DoubleStats(
            double=double,
            attempts=attempts[double],
            hits=hits[double],
            hit_rate=hit_rate(hits[double], attempts[double]),
        )
        for double in DOUBLES
    )
    return SessionStats(
        total_throws=total,
        total_hits=total_hits,
        total_misses=total - total_hits,
        hit_rate=hit_rate(total_hits, total),
        per_double=per_double,
    )


def compute_stats(session: TrainerSession) -> SessionStats:
    """Statistics over committed and pending throws; pending ones count immediately."""
    return stats_for_throws(session.all_throws())
