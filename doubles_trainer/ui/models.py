"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass

from doubles_trainer.core.report import throw_cell
from doubles_trainer.core.session import Round
from doubles_trainer.core.stats import SessionStats, format_hit_rate
from doubles_trainer.ui.colors import hit_rate_color


@dataclass
class StatRow:
    """One line of the per-double table."""

    label: str
    attempts: str
    hit_rate: str
    color: str


@dataclass
class ThrowCell:
    text: str
    is_hit: bool


def build_stat_rows(stats: SessionStats) -> list[StatRow]:
    return [
        StatRow(
            label=f"D{row.double}",
            attempts=str(row.attempts),
            hit_rate=f"{format_hit_rate(row.hit_rate)}%",
            color=hit_rate_color(row.hit_rate),
        )
        for row in stats.per_double
    ]


def build_round_rows(rounds: tuple[Round, ...]) -> list[list[ThrowCell]]:
    return [[ThrowCell(text=throw_cell(t), is_hit=t.is_hit) for t in round_] for round_ in rounds]
