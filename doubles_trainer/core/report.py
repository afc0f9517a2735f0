from __future__ import annotations

import html
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol

from doubles_trainer.core.session import ROUND_SIZE, Round, Throw, TrainerSession
from doubles_trainer.core.stats import SessionStats, compute_stats, format_hit_rate

REPORT_BASENAME = "darts-results"
DEFAULT_TITLE = "Darts Doubles Trainer Results"


class ReportExportError(Exception):
    """Raised when a report could not be written."""


@dataclass(frozen=True)
class ReportData:
    title: str
    generated_at: datetime
    stats: SessionStats
    rounds: tuple[Round, ...]


class ReportSink(Protocol):
    def write(self, report: ReportData, path: Path) -> Path:
        """Write *report* to *path* and return the file actually written."""
        ...


def report_filename(extension: str = "pdf") -> str:
    return f"{REPORT_BASENAME}.{extension.lstrip('.')}"


def build_report(
    session: TrainerSession,
    title: str = DEFAULT_TITLE,
    now: Optional[datetime] = None,
) -> ReportData:
    """Snapshot the session's statistics and committed rounds for export."""
    return ReportData(
        title=title,
        generated_at=now if now is not None else datetime.now(),
        stats=compute_stats(session),
        rounds=session.history,
    )


def format_timestamp(moment: datetime) -> str:
    return moment.strftime("%d %b %Y, %H:%M:%S")


def throw_cell(throw: Throw) -> str:
    return f"{'Hit' if throw.is_hit else 'Miss'} D{throw.double}"


def render_report_html(report: ReportData) -> str:
    """Render the report as a small HTML document (title, stats table, throw log)."""
    header_style = "background-color: #e6e6e6; font-weight: bold;"
    parts = [
        "<html><body style='font-family: sans-serif;'>",
        f"<h1>{html.escape(report.title)}</h1>",
        f"<p>Date: {html.escape(format_timestamp(report.generated_at))}</p>",
        "<table border='1' cellspacing='0' cellpadding='4' width='100%'>",
        f"<tr style='{header_style}'><th>Double</th><th>Attempts</th><th>Hit Rate</th></tr>",
    ]
    for row in report.stats.per_double:
        parts.append(
            f"<tr><td>D{row.double}</td><td>{row.attempts}</td>"
            f"<td>{format_hit_rate(row.hit_rate)}%</td></tr>"
        )
    parts.append("</table>")
    parts.append("<br/>")
    parts.append("<table border='1' cellspacing='0' cellpadding='4' width='100%'>")
    headings = "".join(f"<th>Throw {i}</th>" for i in range(1, ROUND_SIZE + 1))
    parts.append(f"<tr style='{header_style}'>{headings}</tr>")
    for round_ in report.rounds:
        cells = "".join(f"<td>{throw_cell(t)}</td>" for t in round_)
        parts.append(f"<tr>{cells}</tr>")
    parts.append("</table>")
    parts.append("</body></html>")
    return "\n".join(parts)
