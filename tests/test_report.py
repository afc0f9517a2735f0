"""Tests for doubles_trainer.core.report – report data and HTML rendering."""

from __future__ import annotations

from datetime import datetime

import pytest

from doubles_trainer.core.report import (
    DEFAULT_TITLE,
    build_report,
    format_timestamp,
    render_report_html,
    report_filename,
    throw_cell,
)
from doubles_trainer.core.session import Outcome, Throw, TrainerSession


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def moment() -> datetime:
    return datetime(2026, 10, 19, 14, 30, 5)


@pytest.fixture()
def session() -> TrainerSession:
    """One committed round (Hit D1, Hit D2, Miss D3) and one pending Miss at D3."""
    s = TrainerSession()
    for outcome in (Outcome.HIT, Outcome.HIT, Outcome.MISS, Outcome.MISS):
        s.record_outcome(outcome)
    return s


# ---------------------------------------------------------------------------
# report_filename
# ---------------------------------------------------------------------------

class TestReportFilename:
    def test_default_is_pdf(self):
        assert report_filename() == "darts-results.pdf"

    def test_other_extension(self):
        assert report_filename("html") == "darts-results.html"

    def test_leading_dot_is_ignored(self):
        assert report_filename(".pdf") == "darts-results.pdf"


# ---------------------------------------------------------------------------
# build_report
# ---------------------------------------------------------------------------

class TestBuildReport:
    def test_default_title(self, session, moment):
        report = build_report(session, now=moment)
        assert report.title == DEFAULT_TITLE
        assert report.generated_at == moment

    def test_rounds_are_committed_history_only(self, session, moment):
        report = build_report(session, now=moment)
        assert report.rounds == ((Throw(Outcome.HIT, 1), Throw(Outcome.HIT, 2), Throw(Outcome.MISS, 3)),)

    def test_stats_include_pending(self, session, moment):
        report = build_report(session, now=moment)
        assert report.stats.total_throws == 4
        assert report.stats.per_double[2].attempts == 2

    def test_snapshot_does_not_follow_session(self, session, moment):
        report = build_report(session, now=moment)
        session.reset()
        assert len(report.rounds) == 1
        assert report.stats.total_throws == 4

    def test_uses_current_time_by_default(self, session):
        before = datetime.now()
        report = build_report(session)
        assert before <= report.generated_at <= datetime.now()


# ---------------------------------------------------------------------------
# render_report_html
# ---------------------------------------------------------------------------

class TestRenderReportHtml:
    def test_contains_title_and_date(self, session, moment):
        text = render_report_html(build_report(session, now=moment))
        assert f"<h1>{DEFAULT_TITLE}</h1>" in text
        assert f"Date: {format_timestamp(moment)}" in text
        assert "19 Oct 2026, 14:30:05" in text

    def test_stats_rows(self, session, moment):
        text = render_report_html(build_report(session, now=moment))
        assert "<tr><td>D1</td><td>1</td><td>100.0%</td></tr>" in text
        assert "<tr><td>D3</td><td>2</td><td>0.0%</td></tr>" in text
        assert "<tr><td>D20</td><td>0</td><td>-%</td></tr>" in text

    def test_throw_log_rows(self, session, moment):
        text = render_report_html(build_report(session, now=moment))
        assert "<th>Throw 1</th><th>Throw 2</th><th>Throw 3</th>" in text
        assert "<tr><td>Hit D1</td><td>Hit D2</td><td>Miss D3</td></tr>" in text

    def test_empty_history_has_no_log_rows(self, moment):
        text = render_report_html(build_report(TrainerSession(), now=moment))
        assert "<td>Hit" not in text
        assert "<td>Miss" not in text

    def test_title_is_escaped(self, session, moment):
        text = render_report_html(build_report(session, title="<b>Me & you</b>", now=moment))
        assert "&lt;b&gt;Me &amp; you&lt;/b&gt;" in text


class TestThrowCell:
    def test_hit(self):
        assert throw_cell(Throw(Outcome.HIT, 16)) == "Hit D16"

    def test_miss(self):
        assert throw_cell(Throw(Outcome.MISS, 20)) == "Miss D20"
