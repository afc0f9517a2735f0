"""Tests for doubles_trainer.ui.pdf_report – PDF export."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtGui")

from doubles_trainer.core.report import ReportExportError, build_report
from doubles_trainer.core.session import Outcome, TrainerSession
from doubles_trainer.ui.pdf_report import PdfReportSink


class TestPdfReportSink:
    def test_missing_folder_raises(self, tmp_path: Path):
        report = build_report(TrainerSession(), now=datetime(2026, 1, 1))
        with pytest.raises(ReportExportError, match="does not exist"):
            PdfReportSink().write(report, tmp_path / "missing" / "darts-results.pdf")

    def test_missing_folder_leaves_session_untouched(self, tmp_path: Path):
        session = TrainerSession()
        session.commit_round()
        history = session.history
        with pytest.raises(ReportExportError):
            PdfReportSink().write(build_report(session), tmp_path / "missing" / "out.pdf")
        assert session.history == history

    def test_directory_target_raises(self, qapp, tmp_path: Path):
        target = tmp_path / "darts-results.pdf"
        target.mkdir()
        report = build_report(TrainerSession(), now=datetime(2026, 1, 1))
        with pytest.raises(ReportExportError, match="Not a file"):
            PdfReportSink().write(report, target)

    def test_writes_pdf(self, qapp, tmp_path: Path):
        session = TrainerSession()
        session.record_outcome(Outcome.HIT)
        session.commit_round()
        written = PdfReportSink().write(build_report(session), tmp_path / "darts-results.pdf")
        assert written == tmp_path / "darts-results.pdf"
        assert written.read_bytes().startswith(b"%PDF")

    def test_replaces_stale_file(self, qapp, tmp_path: Path):
        target = tmp_path / "darts-results.pdf"
        target.write_bytes(b"stale")
        PdfReportSink().write(build_report(TrainerSession()), target)
        assert target.read_bytes().startswith(b"%PDF")

    def test_forces_pdf_suffix(self, qapp, tmp_path: Path):
        written = PdfReportSink().write(build_report(TrainerSession()), tmp_path / "results.txt")
        assert written == tmp_path / "results.pdf"
        assert written.is_file()
