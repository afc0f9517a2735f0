"""PDF export of session results, rendered through Qt's rich-text engine."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QBuffer, QByteArray, QIODevice
from PySide6.QtGui import QPageSize, QPdfWriter, QTextDocument

from doubles_trainer.core.report import ReportData, ReportExportError, render_report_html

logger = logging.getLogger(__name__)


class PdfReportSink:
    """Writes a :class:`ReportData` to an A4 PDF file."""

    def __init__(self, resolution: int = 150) -> None:
        self._resolution = resolution

    def render(self, report: ReportData) -> bytes:
        """Render the report into PDF bytes in memory."""
        buffer = QBuffer(QByteArray())
        if not buffer.open(QIODevice.OpenModeFlag.WriteOnly):
            raise ReportExportError("Could not open PDF buffer")
        try:
            writer = QPdfWriter(buffer)
            writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
            writer.setResolution(self._resolution)
            writer.setTitle(report.title)

            document = QTextDocument()
            document.setHtml(render_report_html(report))
            document.print_(writer)
            # the PDF trailer is flushed when the writer goes away
            del writer
        except RuntimeError as e:
            raise ReportExportError(f"Could not render PDF: {e}") from e
        finally:
            buffer.close()

        payload = bytes(buffer.data())
        if not payload:
            raise ReportExportError("Could not render PDF: output is empty")
        return payload

    def write(self, report: ReportData, path: Path) -> Path:
        path = Path(path)
        if path.suffix.lower() != ".pdf":
            path = path.with_suffix(".pdf")
        if not path.parent.is_dir():
            raise ReportExportError(f"Folder does not exist: {path.parent}")
        if path.is_dir():
            raise ReportExportError(f"Not a file: {path}")

        payload = self.render(report)
        try:
            path.write_bytes(payload)
        except OSError as e:
            raise ReportExportError(f"Could not write {path}: {e}") from e

        logger.info("Exported results to %s", path)
        return path
