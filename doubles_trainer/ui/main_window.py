from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, QEventLoop
from PySide6.QtGui import QColor, QFont, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QAbstractItemView,
    QFileDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from doubles_trainer.core.config import TrainerConfig
from doubles_trainer.core.report import (
    ReportExportError,
    ReportSink,
    build_report,
    report_filename,
)
from doubles_trainer.core.session import ROUND_SIZE, ActionResult, Outcome, TrainerSession
from doubles_trainer.core.stats import compute_stats, format_hit_rate
from doubles_trainer.ui.colors import TrainerColors
from doubles_trainer.ui.custom_overlay import (
    ConfirmOverlay,
    MessageOverlay,
    primary_button_style,
    secondary_button_style,
)
from doubles_trainer.ui.models import build_round_rows, build_stat_rows
from doubles_trainer.ui.trainer_widgets import PendingThrowsWidget, TargetLabel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-screen drill window.

    Every button and shortcut runs one session transition and then
    :meth:`_refresh` re-renders everything from the session, so the stats
    on screen are always derived from the current state.
    """

    def __init__(
        self,
        config: TrainerConfig,
        sink: ReportSink,
        session: Optional[TrainerSession] = None,
    ) -> None:
        super().__init__()
        self._config = config
        self._sink = sink
        self._session = session if session is not None else TrainerSession()

        self._target_label: Optional[TargetLabel] = None
        self._pending_widget: Optional[PendingThrowsWidget] = None
        self._misses_label: Optional[QLabel] = None
        self._hits_label: Optional[QLabel] = None
        self._thrown_label: Optional[QLabel] = None
        self._rate_label: Optional[QLabel] = None
        self._miss_button: Optional[QPushButton] = None
        self._hit_button: Optional[QPushButton] = None
        self._submit_button: Optional[QPushButton] = None
        self._undo_button: Optional[QPushButton] = None
        self._stats_table: Optional[QTableWidget] = None
        self._log_table: Optional[QTableWidget] = None

        self.setWindowTitle(config.window_title)
        self._build_ui()
        self._install_shortcuts()
        self._message_overlay = MessageOverlay(self.centralWidget())
        self._new_session_overlay = ConfirmOverlay(
            "New session",
            "Clear all throws and start again from D1?",
            "Start over",
            self.centralWidget(),
        )
        self._refresh()

    @property
    def session(self) -> TrainerSession:
        return self._session

    @property
    def message_overlay(self) -> MessageOverlay:
        return self._message_overlay

    def _build_ui(self) -> None:
        """Lay out the drill panel on the left and the tables on the right."""
        central = QWidget()
        central.setObjectName("central")
        central.setStyleSheet(
            f"""
            QWidget#central {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {TrainerColors.BG_TOP}, stop:1 {TrainerColors.BG_BOTTOM});
            }}
            """
        )
        root = QHBoxLayout(central)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(24)

        root.addWidget(self._build_drill_card(), 1)

        tables = QVBoxLayout()
        tables.setSpacing(16)
        self._stats_table = self._make_table(["Double", "Attempts", "Hit Rate"])
        self._stats_table.setRowCount(20)
        tables.addWidget(self._section_title("Per double"))
        tables.addWidget(self._stats_table, 3)
        self._log_table = self._make_table([f"Throw {i}" for i in range(1, ROUND_SIZE + 1)])
        tables.addWidget(self._section_title("Throw log"))
        tables.addWidget(self._log_table, 2)
        root.addLayout(tables, 1)

        self.setCentralWidget(central)

    def _build_drill_card(self) -> QWidget:
        card = QFrame()
        card.setObjectName("drillCard")
        card.setStyleSheet(
            f"""
            QFrame#drillCard {{
                background: {TrainerColors.CARD_BG};
                border: 1px solid {TrainerColors.CARD_BORDER};
                border-radius: 20px;
            }}
            """
        )
        layout = QVBoxLayout(card)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(16)

        title = QLabel("Darts Doubles Trainer")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {TrainerColors.PRIMARY_DARK}; font-size: 26px; font-weight: 800;")
        layout.addWidget(title)

        subtitle = QLabel("Target")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {TrainerColors.TEXT_SECONDARY}; font-size: 14px;")
        layout.addWidget(subtitle)

        self._target_label = TargetLabel()
        layout.addWidget(self._target_label, 0, Qt.AlignCenter)

        stats_grid = QGridLayout()
        stats_grid.setHorizontalSpacing(24)
        stats_grid.setVerticalSpacing(6)
        self._misses_label = self._stat_value()
        self._hits_label = self._stat_value()
        self._thrown_label = self._stat_value()
        self._rate_label = self._stat_value()
        for col, (name, value) in enumerate(
            [
                ("Misses", self._misses_label),
                ("Hits", self._hits_label),
                ("Darts Thrown", self._thrown_label),
                ("Hit Rate", self._rate_label),
            ]
        ):
            header = QLabel(name)
            header.setAlignment(Qt.AlignCenter)
            header.setStyleSheet(f"color: {TrainerColors.TEXT_MUTED}; font-size: 12px; font-weight: 600;")
            stats_grid.addWidget(header, 0, col)
            stats_grid.addWidget(value, 1, col)
        layout.addLayout(stats_grid)

        self._pending_widget = PendingThrowsWidget()
        layout.addWidget(self._pending_widget)

        buttons = QHBoxLayout()
        buttons.setSpacing(10)
        self._miss_button = self._button("Miss", secondary_button_style())
        self._miss_button.clicked.connect(lambda: self._record(Outcome.MISS))
        self._hit_button = self._button("D1", primary_button_style())
        self._hit_button.clicked.connect(lambda: self._record(Outcome.HIT))
        self._submit_button = self._button("Submit", secondary_button_style())
        self._submit_button.clicked.connect(self._submit)
        buttons.addWidget(self._miss_button, 1)
        buttons.addWidget(self._hit_button, 1)
        buttons.addWidget(self._submit_button, 1)
        layout.addLayout(buttons)

        self._undo_button = self._button("Undo", secondary_button_style())
        self._undo_button.clicked.connect(self._undo)
        layout.addWidget(self._undo_button, 0, Qt.AlignCenter)

        actions = QHBoxLayout()
        actions.setSpacing(10)
        print_button = self._button("Print Results", primary_button_style())
        print_button.clicked.connect(self._export_report)
        new_button = self._button("New Session", secondary_button_style())
        new_button.clicked.connect(self._confirm_new_session)
        actions.addWidget(print_button, 1)
        actions.addWidget(new_button, 1)
        layout.addLayout(actions)

        layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        scroll.setWidget(card)
        return scroll

    def _stat_value(self) -> QLabel:
        label = QLabel("0")
        label.setAlignment(Qt.AlignCenter)
        label.setStyleSheet(f"color: {TrainerColors.PRIMARY}; font-size: 24px; font-weight: 800;")
        return label

    def _button(self, text: str, style: str) -> QPushButton:
        button = QPushButton(text)
        button.setStyleSheet(style)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        button.setMinimumHeight(44)
        return button

    def _section_title(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(f"color: {TrainerColors.PRIMARY_DARK}; font-size: 16px; font-weight: 700;")
        return label

    def _make_table(self, headers: list[str]) -> QTableWidget:
        table = QTableWidget(0, len(headers))
        table.setHorizontalHeaderLabels(headers)
        table.verticalHeader().setVisible(False)
        table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        table.setSelectionMode(QAbstractItemView.NoSelection)
        table.setFocusPolicy(Qt.NoFocus)
        table.setStyleSheet(
            f"""
            QTableWidget {{
                background: {TrainerColors.CARD_BG};
                border: 1px solid {TrainerColors.CARD_BORDER};
                border-radius: 12px;
                color: {TrainerColors.TEXT_PRIMARY};
            }}
            QHeaderView::section {{
                background: {TrainerColors.TABLE_HEADER};
                padding: 4px;
                border: none;
                font-weight: 700;
            }}
            """
        )
        return table

    def _install_shortcuts(self) -> None:
        bindings = [
            ("H", lambda: self._record(Outcome.HIT)),
            ("M", lambda: self._record(Outcome.MISS)),
            ("Return", self._submit),
            ("Enter", self._submit),
            (QKeySequence.StandardKey.Undo, self._undo),
            ("Backspace", self._undo),
            (QKeySequence.StandardKey.Print, self._export_report),
        ]
        for key, handler in bindings:
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(handler)

    def _record(self, outcome: Outcome) -> None:
        result = self._session.record_outcome(outcome)
        if result is ActionResult.REJECTED_FULL:
            logger.debug("Round is full; submit or undo first")
        self._refresh()

    def _submit(self) -> None:
        self._session.commit_round()
        self._refresh()

    def _undo(self) -> None:
        self._session.undo()
        self._refresh()

    def _refresh(self) -> None:
        """Re-render the whole window from the session."""
        session = self._session
        stats = compute_stats(session)

        if self._target_label is not None:
            self._target_label.set_double(session.current_double)
        if self._hit_button is not None:
            self._hit_button.setText(f"D{session.current_double}")
            self._hit_button.setEnabled(session.can_record())
        if self._miss_button is not None:
            self._miss_button.setEnabled(session.can_record())
        if self._undo_button is not None:
            self._undo_button.setEnabled(session.can_undo())
        if self._pending_widget is not None:
            self._pending_widget.set_throws(session.pending_throws)

        if self._misses_label is not None:
            self._misses_label.setText(str(stats.total_misses))
        if self._hits_label is not None:
            self._hits_label.setText(str(stats.total_hits))
        if self._thrown_label is not None:
            self._thrown_label.setText(str(stats.total_throws))
        if self._rate_label is not None:
            self._rate_label.setText(f"{format_hit_rate(stats.hit_rate)}%")

        if self._stats_table is not None:
            bold = QFont()
            bold.setBold(True)
            for row, stat in enumerate(build_stat_rows(stats)):
                rate_item = QTableWidgetItem(stat.hit_rate)
                rate_item.setForeground(QColor(stat.color))
                rate_item.setFont(bold)
                for col, item in enumerate(
                    [QTableWidgetItem(stat.label), QTableWidgetItem(stat.attempts), rate_item]
                ):
                    item.setTextAlignment(Qt.AlignCenter)
                    self._stats_table.setItem(row, col, item)

        if self._log_table is not None:
            rounds = build_round_rows(session.history)
            self._log_table.setRowCount(len(rounds))
            for row, cells in enumerate(rounds):
                for col in range(ROUND_SIZE):
                    if col < len(cells):
                        item = QTableWidgetItem(cells[col].text)
                        item.setForeground(QColor(TrainerColors.HIT if cells[col].is_hit else TrainerColors.MISS))
                    else:
                        item = QTableWidgetItem("")
                    item.setTextAlignment(Qt.AlignCenter)
                    self._log_table.setItem(row, col, item)
            if rounds:
                self._log_table.scrollToBottom()

    def _export_report(self) -> None:
        """Ask where to save, then hand the current results to the report sink."""
        extension = self._config.report_extension
        default_path = self._config.export_dir / report_filename(extension)
        chosen, _ = QFileDialog.getSaveFileName(
            self,
            "Save results",
            str(default_path),
            f"{extension.upper()} files (*.{extension})",
        )
        if not chosen:
            return

        report = build_report(self._session, title=self._config.report_title)
        try:
            written = self._sink.write(report, Path(chosen))
        except (ReportExportError, OSError) as e:
            logger.exception("Export to %s failed", chosen)
            self._message_overlay.show_message("Export failed", str(e), is_error=True)
            return
        self._message_overlay.show_message("Results saved", f"Saved to {written}")

    def _confirm_new_session(self) -> None:
        """Show the confirmation overlay and, if confirmed, clear the session."""
        if not self._session.can_undo():
            return
        overlay = self._new_session_overlay
        overlay.raise_()
        overlay.show()
        confirmed = [False]

        def on_closed(ok: bool) -> None:
            confirmed[0] = ok
            loop.quit()

        loop = QEventLoop()
        overlay.closed.connect(on_closed)
        loop.exec()
        overlay.closed.disconnect(on_closed)

        if confirmed[0]:
            self._session.reset()
            self._refresh()
