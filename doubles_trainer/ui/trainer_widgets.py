"""Drill UI: pending throw boxes and the big target label."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QLabel, QWidget

from doubles_trainer.core.session import ROUND_SIZE, Throw
from doubles_trainer.ui.colors import TrainerColors


class PendingThrowsWidget(QWidget):
    """Row of three boxes: hit (green), miss (red), not thrown yet (gray)."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._throws: list[Throw] = []
        self.setFixedHeight(72)
        self.setMinimumWidth(240)

    def set_throws(self, throws: tuple[Throw, ...]) -> None:
        self._throws = list(throws[:ROUND_SIZE])
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        box_w = 84
        box_h = 52
        spacing = 12
        radius = 10
        total_width = ROUND_SIZE * (box_w + spacing) - spacing
        start_x = max(0, (self.width() - total_width) // 2)
        y = (self.height() - box_h) // 2
        for i in range(ROUND_SIZE):
            x = start_x + i * (box_w + spacing)
            if i < len(self._throws):
                throw = self._throws[i]
                fill = TrainerColors.HIT if throw.is_hit else TrainerColors.MISS
                text = "Hit" if throw.is_hit else "Miss"
            else:
                fill = TrainerColors.EMPTY
                text = "-"
            painter.setBrush(QColor(fill))
            painter.setPen(QPen(QColor(fill).darker(120), 2))
            painter.drawRoundedRect(x, y, box_w, box_h, radius, radius)
            painter.setPen(QColor("white"))
            font = painter.font()
            font.setPointSize(14)
            font.setBold(True)
            painter.setFont(font)
            painter.drawText(x, y, box_w, box_h, Qt.AlignCenter, text)


class TargetLabel(QLabel):
    """Large green circle showing the double to aim at."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedSize(130, 130)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {TrainerColors.PRIMARY_LIGHT}, stop:1 {TrainerColors.PRIMARY});
                color: white;
                border-radius: 65px;
                font-size: 44px;
                font-weight: 900;
            }}
            """
        )

    def set_double(self, double: int) -> None:
        self.setText(f"D{double}")
