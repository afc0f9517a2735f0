"""Custom in-window overlays (export result, new session confirm)."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from doubles_trainer.ui.colors import TrainerColors


def _themed_card_container(radius: int = 20, object_name: str = "overlayContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(400)
    container.setMaximumWidth(480)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: #ffffff;
            border: 1px solid rgba(46, 125, 50, 0.12);
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 60, 0, 25))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.2);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def secondary_button_style() -> str:
    return f"""
        QPushButton {{
            background: #fafafa;
            color: {TrainerColors.TEXT_PRIMARY};
            padding: 10px 16px;
            border: 1px solid #e0e0e0;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background: #f0f0f0;
            border-color: {TrainerColors.PRIMARY};
            color: {TrainerColors.PRIMARY};
        }}
        QPushButton:disabled {{
            color: #b0bec5;
            border-color: #eceff1;
        }}
    """


def primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {TrainerColors.PRIMARY_LIGHT}, stop:1 {TrainerColors.PRIMARY});
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {TrainerColors.PRIMARY}; }}
        QPushButton:disabled {{ background: #c8d6c9; color: #f5f5f5; }}
    """


class _OverlayBase(QWidget):
    """Keeps the overlay sized to its parent while shown."""

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_geometry()

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)


def _header(icon_text: str, title_label: QLabel, icon_color: str) -> tuple[QHBoxLayout, QLabel]:
    header = QHBoxLayout()
    header.setSpacing(12)
    icon_box = QFrame()
    icon_box.setFixedSize(44, 44)
    icon_box.setStyleSheet(
        f"""
        QFrame {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {TrainerColors.BG_TOP}, stop:1 {TrainerColors.BG_BOTTOM});
            border-radius: 12px;
        }}
        """
    )
    icon_layout = QVBoxLayout(icon_box)
    icon_layout.setContentsMargins(0, 0, 0, 0)
    icon_label = QLabel(icon_text)
    icon_label.setStyleSheet(f"color: {icon_color}; font-size: 22px; font-weight: 900;")
    icon_label.setAlignment(Qt.AlignCenter)
    icon_layout.addWidget(icon_label)
    header.addWidget(icon_box, 0)
    header.addWidget(title_label, 0)
    header.addStretch(1)
    return header, icon_label


class MessageOverlay(_OverlayBase):
    """In-window notice with a single OK button (export saved / export failed)."""

    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = _overlay_background(self, lambda: (self.hide(), self.closed.emit()))
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _themed_card_container(object_name="messageContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        self._title = QLabel()
        header, self._icon_label = _header("✓", self._title, TrainerColors.PRIMARY)
        content.addLayout(header)

        self._message = QLabel()
        self._message.setStyleSheet(f"color: {TrainerColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 500;")
        self._message.setWordWrap(True)
        self._message.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        content.addWidget(self._message, 0)

        ok_btn = QPushButton("OK")
        ok_btn.setStyleSheet(primary_button_style())
        ok_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        ok_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        ok_btn.clicked.connect(lambda: (self.hide(), self.closed.emit()))
        content.addWidget(ok_btn, 0)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    @property
    def title(self) -> str:
        return self._title.text()

    @property
    def message(self) -> str:
        return self._message.text()

    def show_message(self, title: str, message: str, is_error: bool = False) -> None:
        color = TrainerColors.MISS if is_error else TrainerColors.PRIMARY
        self._icon_label.setText("!" if is_error else "✓")
        self._icon_label.setStyleSheet(f"color: {color}; font-size: 22px; font-weight: 900;")
        self._title.setText(title)
        self._title.setStyleSheet(f"color: {color}; font-size: 18px; font-weight: 800;")
        self._message.setText(message)
        self.raise_()
        self.show()


class ConfirmOverlay(_OverlayBase):
    """In-window overlay to confirm starting a new session."""

    closed = Signal(bool)  # True if user confirmed

    def __init__(self, title: str, message: str, confirm_text: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = _overlay_background(self, lambda: (self.hide(), self.closed.emit(False)))
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _themed_card_container(object_name="confirmContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        title_label = QLabel(title)
        title_label.setStyleSheet(f"color: {TrainerColors.PRIMARY}; font-size: 18px; font-weight: 800;")
        header, _ = _header("↻", title_label, TrainerColors.PRIMARY)
        content.addLayout(header)

        msg = QLabel(message)
        msg.setStyleSheet(f"color: {TrainerColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 500;")
        msg.setWordWrap(True)
        content.addWidget(msg, 0)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setStyleSheet(secondary_button_style())
        cancel_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        cancel_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        cancel_btn.clicked.connect(lambda: (self.hide(), self.closed.emit(False)))
        btn_row.addWidget(cancel_btn, 1)

        confirm_btn = QPushButton(confirm_text)
        confirm_btn.setStyleSheet(primary_button_style())
        confirm_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        confirm_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        confirm_btn.clicked.connect(lambda: (self.hide(), self.closed.emit(True)))
        btn_row.addWidget(confirm_btn, 1)

        content.addLayout(btn_row)
        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()
