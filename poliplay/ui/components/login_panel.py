"""Component gating the generator behind the admin credential pair."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from poliplay.constants.ui_constants import (
    LOGIN_BUTTON,
    LOGIN_ERROR_MESSAGE,
    LOGIN_ERROR_TIMEOUT_MS,
    LOGIN_TITLE,
)
from poliplay.core.access_gate import credentials_match
from poliplay.styling.styles import Styles


class LoginPanel(QWidget):
    """Username/password form. Calls ``on_login_success`` when the pair matches."""

    def __init__(self, on_login_success: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_login_success = on_login_success
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        title = QLabel(LOGIN_TITLE, self)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.username_input = QLineEdit(self)
        self.username_input.setPlaceholderText("Username")
        layout.addWidget(self.username_input)

        self.password_input = QLineEdit(self)
        self.password_input.setPlaceholderText("Password")
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.returnPressed.connect(self._handle_login)
        layout.addWidget(self.password_input)

        self.login_button = QPushButton(LOGIN_BUTTON, self)
        self.login_button.clicked.connect(self._handle_login)
        layout.addWidget(self.login_button)

        self.error_label = QLabel("", self)
        self.error_label.setStyleSheet(Styles.get_status_style(success=False))
        layout.addWidget(self.error_label)

        self._error_timer = QTimer(self)
        self._error_timer.setSingleShot(True)
        self._error_timer.setInterval(LOGIN_ERROR_TIMEOUT_MS)
        self._error_timer.timeout.connect(self.error_label.clear)

    def _handle_login(self) -> None:
        if credentials_match(self.username_input.text(), self.password_input.text()):
            self.error_label.clear()
            self.on_login_success()
            return
        self.error_label.setText(LOGIN_ERROR_MESSAGE)
        self._error_timer.start()

    def reset_state(self) -> None:
        self.username_input.clear()
        self.password_input.clear()
        self.error_label.clear()
        self.username_input.setFocus()
