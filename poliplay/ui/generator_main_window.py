"""Qt main window hosting the login gate and the question generator."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from poliplay.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from poliplay.constants.ui_constants import (
    ABOUT_BUTTON,
    HELP_BUTTON,
    PLAYER_URL_PLACEHOLDER,
    WINDOW_TITLE,
)
from poliplay.core.quiz_manager import QuizManager
from poliplay.ui.components.authoring_panel import AuthoringPanel
from poliplay.ui.components.login_panel import LoginPanel
from poliplay.ui.dialog_helpers import show_info
from poliplay.styling.styles import Styles


class GeneratorMode(Enum):
    LOGIN = auto()
    AUTHORING = auto()


class GeneratorMainWindow(QMainWindow):
    """Main Qt window switching between the login gate and the authoring view."""

    def __init__(self, quiz_manager: QuizManager, player_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self.player_url = player_url or PLAYER_URL_PLACEHOLDER
        self._mode = GeneratorMode.LOGIN

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        header_row = QHBoxLayout()
        self.player_url_label = QLabel(f"Players connect to: {self.player_url}", self)
        self.player_url_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.player_url_label, stretch=1)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        header_row.addWidget(self.help_button)
        root_layout.addLayout(header_row)

        self.mode_stack = QStackedWidget(self)
        self.login_panel = LoginPanel(on_login_success=self._handle_login, parent=self)
        self.authoring_panel = AuthoringPanel(
            self.quiz_manager,
            on_logout=self._handle_logout,
            parent=self,
        )
        self.mode_stack.addWidget(self.login_panel)
        self.mode_stack.addWidget(self.authoring_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(GeneratorMode.LOGIN)

    def _set_mode(self, mode: GeneratorMode) -> None:
        self._mode = mode
        index_map = {
            GeneratorMode.LOGIN: 0,
            GeneratorMode.AUTHORING: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_login(self) -> None:
        self.authoring_panel.reset_state()
        self._set_mode(GeneratorMode.AUTHORING)

    def _handle_logout(self) -> None:
        self.login_panel.reset_state()
        self._set_mode(GeneratorMode.LOGIN)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)
