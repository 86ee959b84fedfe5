"""Application entry point for PoliPlay."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from poliplay.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from poliplay.constants.storage_constants import DEFAULT_STORAGE_PATH
from poliplay.core.local_storage import LocalStorage
from poliplay.core.models import Verdict
from poliplay.core.quiz_manager import QuizManager
from poliplay.core.services.question_store import QuestionStore
from poliplay.server.api_server import start_api_server
from poliplay.ui.generator_main_window import GeneratorMainWindow
from poliplay.utils.logging_config import configure_logging


def _determine_player_url(port: int) -> str:
    """Best-effort determination of the local IP for the player-facing URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Initialize logging, start the API server, and launch the generator console."""
    logger = configure_logging()
    logger.info("Starting PoliPlay…")

    store = QuestionStore(LocalStorage(DEFAULT_STORAGE_PATH))

    def log_feedback(verdict: Verdict) -> None:
        logger.info("Round finished: %s cue", verdict.cue)

    quiz_manager = QuizManager(store, feedback_listener=log_feedback)
    logger.info("Question bank stored at %s", DEFAULT_STORAGE_PATH)
    start_api_server(quiz_manager=quiz_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    player_url = _determine_player_url(DEFAULT_PORT)
    logger.info("Player page available at %s", player_url)

    app = QApplication(sys.argv)
    window = GeneratorMainWindow(quiz_manager=quiz_manager, player_url=player_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
