"""Application entry point for ReadingQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from reading_app.constants.assessment_constants import DEFAULT_DATA_DIR
from reading_app.constants.network_constants import API_ENABLED, DEFAULT_HOST, DEFAULT_PORT
from reading_app.core.assessment_manager import AssessmentManager
from reading_app.core.passage_loader import PassageLoadError
from reading_app.core.services.content_repository import ContentRepository
from reading_app.server.api_server import start_api_server
from reading_app.ui.reader_main_window import ReaderMainWindow
from reading_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the catalog, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting ReadingQt…")

    try:
        repository = ContentRepository.from_directory(DEFAULT_DATA_DIR)
    except PassageLoadError as exc:
        logger.error("Passage catalog unavailable: %s", exc)
        repository = ContentRepository()
    logger.info("Loaded %d passages from %s", len(repository.list_passages()), DEFAULT_DATA_DIR)

    if API_ENABLED:
        start_api_server(repository=repository, host=DEFAULT_HOST, port=DEFAULT_PORT)

    app = QApplication(sys.argv)
    manager = AssessmentManager(repository)
    window = ReaderMainWindow(manager=manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
