"""Qt main window routing between catalog, assessment and results."""

from __future__ import annotations

import logging
from enum import Enum, auto

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from reading_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from reading_app.constants.ui_constants import (
    MODE_BUTTON_ABOUT,
    MODE_BUTTON_HELP,
    MODE_BUTTON_SETTINGS,
    TIME_UP_MESSAGE,
    TIME_UP_TITLE,
    WINDOW_TITLE,
)
from reading_app.core.assessment_manager import AssessmentManager
from reading_app.core.models import AttemptRecord, SessionStatus
from reading_app.styling.color_palette import Theme
from reading_app.styling.styles import Styles
from reading_app.ui.components.assessment_panel import AssessmentPanel
from reading_app.ui.components.catalog_panel import CatalogPanel
from reading_app.ui.components.results_panel import ResultsPanel
from reading_app.ui.dialog_helpers import (
    confirm_leave_assessment,
    show_error,
    show_info,
    show_warning,
)
from reading_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class ReaderView(Enum):
    """Top-level screen shown by the main window."""

    CATALOG = auto()
    ASSESSMENT = auto()
    RESULTS = auto()


class ReaderMainWindow(QMainWindow):
    """Main Qt window orchestrating the three application views."""

    def __init__(self, manager: AssessmentManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1200, 800)

        self.manager = manager
        self._view = ReaderView.CATALOG
        self._ui_font_size: int = 10
        self._reading_font_size: int = 13
        self._theme: Theme = Theme.LIGHT

        self._build_ui()
        self._apply_styles()
        self.manager.engine.attempt_completed.connect(self._handle_attempt_completed)
        self.manager.load_failed.connect(self._handle_load_failed)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.help_button = QPushButton(MODE_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(MODE_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.settings_button = QPushButton(MODE_BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)
        root_layout.addLayout(button_row)

        self.view_stack = QStackedWidget(self)
        self.catalog_panel = CatalogPanel(self.manager, on_select_passage=self._open_passage, parent=self)
        self.assessment_panel = AssessmentPanel(
            self.manager,
            on_back=self._handle_back_from_assessment,
            on_show_results=lambda: self._set_view(ReaderView.RESULTS),
            parent=self,
        )
        self.results_panel = ResultsPanel(
            on_back=self._return_to_catalog,
            on_retake=self._handle_retake,
            on_review=lambda: self._set_view(ReaderView.ASSESSMENT),
            parent=self,
        )
        self.view_stack.addWidget(self.catalog_panel)
        self.view_stack.addWidget(self.assessment_panel)
        self.view_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.view_stack)

        self._set_view(ReaderView.CATALOG)

    def _set_view(self, view: ReaderView) -> None:
        self._view = view
        index_map = {
            ReaderView.CATALOG: 0,
            ReaderView.ASSESSMENT: 1,
            ReaderView.RESULTS: 2,
        }
        self.view_stack.setCurrentIndex(index_map[view])

    # --- Navigation ---

    def _open_passage(self, passage_id: str) -> None:
        self._set_view(ReaderView.ASSESSMENT)
        self.manager.open_passage(passage_id)

    def _handle_back_from_assessment(self) -> None:
        if self.manager.status() is SessionStatus.ACTIVE and not confirm_leave_assessment(self):
            return
        self._return_to_catalog()

    def _return_to_catalog(self) -> None:
        self.manager.leave()
        self._set_view(ReaderView.CATALOG)
        self.catalog_panel.refresh()

    def _handle_retake(self) -> None:
        self.manager.retake()
        self._set_view(ReaderView.ASSESSMENT)

    def _handle_attempt_completed(self, attempt: AttemptRecord) -> None:
        self.results_panel.show_attempt(attempt, self.manager.current_passage())
        self._set_view(ReaderView.RESULTS)
        if self.manager.timer.has_expired():
            show_warning(self, TIME_UP_TITLE, TIME_UP_MESSAGE)

    def _handle_load_failed(self, message: str) -> None:
        show_error(self, "Passage rejected", message)

    # --- Dialogs ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._reading_font_size,
            self._theme,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._reading_font_size = dialog.get_reading_font_size()
            self._theme = dialog.get_theme()
            logger.info(
                "Settings applied: ui=%dpt reading=%dpt theme=%s",
                self._ui_font_size,
                self._reading_font_size,
                self._theme.value,
            )
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.help_button, self.about_button, self.settings_button):
            button.setStyleSheet(ui_style)

        self.catalog_panel.apply_font_size(self._ui_font_size, self._theme)
        self.assessment_panel.apply_font_size(self._reading_font_size, self._theme)
        self.results_panel.apply_font_size(self._reading_font_size, self._theme)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.manager.leave()
        super().closeEvent(event)
