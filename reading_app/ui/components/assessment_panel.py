"""Component for reading a passage and answering its questions."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QSplitter,
    QStackedWidget,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from reading_app.constants.ui_constants import (
    ASSESSMENT_BACK_BUTTON,
    ASSESSMENT_LOADING_MESSAGE,
    ASSESSMENT_RESULTS_BUTTON,
    ASSESSMENT_RETAKE_BUTTON,
    ASSESSMENT_SUBMIT_TEMPLATE,
    ASSESSMENT_UNAVAILABLE_MESSAGE,
)
from reading_app.core.assessment_manager import AssessmentManager
from reading_app.core.markdown_renderer import renderer
from reading_app.core.models import Passage, SessionStatus
from reading_app.core.services.countdown_timer import format_clock
from reading_app.styling.color_palette import Theme
from reading_app.styling.styles import Styles

_LOADING_PAGE = 0
_CONTENT_PAGE = 1


class AssessmentPanel(QWidget):
    """UI component for a running (or just finished) assessment."""

    def __init__(
        self,
        manager: AssessmentManager,
        on_back: Callable[[], None],
        on_show_results: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.manager = manager
        self.on_back = on_back
        self.on_show_results = on_show_results

        self._reading_font_size: int = 13
        self._theme: Theme = Theme.LIGHT
        self._rendered_passage_id: str | None = None
        self._option_buttons: dict[tuple[str, str], QRadioButton] = {}
        self._button_groups: list[QButtonGroup] = []

        self._build_ui()
        self.manager.engine.status_changed.connect(self._handle_status_changed)
        self.manager.engine.answers_changed.connect(self._refresh_answers)
        self.manager.timer.ticked.connect(self._update_timer_badge)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.back_button = QPushButton(ASSESSMENT_BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        header_row.addWidget(self.back_button)

        self.meta_label = QLabel("", self)
        header_row.addWidget(self.meta_label, stretch=1)

        self.timer_label = QLabel("00:00", self)
        self.timer_label.setAlignment(Qt.AlignCenter)
        self.timer_label.setVisible(False)
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        self.stack = QStackedWidget(self)

        self.status_label = QLabel(ASSESSMENT_LOADING_MESSAGE, self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setStyleSheet(Styles.get_large_label_style())
        self.stack.addWidget(self.status_label)

        splitter = QSplitter(Qt.Horizontal, self)
        self.passage_view = QTextBrowser(splitter)
        self.passage_view.setOpenExternalLinks(False)
        splitter.addWidget(self.passage_view)

        question_column = QWidget(splitter)
        question_layout = QVBoxLayout()
        question_column.setLayout(question_layout)

        self.question_scroll = QScrollArea(question_column)
        self.question_scroll.setWidgetResizable(True)
        question_layout.addWidget(self.question_scroll, stretch=1)

        action_row = QHBoxLayout()
        self.submit_button = QPushButton("", question_column)
        self.submit_button.clicked.connect(self._handle_submit)
        action_row.addWidget(self.submit_button, stretch=1)

        self.retake_button = QPushButton(ASSESSMENT_RETAKE_BUTTON, question_column)
        self.retake_button.clicked.connect(self.manager.retake)
        action_row.addWidget(self.retake_button)

        self.results_button = QPushButton(ASSESSMENT_RESULTS_BUTTON, question_column)
        self.results_button.clicked.connect(self.on_show_results)
        action_row.addWidget(self.results_button)
        question_layout.addLayout(action_row)

        splitter.addWidget(question_column)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 1)
        self.stack.addWidget(splitter)

        layout.addWidget(self.stack, stretch=1)
        self._apply_status(self.manager.status())

    # --- Session events ---

    def _handle_status_changed(self, status: SessionStatus) -> None:
        self._apply_status(status)

    def _apply_status(self, status: SessionStatus) -> None:
        if status in (SessionStatus.IDLE, SessionStatus.LOADING):
            self.status_label.setText(ASSESSMENT_LOADING_MESSAGE)
            self.stack.setCurrentIndex(_LOADING_PAGE)
            self.timer_label.setVisible(False)
            self.meta_label.setText("")
            self._rendered_passage_id = None
            return
        if status is SessionStatus.UNAVAILABLE:
            self.status_label.setText(ASSESSMENT_UNAVAILABLE_MESSAGE)
            self.stack.setCurrentIndex(_LOADING_PAGE)
            self.timer_label.setVisible(False)
            return

        passage = self.manager.current_passage()
        if passage.id != self._rendered_passage_id:
            self._render_passage(passage)
        self.stack.setCurrentIndex(_CONTENT_PAGE)
        self.timer_label.setVisible(True)
        self._update_timer_badge(self.manager.remaining_seconds())
        self._refresh_answers()

    def _render_passage(self, passage: Passage) -> None:
        self._rendered_passage_id = passage.id
        self.meta_label.setText(
            f"{passage.difficulty.value} Level · {passage.time_limit_minutes} minutes"
        )
        self.passage_view.setHtml(
            renderer.render_document(passage.content, passage.title, self._reading_font_size)
        )
        self._build_question_widgets(passage)

    def _build_question_widgets(self, passage: Passage) -> None:
        self._option_buttons = {}
        self._button_groups = []
        container = QWidget()
        container_layout = QVBoxLayout()
        container.setLayout(container_layout)

        for number, question in enumerate(passage.questions, start=1):
            group_box = QGroupBox(f"{number}. {question.prompt}", container)
            group_layout = QVBoxLayout()
            group_box.setLayout(group_layout)
            button_group = QButtonGroup(group_box)
            for option in question.options:
                button = QRadioButton(option.text, group_box)
                button.toggled.connect(
                    lambda checked, q=question.id, o=option.id: self._handle_option_toggled(q, o, checked)
                )
                button_group.addButton(button)
                group_layout.addWidget(button)
                self._option_buttons[(question.id, option.id)] = button
            self._button_groups.append(button_group)
            container_layout.addWidget(group_box)

        container_layout.addStretch()
        self.question_scroll.setWidget(container)
        self._apply_reading_font()

    def _handle_option_toggled(self, question_id: str, option_id: str, checked: bool) -> None:
        if checked:
            self.manager.select_answer(question_id, option_id)

    def _refresh_answers(self) -> None:
        """Sync radio buttons, colours and action buttons with the engine."""
        if self.manager.current_passage() is None:
            return
        status = self.manager.status()
        ended = status is SessionStatus.ENDED

        for group in self._button_groups:
            group.setExclusive(False)
        for (question_id, option_id), button in self._option_buttons.items():
            selected = self.manager.selected_option(question_id) == option_id
            button.blockSignals(True)
            button.setChecked(selected)
            button.blockSignals(False)
            button.setEnabled(not ended)
            button.setStyleSheet(
                Styles.get_option_style(
                    self.manager.option_status(question_id, option_id), selected, self._theme
                )
            )
        for group in self._button_groups:
            group.setExclusive(True)

        passage = self.manager.current_passage()
        self.submit_button.setText(
            ASSESSMENT_SUBMIT_TEMPLATE.format(
                answered=self.manager.answered_count(), total=len(passage.questions)
            )
        )
        self.submit_button.setVisible(not ended)
        self.submit_button.setEnabled(self.manager.can_submit())
        self.retake_button.setVisible(ended)
        self.results_button.setVisible(ended)

    def _handle_submit(self) -> None:
        if not self.manager.can_submit():
            return
        self.manager.submit()

    def _update_timer_badge(self, remaining_seconds: int) -> None:
        self.timer_label.setText(format_clock(remaining_seconds))
        self.timer_label.setStyleSheet(
            Styles.get_timer_badge_style(self.manager.timer_level(), self._theme)
        )

    # --- Appearance ---

    def _apply_reading_font(self) -> None:
        style = f"font-size: {self._reading_font_size}pt;"
        for button in self._option_buttons.values():
            font = button.font()
            font.setPointSize(self._reading_font_size)
            button.setFont(font)
        self.question_scroll.setStyleSheet(f"QGroupBox {{ {style} font-weight: bold; }}")

    def apply_font_size(self, font_size: int, theme: Theme = Theme.LIGHT) -> None:
        self._reading_font_size = font_size
        self._theme = theme
        self.submit_button.setStyleSheet(Styles.get_primary_button_style(theme))
        passage = self.manager.current_passage()
        if passage is not None:
            self.passage_view.setHtml(
                renderer.render_document(passage.content, passage.title, font_size)
            )
            self._apply_reading_font()
            self._refresh_answers()
            self._update_timer_badge(self.manager.remaining_seconds())
