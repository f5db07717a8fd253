"""Component showing the outcome of a finished attempt."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from reading_app.constants.ui_constants import (
    RESULTS_ANALYSIS_HEADING,
    RESULTS_BACK_BUTTON,
    RESULTS_CORRECT_ANSWER_TEMPLATE,
    RESULTS_HEADING,
    RESULTS_NO_ANSWER,
    RESULTS_RETAKE_BUTTON,
    RESULTS_REVIEW_BUTTON,
    RESULTS_YOUR_ANSWER_TEMPLATE,
)
from reading_app.core.models import AttemptRecord, Passage
from reading_app.core.services.results_summary import QuestionReview, ResultsSummary
from reading_app.styling.color_palette import Theme
from reading_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component rendering a handed-over AttemptRecord."""

    def __init__(
        self,
        on_back: Callable[[], None],
        on_retake: Callable[[], None],
        on_review: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self.on_retake = on_retake
        self.on_review = on_review
        self._attempt: AttemptRecord | None = None
        self._summary: ResultsSummary | None = None
        self._theme: Theme = Theme.LIGHT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(RESULTS_HEADING, self)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.passage_label = QLabel("", self)
        self.passage_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.passage_label)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        stats_group = QGroupBox("Breakdown", self)
        stats_layout = QGridLayout()
        stats_group.setLayout(stats_layout)
        self.answered_value = QLabel("", stats_group)
        self.time_value = QLabel("", stats_group)
        self.grade_value = QLabel("", stats_group)
        for column, (caption, value_label) in enumerate(
            (("Questions Answered", self.answered_value), ("Time Spent", self.time_value), ("Grade", self.grade_value))
        ):
            caption_label = QLabel(caption, stats_group)
            caption_label.setAlignment(Qt.AlignCenter)
            value_label.setAlignment(Qt.AlignCenter)
            value_label.setStyleSheet(Styles.get_large_label_style())
            stats_layout.addWidget(value_label, 0, column)
            stats_layout.addWidget(caption_label, 1, column)
        layout.addWidget(stats_group)

        analysis_group = QGroupBox(RESULTS_ANALYSIS_HEADING, self)
        analysis_layout = QVBoxLayout()
        analysis_group.setLayout(analysis_layout)
        self.analysis_scroll = QScrollArea(analysis_group)
        self.analysis_scroll.setWidgetResizable(True)
        analysis_layout.addWidget(self.analysis_scroll)
        layout.addWidget(analysis_group, stretch=1)

        button_row = QHBoxLayout()
        self.back_button = QPushButton(RESULTS_BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        button_row.addWidget(self.back_button)

        self.review_button = QPushButton(RESULTS_REVIEW_BUTTON, self)
        self.review_button.clicked.connect(self.on_review)
        button_row.addWidget(self.review_button)

        self.retake_button = QPushButton(RESULTS_RETAKE_BUTTON, self)
        self.retake_button.setStyleSheet(Styles.get_primary_button_style())
        self.retake_button.clicked.connect(self.on_retake)
        button_row.addWidget(self.retake_button)
        layout.addLayout(button_row)

    def show_attempt(self, attempt: AttemptRecord, passage: Passage | None) -> None:
        """Take ownership of a finalized attempt and render it."""
        self._attempt = attempt
        self._summary = ResultsSummary.from_attempt(attempt, passage)
        self._render()

    def attempt(self) -> AttemptRecord | None:
        return self._attempt

    def _render(self) -> None:
        summary = self._summary
        if summary is None:
            return
        self.passage_label.setText(summary.passage_title)
        self.title_label.setText(summary.title)
        self.score_label.setText(f"{summary.score}%")
        self.score_label.setStyleSheet(
            f"font-size: 36pt; font-weight: bold; color: {Styles.get_score_color(summary.score, self._theme)};"
        )
        self.message_label.setText(summary.message)
        self.answered_value.setText(summary.answered_label)
        self.time_value.setText(summary.time_spent)
        self.grade_value.setText(summary.grade_label)
        self._render_reviews(summary.reviews)

    def _render_reviews(self, reviews: tuple[QuestionReview, ...]) -> None:
        container = QWidget()
        container_layout = QVBoxLayout()
        container.setLayout(container_layout)

        for number, review in enumerate(reviews, start=1):
            frame = QFrame(container)
            frame.setStyleSheet(Styles.get_review_style(review.is_correct, self._theme))
            frame_layout = QVBoxLayout()
            frame.setLayout(frame_layout)

            marker = "\u2713" if review.is_correct else "\u2717"
            prompt_label = QLabel(f"{marker} {number}. {review.prompt}", frame)
            prompt_label.setWordWrap(True)
            prompt_label.setStyleSheet("font-weight: bold;")
            frame_layout.addWidget(prompt_label)

            answer = review.selected_text if review.selected_text is not None else RESULTS_NO_ANSWER
            answer_label = QLabel(RESULTS_YOUR_ANSWER_TEMPLATE.format(answer=answer), frame)
            answer_label.setWordWrap(True)
            frame_layout.addWidget(answer_label)

            if not review.is_correct:
                correct_label = QLabel(
                    RESULTS_CORRECT_ANSWER_TEMPLATE.format(answer=review.correct_text), frame
                )
                correct_label.setWordWrap(True)
                frame_layout.addWidget(correct_label)

            container_layout.addWidget(frame)

        container_layout.addStretch()
        self.analysis_scroll.setWidget(container)

    def apply_font_size(self, font_size: int, theme: Theme = Theme.LIGHT) -> None:
        self._theme = theme
        self.message_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.retake_button.setStyleSheet(Styles.get_primary_button_style(theme))
        self._render()
