"""Component for browsing the passage catalog."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from reading_app.constants.ui_constants import (
    CATALOG_ALL_DIFFICULTIES,
    CATALOG_DESCRIPTION,
    CATALOG_EMPTY_STATE,
    CATALOG_HEADING,
    CATALOG_NEXT_BUTTON,
    CATALOG_NO_MATCHES,
    CATALOG_PAGE_TEMPLATE,
    CATALOG_PREV_BUTTON,
    CATALOG_SEARCH_PLACEHOLDER,
    CATALOG_START_BUTTON,
)
from reading_app.core.assessment_manager import AssessmentManager
from reading_app.core.models import CatalogPage, Difficulty, Passage
from reading_app.styling.color_palette import Theme
from reading_app.styling.styles import Styles


class CatalogPanel(QWidget):
    """UI component listing passages with search, filter and paging."""

    def __init__(
        self,
        manager: AssessmentManager,
        on_select_passage: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.manager = manager
        self.on_select_passage = on_select_passage
        self._page: int = 1
        self._current_page: CatalogPage | None = None
        self._theme: Theme = Theme.LIGHT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(CATALOG_HEADING, self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.description_label = QLabel(CATALOG_DESCRIPTION, self)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        filter_row = QHBoxLayout()
        self.search_edit = QLineEdit(self)
        self.search_edit.setPlaceholderText(CATALOG_SEARCH_PLACEHOLDER)
        self.search_edit.textChanged.connect(self._handle_filters_changed)
        filter_row.addWidget(self.search_edit, stretch=1)

        self.difficulty_combo = QComboBox(self)
        self.difficulty_combo.addItem(CATALOG_ALL_DIFFICULTIES, None)
        for difficulty in Difficulty:
            self.difficulty_combo.addItem(difficulty.value, difficulty)
        self.difficulty_combo.currentIndexChanged.connect(self._handle_filters_changed)
        filter_row.addWidget(self.difficulty_combo)
        layout.addLayout(filter_row)

        self.passage_list = QListWidget(self)
        self.passage_list.setAlternatingRowColors(True)
        self.passage_list.itemDoubleClicked.connect(self._handle_item_activated)
        self.passage_list.currentRowChanged.connect(self._update_start_button)
        layout.addWidget(self.passage_list, stretch=1)

        self.empty_label = QLabel(CATALOG_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

        paging_row = QHBoxLayout()
        self.prev_button = QPushButton(CATALOG_PREV_BUTTON, self)
        self.prev_button.clicked.connect(lambda: self._go_to_page(self._page - 1))
        paging_row.addWidget(self.prev_button)

        self.page_label = QLabel("", self)
        self.page_label.setAlignment(Qt.AlignCenter)
        paging_row.addWidget(self.page_label, stretch=1)

        self.next_button = QPushButton(CATALOG_NEXT_BUTTON, self)
        self.next_button.clicked.connect(lambda: self._go_to_page(self._page + 1))
        paging_row.addWidget(self.next_button)
        layout.addLayout(paging_row)

        self.start_button = QPushButton(CATALOG_START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.clicked.connect(self._handle_start_click)
        self.start_button.setEnabled(False)
        layout.addWidget(self.start_button)

    def refresh(self) -> None:
        """Re-run the current query against the catalog."""
        self._current_page = self.manager.browse(
            self.search_edit.text(),
            self.difficulty_combo.currentData(),
            self._page,
        )
        self._page = self._current_page.page
        self.passage_list.clear()
        for index, passage in enumerate(self._current_page.items):
            number = (self._page - 1) * self._current_page.page_size + index + 1
            item = QListWidgetItem(self._describe(number, passage), self.passage_list)
            item.setData(Qt.UserRole, passage.id)
            item.setForeground(QColor(Styles.get_difficulty_color(passage.difficulty, self._theme)))

        has_items = bool(self._current_page.items)
        self.passage_list.setVisible(has_items)
        self.empty_label.setVisible(not has_items)
        if not has_items:
            message = CATALOG_EMPTY_STATE if not self.manager.has_passages() else CATALOG_NO_MATCHES
            self.empty_label.setText(message)

        self.page_label.setText(
            CATALOG_PAGE_TEMPLATE.format(page=self._page, page_count=self._current_page.page_count)
        )
        self.prev_button.setEnabled(self._current_page.has_previous)
        self.next_button.setEnabled(self._current_page.has_next)
        self._update_start_button()

    @staticmethod
    def _describe(number: int, passage: Passage) -> str:
        preview = passage.content.strip().replace("\n", " ")
        if len(preview) > 140:
            preview = preview[:140] + "…"
        details = (
            f"{number}. {passage.title}  [{passage.difficulty.value}]\n"
            f"    {passage.word_count} words · {passage.time_limit_minutes} min · "
            f"{len(passage.questions)} questions"
        )
        return f"{details}\n    {preview}" if preview else details

    def _handle_filters_changed(self, *_args) -> None:
        self._page = 1
        self.refresh()

    def _go_to_page(self, page: int) -> None:
        self._page = page
        self.refresh()

    def _selected_passage_id(self) -> str | None:
        item = self.passage_list.currentItem()
        if item is None:
            return None
        return item.data(Qt.UserRole)

    def _update_start_button(self, *_args) -> None:
        self.start_button.setEnabled(self._selected_passage_id() is not None)

    def _handle_item_activated(self, item: QListWidgetItem) -> None:
        self.on_select_passage(item.data(Qt.UserRole))

    def _handle_start_click(self) -> None:
        passage_id = self._selected_passage_id()
        if passage_id is not None:
            self.on_select_passage(passage_id)

    def apply_font_size(self, font_size: int, theme: Theme = Theme.LIGHT) -> None:
        self._theme = theme
        self.passage_list.setStyleSheet(f"font-size: {font_size}pt;")
        self.search_edit.setStyleSheet(f"font-size: {font_size}pt;")
        self.start_button.setStyleSheet(
            Styles.get_primary_button_style(theme) + f"QPushButton {{ font-size: {font_size}pt; }}"
        )
        self.refresh()
