"""Settings dialog for configuring ReadingQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from reading_app.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        reading_font_size: int = 13,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._reading_font_size = reading_font_size
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, catalog):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        reading_font_row = QHBoxLayout()
        reading_font_label = QLabel("Reading Font Size (passage, questions):")
        reading_font_label.setToolTip("Font size for the passage text and the question list")
        self.reading_font_spinbox = QSpinBox()
        self.reading_font_spinbox.setRange(10, 32)
        self.reading_font_spinbox.setValue(self._reading_font_size)
        self.reading_font_spinbox.setSuffix(" pt")
        reading_font_row.addWidget(reading_font_label)
        reading_font_row.addStretch()
        reading_font_row.addWidget(self.reading_font_spinbox)
        font_layout.addLayout(reading_font_row)

        layout.addWidget(font_group)

        display_group = QGroupBox("Display Settings")
        display_layout = QHBoxLayout()
        display_group.setLayout(display_layout)

        display_layout.addWidget(QLabel("Theme:"))
        display_layout.addStretch()
        self.theme_combo = QComboBox()
        for theme in Theme:
            self.theme_combo.addItem(theme.value, theme)
        self.theme_combo.setCurrentIndex(list(Theme).index(self._theme))
        display_layout.addWidget(self.theme_combo)

        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_reading_font_size(self) -> int:
        """Get the selected passage and question font size."""
        return self.reading_font_spinbox.value()

    def get_theme(self) -> Theme:
        return self.theme_combo.currentData()
