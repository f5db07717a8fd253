"""Static metadata describing ReadingQt."""

APP_NAME = "ReadingQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ReadingQt is a timed reading-comprehension trainer built with Qt. "
    "Pick a passage, answer its questions before the clock runs out, and review your results."
)

HELP_TEXT = (
    "Choose a passage from the catalog to start an assessment. The timer starts as soon as "
    "the passage is shown. Submit once every question is answered; when time runs out the "
    "assessment is submitted automatically with whatever you answered.\n\n"
    "Passages are read from essays.json in the data directory. Set READINGQT_DATA_DIR to "
    "point the application at another catalog."
)
