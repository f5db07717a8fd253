"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "ReadingQt"
CATALOG_HEADING: str = "Reading Comprehension"
CATALOG_DESCRIPTION: str = (
    "Each passage has been selected to challenge your understanding. "
    "Approach each question with precision and thoughtful analysis."
)
CATALOG_SEARCH_PLACEHOLDER: str = "Search passages…"
CATALOG_ALL_DIFFICULTIES: str = "All levels"
CATALOG_EMPTY_STATE: str = "No passages are available right now."
CATALOG_NO_MATCHES: str = "No passages match your search."
CATALOG_PAGE_TEMPLATE: str = "Page {page} of {page_count}"
CATALOG_START_BUTTON: str = "Begin Assessment"
CATALOG_PREV_BUTTON: str = "Previous"
CATALOG_NEXT_BUTTON: str = "Next"

ASSESSMENT_LOADING_MESSAGE: str = "Preparing your assessment…"
ASSESSMENT_UNAVAILABLE_MESSAGE: str = "This passage is not available."
ASSESSMENT_BACK_BUTTON: str = "Back to Passages"
ASSESSMENT_SUBMIT_TEMPLATE: str = "Submit Assessment ({answered}/{total})"
ASSESSMENT_RETAKE_BUTTON: str = "Retake Assessment"
ASSESSMENT_RESULTS_BUTTON: str = "Show Results"
ASSESSMENT_LEAVE_TITLE: str = "Leave assessment"
ASSESSMENT_LEAVE_MESSAGE: str = "Your answers will be discarded. Leave this assessment?"
TIME_UP_TITLE: str = "Time is up"
TIME_UP_MESSAGE: str = "The time limit was reached and your answers were submitted."

RESULTS_HEADING: str = "Assessment Complete"
RESULTS_REVIEW_BUTTON: str = "Review Answers"
RESULTS_RETAKE_BUTTON: str = "Retake Assessment"
RESULTS_BACK_BUTTON: str = "Back to Passages"
RESULTS_ANALYSIS_HEADING: str = "Detailed Analysis"
RESULTS_YOUR_ANSWER_TEMPLATE: str = "Your Answer: {answer}"
RESULTS_NO_ANSWER: str = "No answer selected"
RESULTS_CORRECT_ANSWER_TEMPLATE: str = "Correct Answer: {answer}"

MODE_BUTTON_HELP: str = "Help"
MODE_BUTTON_ABOUT: str = "About ReadingQt"
MODE_BUTTON_SETTINGS: str = "Settings"
