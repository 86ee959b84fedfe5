"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "PoliPlay Question Generator"
PLAYER_URL_PLACEHOLDER: str = "http://<host-ip>:8000/"

# Fixed credential pair gating the generator. A convenience lock, not a security boundary.
GENERATOR_USERNAME: str = "MSGRamos"
GENERATOR_PASSWORD: str = "Leynes2024"

LOGIN_TITLE: str = "Admin Login"
LOGIN_BUTTON: str = "Login"
LOGIN_ERROR_MESSAGE: str = "Invalid username or password!"
LOGIN_ERROR_TIMEOUT_MS: int = 3000
LOGOUT_BUTTON: str = "Logout"

PLACEHOLDER_QUESTION: str = "Enter your question text (supports Markdown)."
PLACEHOLDER_CATEGORY: str = "Select or type a category"
PLACEHOLDER_IDENTIFICATION: str = "Correct answer"
TYPE_SELECT_PROMPT: str = "Select type…"
ADD_QUESTION_BUTTON: str = "Add Question"
CLEAR_FORM_BUTTON: str = "Clear Form"
DELETE_QUESTION_BUTTON: str = "Delete Selected"
ABOUT_BUTTON: str = "About PoliPlay"
HELP_BUTTON: str = "Help"

QUESTION_ADDED_MESSAGE: str = "Question added successfully!"
STATUS_MESSAGE_TIMEOUT_MS: int = 3000
EMPTY_LIST_MESSAGE: str = "No questions added yet."
QUESTION_COUNT_TEMPLATE: str = "{count} question(s) in {categories} categories"
