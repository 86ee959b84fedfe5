"""Static metadata describing PoliPlay."""

APP_NAME = "PoliPlay"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "PoliPlay is a civics trivia game. Players pick a category in the browser and answer "
    "randomly chosen questions against the clock; administrators maintain the question bank "
    "from the Question Generator console."
)

HELP_TEXT = (
    "Log in to the Question Generator to add or delete questions. Multiple choice questions "
    "need four options and the letter of the correct one. Identification questions need the "
    "expected answer, which players may type in any letter case.\n\n"
    "Question text supports Markdown. Changes are saved immediately and are picked up by the "
    "next round played in the browser."
)
