"""Component for adding, listing, and deleting questions."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from poliplay.constants.quiz_constants import OPTION_LETTERS
from poliplay.constants.ui_constants import (
    ADD_QUESTION_BUTTON,
    CLEAR_FORM_BUTTON,
    DELETE_QUESTION_BUTTON,
    EMPTY_LIST_MESSAGE,
    LOGOUT_BUTTON,
    PLACEHOLDER_CATEGORY,
    PLACEHOLDER_IDENTIFICATION,
    PLACEHOLDER_QUESTION,
    QUESTION_ADDED_MESSAGE,
    QUESTION_COUNT_TEMPLATE,
    STATUS_MESSAGE_TIMEOUT_MS,
    TYPE_SELECT_PROMPT,
)
from poliplay.core.errors import QuestionValidationError
from poliplay.core.models import QuestionKind, QuestionListing
from poliplay.core.quiz_manager import QuizManager
from poliplay.core.services.question_store import describe_answer, validate_question
from poliplay.ui.dialog_helpers import confirm_delete_question, show_error, show_info, show_warning
from poliplay.ui.question_renderer import render_question_preview
from poliplay.styling.styles import Styles


class AuthoringPanel(QWidget):
    """UI component for authoring questions and browsing the bank."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_logout: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_logout = on_logout

        self._build_ui()
        self._toggle_answer_fields()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)
        layout.addWidget(self._build_form_group(), stretch=3)
        layout.addWidget(self._build_list_group(), stretch=2)

    def _build_form_group(self) -> QGroupBox:
        group = QGroupBox("Add Question", self)
        form = QVBoxLayout()
        group.setLayout(form)

        self.category_combo = QComboBox(group)
        self.category_combo.setEditable(True)
        self.category_combo.lineEdit().setPlaceholderText(PLACEHOLDER_CATEGORY)
        form.addWidget(QLabel("Category:", group))
        form.addWidget(self.category_combo)

        self.type_combo = QComboBox(group)
        self.type_combo.addItem(TYPE_SELECT_PROMPT, userData=None)
        for kind in QuestionKind:
            self.type_combo.addItem(kind.value, userData=kind)
        self.type_combo.currentIndexChanged.connect(self._toggle_answer_fields)
        form.addWidget(QLabel("Question type:", group))
        form.addWidget(self.type_combo)

        self.question_input = QPlainTextEdit(group)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.question_input.textChanged.connect(self._refresh_preview)
        form.addWidget(self.question_input)

        # Multiple choice fields
        self.multiple_choice_fields = QWidget(group)
        mc_layout = QVBoxLayout()
        mc_layout.setContentsMargins(0, 0, 0, 0)
        self.multiple_choice_fields.setLayout(mc_layout)
        options_row = QHBoxLayout()
        self.option_inputs: list[QLineEdit] = []
        for letter in OPTION_LETTERS:
            option_input = QLineEdit(self.multiple_choice_fields)
            option_input.setPlaceholderText(f"Option {letter}")
            option_input.textChanged.connect(self._refresh_preview)
            options_row.addWidget(option_input)
            self.option_inputs.append(option_input)
        mc_layout.addLayout(options_row)
        selector_row = QHBoxLayout()
        selector_row.addWidget(QLabel("Correct option:", self.multiple_choice_fields))
        self.correct_option_combo = QComboBox(self.multiple_choice_fields)
        for letter in OPTION_LETTERS:
            self.correct_option_combo.addItem(letter, userData=letter)
        self.correct_option_combo.currentIndexChanged.connect(self._refresh_preview)
        selector_row.addWidget(self.correct_option_combo)
        mc_layout.addLayout(selector_row)
        form.addWidget(self.multiple_choice_fields)

        # Identification fields
        self.identification_fields = QWidget(group)
        id_layout = QVBoxLayout()
        id_layout.setContentsMargins(0, 0, 0, 0)
        self.identification_fields.setLayout(id_layout)
        self.identification_input = QLineEdit(self.identification_fields)
        self.identification_input.setPlaceholderText(PLACEHOLDER_IDENTIFICATION)
        self.identification_input.textChanged.connect(self._refresh_preview)
        id_layout.addWidget(self.identification_input)
        form.addWidget(self.identification_fields)

        button_row = QHBoxLayout()
        self.add_button = QPushButton(ADD_QUESTION_BUTTON, group)
        self.add_button.clicked.connect(self._handle_add_question)
        button_row.addWidget(self.add_button)
        self.clear_button = QPushButton(CLEAR_FORM_BUTTON, group)
        self.clear_button.clicked.connect(self.clear_form)
        button_row.addWidget(self.clear_button)
        form.addLayout(button_row)

        self.status_label = QLabel("", group)
        self.status_label.setStyleSheet(Styles.get_status_style(success=True))
        form.addWidget(self.status_label)
        self._status_timer = QTimer(self)
        self._status_timer.setSingleShot(True)
        self._status_timer.setInterval(STATUS_MESSAGE_TIMEOUT_MS)
        self._status_timer.timeout.connect(self.status_label.clear)

        self.preview_view = QWebEngineView(group)
        form.addWidget(self.preview_view, stretch=1)
        return group

    def _build_list_group(self) -> QGroupBox:
        group = QGroupBox("Questions", self)
        layout = QVBoxLayout()
        group.setLayout(layout)

        self.count_label = QLabel("", group)
        self.count_label.setStyleSheet(Styles.get_muted_label_style())
        layout.addWidget(self.count_label)

        self.questions_list = QListWidget(group)
        self.questions_list.setWordWrap(True)
        layout.addWidget(self.questions_list, stretch=1)

        button_row = QHBoxLayout()
        self.delete_button = QPushButton(DELETE_QUESTION_BUTTON, group)
        self.delete_button.setObjectName("dangerButton")
        self.delete_button.clicked.connect(self._handle_delete_question)
        button_row.addWidget(self.delete_button)
        self.logout_button = QPushButton(LOGOUT_BUTTON, group)
        self.logout_button.clicked.connect(self.on_logout)
        button_row.addWidget(self.logout_button)
        layout.addLayout(button_row)
        return group

    def _selected_kind(self) -> QuestionKind | None:
        return self.type_combo.currentData()

    def _toggle_answer_fields(self) -> None:
        kind = self._selected_kind()
        self.multiple_choice_fields.setVisible(kind is QuestionKind.MULTIPLE_CHOICE)
        self.identification_fields.setVisible(kind is QuestionKind.IDENTIFICATION)
        self._refresh_preview()

    def _handle_add_question(self) -> None:
        category = self.category_combo.currentText().strip()
        kind = self._selected_kind()
        if not category or kind is None:
            show_warning(self, "Missing fields", "Please fill in all required fields!")
            return

        try:
            if kind is QuestionKind.MULTIPLE_CHOICE:
                question = validate_question(
                    self.question_input.toPlainText(),
                    kind,
                    self.correct_option_combo.currentData(),
                    [field.text() for field in self.option_inputs],
                )
            else:
                question = validate_question(
                    self.question_input.toPlainText(),
                    kind,
                    self.identification_input.text(),
                )
            self.quiz_manager.add_question(category, question)
        except QuestionValidationError as exc:
            show_warning(self, "Invalid question", str(exc))
            return
        except OSError as exc:
            show_error(self, "Save failed", f"Could not save question: {exc}")
            return

        self.clear_form()
        self.refresh_questions()
        self.status_label.setText(QUESTION_ADDED_MESSAGE)
        self._status_timer.start()

    def _handle_delete_question(self) -> None:
        item = self.questions_list.currentItem()
        listing: QuestionListing | None = item.data(Qt.UserRole) if item is not None else None
        if listing is None:
            show_info(self, "No selection", "Select a question before deleting.")
            return

        if not confirm_delete_question(self, listing.question.text):
            return

        try:
            deleted = self.quiz_manager.delete_question(listing.category, listing.index)
        except OSError as exc:
            show_error(self, "Delete failed", f"Could not delete question: {exc}")
            return
        if not deleted:
            show_info(self, "Already removed", "That question no longer exists.")
        self.refresh_questions()

    def refresh_questions(self) -> None:
        """Rebuild the list view and the category suggestions from the bank."""
        listings = self.quiz_manager.list_questions()
        selected_row = self.questions_list.currentRow()

        self.questions_list.clear()
        for listing in listings:
            question = listing.question
            text = (
                f"[{listing.category}] {question.kind.value}\n"
                f"{question.text}\n"
                f"{describe_answer(question)}"
            )
            item = QListWidgetItem(text, self.questions_list)
            item.setData(Qt.UserRole, listing)
        if not listings:
            placeholder = QListWidgetItem(EMPTY_LIST_MESSAGE, self.questions_list)
            placeholder.setFlags(Qt.NoItemFlags)
        elif 0 <= selected_row < len(listings):
            self.questions_list.setCurrentRow(selected_row)

        categories = self.quiz_manager.get_categories()
        self.count_label.setText(
            QUESTION_COUNT_TEMPLATE.format(count=len(listings), categories=len(categories))
        )
        current_category = self.category_combo.currentText()
        self.category_combo.blockSignals(True)
        self.category_combo.clear()
        self.category_combo.addItems(categories)
        self.category_combo.setEditText(current_category)
        self.category_combo.blockSignals(False)

    def clear_form(self) -> None:
        self.category_combo.setEditText("")
        self.type_combo.setCurrentIndex(0)
        self.question_input.clear()
        for field in self.option_inputs:
            field.clear()
        self.correct_option_combo.setCurrentIndex(0)
        self.identification_input.clear()
        self._toggle_answer_fields()

    def _refresh_preview(self) -> None:
        kind = self._selected_kind()
        if kind is QuestionKind.MULTIPLE_CHOICE:
            answer = self.correct_option_combo.currentData() or ""
        else:
            answer = self.identification_input.text()
        html = render_question_preview(
            self.question_input.toPlainText(),
            kind,
            [field.text() for field in self.option_inputs],
            answer,
        )
        self.preview_view.setHtml(html)

    def reset_state(self) -> None:
        """Reset the panel to its initial state."""
        self.clear_form()
        self.status_label.clear()
        self.refresh_questions()
