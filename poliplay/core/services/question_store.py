"""Persistence and editing of the categorized question bank.

The bank lives under a single storage key as JSON shaped like::

    {
      "Law": [
        {"question": "...", "type": "Multiple Choice",
         "options": ["...", "...", "...", "..."], "correctAnswer": "A"},
        {"question": "...", "type": "Identification", "correctAnswer": "..."}
      ]
    }

Editing helpers never mutate the bank they are given; they return a new one.
"""

from __future__ import annotations

import json
import logging

from poliplay.constants.quiz_constants import OPTION_LETTERS
from poliplay.constants.storage_constants import STORAGE_KEY
from poliplay.core.default_questions import build_default_bank
from poliplay.core.errors import QuestionValidationError
from poliplay.core.local_storage import LocalStorage
from poliplay.core.models import Question, QuestionBank, QuestionKind, QuestionListing

logger = logging.getLogger(__name__)


class _MalformedBankError(Exception):
    """Raised when persisted data does not describe a question bank."""


class QuestionStore:
    """Loads and saves the question bank through a key-value storage."""

    def __init__(self, storage: LocalStorage, storage_key: str = STORAGE_KEY) -> None:
        self._storage = storage
        self._storage_key = storage_key

    def load(self) -> QuestionBank:
        """Return the persisted bank, seeding storage on first run or unreadable data."""
        raw = self._storage.get_item(self._storage_key)
        if raw is not None:
            try:
                return _decode_bank(raw)
            except _MalformedBankError as exc:
                logger.warning("Stored question bank is malformed (%s); restoring defaults.", exc)

        bank = build_default_bank()
        self.save(bank)
        logger.info("Seeded question bank with %d categories", len(bank))
        return bank

    def save(self, bank: QuestionBank) -> None:
        self._storage.set_item(self._storage_key, _encode_bank(bank))


def add_question(bank: QuestionBank, category: str, question: Question) -> QuestionBank:
    """Append ``question`` to ``category``, creating the category when needed."""
    updated = copy_bank(bank)
    updated.setdefault(category, []).append(question)
    return updated


def delete_question(bank: QuestionBank, category: str, index: int) -> QuestionBank:
    """Remove the question at ``index``; drop the category once it is empty.

    An unknown category or an index outside ``[0, len)`` leaves the bank unchanged.
    """
    updated = copy_bank(bank)
    questions = updated.get(category)
    if questions is None or not 0 <= index < len(questions):
        logger.debug("Ignoring delete of %s[%d]: no such question", category, index)
        return updated
    questions.pop(index)
    if not questions:
        del updated[category]
    return updated


def copy_bank(bank: QuestionBank) -> QuestionBank:
    return {category: list(questions) for category, questions in bank.items()}


def list_questions(bank: QuestionBank) -> list[QuestionListing]:
    return [
        QuestionListing(category=category, index=index, question=question)
        for category, questions in bank.items()
        for index, question in enumerate(questions)
    ]


def describe_answer(question: Question) -> str:
    """Summarize the correct answer for list views, e.g. ``Answer: A. Make laws``."""
    if question.is_multiple_choice:
        option_text = question.option_for_letter(question.correct_answer) or ""
        return f"Answer: {question.correct_answer}. {option_text}"
    return f"Answer: {question.correct_answer}"


def validate_question(
    text: str,
    kind: QuestionKind,
    correct_answer: str,
    options: list[str] | tuple[str, ...] | None = None,
) -> Question:
    """Build a cleaned ``Question`` from authoring input or raise ``QuestionValidationError``."""
    cleaned_text = text.strip()
    if not cleaned_text:
        raise QuestionValidationError("Please fill in all required fields!")

    cleaned_answer = correct_answer.strip()
    if kind is QuestionKind.MULTIPLE_CHOICE:
        cleaned_options = tuple(option.strip() for option in options or ())
        if len(cleaned_options) != len(OPTION_LETTERS) or any(not option for option in cleaned_options):
            raise QuestionValidationError("Please fill in all answer options!")
        cleaned_answer = cleaned_answer.upper()
        if cleaned_answer not in OPTION_LETTERS:
            raise QuestionValidationError("Correct option must be one of A, B, C, or D.")
        return Question(
            text=cleaned_text,
            kind=kind,
            options=cleaned_options,
            correct_answer=cleaned_answer,
        )

    if not cleaned_answer:
        raise QuestionValidationError("Please enter the correct answer!")
    return Question(text=cleaned_text, kind=kind, correct_answer=cleaned_answer)


def _encode_bank(bank: QuestionBank) -> str:
    document = {
        category: [_encode_question(question) for question in questions]
        for category, questions in bank.items()
    }
    return json.dumps(document, ensure_ascii=False)


def _encode_question(question: Question) -> dict[str, object]:
    record: dict[str, object] = {
        "question": question.text,
        "type": question.kind.value,
    }
    if question.is_multiple_choice:
        record["options"] = list(question.options)
    record["correctAnswer"] = question.correct_answer
    return record


def _decode_bank(raw: str) -> QuestionBank:
    try:
        document = json.loads(raw)
    except ValueError as exc:
        raise _MalformedBankError(f"invalid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise _MalformedBankError("top level is not an object")

    bank: QuestionBank = {}
    for category, records in document.items():
        if not isinstance(records, list):
            raise _MalformedBankError(f"category '{category}' is not a list")
        questions = [_decode_question(record) for record in records]
        if questions:
            bank[category] = questions
    return bank


def _decode_question(record: object) -> Question:
    if not isinstance(record, dict):
        raise _MalformedBankError("question record is not an object")
    text = record.get("question")
    type_name = record.get("type")
    correct_answer = record.get("correctAnswer")
    if not isinstance(text, str) or not isinstance(correct_answer, str):
        raise _MalformedBankError("question text and correctAnswer must be strings")
    try:
        kind = QuestionKind(type_name)
    except ValueError as exc:
        raise _MalformedBankError(f"unknown question type {type_name!r}") from exc

    options = None
    if kind is QuestionKind.MULTIPLE_CHOICE:
        options = record.get("options")
        if (
            not isinstance(options, list)
            or len(options) != len(OPTION_LETTERS)
            or not all(isinstance(option, str) for option in options)
        ):
            raise _MalformedBankError("multiple choice questions need four string options")

    try:
        return validate_question(text, kind, correct_answer, options)
    except QuestionValidationError as exc:
        raise _MalformedBankError(f"invalid question {text!r}: {exc}") from exc
