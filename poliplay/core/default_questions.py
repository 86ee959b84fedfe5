"""Question bank written to storage on first run."""

from __future__ import annotations

from poliplay.core.models import Question, QuestionBank, QuestionKind


def build_default_bank() -> QuestionBank:
    """Return a fresh copy of the seed bank: four categories, one question of each kind."""
    return {
        "Political Issues": [
            Question(
                text="What is the primary function of the legislative branch?",
                kind=QuestionKind.MULTIPLE_CHOICE,
                options=("Make laws", "Enforce laws", "Interpret laws", "Veto laws"),
                correct_answer="A",
            ),
            Question(
                text="What is democracy?",
                kind=QuestionKind.IDENTIFICATION,
                correct_answer="A system of government by the whole population",
            ),
        ],
        "Law": [
            Question(
                text="What is the supreme law of the land in the Philippines?",
                kind=QuestionKind.MULTIPLE_CHOICE,
                options=("Constitution", "Criminal Code", "Civil Code", "Administrative Code"),
                correct_answer="A",
            ),
            Question(
                text="What does 'habeas corpus' mean?",
                kind=QuestionKind.IDENTIFICATION,
                correct_answer="You have the body",
            ),
        ],
        "Roles": [
            Question(
                text="Who is the chief executive of the government?",
                kind=QuestionKind.MULTIPLE_CHOICE,
                options=("President", "Vice President", "Speaker of the House", "Chief Justice"),
                correct_answer="A",
            ),
            Question(
                text="What is the primary role of the judiciary?",
                kind=QuestionKind.IDENTIFICATION,
                correct_answer="To interpret laws",
            ),
        ],
        "Figures": [
            Question(
                text="Who is known as the Father of Philippine Constitution?",
                kind=QuestionKind.MULTIPLE_CHOICE,
                options=("Claro M. Recto", "Jose Rizal", "Manuel Quezon", "Emilio Aguinaldo"),
                correct_answer="A",
            ),
            Question(
                text="Who was the first President of the Philippines?",
                kind=QuestionKind.IDENTIFICATION,
                correct_answer="Emilio Aguinaldo",
            ),
        ],
    }
