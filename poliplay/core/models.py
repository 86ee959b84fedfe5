"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from poliplay.constants.quiz_constants import OPTION_LETTERS


class QuestionKind(Enum):
    """Supported question formats. Values match the persisted ``type`` field."""

    MULTIPLE_CHOICE = "Multiple Choice"
    IDENTIFICATION = "Identification"


@dataclass(slots=True, frozen=True)
class Question:
    """A single quiz item.

    Multiple choice questions carry four options and a correct letter (A-D);
    identification questions carry the expected free-text answer and no options.
    """

    text: str
    kind: QuestionKind
    correct_answer: str
    options: tuple[str, ...] = ()

    @property
    def is_multiple_choice(self) -> bool:
        return self.kind is QuestionKind.MULTIPLE_CHOICE

    def option_for_letter(self, letter: str) -> str | None:
        if letter not in OPTION_LETTERS:
            return None
        index = OPTION_LETTERS.index(letter)
        if index >= len(self.options):
            return None
        return self.options[index]


# Category name -> ordered questions. Insertion order is the display order.
QuestionBank = dict[str, list[Question]]


@dataclass(slots=True, frozen=True)
class QuestionListing:
    """A question together with its position in the bank."""

    category: str
    index: int
    question: Question


@dataclass(slots=True, frozen=True)
class MultipleChoiceAnswer:
    """Answer event carrying the selected option letter."""

    letter: str


@dataclass(slots=True, frozen=True)
class IdentificationAnswer:
    """Answer event carrying the typed response."""

    text: str


AnswerEvent = MultipleChoiceAnswer | IdentificationAnswer


class Outcome(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


class OptionMark(Enum):
    """Annotation applied to a multiple choice option after grading."""

    CORRECT = "correct"
    WRONG = "wrong"


@dataclass(slots=True, frozen=True)
class Verdict:
    """Grading result for one round plus what the player should be shown."""

    outcome: Outcome
    option_marks: tuple[OptionMark | None, ...] = ()
    revealed_answer: str | None = None
    reveal_delay_ms: int = 0
    timed_out: bool = False

    @property
    def is_correct(self) -> bool:
        return self.outcome is Outcome.CORRECT

    @property
    def cue(self) -> str:
        """Name of the feedback sound to play."""
        return "correct" if self.is_correct else "wrong"


@dataclass(slots=True)
class RoundSnapshot:
    """Read-only view of the current round for renderers."""

    status: str
    category: str | None = None
    question: Question | None = None
    remaining_seconds: int = 0
    warning: bool = False
    verdict: Verdict | None = None
    accepting_answers: bool = False
    option_labels: list[str] = field(default_factory=list)
