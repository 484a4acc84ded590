from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import ErrorKind

# Wire tag the LLM schema and the questions table use for multiple choice
MULTIPLE_CHOICE_TAG = "mcq"
TEXT_TAG = "text"


class QuestionKind(str, Enum):
    TEXT = "text"
    MULTIPLE_CHOICE = "multiple_choice"

    @property
    def tag(self) -> str:
        return MULTIPLE_CHOICE_TAG if self is QuestionKind.MULTIPLE_CHOICE else TEXT_TAG


# Input types
@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    credential: str


@dataclass(frozen=True)
class Identity:
    id: str
    email: Optional[str] = None


# Sanitized domain objects
@dataclass(frozen=True)
class GeneratedQuestion:
    title: str
    kind: QuestionKind = QuestionKind.TEXT


@dataclass(frozen=True)
class GeneratedForm:
    title: str
    questions: Tuple[GeneratedQuestion, ...]

    def to_payload(self) -> Dict[str, Any]:
        """Render back to the shape the LLM is asked to produce."""
        return {
            "title": self.title,
            "questions": [{"title": q.title, "type": q.kind.tag} for q in self.questions],
        }


@dataclass(frozen=True)
class Sanitized:
    form: GeneratedForm


@dataclass(frozen=True)
class Rejected:
    reason: str


SanitizeResult = Union[Sanitized, Rejected]


# Store rows
@dataclass(frozen=True)
class QuestionRow:
    form_id: str
    title: str
    kind: QuestionKind
    order_index: int

    def to_record(self) -> Dict[str, Any]:
        return {
            "form_id": self.form_id,
            "title": self.title,
            "type": self.kind.tag,
            "order_index": self.order_index,
        }


@dataclass(frozen=True)
class PersistedForm:
    id: str
    title: str
    owner_id: str
    questions: List[QuestionRow] = field(default_factory=list)


# Pipeline outcomes
@dataclass(frozen=True)
class GenerationSuccess:
    form_id: str
    question_count: int
    duration_ms: float = 0.0


@dataclass(frozen=True)
class GenerationFailure:
    kind: ErrorKind
    message: str
    details: Any = None
    form_id: Optional[str] = None

    @property
    def status_code(self) -> int:
        return self.kind.status_code


GenerationResult = Union[GenerationSuccess, GenerationFailure]
