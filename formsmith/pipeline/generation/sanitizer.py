"""
Coerce untrusted LLM output into a GeneratedForm.

Total functions: any shape mismatch becomes a Rejected result, never an exception.
"""

import json
from collections.abc import Mapping
from typing import Any

from .types import (
    MULTIPLE_CHOICE_TAG,
    GeneratedForm,
    GeneratedQuestion,
    QuestionKind,
    Rejected,
    Sanitized,
    SanitizeResult,
)


def _clean_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _clean_question(value: Any):
    if not isinstance(value, Mapping):
        return None
    title = _clean_text(value.get("title"))
    if not title:
        return None
    # absent, non-string and unknown types all fall back to text
    kind = QuestionKind.MULTIPLE_CHOICE if value.get("type") == MULTIPLE_CHOICE_TAG else QuestionKind.TEXT
    return GeneratedQuestion(title=title, kind=kind)


def sanitize_form(value: Any) -> SanitizeResult:
    """
    Clean a decoded payload.

    Titles are trimmed, questions without a title are dropped, unknown question
    types become text. Rejects when the form title or the cleaned question list
    ends up empty. Question order is preserved.
    """
    if isinstance(value, GeneratedForm):
        value = value.to_payload()
    if not isinstance(value, Mapping):
        return Rejected("output is not an object")

    title = _clean_text(value.get("title"))
    raw_questions = value.get("questions")
    if not isinstance(raw_questions, (list, tuple)):
        raw_questions = []

    questions = tuple(q for q in map(_clean_question, raw_questions) if q is not None)

    if not title:
        return Rejected("form title is empty")
    if not questions:
        return Rejected("no usable questions")
    return Sanitized(GeneratedForm(title=title, questions=questions))


def sanitize_output_text(text: str) -> SanitizeResult:
    """Decode raw completion text as JSON, then sanitize it."""
    try:
        decoded = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        return Rejected(f"output is not valid JSON: {e}")
    return sanitize_form(decoded)
