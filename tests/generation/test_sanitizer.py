import pytest

from formsmith.pipeline.generation.sanitizer import sanitize_form, sanitize_output_text
from formsmith.pipeline.generation.types import (
    GeneratedForm,
    GeneratedQuestion,
    QuestionKind,
    Rejected,
    Sanitized,
)


class TestSanitizeForm:
    def test_trims_and_maps_multiple_choice(self):
        result = sanitize_form({"title": "  Onboarding  ", "questions": [{"title": " Role? ", "type": "mcq"}]})

        assert result == Sanitized(GeneratedForm(
            title="Onboarding",
            questions=(GeneratedQuestion("Role?", QuestionKind.MULTIPLE_CHOICE),),
        ))

    @pytest.mark.parametrize("value", [
        {},
        {"title": "x"},
        {"title": "", "questions": [{"title": "Q", "type": "text"}]},
        {"title": "   ", "questions": [{"title": "Q", "type": "text"}]},
        {"title": "x", "questions": []},
        {"title": "x", "questions": [{"title": "  "}, {"type": "mcq"}]},
        {"title": 42, "questions": [{"title": "Q"}]},
    ])
    def test_rejects_missing_title_or_questions(self, value):
        assert isinstance(sanitize_form(value), Rejected)

    @pytest.mark.parametrize("value", [None, "text", 3, 1.5, True, ["title", "questions"]])
    def test_rejects_non_objects(self, value):
        result = sanitize_form(value)
        assert isinstance(result, Rejected)
        assert result.reason == "output is not an object"

    @pytest.mark.parametrize("question_type", ["rating", "MCQ", None, 7, ["mcq"], {"kind": "mcq"}])
    def test_unknown_types_become_text(self, question_type):
        result = sanitize_form({"title": "Form", "questions": [{"title": "Q", "type": question_type}]})
        assert result.form.questions[0].kind is QuestionKind.TEXT

    def test_absent_type_becomes_text(self):
        result = sanitize_form({"title": "Form", "questions": [{"title": "Q"}]})
        assert result.form.questions[0].kind is QuestionKind.TEXT

    def test_drops_untitled_questions_and_keeps_order(self):
        result = sanitize_form({
            "title": "Form",
            "questions": [
                {"title": "First", "type": "text"},
                {"title": "", "type": "mcq"},
                "not a question",
                None,
                {"title": 12, "type": "text"},
                {"title": "Second", "type": "mcq"},
                {"title": "Third"},
            ],
        })

        assert [q.title for q in result.form.questions] == ["First", "Second", "Third"]
        assert [q.kind for q in result.form.questions] == [
            QuestionKind.TEXT, QuestionKind.MULTIPLE_CHOICE, QuestionKind.TEXT,
        ]

    def test_non_list_questions_rejects(self):
        assert isinstance(sanitize_form({"title": "Form", "questions": {"title": "Q"}}), Rejected)

    def test_extra_properties_are_ignored(self):
        result = sanitize_form({"title": "Form", "extra": 1, "questions": [{"title": "Q", "type": "text", "options": ["a"]}]})
        assert isinstance(result, Sanitized)

    def test_idempotent_on_sanitized_form(self):
        first = sanitize_form({"title": " Form ", "questions": [{"title": " A ", "type": "mcq"}, {"title": "B", "type": "rating"}]})
        second = sanitize_form(first.form)

        assert second == first


class TestSanitizeOutputText:
    def test_decodes_json(self):
        result = sanitize_output_text('{"title": "Form", "questions": [{"title": "Q", "type": "text"}]}')
        assert isinstance(result, Sanitized)
        assert result.form.title == "Form"

    @pytest.mark.parametrize("text", ["", "not json", "{\"title\": ", "```json\n{}\n```"])
    def test_invalid_json_rejects(self, text):
        result = sanitize_output_text(text)
        assert isinstance(result, Rejected)

    def test_json_scalar_rejects(self):
        assert isinstance(sanitize_output_text("\"just a string\""), Rejected)
