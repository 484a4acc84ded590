from typing import List

from formsmith.models.services.base import FormStore, StoreError
from .errors import PersistenceError
from .types import GeneratedForm, Identity, PersistedForm, QuestionRow


def build_question_rows(form_id: str, form: GeneratedForm) -> List[QuestionRow]:
    return [
        QuestionRow(form_id=form_id, title=q.title, kind=q.kind, order_index=index)
        for index, q in enumerate(form.questions)
    ]


class PersistenceWriter:
    """
    Two sequential writes: the form row, then all of its question rows.

    The store offers no transaction spanning both. If the question write fails
    the form row stays committed and PersistenceError carries its id.
    """

    def __init__(self, store: FormStore):
        self.store = store

    def write(self, identity: Identity, form: GeneratedForm) -> PersistedForm:
        try:
            form_id = self.store.insert_form(form.title, identity.id)
        except StoreError as e:
            raise PersistenceError("form", str(e) or "Insert failed.") from e
        if not form_id:
            raise PersistenceError("form", "Insert failed.")

        rows = build_question_rows(form_id, form)
        try:
            self.store.insert_questions(rows)
        except StoreError as e:
            raise PersistenceError("questions", str(e) or "Insert failed.", form_id=form_id) from e

        return PersistedForm(id=form_id, title=form.title, owner_id=identity.id, questions=rows)
