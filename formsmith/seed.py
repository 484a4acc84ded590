"""
Seed a demo form for local development.

Writes one "Customer onboarding" form with four questions for DEMO_USER_ID,
going through the same persistence writer the generation pipeline uses.
Only the form and its questions are written; no sample responses or answers
are seeded. Needs SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY.
"""

import argparse
import logging
import sys
from os import getenv
from typing import List, Optional

from formsmith.models.services.base import FormStore
from formsmith.models.services.supabase import SupabaseStore
from formsmith.pipeline.generation.errors import PersistenceError
from formsmith.pipeline.generation.types import GeneratedForm, GeneratedQuestion, Identity, QuestionKind
from formsmith.pipeline.generation.writer import PersistenceWriter

logger = logging.getLogger(__name__)

DEMO_FORM = GeneratedForm(
    title="Demo: Customer onboarding",
    questions=(
        GeneratedQuestion("What is your role?", QuestionKind.MULTIPLE_CHOICE),
        GeneratedQuestion("What team do you work on?", QuestionKind.TEXT),
        GeneratedQuestion("What is your primary goal this quarter?", QuestionKind.TEXT),
        GeneratedQuestion("How did you hear about us?", QuestionKind.MULTIPLE_CHOICE),
    ),
)


def seed(store: FormStore, user_id: str) -> str:
    persisted = PersistenceWriter(store).write(Identity(id=user_id), DEMO_FORM)
    logger.info(f"Seed complete: formId={persisted.id} questions={len(persisted.questions)}")
    return persisted.id


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Insert a demo form with questions")
    parser.add_argument("--user-id", default=getenv("DEMO_USER_ID"), help="auth.users id that will own the form (default: $DEMO_USER_ID)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if not args.user_id:
        logger.error("Missing DEMO_USER_ID. Set it to the auth.users id you will log in with.")
        return 1

    url = getenv("SUPABASE_URL")
    service_key = getenv("SUPABASE_SERVICE_ROLE_KEY")
    if not url or not service_key:
        logger.error("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY.")
        return 1

    try:
        form_id = seed(SupabaseStore(url, service_key), args.user_id)
    except PersistenceError as e:
        logger.error(f"Seed failed at {e.stage} insert: {e.message}")
        return 1

    print(form_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
