"""
Generation orchestrator: the single entry point of the pipeline.

Stages run strictly in order and the first failure ends the run:
RequireApiKey -> RequirePrompt -> RequireCredential -> VerifyIdentity ->
InvokeGeneration -> ExtractText -> Sanitize -> PersistForm -> PersistQuestions.
Nothing is retried; every failure comes back as a GenerationFailure.
"""

import logging
import time
from typing import Any, Optional

from formsmith.models.providers.base import ModelError, ModelEmptyResponse, ModelStatusError
from formsmith.models.services.base import AuthService, AuthError, FormStore
from .config import PipelineConfig
from .errors import ErrorKind, PersistenceError
from .generator import FormGenerator
from .identity import IdentityVerifier, extract_bearer_token
from .sanitizer import sanitize_output_text
from .types import GenerationFailure, GenerationResult, GenerationSuccess, Rejected
from .writer import PersistenceWriter

logger = logging.getLogger(__name__)

LOG_PREFIX = "[generate-form]"


class GenerationPipeline:
    def __init__(self, config: PipelineConfig, auth: AuthService, generator: FormGenerator, store: FormStore):
        self.config = config
        self.verifier = IdentityVerifier(auth)
        self.generator = generator
        self.store = store

    def run(self, prompt: Any, authorization: Optional[str]) -> GenerationResult:
        started_at = time.perf_counter()

        if not self.config.has_api_key:
            logger.error(f"{LOG_PREFIX} OPENAI_API_KEY is not configured")
            return self._fail(ErrorKind.CONFIG_MISSING, "Missing OPENAI_API_KEY.")

        prompt = prompt.strip() if isinstance(prompt, str) else ""
        if not prompt:
            return self._fail(ErrorKind.INVALID_REQUEST, "Prompt is required.")

        credential = extract_bearer_token(authorization)
        if not credential:
            return self._fail(ErrorKind.UNAUTHORIZED, "Missing access token.")

        if not self.config.has_supabase:
            logger.error(f"{LOG_PREFIX} Supabase settings are not configured")
            return self._fail(ErrorKind.CONFIG_MISSING, "Missing Supabase environment variables.")

        try:
            identity = self.verifier.verify(credential)
        except AuthError as e:
            logger.error(f"{LOG_PREFIX} auth error {e}")
            return self._fail(ErrorKind.UNAUTHORIZED, "Unauthorized.")

        try:
            output_text = self.generator.generate(prompt)
        except ModelEmptyResponse as e:
            logger.error(f"{LOG_PREFIX} empty output {e.payload!r}")
            return self._fail(ErrorKind.EMPTY_GENERATION, "No AI output returned.", details=e.payload)
        except ModelStatusError as e:
            logger.error(f"{LOG_PREFIX} openai error {e.status_code} {e.body}")
            return self._fail(ErrorKind.GENERATION_UNAVAILABLE, "AI request failed.", details=e.body)
        except ModelError as e:
            logger.error(f"{LOG_PREFIX} openai exception {e}")
            return self._fail(ErrorKind.GENERATION_UNAVAILABLE, "AI request failed.", details=str(e))

        result = sanitize_output_text(output_text)
        if isinstance(result, Rejected):
            logger.error(f"{LOG_PREFIX} invalid output ({result.reason}) {output_text}")
            return self._fail(ErrorKind.INVALID_GENERATION, "Invalid AI output.", details=output_text)

        writer = PersistenceWriter(self.store.bind(credential))
        try:
            persisted = writer.write(identity, result.form)
        except PersistenceError as e:
            logger.error(f"{LOG_PREFIX} {e.stage} insert error {e.message}")
            details = {"stage": e.stage}
            if e.form_id is not None:
                details["formId"] = e.form_id
            return self._fail(ErrorKind.PERSISTENCE_FAILURE, e.message, details=details, form_id=e.form_id)

        duration_ms = (time.perf_counter() - started_at) * 1000
        logger.info(
            f"{LOG_PREFIX} success formId={persisted.id} "
            f"questionCount={len(persisted.questions)} durationMs={duration_ms:.0f}"
        )
        return GenerationSuccess(form_id=persisted.id, question_count=len(persisted.questions), duration_ms=duration_ms)

    def _fail(self, kind: ErrorKind, message: str, details: Any = None, form_id: Optional[str] = None) -> GenerationFailure:
        return GenerationFailure(kind=kind, message=message, details=details, form_id=form_id)
