import logging

from formsmith.models.manager import ModelManager
from .schema import FormPayload, SCHEMA_NAME

logger = logging.getLogger(__name__)

GENERATION_TASK = "form_generation"
GENERATION_PROMPT = "forms/generate@v1"
DEFAULT_TEMPERATURE = 0.2


class FormGenerator:
    def __init__(self, manager: ModelManager, temperature: float = DEFAULT_TEMPERATURE):
        self.model_manager = manager
        self.temperature = temperature

    def generate(self, prompt: str) -> str:
        """
        One schema-constrained completion for the prompt.

        Returns the raw completion text. ModelError subclasses from the
        provider propagate unchanged.
        """
        response = self.model_manager.call(
            task=GENERATION_TASK,
            prompt_ref=GENERATION_PROMPT,
            variables={"description": prompt},
            schema=FormPayload,
            schema_name=SCHEMA_NAME,
            temperature=self.temperature,
        )
        logger.info(f"Generation returned {len(response.content)} chars in {response.meta.get('latency', 0):.2f}s")
        return response.content
