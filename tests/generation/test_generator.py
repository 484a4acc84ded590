from unittest.mock import Mock

import pytest

from formsmith.models.manager import ModelManager
from formsmith.models.providers.base import ModelResponse, ModelStatusError
from formsmith.pipeline.generation.generator import FormGenerator, GENERATION_PROMPT, GENERATION_TASK
from formsmith.pipeline.generation.schema import FormPayload, SCHEMA_NAME


@pytest.fixture
def manager():
    manager = Mock(spec=ModelManager)
    manager.call.return_value = ModelResponse(content='{"title": "T", "questions": []}', raw={}, meta={"latency": 0.4})
    return manager


def test_generate_issues_one_schema_constrained_call(manager):
    text = FormGenerator(manager).generate("A short survey")

    assert text == '{"title": "T", "questions": []}'
    manager.call.assert_called_once_with(
        task=GENERATION_TASK,
        prompt_ref=GENERATION_PROMPT,
        variables={"description": "A short survey"},
        schema=FormPayload,
        schema_name=SCHEMA_NAME,
        temperature=0.2,
    )


def test_model_errors_propagate(manager):
    manager.call.side_effect = ModelStatusError(503, "unavailable")

    with pytest.raises(ModelStatusError):
        FormGenerator(manager).generate("A short survey")
    assert manager.call.call_count == 1
