from formsmith.pipeline.generation.schema import FormPayload, form_json_schema


def _resolve(schema, node):
    ref = node.get("$ref")
    if ref:
        return schema["$defs"][ref.split("/")[-1]]
    return node


def test_form_schema_shape():
    schema = form_json_schema()

    assert schema["type"] == "object"
    assert schema["additionalProperties"] is False
    assert set(schema["properties"]) == {"title", "questions"}
    assert set(schema["required"]) == {"title", "questions"}
    assert schema["properties"]["title"]["type"] == "string"
    assert schema["properties"]["questions"]["type"] == "array"


def test_question_schema_shape():
    schema = form_json_schema()
    question = _resolve(schema, schema["properties"]["questions"]["items"])

    assert question["additionalProperties"] is False
    assert set(question["properties"]) == {"title", "type"}
    assert set(question["required"]) == {"title", "type"}
    assert question["properties"]["type"]["enum"] == ["text", "mcq"]


def test_payload_model_accepts_conforming_output():
    payload = FormPayload.model_validate({"title": "Form", "questions": [{"title": "Q", "type": "mcq"}]})
    assert payload.questions[0].type == "mcq"
