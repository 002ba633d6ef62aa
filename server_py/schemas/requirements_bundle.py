"""JSON Schema for the requirements bundle the model must return.

The schema is handed to the completion service as a structured output
constraint (``response_format.type == "json_schema"``). Two variants exist:

``strict``
    Closed objects (``additionalProperties: false``) and ``strict: true``.
    Structured-output strict mode rejects free-form objects, so the optional
    extensions (trace links, scenario examples, selectors, field constraints,
    relations, JSON Schemas, SQL DDL) are left out.

``permissive``
    Open objects with ``strict: false``. Carries the optional extensions.

Both variants share the same required lists.
"""
from typing import Any, Dict, List, Literal, Optional

SchemaVariant = Literal["strict", "permissive"]

SCHEMA_NAME = "RequirementsBundle"

TOP_LEVEL_FIELDS = [
    "userStories",
    "declarativeStories",
    "imperativeTests",
    "uiDataModel",
    "validationReport",
]


def _string() -> Dict[str, Any]:
    return {"type": "string"}


def _string_array() -> Dict[str, Any]:
    return {"type": "array", "items": _string()}


def _array(items: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "array", "items": items}


def _free_object() -> Dict[str, Any]:
    return {"type": "object"}


def _object(
    properties: Dict[str, Any],
    required: Optional[List[str]],
    closed: bool,
) -> Dict[str, Any]:
    """Build an object schema; ``required=None`` means no required list."""
    node: Dict[str, Any] = {"type": "object"}
    if closed:
        node["additionalProperties"] = False
    if required is not None:
        node["required"] = list(required)
    node["properties"] = properties
    return node


def _user_story(closed: bool, extended: bool) -> Dict[str, Any]:
    properties = {
        "id": _string(),
        "as_a": _string(),
        "i_want": _string(),
        "so_that": _string(),
        "acceptance_criteria": _string_array(),
    }
    if extended:
        properties["trace"] = _object(
            {"ui_nodes": _string_array(), "entities": _string_array()},
            required=None,
            closed=closed,
        )
    return _object(
        properties,
        required=["id", "as_a", "i_want", "so_that", "acceptance_criteria"],
        closed=closed,
    )


def _declarative_story(closed: bool, extended: bool) -> Dict[str, Any]:
    scenario_properties = {
        "given": _string(),
        "when": _string(),
        "then": _string(),
    }
    if extended:
        scenario_properties["examples"] = _array(_free_object())
    scenario = _object(
        scenario_properties,
        required=["given", "when", "then"],
        closed=closed,
    )
    return _object(
        {"title": _string(), "scenarios": _array(scenario)},
        required=["title", "scenarios"],
        closed=closed,
    )


def _imperative_test(closed: bool, extended: bool) -> Dict[str, Any]:
    properties = {
        "name": _string(),
        "gherkin": _string(),
        "tags": _string_array(),
    }
    if extended:
        properties["selectors"] = _free_object()
    return _object(
        properties,
        required=["name", "gherkin", "tags"],
        closed=closed,
    )


def _ui_data_model(closed: bool, extended: bool) -> Dict[str, Any]:
    field_properties = {
        "name": _string(),
        "type": _string(),
        "required": {"type": "boolean"},
    }
    if extended:
        field_properties["constraints"] = _free_object()
        field_properties["enum"] = _string_array()
    field = _object(field_properties, required=["name", "type"], closed=closed)

    entity_properties = {
        "name": _string(),
        "fields": _array(field),
    }
    if extended:
        entity_properties["relations"] = _array(_free_object())
    entity = _object(entity_properties, required=["name", "fields"], closed=closed)

    model_properties = {"entities": _array(entity)}
    if extended:
        model_properties["jsonSchemas"] = _free_object()
        model_properties["sqlDDL"] = _string()
    return _object(model_properties, required=["entities"], closed=closed)


def _validation_report(closed: bool) -> Dict[str, Any]:
    coverage = _object(
        {
            "uiComponentsCoveredPct": {"type": "number"},
            "fieldsWithTestsPct": {"type": "number"},
        },
        required=None,
        closed=closed,
    )
    return _object(
        {
            "coverage": coverage,
            "conflicts": _string_array(),
            "ambiguities": _string_array(),
            "missing": _string_array(),
            "notes": _string_array(),
        },
        required=None,
        closed=closed,
    )


def build_requirements_schema(variant: SchemaVariant = "strict") -> Dict[str, Any]:
    """Return the ``json_schema`` payload for the given variant.

    A new dict is built on every call so callers may mutate the result.
    """
    if variant not in ("strict", "permissive"):
        raise ValueError(f"Unknown schema variant: {variant!r}")

    strict = variant == "strict"
    closed = strict
    extended = not strict

    return {
        "name": SCHEMA_NAME,
        "strict": strict,
        "schema": _object(
            {
                "userStories": _array(_user_story(closed, extended)),
                "declarativeStories": _array(_declarative_story(closed, extended)),
                "imperativeTests": _array(_imperative_test(closed, extended)),
                "uiDataModel": _ui_data_model(closed, extended),
                "validationReport": _validation_report(closed),
            },
            required=TOP_LEVEL_FIELDS,
            closed=closed,
        ),
    }


def build_response_format(variant: SchemaVariant = "strict") -> Dict[str, Any]:
    """Wrap the schema in the ``response_format`` envelope."""
    return {
        "type": "json_schema",
        "json_schema": build_requirements_schema(variant),
    }
