"""Schema walker tests."""

from __future__ import annotations

import copy
from typing import Any

from oas_schema_mapper.schema_walking import walk_schema


def _identity(node: dict[str, Any]) -> dict[str, Any]:
    return node


def _sample_schema() -> dict[str, Any]:
    return {
        "properties": {
            "foo": {"type": "string"},
            "bar": {"type": "number", "maximum": 3, "exclusiveMinimum": 0},
            "version": {"type": "string", "const": "v1"},
            "baz": {
                "type": "object",
                "properties": {
                    "asd": {
                        "type": "array",
                        "items": {"type": "string"},
                        "minItems": 1,
                        "uniqueItems": False,
                        "maxItems": 100,
                    },
                },
                "nullable": True,
            },
        },
    }


def test_identity_mapper_returns_equal_schema() -> None:
    schema = _sample_schema()

    assert walk_schema(schema, _identity) == schema


def test_identity_mapper_does_not_return_input_objects() -> None:
    schema = _sample_schema()

    walked = walk_schema(schema, _identity)

    assert walked is not schema
    assert walked["properties"] is not schema["properties"]
    assert walked["properties"]["baz"] is not schema["properties"]["baz"]


def test_none_and_non_mapping_values_pass_through_without_mapping() -> None:
    calls: list[Any] = []

    def _recording(node: dict[str, Any]) -> dict[str, Any]:
        calls.append(node)
        return node

    assert walk_schema(None, _recording) is None
    assert walk_schema(True, _recording) is True
    assert calls == []


def test_mapper_reaches_every_schema_position() -> None:
    schema = {
        "properties": {"a": {"type": "string"}},
        "items": {"type": "number"},
        "additionalProperties": {"type": "boolean"},
        "oneOf": [{"type": "integer"}],
        "anyOf": [{"type": "null"}],
        "allOf": [{"type": "object"}],
    }

    def _mark(node: dict[str, Any]) -> dict[str, Any]:
        return {**node, "x-seen": True}

    walked = walk_schema(schema, _mark)

    assert walked["x-seen"] is True
    assert walked["properties"]["a"]["x-seen"] is True
    assert walked["items"]["x-seen"] is True
    assert walked["additionalProperties"]["x-seen"] is True
    assert walked["oneOf"][0]["x-seen"] is True
    assert walked["anyOf"][0]["x-seen"] is True
    assert walked["allOf"][0]["x-seen"] is True


def test_boolean_additional_properties_and_annotations_are_copied_unchanged() -> None:
    schema = {
        "type": "object",
        "additionalProperties": False,
        "enum": [{"type": "not-a-schema"}],
        "example": {"properties": {"ignored": {}}},
    }
    seen: list[dict[str, Any]] = []

    def _recording(node: dict[str, Any]) -> dict[str, Any]:
        seen.append(node)
        return node

    walked = walk_schema(schema, _recording)

    assert walked == schema
    assert len(seen) == 1


def test_mapper_sees_children_already_mapped() -> None:
    schema = {"properties": {"child": {"type": "string"}}}
    observed: list[Any] = []

    def _rename(node: dict[str, Any]) -> dict[str, Any]:
        if "properties" in node:
            observed.append(node["properties"]["child"])
        return {**node, "type": f"mapped-{node.get('type', 'root')}"}

    walk_schema(schema, _rename)

    assert observed == [{"type": "mapped-string"}]


def test_walker_does_not_mutate_input() -> None:
    schema = _sample_schema()
    original = copy.deepcopy(schema)

    def _strip_nullable(node: dict[str, Any]) -> dict[str, Any]:
        node.pop("nullable", None)
        return node

    walk_schema(schema, _strip_nullable)

    assert schema == original


def test_tuple_form_items_are_left_for_the_mapper() -> None:
    schema = {"items": [{"type": "string"}, {"type": "number"}]}

    walked = walk_schema(schema, _identity)

    assert walked["items"] == [{"type": "string"}, {"type": "number"}]


def test_identity_mapper_keeps_tuple_combinators() -> None:
    schema = {"oneOf": ({"type": "string"}, {"type": "number"}), "anyOf": [{"type": "null"}]}

    walked = walk_schema(schema, _identity)

    assert walked == schema
    assert isinstance(walked["oneOf"], tuple)
    assert isinstance(walked["anyOf"], list)
