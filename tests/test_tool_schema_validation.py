"""
Tool catalog and registry validation tests.

The advertised inputSchema (tool_schemas.py) and the pydantic models used for
validation must agree on tool names and required/optional fields.
"""

import re

import pytest

from letta_mcp.mcp_handlers.decorators import (
    _TOOL_DEFINITIONS,
    get_tool_registry,
    list_registered_tools,
)
from letta_mcp.tool_schemas import get_tool_definitions

CATALOG = {tool.name: tool for tool in get_tool_definitions()}


class TestRegistryConsistency:

    def test_eight_tools(self):
        assert len(CATALOG) == 8
        assert len(get_tool_registry()) == 8

    def test_catalog_matches_registry(self):
        assert sorted(CATALOG) == list_registered_tools()

    def test_definition_names_match_keys(self):
        for key, td in _TOOL_DEFINITIONS.items():
            assert td.name == key

    def test_names_are_snake_case(self):
        pattern = re.compile(r"^[a-z][a-z0-9_]*$")
        for name in CATALOG:
            assert pattern.match(name), name

    def test_every_handler_has_description(self):
        for name, td in _TOOL_DEFINITIONS.items():
            assert td.description, name


@pytest.mark.parametrize("tool_name", sorted(CATALOG))
class TestSchemaParity:

    def test_required_fields_match(self, tool_name):
        schema = CATALOG[tool_name].inputSchema
        model = _TOOL_DEFINITIONS[tool_name].params_model
        model_required = {name for name, f in model.model_fields.items() if f.is_required()}
        assert set(schema.get("required", [])) == model_required

    def test_properties_match(self, tool_name):
        schema = CATALOG[tool_name].inputSchema
        model = _TOOL_DEFINITIONS[tool_name].params_model
        assert set(schema["properties"]) == set(model.model_fields)

    def test_object_schema_with_descriptions(self, tool_name):
        tool = CATALOG[tool_name]
        assert tool.inputSchema["type"] == "object"
        assert tool.description
        for prop in tool.inputSchema["properties"].values():
            assert prop.get("description")

    def test_property_types_match(self, tool_name):
        schema = CATALOG[tool_name].inputSchema
        model_props = _TOOL_DEFINITIONS[tool_name].params_model.model_json_schema()["properties"]
        for name, prop in schema["properties"].items():
            variants = model_props[name].get("anyOf", [model_props[name]])
            model_types = {v["type"] for v in variants if v.get("type") != "null"}
            assert model_types == {prop["type"]}, name
