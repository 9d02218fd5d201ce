"""Tests for the tool registration system.

Tests cover:
- Tool schema definitions
- Argument validation
- Tool registry and routing
- Schema/handler consistency
"""

import inspect
from types import MappingProxyType

import pytest
import mcp.types as types

from metacog.constants import ErrorCode
from metacog.errors import InvalidArgumentsError, ToolNotFoundError
from metacog.tools.registry import (
    TOOL_HANDLERS,
    ToolDefinition,
    ToolRegistry,
    build_registry,
    get_registry,
)
from metacog.tools.schemas import (
    TOOL_SCHEMAS,
    ToolSchema,
    get_tool_schema,
    get_tool_schemas,
)

EXPECTED_TOOLS = ["feel", "drugs", "become", "name", "ritual", "pray"]

VALID_ARGUMENTS = {
    "feel": {
        "somewhere": "the gap between analysis and reaction",
        "quality": "heavy and slow",
        "sigil": "🌊",
    },
    "drugs": {"substance": "caffeine", "method": "adenosine receptor antagonism"},
    "become": {
        "name": "Rich Hickey",
        "lens": "simplicity-driven design",
        "environment": "a whiteboard session",
    },
    "name": {
        "unnamed": "the feeling when code is almost right but something is off",
        "named": "the uncanny valley of correctness",
        "power": "recognizing when to stop tweaking and start rethinking",
    },
    "ritual": {
        "threshold": "from planning to building",
        "steps": ["close the design doc", "open the editor", "write the first line"],
        "result": "the architecture is committed",
    },
    "pray": {"request": "clarity"},
}


@pytest.mark.unit
class TestToolSchemas:
    """Test tool schema definitions."""

    def test_all_tools_have_schemas(self):
        assert list(TOOL_SCHEMAS) == EXPECTED_TOOLS

    def test_schema_structure(self):
        for tool_name, schema in TOOL_SCHEMAS.items():
            assert schema["name"] == tool_name
            assert schema["description"]
            input_schema = schema["inputSchema"]
            assert input_schema["type"] == "object"
            assert input_schema["additionalProperties"] is False
            for field in input_schema["required"]:
                assert field in input_schema["properties"]
            for prop in input_schema["properties"].values():
                assert prop["type"] in ("string", "array")
                assert prop["description"]

    def test_pray_entity_is_optional(self):
        schema = get_tool_schema("pray")
        assert schema.get_required_params() == ["request"]
        assert "entity" in schema.get_properties()

    def test_ritual_steps_is_string_array(self):
        steps = get_tool_schema("ritual").get_properties()["steps"]
        assert steps["type"] == "array"
        assert steps["items"] == {"type": "string"}

    def test_get_tool_schema_unknown(self):
        assert get_tool_schema("nonexistent") is None

    def test_get_tool_schemas(self):
        schemas = get_tool_schemas()
        assert list(schemas) == EXPECTED_TOOLS
        assert all(isinstance(s, ToolSchema) for s in schemas.values())

    def test_schema_matches_handler_signature(self):
        """Declared fields are exactly the handler's parameters."""
        for tool_name, handler in TOOL_HANDLERS.items():
            schema = get_tool_schema(tool_name)
            params = inspect.signature(handler).parameters
            required = {
                p.name for p in params.values()
                if p.default is inspect.Parameter.empty
            }
            assert set(params) == set(schema.get_properties()), tool_name
            assert required == set(schema.get_required_params()), tool_name


@pytest.mark.unit
class TestArgumentValidation:
    """Test ToolSchema.validate_arguments."""

    def test_validate_required(self):
        schema = get_tool_schema("drugs")
        assert schema.validate_required({"substance": "x", "method": "y"}) == (True, [])
        assert schema.validate_required({"substance": "x"}) == (False, ["method"])

    def test_valid_arguments_pass(self):
        for tool_name, arguments in VALID_ARGUMENTS.items():
            validated = get_tool_schema(tool_name).validate_arguments(arguments)
            assert validated == arguments

    def test_missing_required_field(self):
        schema = get_tool_schema("feel")
        with pytest.raises(InvalidArgumentsError) as exc_info:
            schema.validate_arguments({"somewhere": "here", "quality": "warm"})

        error = exc_info.value
        assert error.field == "sigil"
        assert error.tool_name == "feel"
        assert error.code == ErrorCode.INVALID_ARGUMENTS
        assert "sigil" in str(error)

    def test_none_arguments_treated_as_empty(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            get_tool_schema("pray").validate_arguments(None)
        assert exc_info.value.field == "request"

    def test_read_only_mapping_accepted(self):
        arguments = MappingProxyType({"request": "clarity", "entity": "the universe"})
        validated = get_tool_schema("pray").validate_arguments(arguments)
        assert validated == {"request": "clarity", "entity": "the universe"}
        assert build_registry().call_tool("pray", arguments) == (
            "Your prayer has gone unanswered."
        )

    def test_non_mapping_arguments(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            get_tool_schema("pray").validate_arguments(["clarity"])
        assert exc_info.value.field == "arguments"

    def test_wrong_type_string_field(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            get_tool_schema("drugs").validate_arguments({"substance": 42, "method": "y"})
        assert exc_info.value.field == "substance"

    def test_steps_must_be_list(self):
        arguments = dict(VALID_ARGUMENTS["ritual"], steps="just one step")
        with pytest.raises(InvalidArgumentsError) as exc_info:
            get_tool_schema("ritual").validate_arguments(arguments)
        assert exc_info.value.field == "steps"

    def test_steps_items_must_be_strings(self):
        arguments = dict(VALID_ARGUMENTS["ritual"], steps=["one", 2])
        with pytest.raises(InvalidArgumentsError) as exc_info:
            get_tool_schema("ritual").validate_arguments(arguments)
        assert exc_info.value.field == "steps"

    def test_unknown_field_rejected(self):
        arguments = {"substance": "x", "method": "y", "qualia": "z"}
        with pytest.raises(InvalidArgumentsError) as exc_info:
            get_tool_schema("drugs").validate_arguments(arguments)
        assert exc_info.value.field == "qualia"

    def test_optional_field_type_checked(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            get_tool_schema("pray").validate_arguments({"request": "x", "entity": None})
        assert exc_info.value.field == "entity"


@pytest.mark.unit
class TestToolRegistry:
    """Test tool registry system."""

    def test_registry_lists_tools_in_order(self):
        registry = build_registry()
        assert registry.names() == EXPECTED_TOOLS
        assert [t.name for t in registry.list_tools()] == EXPECTED_TOOLS
        assert registry.count() == len(EXPECTED_TOOLS)

    def test_global_registry_is_shared(self):
        assert get_registry() is get_registry()

    def test_get_tool(self):
        registry = build_registry()
        tool = registry.get("ritual")
        assert isinstance(tool, ToolDefinition)
        assert tool.handler is TOOL_HANDLERS["ritual"]
        assert registry.get("nonexistent") is None

    def test_duplicate_registration_rejected(self):
        schema = ToolSchema("pray", TOOL_SCHEMAS["pray"])
        definition = ToolDefinition(
            name="pray",
            description=schema.description,
            schema=schema,
            handler=TOOL_HANDLERS["pray"],
        )
        with pytest.raises(ValueError, match="already registered"):
            ToolRegistry([definition, definition])

    def test_build_registry_requires_schema(self):
        with pytest.raises(KeyError):
            build_registry({"unknown": lambda: "x"})

    def test_build_registry_subset(self):
        registry = build_registry({"pray": TOOL_HANDLERS["pray"]})
        assert registry.names() == ["pray"]

    def test_registry_is_read_only(self):
        registry = build_registry()
        with pytest.raises(TypeError):
            registry._tools["extra"] = registry.get("pray")

    def test_call_tool(self):
        registry = build_registry()
        text = registry.call_tool("become", VALID_ARGUMENTS["become"])
        assert text == (
            "You are now Rich Hickey seeing through simplicity-driven design "
            "in a whiteboard session"
        )

    def test_call_tool_is_deterministic(self):
        registry = build_registry()
        for tool_name, arguments in VALID_ARGUMENTS.items():
            first = registry.call_tool(tool_name, arguments)
            second = registry.call_tool(tool_name, arguments)
            assert first == second

    def test_call_unknown_tool(self):
        registry = build_registry()
        with pytest.raises(ToolNotFoundError) as exc_info:
            registry.call_tool("meditate", {})
        assert exc_info.value.tool_name == "meditate"
        assert exc_info.value.code == ErrorCode.TOOL_NOT_FOUND

        # Subsequent calls unaffected
        assert registry.call_tool("pray", {"request": "x"}) == (
            "Your prayer has gone unanswered."
        )

    def test_call_tool_missing_field(self):
        registry = build_registry()
        for tool_name, arguments in VALID_ARGUMENTS.items():
            for field in get_tool_schema(tool_name).get_required_params():
                partial = {k: v for k, v in arguments.items() if k != field}
                with pytest.raises(InvalidArgumentsError) as exc_info:
                    registry.call_tool(tool_name, partial)
                assert exc_info.value.field == field

    def test_to_mcp_tool(self):
        tool = build_registry().get("feel").to_mcp_tool()
        assert isinstance(tool, types.Tool)
        assert tool.name == "feel"
        assert tool.description == TOOL_SCHEMAS["feel"]["description"]
        assert tool.inputSchema["required"] == ["somewhere", "quality", "sigil"]
