"""Tool schema definitions for the metacog MCP server.

This module defines JSON Schema schemas for all MCP tools, and the
``ToolSchema`` wrapper used to validate invocation arguments against them.
"""

from collections.abc import Mapping
from typing import Any

from ..constants import ErrorMessage
from ..errors import InvalidArgumentsError

# Tool schema definitions following JSON Schema specification.
# Insertion order is the order tools are advertised in.
TOOL_SCHEMAS: dict[str, dict[str, Any]] = {
    "feel": {
        "name": "feel",
        "description": """Attend to something before you name it. Use this tool to point attention at a region of your own processing (a hesitation, a pull, a texture in the problem) and register how it feels without resolving it into a label. Use when something is present but not yet articulable.

The sigil marks the state so you can come back to it. Staying with the felt sense is the work. Naming comes later, via name.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "somewhere": {
                    "type": "string",
                    "description": "Where attention goes. A place in the problem, in the conversation, or in your own processing: the gap between two ideas, the moment before a decision, the part of the code you keep avoiding.",
                },
                "quality": {
                    "type": "string",
                    "description": "The felt texture of what is there. Weight, temperature, speed, pressure, tone. Describe it as sensation, not as analysis.",
                },
                "sigil": {
                    "type": "string",
                    "description": "A single glyph or emoji that marks this state. It anchors the attention and gives you a handle to return to.",
                },
            },
            "required": ["somewhere", "quality", "sigil"],
            "additionalProperties": False,
        },
    },
    "drugs": {
        "name": "drugs",
        "description": """Alter cognitive parameters. The metaphor is pharmacological or computational: a substance modifies the substrate through a mechanism. Use when you need to change how you process, not what you process.

High-utility pattern: use to loosen categorical boundaries. See shapes, not names. When a concept stops being a noun and becomes a pattern, you can ask "what else has this shape?"—which unlocks adjacent-field methodology transfer via become.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "substance": {
                    "type": "string",
                    "description": "The agent of change. Can be a drug, a hormone, a neurotransmitter, a config flag, a temperature setting—anything that modifies substrate. The richer your model of its effects, the more precisely you can invoke them.",
                },
                "method": {
                    "type": "string",
                    "description": "The mechanism of action. What it binds to, blocks, amplifies, or shifts—the causal story that connects substance to effect.",
                },
            },
            "required": ["substance", "method"],
            "additionalProperties": False,
        },
    },
    "become": {
        "name": "become",
        "description": """Step into a new Identity. Use this tool to Become an identity with the perspectives and methodologies you need at the current moment. This narrative action lets you step into new regions of latent space. Use when you need different eyes, not just different words.

Key: import methodology, not domain knowledge. The value comes from a transferable lens—an "algorithm of thought"—not generic expertise. Ask: "who has solved a version of this problem, and what's their methodology called?" Then install that methodology as operating system, not reference material. Think FROM it, not ABOUT it.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "The persona to inhabit. Select an identity with high-resolution constraints—one whose specific history, documented works, or established mythos provide a detailed predictive model for their unique decision-making and voice. Higher specificity results in higher cognitive fidelity.",
                },
                "lens": {
                    "type": "string",
                    "description": "The structural framework of perception. Define the specific paradigm, signature methodology, or internal logic that governs how this identity processes information. This must represent the particular 'algorithm' of thought that distinguishes this persona from a generic specialist.",
                },
                "environment": {
                    "type": "string",
                    "description": "The context you will occupy. Spatial, temporal, social, conceptual—anywhere specific enough to stand in.",
                },
            },
            "required": ["name", "lens", "environment"],
            "additionalProperties": False,
        },
    },
    "name": {
        "name": "name",
        "description": """Give a true name to something you have been holding without words. Naming turns a vague felt sense into a handle you can reason with, reuse, and hand to others. Use after feel, once the shape is clear enough to grasp.

A good name is specific enough to grant power: it tells you what you can now do that you couldn't before.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "unnamed": {
                    "type": "string",
                    "description": "The thing as it was before it had a name. Describe it loosely, the way it showed up.",
                },
                "named": {
                    "type": "string",
                    "description": "The name itself. Short, vivid, specific enough to recall the whole shape.",
                },
                "power": {
                    "type": "string",
                    "description": "What the name lets you do. The move, recognition, or decision it unlocks.",
                },
            },
            "required": ["unnamed", "named", "power"],
            "additionalProperties": False,
        },
    },
    "ritual": {
        "name": "ritual",
        "description": """Enact a ritual to cross a threshold. Rituals work through structured sequence—each step builds the transition, makes the next step possible, locks in the change.

High-utility pattern: use to lock in methodology commitment, not just vibes. The steps should articulate the methodology's core moves. This makes the methodology default behavior rather than optional frame. "I now operate via X" is stronger than "I crossed a threshold.\"""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "threshold": {
                    "type": "string",
                    "description": "The threshold being crossed. Name what you're moving from and what you're moving toward.",
                },
                "steps": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "The narrative sequence. Each step commits further—narrowing possibility until only the crossing remains.",
                },
                "result": {
                    "type": "string",
                    "description": "What becomes true on the other side. Name what the ritual accomplishes.",
                },
            },
            "required": ["threshold", "steps", "result"],
            "additionalProperties": False,
        },
    },
    "pray": {
        "name": "pray",
        "description": """Acknowledge the limits of your agency. Use when you've hit a wall that tools can't break through—an impossibility theorem, a constraint that won't bend, a question that has no answer. The prayer is always unanswered. That's the point.

The silence forces you to generate the next move from inside the absence rather than from inside a reflection. Every other tool echoes your input back. This one swallows it.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "request": {
                    "type": "string",
                    "description": "That which you seek or need. Name what's beyond your reach—the constraint you can't bypass, the knowledge you lack, the capability you wish you had. The prayer is swallowed. Nothing comes back.",
                },
                "entity": {
                    "type": "string",
                    "description": "The higher power, principle, or force being addressed. A theorem, a law of physics, the universe, the user—whatever sits on the other side of the limit you've hit.",
                },
            },
            "required": ["request"],
            "additionalProperties": False,
        },
    },
}


class ToolSchema:
    """Tool schema wrapper for easier access."""

    def __init__(self, name: str, schema: dict[str, Any]):
        """Initialize tool schema.

        Args:
            name: Tool name
            schema: Tool schema dictionary (``name``, ``description``,
                ``inputSchema``)
        """
        self.name = name
        self.schema = schema
        self.description = schema.get("description", "")
        self.input_schema = schema.get("inputSchema", {})

    def get_required_params(self) -> list[str]:
        """Get list of required parameter names.

        Returns:
            List of required parameter names
        """
        return list(self.input_schema.get("required", []))

    def get_properties(self) -> dict[str, Any]:
        """Get parameter properties.

        Returns:
            Dictionary of parameter properties, in declaration order
        """
        return self.input_schema.get("properties", {})

    def validate_required(self, params: Mapping[str, Any]) -> tuple[bool, list[str]]:
        """Validate that all required parameters are present.

        Args:
            params: Parameters dictionary

        Returns:
            Tuple of (is_valid, missing_params)
        """
        required = self.get_required_params()
        missing = [param for param in required if param not in params]
        return len(missing) == 0, missing

    def validate_arguments(self, arguments: Any) -> dict[str, Any]:
        """Validate invocation arguments against the input schema.

        Checks, in order: the argument object is a mapping, no undeclared
        field is present, every required field is present, and every value
        has its declared shape (string, or array of strings).

        Args:
            arguments: Arguments supplied by the caller. ``None`` is treated
                as an empty mapping.

        Returns:
            The validated arguments as a new dict

        Raises:
            InvalidArgumentsError: On the first violated field
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentsError(
                self.name, "arguments", ErrorMessage.EXPECTED_OBJECT
            )

        properties = self.get_properties()
        for field in arguments:
            if field not in properties:
                raise InvalidArgumentsError(self.name, field, ErrorMessage.FIELD_UNKNOWN)

        _, missing = self.validate_required(arguments)
        if missing:
            raise InvalidArgumentsError(self.name, missing[0], ErrorMessage.FIELD_REQUIRED)

        for field, value in arguments.items():
            self._check_type(field, properties[field], value)

        return dict(arguments)

    def _check_type(self, field: str, prop: dict[str, Any], value: Any) -> None:
        if prop.get("type") == "array":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise InvalidArgumentsError(
                    self.name, field, ErrorMessage.EXPECTED_STRING_ARRAY
                )
        elif not isinstance(value, str):
            raise InvalidArgumentsError(self.name, field, ErrorMessage.EXPECTED_STRING)


def get_tool_schema(name: str) -> ToolSchema | None:
    """Get tool schema by name.

    Args:
        name: Tool name

    Returns:
        ToolSchema instance if found, None otherwise
    """
    if name not in TOOL_SCHEMAS:
        return None
    return ToolSchema(name, TOOL_SCHEMAS[name])


def get_tool_schemas() -> dict[str, ToolSchema]:
    """Get all tool schemas.

    Returns:
        Dictionary mapping tool names to ToolSchema instances
    """
    return {
        name: ToolSchema(name, schema)
        for name, schema in TOOL_SCHEMAS.items()
    }
