"""Tool and module manifest schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ToolParameter(BaseModel):
    """Parameter definition for a tool."""

    name: str
    type: str  # string, integer, boolean, number, array, object
    description: str
    required: bool = True
    enum: list[str] | None = None
    default: Any = None
    minimum: int | None = None
    maximum: int | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: str | None = None  # "uri"
    items: str | None = None  # element type for arrays
    items_format: str | None = None
    max_items: int | None = None

    def json_schema(self) -> dict:
        """Render this parameter as a JSON Schema property."""
        prop: dict[str, Any] = {
            "type": self.type,
            "description": self.description,
        }
        if self.enum:
            prop["enum"] = self.enum
        if self.default is not None:
            prop["default"] = self.default
        if self.minimum is not None:
            prop["minimum"] = self.minimum
        if self.maximum is not None:
            prop["maximum"] = self.maximum
        if self.min_length is not None:
            prop["minLength"] = self.min_length
        if self.max_length is not None:
            prop["maxLength"] = self.max_length
        if self.pattern:
            prop["pattern"] = self.pattern
        if self.format:
            prop["format"] = self.format
        if self.items:
            item: dict[str, Any] = {"type": self.items}
            if self.items_format:
                item["format"] = self.items_format
            prop["items"] = item
        if self.max_items is not None:
            prop["maxItems"] = self.max_items
        return prop


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by a module."""

    name: str  # e.g. "exa.search"
    description: str
    parameters: list[ToolParameter]
    # Alternative required-parameter sets; exactly one must be satisfied
    one_of: list[list[str]] | None = None
    required_permission: str = "guest"  # minimum permission level

    def input_schema(self) -> dict:
        """Convert the parameter list to a JSON Schema object."""
        properties = {}
        required = []
        for param in self.parameters:
            properties[param.name] = param.json_schema()
            if param.required:
                required.append(param.name)

        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        if self.one_of:
            schema["oneOf"] = [{"required": group} for group in self.one_of]
        return schema

    def get_parameter(self, name: str) -> ToolParameter | None:
        for param in self.parameters:
            if param.name == name:
                return param
        return None


class ModuleManifest(BaseModel):
    """Manifest describing a module and its tools."""

    module_name: str
    description: str
    tools: list[ToolDefinition]


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict = {}


class ToolResult(BaseModel):
    """Result from a tool execution."""

    tool_name: str
    success: bool
    result: Any = None
    error: str | None = None
