from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from ..domain import ToolCall, ToolKind
from ..errors import ToolArgumentError, UnknownToolError

JsonSchema = Dict[str, Any]
ToolHandler = Callable[[Any, Any], Any]


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        mapping = {
            str: "string",
            int: "integer",
            float: "number",
            bool: "boolean",
            dict: "object",
            list: "array",
        }
        return mapping.get(annotation, "string")
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    return "string"


def _format_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
    return f"{location}: {error.get('msg', 'invalid value')}"


@dataclass(frozen=True)
class ToolSpec:
    kind: ToolKind
    description: str
    arguments: Type[BaseModel]
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": []}
        for field_name, info in self.arguments.model_fields.items():
            wire_name = info.alias or field_name
            prop: JsonSchema = {"type": _json_type(info.annotation)}
            if info.description:
                prop["description"] = info.description
            schema["properties"][wire_name] = prop
            if info.is_required():
                schema["required"].append(wire_name)
        schema["additionalProperties"] = False
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameter_schema,
            },
        }

    def parse_arguments(self, arguments: Dict[str, Any]) -> BaseModel:
        try:
            return self.arguments.model_validate(arguments)
        except ValidationError as exc:
            raise ToolArgumentError(self.name, [_format_error(error) for error in exc.errors()]) from exc


REGISTRY: Dict[ToolKind, ToolSpec] = {}


def register_tool(
    kind: ToolKind,
    *,
    description: str,
    arguments: Type[BaseModel],
) -> Callable[[ToolHandler], ToolHandler]:
    def decorator(func: ToolHandler) -> ToolHandler:
        if kind is ToolKind.UNKNOWN:
            raise ValueError("The UNKNOWN tool kind cannot be registered.")
        if kind in REGISTRY:
            raise ValueError(f"Tool '{kind.value}' is already registered.")
        REGISTRY[kind] = ToolSpec(kind=kind, description=description, arguments=arguments, handler=func)
        return func

    return decorator


def ensure_complete() -> None:
    missing = [kind.value for kind in ToolKind if kind is not ToolKind.UNKNOWN and kind not in REGISTRY]
    if missing:
        raise RuntimeError(f"Tools declared without a handler: {', '.join(missing)}")


def get_tool_specs() -> List[ToolSpec]:
    return list(REGISTRY.values())


def tool_definitions() -> List[Dict[str, Any]]:
    return [spec.as_tool() for spec in get_tool_specs()]


def execute_tool(services: Any, call: ToolCall) -> Any:
    """Run one model-requested tool call against ``services``.

    Raises ``UnknownToolError`` or ``ToolArgumentError``; both are meant to be
    reported back to the model as the call's result.
    """

    kind = call.kind
    spec = REGISTRY.get(kind)
    if kind is ToolKind.UNKNOWN or spec is None:
        raise UnknownToolError(call.name)
    if call.arguments_error:
        raise ToolArgumentError(call.name, [call.arguments_error])
    arguments = spec.parse_arguments(call.arguments)
    return spec.handler(services, arguments)
