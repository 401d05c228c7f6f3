"""Named tool registry.

Each analysis is exposed as a tool with a name, a description and declared
parameters. The registry also renders the discovery document listing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError, create_model

from ..domain.errors import InvalidInputError, ToolNotFoundError
from .analysis_service import PageAnalysisService
from .payloads import serialize_accessibility, serialize_density

ToolHandler = Callable[[Dict[str, Any]], Awaitable[dict]]

_PARAMETER_TYPES: Dict[str, type] = {"string": str, "integer": int, "number": float, "boolean": bool}


@dataclass(frozen=True)
class ToolParameter:
    name: str
    type: str
    description: str
    required: bool = True


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    handler: ToolHandler
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)
    http_method: str = "POST"

    @property
    def endpoint(self) -> str:
        return f"/tools/{self.name}"

    def describe(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type,
                    "description": p.description,
                    "required": p.required,
                }
                for p in self.parameters
            ],
            "endpoint": self.endpoint,
            "http_method": self.http_method,
        }

    @cached_property
    def parameters_model(self) -> Type[BaseModel]:
        """Pydantic model built from the declared parameters. Undeclared keys are ignored."""
        fields: Dict[str, Any] = {}
        for p in self.parameters:
            annotation = _PARAMETER_TYPES.get(p.type, Any)
            if p.required:
                fields[p.name] = (annotation, ...)
            else:
                fields[p.name] = (Optional[annotation], None)
        return create_model(f"{self.name}_parameters", **fields)

    def validate(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as exc:
            raise InvalidInputError(f"invalid parameters for tool '{self.name}'", detail=str(exc)) from exc
        return model.model_dump(exclude_none=True)


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, ToolDefinition] = {}

    def register(self, tool: ToolDefinition) -> None:
        if tool.name in self._tools:
            raise ValueError(f"tool already registered: {tool.name}")
        self._tools[tool.name] = tool

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def tools(self) -> List[ToolDefinition]:
        return list(self._tools.values())

    def discovery(self) -> dict:
        return {"functions": [t.describe() for t in self._tools.values()]}

    async def invoke(self, name: str, parameters: Dict[str, Any]) -> dict:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return await tool.handler(tool.validate(parameters))


_URL_PARAMETER = ToolParameter(name="url", type="string", description="URL to analyse", required=True)


def build_tool_registry(service: PageAnalysisService) -> ToolRegistry:
    registry = ToolRegistry()

    async def content_density_evaluator(parameters: Dict[str, Any]) -> dict:
        return serialize_density(await service.evaluate_content_density(parameters["url"]))

    async def accessibility_surface_check(parameters: Dict[str, Any]) -> dict:
        return serialize_accessibility(await service.check_accessibility_surface(parameters["url"]))

    registry.register(
        ToolDefinition(
            name="content_density_evaluator",
            description="Analyses a web page for content density",
            handler=content_density_evaluator,
            parameters=(_URL_PARAMETER,),
        )
    )
    registry.register(
        ToolDefinition(
            name="accessibility_surface_check",
            description="Analyses a web page for basics of accessibility",
            handler=accessibility_surface_check,
            parameters=(_URL_PARAMETER,),
        )
    )
    return registry
