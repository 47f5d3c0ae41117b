"""Tool registry and dispatcher.

The registry is an explicit command table: tool name -> ToolSpec, where a spec
holds the tool's pydantic request model and a coroutine method bound to a
facade instance. Every invocation goes through the same sequence:

    Received -> Validating -> {Rejected | Dispatching} -> {Succeeded | Failed} -> Responded

- Rejected: unknown tool (UnknownToolError) or invalid arguments
  (InvalidArgumentsError); the facade is never called.
- Failed: the handler raised; the failure becomes an error ToolResponse.
- Succeeded: the result is rendered as "<label><pretty JSON>".

A response is either the full success text or the full error text, never a mix.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DuplicateToolError, InvalidArgumentsError, UnknownToolError
from .utils import dumps_pretty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """Immutable description of one tool.

    Attributes:
        name: Unique tool name
        title: Short human-readable title
        description: What the tool does, shown to MCP clients
        request_model: Pydantic model validating the tool arguments
        handler: Facade coroutine method; called with the request's fields as kwargs
        label: Prefix of the success text, formatted with the request's fields.
            Empty for pure listings, whose response is the JSON alone.
    """

    name: str
    title: str
    description: str
    request_model: type[BaseModel]
    handler: Callable[..., Awaitable[Any]]
    label: str = ""

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the arguments, using wire (alias) names."""
        return self.request_model.model_json_schema(by_alias=True)

    def render(self, request: BaseModel, result: Any) -> str:
        prefix = self.label.format(**request.model_dump()) if self.label else ""
        return f"{prefix}{dumps_pretty(result)}"


class ToolResponse(BaseModel):
    """Uniform response envelope: a single text block, flagged on failure."""

    text: str
    is_error: bool = False


class ToolRegistry:
    """Registry of ToolSpecs and dispatcher of tool invocations."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> None:
        """Record a tool.

        Raises:
            DuplicateToolError: If a tool with the same name is already registered
        """
        if spec.name in self._tools:
            raise DuplicateToolError(
                message=f"Tool '{spec.name}' is already registered",
                details={"tool": spec.name},
            )
        self._tools[spec.name] = spec
        logger.debug(f"Registered tool '{spec.name}'")

    def register_all(self, specs: Iterable[ToolSpec]) -> None:
        for spec in specs:
            self.register(spec)

    def get(self, name: str) -> ToolSpec:
        """Look up a tool by name.

        Raises:
            UnknownToolError: If no tool is registered under that name
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(
                message=f"Unknown tool '{name}'",
                details={"tool": name},
            ) from None

    def names(self) -> list[str]:
        return sorted(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def validate(self, spec: ToolSpec, arguments: Mapping[str, Any] | None) -> BaseModel:
        """Validate raw arguments against the tool's request model.

        Raises:
            InvalidArgumentsError: With details["fields"] naming each offending argument
        """
        try:
            return spec.request_model.model_validate(dict(arguments or {}))
        except PydanticValidationError as e:
            errors = [
                {
                    "field": ".".join(str(part) for part in error["loc"]) or "arguments",
                    "error": error["msg"],
                }
                for error in e.errors()
            ]
            fields = list(dict.fromkeys(error["field"] for error in errors))
            raise InvalidArgumentsError(
                message=f"Invalid arguments for tool '{spec.name}': {', '.join(fields)}",
                details={"tool": spec.name, "fields": fields, "errors": errors},
                original_exception=e,
            ) from e

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResponse:
        """Run one tool invocation.

        Args:
            name: Tool name
            arguments: Raw argument mapping as received from the transport

        Returns:
            ToolResponse with the success text, or is_error=True and the failure message

        Raises:
            UnknownToolError: If the tool is not registered
            InvalidArgumentsError: If the arguments do not match the tool schema
        """
        spec = self.get(name)

        try:
            request = self.validate(spec, arguments)
        except InvalidArgumentsError as e:
            logger.warning(f"Rejected call to '{name}': {e.message}")
            raise

        logger.info(f"Dispatching tool '{name}'")
        try:
            result = await spec.handler(**request.model_dump())
            text = spec.render(request, result)
        except Exception as e:
            logger.error(f"Tool '{name}' failed: {e}", exc_info=True)
            return ToolResponse(text=str(e), is_error=True)

        return ToolResponse(text=text)
