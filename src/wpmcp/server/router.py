"""
Method Router — Dispatch MCP methods to registry handlers

Routes:
  initialize       -> server capabilities handshake
  initialized      -> notification (no response)
  ping             -> pong
  tools/list       -> registered tool definitions
  tools/call       -> tool handler dispatch
  resources/list   -> registered resource definitions
  resources/read   -> resource provider dispatch

Handler failures never escape this module: handle_call_tool and
handle_read_resource always return an envelope, even for SystemExit and
KeyboardInterrupt raised by a handler. Only task cancellation propagates.
"""

import asyncio
import inspect
from typing import Any, Dict, Optional

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from wpmcp.config import Config
from wpmcp.server.envelope import ResourceEnvelope, ToolEnvelope, to_display_text
from wpmcp.server.logger import get_logger
from wpmcp.server.protocol import (
    initialize_result,
    tools_list_result,
    resources_list_result,
    ProtocolError,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
)
from wpmcp.server.registry import Registry

log = get_logger("router")


class InvalidInputError(ValueError):
    """Tool arguments do not satisfy the tool's inputSchema."""


async def _resolve(value):
    if inspect.isawaitable(value):
        return await value
    return value


def check_input(schema: Dict[str, Any], arguments: Dict[str, Any]):
    """Validate arguments against a JSON Schema, raising InvalidInputError."""
    try:
        Draft202012Validator.check_schema(schema)
        validator = Draft202012Validator(schema)
    except SchemaError as exc:
        raise InvalidInputError(f"tool schema is invalid: {exc.message}") from exc
    errors = sorted(validator.iter_errors(arguments), key=lambda err: [str(p) for p in err.path])
    if errors:
        messages = "; ".join(
            f"{'/'.join(map(str, err.path)) or '<root>'}: {err.message}" for err in errors[:5]
        )
        raise InvalidInputError(messages)


class Router:
    """MCP method dispatcher over a Registry."""

    def __init__(self, registry: Registry, validate_input: Optional[bool] = None):
        self._registry = registry
        self._validate_input = Config.VALIDATE_INPUT if validate_input is None else validate_input
        self._initialized = False

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def route(self, msg: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Route a validated message to the appropriate handler.
        Returns the result payload or None for notifications.
        """
        method = msg.get("method", "")
        params = msg.get("params") or {}

        if method == "initialize":
            return self._handle_initialize(params)

        if method in ("initialized", "notifications/initialized"):
            self._initialized = True
            return None

        if method == "notifications/cancelled":
            # Handler invocations are not cancellable once started
            return None

        if method == "ping":
            return {}

        if method == "tools/list":
            return self.handle_list_tools()

        if method == "tools/call":
            name = params.get("name")
            if not name or not isinstance(name, str):
                raise ProtocolError(INVALID_PARAMS, "Missing tool name")
            arguments = params.get("arguments")
            if arguments is not None and not isinstance(arguments, dict):
                raise ProtocolError(INVALID_PARAMS, "Tool arguments must be a JSON object")
            envelope = await self.handle_call_tool(name, arguments)
            return envelope.to_result()

        if method == "resources/list":
            return self.handle_list_resources()

        if method == "resources/read":
            uri = params.get("uri")
            if not uri or not isinstance(uri, str):
                raise ProtocolError(INVALID_PARAMS, "Missing resource URI")
            envelope = await self.handle_read_resource(uri)
            return envelope.to_result()

        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown method: {method}")

    def _handle_initialize(self, params: Dict) -> Dict[str, Any]:
        log.info(
            f"Client initialize: {params.get('clientInfo', {}).get('name', '?')} "
            f"protocol={params.get('protocolVersion', '?')}"
        )
        return initialize_result(
            server_name=Config.SERVER_NAME,
            server_version=Config.SERVER_VERSION,
            protocol_version=Config.PROTOCOL_VERSION,
        )

    # -- discovery --

    def handle_list_tools(self) -> Dict[str, Any]:
        return tools_list_result([t.to_dict() for t in self._registry.list_tools()])

    def handle_list_resources(self) -> Dict[str, Any]:
        return resources_list_result([r.to_dict() for r in self._registry.list_resources()])

    # -- invocation --

    async def handle_call_tool(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]] = None,
    ) -> ToolEnvelope:
        tool = self._registry.get_tool(name)
        if tool is None:
            log.warning(f"Unknown tool: {name}")
            return ToolEnvelope.not_found(name)

        if arguments is None:
            arguments = {}

        try:
            if self._validate_input:
                try:
                    check_input(tool.input_schema, arguments)
                except InvalidInputError as exc:
                    log.info(f"Tool {name} rejected input: {exc}")
                    return ToolEnvelope(f"Error: Invalid input: {exc}", is_error=True)

            result = await _resolve(tool.handler(arguments))
            return ToolEnvelope(to_display_text(result))
        except asyncio.CancelledError:
            raise
        except BaseException as exc:
            log.error(f"Tool {name} error: {exc}", exc_info=True)
            return ToolEnvelope.failure(exc)

    async def handle_read_resource(self, uri: str) -> ResourceEnvelope:
        resource = self._registry.get_resource(uri)
        if resource is None:
            log.warning(f"Unknown resource: {uri}")
            return ResourceEnvelope.not_found(uri)

        try:
            content = await _resolve(resource.provider())
            return ResourceEnvelope(uri, resource.mime_type, to_display_text(content))
        except asyncio.CancelledError:
            raise
        except BaseException as exc:
            log.error(f"Resource {uri} error: {exc}", exc_info=True)
            return ResourceEnvelope.failure(uri, exc)
