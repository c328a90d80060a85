"""WPMCP Server — MCP protocol, registry and dispatch."""

from typing import Optional

from wpmcp.server.registry import Registry, ToolDescriptor, ResourceDescriptor, RegistryFrozenError
from wpmcp.server.router import Router
from wpmcp.server.server import MCPServer
from wpmcp.server.transport import StdioTransport

__all__ = [
    "MCPServer", "Registry", "Router", "ToolDescriptor", "ResourceDescriptor",
    "RegistryFrozenError", "build_registry", "build_server",
]


def build_registry() -> Registry:
    """Registry populated with every tool module and knowledge-base document."""
    from wpmcp.tools import PROVIDER_MODULES
    from wpmcp.resources import build_resources

    registry = Registry()
    for module in PROVIDER_MODULES:
        registry.register_tools_module(module)
    for resource in build_resources():
        registry.register_resource(resource)
    return registry


def build_server(
    validate_input: Optional[bool] = None,
    transport: Optional[StdioTransport] = None,
) -> MCPServer:
    return MCPServer(registry=build_registry(), transport=transport, validate_input=validate_input)
