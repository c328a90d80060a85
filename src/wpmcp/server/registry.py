"""
Tool & Resource Registry — the server's catalog

Holds two insertion-ordered mappings:
  name -> ToolDescriptor
  uri  -> ResourceDescriptor

Registration policy:
  - Re-registering an existing key replaces the entry in place (last write
    wins, original position kept).
  - Registration is only allowed before freeze(); the server freezes the
    registry before it starts reading requests.
"""

import copy
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from wpmcp.server.logger import get_logger

log = get_logger("registry")

DEFAULT_MIME_TYPE = "text/markdown"

ToolHandler = Callable[[Dict[str, Any]], Union[Any, Awaitable[Any]]]
ResourceProvider = Callable[[], Union[str, Awaitable[str]]]


class RegistryFrozenError(RuntimeError):
    """Raised when registering after the registry has been frozen."""


class _Immutable:
    __slots__ = ()

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is immutable")


class ToolDescriptor(_Immutable):
    """A named, invocable template function plus its input contract."""

    __slots__ = ("name", "description", "input_schema", "handler")

    def __init__(
        self,
        name: str,
        description: str,
        handler: ToolHandler,
        input_schema: Optional[Dict[str, Any]] = None,
    ):
        if not name:
            raise ValueError("Tool name must be a non-empty string")
        if not callable(handler):
            raise TypeError(f"Handler for tool {name!r} is not callable")
        schema = copy.deepcopy(input_schema) if input_schema else {
            "type": "object",
            "properties": {},
        }
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "input_schema", schema)
        object.__setattr__(self, "handler", handler)

    def to_dict(self) -> Dict[str, Any]:
        """Public shape for tools/list. Never includes the handler."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }

    def __repr__(self):
        return f"ToolDescriptor(name={self.name!r})"


class ResourceDescriptor(_Immutable):
    """A read-only document addressed by uri."""

    __slots__ = ("uri", "name", "description", "mime_type", "provider")

    def __init__(
        self,
        uri: str,
        name: str,
        provider: ResourceProvider,
        description: Optional[str] = None,
        mime_type: str = DEFAULT_MIME_TYPE,
    ):
        if not uri:
            raise ValueError("Resource uri must be a non-empty string")
        if not callable(provider):
            raise TypeError(f"Provider for resource {uri!r} is not callable")
        object.__setattr__(self, "uri", uri)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "mime_type", mime_type or DEFAULT_MIME_TYPE)
        object.__setattr__(self, "provider", provider)

    def to_dict(self) -> Dict[str, Any]:
        """Public shape for resources/list. Never includes the provider."""
        d = {"uri": self.uri, "name": self.name}
        if self.description:
            d["description"] = self.description
        d["mimeType"] = self.mime_type
        return d

    def __repr__(self):
        return f"ResourceDescriptor(uri={self.uri!r})"


class Registry:
    """
    Catalog of tools and resources.

    Usage:
        registry = Registry()
        registry.register_tool(ToolDescriptor("echo", "Echo text", handler))
        registry.freeze()
        registry.get_tool("echo")
    """

    def __init__(self):
        self._tools: Dict[str, ToolDescriptor] = {}
        self._resources: Dict[str, ResourceDescriptor] = {}
        self._frozen = False

    # -- registration (startup only) --

    def register_tool(self, descriptor: ToolDescriptor):
        """Insert or replace a tool by name."""
        self._check_writable()
        if descriptor.name in self._tools:
            log.warning(f"Replacing tool registration: {descriptor.name}")
        self._tools[descriptor.name] = descriptor

    def register_resource(self, descriptor: ResourceDescriptor):
        """Insert or replace a resource by uri."""
        self._check_writable()
        if descriptor.uri in self._resources:
            log.warning(f"Replacing resource registration: {descriptor.uri}")
        self._resources[descriptor.uri] = descriptor

    def register_tools_module(self, module):
        """Register every descriptor in a provider module's TOOLS list."""
        tools = getattr(module, "TOOLS", None)
        if tools is None:
            raise TypeError(f"{getattr(module, '__name__', module)!r} has no TOOLS list")
        for descriptor in tools:
            self.register_tool(descriptor)
        log.info(f"Registered {len(tools)} tools: {[t.name for t in tools]}")

    def freeze(self):
        """Close the catalog. Further registration raises RegistryFrozenError."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_writable(self):
        if self._frozen:
            raise RegistryFrozenError("Registry is frozen; register before the server starts")

    # -- lookup --

    def get_tool(self, name: str) -> Optional[ToolDescriptor]:
        return self._tools.get(name)

    def get_resource(self, uri: str) -> Optional[ResourceDescriptor]:
        return self._resources.get(uri)

    def list_tools(self) -> List[ToolDescriptor]:
        """Tools in first-registration order."""
        return list(self._tools.values())

    def list_resources(self) -> List[ResourceDescriptor]:
        """Resources in first-registration order."""
        return list(self._resources.values())

    @property
    def tool_count(self) -> int:
        return len(self._tools)

    @property
    def resource_count(self) -> int:
        return len(self._resources)
