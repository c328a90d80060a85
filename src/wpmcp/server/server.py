"""
MCP Server — Main Orchestrator

Ties together:
  Transport -> Protocol -> Router -> Registry

Flow:
  1. Transport reads one line from stdin
  2. Protocol validates JSON-RPC 2.0
  3. Router dispatches to the registered tool or resource
  4. Transport writes the response (same id) to stdout

Lifecycle:
  - Tools and resources are registered before run()
  - run() freezes the registry, then starts reading
  - Each request runs in its own task; responses may complete out of order
"""

import asyncio
import signal
from typing import Any, Dict, List, Optional, Set

from wpmcp.config import Config
from wpmcp.server.logger import get_logger
from wpmcp.server.transport import StdioTransport
from wpmcp.server.protocol import (
    validate_message,
    make_response,
    make_error,
    ProtocolError,
    INTERNAL_ERROR,
)
from wpmcp.server.registry import Registry, ResourceDescriptor, ToolDescriptor
from wpmcp.server.router import Router

log = get_logger("server")


class MCPServer:
    """
    Main server orchestrator.

    Usage:
        server = MCPServer()
        server.register_tools_module(wpcodebox)
        await server.run()
    """

    def __init__(
        self,
        registry: Optional[Registry] = None,
        transport: Optional[StdioTransport] = None,
        validate_input: Optional[bool] = None,
    ):
        self._registry = registry if registry is not None else Registry()
        self._router = Router(self._registry, validate_input=validate_input)
        self._transport = transport or StdioTransport()
        self._tasks: Set[asyncio.Task] = set()
        self._signals: List[int] = []
        self._running = False

    # -- tool/resource registration (call before run) --

    def register_tool(self, descriptor: ToolDescriptor):
        self._registry.register_tool(descriptor)

    def register_resource(self, descriptor: ResourceDescriptor):
        self._registry.register_resource(descriptor)

    def register_tools_module(self, module):
        """Register a provider module's TOOLS list."""
        self._registry.register_tools_module(module)

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def router(self) -> Router:
        return self._router

    # -- main loop --

    async def run(self):
        """Start the server and process messages until EOF or signal."""
        log.info(f"Starting {Config.SERVER_NAME} v{Config.SERVER_VERSION}")

        self._registry.freeze()
        await self._transport.start()

        loop = asyncio.get_event_loop()
        main_task = asyncio.current_task()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, main_task.cancel)
                self._signals.append(sig)
            except (NotImplementedError, RuntimeError):
                pass

        self._running = True
        log.info(
            f"Server ready — tools={self._registry.tool_count} "
            f"resources={self._registry.resource_count}"
        )

        try:
            while self._running:
                try:
                    result = await self._transport.read_message()
                except ProtocolError as exc:
                    log.warning(f"Unreadable message: {exc.message} (code={exc.code})")
                    await self._transport.write_message(make_error(None, exc.code, exc.message))
                    continue

                if result is None:
                    log.info("EOF on stdin — shutting down")
                    break

                _, parsed = result
                self._spawn(parsed)

            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)

        except asyncio.CancelledError:
            log.info("Server cancelled")
        except Exception as exc:
            log.error(f"Server error: {exc}", exc_info=True)
        finally:
            await self.shutdown()

    def _spawn(self, msg: Any):
        task = asyncio.create_task(self._process(msg))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _process(self, msg: Any):
        response = await self.handle_message(msg)
        if response is not None:
            await self._transport.write_message(response)

    async def handle_message(self, msg: Any) -> Optional[Dict[str, Any]]:
        """
        Process a single JSON-RPC message.
        Returns the response to send, or None for notifications.
        """
        request_id = msg.get("id") if isinstance(msg, dict) else None
        method = msg.get("method", "") if isinstance(msg, dict) else ""

        try:
            msg_type = validate_message(msg)

            if msg_type in ("response", "error"):
                log.debug(f"Ignoring client {msg_type} for id={request_id}")
                return None

            result = await self._router.route(msg)

            if msg_type == "notification":
                return None
            if result is None:
                result = {}

            return make_response(request_id, result)

        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code}) method={method!r}")
            if isinstance(msg, dict) and "method" in msg and "id" not in msg:
                return None
            return make_error(request_id, exc.code, exc.message, exc.data)

        except Exception as exc:
            log.error(f"Unhandled error: {exc}", exc_info=True)
            if isinstance(msg, dict) and "id" not in msg:
                return None
            return make_error(request_id, INTERNAL_ERROR, str(exc))

    async def shutdown(self):
        """Graceful shutdown."""
        if not self._running:
            return
        self._running = False

        for task in list(self._tasks):
            if not task.done():
                task.cancel()

        loop = asyncio.get_event_loop()
        for sig in self._signals:
            loop.remove_signal_handler(sig)
        self._signals = []

        await self._transport.close()
        log.info("Server stopped")
