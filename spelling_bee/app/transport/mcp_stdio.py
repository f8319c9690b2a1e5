"""Model Context Protocol adapter serving the tool catalogue over stdio."""

from __future__ import annotations

import logging
import os
import signal
import sys
from typing import Any, Callable, List, Optional

import anyio
import anyio.abc
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from spelling_bee.core import MethodNotFoundError

from ...utils.observability import get_logger
from ..services.tool_service import ToolDefinition, ToolResult, ToolService

SERVER_NAME = "spelling-bee"
READY_MESSAGE = "Spelling Bee MCP server running on stdio"


def _terminate(status: int) -> None:
    # The stdin reader thread cannot be cancelled, so exit without joining it.
    logging.shutdown()
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(status)


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema,
    )


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


class SpellingBeeMcpServer:
    """Bind a :class:`ToolService` to an MCP low-level server.

    ``tools/call`` is registered as a raw request handler so an unknown tool
    surfaces as a JSON-RPC ``METHOD_NOT_FOUND`` error instead of a tool error
    result.
    """

    def __init__(
        self,
        tool_service: ToolService,
        *,
        name: str = SERVER_NAME,
        version: Optional[str] = None,
        exit_process: Callable[[int], None] = _terminate,
    ) -> None:
        self.tool_service = tool_service
        self._exit_process = exit_process
        self._logger = get_logger(__name__).bind(component="mcp_server")
        self.server: Server = Server(name, version=version)
        self.server.list_tools()(self.handle_list_tools)
        self.server.request_handlers[types.CallToolRequest] = self._call_tool_request

    async def handle_list_tools(self) -> List[types.Tool]:
        tools = [to_mcp_tool(definition) for definition in self.tool_service.list_tools()]
        self._logger.debug("Listing tools", context={"tools": [tool.name for tool in tools]})
        return tools

    async def handle_call_tool(
        self,
        name: str,
        arguments: Optional[dict[str, Any]],
    ) -> types.CallToolResult:
        try:
            result = self.tool_service.call_tool(name, arguments)
        except MethodNotFoundError as exc:
            raise McpError(
                types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(exc))
            ) from exc
        return to_call_tool_result(result)

    async def _call_tool_request(self, request: types.CallToolRequest) -> types.ServerResult:
        result = await self.handle_call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    async def serve_stdio(self) -> None:
        """Serve requests on stdin/stdout until the client disconnects.

        SIGINT or SIGTERM closes the transport and ends the process with
        status 0.
        """

        async with anyio.create_task_group() as task_group:
            await task_group.start(self._exit_on_signal, task_group.cancel_scope)
            async with stdio_server() as (read_stream, write_stream):
                print(READY_MESSAGE, file=sys.stderr, flush=True)
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
            task_group.cancel_scope.cancel()

    async def _exit_on_signal(
        self,
        scope: anyio.CancelScope,
        *,
        task_status: anyio.abc.TaskStatus[None] = anyio.TASK_STATUS_IGNORED,
    ) -> None:
        with anyio.open_signal_receiver(signal.SIGINT, signal.SIGTERM) as signals:
            task_status.started()
            async for signum in signals:
                self._logger.warning(
                    "Interrupt received, shutting down",
                    context={"signal": signal.Signals(signum).name},
                )
                scope.cancel()
                self._exit_process(0)
                return


__all__ = [
    "READY_MESSAGE",
    "SERVER_NAME",
    "SpellingBeeMcpServer",
    "to_call_tool_result",
    "to_mcp_tool",
]
