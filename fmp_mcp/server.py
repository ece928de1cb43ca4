"""
FMP MCP server built on FastMCP v2 with a tool exposure middleware.

This module creates and runs the MCP server with:
- 250+ Financial Modeling Prep tools grouped into toolsets
- Three exposure modes (ALL_TOOLS, STATIC_TOOL_SETS, DYNAMIC_TOOL_DISCOVERY)
- Five meta-tools that let dynamic sessions enable toolsets on demand
- A server_overview prompt describing the active mode
- Health, ping and server card HTTP endpoints, with CORS enabled
- Structured JSON logging for mode, session and toolset events
- Streamable HTTP transport (the current MCP standard)

Architecture:
    The flow for every tools/list and tools/call request:

    1. FastMCP's RequestContextMiddleware stores the HTTP request in a ContextVar
    2. ToolExposureMiddleware intercepts the MCP method
    3. The middleware calls get_http_request() to derive the session key
       (client identity joined with the Mcp-Session-Id) and the session
       config (`config` query parameter)
    4. ExposureEngine returns the session's state, creating it on the first
       request after initialize
    5. For tools/list: the registered tool list is filtered to what the
       session may see, or replaced by meta-tools plus the session's own
       tools for dynamic sessions
    6. For tools/call: tools the session can't see are rejected as unknown;
       the rest are run, with the session's token if it brought one

Running the server:
    fmp-mcp-server --fmp-tool-sets search,company,quotes

    This starts the server on http://0.0.0.0:8080 with:
    - MCP endpoint at /mcp (Streamable HTTP)
    - Liveness check at /ping
    - Health check at /healthcheck
    - Server card at /.well-known/mcp/server-card.json
"""

import argparse
import asyncio
import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Sequence

from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import CallToolRequestParams, ListToolsRequest
from starlette.middleware import Middleware as ASGIMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from fmp_mcp.config import Settings, settings
from fmp_mcp.exposure import META_TOOL_NAMES, ExposureEngine
from fmp_mcp.fmp_tools import FmpTool
from fmp_mcp.loaders import ModuleLoaderRegistry, build_default_registry
from fmp_mcp.meta_tools import build_meta_tools
from fmp_mcp.mode import ExposureMode, InvalidToolSetsError, ServerModeEnforcer
from fmp_mcp.sessions import TRANSPORT_SESSION_HEADER, session_key_from_request
from fmp_mcp.toolsets import TOOL_SETS, get_toolset

__version__ = "0.1.0"

SERVER_NAME = "fmp-mcp-server"

logger = logging.getLogger(SERVER_NAME)

# ---------------------------------------------------------------------------
# Structured JSON Logging
# ---------------------------------------------------------------------------
# Logs go to stdout, one JSON object per line, so log collectors can index
# fields such as session_id, toolset and mode without parsing messages.


class JSONLogFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Example output:

        {"timestamp": "2026-02-06 10:30:00,123", "level": "INFO", "logger": "fmp_mcp.exposure",
         "message": "Toolset enabled", "session_id": "alice", "toolset": "quotes", "tools": 16}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Structured fields passed via logger.info("msg", extra={"event_data": {...}})
        if hasattr(record, "event_data"):
            log_entry.update(record.event_data)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging(level: str) -> None:
    """Install the JSON formatter on the root logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONLogFormatter())
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), handlers=[handler])


# ---------------------------------------------------------------------------
# Tool Exposure Middleware
# ---------------------------------------------------------------------------
# Domain tools for ALL_TOOLS and STATIC_TOOL_SETS are registered on the
# FastMCP server once at startup. What a given session sees is decided here,
# per request:
#
# - on_list_tools: filter (or, for dynamic sessions, replace) the tool list
# - on_call_tool: reject calls to tools the session can't see, and run
#   session-owned tools directly since they are not registered server-wide


class ToolExposureMiddleware(Middleware):
    """
    Per-session tool visibility and call enforcement.

    Listing and calling go through the same visibility rules, so a client
    that guesses the name of a hidden tool gets the same "Unknown tool" error
    as for a tool that does not exist.
    """

    def __init__(self, engine: ExposureEngine):
        self.engine = engine

    async def on_list_tools(
        self,
        context: MiddlewareContext[ListToolsRequest],
        call_next: CallNext[ListToolsRequest, Sequence[Tool]],
    ) -> Sequence[Tool]:
        state = self.engine.current_session()
        registered = await call_next(context)

        if state.is_dynamic:
            by_name = {tool.name: tool for tool in registered}
            visible = [by_name[name] for name in META_TOOL_NAMES if name in by_name]
            visible.extend(self.engine.session_tools(state))
        else:
            allowed = set(self.engine.visible_names(state))
            visible = [tool for tool in registered if tool.name in allowed]

        logger.debug(
            "Tool list filtered",
            extra={
                "event_data": {
                    "session_id": state.session_id,
                    "mode": state.mode.value,
                    "registered_tools": len(registered),
                    "visible_tools": len(visible),
                }
            },
        )
        return visible

    async def on_call_tool(
        self,
        context: MiddlewareContext[CallToolRequestParams],
        call_next: CallNext[CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        state = self.engine.current_session()
        tool_name = context.message.name
        arguments = context.message.arguments or {}

        if state.is_dynamic:
            if tool_name in META_TOOL_NAMES:
                return await call_next(context)
            tool = self.engine.session_tool(state, tool_name)
            if tool is None:
                raise self._rejection(state.session_id, tool_name)
            return await tool.run(arguments)

        if tool_name not in self.engine.visible_names(state):
            raise self._rejection(state.session_id, tool_name)

        if state.access_token_override:
            tool = self.engine.global_tool(tool_name)
            if isinstance(tool, FmpTool):
                return await tool.with_access_token(state.access_token_override).run(arguments)

        return await call_next(context)

    def _rejection(self, session_id: str, tool_name: str) -> NotFoundError:
        logger.warning(
            "Tool call rejected: not visible to session",
            extra={"event_data": {"session_id": session_id, "tool": tool_name}},
        )
        return NotFoundError(f"Unknown tool: {tool_name}")


# ---------------------------------------------------------------------------
# HTTP middleware
# ---------------------------------------------------------------------------
# Plain ASGI middleware around the streamable HTTP app. CORS lets browser
# based clients reach /mcp; SessionCleanupMiddleware drops exposure state when
# a client ends its MCP session.


class SessionCleanupMiddleware:
    """
    Ends the exposure session when the client terminates its MCP session.

    Streamable HTTP clients end a session with DELETE /mcp carrying the
    Mcp-Session-Id header. The request itself is passed on unchanged.
    """

    def __init__(self, app: ASGIApp, engine: ExposureEngine):
        self.app = app
        self.engine = engine

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "DELETE":
            request = Request(scope)
            if request.headers.get(TRANSPORT_SESSION_HEADER):
                self.engine.end_session(session_key_from_request(request))
        await self.app(scope, receive, send)


def http_middleware(engine: ExposureEngine) -> list[ASGIMiddleware]:
    return [
        ASGIMiddleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=[TRANSPORT_SESSION_HEADER],
        ),
        ASGIMiddleware(SessionCleanupMiddleware, engine=engine),
    ]


# ---------------------------------------------------------------------------
# Server factory
# ---------------------------------------------------------------------------


def server_card(meta_tools: list[Tool]) -> dict:
    """Static description of the server for registries and clients."""
    return {
        "serverInfo": {"name": SERVER_NAME, "version": __version__},
        "configSchema": {
            "type": "object",
            "properties": {
                "FMP_ACCESS_TOKEN": {
                    "type": "string",
                    "description": "Financial Modeling Prep API key for this session.",
                },
                "FMP_TOOL_SETS": {
                    "type": "string",
                    "description": "Comma-separated toolsets to expose, e.g. search,company,quotes.",
                },
                "DYNAMIC_TOOL_DISCOVERY": {
                    "type": "string",
                    "enum": ["true", "false"],
                    "description": "Start with meta-tools only and enable toolsets on demand.",
                },
            },
            "additionalProperties": False,
        },
        "tools": [tool.to_mcp_tool().model_dump(mode="json", exclude_none=True) for tool in meta_tools],
    }


def overview_text(engine: ExposureEngine) -> str:
    """Text of the server_overview prompt for the resolved mode."""
    lines = [
        f"{SERVER_NAME} {__version__}: Financial Modeling Prep market data over MCP.",
        f"Exposure mode: {engine.mode.value}.",
        "",
    ]
    if engine.mode is ExposureMode.DYNAMIC_TOOL_DISCOVERY:
        lines += [
            "Only the meta-tools are listed at first. To reach market data:",
            "1. Call list_toolsets to see every toolset and when to use it.",
            "2. Call enable_toolset with the key that fits the question, e.g. 'quotes'.",
            "3. The tool list changes (tools/list_changed); list tools again and call them.",
            "describe_toolset and list_tools report what this session has loaded.",
        ]
    elif engine.mode is ExposureMode.STATIC_TOOL_SETS:
        lines.append("This server exposes a fixed set of toolsets:")
        lines += [f"- {key}: {get_toolset(key).name}" for key in engine.enforcer.tool_sets]
    else:
        lines += [
            f"Every toolset is available ({len(TOOL_SETS)} toolsets).",
            "A session can narrow this with FMP_TOOL_SETS, or opt into dynamic discovery",
            "with DYNAMIC_TOOL_DISCOVERY, in the base64 JSON `config` query parameter.",
        ]
    return "\n".join(lines)


def build_engine(
    enforcer: ServerModeEnforcer,
    config: Settings = settings,
    registry: ModuleLoaderRegistry | None = None,
) -> ExposureEngine:
    return ExposureEngine(enforcer, registry or build_default_registry(config), config)


async def create_server(engine: ExposureEngine) -> FastMCP:
    """
    Build the FastMCP server for an engine's resolved exposure mode.

    Meta-tools are registered first so they lead every dynamic listing.
    Domain tools are loaded eagerly unless the server is dynamic. The HTTP
    app should be built with http_middleware(engine).
    """
    started = time.monotonic()

    mcp = FastMCP(
        name=SERVER_NAME,
        instructions=(
            "Financial Modeling Prep market data. In dynamic mode call list_toolsets, "
            "then enable_toolset with the toolset that fits the question before using "
            "its tools."
        ),
        middleware=[ToolExposureMiddleware(engine)],
    )

    meta_tools = build_meta_tools(engine)
    if engine.serves_meta_tools:
        for tool in meta_tools:
            mcp.add_tool(tool)
    for tool in await engine.preload():
        mcp.add_tool(tool)

    @mcp.prompt(
        name="server_overview",
        description="How this server exposes its tools in the current mode, and how to reach them.",
    )
    def server_overview() -> str:
        return overview_text(engine)

    # Plain HTTP endpoints. They sit outside the MCP protocol and need no
    # session, so health checkers and load balancers can call them directly.

    @mcp.custom_route("/ping", methods=["GET"])
    async def ping(request: Request) -> Response:
        return JSONResponse({"status": "ok"})

    @mcp.custom_route("/healthcheck", methods=["GET"])
    async def healthcheck(request: Request) -> Response:
        return JSONResponse(
            {
                "status": "ok",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "uptime": round(time.monotonic() - started, 3),
                "mode": engine.mode.value,
                "sessions": len(engine.store),
                "version": __version__,
            }
        )

    card = server_card(meta_tools)

    @mcp.custom_route("/.well-known/mcp/server-card.json", methods=["GET"])
    async def server_card_route(request: Request) -> Response:
        return JSONResponse(card)

    return mcp


# ---------------------------------------------------------------------------
# Command line entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    toolset_help = "\n".join(f"  {key:<22} {definition.name}" for key, definition in TOOL_SETS.items())
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="Financial Modeling Prep MCP server (streamable HTTP).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"available toolsets:\n{toolset_help}",
    )
    parser.add_argument(
        "--dynamic-tool-discovery",
        action="store_const",
        const="true",
        default=None,
        help="start with the meta-tools only; sessions enable toolsets on demand",
    )
    parser.add_argument(
        "--fmp-tool-sets",
        default=None,
        help="comma-separated toolsets to expose, e.g. search,company,quotes",
    )
    parser.add_argument("--fmp-token", default=None, help="Financial Modeling Prep API key")
    parser.add_argument("--port", type=int, default=None, help="port to listen on (default: 8080)")
    parser.add_argument("--host", default=None, help="interface to bind (default: 0.0.0.0)")
    parser.add_argument("--log-level", default=None, help="log level (default: info)")
    return parser


async def serve(enforcer: ServerModeEnforcer, config: Settings) -> None:
    engine = build_engine(enforcer, config)
    mcp = await create_server(engine)
    logger.info(
        "Starting MCP server on %s:%d (transport=streamable-http, mode=%s)",
        config.host,
        config.port,
        enforcer.mode.value,
    )
    await mcp.run_async(
        transport="streamable-http",
        host=config.host,
        port=config.port,
        log_level=config.log_level,
        middleware=http_middleware(engine),
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
        "fmp_access_token": args.fmp_token,
    }
    config = settings.model_copy(update={key: value for key, value in overrides.items() if value is not None})
    configure_logging(config.log_level)

    try:
        enforcer = ServerModeEnforcer.initialize(
            config.mode_source(),
            {"dynamic_tool_discovery": args.dynamic_tool_discovery, "fmp_tool_sets": args.fmp_tool_sets},
        )
    except InvalidToolSetsError as exc:
        logger.error(
            "Refusing to start: %s",
            exc,
            extra={"event_data": {"invalid": exc.invalid, "valid": exc.valid}},
        )
        raise SystemExit(1) from exc

    if not config.fmp_access_token:
        logger.warning(
            "No FMP access token configured; tool calls will fail unless a session "
            "provides FMP_ACCESS_TOKEN in its config"
        )
    asyncio.run(serve(enforcer, config))


if __name__ == "__main__":
    main()
