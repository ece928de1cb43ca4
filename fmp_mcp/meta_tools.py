"""
The five meta-tools that let a dynamic session manage its own tool list.

They are thin FastMCP wrappers over ExposureEngine: each one resolves the
calling session, runs the engine operation and returns the result as JSON
text. Engine errors become ToolError so the client gets an isError result
and the server keeps running.
"""

import json
from typing import Annotated, Any

from fastmcp import Context
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool
from mcp.types import ToolAnnotations
from pydantic import Field

from fmp_mcp.exposure import ExposureEngine, ToolsetLoadError, UnknownToolsetError

ToolsetKey = Annotated[str, Field(description="Toolset key as returned by list_toolsets, e.g. 'quotes'")]

_MUTATING = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=False)
_READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)


def _dump(result: Any) -> str:
    return json.dumps(result, indent=2)


def build_meta_tools(engine: ExposureEngine) -> list[Tool]:
    """Build the meta-tools bound to an engine, in their listing order."""

    async def enable_toolset(toolset: ToolsetKey, ctx: Context) -> str:
        state = engine.current_session()
        try:
            result = await engine.enable_toolset(state, toolset)
        except (UnknownToolsetError, ToolsetLoadError) as exc:
            raise ToolError(str(exc)) from exc
        await ctx.send_tool_list_changed()
        return _dump(result)

    async def disable_toolset(toolset: ToolsetKey) -> str:
        state = engine.current_session()
        try:
            return _dump(engine.disable_toolset(state, toolset))
        except UnknownToolsetError as exc:
            raise ToolError(str(exc)) from exc

    async def list_toolsets() -> str:
        return _dump(engine.list_toolsets(engine.current_session()))

    async def describe_toolset(toolset: ToolsetKey) -> str:
        state = engine.current_session()
        try:
            return _dump(engine.describe_toolset(state, toolset))
        except UnknownToolsetError as exc:
            raise ToolError(str(exc)) from exc

    async def list_tools() -> str:
        return _dump({"tools": engine.list_tools(engine.current_session())})

    definitions = (
        (
            enable_toolset,
            "Enable a toolset for this session. Its tools are loaded and added to the tool list.",
            _MUTATING,
        ),
        (
            disable_toolset,
            "Mark a toolset inactive for this session. Tools already loaded remain available.",
            _MUTATING,
        ),
        (
            list_toolsets,
            "List every available toolset with its description, decision criteria and active state.",
            _READ_ONLY,
        ),
        (
            describe_toolset,
            "Describe one toolset, including the tools this session has loaded from it.",
            _READ_ONLY,
        ),
        (
            list_tools,
            "List the names of the tools currently available in this session.",
            _READ_ONLY,
        ),
    )
    return [
        Tool.from_function(fn, name=fn.__name__, description=description, annotations=annotations, output_schema=None)
        for fn, description, annotations in definitions
    ]
