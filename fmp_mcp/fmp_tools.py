"""
Financial Modeling Prep tool definitions.

Every FMP tool is a thin, read-only wrapper around one GET endpoint of the
stable API. Instead of writing 250+ near-identical handler functions, each
module under fmp_mcp/modules/ declares a table of Endpoint entries and
build_tools() turns the table into FastMCP Tool objects:

    ENDPOINTS = (
        Endpoint("getQuote", "Get a real-time quote.", "/quote", (SYMBOL,)),
    )

The resulting tools are plain values: building them registers nothing on a
server. The exposure engine decides where (server-wide or per session) they
become visible.

The access token is threaded in when the tools are built. A tool built
without one still registers fine; it fails only when invoked.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent, ToolAnnotations

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://financialmodelingprep.com/stable"

MISSING_TOKEN_MESSAGE = (
    "FMP access token is not configured. Provide it via the FMP_ACCESS_TOKEN "
    "environment variable, the --fmp-token CLI flag, or the session config "
    '{"FMP_ACCESS_TOKEN": "<token>"}.'
)

# All FMP tools are side-effect-free reads against an external API.
READ_ONLY_ANNOTATIONS = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=True,
)


@dataclass(frozen=True)
class Param:
    """One query parameter of an FMP endpoint."""

    name: str
    description: str
    type: str = "string"
    required: bool = False
    enum: tuple[str, ...] | None = None

    def schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum:
            schema["enum"] = list(self.enum)
        return schema

    def as_required(self) -> "Param":
        return Param(self.name, self.description, self.type, True, self.enum)


@dataclass(frozen=True)
class Endpoint:
    """Declarative description of a single FMP tool."""

    name: str
    description: str
    path: str
    params: tuple[Param, ...] = ()

    def input_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {param.name: param.schema() for param in self.params},
        }
        required = [param.name for param in self.params if param.required]
        if required:
            schema["required"] = required
        return schema


async def fetch_json(
    base_url: str,
    path: str,
    params: dict[str, Any],
    access_token: str,
    timeout: float,
) -> Any:
    """
    GET an FMP endpoint and return the decoded JSON body.

    Raises:
        ToolError: On transport failures, non-2xx responses or an FMP error
            payload. The message is shown to the client as the tool result.
    """
    async with httpx.AsyncClient(base_url=base_url, timeout=timeout) as client:
        try:
            response = await client.get(path, params={**params, "apikey": access_token})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("FMP request to %s failed with status %d", path, status)
            raise ToolError(
                f"FMP API request to {path} failed with status {status}: "
                f"{exc.response.text[:200]}"
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("FMP request to %s failed: %s", path, exc)
            raise ToolError(f"FMP API request to {path} failed: {exc}") from exc

    try:
        data = response.json()
    except ValueError:
        return response.text

    if isinstance(data, dict) and "Error Message" in data:
        raise ToolError(f"FMP API error: {data['Error Message']}")
    return data


class FmpTool(Tool):
    """A FastMCP tool that proxies one FMP endpoint."""

    path: str
    access_token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    def with_access_token(self, access_token: str) -> "FmpTool":
        """Copy of this tool that calls the API with a different token."""
        return self.model_copy(update={"access_token": access_token})

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        if not self.access_token:
            raise ToolError(MISSING_TOKEN_MESSAGE)

        missing = [
            name for name in self.parameters.get("required", [])
            if arguments.get(name) in (None, "")
        ]
        if missing:
            raise ToolError(f"Missing required parameter(s): {', '.join(missing)}")

        params = {key: value for key, value in arguments.items() if value is not None}
        data = await fetch_json(self.base_url, self.path, params, self.access_token, self.timeout)
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        return ToolResult(content=[TextContent(type="text", text=text)])


def build_tools(
    endpoints,
    access_token: str | None = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = 30.0,
) -> list[FmpTool]:
    return [
        FmpTool(
            name=endpoint.name,
            description=endpoint.description,
            parameters=endpoint.input_schema(),
            annotations=READ_ONLY_ANNOTATIONS,
            path=endpoint.path,
            access_token=access_token,
            base_url=base_url,
            timeout=timeout,
        )
        for endpoint in endpoints
    ]


# ---------------------------------------------------------------------------
# Shared parameters
# ---------------------------------------------------------------------------
# Reused across the module tables. Use .as_required() where an endpoint
# cannot work without an otherwise optional parameter.

SYMBOL = Param("symbol", "Ticker symbol, e.g. AAPL", required=True)
SYMBOLS = Param("symbols", "Comma-separated list of ticker symbols, e.g. AAPL,MSFT", required=True)
CIK = Param("cik", "Central Index Key (CIK) of the company", required=True)
QUERY = Param("query", "Search query", required=True)
LIMIT = Param("limit", "Maximum number of results to return", "number")
PAGE = Param("page", "Page number for paginated results", "number")
FROM_DATE = Param("from", "Start date (YYYY-MM-DD)")
TO_DATE = Param("to", "End date (YYYY-MM-DD)")
DATE = Param("date", "Date (YYYY-MM-DD)")
YEAR = Param("year", "Year, e.g. 2024", "number")
QUARTER = Param("quarter", "Quarter number (1-4)", "number")
EXCHANGE = Param("exchange", "Exchange short name, e.g. NASDAQ")
SHORT = Param("short", "Return a short version of each record", "boolean")
PERIOD = Param(
    "period",
    "Reporting period",
    enum=("Q1", "Q2", "Q3", "Q4", "FY", "annual", "quarter"),
)
STRUCTURE = Param("structure", "Response structure, 'flat' for a flat list", enum=("flat",))
NAME = Param("name", "Name to search for", required=True)
TIMEFRAME = Param(
    "timeframe",
    "Candle timeframe",
    required=True,
    enum=("1min", "5min", "15min", "30min", "1hour", "4hour", "1day"),
)
PERIOD_LENGTH = Param("periodLength", "Number of periods used by the indicator", "number", required=True)
NON_ADJUSTED = Param("nonadjusted", "Return prices not adjusted for splits", "boolean")

DATE_RANGE = (FROM_DATE, TO_DATE)
PAGING = (PAGE, LIMIT)
