"""
Per-client session identity, session config and state.

Exposure state belongs to one MCP session, so a client that initializes again
starts fresh and picks up whatever config it now sends. The store key joins
the client identity with the Mcp-Session-Id the transport assigned at
initialize:

    alice:3f1c...          # mcp-client-id "alice", transport session 3f1c...

The client identity is the mcp-client-id header when the client sends one.
Clients that don't are given a pseudo-identity derived from their IP address
and User-Agent. Two such clients behind the same NAT still get separate state,
because their transport sessions differ. Requests without a transport session
(stateless HTTP) are keyed by identity plus a digest of their config, and
non-HTTP transports (stdio) share the single key "local".

Clients pass per-session options in the `config` query parameter as base64
encoded JSON, for example:

    /mcp?config=eyJGTVBfVE9PTF9TRVRTIjogInF1b3RlcyJ9   # {"FMP_TOOL_SETS": "quotes"}

Only FMP_ACCESS_TOKEN, FMP_TOOL_SETS and DYNAMIC_TOOL_DISCOVERY are honoured.
A payload that can't be decoded is ignored; it never fails the request.
"""

import base64
import hashlib
import json
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable

from fastmcp.server.dependencies import get_http_request
from fastmcp.tools.tool import Tool
from starlette.requests import Request

from fmp_mcp.mode import ExposureMode

logger = logging.getLogger(__name__)

SESSION_CONFIG_KEYS = ("FMP_ACCESS_TOKEN", "FMP_TOOL_SETS", "DYNAMIC_TOOL_DISCOVERY")
CLIENT_ID_HEADER = "mcp-client-id"
TRANSPORT_SESSION_HEADER = "mcp-session-id"
LOCAL_SESSION_ID = "local"


def encode_session_config(config: dict[str, Any]) -> str:
    return base64.b64encode(json.dumps(config).encode("utf-8")).decode("ascii")


def decode_session_config(value: str | None) -> dict[str, Any]:
    """
    Decode a `config` query value into the allowed session options.

    Accepts standard and URL-safe base64, with or without padding. Unknown
    keys and null values are dropped. Lists of toolsets are joined into the
    comma-separated form used everywhere else.
    """
    if not value:
        return {}

    raw = value.strip().replace(" ", "+").replace("-", "+").replace("_", "/")
    raw += "=" * (-len(raw) % 4)
    try:
        payload = json.loads(base64.b64decode(raw).decode("utf-8"))
    except ValueError:
        logger.warning("Ignoring malformed session config")
        return {}

    if not isinstance(payload, dict):
        logger.warning("Ignoring session config that is not a JSON object")
        return {}

    dropped = sorted(key for key in payload if key not in SESSION_CONFIG_KEYS)
    if dropped:
        logger.warning("Ignoring unsupported session config keys: %s", ", ".join(dropped))

    config: dict[str, Any] = {}
    for key in SESSION_CONFIG_KEYS:
        item = payload.get(key)
        if item is None:
            continue
        if isinstance(item, list):
            item = ",".join(str(part) for part in item)
        config[key] = item if isinstance(item, bool) else str(item)
    return config


def session_id_from_request(request: Request) -> str:
    """Client identity: the mcp-client-id header, or a hash of IP and User-Agent."""
    client_id = request.headers.get(CLIENT_ID_HEADER, "").strip()
    if client_id:
        return client_id
    ip = request.client.host if request.client else "unknown"
    user_agent = request.headers.get("user-agent", "")
    digest = hashlib.sha256(f"{ip}|{user_agent}".encode("utf-8")).hexdigest()
    return f"auto-{digest[:16]}"


def session_config_from_request(request: Request) -> dict[str, Any]:
    return decode_session_config(request.query_params.get("config"))


def config_digest(config: dict[str, Any]) -> str:
    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]


def session_key_from_request(request: Request, config: dict[str, Any] | None = None) -> str:
    """
    Store key for the MCP session a request belongs to.

    Keyed by client identity and the transport's Mcp-Session-Id, so every
    initialize gets its own state. Without a transport session the config
    digest takes its place, so a changed config never reuses old state.
    """
    identity = session_id_from_request(request)
    transport_session = request.headers.get(TRANSPORT_SESSION_HEADER, "").strip()
    if transport_session:
        return f"{identity}:{transport_session}"
    if config is None:
        config = session_config_from_request(request)
    if not config:
        return identity
    return f"{identity}:cfg-{config_digest(config)}"


def current_request_identity() -> tuple[str, dict[str, Any]]:
    """
    Session key and session config of the MCP request being handled.

    FastMCP keeps the HTTP request in a ContextVar; get_http_request() raises
    RuntimeError when there is none, e.g. on the stdio transport.
    """
    try:
        request = get_http_request()
    except RuntimeError:
        return LOCAL_SESSION_ID, {}
    config = session_config_from_request(request)
    return session_key_from_request(request, config), config


@dataclass
class SessionState:
    """
    Everything the server remembers about one MCP session.

    module_tools only ever grows: disabling a toolset clears its entry in
    active_toolsets but keeps the tools it loaded.
    """

    session_id: str
    mode: ExposureMode
    toolsets: tuple[str, ...] = ()
    access_token_override: str | None = None
    active_toolsets: set[str] = field(default_factory=set)
    module_tools: dict[str, list[Tool]] = field(default_factory=dict)
    last_seen: float = field(default_factory=time.monotonic)

    @property
    def is_dynamic(self) -> bool:
        return self.mode is ExposureMode.DYNAMIC_TOOL_DISCOVERY

    def tool_names(self) -> set[str]:
        return {tool.name for tools in self.module_tools.values() for tool in tools}


class SessionStore:
    """
    In-memory session registry with idle expiry and a size bound.

    Sessions are kept in least-recently-used order. Every access moves a
    session to the end, so expiry and eviction both pop from the front.

    No lock is taken: every method runs to completion without awaiting, so
    on a single event loop no two callers interleave.
    """

    def __init__(
        self,
        ttl_seconds: float = 3600.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max(1, max_sessions)
        self._clock = clock
        self._sessions: OrderedDict[str, SessionState] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> SessionState | None:
        self._expire(self._clock())
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: str, factory: Callable[[], SessionState]) -> SessionState:
        now = self._clock()
        self._expire(now)

        state = self._sessions.get(session_id)
        if state is None:
            state = factory()
            self._sessions[session_id] = state
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info(
                    "Session evicted",
                    extra={"event_data": {"session_id": evicted, "reason": "max_sessions"}},
                )
        else:
            self._sessions.move_to_end(session_id)

        state.last_seen = now
        return state

    def discard(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def _expire(self, now: float) -> None:
        while self._sessions:
            session_id, state = next(iter(self._sessions.items()))
            if now - state.last_seen <= self.ttl_seconds:
                break
            del self._sessions[session_id]
            logger.info(
                "Session expired",
                extra={"event_data": {"session_id": session_id, "reason": "idle"}},
            )
