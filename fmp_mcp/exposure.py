"""
Exposure policy engine: which tools a session sees and can call.

The process-wide mode comes from ServerModeEnforcer. When the server itself
was left in ALL_TOOLS with no override, each session may still pick its own
behaviour through the session config:

    {"DYNAMIC_TOOL_DISCOVERY": "true"}      -> meta-tools only, enable on demand
    {"FMP_TOOL_SETS": "search,quotes"}      -> only those toolsets

A server-level mode always wins over session config.

Listings follow catalog order (toolset, then module, then tool) regardless
of the order in which a session enabled its toolsets.
"""

import logging
from typing import Any, Mapping

from fastmcp.tools.tool import Tool

from fmp_mcp.config import Settings
from fmp_mcp.loaders import AuthContext, ModuleLoaderRegistry
from fmp_mcp.mode import ExposureMode, ServerModeEnforcer, is_truthy
from fmp_mcp.sessions import SessionState, SessionStore, current_request_identity
from fmp_mcp.toolsets import (
    TOOL_SETS,
    ToolsetDefinition,
    catalog_modules,
    get_toolset,
    parse_toolset_list,
    split_known,
    toolset_keys,
)

logger = logging.getLogger(__name__)

META_TOOL_NAMES = (
    "enable_toolset",
    "disable_toolset",
    "list_toolsets",
    "describe_toolset",
    "list_tools",
)

DISABLE_NOTE = (
    "Tools already loaded for this toolset stay registered for this session; "
    "the toolset is only marked inactive."
)


class UnknownToolsetError(ValueError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Unknown toolset '{key}'. Valid toolsets: {', '.join(toolset_keys())}"
        )


class ToolsetLoadError(RuntimeError):
    """Raised when none of a toolset's modules could be loaded."""

    def __init__(self, key: str, errors: Mapping[str, str]):
        self.key = key
        self.errors = dict(errors)
        details = "; ".join(f"{module}: {error}" for module, error in self.errors.items())
        super().__init__(f"Failed to enable toolset '{key}': {details}")


class ExposureEngine:
    """
    Applies the exposure mode to sessions.

    Domain tools for ALL_TOOLS and STATIC_TOOL_SETS are loaded once by
    preload() and registered on the FastMCP server; per-session visibility is
    a filter over that set. Dynamic sessions load their own tools through the
    registry, with the session's token baked in.
    """

    def __init__(
        self,
        enforcer: ServerModeEnforcer,
        registry: ModuleLoaderRegistry,
        settings: Settings,
        store: SessionStore | None = None,
    ):
        self.enforcer = enforcer
        self.registry = registry
        self.server_token = settings.fmp_access_token
        self.store = store or SessionStore(settings.session_ttl_seconds, settings.max_sessions)
        self._global_tools: dict[str, list[Tool]] = {}
        self._global_by_name: dict[str, Tool] = {}

    @property
    def mode(self) -> ExposureMode:
        return self.enforcer.mode

    @property
    def serves_meta_tools(self) -> bool:
        """Meta-tools are needed unless the server forces STATIC_TOOL_SETS."""
        return self.enforcer.server_mode_override in (None, ExposureMode.DYNAMIC_TOOL_DISCOVERY)

    def startup_modules(self) -> list[str]:
        override = self.enforcer.server_mode_override
        if override is ExposureMode.DYNAMIC_TOOL_DISCOVERY:
            return []
        if override is ExposureMode.STATIC_TOOL_SETS:
            return catalog_modules(self.enforcer.tool_sets)
        return catalog_modules()

    async def preload(self) -> list[Tool]:
        """
        Load the server-wide tools for ALL_TOOLS or STATIC_TOOL_SETS.

        A module that fails to load is logged and skipped; the server still
        starts with the rest of the catalog.
        """
        modules = self.startup_modules()
        loaded, errors = await self.registry.load_many(modules, AuthContext.resolve(self.server_token))

        self._global_tools = {}
        self._global_by_name = {}
        for module_id, tools in loaded.items():
            fresh = [tool for tool in tools if tool.name not in self._global_by_name]
            self._global_tools[module_id] = fresh
            self._global_by_name.update((tool.name, tool) for tool in fresh)

        for module_id, error in errors.items():
            logger.error(
                "Skipping module at startup",
                extra={"event_data": {"module": module_id, "error": error}},
            )
        logger.info(
            "Preloaded tools",
            extra={
                "event_data": {
                    "mode": self.mode.value,
                    "modules": len(self._global_tools),
                    "tools": len(self._global_by_name),
                    "failed_modules": sorted(errors),
                }
            },
        )
        return list(self._global_by_name.values())

    # --- Sessions ---

    def current_session(self) -> SessionState:
        session_id, config = current_request_identity()
        return self.session_for(session_id, config)

    def session_for(self, session_id: str, config: Mapping[str, Any] | None = None) -> SessionState:
        return self.store.get_or_create(session_id, lambda: self.new_session(session_id, config or {}))

    def end_session(self, session_id: str) -> None:
        if self.store.discard(session_id):
            logger.info(
                "Session ended",
                extra={"event_data": {"session_id": session_id, "reason": "terminated"}},
            )

    def new_session(self, session_id: str, config: Mapping[str, Any]) -> SessionState:
        """Build the state for a session seen for the first time."""
        token = config.get("FMP_ACCESS_TOKEN")
        token = token.strip() if isinstance(token, str) and token.strip() else None
        override = self.enforcer.server_mode_override

        if override is not None:
            if "DYNAMIC_TOOL_DISCOVERY" in config or "FMP_TOOL_SETS" in config:
                logger.info(
                    "Server-level mode overrides session config",
                    extra={"event_data": {"session_id": session_id, "mode": override.value}},
                )
            mode, toolsets = override, self.enforcer.tool_sets
        elif is_truthy(config.get("DYNAMIC_TOOL_DISCOVERY")):
            mode, toolsets = ExposureMode.DYNAMIC_TOOL_DISCOVERY, ()
        else:
            known, unknown = split_known(parse_toolset_list(config.get("FMP_TOOL_SETS")))
            if unknown:
                logger.warning(
                    "Ignoring unknown session tool sets",
                    extra={"event_data": {"session_id": session_id, "invalid": unknown}},
                )
            if known:
                mode, toolsets = ExposureMode.STATIC_TOOL_SETS, tuple(known)
            else:
                mode, toolsets = ExposureMode.ALL_TOOLS, ()

        logger.info(
            "Session created",
            extra={
                "event_data": {
                    "session_id": session_id,
                    "mode": mode.value,
                    "tool_sets": list(toolsets),
                    "token_override": token is not None,
                }
            },
        )
        return SessionState(
            session_id=session_id,
            mode=mode,
            toolsets=toolsets,
            access_token_override=token,
        )

    # --- Visibility ---

    def session_tools(self, state: SessionState) -> list[Tool]:
        """Tools a dynamic session has loaded, in catalog order."""
        tools: list[Tool] = []
        for module_id in catalog_modules():
            tools.extend(state.module_tools.get(module_id, ()))
        return tools

    def domain_tools(self, state: SessionState) -> list[Tool]:
        """Domain tools visible to a session, in catalog order."""
        if state.is_dynamic:
            return self.session_tools(state)
        if state.mode is ExposureMode.STATIC_TOOL_SETS:
            modules = catalog_modules(state.toolsets)
        else:
            modules = list(self._global_tools)
        return [tool for module_id in modules for tool in self._global_tools.get(module_id, ())]

    def visible_names(self, state: SessionState) -> list[str]:
        names = [tool.name for tool in self.domain_tools(state)]
        if state.is_dynamic:
            return [*META_TOOL_NAMES, *names]
        return names

    def session_tool(self, state: SessionState, name: str) -> Tool | None:
        for tools in state.module_tools.values():
            for tool in tools:
                if tool.name == name:
                    return tool
        return None

    def global_tool(self, name: str) -> Tool | None:
        return self._global_by_name.get(name)

    # --- Meta-operations ---

    def _require_toolset(self, key: str) -> ToolsetDefinition:
        definition = get_toolset(key)
        if definition is None:
            raise UnknownToolsetError(key)
        return definition

    def _loaded_names(self, state: SessionState, definition: ToolsetDefinition) -> list[str]:
        return [
            tool.name
            for module_id in definition.modules
            for tool in state.module_tools.get(module_id, ())
        ]

    async def enable_toolset(self, state: SessionState, key: str) -> dict[str, Any]:
        """
        Load a toolset's modules into the session and mark it active.

        Modules already loaded (by this or another toolset) are not loaded
        again. If some modules fail, the others are still loaded and the
        failures are reported; if all of them fail, nothing changes.

        Raises:
            UnknownToolsetError: If the key is not in the catalog
            ToolsetLoadError: If no module of the toolset could be loaded
        """
        definition = self._require_toolset(key)
        if key in state.active_toolsets:
            return {
                "toolset": key,
                "status": "already_active",
                "tools": self._loaded_names(state, definition),
                "errors": {},
            }

        pending = [module_id for module_id in definition.modules if module_id not in state.module_tools]
        auth = AuthContext.resolve(self.server_token, state.access_token_override)
        loaded, errors = await self.registry.load_many(pending, auth)

        known = state.tool_names()
        for module_id, tools in loaded.items():
            if module_id in state.module_tools:
                continue
            fresh = [tool for tool in tools if tool.name not in known]
            known.update(tool.name for tool in fresh)
            state.module_tools[module_id] = fresh

        if not any(module_id in state.module_tools for module_id in definition.modules):
            raise ToolsetLoadError(key, errors)

        state.active_toolsets.add(key)
        names = self._loaded_names(state, definition)
        logger.info(
            "Toolset enabled",
            extra={
                "event_data": {
                    "session_id": state.session_id,
                    "toolset": key,
                    "tools": len(names),
                    "failed_modules": sorted(errors),
                }
            },
        )
        return {"toolset": key, "status": "enabled", "tools": names, "errors": errors}

    def disable_toolset(self, state: SessionState, key: str) -> dict[str, Any]:
        self._require_toolset(key)
        was_active = key in state.active_toolsets
        state.active_toolsets.discard(key)
        if was_active:
            logger.info(
                "Toolset disabled",
                extra={"event_data": {"session_id": state.session_id, "toolset": key}},
            )
        return {
            "toolset": key,
            "status": "disabled" if was_active else "not_active",
            "note": DISABLE_NOTE,
        }

    def list_toolsets(self, state: SessionState) -> list[dict[str, Any]]:
        return [
            {**definition.to_dict(), "active": key in state.active_toolsets}
            for key, definition in TOOL_SETS.items()
        ]

    def describe_toolset(self, state: SessionState, key: str) -> dict[str, Any]:
        definition = self._require_toolset(key)
        return {
            **definition.to_dict(),
            "active": key in state.active_toolsets,
            "loaded": any(module_id in state.module_tools for module_id in definition.modules),
            "tools": self._loaded_names(state, definition),
        }

    def list_tools(self, state: SessionState) -> list[str]:
        return self.visible_names(state)
