"""
Module loader registry.

A module loader is an async callable that turns one FMP module into a list of
FastMCP tools:

    async def loader(auth: AuthContext) -> list[Tool]

Loaders only build tools. They never touch a live server, so the exposure
engine is free to register the result server-wide (ALL_TOOLS and
STATIC_TOOL_SETS) or keep it in a single session's registry
(DYNAMIC_TOOL_DISCOVERY).

The default registry imports each endpoint table on first use, so a dynamic
server that never sees an enable_toolset call never imports the tables at all.
"""

import importlib
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable

from fastmcp.tools.tool import Tool

from fmp_mcp.config import Settings
from fmp_mcp.fmp_tools import build_tools
from fmp_mcp.toolsets import catalog_modules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Credentials threaded into the tools a loader builds."""

    access_token: str | None = None

    @classmethod
    def resolve(cls, server_token: str | None, session_token: str | None = None) -> "AuthContext":
        """
        Pick the token a session's tools should use.

        A token from the session config wins over the server-level token.
        Blank values count as missing.
        """
        return cls(access_token=(session_token or "").strip() or (server_token or "").strip() or None)


ModuleLoader = Callable[[AuthContext], Awaitable[list[Tool]]]


class ModuleLoadError(Exception):
    """
    Raised when a module cannot be turned into tools.

    Attributes:
        module_id: The module that failed
        cause: The underlying exception, or a reason string for unknown modules
    """

    def __init__(self, module_id: str, cause: BaseException | str):
        self.module_id = module_id
        self.cause = cause
        super().__init__(f"Failed to load module '{module_id}': {cause}")


class ModuleLoaderRegistry:
    """Maps module ids to their loaders, in registration order."""

    def __init__(self) -> None:
        self._loaders: dict[str, ModuleLoader] = {}

    def register(self, module_id: str, loader: ModuleLoader) -> None:
        if module_id in self._loaders:
            raise ValueError(f"Module '{module_id}' is already registered")
        self._loaders[module_id] = loader

    def module_ids(self) -> list[str]:
        return list(self._loaders)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._loaders

    def loader(self, module_id: str) -> ModuleLoader:
        """The registered loader for a module; KeyError if there is none."""
        return self._loaders[module_id]

    async def load(self, module_id: str, auth: AuthContext) -> list[Tool]:
        """
        Run one module's loader.

        Raises:
            ModuleLoadError: If the module is unknown or its loader fails
        """
        loader = self._loaders.get(module_id)
        if loader is None:
            raise ModuleLoadError(module_id, "no loader registered")
        try:
            tools = await loader(auth)
        except Exception as exc:
            raise ModuleLoadError(module_id, exc) from exc
        return list(tools)

    async def load_many(
        self,
        module_ids: Iterable[str],
        auth: AuthContext,
    ) -> tuple[dict[str, list[Tool]], dict[str, str]]:
        """
        Load several modules, collecting failures instead of raising.

        Returns:
            (tools_by_module, errors): tools keyed by module id in the order
            requested, and an error message for every module that failed
        """
        loaded: dict[str, list[Tool]] = {}
        errors: dict[str, str] = {}
        for module_id in module_ids:
            try:
                loaded[module_id] = await self.load(module_id, auth)
            except ModuleLoadError as exc:
                logger.warning(
                    "Module load failed",
                    extra={"event_data": {"module": module_id, "error": str(exc.cause)}},
                )
                errors[module_id] = str(exc.cause)
        return loaded, errors


def endpoint_table_loader(module_id: str, base_url: str, timeout: float) -> ModuleLoader:
    """Loader that builds tools from fmp_mcp.modules.<module_id>.ENDPOINTS."""
    import_path = f"fmp_mcp.modules.{module_id.replace('-', '_')}"

    async def load(auth: AuthContext) -> list[Tool]:
        module = importlib.import_module(import_path)
        return build_tools(
            module.ENDPOINTS,
            access_token=auth.access_token,
            base_url=base_url,
            timeout=timeout,
        )

    return load


def build_default_registry(settings: Settings) -> ModuleLoaderRegistry:
    """Registry with a loader for every module in the toolset catalog."""
    registry = ModuleLoaderRegistry()
    for module_id in catalog_modules():
        registry.register(
            module_id,
            endpoint_table_loader(module_id, settings.fmp_base_url, settings.request_timeout),
        )
    return registry
