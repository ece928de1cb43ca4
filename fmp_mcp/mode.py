"""
Server-level exposure mode resolution.

The exposure mode decides which part of the tool catalog a client can see:

- ALL_TOOLS: every module is loaded at startup and listed (the default, kept
  for clients that expect the full catalog)
- STATIC_TOOL_SETS: only the modules of a fixed toolset list are loaded
- DYNAMIC_TOOL_DISCOVERY: only the five meta-tools are listed at first and
  each session enables toolsets on demand

The mode is resolved exactly once per process by ServerModeEnforcer.initialize()
and is read-only afterwards. Precedence, highest first:

    1. dynamic discovery flag set to "true"   -> DYNAMIC_TOOL_DISCOVERY
    2. non-empty comma-separated toolset list -> STATIC_TOOL_SETS
    3. nothing configured                     -> ALL_TOOLS (no override)

For every input a CLI value takes precedence over the environment value.
"""

import logging
from enum import Enum
from typing import Any, Mapping

from fmp_mcp.toolsets import parse_toolset_list, split_known, toolset_keys

logger = logging.getLogger(__name__)


class ExposureMode(str, Enum):
    ALL_TOOLS = "ALL_TOOLS"
    STATIC_TOOL_SETS = "STATIC_TOOL_SETS"
    DYNAMIC_TOOL_DISCOVERY = "DYNAMIC_TOOL_DISCOVERY"


class InvalidToolSetsError(ValueError):
    """
    Raised when the server-level toolset list contains unknown keys.

    This is the only fatal configuration error: the server must refuse to
    start rather than silently serve a partial catalog.

    Attributes:
        invalid: The unknown keys, in the order they were given
        valid: Every key the catalog knows about
    """

    def __init__(self, invalid: list[str], valid: list[str]):
        self.invalid = invalid
        self.valid = valid
        super().__init__(
            f"Invalid tool sets: {', '.join(invalid)}. "
            f"Valid tool sets: {', '.join(valid)}"
        )


def is_truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.strip().lower() == "true"


def _pick(env: Mapping[str, Any], args: Mapping[str, Any], env_key: str, arg_key: str) -> Any:
    value = args.get(arg_key)
    if value is not None:
        return value
    return env.get(env_key)


class ServerModeEnforcer:
    """
    Process-wide holder of the resolved exposure mode.

    Lifecycle:
        initialize(env, args)  once, at startup (raises on invalid toolsets)
        get_instance()         read-only access everywhere else
        reset()                tests only

    Accessing the instance before initialize() is a programming error and
    raises instead of falling back to a default mode.
    """

    _instance: "ServerModeEnforcer | None" = None

    def __init__(self, server_mode_override: ExposureMode | None, tool_sets: tuple[str, ...] = ()):
        self._server_mode_override = server_mode_override
        self._tool_sets = tool_sets

    @property
    def server_mode_override(self) -> ExposureMode | None:
        """The mode forced by server-level configuration, or None if unset."""
        return self._server_mode_override

    @property
    def tool_sets(self) -> tuple[str, ...]:
        """Toolset keys for STATIC_TOOL_SETS; empty in the other modes."""
        return self._tool_sets

    @property
    def mode(self) -> ExposureMode:
        return self._server_mode_override or ExposureMode.ALL_TOOLS

    @classmethod
    def resolve(
        cls,
        env: Mapping[str, Any],
        args: Mapping[str, Any] | None = None,
    ) -> "ServerModeEnforcer":
        """Resolve a mode from configuration without touching the singleton."""
        args = args or {}
        dynamic = _pick(env, args, "DYNAMIC_TOOL_DISCOVERY", "dynamic_tool_discovery")
        raw_tool_sets = _pick(env, args, "FMP_TOOL_SETS", "fmp_tool_sets")
        requested = parse_toolset_list(raw_tool_sets)

        if is_truthy(dynamic):
            if requested:
                logger.warning(
                    "Dynamic tool discovery enabled; ignoring configured tool sets %s",
                    ",".join(requested),
                )
            return cls(ExposureMode.DYNAMIC_TOOL_DISCOVERY)

        if requested:
            known, unknown = split_known(requested)
            if unknown:
                raise InvalidToolSetsError(unknown, toolset_keys())
            return cls(ExposureMode.STATIC_TOOL_SETS, tuple(known))

        return cls(None)

    @classmethod
    def initialize(
        cls,
        env: Mapping[str, Any],
        args: Mapping[str, Any] | None = None,
    ) -> "ServerModeEnforcer":
        """
        Resolve the mode and install it as the process-wide instance.

        Raises:
            InvalidToolSetsError: If STATIC_TOOL_SETS names unknown toolsets
            RuntimeError: If the enforcer was already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("ServerModeEnforcer is already initialized")
        instance = cls.resolve(env, args)
        cls._instance = instance
        logger.info(
            "Exposure mode resolved",
            extra={
                "event_data": {
                    "mode": instance.mode.value,
                    "server_override": instance.server_mode_override is not None,
                    "tool_sets": list(instance.tool_sets),
                }
            },
        )
        return instance

    @classmethod
    def get_instance(cls) -> "ServerModeEnforcer":
        if cls._instance is None:
            raise RuntimeError(
                "ServerModeEnforcer.get_instance() called before initialize()"
            )
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the resolved mode. Only tests call this."""
        cls._instance = None
