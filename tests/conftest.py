"""
Shared test fixtures for the FMP MCP server test suite.

Key fixtures:
- reset_enforcer: Clears the ServerModeEnforcer singleton around every test
- test_settings: Settings isolated from the developer's environment and .env
- make_engine: A factory building an ExposureEngine for a given mode config
- session_config: Encodes a session config for the `config` query parameter

Testing approach:
- test_toolsets.py, test_mode.py, test_fmp_tools.py, test_loaders.py,
  test_sessions.py and test_exposure.py: Unit tests for each component in
  isolation. Upstream HTTP is never called; fetch_json is monkeypatched.

- test_server.py: Integration tests for the full MCP server. Uses an
  httpx.AsyncClient bound to the ASGI app (in-memory, no network needed) to
  send real MCP requests through the middleware.
"""

import pytest

from fmp_mcp.config import Settings
from fmp_mcp.exposure import ExposureEngine
from fmp_mcp.loaders import build_default_registry
from fmp_mcp.mode import ServerModeEnforcer
from fmp_mcp.sessions import encode_session_config

TEST_TOKEN = "server-test-token"


@pytest.fixture(autouse=True)
def reset_enforcer():
    """Every test starts and ends without a resolved exposure mode."""
    ServerModeEnforcer.reset()
    yield
    ServerModeEnforcer.reset()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a server token and no values from the environment."""
    return Settings(
        _env_file=None,
        fmp_access_token=TEST_TOKEN,
        dynamic_tool_discovery=None,
        fmp_tool_sets=None,
    )


@pytest.fixture
def make_engine(test_settings):
    """
    Factory fixture that builds an ExposureEngine for a mode config.

    Usage in tests:
        async def test_something(make_engine):
            engine = await make_engine({"FMP_TOOL_SETS": "quotes"})
            # engine has already preloaded its startup tools
    """

    async def _make_engine(env: dict | None = None, registry=None, config: Settings | None = None):
        config = config or test_settings
        enforcer = ServerModeEnforcer.resolve(env or {})
        engine = ExposureEngine(enforcer, registry or build_default_registry(config), config)
        await engine.preload()
        return engine

    return _make_engine


@pytest.fixture
def session_config():
    """Returns a callable that encodes session options for the config query."""

    def _session_config(**options) -> str:
        return encode_session_config(options)

    return _session_config
