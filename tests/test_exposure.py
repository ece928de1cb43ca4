"""
Unit tests for the exposure policy engine (fmp_mcp/exposure.py).

The engine is exercised directly with SessionState objects, without a
FastMCP server in between. The integration tests in test_server.py cover
the same rules through the MCP protocol.
"""

import pytest

from fmp_mcp.exposure import META_TOOL_NAMES, ToolsetLoadError, UnknownToolsetError
from fmp_mcp.fmp_tools import SYMBOL, Endpoint, build_tools
from fmp_mcp.loaders import AuthContext, ModuleLoaderRegistry, build_default_registry
from fmp_mcp.mode import ExposureMode
from fmp_mcp.toolsets import catalog_modules, toolset_keys

DYNAMIC = {"DYNAMIC_TOOL_DISCOVERY": "true"}


async def failing_loader(auth: AuthContext):
    raise RuntimeError("boom")


def registry_with_failures(test_settings, *broken, overrides=None):
    """
    Default registry where the given modules always fail to load.

    overrides maps a module id to a replacement loader.
    """
    default = build_default_registry(test_settings)
    overrides = overrides or {}
    registry = ModuleLoaderRegistry()
    for module_id in catalog_modules():
        if module_id in broken:
            registry.register(module_id, failing_loader)
        else:
            registry.register(module_id, overrides.get(module_id) or default.loader(module_id))
    return registry


class TestStartupModes:
    """What the engine loads at startup in each server mode."""

    async def test_all_tools_preloads_whole_catalog(self, make_engine):
        """ALL_TOOLS loads every module and hides the meta-tools from plain sessions."""
        engine = await make_engine()
        state = engine.session_for("s1")

        names = engine.visible_names(state)

        assert 200 <= len(names) <= 300
        assert not set(META_TOOL_NAMES) & set(names)
        assert engine.serves_meta_tools is True

    async def test_static_mode_limits_tools(self, make_engine):
        """STATIC_TOOL_SETS loads only the configured toolsets and serves no meta-tools."""
        engine = await make_engine({"FMP_TOOL_SETS": "search,company,quotes"})
        state = engine.session_for("s1")

        names = engine.visible_names(state)

        assert {"searchSymbol", "getCompanyProfile", "getQuote"} <= set(names)
        assert "getForexQuote" not in names
        assert "enable_toolset" not in names
        assert 10 <= len(names) <= 100
        assert engine.serves_meta_tools is False

    async def test_dynamic_mode_starts_with_meta_tools_only(self, make_engine):
        """A dynamic server loads nothing up front."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")

        assert engine.visible_names(state) == list(META_TOOL_NAMES)
        assert engine.startup_modules() == []

    async def test_listing_is_stable(self, make_engine):
        """Listings repeat exactly and follow catalog order."""
        engine = await make_engine({"FMP_TOOL_SETS": "quotes,search"})
        state = engine.session_for("s1")

        first = engine.visible_names(state)

        assert engine.visible_names(state) == first
        assert first.index("searchSymbol") < first.index("getQuote")

    async def test_failed_module_is_skipped_at_startup(self, make_engine, test_settings):
        """A module that fails to load is left out; the rest still load."""
        registry = registry_with_failures(test_settings, "directory")
        engine = await make_engine({"FMP_TOOL_SETS": "search"}, registry=registry)

        names = engine.visible_names(engine.session_for("s1"))

        assert "searchSymbol" in names
        assert "getAvailableExchanges" not in names


class TestSessionModes:
    """Session config picks a mode when the server has no override."""

    async def test_session_can_choose_dynamic(self, make_engine):
        """DYNAMIC_TOOL_DISCOVERY in session config gives a dynamic session."""
        engine = await make_engine()

        state = engine.session_for("s1", {"DYNAMIC_TOOL_DISCOVERY": "true"})

        assert state.mode is ExposureMode.DYNAMIC_TOOL_DISCOVERY
        assert engine.visible_names(state) == list(META_TOOL_NAMES)

    async def test_session_toolsets_narrow_all_tools(self, make_engine):
        """Each session sees only its own toolsets."""
        engine = await make_engine()

        search = engine.session_for("s1", {"FMP_TOOL_SETS": "search"})
        quotes = engine.session_for("s2", {"FMP_TOOL_SETS": "quotes"})

        assert "searchSymbol" in engine.visible_names(search)
        assert "getQuote" not in engine.visible_names(search)
        assert "getQuote" in engine.visible_names(quotes)
        assert "searchSymbol" not in engine.visible_names(quotes)

    async def test_unknown_session_toolsets_are_dropped(self, make_engine, caplog):
        """Unknown keys are logged and ignored."""
        engine = await make_engine()

        state = engine.session_for("s1", {"FMP_TOOL_SETS": "quotes,bogus"})

        assert state.toolsets == ("quotes",)
        assert "Ignoring unknown session tool sets" in caplog.text

    async def test_only_unknown_session_toolsets_fall_back_to_all(self, make_engine):
        """With no known key left the session gets the full catalog."""
        engine = await make_engine()

        state = engine.session_for("s1", {"FMP_TOOL_SETS": "bogus"})

        assert state.mode is ExposureMode.ALL_TOOLS
        assert len(engine.visible_names(state)) >= 200

    async def test_server_override_beats_session_config(self, make_engine):
        """A server-level mode ignores the session's choice."""
        engine = await make_engine({"FMP_TOOL_SETS": "quotes"})

        state = engine.session_for("s1", {"DYNAMIC_TOOL_DISCOVERY": "true", "FMP_TOOL_SETS": "search"})

        assert state.mode is ExposureMode.STATIC_TOOL_SETS
        assert state.toolsets == ("quotes",)

    async def test_session_token_is_recorded(self, make_engine):
        """The session token is stored stripped."""
        engine = await make_engine()

        state = engine.session_for("s1", {"FMP_ACCESS_TOKEN": " personal "})

        assert state.access_token_override == "personal"

    async def test_config_only_applies_on_first_sight(self, make_engine):
        """Config sent later on the same session key does not change it."""
        engine = await make_engine()
        engine.session_for("s1", {"FMP_TOOL_SETS": "quotes"})

        state = engine.session_for("s1", {"FMP_TOOL_SETS": "search"})

        assert state.toolsets == ("quotes",)

    async def test_ended_session_starts_over(self, make_engine):
        """After end_session the same key is built again from its new config."""
        engine = await make_engine()
        engine.session_for("s1", {"FMP_TOOL_SETS": "quotes"})

        engine.end_session("s1")
        state = engine.session_for("s1", {"FMP_TOOL_SETS": "search"})

        assert state.toolsets == ("search",)
        assert len(engine.store) == 1


class TestEnableToolset:
    """enable_toolset loading, ordering and failure handling."""

    async def test_enable_loads_tools_into_session(self, make_engine):
        """Enabled tools join the session listing after the meta-tools."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")

        result = await engine.enable_toolset(state, "quotes")

        assert result["status"] == "enabled"
        assert "getQuote" in result["tools"]
        assert result["errors"] == {}
        assert "quotes" in state.active_toolsets
        assert engine.visible_names(state)[:5] == list(META_TOOL_NAMES)
        assert "getQuote" in engine.visible_names(state)

    async def test_enable_uses_session_token(self, make_engine):
        """Tools loaded for a session carry its token."""
        engine = await make_engine()
        state = engine.session_for("s1", {"DYNAMIC_TOOL_DISCOVERY": "true", "FMP_ACCESS_TOKEN": "mine"})

        await engine.enable_toolset(state, "quotes")

        assert engine.session_tool(state, "getQuote").access_token == "mine"

    async def test_enable_is_idempotent(self, make_engine):
        """Enabling twice loads nothing new."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")
        await engine.enable_toolset(state, "search")
        before = engine.visible_names(state)

        result = await engine.enable_toolset(state, "search")

        assert result["status"] == "already_active"
        assert engine.visible_names(state) == before

    async def test_order_follows_catalog_not_activation(self, make_engine):
        """Listing order ignores the order toolsets were enabled in."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")

        await engine.enable_toolset(state, "quotes")
        await engine.enable_toolset(state, "search")

        names = engine.visible_names(state)
        assert names.index("searchSymbol") < names.index("getQuote")

    async def test_unknown_toolset_lists_valid_keys(self, make_engine):
        """The error names the bad key and every valid one."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")

        with pytest.raises(UnknownToolsetError) as exc_info:
            await engine.enable_toolset(state, "bogus")

        message = str(exc_info.value)
        assert "bogus" in message
        assert all(key in message for key in toolset_keys())

    async def test_partial_failure_still_enables(self, make_engine, test_settings):
        """Healthy modules load and failures are reported per module."""
        registry = registry_with_failures(test_settings, "directory")
        engine = await make_engine(DYNAMIC, registry=registry)
        state = engine.session_for("s1")

        result = await engine.enable_toolset(state, "search")

        assert result["status"] == "enabled"
        assert "directory" in result["errors"]
        assert "searchSymbol" in result["tools"]
        assert "search" in state.active_toolsets

    async def test_total_failure_leaves_toolset_inactive(self, make_engine, test_settings):
        """If every module fails the toolset stays off."""
        registry = registry_with_failures(test_settings, "quotes")
        engine = await make_engine(DYNAMIC, registry=registry)
        state = engine.session_for("s1")

        with pytest.raises(ToolsetLoadError, match="boom"):
            await engine.enable_toolset(state, "quotes")

        assert "quotes" not in state.active_toolsets
        assert engine.visible_names(state) == list(META_TOOL_NAMES)

    async def test_sessions_do_not_share_enabled_toolsets(self, make_engine):
        """One session enabling a toolset leaves others untouched."""
        engine = await make_engine(DYNAMIC)
        alice = engine.session_for("alice")
        bob = engine.session_for("bob")

        await engine.enable_toolset(alice, "quotes")

        assert "getQuote" not in engine.visible_names(bob)
        assert engine.list_toolsets(bob)[2]["active"] is False

    async def test_duplicate_tool_names_are_merged(self, make_engine, test_settings):
        """The first module to provide a name wins."""
        async def shadow_loader(auth):
            return build_tools([Endpoint("getQuote", "Duplicate.", "/dup", (SYMBOL,))])

        registry = registry_with_failures(test_settings, overrides={"market-hours": shadow_loader})
        engine = await make_engine(DYNAMIC, registry=registry)
        state = engine.session_for("s1")

        await engine.enable_toolset(state, "quotes")
        await engine.enable_toolset(state, "market-performance")

        names = engine.visible_names(state)
        assert names.count("getQuote") == 1
        assert engine.session_tool(state, "getQuote").path == "/quote"


class TestOtherMetaOperations:
    """disable, list and describe operations."""

    async def test_disable_keeps_tools_visible(self, make_engine):
        """Disabling only clears the active flag."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")
        await engine.enable_toolset(state, "search")

        result = engine.disable_toolset(state, "search")

        assert result["status"] == "disabled"
        assert "searchSymbol" in engine.visible_names(state)
        search = next(entry for entry in engine.list_toolsets(state) if entry["key"] == "search")
        assert search["active"] is False

    async def test_disable_never_enabled_is_noop(self, make_engine):
        """Disabling an inactive toolset reports not_active."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")

        result = engine.disable_toolset(state, "quotes")

        assert result["status"] == "not_active"
        assert state.active_toolsets == set()

    async def test_disable_unknown_toolset_raises(self, make_engine):
        """Unknown keys are rejected."""
        engine = await make_engine(DYNAMIC)

        with pytest.raises(UnknownToolsetError):
            engine.disable_toolset(engine.session_for("s1"), "bogus")

    async def test_list_toolsets_in_catalog_order(self, make_engine):
        """Every toolset is listed with its metadata."""
        engine = await make_engine(DYNAMIC)

        entries = engine.list_toolsets(engine.session_for("s1"))

        assert [entry["key"] for entry in entries] == toolset_keys()
        assert set(entries[0]) == {"key", "name", "description", "decisionCriteria", "modules", "active"}

    async def test_describe_toolset_before_and_after_enable(self, make_engine):
        """describe_toolset reflects what the session has loaded."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")

        before = engine.describe_toolset(state, "quotes")
        await engine.enable_toolset(state, "quotes")
        after = engine.describe_toolset(state, "quotes")

        assert before["loaded"] is False and before["tools"] == []
        assert after["loaded"] is True and after["active"] is True
        assert "getQuote" in after["tools"]

    async def test_describe_unknown_toolset_raises(self, make_engine):
        """Unknown keys are rejected."""
        engine = await make_engine(DYNAMIC)

        with pytest.raises(UnknownToolsetError):
            engine.describe_toolset(engine.session_for("s1"), "bogus")

    async def test_list_tools_includes_disabled_toolsets(self, make_engine):
        """Tools of a disabled toolset stay in list_tools."""
        engine = await make_engine(DYNAMIC)
        state = engine.session_for("s1")
        await engine.enable_toolset(state, "quotes")
        engine.disable_toolset(state, "quotes")

        names = engine.list_tools(state)

        assert names[:5] == list(META_TOOL_NAMES)
        assert "getQuote" in names
