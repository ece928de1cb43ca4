"""
Unit tests for exposure mode resolution (fmp_mcp/mode.py).

Covers the precedence rules (dynamic flag, then toolset list, then the
ALL_TOOLS default), CLI-over-environment overrides and the singleton
lifecycle of ServerModeEnforcer.
"""

import logging

import pytest

from fmp_mcp.mode import ExposureMode, InvalidToolSetsError, ServerModeEnforcer, is_truthy


class TestResolve:
    """Tests for ServerModeEnforcer.resolve() precedence."""

    def test_nothing_configured_is_all_tools_without_override(self):
        """No settings means ALL_TOOLS with no override."""
        enforcer = ServerModeEnforcer.resolve({})

        assert enforcer.server_mode_override is None
        assert enforcer.mode is ExposureMode.ALL_TOOLS
        assert enforcer.tool_sets == ()

    def test_toolset_list_selects_static_mode(self):
        """A toolset list selects STATIC_TOOL_SETS."""
        enforcer = ServerModeEnforcer.resolve({"FMP_TOOL_SETS": "search, quotes"})

        assert enforcer.server_mode_override is ExposureMode.STATIC_TOOL_SETS
        assert enforcer.tool_sets == ("search", "quotes")

    def test_dynamic_flag_is_case_insensitive(self):
        """"TRUE" turns on dynamic discovery."""
        enforcer = ServerModeEnforcer.resolve({"DYNAMIC_TOOL_DISCOVERY": "TRUE"})

        assert enforcer.server_mode_override is ExposureMode.DYNAMIC_TOOL_DISCOVERY

    def test_dynamic_wins_over_toolsets_and_warns(self, caplog):
        """Dynamic discovery beats a toolset list, with a warning."""
        with caplog.at_level(logging.WARNING):
            enforcer = ServerModeEnforcer.resolve(
                {"DYNAMIC_TOOL_DISCOVERY": "true", "FMP_TOOL_SETS": "search"}
            )

        assert enforcer.mode is ExposureMode.DYNAMIC_TOOL_DISCOVERY
        assert enforcer.tool_sets == ()
        assert "ignoring configured tool sets" in caplog.text

    def test_dynamic_flag_other_than_true_is_ignored(self):
        """Only "true" enables dynamic discovery."""
        enforcer = ServerModeEnforcer.resolve({"DYNAMIC_TOOL_DISCOVERY": "yes"})

        assert enforcer.server_mode_override is None

    def test_blank_toolset_list_is_all_tools(self):
        """An empty toolset list is the same as none."""
        enforcer = ServerModeEnforcer.resolve({"FMP_TOOL_SETS": " , "})

        assert enforcer.server_mode_override is None

    def test_cli_value_overrides_environment(self):
        """CLI toolsets replace the environment's."""
        enforcer = ServerModeEnforcer.resolve(
            {"FMP_TOOL_SETS": "search"},
            {"fmp_tool_sets": "quotes"},
        )

        assert enforcer.tool_sets == ("quotes",)

    def test_cli_dynamic_flag_overrides_environment_toolsets(self):
        """The CLI dynamic flag beats environment toolsets."""
        enforcer = ServerModeEnforcer.resolve(
            {"FMP_TOOL_SETS": "search"},
            {"dynamic_tool_discovery": "true", "fmp_tool_sets": None},
        )

        assert enforcer.mode is ExposureMode.DYNAMIC_TOOL_DISCOVERY

    def test_unknown_toolset_raises_with_names(self):
        """Unknown toolsets fail with the invalid and valid keys."""
        with pytest.raises(InvalidToolSetsError) as exc_info:
            ServerModeEnforcer.resolve({"FMP_TOOL_SETS": "search,bogus"})

        error = exc_info.value
        assert error.invalid == ["bogus"]
        assert "search" in error.valid
        assert "bogus" in str(error)
        assert "Valid tool sets" in str(error)


class TestSingleton:
    """Tests for the initialize / get_instance / reset lifecycle."""

    def test_get_instance_before_initialize_raises(self):
        """get_instance needs a prior initialize."""
        with pytest.raises(RuntimeError, match="before initialize"):
            ServerModeEnforcer.get_instance()

    def test_initialize_sets_instance(self):
        """initialize stores the resolved enforcer."""
        enforcer = ServerModeEnforcer.initialize({"FMP_TOOL_SETS": "quotes"})

        assert ServerModeEnforcer.get_instance() is enforcer

    def test_second_initialize_raises(self):
        """initialize runs once per process."""
        ServerModeEnforcer.initialize({})

        with pytest.raises(RuntimeError, match="already initialized"):
            ServerModeEnforcer.initialize({"DYNAMIC_TOOL_DISCOVERY": "true"})

        assert ServerModeEnforcer.get_instance().server_mode_override is None

    def test_failed_initialize_leaves_no_instance(self):
        """A rejected configuration stores nothing."""
        with pytest.raises(InvalidToolSetsError):
            ServerModeEnforcer.initialize({"FMP_TOOL_SETS": "bogus"})

        with pytest.raises(RuntimeError):
            ServerModeEnforcer.get_instance()


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), (" True ", True), (True, True), ("false", False), ("1", False), (None, False)],
)
def test_is_truthy(value, expected):
    """Only True or the string "true", in any case and padding, counts as true."""
    assert is_truthy(value) is expected
