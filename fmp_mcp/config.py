"""
Application configuration loaded from environment variables.

Uses pydantic-settings to define typed configuration that automatically reads
from environment variables (or a local .env file). The variable names match
the ones documented for the server, so there is no prefix:

- PORT, HOST, LOG_LEVEL control the HTTP transport
- FMP_ACCESS_TOKEN is the server-level Financial Modeling Prep API key
- FMP_TOOL_SETS and DYNAMIC_TOOL_DISCOVERY select the tool exposure mode

The exposure mode itself is not resolved here. The CLI entry point hands the
two mode fields (plus any CLI flags) to ServerModeEnforcer.initialize(), which
validates them and owns the process-wide mode from then on.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Server configuration with environment variable bindings.

    Field names map case-insensitively to environment variables, so
    `fmp_access_token` reads from FMP_ACCESS_TOKEN and `port` from PORT.
    CLI flags are applied on top with `settings.model_copy(update=...)`.
    """

    # --- Transport settings ---

    # "0.0.0.0" is required inside containers so traffic from outside can
    # reach the server.
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    # --- Financial Modeling Prep API ---

    # Server-level API key. Optional: without it the server still starts and
    # registers every tool, but tool calls fail until a session supplies its
    # own token via the session config.
    fmp_access_token: str | None = None
    fmp_base_url: str = "https://financialmodelingprep.com/stable"
    request_timeout: float = 30.0

    # --- Exposure mode inputs (validated by ServerModeEnforcer) ---

    # "true" selects dynamic tool discovery (meta-tools only at start).
    dynamic_tool_discovery: str | None = None
    # Comma-separated toolset keys, e.g. "search,company,quotes".
    fmp_tool_sets: str | None = None

    # --- Session store ---

    # Sessions idle for longer than this are discarded.
    session_ttl_seconds: float = 3600.0
    # Upper bound on tracked sessions; least recently used are evicted first.
    max_sessions: int = 1000

    model_config = {
        "env_prefix": "",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def mode_source(self) -> dict[str, str | None]:
        """Environment-style view of the mode inputs for ServerModeEnforcer."""
        return {
            "DYNAMIC_TOOL_DISCOVERY": self.dynamic_tool_discovery,
            "FMP_TOOL_SETS": self.fmp_tool_sets,
        }


# Singleton instance: import this from other modules.
settings = Settings()
