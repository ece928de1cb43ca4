"""
CLI utility to build the `config` query value for an MCP session.

Clients pass per-session options to the server as base64 encoded JSON in the
`config` query parameter of the MCP URL. This script builds that value so it
can be pasted into a client configuration.

Usage examples:

    # Only the quotes and company toolsets for this session
    python -m scripts.encode_session_config --tool-sets quotes,company

    # Dynamic discovery with a personal API key
    python -m scripts.encode_session_config --dynamic --token <fmp-api-key>

The resulting URL can be used with Claude Code:

    claude mcp add --transport http fmp "http://localhost:8080/mcp?config=<value>"
"""

import argparse
import json

from fmp_mcp.sessions import encode_session_config


def build_config(
    token: str | None = None,
    tool_sets: str | None = None,
    dynamic: bool = False,
) -> dict[str, str]:
    config: dict[str, str] = {}
    if token:
        config["FMP_ACCESS_TOKEN"] = token
    if tool_sets:
        config["FMP_TOOL_SETS"] = tool_sets
    if dynamic:
        config["DYNAMIC_TOOL_DISCOVERY"] = "true"
    return config


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Encode session options for the FMP MCP server.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Static toolsets:
    %(prog)s --tool-sets search,quotes

  Dynamic discovery with a session token:
    %(prog)s --dynamic --token my-fmp-key
        """,
    )
    parser.add_argument("--token", help="FMP API key to use for this session")
    parser.add_argument("--tool-sets", help="Comma-separated toolsets, e.g. search,quotes")
    parser.add_argument(
        "--dynamic",
        action="store_true",
        help="Start the session with meta-tools only",
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8080/mcp",
        help="MCP endpoint to append the config to (default: http://localhost:8080/mcp)",
    )

    args = parser.parse_args()
    config = build_config(args.token, args.tool_sets, args.dynamic)
    encoded = encode_session_config(config)

    print(f"Config:  {json.dumps(config)}")
    print(f"Encoded: {encoded}")
    print()
    print(f"URL: {args.url}?config={encoded}")


if __name__ == "__main__":
    main()
