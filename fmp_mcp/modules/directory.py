"""Directory listings: symbol lists, exchanges, sectors, industries and countries."""

from fmp_mcp.fmp_tools import LIMIT, PAGE, Endpoint

ENDPOINTS = (
    Endpoint("getCompanySymbols", "List all company symbols available in the FMP database.", "/stock-list"),
    Endpoint(
        "getFinancialStatementSymbols",
        "List companies that have financial statements available.",
        "/financial-statement-symbol-list",
    ),
    Endpoint("getCIKList", "List companies with their SEC Central Index Keys.", "/cik-list", (PAGE, LIMIT)),
    Endpoint("getSymbolChanges", "List recent ticker symbol changes from mergers, renames and splits.", "/symbol-change", (LIMIT,)),
    Endpoint("getETFList", "List all ETF symbols with their names.", "/etf-list"),
    Endpoint("getActivelyTradingList", "List securities that are currently actively trading.", "/actively-trading-list"),
    Endpoint(
        "getEarningsTranscriptList",
        "List companies that have earnings call transcripts available.",
        "/earnings-transcript-list",
    ),
    Endpoint("getAvailableExchanges", "List all supported stock exchanges.", "/available-exchanges"),
    Endpoint("getAvailableSectors", "List all available industry sectors.", "/available-sectors"),
    Endpoint("getAvailableIndustries", "List all available industries.", "/available-industries"),
    Endpoint("getAvailableCountries", "List all countries with listed securities.", "/available-countries"),
)
