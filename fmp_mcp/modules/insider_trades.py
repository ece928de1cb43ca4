"""Insider transactions and beneficial ownership."""

from fmp_mcp.fmp_tools import DATE, LIMIT, PAGING, SYMBOL, Endpoint, Param

ENDPOINTS = (
    Endpoint("getLatestInsiderTrading", "List the latest insider trades across all companies.", "/insider-trading/latest", (DATE, *PAGING)),
    Endpoint(
        "searchInsiderTrades",
        "Search insider trades by symbol, reporter CIK, company CIK or transaction type.",
        "/insider-trading/search",
        (
            Param("symbol", "Ticker symbol"),
            Param("reportingCik", "CIK of the reporting insider"),
            Param("companyCik", "CIK of the company"),
            Param("transactionType", "Transaction type, e.g. P-Purchase"),
            *PAGING,
        ),
    ),
    Endpoint(
        "searchInsiderTradesByReportingName",
        "Find insider CIKs by the reporting person's name.",
        "/insider-trading/reporting-name",
        (Param("name", "Name of the reporting person", required=True),),
    ),
    Endpoint("getInsiderTransactionTypes", "List all insider transaction type codes.", "/insider-trading-transaction-type"),
    Endpoint("getInsiderTradeStatistics", "Get quarterly insider buy/sell statistics for a company.", "/insider-trading/statistics", (SYMBOL,)),
    Endpoint(
        "getAcquisitionOwnership",
        "Get beneficial ownership changes from SC 13D/G filings.",
        "/acquisition-of-beneficial-ownership",
        (SYMBOL, LIMIT),
    ),
)
