"""CFTC Commitment of Traders reports."""

from fmp_mcp.fmp_tools import DATE_RANGE, Endpoint, Param

COT_SYMBOL = Param("symbol", "Futures market symbol, e.g. KC")

ENDPOINTS = (
    Endpoint("getCOTReports", "Get Commitment of Traders reports.", "/commitment-of-traders-report", (COT_SYMBOL, *DATE_RANGE)),
    Endpoint(
        "getCOTAnalysis",
        "Get market sentiment analysis derived from Commitment of Traders reports.",
        "/commitment-of-traders-analysis",
        (COT_SYMBOL, *DATE_RANGE),
    ),
    Endpoint("getCOTList", "List the markets covered by Commitment of Traders reports.", "/commitment-of-traders-list"),
)
