"""Earnings call transcripts."""

from fmp_mcp.fmp_tools import LIMIT, PAGING, QUARTER, SYMBOL, YEAR, Endpoint

ENDPOINTS = (
    Endpoint("getLatestEarningTranscripts", "List the most recent earnings call transcripts.", "/earning-call-transcript-latest", PAGING),
    Endpoint(
        "getEarningTranscript",
        "Get the full transcript of an earnings call.",
        "/earning-call-transcript",
        (SYMBOL, YEAR.as_required(), QUARTER.as_required(), LIMIT),
    ),
    Endpoint("getTranscriptDates", "List the available transcript dates of a company.", "/earning-call-transcript-dates", (SYMBOL,)),
    Endpoint("getAvailableTranscriptSymbols", "List symbols with earnings call transcripts.", "/earnings-transcript-list"),
)
