"""Institutional ownership from Form 13F filings."""

from fmp_mcp.fmp_tools import CIK, PAGING, QUARTER, SYMBOL, YEAR, Endpoint

FILING_PERIOD = (YEAR.as_required(), QUARTER.as_required())

ENDPOINTS = (
    Endpoint("getLatestInstitutionalFilings", "List the latest Form 13F filings.", "/institutional-ownership/latest", PAGING),
    Endpoint(
        "getFilingExtract",
        "Get the holdings reported in an institution's 13F filing.",
        "/institutional-ownership/extract",
        (CIK, *FILING_PERIOD),
    ),
    Endpoint("getForm13FFilingDates", "List the 13F filing dates of an institution.", "/institutional-ownership/dates", (CIK,)),
    Endpoint(
        "getFilingExtractAnalyticsByHolder",
        "Get analytics on every institution holding a symbol in a quarter.",
        "/institutional-ownership/extract-analytics/holder",
        (SYMBOL, *FILING_PERIOD, *PAGING),
    ),
    Endpoint(
        "getHolderPerformanceSummary",
        "Get the portfolio performance summary of an institutional holder.",
        "/institutional-ownership/holder-performance-summary",
        (CIK, *PAGING),
    ),
    Endpoint(
        "getHolderIndustryBreakdown",
        "Get the industry allocation of an institutional holder.",
        "/institutional-ownership/holder-industry-breakdown",
        (CIK, *FILING_PERIOD),
    ),
    Endpoint(
        "getPositionsSummary",
        "Get a summary of institutional positions in a symbol.",
        "/institutional-ownership/symbol-positions-summary",
        (SYMBOL, *FILING_PERIOD),
    ),
    Endpoint(
        "getIndustryPerformanceSummary",
        "Get institutional holdings aggregated by industry for a quarter.",
        "/institutional-ownership/industry-summary",
        FILING_PERIOD,
    ),
)
