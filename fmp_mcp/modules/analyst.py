"""Analyst estimates, ratings, price targets and grades."""

from fmp_mcp.fmp_tools import LIMIT, PAGING, SYMBOL, Endpoint, Param

ENDPOINTS = (
    Endpoint(
        "getAnalystEstimates",
        "Get analyst estimates for revenue, EPS, EBITDA and net income.",
        "/analyst-estimates",
        (SYMBOL, Param("period", "Estimate period", required=True, enum=("annual", "quarter")), *PAGING),
    ),
    Endpoint("getRatingsSnapshot", "Get the current FMP rating with its component scores.", "/ratings-snapshot", (SYMBOL, LIMIT)),
    Endpoint("getHistoricalRatings", "Get the history of FMP ratings.", "/ratings-historical", (SYMBOL, LIMIT)),
    Endpoint("getPriceTargetSummary", "Get average analyst price targets over several time windows.", "/price-target-summary", (SYMBOL,)),
    Endpoint("getPriceTargetConsensus", "Get the high, low, median and consensus price target.", "/price-target-consensus", (SYMBOL,)),
    Endpoint("getPriceTargetNews", "Get news about analyst price target changes for a symbol.", "/price-target-news", (SYMBOL, *PAGING)),
    Endpoint("getPriceTargetLatestNews", "Get the latest price target news across all symbols.", "/price-target-latest-news", PAGING),
    Endpoint("getStockGrades", "Get the latest analyst grades (upgrades and downgrades).", "/grades", (SYMBOL,)),
    Endpoint("getHistoricalStockGrades", "Get the history of analyst grade counts.", "/grades-historical", (SYMBOL, LIMIT)),
    Endpoint("getStockGradeSummary", "Get the consensus of analyst grades.", "/grades-consensus", (SYMBOL,)),
    Endpoint("getStockGradeNews", "Get news about analyst grade changes for a symbol.", "/grades-news", (SYMBOL, *PAGING)),
    Endpoint("getStockGradeLatestNews", "Get the latest analyst grade news across all symbols.", "/grades-latest-news", PAGING),
)
