"""Environmental, social and governance data."""

from fmp_mcp.fmp_tools import SYMBOL, YEAR, Endpoint

ENDPOINTS = (
    Endpoint("getESGDisclosures", "Get ESG disclosure scores reported by a company.", "/esg-disclosures", (SYMBOL,)),
    Endpoint("getESGRatings", "Get the ESG risk rating of a company.", "/esg-ratings", (SYMBOL,)),
    Endpoint("getESGBenchmarks", "Get average ESG scores by sector for a year.", "/esg-benchmark", (YEAR,)),
)
