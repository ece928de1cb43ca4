"""ETF and mutual fund holdings, allocation and disclosures."""

from fmp_mcp.fmp_tools import NAME, QUARTER, SYMBOL, YEAR, Endpoint, Param

ENDPOINTS = (
    Endpoint("getFundHoldings", "Get the holdings of an ETF or mutual fund.", "/etf/holdings", (SYMBOL,)),
    Endpoint("getFundInfo", "Get ETF or mutual fund details: expense ratio, AUM, inception date.", "/etf/info", (SYMBOL,)),
    Endpoint("getFundCountryAllocation", "Get the country allocation of a fund.", "/etf/country-weightings", (SYMBOL,)),
    Endpoint("getFundAssetExposure", "List the funds holding a given stock.", "/etf/asset-exposure", (SYMBOL,)),
    Endpoint("getFundSectorWeighting", "Get the sector allocation of a fund.", "/etf/sector-weightings", (SYMBOL,)),
    Endpoint("getDisclosure", "Get the latest mutual fund and ETF disclosures that hold a symbol.", "/funds/disclosure-holders-latest", (SYMBOL,)),
    Endpoint(
        "getFundDisclosure",
        "Get the full holdings disclosure of a fund for a quarter.",
        "/funds/disclosure",
        (SYMBOL, YEAR.as_required(), QUARTER.as_required(), Param("cik", "Fund CIK")),
    ),
    Endpoint("searchFundDisclosures", "Search fund disclosures by fund name.", "/funds/disclosure-holders-search", (NAME,)),
    Endpoint("getFundDisclosureDates", "List the disclosure dates available for a fund.", "/funds/disclosure-dates", (SYMBOL,)),
)
