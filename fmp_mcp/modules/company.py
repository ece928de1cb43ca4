"""Company profile, people, size and corporate activity tools."""

from fmp_mcp.fmp_tools import (
    CIK,
    DATE_RANGE,
    LIMIT,
    NAME,
    PAGE,
    PAGING,
    SYMBOL,
    SYMBOLS,
    YEAR,
    Endpoint,
    Param,
)

ENDPOINTS = (
    Endpoint(
        "getCompanyProfile",
        "Get a company profile: price, market cap, beta, sector, industry, description, CEO and website.",
        "/profile",
        (SYMBOL,),
    ),
    Endpoint("getCompanyProfileByCIK", "Get a company profile by its Central Index Key.", "/profile-cik", (CIK,)),
    Endpoint("getCompanyNotes", "Get notes (debt securities) issued by a company.", "/company-notes", (SYMBOL,)),
    Endpoint("getStockPeers", "List companies that trade on the same exchange, sector and market cap range.", "/stock-peers", (SYMBOL,)),
    Endpoint("getDelistedCompanies", "List companies that have been delisted.", "/delisted-companies", PAGING),
    Endpoint("getEmployeeCount", "Get the latest reported employee count of a company.", "/employee-count", (SYMBOL, LIMIT)),
    Endpoint(
        "getHistoricalEmployeeCount",
        "Get the history of reported employee counts of a company.",
        "/historical-employee-count",
        (SYMBOL, LIMIT),
    ),
    Endpoint("getMarketCap", "Get the current market capitalization of a company.", "/market-capitalization", (SYMBOL,)),
    Endpoint(
        "getBatchMarketCap",
        "Get the market capitalization of several companies at once.",
        "/market-capitalization-batch",
        (SYMBOLS,),
    ),
    Endpoint(
        "getHistoricalMarketCap",
        "Get the daily market capitalization history of a company.",
        "/historical-market-capitalization",
        (SYMBOL, LIMIT, *DATE_RANGE),
    ),
    Endpoint("getShareFloat", "Get the share float and liquidity of a company.", "/shares-float", (SYMBOL,)),
    Endpoint("getAllShareFloat", "Get share float data for all companies.", "/shares-float-all", PAGING),
    Endpoint(
        "getLatestMergersAcquisitions",
        "List the latest merger and acquisition filings.",
        "/mergers-acquisitions-latest",
        PAGING,
    ),
    Endpoint(
        "searchMergersAcquisitions",
        "Search merger and acquisition filings by company name.",
        "/mergers-acquisitions-search",
        (NAME,),
    ),
    Endpoint(
        "getCompanyExecutives",
        "List the key executives of a company with titles and pay.",
        "/key-executives",
        (SYMBOL, Param("active", "Only currently active executives", "boolean")),
    ),
    Endpoint(
        "getExecutiveCompensation",
        "Get executive compensation data from proxy filings.",
        "/governance-executive-compensation",
        (SYMBOL,),
    ),
    Endpoint(
        "getExecutiveCompensationBenchmark",
        "Get average executive compensation by industry for a year.",
        "/executive-compensation-benchmark",
        (YEAR, PAGE),
    ),
)
