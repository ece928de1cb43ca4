"""Symbol and company lookup tools, plus the stock screener."""

from fmp_mcp.fmp_tools import EXCHANGE, LIMIT, QUERY, SYMBOL, Endpoint, Param

ENDPOINTS = (
    Endpoint(
        "searchSymbol",
        "Search over 70,000 symbols by ticker or company name, covering stocks, ETFs, crypto, forex and other instruments.",
        "/search-symbol",
        (QUERY, LIMIT, EXCHANGE),
    ),
    Endpoint(
        "searchName",
        "Search for ticker symbols by company name or partial name.",
        "/search-name",
        (QUERY, LIMIT, EXCHANGE),
    ),
    Endpoint(
        "searchCIK",
        "Look up a company by its SEC Central Index Key.",
        "/search-cik",
        (Param("cik", "Central Index Key to search for", required=True), LIMIT),
    ),
    Endpoint(
        "searchCUSIP",
        "Look up a security by its CUSIP number.",
        "/search-cusip",
        (Param("cusip", "CUSIP number", required=True),),
    ),
    Endpoint(
        "searchISIN",
        "Look up a security by its International Securities Identification Number.",
        "/search-isin",
        (Param("isin", "ISIN code", required=True),),
    ),
    Endpoint(
        "stockScreener",
        "Screen stocks by market cap, price, volume, beta, sector, industry, dividend, country and exchange.",
        "/company-screener",
        (
            Param("marketCapMoreThan", "Minimum market capitalization", "number"),
            Param("marketCapLowerThan", "Maximum market capitalization", "number"),
            Param("priceMoreThan", "Minimum share price", "number"),
            Param("priceLowerThan", "Maximum share price", "number"),
            Param("betaMoreThan", "Minimum beta", "number"),
            Param("betaLowerThan", "Maximum beta", "number"),
            Param("volumeMoreThan", "Minimum average volume", "number"),
            Param("volumeLowerThan", "Maximum average volume", "number"),
            Param("dividendMoreThan", "Minimum annual dividend", "number"),
            Param("dividendLowerThan", "Maximum annual dividend", "number"),
            Param("sector", "Sector, e.g. Technology"),
            Param("industry", "Industry, e.g. Consumer Electronics"),
            Param("country", "Two-letter country code, e.g. US"),
            EXCHANGE,
            Param("isEtf", "Only ETFs", "boolean"),
            Param("isFund", "Only funds", "boolean"),
            Param("isActivelyTrading", "Only actively trading securities", "boolean"),
            LIMIT,
        ),
    ),
    Endpoint(
        "searchExchangeVariants",
        "List every exchange on which a symbol is traded.",
        "/search-exchange-variants",
        (SYMBOL,),
    ),
)
