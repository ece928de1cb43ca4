"""Real-time quote tools for single symbols, batches and whole asset classes."""

from fmp_mcp.fmp_tools import EXCHANGE, SHORT, SYMBOL, SYMBOLS, Endpoint

ENDPOINTS = (
    Endpoint(
        "getQuote",
        "Get a real-time quote: price, change, volume, day range, 52-week range and market cap.",
        "/quote",
        (SYMBOL,),
    ),
    Endpoint("getQuoteShort", "Get a compact real-time quote: price, change and volume.", "/quote-short", (SYMBOL,)),
    Endpoint("getAftermarketTrade", "Get the latest aftermarket (pre/post market) trade.", "/aftermarket-trade", (SYMBOL,)),
    Endpoint("getAftermarketQuote", "Get the latest aftermarket bid and ask.", "/aftermarket-quote", (SYMBOL,)),
    Endpoint(
        "getStockPriceChange",
        "Get price change over 1D, 5D, 1M, 3M, 6M, YTD, 1Y, 3Y, 5Y, 10Y and max.",
        "/stock-price-change",
        (SYMBOL,),
    ),
    Endpoint("getBatchQuotes", "Get real-time quotes for several symbols.", "/batch-quote", (SYMBOLS,)),
    Endpoint("getBatchQuotesShort", "Get compact real-time quotes for several symbols.", "/batch-quote-short", (SYMBOLS,)),
    Endpoint(
        "getBatchAftermarketTrade",
        "Get the latest aftermarket trades for several symbols.",
        "/batch-aftermarket-trade",
        (SYMBOLS,),
    ),
    Endpoint(
        "getBatchAftermarketQuote",
        "Get the latest aftermarket quotes for several symbols.",
        "/batch-aftermarket-quote",
        (SYMBOLS,),
    ),
    Endpoint(
        "getExchangeQuotes",
        "Get quotes for every security listed on an exchange.",
        "/batch-exchange-quote",
        (EXCHANGE.as_required(), SHORT),
    ),
    Endpoint("getMutualFundQuotes", "Get quotes for all mutual funds.", "/batch-mutualfund-quotes", (SHORT,)),
    Endpoint("getETFQuotes", "Get quotes for all ETFs.", "/batch-etf-quotes", (SHORT,)),
    Endpoint("getFullCommodityQuotes", "Get quotes for all commodities.", "/batch-commodity-quotes", (SHORT,)),
    Endpoint("getFullCryptoQuotes", "Get quotes for all cryptocurrencies.", "/batch-crypto-quotes", (SHORT,)),
    Endpoint("getFullForexQuotes", "Get quotes for all forex pairs.", "/batch-forex-quotes", (SHORT,)),
    Endpoint("getFullIndexQuotes", "Get quotes for all market indexes.", "/batch-index-quotes", (SHORT,)),
)
