"""Commodity listings, quotes and price history."""

from fmp_mcp.fmp_tools import DATE_RANGE, SYMBOL, SYMBOLS, Endpoint

HISTORY = (SYMBOL, *DATE_RANGE)

ENDPOINTS = (
    Endpoint("listCommodities", "List all supported commodities.", "/commodities-list"),
    Endpoint("getCommodityQuote", "Get a real-time quote for a commodity, e.g. GCUSD.", "/quote", (SYMBOL,)),
    Endpoint("getCommodityQuoteShort", "Get a compact real-time quote for a commodity.", "/quote-short", (SYMBOL,)),
    Endpoint("getBatchCommodityQuotes", "Get quotes for several commodities.", "/batch-quote", (SYMBOLS,)),
    Endpoint("getCommodityLightChart", "Get end-of-day commodity closing prices.", "/historical-price-eod/light", HISTORY),
    Endpoint("getCommodityFullChart", "Get end-of-day commodity OHLCV.", "/historical-price-eod/full", HISTORY),
    Endpoint("getCommodity1MinChart", "Get 1-minute intraday commodity data.", "/historical-chart/1min", HISTORY),
    Endpoint("getCommodity5MinChart", "Get 5-minute intraday commodity data.", "/historical-chart/5min", HISTORY),
    Endpoint("getCommodity1HourChart", "Get 1-hour intraday commodity data.", "/historical-chart/1hour", HISTORY),
)
