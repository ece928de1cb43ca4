"""Currency pair listings, quotes and price history."""

from fmp_mcp.fmp_tools import DATE_RANGE, SYMBOL, SYMBOLS, Endpoint

HISTORY = (SYMBOL, *DATE_RANGE)

ENDPOINTS = (
    Endpoint("getForexList", "List all supported currency pairs.", "/forex-list"),
    Endpoint("getForexQuote", "Get a real-time quote for a currency pair, e.g. EURUSD.", "/quote", (SYMBOL,)),
    Endpoint("getForexShortQuote", "Get a compact real-time quote for a currency pair.", "/quote-short", (SYMBOL,)),
    Endpoint("getForexBatchQuotes", "Get quotes for several currency pairs.", "/batch-quote", (SYMBOLS,)),
    Endpoint("getForexHistoricalLightChart", "Get end-of-day closing rates for a currency pair.", "/historical-price-eod/light", HISTORY),
    Endpoint("getForexHistoricalFullChart", "Get end-of-day OHLC for a currency pair.", "/historical-price-eod/full", HISTORY),
    Endpoint("getForex1MinuteData", "Get 1-minute intraday forex data.", "/historical-chart/1min", HISTORY),
    Endpoint("getForex5MinuteData", "Get 5-minute intraday forex data.", "/historical-chart/5min", HISTORY),
    Endpoint("getForex1HourData", "Get 1-hour intraday forex data.", "/historical-chart/1hour", HISTORY),
)
