"""Cryptocurrency listings, quotes and price history."""

from fmp_mcp.fmp_tools import DATE_RANGE, SYMBOL, SYMBOLS, Endpoint

HISTORY = (SYMBOL, *DATE_RANGE)

ENDPOINTS = (
    Endpoint("getCryptocurrencyList", "List all supported cryptocurrencies.", "/cryptocurrency-list"),
    Endpoint("getCryptocurrencyQuote", "Get a real-time quote for a cryptocurrency, e.g. BTCUSD.", "/quote", (SYMBOL,)),
    Endpoint("getCryptocurrencyShortQuote", "Get a compact real-time quote for a cryptocurrency.", "/quote-short", (SYMBOL,)),
    Endpoint("getCryptocurrencyBatchQuotes", "Get quotes for several cryptocurrencies.", "/batch-quote", (SYMBOLS,)),
    Endpoint("getCryptocurrencyHistoricalLightChart", "Get end-of-day cryptocurrency closing prices.", "/historical-price-eod/light", HISTORY),
    Endpoint("getCryptocurrencyHistoricalFullChart", "Get end-of-day cryptocurrency OHLCV.", "/historical-price-eod/full", HISTORY),
    Endpoint("getCryptocurrency1MinuteData", "Get 1-minute intraday cryptocurrency data.", "/historical-chart/1min", HISTORY),
    Endpoint("getCryptocurrency5MinuteData", "Get 5-minute intraday cryptocurrency data.", "/historical-chart/5min", HISTORY),
    Endpoint("getCryptocurrency1HourData", "Get 1-hour intraday cryptocurrency data.", "/historical-chart/1hour", HISTORY),
)
