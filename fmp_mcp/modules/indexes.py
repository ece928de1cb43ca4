"""Market index quotes, history and constituents."""

from fmp_mcp.fmp_tools import DATE_RANGE, SHORT, SYMBOL, Endpoint

HISTORY = (SYMBOL, *DATE_RANGE)

ENDPOINTS = (
    Endpoint("getIndexList", "List all supported market indexes.", "/index-list"),
    Endpoint("getIndexQuote", "Get a real-time quote for an index.", "/quote", (SYMBOL,)),
    Endpoint("getIndexShortQuote", "Get a compact real-time quote for an index.", "/quote-short", (SYMBOL,)),
    Endpoint("getAllIndexQuotes", "Get quotes for every index.", "/batch-index-quotes", (SHORT,)),
    Endpoint("getHistoricalIndexLightChart", "Get end-of-day index closing levels.", "/historical-price-eod/light", HISTORY),
    Endpoint("getHistoricalIndexFullChart", "Get end-of-day index OHLCV.", "/historical-price-eod/full", HISTORY),
    Endpoint("getIndex1MinuteData", "Get 1-minute intraday index data.", "/historical-chart/1min", HISTORY),
    Endpoint("getIndex5MinuteData", "Get 5-minute intraday index data.", "/historical-chart/5min", HISTORY),
    Endpoint("getIndex1HourData", "Get 1-hour intraday index data.", "/historical-chart/1hour", HISTORY),
    Endpoint("getSP500Constituents", "List the current S&P 500 constituents.", "/sp500-constituent"),
    Endpoint("getNasdaqConstituents", "List the current Nasdaq 100 constituents.", "/nasdaq-constituent"),
    Endpoint("getDowJonesConstituents", "List the current Dow Jones Industrial Average constituents.", "/dowjones-constituent"),
    Endpoint("getHistoricalSP500Changes", "List historical additions to and removals from the S&P 500.", "/historical-sp500-constituent"),
    Endpoint("getHistoricalNasdaqChanges", "List historical changes to the Nasdaq 100.", "/historical-nasdaq-constituent"),
    Endpoint("getHistoricalDowJonesChanges", "List historical changes to the Dow Jones.", "/historical-dowjones-constituent"),
)
