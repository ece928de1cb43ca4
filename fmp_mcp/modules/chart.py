"""End-of-day and intraday stock price history."""

from fmp_mcp.fmp_tools import DATE_RANGE, NON_ADJUSTED, SYMBOL, Endpoint

EOD = (SYMBOL, *DATE_RANGE)
INTRADAY = (SYMBOL, *DATE_RANGE, NON_ADJUSTED)

ENDPOINTS = (
    Endpoint("getLightChart", "Get end-of-day closing prices and volume.", "/historical-price-eod/light", EOD),
    Endpoint("getFullChart", "Get end-of-day OHLCV with change, VWAP and percentage change.", "/historical-price-eod/full", EOD),
    Endpoint("getUnadjustedChart", "Get end-of-day prices not adjusted for splits.", "/historical-price-eod/non-split-adjusted", EOD),
    Endpoint(
        "getDividendAdjustedChart",
        "Get end-of-day prices adjusted for dividends.",
        "/historical-price-eod/dividend-adjusted",
        EOD,
    ),
    Endpoint("get1MinChart", "Get 1-minute intraday OHLCV candles.", "/historical-chart/1min", INTRADAY),
    Endpoint("get5MinChart", "Get 5-minute intraday OHLCV candles.", "/historical-chart/5min", INTRADAY),
    Endpoint("get15MinChart", "Get 15-minute intraday OHLCV candles.", "/historical-chart/15min", INTRADAY),
    Endpoint("get30MinChart", "Get 30-minute intraday OHLCV candles.", "/historical-chart/30min", INTRADAY),
    Endpoint("get1HourChart", "Get 1-hour intraday OHLCV candles.", "/historical-chart/1hour", INTRADAY),
    Endpoint("get4HourChart", "Get 4-hour intraday OHLCV candles.", "/historical-chart/4hour", INTRADAY),
)
