"""Technical indicators computed over price history."""

from fmp_mcp.fmp_tools import DATE_RANGE, PERIOD_LENGTH, SYMBOL, TIMEFRAME, Endpoint

INDICATOR = (SYMBOL, PERIOD_LENGTH, TIMEFRAME, *DATE_RANGE)

ENDPOINTS = (
    Endpoint("getSimpleMovingAverage", "Compute the simple moving average (SMA).", "/technical-indicators/sma", INDICATOR),
    Endpoint("getExponentialMovingAverage", "Compute the exponential moving average (EMA).", "/technical-indicators/ema", INDICATOR),
    Endpoint("getWeightedMovingAverage", "Compute the weighted moving average (WMA).", "/technical-indicators/wma", INDICATOR),
    Endpoint(
        "getDoubleExponentialMovingAverage",
        "Compute the double exponential moving average (DEMA).",
        "/technical-indicators/dema",
        INDICATOR,
    ),
    Endpoint(
        "getTripleExponentialMovingAverage",
        "Compute the triple exponential moving average (TEMA).",
        "/technical-indicators/tema",
        INDICATOR,
    ),
    Endpoint("getRelativeStrengthIndex", "Compute the relative strength index (RSI).", "/technical-indicators/rsi", INDICATOR),
    Endpoint("getStandardDeviation", "Compute the rolling standard deviation of prices.", "/technical-indicators/standarddeviation", INDICATOR),
    Endpoint("getWilliams", "Compute the Williams %R oscillator.", "/technical-indicators/williams", INDICATOR),
    Endpoint("getAverageDirectionalIndex", "Compute the average directional index (ADX).", "/technical-indicators/adx", INDICATOR),
)
