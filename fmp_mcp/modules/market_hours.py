"""Exchange trading hours and holidays."""

from fmp_mcp.fmp_tools import DATE_RANGE, EXCHANGE, Endpoint

ENDPOINTS = (
    Endpoint(
        "getExchangeMarketHours",
        "Get the trading hours and current open/closed status of an exchange.",
        "/exchange-market-hours",
        (EXCHANGE.as_required(),),
    ),
    Endpoint(
        "getHolidaysByExchange",
        "List market holidays of an exchange.",
        "/holidays-by-exchange",
        (EXCHANGE.as_required(), *DATE_RANGE),
    ),
    Endpoint("getAllExchangeMarketHours", "Get trading hours for all exchanges.", "/all-exchange-market-hours"),
)
