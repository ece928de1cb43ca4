"""Corporate event calendars: dividends, earnings, IPOs and splits."""

from fmp_mcp.fmp_tools import DATE_RANGE, LIMIT, SYMBOL, Endpoint

ENDPOINTS = (
    Endpoint("getDividends", "Get the dividend history of a company.", "/dividends", (SYMBOL, LIMIT)),
    Endpoint("getDividendsCalendar", "Get upcoming and recent dividends across all companies.", "/dividends-calendar", DATE_RANGE),
    Endpoint("getEarningsReports", "Get past and upcoming earnings reports of a company.", "/earnings", (SYMBOL, LIMIT)),
    Endpoint(
        "getEarningsCalendar",
        "Get the earnings calendar with estimated and actual EPS and revenue.",
        "/earnings-calendar",
        DATE_RANGE,
    ),
    Endpoint("getIPOCalendar", "Get upcoming initial public offerings.", "/ipos-calendar", DATE_RANGE),
    Endpoint("getIPODisclosures", "Get disclosure filings for upcoming IPOs.", "/ipos-disclosure", DATE_RANGE),
    Endpoint("getIPOProspectuses", "Get prospectus details for upcoming IPOs.", "/ipos-prospectus", DATE_RANGE),
    Endpoint("getStockSplits", "Get the stock split history of a company.", "/splits", (SYMBOL, LIMIT)),
    Endpoint("getStockSplitCalendar", "Get upcoming stock splits across all companies.", "/splits-calendar", DATE_RANGE),
)
