"""Macroeconomic data."""

from fmp_mcp.fmp_tools import DATE_RANGE, Endpoint, Param

ENDPOINTS = (
    Endpoint("getTreasuryRates", "Get US Treasury rates for all maturities.", "/treasury-rates", DATE_RANGE),
    Endpoint(
        "getEconomicIndicators",
        "Get the history of an economic indicator such as GDP, CPI or unemploymentRate.",
        "/economic-indicators",
        (Param("name", "Indicator name, e.g. GDP", required=True), *DATE_RANGE),
    ),
    Endpoint("getEconomicCalendar", "Get upcoming economic data releases.", "/economic-calendar", DATE_RANGE),
    Endpoint("getMarketRiskPremium", "Get the market risk premium by country.", "/market-risk-premium"),
)
