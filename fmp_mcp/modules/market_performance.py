"""Sector and industry performance, valuation snapshots and market movers."""

from fmp_mcp.fmp_tools import DATE, DATE_RANGE, EXCHANGE, Endpoint, Param

SECTOR = Param("sector", "Sector, e.g. Energy", required=True)
INDUSTRY = Param("industry", "Industry, e.g. Biotechnology", required=True)
SNAPSHOT = (DATE.as_required(), EXCHANGE, Param("sector", "Filter by sector"))
INDUSTRY_SNAPSHOT = (DATE.as_required(), EXCHANGE, Param("industry", "Filter by industry"))

ENDPOINTS = (
    Endpoint("getSectorPerformanceSnapshot", "Get the average change of every sector on a date.", "/sector-performance-snapshot", SNAPSHOT),
    Endpoint(
        "getIndustryPerformanceSnapshot",
        "Get the average change of every industry on a date.",
        "/industry-performance-snapshot",
        INDUSTRY_SNAPSHOT,
    ),
    Endpoint(
        "getHistoricalSectorPerformance",
        "Get the daily performance history of one sector.",
        "/historical-sector-performance",
        (SECTOR, *DATE_RANGE, EXCHANGE),
    ),
    Endpoint(
        "getHistoricalIndustryPerformance",
        "Get the daily performance history of one industry.",
        "/historical-industry-performance",
        (INDUSTRY, *DATE_RANGE, EXCHANGE),
    ),
    Endpoint("getSectorPESnapshot", "Get the price-to-earnings ratio of every sector on a date.", "/sector-pe-snapshot", SNAPSHOT),
    Endpoint("getIndustryPESnapshot", "Get the price-to-earnings ratio of every industry on a date.", "/industry-pe-snapshot", INDUSTRY_SNAPSHOT),
    Endpoint("getHistoricalSectorPE", "Get the P/E ratio history of one sector.", "/historical-sector-pe", (SECTOR, *DATE_RANGE, EXCHANGE)),
    Endpoint(
        "getHistoricalIndustryPE",
        "Get the P/E ratio history of one industry.",
        "/historical-industry-pe",
        (INDUSTRY, *DATE_RANGE, EXCHANGE),
    ),
    Endpoint("getBiggestGainers", "List the stocks with the largest price increase today.", "/biggest-gainers"),
    Endpoint("getBiggestLosers", "List the stocks with the largest price drop today.", "/biggest-losers"),
    Endpoint("getMostActiveStocks", "List the most actively traded stocks today.", "/most-actives"),
)
