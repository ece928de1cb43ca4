"""Bulk downloads covering every symbol at once."""

from fmp_mcp.fmp_tools import DATE, PAGE, PERIOD, YEAR, Endpoint

STATEMENT_BULK = (YEAR.as_required(), PERIOD)

ENDPOINTS = (
    Endpoint("getCompanyProfilesBulk", "Download company profiles for all symbols, one page at a time.", "/profile-bulk", (PAGE,)),
    Endpoint("getStockRatingsBulk", "Download ratings for all symbols.", "/rating-bulk"),
    Endpoint("getDCFValuationsBulk", "Download DCF valuations for all symbols.", "/dcf-bulk"),
    Endpoint("getFinancialScoresBulk", "Download financial scores for all symbols.", "/scores-bulk"),
    Endpoint("getPriceTargetSummariesBulk", "Download price target summaries for all symbols.", "/price-target-summary-bulk"),
    Endpoint("getETFHoldersBulk", "Download ETF holdings, one page at a time.", "/etf-holder-bulk", (PAGE,)),
    Endpoint("getUpgradesDowngradesConsensusBulk", "Download analyst grade consensus for all symbols.", "/upgrades-downgrades-consensus-bulk"),
    Endpoint("getKeyMetricsTTMBulk", "Download trailing twelve month key metrics for all symbols.", "/key-metrics-ttm-bulk"),
    Endpoint("getRatiosTTMBulk", "Download trailing twelve month ratios for all symbols.", "/ratios-ttm-bulk"),
    Endpoint("getStockPeersBulk", "Download peer lists for all symbols.", "/peers-bulk"),
    Endpoint("getEarningsSurprisesBulk", "Download earnings surprises for a year.", "/earnings-surprises-bulk", (YEAR.as_required(),)),
    Endpoint("getIncomeStatementsBulk", "Download income statements for all symbols.", "/income-statement-bulk", STATEMENT_BULK),
    Endpoint("getIncomeStatementGrowthBulk", "Download income statement growth for all symbols.", "/income-statement-growth-bulk", STATEMENT_BULK),
    Endpoint("getBalanceSheetStatementsBulk", "Download balance sheets for all symbols.", "/balance-sheet-statement-bulk", STATEMENT_BULK),
    Endpoint(
        "getBalanceSheetGrowthBulk",
        "Download balance sheet growth for all symbols.",
        "/balance-sheet-statement-growth-bulk",
        STATEMENT_BULK,
    ),
    Endpoint("getCashFlowStatementsBulk", "Download cash flow statements for all symbols.", "/cash-flow-statement-bulk", STATEMENT_BULK),
    Endpoint("getCashFlowGrowthBulk", "Download cash flow growth for all symbols.", "/cash-flow-statement-growth-bulk", STATEMENT_BULK),
    Endpoint("getEODDataBulk", "Download end-of-day prices for all symbols on a date.", "/eod-bulk", (DATE.as_required(),)),
)
