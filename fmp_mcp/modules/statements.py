"""Financial statements, derived metrics, growth, scores and segmentation."""

from fmp_mcp.fmp_tools import LIMIT, PAGING, PERIOD, STRUCTURE, SYMBOL, YEAR, Endpoint, Param

STATEMENT = (SYMBOL, LIMIT, PERIOD)
REPORT = (SYMBOL, YEAR.as_required(), Param("period", "Reporting period", required=True, enum=("FY", "Q1", "Q2", "Q3", "Q4")))

ENDPOINTS = (
    Endpoint("getIncomeStatement", "Get income statements: revenue, expenses, margins and earnings.", "/income-statement", STATEMENT),
    Endpoint("getBalanceSheetStatement", "Get balance sheet statements: assets, liabilities and equity.", "/balance-sheet-statement", STATEMENT),
    Endpoint("getCashFlowStatement", "Get cash flow statements: operating, investing and financing cash flows.", "/cash-flow-statement", STATEMENT),
    Endpoint(
        "getLatestFinancialStatements",
        "List the most recently published financial statements across all companies.",
        "/latest-financial-statements",
        PAGING,
    ),
    Endpoint("getIncomeStatementTTM", "Get trailing twelve month income statements.", "/income-statement-ttm", (SYMBOL, LIMIT)),
    Endpoint("getBalanceSheetStatementTTM", "Get trailing twelve month balance sheets.", "/balance-sheet-statement-ttm", (SYMBOL, LIMIT)),
    Endpoint("getCashFlowStatementTTM", "Get trailing twelve month cash flow statements.", "/cash-flow-statement-ttm", (SYMBOL, LIMIT)),
    Endpoint("getKeyMetrics", "Get key financial metrics such as EV, ROIC and working capital.", "/key-metrics", STATEMENT),
    Endpoint("getKeyMetricsTTM", "Get trailing twelve month key metrics.", "/key-metrics-ttm", (SYMBOL,)),
    Endpoint("getFinancialRatios", "Get profitability, liquidity, leverage and valuation ratios.", "/ratios", STATEMENT),
    Endpoint("getFinancialRatiosTTM", "Get trailing twelve month financial ratios.", "/ratios-ttm", (SYMBOL,)),
    Endpoint("getFinancialScores", "Get the Altman Z-score and Piotroski score.", "/financial-scores", (SYMBOL,)),
    Endpoint("getOwnerEarnings", "Get owner earnings, Buffett's measure of true cash generation.", "/owner-earnings", (SYMBOL, LIMIT)),
    Endpoint("getEnterpriseValues", "Get enterprise value history.", "/enterprise-values", STATEMENT),
    Endpoint("getIncomeStatementGrowth", "Get period-over-period growth of income statement items.", "/income-statement-growth", STATEMENT),
    Endpoint(
        "getBalanceSheetStatementGrowth",
        "Get period-over-period growth of balance sheet items.",
        "/balance-sheet-statement-growth",
        STATEMENT,
    ),
    Endpoint("getCashFlowStatementGrowth", "Get period-over-period growth of cash flow items.", "/cash-flow-statement-growth", STATEMENT),
    Endpoint("getFinancialStatementGrowth", "Get growth of key items across all statements.", "/financial-growth", STATEMENT),
    Endpoint("getFinancialReportsDates", "List available financial report periods for a company.", "/financial-reports-dates", (SYMBOL,)),
    Endpoint("getFinancialReportJSON", "Get a full 10-K or 10-Q report as JSON.", "/financial-reports-json", REPORT),
    Endpoint("getFinancialReportXLSX", "Get a full 10-K or 10-Q report as an XLSX download.", "/financial-reports-xlsx", REPORT),
    Endpoint(
        "getRevenueProductSegmentation",
        "Get revenue broken down by product line.",
        "/revenue-product-segmentation",
        (SYMBOL, PERIOD, STRUCTURE),
    ),
    Endpoint(
        "getRevenueGeographicSegmentation",
        "Get revenue broken down by geographic region.",
        "/revenue-geographic-segmentation",
        (SYMBOL, PERIOD, STRUCTURE),
    ),
    Endpoint(
        "getIncomeStatementAsReported",
        "Get income statements exactly as reported to the SEC.",
        "/income-statement-as-reported",
        STATEMENT,
    ),
    Endpoint(
        "getBalanceSheetStatementAsReported",
        "Get balance sheets exactly as reported to the SEC.",
        "/balance-sheet-statement-as-reported",
        STATEMENT,
    ),
    Endpoint(
        "getCashFlowStatementAsReported",
        "Get cash flow statements exactly as reported to the SEC.",
        "/cash-flow-statement-as-reported",
        STATEMENT,
    ),
    Endpoint(
        "getFullFinancialStatementAsReported",
        "Get all financial statement line items exactly as reported to the SEC.",
        "/financial-statement-full-as-reported",
        STATEMENT,
    ),
)
