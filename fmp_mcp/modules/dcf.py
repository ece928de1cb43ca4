"""Discounted cash flow valuation."""

from fmp_mcp.fmp_tools import SYMBOL, Endpoint, Param

CUSTOM_INPUTS = (
    SYMBOL,
    Param("revenueGrowthPct", "Expected revenue growth rate", "number"),
    Param("ebitdaPct", "EBITDA margin", "number"),
    Param("capitalExpenditurePct", "Capital expenditure as a share of revenue", "number"),
    Param("taxRate", "Effective tax rate", "number"),
    Param("longTermGrowthRate", "Terminal growth rate", "number"),
    Param("costOfDebt", "Cost of debt", "number"),
    Param("costOfEquity", "Cost of equity", "number"),
    Param("marketRiskPremium", "Market risk premium", "number"),
    Param("beta", "Beta", "number"),
    Param("riskFreeRate", "Risk-free rate", "number"),
)

ENDPOINTS = (
    Endpoint("getDCFValuation", "Get the discounted cash flow valuation of a company.", "/discounted-cash-flow", (SYMBOL,)),
    Endpoint("getLeveredDCF", "Get the levered DCF valuation, accounting for debt.", "/levered-discounted-cash-flow", (SYMBOL,)),
    Endpoint("calculateCustomDCF", "Run a DCF valuation with custom assumptions.", "/custom-discounted-cash-flow", CUSTOM_INPUTS),
    Endpoint(
        "calculateCustomLeveredDCF",
        "Run a levered DCF valuation with custom assumptions.",
        "/custom-levered-discounted-cash-flow",
        CUSTOM_INPUTS,
    ),
)
