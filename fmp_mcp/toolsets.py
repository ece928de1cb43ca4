"""
Toolset catalog: the static grouping of FMP tool modules into toolsets.

A toolset is what clients reason about ("quotes", "statements"); a module is
the unit the loader registry knows how to build. This module is the central
registry mapping one to the other:

    TOOL_SETS = {
        "toolset-key": ToolsetDefinition(..., modules=("module-id", ...)),
    }

Declaration order is significant: list_toolsets, describe_toolset and the
tool listings of every exposure mode enumerate in this order, so clients see
a stable ordering no matter in which order toolsets were activated.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolsetDefinition:
    """A named group of modules, plus guidance for picking it."""

    key: str
    name: str
    description: str
    decision_criteria: str
    modules: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "decisionCriteria": self.decision_criteria,
            "modules": list(self.modules),
        }


_DEFINITIONS = (
    ToolsetDefinition(
        key="search",
        name="Search & Directory",
        description="Symbol, company name, CIK, CUSIP and ISIN lookup, the stock screener and exchange/sector/industry directories.",
        decision_criteria="Use first when the user names a company but not a ticker, or needs lists of symbols, exchanges or sectors.",
        modules=("search", "directory"),
    ),
    ToolsetDefinition(
        key="company",
        name="Company Information",
        description="Company profiles, executives, peers, employee counts, market capitalization, share float and M&A activity.",
        decision_criteria="Use for questions about who a company is, who runs it, how big it is or who it is comparable to.",
        modules=("company",),
    ),
    ToolsetDefinition(
        key="quotes",
        name="Real-time Quotes",
        description="Real-time and batch quotes, aftermarket trades and quotes, and price change summaries.",
        decision_criteria="Use when the user needs a current price or today's move for one or many symbols.",
        modules=("quotes",),
    ),
    ToolsetDefinition(
        key="statements",
        name="Financial Statements",
        description="Income statements, balance sheets, cash flows, key metrics, ratios, growth, scores, revenue segmentation and as-reported filings.",
        decision_criteria="Use for fundamental analysis: revenue, earnings, margins, leverage, valuation ratios and their history.",
        modules=("statements",),
    ),
    ToolsetDefinition(
        key="calendar",
        name="Financial Calendar",
        description="Earnings, dividend, IPO and stock split calendars and per-symbol histories.",
        decision_criteria="Use for upcoming or past corporate events and their dates.",
        modules=("calendar",),
    ),
    ToolsetDefinition(
        key="charts",
        name="Price Charts",
        description="End-of-day (light, full, unadjusted, dividend-adjusted) and intraday price history for stocks.",
        decision_criteria="Use when the user asks for historical prices or OHLCV data over a date range.",
        modules=("chart",),
    ),
    ToolsetDefinition(
        key="news",
        name="News & Press Releases",
        description="Stock, crypto and forex news, FMP articles, general market news and company press releases.",
        decision_criteria="Use for recent headlines or narrative context around a symbol or market.",
        modules=("news",),
    ),
    ToolsetDefinition(
        key="analyst",
        name="Analyst Coverage",
        description="Analyst estimates, price targets, ratings and stock grades including their history and news.",
        decision_criteria="Use when the user asks what analysts expect or how they rate a stock.",
        modules=("analyst",),
    ),
    ToolsetDefinition(
        key="market-performance",
        name="Market Performance",
        description="Sector and industry performance and P/E snapshots, biggest gainers and losers, most active stocks and exchange market hours.",
        decision_criteria="Use for broad market questions: which sectors are moving, what is trending, whether a market is open.",
        modules=("market-performance", "market-hours"),
    ),
    ToolsetDefinition(
        key="insider-trades",
        name="Insider Trading",
        description="Insider transactions, statistics and beneficial ownership filings.",
        decision_criteria="Use when the user asks whether company insiders are buying or selling.",
        modules=("insider-trades",),
    ),
    ToolsetDefinition(
        key="institutional",
        name="Institutional Ownership",
        description="Form 13F filings, holder analytics, performance and industry breakdowns of institutional portfolios.",
        decision_criteria="Use for questions about funds and institutions holding a stock or a fund's portfolio.",
        modules=("form-13f",),
    ),
    ToolsetDefinition(
        key="indexes",
        name="Market Indexes",
        description="Index quotes and history plus S&P 500, Nasdaq and Dow Jones constituents and their changes.",
        decision_criteria="Use for index levels or membership questions.",
        modules=("indexes",),
    ),
    ToolsetDefinition(
        key="crypto",
        name="Cryptocurrency",
        description="Cryptocurrency listings, quotes and historical or intraday prices.",
        decision_criteria="Use for any cryptocurrency price question.",
        modules=("crypto",),
    ),
    ToolsetDefinition(
        key="forex",
        name="Forex",
        description="Currency pair listings, quotes and historical or intraday prices.",
        decision_criteria="Use for exchange rates and currency pair history.",
        modules=("forex",),
    ),
    ToolsetDefinition(
        key="commodities",
        name="Commodities",
        description="Commodity listings, quotes and historical or intraday prices.",
        decision_criteria="Use for gold, oil and other commodity prices.",
        modules=("commodity",),
    ),
    ToolsetDefinition(
        key="etf-funds",
        name="ETFs & Mutual Funds",
        description="Fund holdings, information, country, sector and asset allocation and fund disclosures.",
        decision_criteria="Use for questions about what an ETF or mutual fund holds and who holds a security through funds.",
        modules=("fund",),
    ),
    ToolsetDefinition(
        key="esg",
        name="ESG",
        description="Environmental, social and governance disclosures, ratings and industry benchmarks.",
        decision_criteria="Use for sustainability or governance scoring questions.",
        modules=("esg",),
    ),
    ToolsetDefinition(
        key="technical-indicators",
        name="Technical Indicators",
        description="Moving averages, RSI, standard deviation, Williams %R and ADX computed over price history.",
        decision_criteria="Use when the user asks for technical analysis indicators.",
        modules=("technical-indicators",),
    ),
    ToolsetDefinition(
        key="senate",
        name="Government Trading",
        description="Trading disclosures of US senators and representatives.",
        decision_criteria="Use for questions about trades made by members of Congress.",
        modules=("government-trading",),
    ),
    ToolsetDefinition(
        key="sec-filings",
        name="SEC Filings",
        description="SEC filings by form type, symbol or CIK, company SEC profiles and SIC industry classification.",
        decision_criteria="Use when the user needs regulatory filings or official company registration data.",
        modules=("sec-filings",),
    ),
    ToolsetDefinition(
        key="earnings",
        name="Earnings Transcripts",
        description="Earnings call transcripts, available transcript dates and covered symbols.",
        decision_criteria="Use when the user asks what management said on an earnings call.",
        modules=("earnings-transcript",),
    ),
    ToolsetDefinition(
        key="dcf",
        name="DCF Valuation",
        description="Discounted cash flow valuations, levered DCF and custom DCF calculations.",
        decision_criteria="Use for intrinsic value estimates.",
        modules=("dcf",),
    ),
    ToolsetDefinition(
        key="economics",
        name="Economics",
        description="Treasury rates, economic indicators, the economic calendar and market risk premium.",
        decision_criteria="Use for macroeconomic data and interest rates.",
        modules=("economics",),
    ),
    ToolsetDefinition(
        key="fundraisers",
        name="Fundraisers",
        description="Crowdfunding campaigns and equity offerings.",
        decision_criteria="Use for private fundraising and Reg CF / Reg D offering questions.",
        modules=("fundraisers",),
    ),
    ToolsetDefinition(
        key="cot",
        name="Commitment of Traders",
        description="CFTC Commitment of Traders reports and analysis.",
        decision_criteria="Use for futures positioning by trader category.",
        modules=("cot",),
    ),
    ToolsetDefinition(
        key="bulk",
        name="Bulk Data",
        description="Bulk downloads of profiles, ratings, statements, metrics and end-of-day prices across all symbols.",
        decision_criteria="Use only when data for the whole market is needed at once; responses are large.",
        modules=("bulk",),
    ),
)

TOOL_SETS: dict[str, ToolsetDefinition] = {definition.key: definition for definition in _DEFINITIONS}


def toolset_keys() -> list[str]:
    """All toolset keys in declaration order."""
    return list(TOOL_SETS)


def get_toolset(key: str) -> ToolsetDefinition | None:
    return TOOL_SETS.get(key)


def catalog_modules(keys=None) -> list[str]:
    """
    Module ids reachable from the given toolset keys (all toolsets if None).

    Modules are returned once each, in catalog order, so a module shared by
    two toolsets is only ever loaded a single time.
    """
    selected = set(TOOL_SETS) if keys is None else set(keys)
    modules: list[str] = []
    for definition in _DEFINITIONS:
        if definition.key not in selected:
            continue
        for module_id in definition.modules:
            if module_id not in modules:
                modules.append(module_id)
    return modules


def parse_toolset_list(value: str | None) -> list[str]:
    """Split a comma-separated toolset string, dropping blanks and duplicates."""
    if not value:
        return []
    keys: list[str] = []
    for part in value.split(","):
        key = part.strip()
        if key and key not in keys:
            keys.append(key)
    return keys


def split_known(keys) -> tuple[list[str], list[str]]:
    """Partition keys into (known, unknown), preserving their order."""
    known = [key for key in keys if key in TOOL_SETS]
    unknown = [key for key in keys if key not in TOOL_SETS]
    return known, unknown
