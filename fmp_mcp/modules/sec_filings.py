"""SEC filings, company registration profiles and SIC classification."""

from fmp_mcp.fmp_tools import CIK, DATE_RANGE, PAGING, SYMBOL, Endpoint, Param

FILING_WINDOW = (*DATE_RANGE, *PAGING)

ENDPOINTS = (
    Endpoint("getLatest8KFilings", "List the latest 8-K filings.", "/sec-filings-8k", FILING_WINDOW),
    Endpoint("getLatestSecFilings", "List the latest filings with financial statements.", "/sec-filings-financials", FILING_WINDOW),
    Endpoint(
        "getFilingsByFormType",
        "List filings of a specific form type, e.g. 10-K.",
        "/sec-filings-search/form-type",
        (Param("formType", "SEC form type, e.g. 10-K", required=True), *FILING_WINDOW),
    ),
    Endpoint("getFilingsBySymbol", "List the SEC filings of a company by symbol.", "/sec-filings-search/symbol", (SYMBOL, *FILING_WINDOW)),
    Endpoint("getFilingsByCIK", "List the SEC filings of a company by CIK.", "/sec-filings-search/cik", (CIK, *FILING_WINDOW)),
    Endpoint(
        "searchCompaniesByName",
        "Search SEC-registered companies by name.",
        "/sec-filings-company-search/name",
        (Param("company", "Company name", required=True),),
    ),
    Endpoint("searchCompaniesBySymbol", "Search SEC-registered companies by symbol.", "/sec-filings-company-search/symbol", (SYMBOL,)),
    Endpoint("searchCompaniesByCIK", "Search SEC-registered companies by CIK.", "/sec-filings-company-search/cik", (CIK,)),
    Endpoint(
        "getSecCompanyFullProfile",
        "Get the full SEC registration profile of a company.",
        "/sec-profile",
        (SYMBOL, Param("cik", "Central Index Key of the company")),
    ),
    Endpoint("getIndustryClassificationList", "List Standard Industrial Classification (SIC) codes.", "/standard-industrial-classification-list"),
    Endpoint(
        "searchIndustryClassification",
        "Search SIC classification by symbol, CIK or SIC code.",
        "/industry-classification-search",
        (Param("symbol", "Ticker symbol"), Param("cik", "Central Index Key"), Param("sicCode", "SIC code")),
    ),
    Endpoint(
        "getAllIndustryClassification",
        "Get the SIC classification of every company.",
        "/all-industry-classification",
        PAGING,
    ),
)
