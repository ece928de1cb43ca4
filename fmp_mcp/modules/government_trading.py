"""Trading disclosures of US senators and representatives."""

from fmp_mcp.fmp_tools import NAME, PAGING, SYMBOL, Endpoint

ENDPOINTS = (
    Endpoint("getLatestSenateDisclosures", "List the latest Senate trading disclosures.", "/senate-latest", PAGING),
    Endpoint("getLatestHouseDisclosures", "List the latest House trading disclosures.", "/house-latest", PAGING),
    Endpoint("getSenateTrades", "List Senate trades in a symbol.", "/senate-trades", (SYMBOL,)),
    Endpoint("getSenateTradesByName", "List trades made by a senator.", "/senate-trades-by-name", (NAME,)),
    Endpoint("getHouseTrades", "List House trades in a symbol.", "/house-trades", (SYMBOL,)),
    Endpoint("getHouseTradesByName", "List trades made by a representative.", "/house-trades-by-name", (NAME,)),
)
