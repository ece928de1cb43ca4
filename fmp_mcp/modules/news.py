"""Market news, FMP articles and press releases."""

from fmp_mcp.fmp_tools import DATE_RANGE, PAGING, SYMBOLS, Endpoint

LATEST = (*DATE_RANGE, *PAGING)
BY_SYMBOL = (SYMBOLS, *DATE_RANGE, *PAGING)

ENDPOINTS = (
    Endpoint("getFMPArticles", "Get the latest articles written by FMP analysts.", "/fmp-articles", PAGING),
    Endpoint("getGeneralNews", "Get the latest general market news.", "/news/general-latest", LATEST),
    Endpoint("getPressReleases", "Get the latest company press releases.", "/news/press-releases-latest", LATEST),
    Endpoint("getStockNews", "Get the latest stock market news.", "/news/stock-latest", LATEST),
    Endpoint("getCryptoNews", "Get the latest cryptocurrency news.", "/news/crypto-latest", LATEST),
    Endpoint("getForexNews", "Get the latest forex news.", "/news/forex-latest", LATEST),
    Endpoint("searchPressReleases", "Get press releases for specific companies.", "/news/press-releases", BY_SYMBOL),
    Endpoint("searchStockNews", "Get news for specific stocks.", "/news/stock", BY_SYMBOL),
    Endpoint("searchCryptoNews", "Get news for specific cryptocurrencies.", "/news/crypto", BY_SYMBOL),
    Endpoint("searchForexNews", "Get news for specific currency pairs.", "/news/forex", BY_SYMBOL),
)
