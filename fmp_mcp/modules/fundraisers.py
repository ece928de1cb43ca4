"""Crowdfunding campaigns and equity offerings."""

from fmp_mcp.fmp_tools import CIK, NAME, PAGING, Endpoint

ENDPOINTS = (
    Endpoint("getLatestCrowdfundingCampaigns", "List the latest crowdfunding campaigns.", "/crowdfunding-offerings-latest", PAGING),
    Endpoint("searchCrowdfundingCampaigns", "Search crowdfunding campaigns by company name.", "/crowdfunding-offerings-search", (NAME,)),
    Endpoint("getCrowdfundingCampaignsByCIK", "List crowdfunding campaigns of a company by CIK.", "/crowdfunding-offerings", (CIK,)),
    Endpoint("getLatestEquityOfferings", "List the latest equity offerings.", "/fundraising-latest", PAGING),
    Endpoint("searchEquityOfferings", "Search equity offerings by company name.", "/fundraising-search", (NAME,)),
    Endpoint("getEquityOfferingsByCIK", "List equity offerings of a company by CIK.", "/fundraising", (CIK,)),
)
