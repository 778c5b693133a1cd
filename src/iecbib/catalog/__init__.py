"""IEC webstore access: HTTP client and page scraping."""

from iecbib.catalog.client import CatalogClient
from iecbib.catalog.scraper import parse_detail_page, parse_results_page, split_title

__all__ = [
    "CatalogClient",
    "parse_detail_page",
    "parse_results_page",
    "split_title",
]
