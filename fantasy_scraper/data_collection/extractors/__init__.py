"""
Data Collection Extractors Package

Pure HTML -> record extractors for the Analítica Fantasy player pages.

Note: avoid importing extractor modules at package import time. Import the
parse functions from their modules directly, e.g.:

    from fantasy_scraper.data_collection.extractors.market_details import parse_market_details_from_html
"""

__all__ = []
