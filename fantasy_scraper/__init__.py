"""
Fantasy Stats Scraper
Extraction of typed fantasy-football records from Analítica Fantasy player pages
"""

__version__ = "1.0.0"
__author__ = "Fantasy Stats Team"

# NOTE:
# Avoid importing heavy modules (like configuration) at package import time to
# keep "import fantasy_scraper" lightweight and side-effect free, particularly
# for unit tests that only need the parsing helpers.

__all__ = []
