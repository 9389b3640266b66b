"""
Applications Package

Command-line entry points for the fantasy scraper.
"""

__all__: list[str] = []
