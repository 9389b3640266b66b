"""
Common Module
Shared parsing helpers, DOM access, lookup tables and logging utilities.
"""

__all__: list[str] = []
