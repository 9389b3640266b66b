"""
Domain Module
Typed records and error hierarchy shared by extractors and use cases.
"""

__all__: list[str] = []
