"""
Portfolio Dashboard shared core.

Sheet-derived financial model: table normalization, column resolution,
portfolio metrics, renewal alerts and detail-sheet extraction.
"""

__version__ = "0.1.0"
