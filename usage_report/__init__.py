"""
Usage Report - cost breakdown for GitHub usage report exports.

Parses a usage report CSV, prices every line item and sums the
cost per day.
"""

__version__ = "0.1.0"
