"""
Core modules for Usage Report.

This package contains the parsing, pricing and aggregation stages
of the report pipeline.
"""
