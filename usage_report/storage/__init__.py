"""
Storage layer for Usage Report.

Holds the report data model and the in-memory report store.
"""
