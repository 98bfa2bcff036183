"""Aggregation module for producer award statistics.

- Reads winning records through a RecordStore and produces interval summaries
- Forbidden: DB writes, HTTP concerns
"""
