"""Ingestion of external movie lists into the catalog.

- Parses and validates the delimited nominee file
- Forbidden: interval computation, HTTP concerns
"""
