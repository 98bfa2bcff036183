"""API module for Raspberry.

API layer:
- Validates inputs, reads/writes DB
- Returns payloads for clients
- Forbidden: CSV parsing, interval computation
"""
