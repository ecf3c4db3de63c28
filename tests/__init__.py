"""Test suite for blindgate.

- unit/: handlers and services with mocked ports
- integration/: real repositories on in-memory SQLite
- api/: HTTP endpoints end-to-end through httpx
"""
