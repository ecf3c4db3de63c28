"""API tests package.

End-to-end tests for REST endpoints against the real app, with the
database session dependency pointed at in-memory SQLite.
"""
