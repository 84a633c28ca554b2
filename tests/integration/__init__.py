# Integration Tests
"""
Integration tests verify complete workflows through the HTTP pages,
cross-checking results against the database.

Principle: Test behavior, not implementation.
"""
