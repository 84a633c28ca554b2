# Eventmi Test Suite
"""
Test suite for Eventmi.

Integration tests drive the /Event pages over HTTP and verify persisted
state directly in the database. Unit tests cover forms, repositories,
services and the HTTP client in isolation.
"""
