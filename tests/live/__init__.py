# Live Tests
"""
Controller checks against a running deployment; see conftest.py for the
environment variables that enable them.
"""
