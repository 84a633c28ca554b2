# Infrastructure layer - database connections and repositories
"""
Infrastructure layer contains:
- Sync and async database repositories
- The aiosqlite connection pool used for async read-back
"""
