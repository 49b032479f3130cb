"""
db/ - Database Layer
====================
The PostgreSQL connection pool and the idempotent schema for users,
inspirations and ideas. Imports nothing above it.
"""
