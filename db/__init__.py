"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization, and store errors.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
