"""
db/ - Database Layer
====================
Opens SQLite/PostgreSQL connections, runs scoped transactions and creates
the schema. This layer has no dependencies on the other layers.
"""
