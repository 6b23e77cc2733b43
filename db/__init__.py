"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool shared by all request threads.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
