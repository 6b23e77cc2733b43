"""
repositories/ - Data Access Layer
==================================
Encapsulates all SQL for the orders table. Repositories receive a connection
pool, return domain model objects and raise the typed failures defined in
repositories.exceptions.
"""
